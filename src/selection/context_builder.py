"""Industry context classification for the downstream deck builder."""

from collections.abc import Mapping

from src.schemas.campaign_schema import IndustryContext
from src.selection.budget import determine_client_tier


def _classify_industry(brand: str, notes: str, tactics: Mapping[str, bool]) -> tuple[str, str]:
    """First matching rule wins; the order is the tie-break."""
    if tactics.get("healthcare"):
        return "Healthcare", "Pharmaceutical"
    elif tactics.get("gaming"):
        return "Gaming", "Digital Entertainment"
    elif tactics.get("entertainment"):
        return "Entertainment", "Media & Entertainment"
    elif "bank" in brand or "finance" in brand or "financial" in notes:
        return "Financial Services", "Banking"
    elif "auto" in brand or "car" in brand or "automotive" in notes:
        return "Automotive", "Vehicle Manufacturers"
    elif tactics.get("retail_media") or tactics.get("commerce"):
        return "Retail", "E-commerce"
    elif "spirits" in notes or "alcohol" in notes or "beverage" in notes:
        return "Consumer Goods", "Spirits & Beverages"
    return "Consumer Goods", "General"


def build_industry_context(
    brand: str,
    notes: str,
    tactics: Mapping[str, bool],
    budget: str,
) -> IndustryContext:
    brand = (brand or "").lower()
    notes = (notes or "").lower()
    industry, sub_industry = _classify_industry(brand, notes, tactics)
    b2b = bool(tactics.get("b2b"))
    tactic_count = sum(1 for on in tactics.values() if on)

    return IndustryContext(
        industry=industry,
        sub_industry=sub_industry,
        brand_type="Enterprise" if "enterprise" in brand or b2b else "Consumer",
        campaign_type="B2B" if b2b else "B2C",
        complexity_tier="Complex" if tactic_count > 6 else "Standard",
        client_tier=determine_client_tier(budget),
    )
