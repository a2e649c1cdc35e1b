"""Tactic detection from campaign notes and AI flags, and the merge of both.

Notes detection is plain substring containment on lower-cased text, so a
keyword inside an unrelated word still matches ("geo" in "geology", "ott" in
"bottle"). That looseness is accepted behavior.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from src.schemas.campaign_schema import NOTES_TACTICS, AIAnalysis

logger = logging.getLogger(__name__)


def detect_notes_tactics(
    notes: str,
    keyword_families: Mapping[str, Sequence[str]],
) -> dict[str, bool]:
    """Flag each notes tactic whose keyword family appears in the notes."""
    text = (notes or "").lower()
    detected = {
        tactic: any(keyword.lower() in text for keyword in keyword_families.get(tactic, ()))
        for tactic in NOTES_TACTICS
    }
    logger.debug(f"Notes tactics: {[t for t, on in detected.items() if on]}")
    return detected


def detect_ai_flags(flags: Mapping[str, Any]) -> AIAnalysis:
    """Read the AI-classified categories. Only the exact string "true" counts."""
    analysis = AIAnalysis.from_flags(flags)
    logger.debug(f"AI flags set: {analysis.true_fields()}")
    return analysis


def merge_tactics(notes: Mapping[str, bool], ai: AIAnalysis) -> dict[str, bool]:
    """Combine notes and AI signals into the unified tactic set.

    Every formula is an OR: an AI flag can add a tactic the notes missed but
    never removes one the notes found.
    """
    return {
        # Core channels
        "dooh": ai.dooh or notes["dooh"],
        "audio": ai.audio or notes["audio"],
        "tv": ai.tv or notes["tv"],
        "social": ai.paid_social or ai.hasMeta or ai.hasTiktok or ai.hasX or notes["social"],
        "commerce": ai.commerce or notes["commerce"],
        "youtube": ai.youtube or notes["youtube"],

        # AI-only categories
        "healthcare": ai.healthcare,
        "gaming": ai.gaming,
        "entertainment": ai.entertainment,
        "dco": ai.dco,
        "competitor": ai.competitor_density,

        "retail_media": (
            ai.amazon or ai.albertsons or ai.kroger or ai.walmart
            or ai.instacart or ai.cvs or ai.dollar_general or ai.home_depot
        ),

        # Targeting
        "location": notes["location"] or ai.footfall or ai.geo_targeting,
        "experian": ai.experian or notes["experian"],
        "b2b": ai.b2b or notes["b2b"],
        "programmatic": notes["programmatic"],

        "measurement": (
            ai.basket_analysis or ai.offline_sales_lift
            or ai.quality_site_visits or ai.lucid_brand_study
        ),
        "creative_optimization": ai.dco or ai.dooh_creative or ai.youtube_creative,
        "advanced_analytics": ai.dynata or ai.basket_analysis,
    }
