"""Budget parsing and the two budget classifications built on it.

Both classifications use the same thresholds over the same parsed amount but
answer different questions: which added-value slides to include, and how to
label the client.
"""

import re
import sys
from collections.abc import Sequence

from src.schemas.rule_schema import BudgetSlideTier

_NON_DIGITS = re.compile(r"\D", re.ASCII)
_MAX_DIGITS = 18

# (min_amount, client tier), highest first
_CLIENT_TIERS = (
    (1_000_000, "Enterprise"),
    (500_000, "Standard"),
    (100_000, "Growth"),
)


def extract_budget_amount(budget: str) -> int:
    """Parse a budget string by keeping only its digits.

    "$1,250,000" -> 1250000. Decimal points are stripped along with every
    other non-digit, so "$1,000.50" reads as 100050. No digits -> 0.
    Amounts too long to fit a machine integer saturate at sys.maxsize.
    """
    digits = _NON_DIGITS.sub("", budget or "").lstrip("0")
    if not digits:
        return 0
    if len(digits) > _MAX_DIGITS:
        return sys.maxsize
    return int(digits)


def get_budget_slides(budget: str, tiers: Sequence[BudgetSlideTier]) -> list[int]:
    """Added-value slides for the first tier (highest first) the budget reaches."""
    amount = extract_budget_amount(budget)
    for tier in tiers:
        if amount >= tier.min_amount:
            return list(tier.slides)
    return []


def determine_client_tier(budget: str) -> str:
    amount = extract_budget_amount(budget)
    for min_amount, tier in _CLIENT_TIERS:
        if amount >= min_amount:
            return tier
    return "Starter"
