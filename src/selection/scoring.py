"""Confidence, complexity and reasoning for a selection run."""

from collections.abc import Mapping, Sequence

from src.schemas.rule_schema import ScoringRules
from src.selection.budget import extract_budget_amount

# (min_amount, reasoning clause), highest first; nothing below the last
_BUDGET_CLAUSES = (
    (1_000_000, "Premium tier optimization"),
    (500_000, "Standard tier optimization"),
    (100_000, "Growth tier optimization"),
)


def count_tactics(tactics: Mapping[str, bool]) -> int:
    return sum(1 for on in tactics.values() if on)


def calculate_confidence(tactic_count: int, ai_field_count: int, rules: ScoringRules) -> int:
    """Score how much signal the selection was based on.

    Non-decreasing in tactic_count and never above ``rules.cap``.
    """
    confidence = rules.base + tactic_count * rules.per_tactic
    if ai_field_count > 0:
        confidence += rules.ai_bonus
    if tactic_count >= rules.complex_threshold:
        confidence += rules.complex_bonus
    return min(confidence, rules.cap)


def calculate_complexity(tactic_count: int) -> str:
    if tactic_count >= 8:
        return "High"
    if tactic_count >= 5:
        return "Medium"
    return "Low"


def generate_reasoning(
    tactics: Mapping[str, bool],
    budget: str,
    ai_fields_used: Sequence[str],
    lead: str,
) -> str:
    """Explain which rules fired, in the order they were evaluated."""
    reasoning = [lead]
    reasoning.extend(f"{tactic.upper()} detected" for tactic, on in tactics.items() if on)

    if ai_fields_used:
        reasoning.append(f"{len(ai_fields_used)} AI insights integrated")

    if budget:
        amount = extract_budget_amount(budget)
        for min_amount, clause in _BUDGET_CLAUSES:
            if amount >= min_amount:
                reasoning.append(clause)
                break

    return ", ".join(reasoning)
