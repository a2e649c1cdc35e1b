"""Map detected tactics and budget to deck slide indices."""

from collections.abc import Mapping

from src.schemas.rule_schema import RuleBase, SelectionMode
from src.selection.budget import get_budget_slides


def select_slide_indices(
    tactics: Mapping[str, bool],
    budget: str,
    rule_base: RuleBase,
    mode: SelectionMode = SelectionMode.ENHANCED,
) -> list[int]:
    """Return the ascending, de-duplicated slides for a campaign.

    The result always contains the core slides, plus the slide list of each
    detected tactic that has one, plus the budget tier's added-value slides.
    """
    slide_map = rule_base.slide_map_for(mode)

    slides = set(rule_base.core_slides)
    for tactic, detected in tactics.items():
        if detected and tactic in slide_map:
            slides.update(slide_map[tactic])
    slides.update(get_budget_slides(budget, rule_base.budget_slides))

    return sorted(slides)
