"""Campaign slide-selection pipeline.

One pass, left to right, no state kept between calls:

    caller mapping -> CampaignInput
                   -> notes tactics + AI flags -> merged tactics
                   -> slide indices
                   -> industry context -> search terms   (enhanced mode)
                   -> confidence, complexity, reasoning
                   -> flat output mapping

Enhanced mode uses every AI flag and reports context and search terms.
Basic mode is the same pipeline with AI flags forced off, the notes tactics
only, and the narrower slide lists and scoring of the basic rule set.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from src.schemas.campaign_schema import AIAnalysis, CampaignInput, SelectionResult
from src.schemas.rule_schema import RuleBase, SelectionMode
from src.selection.context_builder import build_industry_context
from src.selection.rule_base import load_rule_base
from src.selection.scoring import (
    calculate_complexity,
    calculate_confidence,
    count_tactics,
    generate_reasoning,
)
from src.selection.search_terms import generate_search_terms
from src.selection.slide_selector import select_slide_indices
from src.selection.tactic_detection import (
    detect_ai_flags,
    detect_notes_tactics,
    merge_tactics,
)

logger = logging.getLogger(__name__)

# Slide count of the deck produced before intelligent selection existed
DEFAULT_DECK_SIZE = 7


def select_slides(
    raw: Mapping[str, Any],
    mode: SelectionMode | str = SelectionMode.ENHANCED,
    rule_base: RuleBase | str | Path | None = None,
) -> SelectionResult:
    """Run the full selection for one caller mapping.

    Args:
        raw: Flat string-keyed mapping of caller fields.
        mode: "enhanced" or "basic".
        rule_base: A loaded RuleBase, a path to a rule-base YAML, or None for
            the packaged default.

    Raises:
        CampaignInputError: ``raw`` is not a string-keyed mapping of scalars.
    """
    mode = SelectionMode(mode)
    if not isinstance(rule_base, RuleBase):
        rule_base = load_rule_base(rule_base)
    rules = rule_base.mode_rules(mode)

    campaign = CampaignInput.from_mapping(raw)
    ai = detect_ai_flags(campaign.flags) if rules.use_ai_flags else AIAnalysis()
    ai_fields_used = ai.true_fields()

    logger.info(f"Slide selection ({mode.value}) for '{campaign.campaign_name or campaign.brand}'")
    logger.info(f"Notes: {campaign.notes[:100]}...")
    logger.info(f"Budget: {campaign.budget}")
    if rules.use_ai_flags:
        logger.info(f"AI categories detected: {len(ai_fields_used)}/{len(AIAnalysis.model_fields)}")

    notes_tactics = detect_notes_tactics(campaign.notes, rule_base.keyword_families)
    merged = merge_tactics(notes_tactics, ai)
    if rules.tactics is not None:
        tactics = {name: merged[name] for name in rules.tactics}
    else:
        tactics = merged

    slides = select_slide_indices(tactics, campaign.budget, rule_base, mode)

    context = None
    search_terms = None
    if rules.include_context:
        context = build_industry_context(campaign.brand, campaign.notes, tactics, campaign.budget)
        search_terms = generate_search_terms(tactics, context)

    tactic_count = count_tactics(tactics)
    result = SelectionResult(
        mode=mode.value,
        slide_indices=slides,
        tactics=tactics,
        ai_fields_used=ai_fields_used,
        confidence=calculate_confidence(tactic_count, len(ai_fields_used), rules.scoring),
        complexity=calculate_complexity(tactic_count),
        reasoning=generate_reasoning(tactics, campaign.budget, ai_fields_used, rules.reasoning_lead),
        industry_context=context,
        search_terms=search_terms,
    )

    logger.info(f"Tactics: {', '.join(result.detected_tactics)}")
    logger.info(f"Slides: {result.total_slides} (vs {DEFAULT_DECK_SIZE} default)")
    logger.info(
        f"Improvement: {round(result.total_slides / DEFAULT_DECK_SIZE, 1)}x more targeted"
    )
    if search_terms is not None:
        logger.info(f"Search terms: {len(search_terms)} industry-specific searches")

    return result


def run_selection(
    raw: Mapping[str, Any],
    mode: SelectionMode | str = SelectionMode.ENHANCED,
    rule_base: RuleBase | str | Path | None = None,
) -> dict[str, Any]:
    """Run the pipeline and return the flat output mapping the caller expects."""
    return select_slides(raw, mode=mode, rule_base=rule_base).to_output()
