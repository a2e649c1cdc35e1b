from .campaign_schema import (
    MERGED_TACTICS, NOTES_TACTICS,
    AIAnalysis, CampaignInput, CampaignInputError,
    IndustryContext, SelectionOutput, SelectionResult,
)
from .rule_schema import (
    BudgetSlideTier, ModeRules, RuleBase, RuleBaseError, ScoringRules, SelectionMode,
)

__all__ = [
    "MERGED_TACTICS",
    "NOTES_TACTICS",
    "AIAnalysis",
    "CampaignInput",
    "CampaignInputError",
    "IndustryContext",
    "SelectionOutput",
    "SelectionResult",
    "BudgetSlideTier",
    "ModeRules",
    "RuleBase",
    "RuleBaseError",
    "ScoringRules",
    "SelectionMode",
]
