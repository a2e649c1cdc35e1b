"""Pydantic models for the slide-selection rule base.

The rule base is the static knowledge behind slide selection: which keywords
signal a tactic in campaign notes, which deck slides each tactic pulls in,
which slides a budget tier adds, and the per-mode overrides and scoring
constants. It is pure data, loaded from YAML and never mutated.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError, model_validator

from .campaign_schema import MERGED_TACTICS, NOTES_TACTICS


class RuleBaseError(ValueError):
    """Raised when a rule-base file does not describe a usable rule base."""


class SelectionMode(str, Enum):
    """Pipeline variants sharing one rule base."""

    ENHANCED = "enhanced"
    BASIC = "basic"


# ---------------------------------------------------------------------------
# Budget tiers and scoring
# ---------------------------------------------------------------------------

class BudgetSlideTier(BaseModel):
    """Slides added once the campaign budget reaches ``min_amount``."""

    min_amount: NonNegativeInt
    slides: list[NonNegativeInt] = Field(default_factory=list)


class ScoringRules(BaseModel):
    """Constants for the confidence score.

    confidence = base + per_tactic * n (+ ai_bonus if any AI flag was set)
    (+ complex_bonus if n >= complex_threshold), capped at ``cap``.
    """

    base: int = 70
    per_tactic: int = 4
    ai_bonus: int = 0
    complex_bonus: int = 0
    complex_threshold: int = 6
    cap: int = 97


class ModeRules(BaseModel):
    """Per-mode behavior layered on top of the shared tables."""

    reasoning_lead: str
    use_ai_flags: bool = True
    include_context: bool = True
    tactics: Optional[list[str]] = Field(
        default=None,
        description="Tactics reported by this mode, in order. None = every merged tactic.",
    )
    slide_map_overrides: dict[str, list[NonNegativeInt]] = Field(default_factory=dict)
    scoring: ScoringRules = Field(default_factory=ScoringRules)


# ---------------------------------------------------------------------------
# Rule base
# ---------------------------------------------------------------------------

class RuleBase(BaseModel):
    """The complete slide-selection knowledge base."""

    model_config = ConfigDict(frozen=True)

    core_slides: list[NonNegativeInt] = Field(min_length=1)
    keyword_families: dict[str, list[str]]
    slide_map: dict[str, list[NonNegativeInt]]
    budget_slides: list[BudgetSlideTier] = Field(
        default_factory=list,
        description="Budget tiers, checked highest min_amount first",
    )
    modes: dict[SelectionMode, ModeRules]

    @model_validator(mode="after")
    def _check_tactics(self) -> "RuleBase":
        missing = [t for t in NOTES_TACTICS if t not in self.keyword_families]
        if missing:
            raise ValueError(f"keyword_families missing tactics: {', '.join(missing)}")
        unknown = set(self.keyword_families) - set(NOTES_TACTICS)
        if unknown:
            raise ValueError(f"keyword_families has unknown tactics: {', '.join(sorted(unknown))}")

        checks = [("slide_map", self.slide_map.keys())]
        for mode, rules in self.modes.items():
            checks.append((f"modes.{mode.value}.slide_map_overrides", rules.slide_map_overrides.keys()))
            checks.append((f"modes.{mode.value}.tactics", rules.tactics or []))
        for where, names in checks:
            unknown = set(names) - set(MERGED_TACTICS)
            if unknown:
                raise ValueError(f"{where} names unknown tactics: {', '.join(sorted(unknown))}")

        absent = [m.value for m in SelectionMode if m not in self.modes]
        if absent:
            raise ValueError(f"modes missing: {', '.join(absent)}")

        self.budget_slides.sort(key=lambda tier: tier.min_amount, reverse=True)
        return self

    def mode_rules(self, mode: SelectionMode) -> ModeRules:
        return self.modes[SelectionMode(mode)]

    def slide_map_for(self, mode: SelectionMode) -> dict[str, list[int]]:
        """Return the shared slide map with the mode's overrides applied."""
        merged = dict(self.slide_map)
        merged.update(self.mode_rules(mode).slide_map_overrides)
        return merged

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuleBase":
        """Load a rule base from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Rule base file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise RuleBaseError(f"Invalid rule base {path}: {e}") from e
