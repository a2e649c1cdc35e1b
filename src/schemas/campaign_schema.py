"""Pydantic models for campaign inputs and slide-selection results.

Inputs arrive as a flat, string-keyed mapping from the automation platform
(notes, budget, brand, and dozens of AI-classified flag fields holding the
literal string "true"). Results leave the same way: a flat mapping of
strings, ints and bools, with nested records serialized as compact JSON.
"""

import json
from collections.abc import Mapping
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class CampaignInputError(ValueError):
    """Raised when the caller's input is not a usable field mapping."""


# Tactics detectable from free-text notes, in detection order.
NOTES_TACTICS = (
    "dooh",
    "audio",
    "location",
    "tv",
    "social",
    "programmatic",
    "commerce",
    "experian",
    "youtube",
    "b2b",
)

# Unified tactic namespace after merging notes and AI signals, in merge order.
MERGED_TACTICS = (
    "dooh",
    "audio",
    "tv",
    "social",
    "commerce",
    "youtube",
    "healthcare",
    "gaming",
    "entertainment",
    "dco",
    "competitor",
    "retail_media",
    "location",
    "experian",
    "b2b",
    "programmatic",
    "measurement",
    "creative_optimization",
    "advanced_analytics",
)


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class CampaignInput(BaseModel):
    """The fields of one invocation, extracted from the caller's mapping."""

    notes: str = ""
    budget: str = ""
    campaign_name: str = ""
    brand: str = ""
    flags: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw caller fields; AI flags are read from here by exact key",
    )

    @field_validator("notes", "budget", "campaign_name", "brand", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @classmethod
    def from_mapping(cls, raw: Any) -> "CampaignInput":
        """Extract the campaign fields from a flat caller mapping.

        Missing fields default to empty. ``budget_1`` wins over ``budget``
        unless it is empty. Raises CampaignInputError only when the mapping
        itself is malformed.
        """
        if not isinstance(raw, Mapping):
            raise CampaignInputError(
                f"Expected a mapping of input fields, got {type(raw).__name__}"
            )
        bad_keys = [k for k in raw if not isinstance(k, str)]
        if bad_keys:
            raise CampaignInputError(f"Input field names must be strings, got {bad_keys!r}")

        try:
            return cls.model_validate({
                "notes": raw.get("notes"),
                "budget": raw.get("budget_1") or raw.get("budget"),
                "campaign_name": raw.get("campaign_name"),
                "brand": raw.get("brand"),
                "flags": dict(raw),
            })
        except ValidationError as e:
            raise CampaignInputError(f"Invalid campaign input: {e}") from e


class AIAnalysis(BaseModel):
    """Categories pre-classified by the upstream AI step.

    Each field is read from the raw input key given by its alias (or its own
    name) and is true only when that value is exactly the string "true".
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Core media channels
    dooh: bool = Field(default=False, alias="DOOH")
    audio: bool = False
    paid_social: bool = False
    youtube: bool = False
    tv: bool = False

    # Commerce and retail media networks
    commerce: bool = False
    amazon: bool = False
    albertsons: bool = False
    kroger: bool = False
    roundel: bool = False
    instacart: bool = False
    walmart: bool = False
    cvs: bool = Field(default=False, alias="CVS")
    dollar_general: bool = False
    home_depot: bool = False
    kinective: bool = False
    macys: bool = False
    meijer: bool = False
    shipt: bool = False
    walgreens: bool = False

    # Targeting and data
    experian: bool = False
    b2b: bool = Field(default=False, alias="B2B")
    footfall: bool = False
    competitor_density: bool = False

    # Industries
    healthcare: bool = False
    gaming: bool = False
    entertainment: bool = False

    # Creative and optimization
    dco: bool = Field(default=False, alias="DCO")
    dooh_creative: bool = False
    youtube_creative: bool = False

    # Measurement and analytics
    dynata: bool = False
    basket_analysis: bool = False
    offline_sales_lift: bool = False
    quality_site_visits: bool = False
    lucid_brand_study: bool = False

    geo_targeting: bool = False

    # Social platforms
    hasMeta: bool = False
    hasLinkedin: bool = False
    hasPinterest: bool = False
    hasReddit: bool = False
    hasSnapchat: bool = False
    hasTiktok: bool = False
    hasX: bool = False

    @classmethod
    def from_flags(cls, flags: Mapping[str, Any]) -> "AIAnalysis":
        values = {
            name: flags.get(field.alias or name) == "true"
            for name, field in cls.model_fields.items()
        }
        return cls(**values)

    def true_fields(self) -> list[str]:
        """Names of the categories that were set, in declaration order."""
        return [name for name, value in self if value]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class IndustryContext(BaseModel):
    """Industry classification handed to the downstream deck builder."""

    industry: str
    sub_industry: str
    brand_type: Literal["Enterprise", "Consumer"]
    campaign_type: Literal["B2B", "B2C"]
    complexity_tier: Literal["Complex", "Standard"]
    client_tier: Literal["Enterprise", "Standard", "Growth", "Starter"]


class SelectionOutput(BaseModel):
    """The flat mapping returned to the automation platform.

    Fields after ``slide_indices`` that default to None are only produced in
    enhanced mode and are dropped from the mapping otherwise.
    """

    slide_indices: str = Field(description="Comma-joined ascending slide indices")
    industry_context: Optional[str] = Field(default=None, description="Compact JSON IndustryContext")
    glean_search_terms: Optional[str] = Field(default=None, description="Compact JSON list of search terms")
    campaign_complexity: Optional[Literal["Low", "Medium", "High"]] = None
    tactics_detected: int = Field(ge=0)
    ai_fields_used: Optional[int] = Field(default=None, ge=0)
    confidence: int = Field(ge=0)
    reasoning: str
    total_slides: int = Field(ge=0)
    ai_enhanced: Optional[bool] = None
    glean_ready: Optional[bool] = None
    requires_premium_content: Optional[bool] = None


class SelectionResult(BaseModel):
    """Everything one pipeline run computed, before flattening."""

    mode: str
    slide_indices: list[int]
    tactics: dict[str, bool]
    ai_fields_used: list[str] = Field(default_factory=list)
    confidence: int
    complexity: Literal["Low", "Medium", "High"]
    reasoning: str
    industry_context: Optional[IndustryContext] = None
    search_terms: Optional[list[str]] = None

    @property
    def detected_tactics(self) -> list[str]:
        return [name for name, on in self.tactics.items() if on]

    @property
    def total_slides(self) -> int:
        return len(self.slide_indices)

    def to_output(self) -> dict[str, Any]:
        """Flatten into the caller-facing output mapping."""
        fields: dict[str, Any] = {
            "slide_indices": ",".join(str(i) for i in self.slide_indices),
            "tactics_detected": len(self.detected_tactics),
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "total_slides": self.total_slides,
        }
        if self.industry_context is not None:
            fields.update({
                "industry_context": _compact_json(self.industry_context.model_dump()),
                "glean_search_terms": _compact_json(self.search_terms or []),
                "campaign_complexity": self.complexity,
                "ai_fields_used": len(self.ai_fields_used),
                "ai_enhanced": len(self.ai_fields_used) > 0,
                "glean_ready": True,
                "requires_premium_content": self.total_slides > 30,
            })
        return SelectionOutput(**fields).model_dump(exclude_none=True)
