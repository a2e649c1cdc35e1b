"""Rule base loader for the slide selector."""

import functools
import logging
from pathlib import Path

from src.schemas.rule_schema import RuleBase

logger = logging.getLogger(__name__)

DEFAULT_RULE_BASE = Path(__file__).with_name("rule_base.yaml")


@functools.lru_cache(maxsize=8)
def _load_cached(path: Path) -> RuleBase:
    rule_base = RuleBase.from_yaml(path)
    logger.debug(
        f"Loaded rule base {path.name}: {len(rule_base.slide_map)} slide maps, "
        f"{len(rule_base.keyword_families)} keyword families"
    )
    return rule_base


def load_rule_base(path: str | Path | None = None) -> RuleBase:
    """Load a rule base, defaulting to the one shipped with the package.

    The parsed file is cached per path; every call returns its own deep copy,
    so changes a caller makes to the tables never reach later calls.
    """
    path = Path(path) if path else DEFAULT_RULE_BASE
    return _load_cached(path.resolve()).model_copy(deep=True)
