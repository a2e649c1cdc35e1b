from .pipeline import run_selection, select_slides
from .rule_base import DEFAULT_RULE_BASE, load_rule_base

__all__ = ["run_selection", "select_slides", "load_rule_base", "DEFAULT_RULE_BASE"]
