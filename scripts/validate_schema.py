#!/usr/bin/env python3
"""Validate a JSON or YAML file against a named Pydantic schema.

Usage:
    python scripts/validate_schema.py <file> <schema_name>

Schema names:
    CampaignInput    -- Flat campaign input mapping from the automation platform
    SelectionOutput  -- Flat slide-selection output mapping
    RuleBase         -- Slide-selection rule base (YAML)
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import BaseModel

from src.schemas.campaign_schema import AIAnalysis, CampaignInput, SelectionOutput
from src.schemas.rule_schema import RuleBase


SCHEMA_MAP: dict[str, type[BaseModel]] = {
    "CampaignInput": CampaignInput,
    "SelectionOutput": SelectionOutput,
    "RuleBase": RuleBase,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate a file against a Pydantic schema")
    parser.add_argument("file", type=Path, help="Path to the JSON (or rule-base YAML) file")
    parser.add_argument("schema_name", choices=list(SCHEMA_MAP.keys()),
                        help="Name of the Pydantic schema to validate against")
    args = parser.parse_args(argv)

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.schema_name == "RuleBase":
            instance = RuleBase.from_yaml(args.file)
        else:
            data = json.loads(args.file.read_text(encoding="utf-8"))
            if args.schema_name == "CampaignInput":
                instance = CampaignInput.from_mapping(data)
            else:
                instance = SelectionOutput.model_validate(data)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file}: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Validation FAILED: {args.file} does not conform to {args.schema_name}", file=sys.stderr)
        print(f"  Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Validation PASSED: {args.file} conforms to {args.schema_name}")

    # Print summary info based on schema type
    if args.schema_name == "CampaignInput":
        ai = AIAnalysis.from_flags(instance.flags)
        print(f"  Campaign: {instance.campaign_name or '(unnamed)'}")
        print(f"  Budget: {instance.budget or '(none)'}")
        print(f"  AI flags set: {len(ai.true_fields())}")
    elif args.schema_name == "SelectionOutput":
        print(f"  Slides: {instance.total_slides}")
        print(f"  Tactics: {instance.tactics_detected}")
        print(f"  Confidence: {instance.confidence}")
    elif args.schema_name == "RuleBase":
        print(f"  Core slides: {len(instance.core_slides)}")
        print(f"  Slide maps: {len(instance.slide_map)}")
        print(f"  Budget tiers: {len(instance.budget_slides)}")


if __name__ == "__main__":
    main()
