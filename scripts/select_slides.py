#!/usr/bin/env python3
"""Select deck slides for one or more campaigns.

Reads a JSON file holding a single flat input mapping (the fields the
automation platform sends: notes, budget_1/budget, brand, campaign_name and
the AI flag fields) or a list of them, runs slide selection, and writes the
flat output mapping(s) to JSON.

Usage:
    python scripts/select_slides.py workspace/campaign.json \
        -o workspace/slide_selection.json [--mode basic] [--rules my_rules.yaml] [-v]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.schemas.campaign_schema import CampaignInputError
from src.schemas.rule_schema import RuleBaseError, SelectionMode
from src.selection.pipeline import run_selection
from src.selection.rule_base import load_rule_base
from src.utils.file_utils import load_json, save_json


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Select deck slides for campaign inputs")
    parser.add_argument("input_file", type=Path,
                        help="JSON file with one input mapping or a list of them")
    parser.add_argument("-o", "--output", type=Path,
                        default=Path("workspace/slide_selection.json"),
                        help="Output path for the selection JSON")
    parser.add_argument("--mode", choices=[m.value for m in SelectionMode],
                        default=SelectionMode.ENHANCED.value,
                        help="Selection mode (default: enhanced)")
    parser.add_argument("--rules", type=Path, default=None,
                        help="Alternate rule-base YAML (default: packaged rule base)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input_file.exists():
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)

    try:
        data = load_json(args.input_file)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input_file}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        rule_base = load_rule_base(args.rules)
    except (FileNotFoundError, RuleBaseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    batch = isinstance(data, list)
    inputs = data if batch else [data]

    outputs = []
    for i, raw in enumerate(inputs, start=1):
        try:
            output = run_selection(raw, mode=args.mode, rule_base=rule_base)
        except CampaignInputError as e:
            print(f"Error: Input {i}: {e}", file=sys.stderr)
            sys.exit(1)
        outputs.append(output)
        label = raw.get("campaign_name") or raw.get("brand") or f"input {i}"
        print(
            f"{label}: {output['total_slides']} slides, "
            f"{output['tactics_detected']} tactics, confidence {output['confidence']}"
        )

    save_json(outputs if batch else outputs[0], args.output)
    print(f"Written to: {args.output}")


if __name__ == "__main__":
    main()
