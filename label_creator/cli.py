#!/usr/bin/env python3
"""Command-line interface for the label creator."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from label_creator.composition.aggregator import IngredientAggregator
from label_creator.composition.label_builder import LabelBuilder
from label_creator.data_layer.business_profile import BusinessProfileLoader
from label_creator.data_layer.exceptions import LabelCreatorError, LabelValidationError
from label_creator.data_layer.models import BusinessInfo, CreationMode, Label
from label_creator.data_layer.preset_db import PresetDB
from label_creator.ingestion.label_validator import LabelForm
from label_creator.output.formatters import (
    format_aggregation_json,
    format_preset_summary,
    format_rendered_json_string,
)
from label_creator.output.label_renderer import render


DEFAULT_PRESETS = "data/presets/default_presets.json"


def label_form_from_record(data: dict) -> LabelForm:
    """Convert a stored label record into form input for rebuilding."""
    return LabelForm(
        name=str(data.get("name") or ""),
        creation_mode=str(data.get("creationMode") or CreationMode.MANUAL.value),
        text=str(data.get("text") or ""),
        selected_preset_ids=[str(i) for i in data.get("selectedPresetIds") or []],
        additional_ingredients_text=str(data.get("additionalIngredientsText") or ""),
        net_quantity=str(data.get("netQuantity") or ""),
        net_quantity_unit=str(data.get("netQuantityUnit") or "oz"),
        allergens=[str(a) for a in data.get("allergens") or []],
        allergen_details=str(data.get("allergenDetails") or ""),
        include_cottage_disclaimer=bool(data.get("includeCottageDisclaimer")),
    )


def load_business(path: Optional[str]) -> Optional[BusinessInfo]:
    """Load the business profile, or None when no profile file exists."""
    if not path:
        return None
    business_path = Path(path)
    if not business_path.exists():
        print(f"Note: business profile not found: {business_path}", file=sys.stderr)
        print(
            f"Hint: Copy config/business.yaml.example to {business_path} and customize it",
            file=sys.stderr,
        )
        return None
    return BusinessProfileLoader(str(business_path)).load()


def load_preset_db(path: str) -> Optional[PresetDB]:
    """Load the preset library, or None (with an error printed) when missing."""
    presets_path = Path(path)
    if not presets_path.exists():
        print(f"Error: Presets file not found: {presets_path}", file=sys.stderr)
        return None
    return PresetDB(str(presets_path))


def warn_incomplete_business(label: Label):
    """Print a note when the label's business snapshot lacks required fields."""
    if label.business_info().is_complete():
        return
    print(
        "Note: business information is incomplete; the label will not show a full address",
        file=sys.stderr,
    )
    print(
        "Hint: Pass --business with a profile that sets name, address, city, state and zip",
        file=sys.stderr,
    )


def write_output(text: str, output_file: Optional[str]):
    if output_file:
        output_path = Path(output_file)
        output_path.write_text(text)
        print(f"Output saved to {output_path}", file=sys.stderr)
    else:
        print(text)


def cmd_render(args) -> int:
    """Render a label record into storage text, rich markup or plain text."""
    label_path = Path(args.label)
    if not label_path.exists():
        print(f"Error: Label file not found: {label_path}", file=sys.stderr)
        return 1

    with open(label_path, "r") as f:
        record = json.load(f)

    business = load_business(args.business)

    if args.rebuild:
        # Recompute text and ingredients from the presets and additions
        preset_db = load_preset_db(args.presets)
        if preset_db is None:
            return 1
        existing = Label.from_dict(record)
        label = LabelBuilder().build(
            label_form_from_record(record),
            preset_db.get_all_presets(),
            business if business is not None else existing.business_info(),
            existing=existing,
        )
    else:
        label = Label.from_dict(record)
        if business is not None:
            label = label.apply_business(business)

    warn_incomplete_business(label)
    rendered = render(label)

    if args.output == "storage":
        write_output(rendered.storage_text, args.output_file)
    elif args.output == "rich":
        write_output(rendered.rich_markup, args.output_file)
    elif args.output == "plain":
        write_output(rendered.plain_text, args.output_file)
    else:
        write_output(format_rendered_json_string(label, rendered), args.output_file)
    return 0


def cmd_search(args) -> int:
    """List presets whose name, brand or ingredients match a query."""
    preset_db = load_preset_db(args.presets)
    if preset_db is None:
        return 1
    matches = preset_db.search(args.query)
    print(f"Found {len(matches)} presets", file=sys.stderr)
    for preset in matches:
        print(format_preset_summary(preset))
    return 0


def cmd_compose(args) -> int:
    """Aggregate selected presets and additions into a canonical expression."""
    preset_db = load_preset_db(args.presets)
    if preset_db is None:
        return 1
    result = IngredientAggregator.aggregate_by_ids(
        args.select, preset_db.get_all_presets(), args.additional
    )
    if result.is_empty:
        print(
            "Error: Please select at least one preset or add ingredients manually",
            file=sys.stderr,
        )
        return 2

    if args.json:
        print(json.dumps(format_aggregation_json(result), indent=2))
    else:
        print(result.canonical_expression)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build FDA-style food labels from reusable ingredient presets"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a label record")
    render_parser.add_argument("label", type=str, help="Path to label JSON record")
    render_parser.add_argument(
        "--presets",
        type=str,
        default=DEFAULT_PRESETS,
        help=f"Path to presets JSON file (default: {DEFAULT_PRESETS})"
    )
    render_parser.add_argument(
        "--business",
        type=str,
        default=None,
        help="Path to business profile YAML; replaces the label's business snapshot"
    )
    render_parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Recompute ingredient text from the label's selected presets"
    )
    render_parser.add_argument(
        "--output",
        type=str,
        choices=["storage", "rich", "plain", "json"],
        default="plain",
        help="Output representation (default: plain)"
    )
    render_parser.add_argument(
        "--output-file",
        type=str,
        help="Optional file path to save output (default: print to stdout)"
    )
    render_parser.set_defaults(func=cmd_render)

    search_parser = subparsers.add_parser("search", help="Search the preset library")
    search_parser.add_argument("query", type=str, nargs="?", default="", help="Search text")
    search_parser.add_argument(
        "--presets",
        type=str,
        default=DEFAULT_PRESETS,
        help=f"Path to presets JSON file (default: {DEFAULT_PRESETS})"
    )
    search_parser.set_defaults(func=cmd_search)

    compose_parser = subparsers.add_parser(
        "compose", help="Combine presets and extra ingredients"
    )
    compose_parser.add_argument(
        "--select",
        type=str,
        action="append",
        default=[],
        help="Preset id to include (repeatable, selection order is kept)"
    )
    compose_parser.add_argument(
        "--additional",
        type=str,
        default="",
        help="Comma-separated extra ingredients"
    )
    compose_parser.add_argument(
        "--presets",
        type=str,
        default=DEFAULT_PRESETS,
        help=f"Path to presets JSON file (default: {DEFAULT_PRESETS})"
    )
    compose_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the aggregation as JSON"
    )
    compose_parser.set_defaults(func=cmd_compose)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except LabelValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        for error in e.errors:
            print(f"   - {error['field']}: {error['message']}", file=sys.stderr)
        return 2
    except LabelCreatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
