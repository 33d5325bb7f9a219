"""JSON formatters for rendered labels (API and CLI output)."""

import json
from typing import Any, Dict

from label_creator.composition.aggregator import AggregationResult
from label_creator.data_layer.models import IngredientPreset, Label
from label_creator.output.label_renderer import RenderedLabel


def format_rendered_json(label: Label, rendered: RenderedLabel) -> Dict[str, Any]:
    """Format a label and its rendered representations as JSON.

    Args:
        label: The Label that was rendered
        rendered: RenderedLabel from the renderer

    Returns:
        Dictionary ready for JSON serialization. ``business_complete`` is
        False when the label carries no usable name and address.
    """
    return {
        "label": label.to_dict(),
        "business_complete": label.business_info().is_complete(),
        "rendered": {
            "storage_text": rendered.storage_text,
            "rich_markup": rendered.rich_markup,
            "plain_text": rendered.plain_text,
        },
    }


def format_rendered_json_string(
    label: Label, rendered: RenderedLabel, indent: int = 2
) -> str:
    """Format a rendered label as a JSON string."""
    return json.dumps(format_rendered_json(label, rendered), indent=indent)


def format_aggregation_json(result: AggregationResult) -> Dict[str, Any]:
    return {
        "canonical_expression": result.canonical_expression,
        "ingredients": list(result.flat_list),
        "ingredient_count": len(result.flat_list),
    }


def format_preset_summary(preset: IngredientPreset, preview_count: int = 3) -> str:
    """One-line preset summary for listings.

    Args:
        preset: IngredientPreset
        preview_count: Number of ingredients shown before "+N more"

    Returns:
        String like "Spices [65f0...] Cinnamon, Vanilla, Nutmeg +2 more (5 items)"
    """
    name = preset.name
    if preset.brand_name:
        name += f" ({preset.brand_name})"

    preview = ", ".join(preset.ingredients[:preview_count])
    remaining = len(preset.ingredients) - preview_count
    if remaining > 0:
        preview += f" +{remaining} more"

    count = len(preset.ingredients)
    count_str = f"{count} item" if count == 1 else f"{count} items"
    if preview:
        return f"{name} [{preset.id}] {preview} ({count_str})"
    return f"{name} [{preset.id}] ({count_str})"
