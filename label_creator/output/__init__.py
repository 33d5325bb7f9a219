"""Output rendering for labels."""

from label_creator.output.label_renderer import (
    LabelRenderer,
    RenderedLabel,
    bold_preset_names,
    render,
)
from label_creator.output.formatters import (
    format_rendered_json,
    format_rendered_json_string,
)

__all__ = [
    "LabelRenderer",
    "RenderedLabel",
    "bold_preset_names",
    "render",
    "format_rendered_json",
    "format_rendered_json_string",
]
