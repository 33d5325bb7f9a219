"""Label renderer producing storage text, rich markup and plain text.

Rich markup follows FDA-style layout for small producers:

- two type sizes only: large (14pt) for product name and net quantity,
  small (8pt, the regulatory minimum) for everything else
- fixed section order: name, ingredients, allergens, business, net
  quantity, cottage food disclaimer
- every section is optional and omitted when its data is absent

Sizes are in pt so the markup survives pasting into word processors.
"""
from dataclasses import dataclass
from html import escape
from typing import List

from label_creator.data_layer.models import DEFAULT_NET_QUANTITY_UNIT, Label
from label_creator.ingestion.expression_parser import (
    normalize_whitespace,
    split_top_level,
)


LARGE_FONT_SIZE = "font-size: 14pt;"  # Product name & net quantity
SMALL_FONT_SIZE = "font-size: 8pt;"  # Regulatory minimum
SECTION_MARGIN = "margin-bottom: 8px;"
FONT_FAMILY = "font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;"

COTTAGE_DISCLAIMER = (
    "MADE IN A COTTAGE FOOD OPERATION THAT IS NOT SUBJECT TO "
    "GOVERNMENT FOOD SAFETY INSPECTION"
)


@dataclass(frozen=True)
class RenderedLabel:
    """The three representations of a rendered label."""

    storage_text: str  # Canonical ingredient expression, persisted as label text
    rich_markup: str  # Styled HTML for formatted copy/paste
    plain_text: str  # Clipboard text, one section per line


def escape_markup(text: str) -> str:
    """Escape text for insertion into markup (&, <, >)."""
    return escape(text or "", quote=False)


def bold_preset_names(expression: str) -> str:
    """Bold the preset name of each top-level item.

    "Cookie Mix (flour, sugar), Butter" becomes
    "<strong>Cookie Mix</strong> (flour, sugar), <strong>Butter</strong>".
    Parenthetical content is kept as-is, not re-escaped.

    Args:
        expression: Canonical ingredient expression

    Returns:
        Markup fragment
    """
    if not expression:
        return ""

    formatted = []
    for item in split_top_level(expression):
        paren_index = item.find("(")
        if paren_index > 0:
            name = item[:paren_index].strip()
            rest = item[paren_index:]
            formatted.append(f"<strong>{escape_markup(name)}</strong> {rest}")
        else:
            formatted.append(f"<strong>{escape_markup(item)}</strong>")
    return ", ".join(formatted)


def format_storage_text(label: Label) -> str:
    """Return the label's ingredient expression with whitespace normalized."""
    return normalize_whitespace(label.text)


def format_business_line(label: Label) -> str:
    """Assemble "Name Street, City, State, Zip" for the rich label.

    No punctuation separates the business name from the street address.
    Returns an empty string when there is no business name.
    """
    if not label.business_name:
        return ""

    line = label.business_name
    if label.business_address:
        line += " " + label.business_address
    city_state_zip = ", ".join(
        part for part in (label.business_city, label.business_state, label.business_zip)
        if part
    )
    if city_state_zip:
        line += ", " + city_state_zip
    return line


def _net_quantity_text(label: Label) -> str:
    unit = label.net_quantity_unit or DEFAULT_NET_QUANTITY_UNIT
    return f"Net Wt. {label.net_quantity} {unit}"


def _section(content: str, font_size: str, bold: bool = True, extra: str = "") -> str:
    weight = "font-weight: 700; " if bold else ""
    return (
        f'<div style="text-align: center; {weight}{font_size} {SECTION_MARGIN} '
        f'{extra}{FONT_FAMILY}">{content}</div>'
    )


def format_rich_markup(label: Label) -> str:
    """Build the styled HTML label.

    Args:
        label: Label to render

    Returns:
        HTML string wrapped in a single container div
    """
    ingredients = format_storage_text(label)
    sections: List[str] = []

    if label.name:
        sections.append(_section(escape_markup(label.name), LARGE_FONT_SIZE))

    if ingredients:
        sections.append(_section(
            '<span style="text-decoration: underline; font-weight: 700;">Ingredients:</span> '
            + bold_preset_names(ingredients),
            SMALL_FONT_SIZE,
            bold=False,
            extra="line-height: 1.6; ",
        ))

    if label.allergens:
        allergen_text = ", ".join(label.allergens).upper()
        sections.append(_section(f"CONTAINS: {escape_markup(allergen_text)}", SMALL_FONT_SIZE))

    business_line = format_business_line(label)
    if business_line:
        sections.append(_section(escape_markup(business_line), SMALL_FONT_SIZE))

    if label.net_quantity:
        sections.append(_section(escape_markup(_net_quantity_text(label)), LARGE_FONT_SIZE))

    if label.include_cottage_disclaimer:
        sections.append(_section(
            COTTAGE_DISCLAIMER,
            SMALL_FONT_SIZE,
            extra="text-transform: uppercase; letter-spacing: 0.3px; ",
        ))

    return (
        f'<div style="background: #ffffff; padding: 24px; {FONT_FAMILY} '
        f'max-width: 500px; margin: 0 auto;">{"".join(sections)}</div>'
    )


def format_plain_text(label: Label) -> str:
    """Build the clipboard text, one section per line, no escaping.

    Args:
        label: Label to render

    Returns:
        Sections joined with single newlines
    """
    ingredients = format_storage_text(label)
    lines: List[str] = []

    if label.name:
        lines.append(label.name)

    if ingredients:
        lines.append(f"Ingredients: {ingredients}")

    if label.allergens:
        allergen_text = ", ".join(label.allergens)
        if label.allergen_details:
            allergen_text += f" ({label.allergen_details})"
        lines.append(f"CONTAINS: {allergen_text}")

    if label.business_name:
        lines.append(", ".join(
            part for part in (
                label.business_name,
                label.business_address,
                label.business_city,
                label.business_state,
                label.business_zip,
                label.business_phone,
            )
            if part
        ))

    if label.net_quantity:
        lines.append(_net_quantity_text(label))

    if label.include_cottage_disclaimer:
        lines.append(COTTAGE_DISCLAIMER)

    return "\n".join(lines)


def render(label: Label) -> RenderedLabel:
    """Render a label into all three representations. Pure and repeatable."""
    return RenderedLabel(
        storage_text=format_storage_text(label),
        rich_markup=format_rich_markup(label),
        plain_text=format_plain_text(label),
    )


class LabelRenderer:
    """Renders labels; stateless."""

    def render(self, label: Label) -> RenderedLabel:
        return render(label)
