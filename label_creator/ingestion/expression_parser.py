"""Tokenizer for canonical ingredient expressions.

A canonical expression looks like::

    Cookie Mix (flour, sugar), Butter, Salt

Commas inside a parenthetical group belong to the group, so the
expression has three top-level items, not four.
"""
import re
from typing import List


def split_top_level(expression: str) -> List[str]:
    """Split an expression on commas at parenthesis depth zero.

    Unbalanced parentheses are tolerated: depth is a running counter and
    an item whose group never closes runs to the end of the string.

    Args:
        expression: Ingredient expression (e.g., "Cookie Mix (flour, sugar), Butter")

    Returns:
        Trimmed, non-empty top-level items in order
        (e.g., ["Cookie Mix (flour, sugar)", "Butter"])
    """
    if not expression:
        return []

    items = []
    current = []
    depth = 0

    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1

        if char == "," and depth == 0:
            items.append("".join(current))
            current = []
        else:
            current.append(char)
    items.append("".join(current))

    return [item.strip() for item in items if item.strip()]


def parse_ingredient_list(text: str) -> List[str]:
    """Split free text on every comma.

    Free-text additions and preset form input carry no nested groups.

    Args:
        text: Comma-separated ingredients (e.g., "Vanilla, Salt")

    Returns:
        Trimmed, non-empty ingredients in order
    """
    if not text or not text.strip():
        return []
    return [token.strip() for token in text.split(",") if token.strip()]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()
