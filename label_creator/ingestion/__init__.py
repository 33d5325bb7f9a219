"""Ingestion layer for parsing ingredient expressions and form input."""

from label_creator.ingestion.expression_parser import (
    normalize_whitespace,
    parse_ingredient_list,
    split_top_level,
)

__all__ = [
    "normalize_whitespace",
    "parse_ingredient_list",
    "split_top_level",
]
