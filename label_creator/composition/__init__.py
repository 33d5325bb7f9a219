"""Ingredient aggregation and label assembly."""

from label_creator.composition.aggregator import (
    AggregationResult,
    IngredientAggregator,
)

__all__ = [
    "AggregationResult",
    "IngredientAggregator",
]
