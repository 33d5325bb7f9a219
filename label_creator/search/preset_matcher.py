"""Preset search for the ingredient library and label ingredient picker."""
from typing import Iterable, List

from label_creator.data_layer.models import IngredientPreset


class PresetSearchMatcher:
    """Case-insensitive substring matcher over a preset's searchable text."""

    @staticmethod
    def matches(preset: IngredientPreset, query: str) -> bool:
        """Check whether ``query`` occurs in the preset's name, brand or ingredients.

        Args:
            preset: IngredientPreset to test
            query: Search text; empty or whitespace-only matches everything

        Returns:
            True if the query is a substring of any searchable field
        """
        if not query or not query.strip():
            return True

        needle = query.strip().lower()
        if needle in preset.name.lower():
            return True
        if preset.brand_name and needle in preset.brand_name.lower():
            return True
        return any(needle in ingredient.lower() for ingredient in preset.ingredients)

    @classmethod
    def filter_presets(
        cls, presets: Iterable[IngredientPreset], query: str
    ) -> List[IngredientPreset]:
        """Return the presets matching ``query``, order preserved."""
        return [preset for preset in presets if cls.matches(preset, query)]


def matches(preset: IngredientPreset, query: str) -> bool:
    return PresetSearchMatcher.matches(preset, query)
