"""Ingredient aggregator for combining presets and free-text additions."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from label_creator.data_layer.identifiers import LegacyKey, resolve_lookup
from label_creator.data_layer.models import IngredientPreset
from label_creator.ingestion.expression_parser import parse_ingredient_list


logger = logging.getLogger(__name__)


@dataclass
class AggregationResult:
    """Ingredients contributed by the selected presets and additions."""

    flat_list: List[str] = field(default_factory=list)  # Presence/search checks only
    canonical_expression: str = ""  # Stored as the label's text

    @property
    def is_empty(self) -> bool:
        return not self.flat_list


def format_preset_item(preset: IngredientPreset) -> str:
    """Format one preset as an expression item.

    Args:
        preset: IngredientPreset

    Returns:
        "Spices (Cinnamon, Nutmeg)", or just "Eggs" for a single-ingredient preset
    """
    if preset.ingredients:
        return f"{preset.name} ({', '.join(preset.ingredients)})"
    return preset.name


class IngredientAggregator:
    """Combines selected presets and free text into one ingredient expression."""

    @staticmethod
    def aggregate(
        selected_presets: Iterable[IngredientPreset], additional_text: str = ""
    ) -> AggregationResult:
        """Aggregate presets (in selection order) then free-text additions.

        An empty result is not an error here; callers decide whether it
        fails validation.

        Args:
            selected_presets: Presets in the order they were selected
            additional_text: Comma-separated extra ingredients

        Returns:
            AggregationResult with flat list and canonical expression
        """
        parts: List[str] = []
        flat_list: List[str] = []

        for preset in selected_presets:
            parts.append(format_preset_item(preset))
            if preset.ingredients:
                flat_list.extend(preset.ingredients)
            else:
                flat_list.append(preset.name)

        for token in parse_ingredient_list(additional_text):
            parts.append(token)
            flat_list.append(token)

        return AggregationResult(
            flat_list=flat_list,
            canonical_expression=", ".join(parts),
        )

    @classmethod
    def aggregate_by_ids(
        cls,
        preset_ids: Iterable[str],
        presets: Iterable[IngredientPreset],
        additional_text: str = "",
    ) -> AggregationResult:
        """Aggregate presets addressed by id.

        Ids that no longer resolve (deleted presets) are skipped.

        Args:
            preset_ids: Selected ids in selection order (either id scheme)
            presets: Candidate presets to resolve against
            additional_text: Comma-separated extra ingredients

        Returns:
            AggregationResult
        """
        candidates = list(presets)
        selected: List[IngredientPreset] = []
        for preset_id in preset_ids:
            preset = find_preset(candidates, preset_id)
            if preset is None:
                logger.debug("Skipping unknown preset id %r", preset_id)
                continue
            selected.append(preset)
        return cls.aggregate(selected, additional_text)


def find_preset(
    presets: Iterable[IngredientPreset], preset_id: str
) -> Optional[IngredientPreset]:
    """Find a preset by id under either id scheme.

    Legacy ids are matched against ``legacy_id`` and, for records that
    only ever had a self-assigned id, against ``id`` itself.
    """
    key = resolve_lookup(preset_id)
    if isinstance(key, LegacyKey):
        logger.debug("Resolving %r through the legacy id field", preset_id)
    for preset in presets:
        if key.matches(preset.id, preset.legacy_id or preset.id):
            return preset
    return None
