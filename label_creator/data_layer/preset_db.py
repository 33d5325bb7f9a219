"""Preset library loaded from JSON."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from label_creator.composition.aggregator import find_preset
from label_creator.data_layer.exceptions import PresetNotFoundError
from label_creator.data_layer.models import IngredientPreset
from label_creator.search.preset_matcher import PresetSearchMatcher


logger = logging.getLogger(__name__)


class PresetDB:
    """Read-only preset library backed by a JSON file.

    The file holds ``{"presets": [...]}`` in creation order, using the
    store's camelCase record keys.
    """

    def __init__(self, json_path: str):
        """Initialize preset library from JSON file.

        Args:
            json_path: Path to JSON file containing presets
        """
        self.json_path = Path(json_path)
        self._presets: List[IngredientPreset] = []
        self._load_presets()

    def _load_presets(self):
        """Load presets from JSON file."""
        with open(self.json_path, "r") as f:
            data = json.load(f)

        for preset_data in data.get("presets", []):
            self._presets.append(IngredientPreset.from_dict(preset_data))
        logger.debug("Loaded %d presets from %s", len(self._presets), self.json_path)

    def get_all_presets(self) -> List[IngredientPreset]:
        """Get all presets in creation order.

        Returns:
            List of all IngredientPreset objects
        """
        return self._presets.copy()

    def find_preset(self, preset_id: str) -> Optional[IngredientPreset]:
        """Find a preset by store-generated or legacy id.

        Args:
            preset_id: Identifier under either id scheme

        Returns:
            IngredientPreset if found, None otherwise
        """
        return find_preset(self._presets, preset_id)

    def get_preset(self, preset_id: str) -> IngredientPreset:
        """Get a preset by id.

        Raises:
            PresetNotFoundError: If no preset resolves for ``preset_id``
        """
        preset = self.find_preset(preset_id)
        if preset is None:
            raise PresetNotFoundError(preset_id)
        return preset

    def get_presets_by_ids(self, preset_ids: List[str]) -> List[IngredientPreset]:
        """Resolve ids in selection order, skipping ids that no longer exist."""
        found = []
        for preset_id in preset_ids:
            preset = self.find_preset(preset_id)
            if preset is not None:
                found.append(preset)
        return found

    def search(self, query: str) -> List[IngredientPreset]:
        """Filter presets by name, brand or ingredient.

        Args:
            query: Search text (empty returns every preset)

        Returns:
            Matching presets in creation order
        """
        return PresetSearchMatcher.filter_presets(self._presets, query)
