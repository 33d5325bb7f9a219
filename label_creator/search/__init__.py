"""Preset search."""

from label_creator.search.preset_matcher import PresetSearchMatcher

__all__ = ["PresetSearchMatcher"]
