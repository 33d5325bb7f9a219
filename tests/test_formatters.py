"""Unit tests for JSON formatters and error types."""
import json

import pytest

from label_creator.composition.aggregator import AggregationResult
from label_creator.data_layer.exceptions import (
    LabelCreatorError,
    LabelErrorCode,
    LabelValidationError,
)
from label_creator.data_layer.models import IngredientPreset, Label
from label_creator.ingestion.label_validator import ValidationError, ValidationResult
from label_creator.output.formatters import (
    format_aggregation_json,
    format_preset_summary,
    format_rendered_json,
    format_rendered_json_string,
)
from label_creator.output.label_renderer import render


class TestFormatters:
    """Test JSON and summary formatting."""

    def test_format_rendered_json(self):
        """Test rendered label JSON shape."""
        label = Label(id="abc", name="Jam", text="Berries")
        data = format_rendered_json(label, render(label))
        assert data["label"]["id"] == "abc"
        assert set(data["rendered"]) == {"storage_text", "rich_markup", "plain_text"}

    def test_format_rendered_json_business_complete(self):
        """Test the business completeness flag."""
        label = Label(id="abc", name="Jam")
        assert format_rendered_json(label, render(label))["business_complete"] is False

        label = Label(
            id="abc", name="Jam", business_name="Farm", business_address="1 Main St",
            business_city="Rome", business_state="NY", business_zip="13440",
        )
        assert format_rendered_json(label, render(label))["business_complete"] is True

    def test_format_rendered_json_string(self):
        """Test JSON string output parses back."""
        label = Label(id="abc", name="Jam")
        parsed = json.loads(format_rendered_json_string(label, render(label)))
        assert parsed["rendered"]["plain_text"] == "Jam"

    def test_format_aggregation_json(self):
        """Test aggregation JSON."""
        result = AggregationResult(flat_list=["Salt"], canonical_expression="Salt")
        assert format_aggregation_json(result)["ingredient_count"] == 1

    def test_preset_summary_truncates(self):
        """Test summary preview with more than three ingredients."""
        preset = IngredientPreset(id="p1", name="Spices",
                                  ingredients=["A", "B", "C", "D", "E"], brand_name="Acme")
        assert format_preset_summary(preset) == "Spices (Acme) [p1] A, B, C +2 more (5 items)"

    def test_preset_summary_single(self):
        """Test summary of a single-ingredient preset."""
        preset = IngredientPreset(id="p2", name="Eggs")
        assert format_preset_summary(preset) == "Eggs [p2] (0 items)"


class TestErrors:
    """Test structured errors."""

    def test_single_validation_error_message(self):
        """Test message for one validation error."""
        result = ValidationResult(
            is_valid=False,
            errors=[ValidationError(field="name", message="Label name is required", value="")],
        )
        error = LabelValidationError.from_result(result)
        assert str(error) == "[VALIDATION_FAILURE] Validation failed for 'name': Label name is required"
        assert error.to_dict()["context"]["errors"][0]["field"] == "name"

    def test_from_valid_result_raises(self):
        """Test that a valid result cannot become an error."""
        with pytest.raises(ValueError):
            LabelValidationError.from_result(ValidationResult(is_valid=True))

    def test_base_error_repr(self):
        """Test debugging representation."""
        error = LabelCreatorError(LabelErrorCode.PRESET_NOT_FOUND, "gone", {"preset_id": "x"})
        assert "PRESET_NOT_FOUND" in repr(error)
        assert error.context == {"preset_id": "x"}
