"""Form validation for labels and presets.

The formatting engine accepts anything; deciding that a form does not
hold enough to build a label happens here, before aggregation results
are persisted or rendered.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from label_creator.composition.aggregator import IngredientAggregator
from label_creator.data_layer.models import CreationMode, IngredientPreset


MIN_NAME_LENGTH = 2
MIN_TEXT_LENGTH = 2


@dataclass
class ValidationError:
    """Structured validation error for user correction."""
    field: str      # Which form field failed
    message: str    # Human-readable error message
    value: str      # The invalid value that was provided


@dataclass
class ValidationResult:
    """Result of form validation."""
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)


@dataclass
class LabelForm:
    """Raw label form input from the presentation layer."""
    name: str
    creation_mode: str = CreationMode.MANUAL.value
    text: str = ""  # Manual mode ingredient text
    selected_preset_ids: List[str] = field(default_factory=list)
    additional_ingredients_text: str = ""
    net_quantity: str = ""
    net_quantity_unit: str = "oz"
    allergens: List[str] = field(default_factory=list)
    allergen_details: str = ""
    include_cottage_disclaimer: bool = False


@dataclass
class PresetForm:
    """Raw preset form input."""
    name: str
    ingredients_text: str = ""
    brand_name: str = ""


class LabelValidator:
    """Validates label form input.

    Rules:
    - Label name is required, at least 2 characters
    - Manual mode: ingredient text is required, at least 2 characters
    - Preset mode: selected presets plus additions must yield an ingredient
    """

    def validate(
        self,
        form: LabelForm,
        presets: Optional[Iterable[IngredientPreset]] = None,
    ) -> ValidationResult:
        """Validate a label form.

        Args:
            form: LabelForm to check
            presets: Preset library used to resolve selected ids (preset mode)

        Returns:
            ValidationResult with every error found
        """
        errors: List[ValidationError] = []

        name = form.name.strip() if form.name else ""
        if not name:
            errors.append(ValidationError(
                field="name",
                message="Label name is required",
                value=form.name or ""
            ))
        elif len(name) < MIN_NAME_LENGTH:
            errors.append(ValidationError(
                field="name",
                message=f"Label name must be at least {MIN_NAME_LENGTH} characters",
                value=name
            ))

        if form.creation_mode == CreationMode.MANUAL.value:
            text = form.text.strip() if form.text else ""
            if not text:
                errors.append(ValidationError(
                    field="text",
                    message="Label text is required",
                    value=form.text or ""
                ))
            elif len(text) < MIN_TEXT_LENGTH:
                errors.append(ValidationError(
                    field="text",
                    message=f"Label text must be at least {MIN_TEXT_LENGTH} characters",
                    value=text
                ))
        elif form.creation_mode == CreationMode.PRESET.value:
            result = IngredientAggregator.aggregate_by_ids(
                form.selected_preset_ids,
                presets or [],
                form.additional_ingredients_text,
            )
            if result.is_empty:
                errors.append(ValidationError(
                    field="selected_preset_ids",
                    message="Please select at least one preset or add ingredients manually",
                    value=", ".join(form.selected_preset_ids)
                ))
        else:
            errors.append(ValidationError(
                field="creation_mode",
                message="Creation mode must be 'manual' or 'preset'",
                value=str(form.creation_mode)
            ))

        return ValidationResult(is_valid=not errors, errors=errors)


class PresetValidator:
    """Validates preset form input.

    Sub-ingredients are optional: a preset without them stands for a
    single ingredient named after the preset.
    """

    def validate(self, form: PresetForm) -> ValidationResult:
        errors: List[ValidationError] = []
        if not form.name or not form.name.strip():
            errors.append(ValidationError(
                field="name",
                message="Preset name is required",
                value=form.name or ""
            ))
        return ValidationResult(is_valid=not errors, errors=errors)
