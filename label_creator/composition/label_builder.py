"""Label builder turning validated form input into Label records."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from label_creator.composition.aggregator import IngredientAggregator
from label_creator.data_layer.exceptions import LabelValidationError
from label_creator.data_layer.models import (
    DEFAULT_NET_QUANTITY_UNIT,
    BusinessInfo,
    CreationMode,
    IngredientPreset,
    Label,
)
from label_creator.ingestion.expression_parser import parse_ingredient_list
from label_creator.ingestion.label_validator import (
    LabelForm,
    LabelValidator,
    PresetForm,
    PresetValidator,
)


logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


def normalize_business_info(info: BusinessInfo) -> BusinessInfo:
    """Trim every field and upper-case the state code."""
    return BusinessInfo(
        business_name=info.business_name.strip(),
        business_address=info.business_address.strip(),
        business_city=info.business_city.strip(),
        business_state=info.business_state.strip().upper(),
        business_zip=info.business_zip.strip(),
        business_phone=info.business_phone.strip(),
    )


class LabelBuilder:
    """Builds labels from form input, presets and the business profile."""

    def __init__(self, validator: Optional[LabelValidator] = None):
        self.validator = validator or LabelValidator()

    def build(
        self,
        form: LabelForm,
        presets: Iterable[IngredientPreset],
        business: BusinessInfo,
        existing: Optional[Label] = None,
    ) -> Label:
        """Validate the form and build a complete Label.

        When ``existing`` is given the new label replaces it whole: id and
        creation time are kept, ``updated_at`` is stamped.

        Args:
            form: LabelForm from the presentation layer
            presets: Preset library to resolve selected ids against
            business: Business profile to snapshot into the label
            existing: Label being edited, if any

        Returns:
            Label object

        Raises:
            LabelValidationError: If the form does not hold enough to build a label
        """
        presets = list(presets)
        result = self.validator.validate(form, presets)
        if not result.is_valid:
            raise LabelValidationError.from_result(result)

        if form.creation_mode == CreationMode.PRESET.value:
            aggregation = IngredientAggregator.aggregate_by_ids(
                form.selected_preset_ids, presets, form.additional_ingredients_text
            )
            mode = CreationMode.PRESET
            text = aggregation.canonical_expression
            selected_ids = list(form.selected_preset_ids)
            additional_text = form.additional_ingredients_text.strip()
            ingredients = aggregation.flat_list
        else:
            mode = CreationMode.MANUAL
            text = form.text.strip()
            selected_ids = []
            additional_text = ""
            ingredients = []

        if existing is not None:
            label_id = existing.id
            created_at = existing.created_at
            updated_at = utc_timestamp()
        else:
            label_id = uuid.uuid4().hex[:24]
            created_at = utc_timestamp()
            updated_at = None

        label = Label(
            id=label_id,
            name=form.name.strip(),
            text=text,
            creation_mode=mode,
            selected_preset_ids=selected_ids,
            additional_ingredients_text=additional_text,
            ingredients=ingredients,
            net_quantity=str(form.net_quantity or "").strip(),
            net_quantity_unit=form.net_quantity_unit or DEFAULT_NET_QUANTITY_UNIT,
            allergens=list(form.allergens),
            allergen_details=form.allergen_details.strip(),
            include_cottage_disclaimer=form.include_cottage_disclaimer,
            created_at=created_at,
            updated_at=updated_at,
        )
        label = label.apply_business(normalize_business_info(business))
        logger.debug(
            "Built %s label %r with %d ingredients",
            mode.value, label.name, len(label.ingredients)
        )
        return label


class PresetBuilder:
    """Builds presets from preset form input."""

    def __init__(self, validator: Optional[PresetValidator] = None):
        self.validator = validator or PresetValidator()

    def build(
        self, form: PresetForm, existing: Optional[IngredientPreset] = None
    ) -> IngredientPreset:
        """Validate and build a preset, keeping identity when editing.

        Raises:
            LabelValidationError: If the preset name is missing
        """
        result = self.validator.validate(form)
        if not result.is_valid:
            raise LabelValidationError.from_result(result)

        return IngredientPreset(
            id=existing.id if existing else uuid.uuid4().hex[:24],
            name=form.name.strip(),
            ingredients=parse_ingredient_list(form.ingredients_text),
            brand_name=form.brand_name.strip(),
            created_at=existing.created_at if existing else utc_timestamp(),
            legacy_id=existing.legacy_id if existing else "",
        )
