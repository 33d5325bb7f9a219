"""Data models for the label creator."""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_NET_QUANTITY_UNIT = "oz"


def _text(value: Any) -> str:
    """Coerce a stored scalar to text (numbers in hand-edited records, None to "")."""
    return "" if value is None else str(value)


class CreationMode(Enum):
    """How a label's ingredient text was produced."""

    MANUAL = "manual"
    PRESET = "preset"


@dataclass
class IngredientPreset:
    """A reusable, named group of sub-ingredients.

    A preset with no sub-ingredients is a "single" ingredient preset: the
    preset's own name is the ingredient.
    """

    id: str  # Store-generated or legacy identifier
    name: str  # Display name (e.g., "Spices")
    ingredients: List[str] = field(default_factory=list)  # Ordered sub-ingredients
    brand_name: str = ""  # Optional brand (e.g., "King Arthur")
    created_at: str = ""  # ISO timestamp
    legacy_id: str = ""  # Self-assigned id from the earlier id scheme

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IngredientPreset":
        """Build a preset from a stored record.

        Args:
            data: Record with camelCase keys (``brandName``, ``createdAt``)

        Returns:
            IngredientPreset object
        """
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            ingredients=[str(i) for i in data.get("ingredients") or []],
            brand_name=_text(data.get("brandName")),
            created_at=_text(data.get("createdAt")),
            legacy_id=_text(data.get("legacyId")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert preset to its stored record shape."""
        record = {
            "id": self.id,
            "name": self.name,
            "brandName": self.brand_name,
            "ingredients": list(self.ingredients),
            "createdAt": self.created_at,
        }
        if self.legacy_id:
            record["legacyId"] = self.legacy_id
        return record


@dataclass
class BusinessInfo:
    """Business name and address printed on every label."""

    business_name: str = ""
    business_address: str = ""
    business_city: str = ""
    business_state: str = ""
    business_zip: str = ""
    business_phone: str = ""  # Optional

    @classmethod
    def empty(cls) -> "BusinessInfo":
        """Return the all-empty business record."""
        return cls()

    def is_complete(self) -> bool:
        """Check that every field except phone is filled in."""
        return all([
            self.business_name,
            self.business_address,
            self.business_city,
            self.business_state,
            self.business_zip,
        ])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusinessInfo":
        return cls(
            business_name=_text(data.get("businessName")),
            business_address=_text(data.get("businessAddress")),
            business_city=_text(data.get("businessCity")),
            business_state=_text(data.get("businessState")),
            business_zip=_text(data.get("businessZip")),
            business_phone=_text(data.get("businessPhone")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "businessName": self.business_name,
            "businessAddress": self.business_address,
            "businessCity": self.business_city,
            "businessState": self.business_state,
            "businessZip": self.business_zip,
            "businessPhone": self.business_phone,
        }


@dataclass
class Label:
    """A product label with its canonical ingredient text and FDA fields.

    Labels are replaced whole on edit. Business fields are a snapshot
    copied from BusinessInfo when the label was built.
    """

    id: str
    name: str
    text: str = ""  # Canonical ingredient expression
    creation_mode: CreationMode = CreationMode.MANUAL
    selected_preset_ids: List[str] = field(default_factory=list)
    additional_ingredients_text: str = ""
    ingredients: List[str] = field(default_factory=list)  # Flattened, search only
    net_quantity: str = ""
    net_quantity_unit: str = DEFAULT_NET_QUANTITY_UNIT
    allergens: List[str] = field(default_factory=list)
    allergen_details: str = ""
    business_name: str = ""
    business_address: str = ""
    business_city: str = ""
    business_state: str = ""
    business_zip: str = ""
    business_phone: str = ""
    include_cottage_disclaimer: bool = False
    created_at: str = ""
    updated_at: Optional[str] = None

    def business_info(self) -> BusinessInfo:
        """Return the business snapshot held by this label."""
        return BusinessInfo(
            business_name=self.business_name,
            business_address=self.business_address,
            business_city=self.business_city,
            business_state=self.business_state,
            business_zip=self.business_zip,
            business_phone=self.business_phone,
        )

    def apply_business(self, info: BusinessInfo) -> "Label":
        """Return a copy of this label carrying a snapshot of ``info``."""
        return replace(
            self,
            business_name=info.business_name,
            business_address=info.business_address,
            business_city=info.business_city,
            business_state=info.business_state,
            business_zip=info.business_zip,
            business_phone=info.business_phone,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Label":
        """Build a label from a stored record.

        Missing keys take the same defaults the store applies on insert.

        Args:
            data: Record with camelCase keys

        Returns:
            Label object
        """
        # Labels saved before creation modes existed are treated as manual
        if data.get("creationMode") == CreationMode.PRESET.value:
            mode = CreationMode.PRESET
        else:
            mode = CreationMode.MANUAL
        business = BusinessInfo.from_dict(data)
        label = cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            text=_text(data.get("text")),
            creation_mode=mode,
            selected_preset_ids=[str(i) for i in data.get("selectedPresetIds") or []],
            additional_ingredients_text=_text(data.get("additionalIngredientsText")),
            ingredients=[str(i) for i in data.get("ingredients") or []],
            net_quantity=_text(data.get("netQuantity")),
            net_quantity_unit=_text(data.get("netQuantityUnit")) or DEFAULT_NET_QUANTITY_UNIT,
            allergens=[str(a) for a in data.get("allergens") or []],
            allergen_details=_text(data.get("allergenDetails")),
            include_cottage_disclaimer=bool(data.get("includeCottageDisclaimer")),
            created_at=_text(data.get("createdAt")),
            updated_at=None if data.get("updatedAt") is None else str(data["updatedAt"]),
        )
        return label.apply_business(business)

    def to_dict(self) -> Dict[str, Any]:
        """Convert label to its stored record shape."""
        record: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "text": self.text,
            "creationMode": self.creation_mode.value,
            "selectedPresetIds": list(self.selected_preset_ids),
            "additionalIngredientsText": self.additional_ingredients_text,
            "ingredients": list(self.ingredients),
            "netQuantity": self.net_quantity,
            "netQuantityUnit": self.net_quantity_unit,
            "allergens": list(self.allergens),
            "allergenDetails": self.allergen_details,
            "includeCottageDisclaimer": self.include_cottage_disclaimer,
            "createdAt": self.created_at,
        }
        record.update(self.business_info().to_dict())
        if self.updated_at is not None:
            record["updatedAt"] = self.updated_at
        return record
