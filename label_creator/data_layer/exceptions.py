"""Structured error types for the label creator.

The formatting engine itself never raises: parsing, aggregation,
rendering and identifier resolution are total functions. These errors
belong to the seams around it, where callers validate form input, look
up presets and load configuration.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class LabelErrorCode(Enum):
    """Error codes, string-valued for serialization and logging."""

    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    PRESET_NOT_FOUND = "PRESET_NOT_FOUND"
    BUSINESS_PROFILE_INVALID = "BUSINESS_PROFILE_INVALID"


class LabelCreatorError(Exception):
    """Base exception for label creator errors.

    Attributes:
        code: LabelErrorCode identifying the error type
        message: Human-readable error description
        context: Dictionary of relevant error context
    """

    def __init__(
        self,
        code: LabelErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(f"[{code.value}] {message}")

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"code={self.code!r}, "
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses.

        Returns:
            Dictionary with error code, message, and context
        """
        return {
            "error_code": self.code.value,
            "message": self.message,
            "context": self.context
        }


class LabelValidationError(LabelCreatorError):
    """Raised when label or preset form input fails validation.

    Context includes:
        - errors: List of {field, message, value} dictionaries
    """

    def __init__(self, errors: List[Dict[str, str]]):
        if len(errors) == 1:
            message = f"Validation failed for '{errors[0]['field']}': {errors[0]['message']}"
        else:
            message = f"{len(errors)} validation errors"

        super().__init__(
            code=LabelErrorCode.VALIDATION_FAILURE,
            message=message,
            context={"errors": errors}
        )
        self.errors = errors

    @classmethod
    def from_result(cls, validation_result) -> "LabelValidationError":
        """Create error from a failed ValidationResult.

        Args:
            validation_result: ValidationResult with is_valid=False

        Returns:
            LabelValidationError carrying every error from the result
        """
        if validation_result.is_valid:
            raise ValueError("Cannot create error from valid result")

        errors = [
            {"field": e.field, "message": e.message, "value": e.value}
            for e in validation_result.errors
        ]
        if not errors:
            errors = [{"field": "unknown", "message": "Unknown validation error", "value": ""}]
        return cls(errors)


class PresetNotFoundError(LabelCreatorError):
    """Raised when a preset identifier resolves to no stored preset."""

    def __init__(self, preset_id: str):
        super().__init__(
            code=LabelErrorCode.PRESET_NOT_FOUND,
            message=f"Preset '{preset_id}' not found",
            context={"preset_id": preset_id}
        )
        self.preset_id = preset_id


class BusinessProfileError(LabelCreatorError):
    """Raised when the business profile file is malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=LabelErrorCode.BUSINESS_PROFILE_INVALID,
            message=f"Invalid business profile '{path}': {reason}",
            context={"path": path, "reason": reason}
        )
        self.path = path
        self.reason = reason
