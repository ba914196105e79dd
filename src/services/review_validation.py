"""Field validation for review writes."""

from typing import Any

from pydantic import BaseModel

from src.models.reviews import MUTABLE_FIELDS

MIN_RATING = 1
MAX_RATING = 5


class FieldError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    values: dict[str, Any] = {}
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def _coerce_rating(value: Any) -> int | None:
    """Return value as an int when it is a whole number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_review_fields(fields: dict[str, Any], partial: bool = False) -> ValidationResult:
    """
    Check review fields before they are written.

    Args:
        fields: Candidate values keyed by field name; unknown keys are ignored
        partial: When True, fields that are absent (or None) are not required

    Returns:
        ValidationResult with the cleaned values and one FieldError per bad field
    """
    values: dict[str, Any] = {}
    errors: list[FieldError] = []

    for name in MUTABLE_FIELDS:
        value = fields.get(name)
        if value is None:
            if not partial:
                errors.append(FieldError(field=name, message="is required"))
            continue

        if name == "rating":
            rating = _coerce_rating(value)
            if rating is None:
                errors.append(FieldError(field=name, message="must be a whole number"))
            elif not MIN_RATING <= rating <= MAX_RATING:
                errors.append(FieldError(field=name, message=f"must be between {MIN_RATING} and {MAX_RATING}"))
            else:
                values[name] = rating
            continue

        if not isinstance(value, str):
            errors.append(FieldError(field=name, message="must be text"))
        elif not value.strip():
            errors.append(FieldError(field=name, message="is required"))
        else:
            values[name] = value

    return ValidationResult(values=values, errors=errors)
