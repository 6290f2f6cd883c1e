from __future__ import annotations

from datetime import date, datetime

from ..core.enums import ShiftClassification
from ..core.exceptions import ValidationError


def require_non_empty(value: object, field_name: str) -> str:
    # JSON bodies can carry numbers where text is expected.
    value = "" if value is None else str(value)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_id(value: object, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid id")
    if number <= 0:
        raise ValidationError(f"{field_name} is not a valid id")
    return number


def require_iso_date(value: str, field_name: str = "date") -> date:
    value = require_non_empty(value, field_name)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def require_shift_type(value: str) -> ShiftClassification:
    """Accept a deployment shift type (Day Shift / Night Shift)."""
    try:
        shift_type = ShiftClassification(require_non_empty(value, "shift_type"))
    except ValueError:
        raise ValidationError(f"Unknown shift type: {value}")
    if shift_type == ShiftClassification.BOTH_SHIFTS:
        raise ValidationError("Deployments are either Day Shift or Night Shift")
    return shift_type
