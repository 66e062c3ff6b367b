from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_month(month, year) -> tuple[int, int]:
    """Validate a zero-based month index and a calendar year."""

    try:
        month, year = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("Month and year must be numbers") from None
    if not 0 <= month <= 11:
        raise ValidationError("Month must be between 0 and 11")
    if not 1 <= year <= 9999:
        raise ValidationError("Year is out of range")
    return month, year
