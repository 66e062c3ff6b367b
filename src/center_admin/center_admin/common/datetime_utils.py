from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_day(value) -> date:
    """Reduce a date, datetime or ISO string to its calendar day.

    Clients post full timestamps (``2024-03-05T09:12:44.120Z``); only the day
    matters for reporting.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            raise ValidationError(f"Invalid date: {value!r}") from None
    raise ValidationError("Date is required")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a zero-based ``month`` (0 = January)."""

    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, 1), date(year, month + 1, last_day)


def month_name(month: int) -> str:
    return MONTH_NAMES[month]


def today_local() -> date:
    """Current local day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
