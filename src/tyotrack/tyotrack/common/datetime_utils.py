from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Tuple

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import InvalidTimeFormat, ValidationError

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Invalid date (YYYY-MM-DD)")


def time_to_minutes(value: str) -> int:
    """Convert HH:mm to minutes from midnight."""
    v = (value or "").strip()
    if not TIME_PATTERN.match(v):
        raise InvalidTimeFormat(f"Invalid time {value!r} (HH:mm)")
    hours, minutes = v.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Format minutes from midnight as HH:mm (1440 is not representable)."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minute value out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m").date()
    except ValueError:
        raise ValidationError("Invalid month (YYYY-MM)")


def month_range(day: date) -> Tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
