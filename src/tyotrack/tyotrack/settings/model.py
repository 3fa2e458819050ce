from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..common.datetime_utils import time_to_minutes
from ..core.constants import (
    DEFAULT_BACKDATE_LIMIT_DAYS,
    DEFAULT_DAY_START,
    DEFAULT_EVENING_START,
    DEFAULT_NIGHT_START,
)
from ..core.enums import Role


@dataclass(frozen=True)
class ShiftBoundaries:
    """Company day/evening/night window starts, in minutes from midnight."""

    day_start: int = time_to_minutes(DEFAULT_DAY_START)
    evening_start: int = time_to_minutes(DEFAULT_EVENING_START)
    night_start: int = time_to_minutes(DEFAULT_NIGHT_START)

    @classmethod
    def from_strings(
        cls,
        day_start: Optional[str] = None,
        evening_start: Optional[str] = None,
        night_start: Optional[str] = None,
    ) -> "ShiftBoundaries":
        """Build from "HH:mm" values; missing values fall back to the defaults."""
        return cls(
            day_start=time_to_minutes(day_start or DEFAULT_DAY_START),
            evening_start=time_to_minutes(evening_start or DEFAULT_EVENING_START),
            night_start=time_to_minutes(night_start or DEFAULT_NIGHT_START),
        )

    @property
    def is_ordered(self) -> bool:
        return self.day_start < self.evening_start < self.night_start

    def clamped(self) -> Tuple[int, int, int]:
        """Window starts forced into day <= evening <= night.

        A start that falls before the previous one collapses its window to
        zero length, so the three windows always tile the whole day.
        """
        evening = max(self.day_start, self.evening_start)
        night = max(evening, self.night_start)
        return self.day_start, evening, night


@dataclass(frozen=True)
class CompanySettings:
    company_id: int
    boundaries: ShiftBoundaries = field(default_factory=ShiftBoundaries)
    backdate_limit_days: int = DEFAULT_BACKDATE_LIMIT_DAYS
    enforce_overlap: bool = True


@dataclass(frozen=True)
class UserSettings:
    user_id: int
    company_id: Optional[int]
    role: Role = Role.EMPLOYEE
    is_auto_approve: bool = False
