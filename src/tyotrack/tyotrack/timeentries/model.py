from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import time_to_minutes
from ..core.constants import END_OF_DAY_DISPLAY, MINUTES_PER_DAY
from ..core.enums import EntryStatus, SegmentRole


@dataclass(frozen=True)
class ShiftInput:
    """A shift as submitted by an employee, before splitting."""

    work_date: date
    start_time: str
    end_time: str
    project_id: int
    workplace_id: Optional[int] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Segment:
    """One calendar-day portion of a logged shift.

    ``end_minutes`` may be 1440 for the first half of a split shift.
    """

    work_date: date
    start_minutes: int
    end_minutes: int
    is_split: bool = False
    role: SegmentRole = SegmentRole.NONE

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes


@dataclass(frozen=True)
class ClassifiedHours:
    day_hours: float
    evening_hours: float
    night_hours: float
    total_hours: float


@dataclass(frozen=True)
class NewTimeEntry:
    """Storable description of an entry, produced by the assembler."""

    user_id: int
    company_id: int
    project_id: int
    work_date: date
    start_time: str
    end_time: str
    total_hours: float
    day_hours: float
    evening_hours: float
    night_hours: float
    status: EntryStatus
    is_split: bool = False
    role: SegmentRole = SegmentRole.NONE
    parent_entry_id: Optional[int] = None
    workplace_id: Optional[int] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: a persisted time entry."""

    entry_id: int
    user_id: int
    company_id: int
    project_id: int
    work_date: date
    start_time: str
    end_time: str
    total_hours: float
    day_hours: float
    evening_hours: float
    night_hours: float
    status: EntryStatus
    is_split: bool = False
    parent_entry_id: Optional[int] = None
    workplace_id: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        # First halves of split shifts are stored as "23:59" but run to midnight.
        if self.is_split and self.parent_entry_id is None and self.end_time == END_OF_DAY_DISPLAY:
            return MINUTES_PER_DAY
        return time_to_minutes(self.end_time)
