from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from ..common.datetime_utils import minutes_to_time
from ..core.constants import END_OF_DAY_DISPLAY, MINUTES_PER_DAY
from ..core.enums import EntryStatus, SegmentRole
from ..core.exceptions import ValidationError
from .model import ClassifiedHours, NewTimeEntry, Segment, ShiftInput


def _display_end(segment: Segment) -> str:
    if segment.end_minutes >= MINUTES_PER_DAY:
        return END_OF_DAY_DISPLAY
    return minutes_to_time(segment.end_minutes)


def assemble(
    segments: Sequence[Segment],
    classified_hours: Sequence[ClassifiedHours],
    auto_approve: bool,
    *,
    user_id: int,
    company_id: int,
    shift: ShiftInput,
) -> List[NewTimeEntry]:
    """Zip segments with their hours into storable entries, in segment order.

    One status applies to every part of a submission. The second part's
    parent link is filled in by ``link_split_parts`` once the first part
    has an id.
    """
    if len(segments) != len(classified_hours):
        raise ValidationError("Each segment needs exactly one hour classification")

    status = EntryStatus.APPROVED if auto_approve else EntryStatus.PENDING
    return [
        NewTimeEntry(
            user_id=int(user_id),
            company_id=int(company_id),
            project_id=shift.project_id,
            workplace_id=shift.workplace_id,
            description=shift.description,
            work_date=segment.work_date,
            start_time=minutes_to_time(segment.start_minutes),
            end_time=_display_end(segment),
            total_hours=hours.total_hours,
            day_hours=hours.day_hours,
            evening_hours=hours.evening_hours,
            night_hours=hours.night_hours,
            status=status,
            is_split=segment.is_split,
            role=segment.role,
        )
        for segment, hours in zip(segments, classified_hours)
    ]


def link_split_parts(drafts: Sequence[NewTimeEntry], first_entry_id: int) -> List[NewTimeEntry]:
    """Point every SECOND_PART draft at the stored first part."""
    return [
        replace(d, parent_entry_id=int(first_entry_id)) if d.role == SegmentRole.SECOND_PART else d
        for d in drafts
    ]
