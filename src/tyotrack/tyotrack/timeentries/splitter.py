from __future__ import annotations

from datetime import date, timedelta
from typing import List

from ..common.datetime_utils import time_to_minutes
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import SegmentRole
from .model import Segment


def split_shift(work_date: date, start_time: str, end_time: str) -> List[Segment]:
    """Split a shift into calendar-day segments.

    An end time strictly earlier than the start time means the shift crosses
    midnight: the first segment runs to minute 1440 on ``work_date`` and the
    second runs from 00:00 on the next day. Equal times give one
    zero-length segment.
    """
    start = time_to_minutes(start_time)
    end = time_to_minutes(end_time)

    if end >= start:
        return [Segment(work_date=work_date, start_minutes=start, end_minutes=end)]

    return [
        Segment(
            work_date=work_date,
            start_minutes=start,
            end_minutes=MINUTES_PER_DAY,
            is_split=True,
            role=SegmentRole.FIRST_PART,
        ),
        Segment(
            work_date=work_date + timedelta(days=1),
            start_minutes=0,
            end_minutes=end,
            is_split=True,
            role=SegmentRole.SECOND_PART,
        ),
    ]
