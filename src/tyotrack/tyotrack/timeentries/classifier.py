from __future__ import annotations

from typing import Optional

from ..core.constants import MINUTES_PER_DAY
from ..settings.model import ShiftBoundaries
from .model import ClassifiedHours, Segment


def overlap_minutes(s1: int, e1: int, s2: int, e2: int) -> int:
    """Length of the intersection of [s1, e1) and [s2, e2), never negative."""
    return max(0, min(e1, e2) - max(s1, s2))


def classify(segment: Segment, boundaries: Optional[ShiftBoundaries] = None) -> ClassifiedHours:
    """Split a segment's minutes into day/evening/night hours.

    Night covers both [0, day_start) and [night_start, 1440). Values are not
    rounded; rounding is a display concern. Out-of-order boundaries are
    clamped, so the buckets always add up to the total.
    """
    day_start, evening_start, night_start = (boundaries or ShiftBoundaries()).clamped()
    start, end = segment.start_minutes, segment.end_minutes

    night = overlap_minutes(start, end, 0, day_start) + overlap_minutes(start, end, night_start, MINUTES_PER_DAY)
    day = overlap_minutes(start, end, day_start, evening_start)
    evening = overlap_minutes(start, end, evening_start, night_start)

    return ClassifiedHours(
        day_hours=day / 60,
        evening_hours=evening / 60,
        night_hours=night / 60,
        total_hours=(end - start) / 60,
    )
