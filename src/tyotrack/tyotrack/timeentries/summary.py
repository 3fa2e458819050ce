from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import EntryStatus
from .model import TimeEntry


@dataclass(frozen=True)
class HoursSummary:
    day_hours: float = 0.0
    evening_hours: float = 0.0
    night_hours: float = 0.0
    total_hours: float = 0.0
    entry_count: int = 0

    def rounded(self, ndigits: int = 2) -> dict:
        return {
            "day_hours": round(self.day_hours, ndigits),
            "evening_hours": round(self.evening_hours, ndigits),
            "night_hours": round(self.night_hours, ndigits),
            "total_hours": round(self.total_hours, ndigits),
            "entry_count": self.entry_count,
        }


def summarize_hours(
    entries: Iterable[TimeEntry],
    *,
    statuses: Iterable[EntryStatus] = (EntryStatus.APPROVED,),
) -> HoursSummary:
    """Sum hour buckets at full precision over entries in ``statuses``."""
    wanted = set(statuses)
    day = evening = night = total = 0.0
    count = 0
    for e in entries:
        if e.status not in wanted:
            continue
        day += e.day_hours
        evening += e.evening_hours
        night += e.night_hours
        total += e.total_hours
        count += 1
    return HoursSummary(day_hours=day, evening_hours=evening, night_hours=night, total_hours=total, entry_count=count)
