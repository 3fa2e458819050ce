from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...core.enums import EntryStatus, RejectionReason
from ..classifier import overlap_minutes
from ..model import Segment, TimeEntry
from .base import EntryRule, RuleContext, RuleViolation

# Rejected entries never block a new submission on the same slot.
BLOCKING_STATUSES = frozenset({EntryStatus.PENDING, EntryStatus.APPROVED})


@dataclass(frozen=True)
class OverlapHit:
    entry: TimeEntry
    minutes: int


def find_overlaps(segment: Segment, existing_entries: Sequence[TimeEntry]) -> List[OverlapHit]:
    hits: List[OverlapHit] = []
    for entry in existing_entries:
        if entry.work_date != segment.work_date or entry.status not in BLOCKING_STATUSES:
            continue
        minutes = overlap_minutes(segment.start_minutes, segment.end_minutes, entry.start_minutes, entry.end_minutes)
        if minutes > 0:
            hits.append(OverlapHit(entry=entry, minutes=minutes))
    return hits


class OverlapRule(EntryRule):
    def check(self, segment: Segment, context: RuleContext) -> Optional[RuleViolation]:
        hits = find_overlaps(segment, context.existing_entries)
        if not hits:
            return None
        first = hits[0].entry
        return RuleViolation(
            RejectionReason.OVERLAP,
            f"Overlaps an existing entry {first.start_time}-{first.end_time} on {segment.work_date.isoformat()}.",
        )
