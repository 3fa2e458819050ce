from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ...core.enums import RejectionReason
from ..model import Segment, TimeEntry


@dataclass(frozen=True)
class RuleContext:
    today: date
    backdate_limit_days: int
    existing_entries: Sequence[TimeEntry] = ()


@dataclass(frozen=True)
class RuleViolation:
    reason: RejectionReason
    message: str


class EntryRule(ABC):
    """Strategy Pattern: one policy check applied to a single segment."""

    @abstractmethod
    def check(self, segment: Segment, context: RuleContext) -> Optional[RuleViolation]:
        raise NotImplementedError
