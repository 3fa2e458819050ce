from __future__ import annotations

from typing import Optional

from ...core.enums import RejectionReason
from ..model import Segment
from .base import EntryRule, RuleContext, RuleViolation


class FutureDateRule(EntryRule):
    """No segment may fall on a day after today."""

    def check(self, segment: Segment, context: RuleContext) -> Optional[RuleViolation]:
        if segment.work_date > context.today:
            return RuleViolation(RejectionReason.FUTURE_DATE, "Cannot log time for future dates.")
        return None
