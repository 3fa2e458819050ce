from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ...core.enums import RejectionReason
from ..model import Segment
from .base import EntryRule, RuleContext, RuleViolation


class BackdateRule(EntryRule):
    """Segments older than today minus the backdate limit are locked."""

    def check(self, segment: Segment, context: RuleContext) -> Optional[RuleViolation]:
        limit_date = context.today - timedelta(days=int(context.backdate_limit_days))
        if segment.work_date < limit_date:
            return RuleViolation(
                RejectionReason.BACKDATE_EXCEEDED,
                f"Cannot log time older than {context.backdate_limit_days} days.",
            )
        return None
