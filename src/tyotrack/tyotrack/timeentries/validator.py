from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from ..core.enums import RejectionReason
from .model import Segment, TimeEntry
from .rules.backdate_rule import BackdateRule
from .rules.base import EntryRule, RuleContext
from .rules.future_date_rule import FutureDateRule
from .rules.overlap_rule import OverlapHit, OverlapRule, find_overlaps


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a submission.

    ``overlaps`` lists conflicting entries even when overlap is not enforced,
    so callers can flag the submission for review.
    """

    reason: Optional[RejectionReason] = None
    message: Optional[str] = None
    segment: Optional[Segment] = None
    overlaps: Tuple[OverlapHit, ...] = ()

    @property
    def ok(self) -> bool:
        return self.reason is None


def default_rules(*, enforce_overlap: bool = True) -> List[EntryRule]:
    rules: List[EntryRule] = [FutureDateRule(), BackdateRule()]
    if enforce_overlap:
        rules.append(OverlapRule())
    return rules


def validate(
    segments: Sequence[Segment],
    today: date,
    backdate_limit_days: int,
    existing_entries: Sequence[TimeEntry] = (),
    *,
    enforce_overlap: bool = True,
    rules: Optional[Sequence[EntryRule]] = None,
) -> ValidationResult:
    """Check every segment in order; the first violation rejects them all."""
    context = RuleContext(
        today=today,
        backdate_limit_days=int(backdate_limit_days),
        existing_entries=tuple(existing_entries),
    )
    active_rules = list(rules) if rules is not None else default_rules(enforce_overlap=enforce_overlap)

    overlaps: List[OverlapHit] = []
    for segment in segments:
        for rule in active_rules:
            violation = rule.check(segment, context)
            if violation:
                return ValidationResult(reason=violation.reason, message=violation.message, segment=segment)
        overlaps.extend(find_overlaps(segment, context.existing_entries))

    return ValidationResult(overlaps=tuple(overlaps))
