from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Sequence, Tuple

from ..common.datetime_utils import month_range, today_local
from ..common.logging import get_logger
from ..common.validators import optional_text, parse_id
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_PENDING_LIMIT, MAX_LIST_LIMIT
from ..core.enums import EntryStatus, Role
from ..core.exceptions import AuthorizationError, EntryRejected, NotFoundError, UnauthorizedStatusTransition, ValidationError
from ..settings.repository import SettingsRepository
from .assembler import assemble
from .classifier import classify
from .model import ShiftInput, TimeEntry
from .repository import TimeEntryRepository
from .rules.overlap_rule import BLOCKING_STATUSES, OverlapHit
from .splitter import split_shift
from .status import transition
from .summary import HoursSummary, summarize_hours
from .validator import validate

log = get_logger(__name__)

ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPER_ADMIN})


def _check_limit(limit: int) -> int:
    value = int(limit)
    if not 1 <= value <= MAX_LIST_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIST_LIMIT}")
    return value


@dataclass(frozen=True)
class LogTimeResult:
    entry_ids: Tuple[int, ...]
    is_split: bool
    status: EntryStatus
    message: str
    overlaps: Tuple[OverlapHit, ...] = ()


class TimeEntryService:
    def __init__(self, entries: TimeEntryRepository, settings: SettingsRepository):
        self._entries = entries
        self._settings = settings

    def log_time(
        self,
        *,
        user_id: int,
        work_date: date,
        start_time: str,
        end_time: str,
        project_id: int,
        workplace_id: Optional[int] = None,
        description: Optional[str] = None,
        today: Optional[date] = None,
    ) -> LogTimeResult:
        """Split, validate, classify and store one submitted shift.

        Raises ``EntryRejected`` when a policy check fails; nothing is stored
        in that case.
        """
        user = self._settings.get_user_settings(int(user_id))
        if not user or user.company_id is None:
            raise AuthorizationError("Unauthorized")

        company = self._settings.get_company_settings(int(user.company_id))
        if not company:
            raise NotFoundError("Company not found")
        if not company.boundaries.is_ordered:
            log.warning("shift_boundaries_unordered", company_id=company.company_id)

        shift = ShiftInput(
            work_date=work_date,
            start_time=(start_time or "").strip(),
            end_time=(end_time or "").strip(),
            project_id=parse_id(project_id, "Project", required=True),
            workplace_id=parse_id(workplace_id, "Workplace"),
            description=optional_text(description),
        )
        segments = split_shift(shift.work_date, shift.start_time, shift.end_time)

        existing: List[TimeEntry] = []
        for d in sorted({s.work_date for s in segments}):
            existing.extend(self._entries.find_entries(user_id=user.user_id, work_date=d, statuses=BLOCKING_STATUSES))

        # Overlap is checked against this snapshot only; concurrent submissions
        # can both pass before either is stored.
        result = validate(
            segments,
            today or today_local(),
            company.backdate_limit_days,
            existing,
            enforce_overlap=company.enforce_overlap,
        )
        if not result.ok:
            log.info(
                "time_entry_rejected",
                user_id=user.user_id,
                reason=result.reason.value,
                work_date=result.segment.work_date.isoformat() if result.segment else None,
            )
            raise EntryRejected(result.reason, result.message)

        if result.overlaps:
            log.warning(
                "time_entry_overlap_flagged",
                user_id=user.user_id,
                conflicting_entry_ids=[h.entry.entry_id for h in result.overlaps],
            )

        hours = [classify(s, company.boundaries) for s in segments]
        drafts = assemble(
            segments,
            hours,
            user.is_auto_approve,
            user_id=user.user_id,
            company_id=company.company_id,
            shift=shift,
        )
        ids = self._entries.create_entries(drafts)

        is_split = len(drafts) > 1
        status = drafts[0].status
        log.info("time_entry_logged", user_id=user.user_id, entry_ids=list(ids), is_split=is_split, status=status.value)
        return LogTimeResult(
            entry_ids=tuple(ids),
            is_split=is_split,
            status=status,
            message="Split shift logged successfully!" if is_split else "Time logged successfully!",
            overlaps=result.overlaps,
        )

    def approve_entry(self, *, current_role: Role, company_id: Optional[int], entry_id: int) -> TimeEntry:
        return self._decide(current_role=current_role, company_id=company_id, entry_id=entry_id, target=EntryStatus.APPROVED)

    def reject_entry(self, *, current_role: Role, company_id: Optional[int], entry_id: int) -> TimeEntry:
        return self._decide(current_role=current_role, company_id=company_id, entry_id=entry_id, target=EntryStatus.REJECTED)

    def _decide(self, *, current_role: Role, company_id: Optional[int], entry_id: int, target: EntryStatus) -> TimeEntry:
        if current_role not in ADMIN_ROLES:
            raise AuthorizationError("Unauthorized")

        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Time entry not found")
        if current_role != Role.SUPER_ADMIN and entry.company_id != company_id:
            # Entries of other tenants are reported as missing.
            raise NotFoundError("Time entry not found")

        new_status = transition(entry.status, target)
        if not self._entries.update_status(entry_id=entry.entry_id, status=new_status, expected=entry.status):
            latest = self._entries.get_by_id(entry.entry_id)
            raise UnauthorizedStatusTransition(latest.status if latest else entry.status, target)

        log.info("time_entry_decided", entry_id=entry.entry_id, status=new_status.value)
        return replace(entry, status=new_status)

    def list_pending(self, *, current_role: Role, company_id: Optional[int], limit: int = DEFAULT_PENDING_LIMIT) -> Sequence[TimeEntry]:
        if current_role not in ADMIN_ROLES:
            raise AuthorizationError("Unauthorized")
        if current_role != Role.SUPER_ADMIN and company_id is None:
            raise AuthorizationError("Unauthorized")
        scope = None if current_role == Role.SUPER_ADMIN else company_id
        return self._entries.list_pending(company_id=scope, limit=_check_limit(limit))

    def list_history(self, *, user_id: int, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[TimeEntry]:
        return self._entries.list_for_user(user_id=int(user_id), limit=_check_limit(limit))

    def month_summary(self, *, user_id: int, month: date) -> HoursSummary:
        """Approved hours per bucket for the calendar month containing ``month``."""
        first, last = month_range(month)
        rows = self._entries.list_for_user_between(user_id=int(user_id), date_from=first, date_to=last)
        return summarize_hours(rows)
