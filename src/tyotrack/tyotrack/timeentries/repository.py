from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Protocol, Sequence

from ..core.enums import EntryStatus
from .model import NewTimeEntry, TimeEntry


class TimeEntryRepository(Protocol):
    def find_entries(self, *, user_id: int, work_date: date, statuses: Iterable[EntryStatus]) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def create_entry(self, entry: NewTimeEntry) -> int:
        raise NotImplementedError

    def create_entries(self, entries: Sequence[NewTimeEntry]) -> List[int]:
        """Store all parts of one submission together.

        Implementations write the parts in order inside one transaction and
        link SECOND_PART rows to the first part's id.
        """

        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def update_status(self, *, entry_id: int, status: EntryStatus, expected: EntryStatus) -> bool:
        """Set ``status`` only if the row still has ``expected``."""

        raise NotImplementedError

    def list_pending(self, *, company_id: Optional[int], limit: int) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int, limit: int) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def list_for_user_between(self, *, user_id: int, date_from: date, date_to: date) -> Sequence[TimeEntry]:
        """Entries of ``user_id`` with ``date_from <= work_date <= date_to``."""

        raise NotImplementedError
