from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Dict, Optional

import pytest

from src.tyotrack.tyotrack.core.enums import EntryStatus, Role, SegmentRole
from src.tyotrack.tyotrack.settings.model import CompanySettings, UserSettings
from src.tyotrack.tyotrack.timeentries.assembler import link_split_parts
from src.tyotrack.tyotrack.timeentries.model import NewTimeEntry, TimeEntry
from src.tyotrack.tyotrack.timeentries.service import TimeEntryService


class InMemoryTimeEntries:
    def __init__(self):
        self.rows: Dict[int, TimeEntry] = {}
        self._id = 0

    def _store(self, e: NewTimeEntry) -> int:
        self._id += 1
        self.rows[self._id] = TimeEntry(
            entry_id=self._id,
            user_id=e.user_id,
            company_id=e.company_id,
            project_id=e.project_id,
            workplace_id=e.workplace_id,
            work_date=e.work_date,
            start_time=e.start_time,
            end_time=e.end_time,
            total_hours=e.total_hours,
            day_hours=e.day_hours,
            evening_hours=e.evening_hours,
            night_hours=e.night_hours,
            status=e.status,
            is_split=e.is_split,
            parent_entry_id=e.parent_entry_id,
            description=e.description,
        )
        return self._id

    def add(self, entry: TimeEntry) -> TimeEntry:
        self._id = max(self._id, entry.entry_id)
        self.rows[entry.entry_id] = entry
        return entry

    def find_entries(self, *, user_id: int, work_date: date, statuses):
        wanted = set(statuses)
        return [
            e for e in self.rows.values() if e.user_id == user_id and e.work_date == work_date and e.status in wanted
        ]

    def create_entry(self, entry: NewTimeEntry) -> int:
        return self._store(entry)

    def create_entries(self, entries):
        pending = list(entries)
        ids = []
        for i, e in enumerate(pending):
            new_id = self._store(e)
            ids.append(new_id)
            if e.role == SegmentRole.FIRST_PART:
                pending[i + 1 :] = link_split_parts(pending[i + 1 :], new_id)
        return ids

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self.rows.get(int(entry_id))

    def update_status(self, *, entry_id: int, status: EntryStatus, expected: EntryStatus) -> bool:
        row = self.rows.get(int(entry_id))
        if not row or row.status != expected:
            return False
        self.rows[int(entry_id)] = replace(row, status=status)
        return True

    def list_pending(self, *, company_id, limit: int):
        items = [
            e
            for e in self.rows.values()
            if e.status == EntryStatus.PENDING and (company_id is None or e.company_id == company_id)
        ]
        items.sort(key=lambda e: e.work_date, reverse=True)
        return items[:limit]

    def list_for_user(self, *, user_id: int, limit: int):
        items = [e for e in self.rows.values() if e.user_id == user_id]
        items.sort(key=lambda e: (e.work_date, e.start_time), reverse=True)
        return items[:limit]

    def list_for_user_between(self, *, user_id: int, date_from: date, date_to: date):
        items = [e for e in self.rows.values() if e.user_id == user_id and date_from <= e.work_date <= date_to]
        return sorted(items, key=lambda e: (e.work_date, e.start_time))


class FakeCursor:
    def __init__(self, db: "FakeDatabase"):
        self._db = db
        self.lastrowid = None
        self.rowcount = 0

    def execute(self, sql: str, params=()):
        statement = " ".join(sql.split())
        self._db.executed.append((statement, tuple(params)))
        verb = statement.split(" ", 1)[0].upper()
        if verb == "INSERT":
            if self._db.fail_on_insert == self._db.inserts + 1:
                raise RuntimeError("insert failed")
            self._db.inserts += 1
            self._db.next_id += 1
            self.lastrowid = self._db.next_id
            self.rowcount = 1
        elif verb == "UPDATE":
            self.rowcount = self._db.update_rowcount

    def fetchone(self):
        return self._db.rows[0] if self._db.rows else None

    def fetchall(self):
        return list(self._db.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: "FakeDatabase"):
        self._db = db

    def cursor(self, dictionary: bool = True):
        return FakeCursor(self._db)

    def commit(self):
        self._db.commits += 1

    def rollback(self):
        self._db.rollbacks += 1

    def close(self):
        pass


class FakeDatabase:
    """Plays the DatabaseConnection role: records SQL and serves canned rows."""

    def __init__(self, rows=None, *, next_id: int = 0):
        self.rows = list(rows or [])
        self.executed = []
        self.next_id = next_id
        self.inserts = 0
        self.fail_on_insert: Optional[int] = None
        self.update_rowcount = 1
        self.commits = 0
        self.rollbacks = 0

    def connect(self, with_database: bool = True):
        return FakeConnection(self)


class InMemorySettings:
    def __init__(self):
        self.companies: Dict[int, CompanySettings] = {1: CompanySettings(company_id=1), 2: CompanySettings(company_id=2)}
        self.users: Dict[int, UserSettings] = {
            1: UserSettings(user_id=1, company_id=1, role=Role.ADMIN, is_auto_approve=True),
            2: UserSettings(user_id=2, company_id=1, role=Role.EMPLOYEE),
            3: UserSettings(user_id=3, company_id=2, role=Role.EMPLOYEE),
            4: UserSettings(user_id=4, company_id=None, role=Role.EMPLOYEE),
        }

    def get_company_settings(self, company_id: int) -> Optional[CompanySettings]:
        return self.companies.get(company_id)

    def get_user_settings(self, user_id: int) -> Optional[UserSettings]:
        return self.users.get(user_id)


@pytest.fixture
def entries_repo():
    return InMemoryTimeEntries()


@pytest.fixture
def settings_repo():
    return InMemorySettings()


@pytest.fixture
def service(entries_repo, settings_repo):
    return TimeEntryService(entries_repo, settings_repo)


@pytest.fixture
def make_entry():
    def _make(entry_id=100, *, work_date=date(2025, 6, 10), start="09:00", end="17:00", status=EntryStatus.PENDING, **kw):
        values = dict(
            entry_id=entry_id,
            user_id=2,
            company_id=1,
            project_id=1,
            work_date=work_date,
            start_time=start,
            end_time=end,
            total_hours=8.0,
            day_hours=8.0,
            evening_hours=0.0,
            night_hours=0.0,
            status=status,
        )
        values.update(kw)
        return TimeEntry(**values)

    return _make


@pytest.fixture
def fake_db():
    return FakeDatabase()
