from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..core.enums import EntryStatus, SegmentRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .assembler import link_split_parts
from .model import NewTimeEntry, TimeEntry
from .repository import TimeEntryRepository

_COLUMNS = """
    entry_id, user_id, company_id, project_id, workplace_id, work_date, start_time, end_time,
    total_hours, day_hours, evening_hours, night_hours, is_split, parent_entry_id, status,
    description, created_at
"""


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        user_id=int(r["user_id"]),
        company_id=int(r["company_id"]),
        project_id=int(r["project_id"]),
        workplace_id=r.get("workplace_id"),
        work_date=r["work_date"],
        start_time=str(r["start_time"]),
        end_time=str(r["end_time"]),
        total_hours=float(r["total_hours"]),
        day_hours=float(r["day_hours"] or 0),
        evening_hours=float(r["evening_hours"] or 0),
        night_hours=float(r["night_hours"] or 0),
        is_split=bool(r.get("is_split")),
        parent_entry_id=r.get("parent_entry_id"),
        status=EntryStatus(r["status"]),
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


def _insert(cur, e: NewTimeEntry) -> int:
    cur.execute(
        """
        INSERT INTO time_entries(
            user_id, company_id, project_id, workplace_id, work_date, start_time, end_time,
            total_hours, day_hours, evening_hours, night_hours, is_split, parent_entry_id, status, description
        )
        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            e.user_id,
            e.company_id,
            e.project_id,
            e.workplace_id,
            e.work_date,
            e.start_time,
            e.end_time,
            e.total_hours,
            e.day_hours,
            e.evening_hours,
            e.night_hours,
            int(e.is_split),
            e.parent_entry_id,
            e.status.value,
            e.description,
        ),
    )
    return int(cur.lastrowid)


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_entries(self, *, user_id: int, work_date: date, statuses: Iterable[EntryStatus]) -> Sequence[TimeEntry]:
        wanted = [s.value for s in statuses]
        if not wanted:
            return []
        placeholders = ",".join(["%s"] * len(wanted))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries
                WHERE user_id=%s AND work_date=%s AND status IN ({placeholders})
                ORDER BY start_time
                """,
                (user_id, work_date, *wanted),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def create_entry(self, entry: NewTimeEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return _insert(cur, entry)

    def create_entries(self, entries: Sequence[NewTimeEntry]) -> List[int]:
        pending = list(entries)
        ids: List[int] = []
        with db_cursor(self._conn_factory) as (_, cur):
            for i, e in enumerate(pending):
                new_id = _insert(cur, e)
                ids.append(new_id)
                if e.role == SegmentRole.FIRST_PART:
                    pending[i + 1 :] = link_split_parts(pending[i + 1 :], new_id)
        return ids

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries WHERE entry_id=%s", (entry_id,))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def update_status(self, *, entry_id: int, status: EntryStatus, expected: EntryStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE time_entries SET status=%s WHERE entry_id=%s AND status=%s",
                (status.value, entry_id, expected.value),
            )
            return cur.rowcount == 1

    def list_pending(self, *, company_id: Optional[int], limit: int) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            if company_id is None:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM time_entries WHERE status=%s ORDER BY work_date DESC LIMIT %s",
                    (EntryStatus.PENDING.value, int(limit)),
                )
            else:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS} FROM time_entries
                    WHERE company_id=%s AND status=%s
                    ORDER BY work_date DESC
                    LIMIT %s
                    """,
                    (company_id, EntryStatus.PENDING.value, int(limit)),
                )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_user(self, *, user_id: int, limit: int) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM time_entries
                WHERE user_id=%s
                ORDER BY work_date DESC, start_time DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_user_between(self, *, user_id: int, date_from: date, date_to: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM time_entries
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date, start_time
                """,
                (user_id, date_from, date_to),
            )
            return [_to_entry(r) for r in fetchall(cur)]
