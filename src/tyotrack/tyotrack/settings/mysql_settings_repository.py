from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_BACKDATE_LIMIT_DAYS
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, mysql_time_to_hhmm
from .model import CompanySettings, ShiftBoundaries, UserSettings
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_company_settings(self, company_id: int) -> Optional[CompanySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_id, backdate_limit_days, enforce_overlap, day_start, evening_start, night_start
                FROM companies
                WHERE company_id=%s
                """,
                (company_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            limit = r.get("backdate_limit_days")
            return CompanySettings(
                company_id=int(r["company_id"]),
                boundaries=ShiftBoundaries.from_strings(
                    mysql_time_to_hhmm(r.get("day_start")),
                    mysql_time_to_hhmm(r.get("evening_start")),
                    mysql_time_to_hhmm(r.get("night_start")),
                ),
                backdate_limit_days=DEFAULT_BACKDATE_LIMIT_DAYS if limit is None else int(limit),
                enforce_overlap=r.get("enforce_overlap") is None or bool(r["enforce_overlap"]),
            )

    def get_user_settings(self, user_id: int) -> Optional[UserSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, company_id, role, is_auto_approve FROM users WHERE user_id=%s",
                (user_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return UserSettings(
                user_id=int(r["user_id"]),
                company_id=r.get("company_id"),
                role=Role(r["role"]),
                is_auto_approve=bool(r.get("is_auto_approve")),
            )
