from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .timeentries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .timeentries.service import TimeEntryService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    entries_repo: MySQLTimeEntryRepository
    settings_repo: MySQLSettingsRepository

    time_entry_service: TimeEntryService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    entries_repo = MySQLTimeEntryRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)

    return Container(
        conn=conn,
        entries_repo=entries_repo,
        settings_repo=settings_repo,
        time_entry_service=TimeEntryService(entries_repo, settings_repo),
    )
