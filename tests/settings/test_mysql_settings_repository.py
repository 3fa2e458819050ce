from datetime import timedelta

from src.tyotrack.tyotrack.core.enums import Role
from src.tyotrack.tyotrack.settings.model import ShiftBoundaries
from src.tyotrack.tyotrack.settings.mysql_settings_repository import MySQLSettingsRepository


def _company_row(**overrides):
    row = {
        "company_id": 1,
        "backdate_limit_days": 14,
        "enforce_overlap": 0,
        "day_start": timedelta(hours=7),
        "evening_start": "16:30:00",
        "night_start": timedelta(hours=21),
    }
    row.update(overrides)
    return row


def test_company_row_mapping(fake_db):
    fake_db.rows = [_company_row()]

    settings = MySQLSettingsRepository(fake_db).get_company_settings(1)

    assert settings.company_id == 1
    assert settings.boundaries == ShiftBoundaries(day_start=420, evening_start=990, night_start=1260)
    assert settings.backdate_limit_days == 14
    assert settings.enforce_overlap is False
    assert fake_db.executed[-1][1] == (1,)


def test_zero_backdate_limit_is_kept(fake_db):
    fake_db.rows = [_company_row(backdate_limit_days=0)]

    assert MySQLSettingsRepository(fake_db).get_company_settings(1).backdate_limit_days == 0


def test_null_columns_fall_back_to_defaults(fake_db):
    fake_db.rows = [
        _company_row(backdate_limit_days=None, enforce_overlap=None, day_start=None, evening_start=None, night_start=None)
    ]

    settings = MySQLSettingsRepository(fake_db).get_company_settings(1)

    assert settings.backdate_limit_days == 30
    assert settings.enforce_overlap is True
    assert settings.boundaries == ShiftBoundaries()


def test_unknown_company(fake_db):
    assert MySQLSettingsRepository(fake_db).get_company_settings(9) is None


def test_user_row_mapping(fake_db):
    fake_db.rows = [{"user_id": 5, "company_id": 1, "role": "ADMIN", "is_auto_approve": 1}]

    user = MySQLSettingsRepository(fake_db).get_user_settings(5)

    assert user.user_id == 5
    assert user.company_id == 1
    assert user.role == Role.ADMIN
    assert user.is_auto_approve is True
