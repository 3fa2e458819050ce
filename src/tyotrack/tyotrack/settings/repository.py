from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanySettings, UserSettings


class SettingsRepository(Protocol):
    """Read-only access to per-company and per-user policy settings."""

    def get_company_settings(self, company_id: int) -> Optional[CompanySettings]:
        raise NotImplementedError

    def get_user_settings(self, user_id: int) -> Optional[UserSettings]:
        raise NotImplementedError
