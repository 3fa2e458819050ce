from __future__ import annotations

from typing import Optional

from .enums import EntryStatus, RejectionReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a time string is not HH:mm."""


class EntryRejected(ValidationError):
    """Raised when a submission fails a temporal or overlap policy."""

    def __init__(self, reason: RejectionReason, message: Optional[str] = None):
        super().__init__(message or reason.value)
        self.reason = reason


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class UnauthorizedStatusTransition(DomainError):
    """Raised when an entry status change is not allowed."""

    def __init__(self, current: EntryStatus, target: EntryStatus):
        super().__init__(f"Cannot move entry from {current.value} to {target.value}")
        self.current = current
        self.target = target
