from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class EntryStatus(str, Enum):
    """Approval lifecycle of a time entry."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class SegmentRole(str, Enum):
    """Position of a segment within a logged shift."""

    NONE = "NONE"
    FIRST_PART = "FIRST_PART"
    SECOND_PART = "SECOND_PART"


class RejectionReason(str, Enum):
    FUTURE_DATE = "FUTURE_DATE"
    BACKDATE_EXCEEDED = "BACKDATE_EXCEEDED"
    OVERLAP = "OVERLAP"
