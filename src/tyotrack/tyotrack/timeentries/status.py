from __future__ import annotations

from ..core.enums import EntryStatus
from ..core.exceptions import UnauthorizedStatusTransition


def transition(current: EntryStatus, target: EntryStatus) -> EntryStatus:
    """Return ``target`` if moving from ``current`` is allowed.

    Only PENDING -> APPROVED and PENDING -> REJECTED are legal; APPROVED and
    REJECTED are terminal.
    """
    if current == EntryStatus.PENDING:
        if target in (EntryStatus.APPROVED, EntryStatus.REJECTED):
            return target
        raise UnauthorizedStatusTransition(current, target)
    if current in (EntryStatus.APPROVED, EntryStatus.REJECTED):
        raise UnauthorizedStatusTransition(current, target)
    raise ValueError(f"Unknown entry status: {current!r}")
