from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def parse_id(value: Any, field_name: str, *, required: bool = False) -> Optional[int]:
    if value in (None, ""):
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return parsed
