from __future__ import annotations

from typing import Optional


def check_required(value: Optional[str], label: str) -> Optional[str]:
    if not value or not value.strip():
        return f"{label} is required"
    return None


def check_max_length(value: Optional[str], label: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        return f"{label} cannot exceed {max_len} characters"
    return None
