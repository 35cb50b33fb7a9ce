"""Shared coercion helpers for builder inputs and settings."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

TimestampLike = Union[datetime, int, float, str]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str, *, default: bool) -> bool:
    """Parse a boolean flag string, falling back to the provided default."""
    stripped = value.strip().lower()
    if not stripped:
        return default
    if stripped in _TRUE_VALUES:
        return True
    if stripped in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def parse_list(value: str) -> List[str]:
    """Split a comma-separated string into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def coerce_timestamp(value: Optional[TimestampLike]) -> Optional[datetime]:
    """Normalize epoch numbers and ISO-8601 strings to ``datetime``."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value)
    return datetime.fromisoformat(value.strip())


def epoch_seconds(value: Optional[TimestampLike]) -> Optional[int]:
    """Return integer epoch seconds for ``value`` or ``None`` when unset."""
    moment = coerce_timestamp(value)
    if moment is None:
        return None
    return int(moment.timestamp())
