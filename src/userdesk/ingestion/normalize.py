"""Normalization helpers.

Centralizes defensive parsing of loosely typed remote and form values.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    """Parse *value* as an integer id; blanks and junk become ``None``."""
    parsed = safe_float(value)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)


def safe_str(value: Any) -> str:
    """Coerce *value* to text; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
