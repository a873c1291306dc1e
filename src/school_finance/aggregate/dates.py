"""Date resolution: map a raw date cell to a zero-based month index.

Accepted shapes:
- spreadsheet date serials (days since 1899-12-30, read in UTC)
- ``date``/``datetime`` values (pandas parses date-formatted cells itself)
- strings with three numeric parts separated by ``/`` or ``-``

Anything else is unresolved (``None``) and is left out of the date-bucketed
views only.
"""

from __future__ import annotations

import math
import numbers
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any

SERIAL_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)

_SEPARATORS = re.compile(r"[/-]")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def _leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def month_from_serial(serial: float) -> int | None:
    """Return the UTC month index of a spreadsheet date serial."""
    if not math.isfinite(serial):
        return None
    try:
        return (SERIAL_EPOCH + timedelta(days=serial)).month - 1
    except OverflowError:
        return None


def month_from_string(text: str) -> int | None:
    """Return the month index of a ``DD/MM/YYYY`` or ``YYYY-MM-DD`` string.

    Both layouts read the month from the second part: a first part above 12
    means a year-first layout, otherwise it is taken as the day. Day-first
    versus month-first (``MM/DD``) is not distinguished.
    """
    parts = _SEPARATORS.split(text)
    if len(parts) != 3:
        return None

    first = _leading_int(parts[0])
    second = _leading_int(parts[1])
    if first is None or second is None:
        return None

    if first > 12:
        month = second - 1  # YYYY-MM-DD
    else:
        month = second - 1  # DD/MM/YYYY

    return month if 0 <= month < 12 else None


def resolve_month_index(value: Any) -> int | None:
    """Return the zero-based month (0-11) of a raw date cell, or ``None``.

    Args:
        value: Serial number, date/datetime, date string, or anything else.

    Returns:
        Month index, or ``None`` when the value cannot be resolved.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        month = value.month
        # NaT reports a NaN month
        return month - 1 if isinstance(month, int) else None
    if isinstance(value, numbers.Real):
        return month_from_serial(float(value))
    if isinstance(value, str):
        return month_from_string(value)
    return None
