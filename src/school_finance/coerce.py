"""Best-effort coercion of loosely-typed spreadsheet cells.

Cells arrive as whatever the spreadsheet reader produced: numbers, numeric
strings, blanks, NaN or stray text. These helpers never raise; anything that
is not a usable value collapses to zero (amounts) or ``None`` (text).
"""

from __future__ import annotations

import math
import numbers
from typing import Any


def to_amount(value: Any) -> float:
    """Return ``value`` as a finite float, or ``0.0`` when it is not numeric.

    Args:
        value: Raw cell value (number, string, None, NaN, ...).

    Returns:
        The numeric amount. Booleans, blanks, unparsable text and non-finite
        numbers all count as ``0.0``.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, numbers.Real):
        amount = float(value)
    elif isinstance(value, str):
        text = value.strip()
        # ASCII digits only, no digit-group underscores
        if not text or not text.isascii() or "_" in text:
            return 0.0
        try:
            amount = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    return amount if math.isfinite(amount) else 0.0


def to_text(value: Any) -> str | None:
    """Return a stripped string for a text cell, ``None`` for blanks and NaN."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, float) and value.is_integer():
        # phone numbers and codes typed as numbers
        value = int(value)
    text = str(value).strip()
    return text or None
