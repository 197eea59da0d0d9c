"""Coercion of raw form strings into numbers and lists.

Pure computation, no I/O.  Nothing here raises on bad input: unparseable
numbers fall back to a caller-supplied default and unparseable list items are
dropped, so every reachable form state still renders.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse(raw: str) -> float | None:
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    # "1e999" matches the pattern but overflows to inf
    if not math.isfinite(value):
        return None
    return value


def to_number(raw: str, fallback: float) -> float:
    """Parse *raw* as a finite number, returning *fallback* when it isn't one."""
    value = _parse(raw)
    return fallback if value is None else value


def to_list(raw: str) -> list[str]:
    """Split a comma-separated string, trimming items and dropping empty ones.

    Order is preserved and duplicates are kept.
    """
    return [item.strip() for item in raw.split(",") if item.strip()]


def to_number_list(raw: str) -> list[float]:
    """Like :func:`to_list`, keeping only the items that parse as finite numbers."""
    numbers = []
    for item in to_list(raw):
        value = _parse(item)
        if value is not None:
            numbers.append(value)
    return numbers


def format_number(value: float) -> str:
    """Render a number using the shortest round-trip digits.

    Integral values print without a trailing ``.0``.  Exponent notation only
    appears below 1e-6 or from 1e21 upwards, written as ``1e-7`` / ``1e+21``.
    """
    if value == 0:
        return "0"
    text = repr(float(value))
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text[:-2] if text.endswith(".0") else text
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"
