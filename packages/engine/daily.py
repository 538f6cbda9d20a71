"""
Deterministic daily word selection.

Everyone on the same calendar date with the same word list gets the same
secret, with no shared state:

  1) date -> canonical key "day-month-year" (no zero padding), e.g. "19-10-2026"
  2) key  -> 31-polynomial rolling hash with signed 32-bit wraparound
  3) hash -> frac(sin(hash) * 10000), a value in [0, 1)
  4) value -> words[floor(value * len(words))]

Step 2 must wrap exactly like a JS `hash | 0` after every character, otherwise
saved sessions and shared results from other clients stop matching.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Optional, Sequence

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def date_key(day: dt.date) -> str:
    """Canonical string for a calendar date: "{day}-{month}-{year}", month 1-based."""
    return f"{day.day}-{day.month}-{day.year}"


def rolling_hash(text: str) -> int:
    """h = h*31 + code point, wrapped to a signed 32-bit int after each step."""
    h = 0
    for ch in text:
        h = _to_int32(h * 31 + ord(ch))
    return h


def pseudo_random(seed: int) -> float:
    """Map an integer seed to [0, 1) via the fractional part of sin(seed) * 10000."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def daily_index(day: dt.date, pool_size: int) -> int:
    """Index into a pool of `pool_size` words for `day`."""
    if pool_size <= 0:
        raise ValueError(f"pool_size must be positive; got {pool_size}")
    idx = math.floor(pseudo_random(rolling_hash(date_key(day))) * pool_size)
    # frac() is < 1, but float rounding in the product can still land on pool_size
    return min(idx, pool_size - 1)


def select_daily_word(words: Sequence[str], day: dt.date | None = None) -> Optional[str]:
    """
    Pick the secret for `day` (default: today's local date) from `words`.

    Returns None when `words` is empty: selection is deferred until a
    non-empty list arrives.
    """
    if not words:
        return None
    if day is None:
        day = dt.date.today()
    return words[daily_index(day, len(words))]
