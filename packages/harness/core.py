"""
Daily schedule preview.

- build_schedule: which word the selector picks for each of the next `days` dates.
- schedule_stats: how evenly those picks cover the pool (repeats, coverage).

Used by apps/cli/schedule.py so maintainers can audit a word list before
shipping it. UI-agnostic, like the rest of packages/.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterator, List, Sequence

import numpy as np

from packages.engine.daily import date_key, daily_index, pseudo_random, rolling_hash


def iter_dates(start: dt.date, days: int) -> Iterator[dt.date]:
    if days <= 0:
        raise ValueError(f"days must be positive; got {days}")
    for offset in range(days):
        yield start + dt.timedelta(days=offset)


def schedule_row(words: Sequence[str], day: dt.date) -> Dict:
    """Every intermediate value of the selection for one date."""
    key = date_key(day)
    h = rolling_hash(key)
    idx = daily_index(day, len(words))
    return {
        "date": day.isoformat(),
        "key": key,
        "hash": h,
        "value": pseudo_random(h),
        "index": idx,
        "word": words[idx],
    }


def build_schedule(words: Sequence[str], start: dt.date, days: int) -> List[Dict]:
    """
    One row per date from `start` (inclusive) for `days` days.

    Raises ValueError on an empty word list: there is nothing to schedule.
    """
    if not words:
        raise ValueError("cannot build a schedule from an empty word list")
    return [schedule_row(words, d) for d in iter_dates(start, days)]


def schedule_stats(rows: List[Dict], pool_size: int) -> Dict:
    """
    Summarize a schedule.

    Returns:
        dict with keys:
            days, distinct_words, max_repeats, coverage (distinct / pool_size),
            mean_value (should sit near 0.5 for a uniform selector)
    """
    if not rows:
        return {"days": 0, "distinct_words": 0, "max_repeats": 0,
                "coverage": 0.0, "mean_value": 0.0}

    idx = np.fromiter((r["index"] for r in rows), dtype=np.int64, count=len(rows))
    values = np.fromiter((r["value"] for r in rows), dtype=float, count=len(rows))
    _, counts = np.unique(idx, return_counts=True)

    return {
        "days": len(rows),
        "distinct_words": int(counts.size),
        "max_repeats": int(counts.max()),
        "coverage": float(counts.size / pool_size) if pool_size else 0.0,
        "mean_value": float(values.mean()),
    }
