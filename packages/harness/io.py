"""
Output helpers for schedule runs.

- write_csv:      one row per scheduled date.
- write_manifest: JSON manifest with config, word-list report and stats.
- timestamp_id:   compact UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Date keys like "1-2-2026" are prefixed with an apostrophe so spreadsheet apps
  don't turn them into dates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["date", "key", "hash", "value", "index", "word"]


def _excel_safe(text: str) -> str:
    return "'" + text if text else text


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize a schedule (see packages.harness.core.build_schedule) to CSV.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in rows:
            out = {k: r[k] for k in CSV_FIELDS}
            out["key"] = _excel_safe(r["key"])
            out["value"] = round(float(r["value"]), 6)
            w.writerow(out)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the schedule manifest (run id, args, word-list report, stats); dates become ISO strings."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for output filenames, e.g. 20260820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Commit the word list was scheduled from; 'unknown' outside a git checkout."""
    cmd = ["git", "rev-parse", "--short", "HEAD"]
    try:
        out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
