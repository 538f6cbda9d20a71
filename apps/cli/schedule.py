# apps/cli/schedule.py
"""
Preview which word the daily selector picks over a range of dates.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Builds the schedule for --days dates starting at --start, with a progress bar.
  3) Writes:
       - CSV:  one row per date (key, hash, value, index, word)
       - JSON: manifest with config, word-list report, stats, git commit
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_words, pretty_summary, validate_wordlist
from packages.game.session import WORD_LENGTH
from packages.harness.core import iter_dates, schedule_row, schedule_stats
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    ap = argparse.ArgumentParser(description="dailyword: preview the daily word schedule")
    ap.add_argument("--words", required=True, help="path to the word list")
    ap.add_argument("--start", type=dt.date.fromisoformat, default=dt.date.today(),
                    help="first date (YYYY-MM-DD; default: today)")
    ap.add_argument("--days", type=int, default=365, help="number of dates to schedule")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--strict", action="store_true",
                    help="exit non-zero if the word list fails validation")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    args = ap.parse_args()

    # 1) Validate the list and print a one-liner summary
    rep = validate_wordlist(WORD_LENGTH, args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)
    if args.strict and not rep["passed"]:
        sys.exit(1)

    words = load_words(args.words, WORD_LENGTH)
    if not words:
        print("No usable words; nothing to schedule.", file=sys.stderr)
        sys.exit(1)

    # 2) Build the schedule with live progress
    dates = tqdm(iter_dates(args.start, args.days), total=args.days, ncols=80,
                 desc="Scheduling", unit="day", disable=args.no_progress)
    rows = [schedule_row(words, d) for d in dates]
    stats = schedule_stats(rows, len(words))

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"schedule_{run_id}.csv"
    manifest_path = outdir / f"schedule_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "stats": stats,
    }, str(manifest_path))

    print(f"{stats['distinct_words']} distinct words over {stats['days']} days "
          f"(max repeats {stats['max_repeats']}, coverage {stats['coverage']:.1%})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
