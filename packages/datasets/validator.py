"""
Word-list validator.

The game uses a single list both as the daily-word pool and as the guess
dictionary, so this checks one file:

- Formatting rules (lowercase, a–z only, exact length N, one per line).
- Duplicates and invalid lines; SHA-256 of the raw file.
- Returns a machine-readable dict (for manifests) and a pretty one-line summary.

The SHA matters beyond hygiene: the daily selector indexes into the list, so
two deployments pick the same secret only if their list hashes match.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    N: int
    path: str
    exists: bool
    count: int                # valid lines, duplicates included
    unique_count: int
    invalid_lines: int
    sha256: str               # of the raw bytes; "" when missing
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split a file into (valid_words, invalid_count).

    A line is valid when it is already lowercase, ASCII a–z only and exactly N
    long. Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (WordListReport fields). `passed` is
    strict: the file exists, is non-empty, and has no invalid or duplicate lines.
    """
    p = Path(path)

    if not p.exists():
        rep = WordListReport(N=N, path=path, exists=False, count=0, unique_count=0,
                             invalid_lines=0, sha256="", passed=False,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
