"""
Word sources: where the valid-word list comes from.

- load_words:  a local text file, one word per line
- fetch_words: an HTTP URL serving either plain text or an HTML page

Both return lowercase a-z words of length N, in source order, de-duplicated.
Order matters: the daily selector indexes into this list, so two clients
only agree on the secret if they load the same words in the same order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def read_lines(p: Path | str) -> List[str]:
    """Lines of a UTF-8 text file without line endings. FileNotFoundError if missing."""
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def write_words(words: Iterable[str], p: Path | str) -> str:
    """Write one word per line (trailing newline included); returns the path written."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(tokens: Iterable[str], N: int) -> List[str]:
    """Lowercase, keep a-z tokens of length N, drop repeats (first occurrence wins)."""
    seen, out = set(), []
    for t in tokens:
        w = t.strip().lower()
        if len(w) != N or not (w.isascii() and w.isalpha()):
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def load_words(path: Path | str, N: int) -> List[str]:
    """Read a newline-separated word file. Raises FileNotFoundError if missing."""
    words = normalize_words(read_lines(path), N)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def _page_tokens(resp: requests.Response) -> List[str]:
    ctype = resp.headers.get("Content-Type", "")
    if "html" in ctype:
        soup = BeautifulSoup(resp.text, "html.parser")
        return soup.get_text("\n", strip=True).split()
    return resp.text.split()


def fetch_words(url: str, N: int, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """
    Download a word list. Network and HTTP errors propagate
    (requests.RequestException); callers decide whether to retry.
    """
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    words = normalize_words(_page_tokens(r), N)
    logger.info("Fetched %d words from %s", len(words), url)
    return words
