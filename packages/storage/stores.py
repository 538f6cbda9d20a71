"""
Durable key/value stores for session records.

A store exposes two methods:
  - read(slot)          -> dict | None   (None when nothing is stored)
  - write(slot, record) -> None

Stores raise on I/O or decode failures (OSError / ValueError). Deciding that
such failures are non-fatal is the reconciler's job, not the store's.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

DEFAULT_STATE_DIR = Path("~/.dailyword")
STATE_DIR_ENV = "DAILYWORD_STATE_DIR"


class Store(Protocol):
    def read(self, slot: str) -> Optional[Dict]: ...

    def write(self, slot: str, record: Dict) -> None: ...


class MemoryStore:
    """Dict-backed store; records are JSON round-tripped so callers can't alias them."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def read(self, slot: str) -> Optional[Dict]:
        raw = self._data.get(slot)
        return None if raw is None else json.loads(raw)

    def write(self, slot: str, record: Dict) -> None:
        self._data[slot] = json.dumps(record)


class JsonFileStore:
    """
    One UTF-8 JSON file per slot under `directory`.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so a crash mid-write leaves the previous record intact.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory).expanduser()

    @classmethod
    def default(cls) -> "JsonFileStore":
        """Store rooted at $DAILYWORD_STATE_DIR, or ~/.dailyword."""
        return cls(os.environ.get(STATE_DIR_ENV) or DEFAULT_STATE_DIR)

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def read(self, slot: str) -> Optional[Dict]:
        p = self.path_for(slot)
        if not p.exists():
            return None
        return json.loads(p.read_text(encoding="utf-8"))

    def write(self, slot: str, record: Dict) -> None:
        p = self.path_for(slot)
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{slot}.", suffix=".tmp", dir=p.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record, f, indent=2)
            os.replace(tmp, p)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
