"""
Restore-or-initialize for the daily session.

- load:      stored session for `secret`, or None (missing, stale, broken)
- save:      persist the whole session into the single fixed slot
- reconcile: load, falling back to a fresh session

Storage failures never reach gameplay: they are logged here and the game
keeps running in memory.
"""

from __future__ import annotations

import logging
from typing import Optional

from packages.game.session import Session
from .stores import Store

logger = logging.getLogger(__name__)

# One active game at a time; past days are not kept.
STORAGE_SLOT = "game_state"


def load(store: Store, secret: str) -> Optional[Session]:
    """
    Return the stored session if it belongs to `secret`.

    A record for a different secret (a new day, or a changed word list) is
    stale and ignored entirely.
    """
    try:
        record = store.read(STORAGE_SLOT)
    except (OSError, ValueError) as e:
        logger.warning("Could not read saved game: %s", e)
        return None

    if record is None:
        return None

    if not isinstance(record, dict) or record.get("secret") != secret:
        logger.info("Discarding stale saved game")
        return None

    try:
        return Session.from_record(record)
    except ValueError as e:
        logger.warning("Discarding malformed saved game: %s", e)
        return None


def save(store: Store, session: Session) -> bool:
    """Write `session` as one record. Returns False (and logs) on failure."""
    try:
        store.write(STORAGE_SLOT, session.to_record())
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not save game: %s", e)
        return False
    return True


def reconcile(store: Store, secret: str) -> Session:
    """Resume the stored game for `secret`, or start a fresh one."""
    restored = load(store, secret)
    if restored is not None:
        logger.debug("Resumed saved game at row %d", restored.active_row)
        return restored
    return Session.fresh(secret)
