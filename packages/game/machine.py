"""
Game state machine: AWAITING_WORD -> PLAYING -> WON | LOST.

The Game object is what a shell (terminal app, web handler, notebook) talks
to. It reacts to discrete events delivered one at a time:

  - provide_words(words, day)   word list arrived (once)
  - word_source_failed(error)   word list could not be fetched
  - handle_key(token)           "a".."z", "submit"/"enter", "delete"/"backspace"
  - clear_notice()              the shell's notice timer ran out

Input is ignored until the secret is known and the saved game (if any) has
been reconciled. Every committed change to the session is persisted; storage
trouble is logged and play continues in memory.

Error notices are transient: the shell shows `game.notice` for NOTICE_SECONDS
and then calls clear_notice(). The Game does not run timers itself.
"""

from __future__ import annotations

import datetime as dt
import logging
from enum import Enum
from typing import Iterable, Optional

from packages.datasets.source import normalize_words
from packages.engine.daily import select_daily_word
from packages.engine.letters import LetterStateMap, aggregate
from packages.engine.scoring import DEFAULT_RULE, get_rule
from packages.share.encoder import DEFAULT_TITLE, encode
from packages.storage import MemoryStore, Store, reconcile, save
from . import rules
from .rules import Notice
from .session import WORD_LENGTH, Session

logger = logging.getLogger(__name__)

NOTICE_SECONDS = 2.0

SUBMIT_TOKENS = ("submit", "enter")
DELETE_TOKENS = ("delete", "backspace")


class Phase(Enum):
    AWAITING_WORD = "awaiting_word"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Game:
    """
    One player's daily game.

    Args:
      store : where the session is persisted (default: in-memory only)
      rule  : evaluation rule id, see packages.engine.scoring.RULES
    """

    def __init__(self, *, store: Store | None = None, rule: str = DEFAULT_RULE):
        self.store: Store = store if store is not None else MemoryStore()
        self.rule_id = rule
        self._rule = get_rule(rule)

        self.day: dt.date | None = None
        self.words: tuple[str, ...] = ()
        self._dictionary: frozenset[str] = frozenset()
        self._session: Optional[Session] = None
        self._notice: Optional[Notice] = None

    # -----------------------------
    # Read-only views
    # -----------------------------

    @property
    def phase(self) -> Phase:
        s = self._session
        if s is None:
            return Phase.AWAITING_WORD
        if s.is_won:
            return Phase.WON
        if s.is_over:
            return Phase.LOST
        return Phase.PLAYING

    @property
    def session(self) -> Optional[Session]:
        """A copy of the current session (None while awaiting the word)."""
        return None if self._session is None else self._session.copy()

    @property
    def secret(self) -> Optional[str]:
        return None if self._session is None else self._session.secret

    @property
    def notice(self) -> Optional[Notice]:
        return self._notice

    @property
    def letter_states(self) -> LetterStateMap:
        if self._session is None:
            return {}
        return aggregate(self._session.rows, self._session.evaluations)

    def share_text(self, title: str = DEFAULT_TITLE) -> str:
        """Share text for a finished game; ValueError before that."""
        if self._session is None:
            raise ValueError("no game in progress")
        return encode(self._session, title=title)

    # -----------------------------
    # Word source events
    # -----------------------------

    def provide_words(self, words: Iterable[str], day: dt.date | None = None) -> bool:
        """
        Deliver the valid-word list. Returns True once the game is ready.

        An empty list leaves the game waiting. A second delivery after the
        secret is known is ignored: the list is immutable for the session.
        """
        if self._session is not None:
            logger.info("Word list already loaded; ignoring new delivery")
            return True

        pool = tuple(normalize_words(words, WORD_LENGTH))
        day = day or dt.date.today()
        secret = select_daily_word(pool, day)
        if secret is None:
            logger.info("Word list is empty; still waiting for a word")
            return False

        self.day = day
        self.words = pool
        self._dictionary = frozenset(pool)
        self._session = reconcile(self.store, secret)
        logger.debug("Game ready for %s (%d words)", day.isoformat(), len(pool))
        return True

    def word_source_failed(self, error: BaseException | str) -> None:
        """Record a failed word fetch. The game stays in AWAITING_WORD."""
        logger.warning("Word source unavailable: %s", error)

    # -----------------------------
    # Player input
    # -----------------------------

    def _commit(self, new: Session) -> bool:
        if new == self._session:
            return False
        self._session = new
        save(self.store, new)
        return True

    def type_letter(self, ch: str) -> bool:
        """Type one letter into the active row. Returns True if the row changed."""
        if self.phase is not Phase.PLAYING:
            return False
        return self._commit(rules.type_letter(self._session, ch))

    def delete_last(self) -> bool:
        """Delete the last letter of the active row. Returns True if the row changed."""
        if self.phase is not Phase.PLAYING:
            return False
        return self._commit(rules.delete_last(self._session))

    def submit(self) -> Optional[Notice]:
        """
        Submit the active row.

        Ignored while a notice is still showing. A rejected row raises a new
        notice (also returned); an accepted row is evaluated and persisted.
        """
        if self.phase is not Phase.PLAYING or self._notice is not None:
            return None
        new, notice = rules.submit(self._session, self._dictionary, self._rule)
        if notice is not None:
            self._notice = notice
            return notice
        self._commit(new)
        return None

    def clear_notice(self) -> None:
        """Acknowledge the pending notice (the shell calls this after NOTICE_SECONDS)."""
        self._notice = None

    def handle_key(self, token: str) -> Optional[Notice]:
        """
        Dispatch one input event. Control tokens are case-insensitive; any
        other token is treated as a typed letter (non-letters are ignored).
        """
        key = token.lower()
        if key in SUBMIT_TOKENS:
            return self.submit()
        if key in DELETE_TOKENS:
            self.delete_last()
        else:
            self.type_letter(key)
        return None
