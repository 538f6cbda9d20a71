"""
Session: everything that describes one day's game.

A Session is a plain value. Turn operations in packages.game.rules build a new
Session instead of mutating the one they were given; the shell (or the Game
state machine) holds the current value and threads it through.

Persisted record shape (one record, one fixed storage slot):

    {
      "secret": "genie",
      "rows": ["crane", "", "", "", "", ""],
      "evaluations": [[1, 1, 1, 2, 3], [], [], [], [], []],
      "activeRowIndex": 1,
      "isOver": false,
      "isWon": false
    }

Unset evaluations serialize as []. Codes are 1=Wrong, 2=Close, 3=Correct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from packages.engine.scoring import Evaluation, EvaluationRow

# Single source of truth for board dimensions.
WORD_LENGTH = 5
MAX_ROWS = 6


def _lower_letters(text: str) -> bool:
    """Only a-z; the same alphabet typing accepts."""
    return text.isascii() and text.isalpha() and text.islower()


def _empty_rows() -> List[str]:
    return [""] * MAX_ROWS


def _empty_evaluations() -> List[Optional[EvaluationRow]]:
    return [None] * MAX_ROWS


@dataclass
class Session:
    secret: str
    rows: List[str] = field(default_factory=_empty_rows)
    evaluations: List[Optional[EvaluationRow]] = field(default_factory=_empty_evaluations)
    active_row: int = 0
    is_over: bool = False
    is_won: bool = False

    @classmethod
    def fresh(cls, secret: str) -> "Session":
        """A brand-new session bound to `secret`."""
        secret = secret.strip().lower()
        if len(secret) != WORD_LENGTH or not _lower_letters(secret):
            raise ValueError(f"secret must be {WORD_LENGTH} letters; got {secret!r}")
        return cls(secret=secret)

    @property
    def active_guess(self) -> str:
        return self.rows[self.active_row]

    def copy(self) -> "Session":
        """Copy deep enough that editing rows/evaluations never touches the original."""
        return Session(
            secret=self.secret,
            rows=list(self.rows),
            evaluations=[list(e) if e is not None else None for e in self.evaluations],
            active_row=self.active_row,
            is_over=self.is_over,
            is_won=self.is_won,
        )

    def submitted_rows(self) -> List[Tuple[str, EvaluationRow]]:
        """(guess, evaluation) pairs for every submitted row, in order."""
        return [(r, e) for r, e in zip(self.rows, self.evaluations) if e is not None]

    # -----------------------------
    # Persistence
    # -----------------------------

    def to_record(self) -> Dict:
        """JSON-serializable record (see module docstring for the shape)."""
        return {
            "secret": self.secret,
            "rows": list(self.rows),
            "evaluations": [[int(c) for c in e] if e is not None else [] for e in self.evaluations],
            "activeRowIndex": self.active_row,
            "isOver": self.is_over,
            "isWon": self.is_won,
        }

    @classmethod
    def from_record(cls, record: Dict) -> "Session":
        """
        Rebuild a Session from a stored record.

        Raises ValueError if the record does not have the expected shape or
        breaks a board invariant; callers treat that like a missing record.
        """
        if not isinstance(record, dict):
            raise ValueError(f"record must be an object; got {type(record).__name__}")
        try:
            secret = record["secret"]
            rows = record["rows"]
            evaluations = record["evaluations"]
            active_row = record["activeRowIndex"]
            is_over = record["isOver"]
            is_won = record["isWon"]
        except KeyError as e:
            raise ValueError(f"record is missing field {e.args[0]!r}") from e

        if not isinstance(secret, str) or len(secret) != WORD_LENGTH or not _lower_letters(secret):
            raise ValueError(f"bad secret: {secret!r}")
        if not isinstance(rows, list) or len(rows) != MAX_ROWS:
            raise ValueError(f"rows must be a list of {MAX_ROWS}")
        if not isinstance(evaluations, list) or len(evaluations) != MAX_ROWS:
            raise ValueError(f"evaluations must be a list of {MAX_ROWS}")
        if not isinstance(active_row, int) or isinstance(active_row, bool) \
                or not 0 <= active_row < MAX_ROWS:
            raise ValueError(f"bad activeRowIndex: {active_row!r}")
        if not isinstance(is_over, bool) or not isinstance(is_won, bool):
            raise ValueError("isOver/isWon must be booleans")

        parsed: List[Optional[EvaluationRow]] = []
        for i, (row, codes) in enumerate(zip(rows, evaluations)):
            if not isinstance(row, str) or len(row) > WORD_LENGTH or (row and not _lower_letters(row)):
                raise ValueError(f"bad row {i}: {row!r}")
            if not isinstance(codes, list):
                raise ValueError(f"bad evaluation {i}: {codes!r}")
            if not codes:
                parsed.append(None)
                continue
            if len(codes) != WORD_LENGTH or len(row) != WORD_LENGTH:
                raise ValueError(f"evaluation {i} does not match a full row")
            try:
                parsed.append([Evaluation(c) for c in codes])
            except ValueError as e:
                raise ValueError(f"bad evaluation code in row {i}: {codes!r}") from e

        session = cls(secret=secret, rows=list(rows), evaluations=parsed,
                      active_row=active_row, is_over=is_over, is_won=is_won)
        _check_invariants(session)
        return session


def _check_invariants(s: Session) -> None:
    """Reject restored sessions that could not have been produced by play."""
    for i in range(MAX_ROWS):
        submitted = i < s.active_row or (i == s.active_row and s.is_over)
        if submitted != (s.evaluations[i] is not None):
            raise ValueError(f"evaluation {i} set={s.evaluations[i] is not None}, expected {submitted}")
        if i > s.active_row and s.rows[i]:
            raise ValueError(f"row {i} is beyond the active row but not empty")
    if s.is_won and not (s.is_over and s.rows[s.active_row] == s.secret):
        raise ValueError("isWon requires isOver and a winning last row")
    if s.is_over and not s.is_won and s.active_row != MAX_ROWS - 1:
        raise ValueError("a lost session must have used every row")
