"""
Turn operations: type a letter, delete a letter, submit the active row.

Each function takes a Session and returns a new Session; the input is never
modified. Operations on a finished session, or inputs that do not apply
(non-letters, a full row, an empty row), return an unchanged copy so callers
can compare before/after to decide whether anything was committed.

Submission checks run in this order and the first failure wins:
  1) the word must be in the word list  -> Notice("not_in_word_list", shake)
  2) the word must not repeat an earlier submitted row -> Notice("already_guessed")
On failure the row is not advanced and stays editable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Container, Optional, Tuple

from packages.engine.scoring import EvaluationRow, evaluate
from packages.engine.validation import is_letter, validate_guess
from .session import MAX_ROWS, WORD_LENGTH, Session


@dataclass(frozen=True)
class Notice:
    """A transient, user-visible rejection message."""
    kind: str
    message: str
    shake: bool = False


NOT_IN_WORD_LIST = Notice("not_in_word_list", "Not in word list", shake=True)
ALREADY_GUESSED = Notice("already_guessed", "Already guessed")


def type_letter(session: Session, ch: str) -> Session:
    """Append `ch` (lowercased) to the active row if it is a letter and there is room."""
    out = session.copy()
    if out.is_over or not is_letter(ch):
        return out
    if len(out.active_guess) >= WORD_LENGTH:
        return out
    out.rows[out.active_row] += ch.lower()
    return out


def delete_last(session: Session) -> Session:
    """Drop the last letter of the active row; no-op when it is empty."""
    out = session.copy()
    if out.is_over or not out.active_guess:
        return out
    out.rows[out.active_row] = out.active_guess[:-1]
    return out


def submit(session: Session,
           words: Container[str],
           rule: Callable[[str, str], EvaluationRow] = evaluate,
           ) -> Tuple[Session, Optional[Notice]]:
    """
    Submit the active row.

    Args:
      session : current session
      words   : the valid-word dictionary (a frozenset in practice)
      rule    : evaluation rule, see packages.engine.scoring.RULES

    Returns:
      (new_session, notice). `notice` is None when the row was accepted or when
      the row was not full yet (nothing happens in that case).
    """
    out = session.copy()
    if out.is_over:
        return out, None

    guess = out.active_guess
    if len(guess) != WORD_LENGTH:
        return out, None

    if not validate_guess(guess, words, WORD_LENGTH):
        return out, NOT_IN_WORD_LIST

    if guess in out.rows[:out.active_row]:
        return out, ALREADY_GUESSED

    out.evaluations[out.active_row] = rule(guess, out.secret)

    if guess == out.secret:
        out.is_won = True
        out.is_over = True
    elif out.active_row + 1 == MAX_ROWS:
        # Out of rows: lose, and the index stays on the last row.
        out.is_over = True
    else:
        out.active_row += 1

    return out, None
