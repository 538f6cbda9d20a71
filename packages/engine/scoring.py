"""
Per-letter evaluation of a guess against the secret word.

Conventions:
  - CORRECT (3) : correct letter in the correct position
  - CLOSE   (2) : letter occurs somewhere else in the secret
  - WRONG   (1) : letter not in the secret

The integer values double as the persisted codes and as the severity order
used by the keyboard hints (WRONG < CLOSE < CORRECT).

Two rules are available:
  - "containment" (default): single pass, each guess letter is checked on its
    own against the whole secret. Repeated guess letters are NOT capped by the
    secret's multiplicity, so "eerie" vs "genie" marks the first 'e' CLOSE.
  - "multiset": canonical two-pass scoring that consumes matched letters.
"""

from collections import Counter
from enum import IntEnum
from typing import Callable, Dict, List


class Evaluation(IntEnum):
    WRONG = 1
    CLOSE = 2
    CORRECT = 3


EvaluationRow = List[Evaluation]

_PATTERN_CHARS = {Evaluation.CORRECT: "G", Evaluation.CLOSE: "Y", Evaluation.WRONG: "-"}


def _normalize_pair(guess: str, secret: str):
    guess = guess.strip().lower()
    secret = secret.strip().lower()
    if len(guess) != len(secret):
        raise ValueError(f"guess {guess!r} and secret {secret!r} must be the same length")
    return guess, secret


def evaluate(guess: str, secret: str) -> EvaluationRow:
    """
    Score `guess` against `secret` with the single-pass containment rule.

    Examples:
      evaluate("react", "crane") -> [CLOSE, CLOSE, CORRECT, CLOSE, WRONG]
      evaluate("eerie", "genie") -> [CLOSE, CORRECT, WRONG, CORRECT, CORRECT]
    """
    guess, secret = _normalize_pair(guess, secret)

    row: EvaluationRow = []
    for g, s in zip(guess, secret):
        if g == s:
            row.append(Evaluation.CORRECT)
        elif g in secret:
            row.append(Evaluation.CLOSE)
        else:
            row.append(Evaluation.WRONG)
    return row


def evaluate_strict(guess: str, secret: str) -> EvaluationRow:
    """
    Score `guess` against `secret` respecting letter multiplicities.

    Examples:
      evaluate_strict("eerie", "genie") -> [WRONG, CORRECT, WRONG, CORRECT, CORRECT]
    """
    guess, secret = _normalize_pair(guess, secret)

    row = [Evaluation.WRONG] * len(guess)

    # Pass 1: greens, and count the secret letters left unmatched.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            row[i] = Evaluation.CORRECT
        else:
            remaining[s] += 1

    # Pass 2: yellows only while the letter still has remaining availability.
    for i, g in enumerate(guess):
        if row[i] == Evaluation.CORRECT:
            continue
        if remaining[g] > 0:
            row[i] = Evaluation.CLOSE
            remaining[g] -= 1

    return row


RULES: Dict[str, Callable[[str, str], EvaluationRow]] = {
    "containment": evaluate,
    "multiset": evaluate_strict,
}

DEFAULT_RULE = "containment"


def get_rule(rule_id: str) -> Callable[[str, str], EvaluationRow]:
    """Look up an evaluation rule by id."""
    try:
        return RULES[rule_id]
    except KeyError as e:
        raise ValueError(f"Unknown evaluation rule: {rule_id}. Available: {sorted(RULES)}") from e


def pattern_string(row: EvaluationRow) -> str:
    """Render a row as 'G'/'Y'/'-' characters, e.g. for CSV columns or logs."""
    return "".join(_PATTERN_CHARS[Evaluation(code)] for code in row)
