"""
Shareable text summary of a finished game.

    Daily Word 3/6: won in 3 guesses
    ⬛🟨⬛⬛🟩
    🟩🟨⬛🟩🟩
    🟩🟩🟩🟩🟩
    Play again tomorrow!

Header, one glyph line per submitted row, fixed trailer. Letters are never
included, only evaluation codes.
"""

from __future__ import annotations

from packages.engine.scoring import Evaluation
from packages.game.session import MAX_ROWS, Session

GLYPHS = {
    Evaluation.CORRECT: "🟩",
    Evaluation.CLOSE: "🟨",
    Evaluation.WRONG: "⬛",
}

DEFAULT_TITLE = "Daily Word"
TRAILER = "Play again tomorrow!"


def outcome_line(session: Session, title: str = DEFAULT_TITLE) -> str:
    k = len(session.submitted_rows())
    if session.is_won:
        noun = "guess" if k == 1 else "guesses"
        return f"{title} {k}/{MAX_ROWS}: won in {k} {noun}"
    return f"{title} X/{MAX_ROWS}: lost"


def encode(session: Session, title: str = DEFAULT_TITLE) -> str:
    """Render a finished session as share text. Does not modify `session`."""
    if not session.is_over:
        raise ValueError("share text is only available once the game is over")

    lines = [outcome_line(session, title)]
    for _, codes in session.submitted_rows():
        lines.append("".join(GLYPHS[Evaluation(c)] for c in codes))
    lines.append(TRAILER)
    return "\n".join(lines)
