# apps/cli/play.py
"""
Play today's puzzle in the terminal.

This script:
  1) Loads the word list (local file or URL).
  2) Picks today's word (or --date) and resumes any saved game for it.
  3) Reads one guess per line from stdin and prints the board after each.
  4) Prints share text once the game is over.

Line commands:
  <word>   type and submit a guess
  !del     delete the last letter of the active row
  !quit    leave (progress is saved)

Usage:
    python -m apps.cli.play --words data/words_5.txt
    python -m apps.cli.play --url https://example.org/words.txt --date 2026-10-19
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import string
import sys
import time

import requests

from packages.datasets import fetch_words, load_words
from packages.engine.scoring import RULES, DEFAULT_RULE, Evaluation
from packages.game.machine import NOTICE_SECONDS, Game, Phase
from packages.game.session import MAX_ROWS, WORD_LENGTH
from packages.share.encoder import GLYPHS
from packages.storage import JsonFileStore, MemoryStore

_KEY_MARKS = {Evaluation.CORRECT: "+", Evaluation.CLOSE: "?", Evaluation.WRONG: "."}


def render_board(game: Game) -> str:
    s = game.session
    lines = []
    for i in range(MAX_ROWS):
        letters = s.rows[i].upper().ljust(WORD_LENGTH, "_")
        codes = s.evaluations[i]
        glyphs = "".join(GLYPHS[c] for c in codes) if codes else ""
        marker = ">" if i == s.active_row and not s.is_over else " "
        lines.append(f"{marker} {' '.join(letters)}  {glyphs}")
    return "\n".join(lines)


def render_keyboard(game: Game) -> str:
    """a-z with '+' correct, '?' close, '.' wrong, blank unknown."""
    states = game.letter_states
    top = " ".join(string.ascii_uppercase)
    marks = " ".join(_KEY_MARKS.get(states.get(ch), " ") for ch in string.ascii_lowercase)
    return f"{top}\n{marks}"


def _wait_out_notice(game: Game, shown_at: float | None) -> None:
    """Keep a pending notice up for NOTICE_SECONDS, then acknowledge it."""
    if game.notice is None or shown_at is None:
        return
    remaining = NOTICE_SECONDS - (time.monotonic() - shown_at)
    if remaining > 0:
        time.sleep(remaining)
    game.clear_notice()


def _enter_word(game: Game, word: str):
    while game.session.active_guess:
        game.delete_last()
    for ch in word:
        game.type_letter(ch)
    return game.submit()


def main():
    ap = argparse.ArgumentParser(description="dailyword: play today's puzzle")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--words", help="path to the word list (one word per line)")
    src.add_argument("--url", help="URL serving the word list")
    ap.add_argument("--date", type=dt.date.fromisoformat,
                    help="play the puzzle for this date (YYYY-MM-DD; default: today)")
    ap.add_argument("--rule", default=DEFAULT_RULE, choices=sorted(RULES),
                    help="letter evaluation rule")
    ap.add_argument("--state-dir", help="where to keep the saved game "
                                        "(default: $DAILYWORD_STATE_DIR or ~/.dailyword)")
    ap.add_argument("--no-save", action="store_true", help="keep progress in memory only")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.no_save:
        store = MemoryStore()
    elif args.state_dir:
        store = JsonFileStore(args.state_dir)
    else:
        store = JsonFileStore.default()

    game = Game(store=store, rule=args.rule)

    # 1) Word source
    try:
        words = load_words(args.words, WORD_LENGTH) if args.words \
            else fetch_words(args.url, WORD_LENGTH)
    except (OSError, requests.RequestException) as e:
        game.word_source_failed(e)
        print(f"Could not load the word list: {e}", file=sys.stderr)
        sys.exit(1)

    # 2) Secret + saved game
    if not game.provide_words(words, args.date):
        print("The word list is empty; nothing to play.", file=sys.stderr)
        sys.exit(1)

    print(f"Daily word for {game.day.isoformat()} ({len(game.words)} words in the list)")

    # 3) Input loop
    shown_at = None
    while game.phase is Phase.PLAYING:
        print(render_board(game))
        print(render_keyboard(game))
        try:
            line = input("guess> ").strip().lower()
        except EOFError:
            break

        _wait_out_notice(game, shown_at)

        if line == "!quit":
            break
        if line == "!del":
            game.delete_last()
            continue
        if len(line) != WORD_LENGTH:
            print(f"Guesses are {WORD_LENGTH} letters.")
            continue

        notice = _enter_word(game, line)
        if notice is not None:
            print(f"** {notice.message} **")
            shown_at = time.monotonic()

    # 4) Result
    if game.phase in (Phase.WON, Phase.LOST):
        print(render_board(game))
        if game.phase is Phase.LOST:
            print(f"The word was {game.secret.upper()}.")
        print()
        print(game.share_text())


if __name__ == "__main__":
    main()
