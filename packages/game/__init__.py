from .session import MAX_ROWS, WORD_LENGTH, Session
from .rules import Notice, delete_last, submit, type_letter

# Game lives in packages.game.machine (it imports packages.storage, which
# imports Session from here).

__all__ = ["MAX_ROWS", "WORD_LENGTH", "Session", "Notice", "delete_last", "submit", "type_letter"]
