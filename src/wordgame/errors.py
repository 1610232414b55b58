"""Exceptions raised by the game core and word list."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import GameStatus


class ErrorKind(Enum):
    """Tag shared by all game errors so callers can dispatch on one field."""

    VALIDATION = "validation"
    GAME_OVER = "game_over"
    WORD_LIST = "word_list"


class ValidationError(ValueError):
    """A value failed the five-letter alphabetic word invariant."""

    kind = ErrorKind.VALIDATION

    def __init__(self, word: str, reason: str, argument: str = "word") -> None:
        super().__init__(f"Invalid {argument} '{word}': {reason}")
        self.word = word
        self.reason = reason
        self.argument = argument


class GameOverError(RuntimeError):
    """A guess was submitted to a session that no longer accepts guesses."""

    kind = ErrorKind.GAME_OVER

    def __init__(self, status: GameStatus, message: str = "Game is already over") -> None:
        super().__init__(message)
        self.status = status


class WordListError(Exception):
    """A word list could not be read or held no usable words."""

    kind = ErrorKind.WORD_LIST

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load words from '{source}': {reason}")
        self.source = source
        self.reason = reason
