"""Core value types for one word-guessing game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WORD_LENGTH = 5
MAX_ATTEMPTS = 5


class LetterOutcome(Enum):
    """Classification of one guessed letter against the target."""

    CORRECT = "Correct position"
    WRONG_POSITION = "Wrong position"
    INCORRECT = "Not in the word"

    @property
    def description(self) -> str:
        return self.value


class GameStatus(Enum):
    """Lifecycle state of a session."""

    IN_PROGRESS = "IN PROGRESS"
    WON = "WON"
    LOST = "LOST"


# One outcome per letter position, never mutated after evaluation.
GuessResult = tuple[LetterOutcome, ...]


@dataclass(frozen=True)
class SessionSummary:
    """Derived snapshot of a session's progress."""

    status: GameStatus
    attempts: int
    max_attempts: int
    remaining: int
    target: str | None = None

    def describe(self) -> str:
        """Render the summary as display lines."""
        lines = [
            f"Game Status: {self.status.value}",
            f"Attempts: {self.attempts}/{self.max_attempts}",
            f"Remaining: {self.remaining}",
        ]
        if self.target is not None:
            lines.append(f"Target Word: {self.target}")
        return "\n".join(lines)
