"""Stateful sequencing of guesses for one game."""

from __future__ import annotations

from .errors import GameOverError
from .evaluator import evaluate, is_exact_match, normalize_word
from .models import MAX_ATTEMPTS, GameStatus, GuessResult, SessionSummary


class GameSession:
    """One play-through from target assignment to a won or lost state.

    A finished session is read-only; create a new one to play again.
    """

    def __init__(self, target: str, max_attempts: int = MAX_ATTEMPTS) -> None:
        """Validate and store the target word."""
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1 (was {max_attempts})")
        self._target = normalize_word(target, "target")
        self._max_attempts = max_attempts
        self._guesses: list[str] = []
        self._results: list[GuessResult] = []
        self._attempts = 0
        self._status = GameStatus.IN_PROGRESS

    @property
    def target(self) -> str:
        return self._target

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def remaining_attempts(self) -> int:
        return self._max_attempts - self._attempts

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def guesses(self) -> tuple[str, ...]:
        return tuple(self._guesses)

    @property
    def results(self) -> tuple[GuessResult, ...]:
        return tuple(self._results)

    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    def is_won(self) -> bool:
        return self._status is GameStatus.WON

    def submit_guess(self, raw: str) -> GuessResult:
        """Validate, evaluate and record one guess.

        Raises ``GameOverError`` once the session is finished, whatever the
        input, and ``ValidationError`` for malformed input; neither path
        changes the session.
        """
        if self.is_over():
            raise GameOverError(self._status)
        if self._attempts >= self._max_attempts:
            raise GameOverError(self._status, "Maximum attempts exceeded")
        guess = normalize_word(raw, "guess")

        result = evaluate(guess, self._target)
        self._guesses.append(guess)
        self._results.append(result)
        self._attempts += 1

        if is_exact_match(guess, self._target):
            self._status = GameStatus.WON
        elif self._attempts >= self._max_attempts:
            self._status = GameStatus.LOST
        return result

    def guess_at(self, index: int) -> str:
        """Return the guess recorded for a zero-based attempt index."""
        self._check_index(index)
        return self._guesses[index]

    def result_at(self, index: int) -> GuessResult:
        """Return the result recorded for a zero-based attempt index."""
        self._check_index(index)
        return self._results[index]

    def entry(self, index: int) -> tuple[str, GuessResult]:
        self._check_index(index)
        return self._guesses[index], self._results[index]

    def _check_index(self, index: int) -> None:
        # Negative indexes are rejected rather than counted from the end.
        if not (0 <= index < len(self._guesses)):
            raise IndexError(f"Invalid attempt number: {index}")

    def summary(self) -> SessionSummary:
        """Derive a status snapshot; the target is revealed only once the game is over."""
        return SessionSummary(
            status=self._status,
            attempts=self._attempts,
            max_attempts=self._max_attempts,
            remaining=self.remaining_attempts,
            target=self._target if self.is_over() else None,
        )
