"""Guess evaluation against a target word."""

from __future__ import annotations

from collections import Counter

from .errors import ValidationError
from .models import WORD_LENGTH, GuessResult, LetterOutcome


def word_problem(word: object) -> str | None:
    """Return why a value is not a valid word, or ``None`` when it is."""
    if not isinstance(word, str):
        return "must be a string"
    if not word:
        return "cannot be empty"
    if len(word) != WORD_LENGTH:
        return f"must be exactly {WORD_LENGTH} letters long (was {len(word)})"
    if not (word.isascii() and word.isalpha()):
        return "must contain only alphabetic characters"
    return None


def is_valid_word(word: object) -> bool:
    """Check the word invariant without raising."""
    return word_problem(word) is None


def _check(word: object, argument: str) -> str:
    problem = word_problem(word)
    if problem is not None:
        raise ValidationError(str(word), problem, argument)
    return str(word).upper()


def normalize_word(raw: object, argument: str = "word") -> str:
    """Trim and uppercase raw input, raising ``ValidationError`` if it is not a word."""
    if isinstance(raw, str):
        raw = raw.strip()
    return _check(raw, argument)


def evaluate(guess: str, target: str) -> GuessResult:
    """Classify each letter of ``guess`` against ``target``.

    Exact matches are marked first and consume their letter from the target's
    remaining counts. Only then are the other positions checked, so a letter
    repeated in the guess more often than in the target yields ``INCORRECT``
    for the excess copies.
    """
    guess = _check(guess, "guess")
    target = _check(target, "target")

    remaining = Counter(target)
    outcomes = [
        LetterOutcome.CORRECT if guessed == expected else LetterOutcome.INCORRECT
        for guessed, expected in zip(guess, target)
    ]
    for guessed, outcome in zip(guess, outcomes):
        if outcome is LetterOutcome.CORRECT:
            remaining[guessed] -= 1

    for index, guessed in enumerate(guess):
        if outcomes[index] is LetterOutcome.CORRECT:
            continue
        if remaining[guessed] > 0:
            outcomes[index] = LetterOutcome.WRONG_POSITION
            remaining[guessed] -= 1

    return tuple(outcomes)


def is_exact_match(guess: str, target: str) -> bool:
    """Case-insensitive equality between two valid words."""
    return _check(guess, "guess") == _check(target, "target")


def count_correct(result: GuessResult | None) -> int:
    """Number of letters in the right position."""
    if not result:
        return 0
    return sum(1 for outcome in result if outcome is LetterOutcome.CORRECT)


def count_wrong_position(result: GuessResult | None) -> int:
    """Number of letters present in the target but misplaced."""
    if not result:
        return 0
    return sum(1 for outcome in result if outcome is LetterOutcome.WRONG_POSITION)


def describe_result(result: GuessResult | None) -> str:
    """One-line tally of a guess result."""
    if not result:
        return "No outcomes"
    correct = count_correct(result)
    wrong_position = count_wrong_position(result)
    incorrect = len(result) - correct - wrong_position
    return f"Correct: {correct}, Wrong position: {wrong_position}, Incorrect: {incorrect}"
