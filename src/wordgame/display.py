"""ANSI terminal rendering for guesses and status messages."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from typing import TextIO

from .models import GuessResult, LetterOutcome

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
BLACK_TEXT = "\x1b[30m"
GREEN_BG = "\x1b[42m"
YELLOW_BG = "\x1b[43m"
GRAY_BG = "\x1b[47m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"

_BACKGROUNDS = {
    LetterOutcome.CORRECT: GREEN_BG,
    LetterOutcome.WRONG_POSITION: YELLOW_BG,
    LetterOutcome.INCORRECT: GRAY_BG,
}
_PLAIN_MARKERS = {
    LetterOutcome.CORRECT: "[{}]",
    LetterOutcome.WRONG_POSITION: "({})",
    LetterOutcome.INCORRECT: " {} ",
}
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def format_letter(letter: str, outcome: LetterOutcome, color: bool = True) -> str:
    """Render one letter tile."""
    upper = letter.upper()
    if not color:
        return _PLAIN_MARKERS[outcome].format(upper)
    return f"{_BACKGROUNDS[outcome]}{BLACK_TEXT} {upper} {RESET}"


def format_guess(guess: str, result: GuessResult, color: bool = True) -> str:
    """Render a full guess as space-separated tiles."""
    if len(guess) != len(result):
        raise ValueError(f"Guess length {len(guess)} does not match result length {len(result)}")
    return " ".join(format_letter(letter, outcome, color) for letter, outcome in zip(guess, result))


def _styled(prefix: str, message: str, color: bool) -> str:
    return f"{prefix}{message}{RESET}" if color else message


def error(message: str, color: bool = True) -> str:
    return _styled(RED + BOLD, f"ERROR: {message}", color)


def success(message: str, color: bool = True) -> str:
    return _styled(GREEN + BOLD, message, color)


def warning(message: str, color: bool = True) -> str:
    return _styled(YELLOW + BOLD, f"WARNING: {message}", color)


def info(message: str, color: bool = True) -> str:
    return _styled(BLUE, message, color)


def title(message: str, color: bool = True) -> str:
    return _styled(CYAN + BOLD, message, color)


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences."""
    return _ANSI_PATTERN.sub("", text)


def color_supported(stream: TextIO | None = None, environ: Mapping[str, str] | None = None) -> bool:
    """Guess whether ``stream`` is a terminal that understands ANSI colors.

    ``NO_COLOR`` (any value) and ``TERM=dumb`` always disable color.
    """
    env = os.environ if environ is None else environ
    if "NO_COLOR" in env:
        return False
    if env.get("TERM") == "dumb":
        return False
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())
