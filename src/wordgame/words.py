"""Load word lists from bundled resources or user files."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path

from .errors import WordListError
from .evaluator import is_valid_word

CONTENT_PACKAGE = "wordgame.content"
WORD_FILE = "words.txt"


class WordList:
    """Ordered, de-duplicated collection of valid uppercase words."""

    def __init__(self, words: Iterable[object], source: str = "<memory>") -> None:
        """Keep only valid string words; raise ``WordListError`` if none remain."""
        seen: dict[str, None] = {}
        for word in words:
            if not isinstance(word, str):
                continue
            candidate = word.strip().upper()
            if is_valid_word(candidate):
                seen.setdefault(candidate, None)
        if not seen:
            raise WordListError(source, "No valid words found")
        self.source = source
        self._words = tuple(seen)
        self._lookup = frozenset(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def contains(self, word: object) -> bool:
        """Case-insensitive membership; non-strings are never members."""
        if not isinstance(word, str):
            return False
        return word.strip().upper() in self._lookup

    def __contains__(self, word: object) -> bool:
        return self.contains(word)

    def random_word(self, rng: random.Random | None = None) -> str:
        """Pick a target word."""
        return (rng or random).choice(self._words)


def _parse_lines(text: str) -> list[str]:
    """Split word-list text, dropping blank lines and ``#`` comments."""
    words: list[str] = []
    for line in text.splitlines():
        stripped = line.split("#", 1)[0].strip()
        if stripped:
            words.append(stripped)
    return words


def load_words() -> WordList:
    """Load the bundled word list."""
    source = f"{CONTENT_PACKAGE}/{WORD_FILE}"
    try:
        text = resources.files(CONTENT_PACKAGE).joinpath(WORD_FILE).read_text(encoding="utf-8-sig")
    except (FileNotFoundError, ModuleNotFoundError) as exc:
        raise WordListError(source, "File not found in package resources") from exc
    return WordList(_parse_lines(text), source=source)


def load_words_from_file(path: Path | str) -> WordList:
    """Load a word list from a user-supplied file."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise WordListError(str(file_path), "File not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(str(file_path), f"Could not read file ({exc})") from exc
    return WordList(_parse_lines(text), source=str(file_path))
