import random

import pytest

from wordgame.errors import ErrorKind, WordListError
from wordgame.evaluator import is_valid_word
from wordgame.words import WordList, load_words, load_words_from_file


def test_bundled_word_list_loads_valid_uppercase_words() -> None:
    words = load_words()
    assert len(words) > 100
    assert all(is_valid_word(word) and word == word.upper() for word in words)
    assert "WATER" in words


def test_word_list_filters_invalid_and_duplicate_entries() -> None:
    words = WordList(["crane", "CRANE", "  Water ", "toolong", "ab1cd", "", "plumb"])
    assert list(words) == ["CRANE", "WATER", "PLUMB"]


def test_word_list_skips_non_string_entries() -> None:
    words = WordList(["crane", None, 12345, b"plumb", "water"])
    assert list(words) == ["CRANE", "WATER"]


def test_empty_word_list_raises() -> None:
    with pytest.raises(WordListError) as excinfo:
        WordList(["toolong", "bad"], source="custom")
    assert excinfo.value.source == "custom"
    assert excinfo.value.kind is ErrorKind.WORD_LIST


def test_contains_is_case_insensitive() -> None:
    words = WordList(["crane"])
    assert words.contains("crane") is True
    assert words.contains(" CrAnE ") is True
    assert words.contains("plumb") is False
    assert words.contains(None) is False
    assert "crane" in words


def test_random_word_uses_given_rng() -> None:
    words = WordList(["crane", "plumb", "water", "house"])
    first = words.random_word(random.Random(7))
    second = words.random_word(random.Random(7))
    assert first == second
    assert first in words


def test_load_words_from_file_skips_comments_and_blanks(write_words) -> None:
    path = write_words("# header\ncrane\n\n  water  # inline comment\nxx\n")
    words = load_words_from_file(path)
    assert list(words) == ["CRANE", "WATER"]
    assert words.source == str(path)


def test_load_words_from_missing_file_raises(tmp_path) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(WordListError) as excinfo:
        load_words_from_file(missing)
    assert "File not found" in str(excinfo.value)
    assert str(missing) in str(excinfo.value)


def test_load_words_from_file_without_valid_words_raises(write_words) -> None:
    path = write_words("toolong\nab\n")
    with pytest.raises(WordListError) as excinfo:
        load_words_from_file(path)
    assert "No valid words found" in str(excinfo.value)
