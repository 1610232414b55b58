from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def write_words(tmp_path: Path) -> Callable[[str], Path]:
    """Write word-list text to a fresh file and return its path."""
    counter = {"value": 0}

    def _write(text: str) -> Path:
        counter["value"] += 1
        path = tmp_path / f"words-{counter['value']}.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
