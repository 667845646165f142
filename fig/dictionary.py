"""Word dictionary used to expand compressed string literals.

The dictionary is an ordered, immutable list of lower-case words loaded once
from the bundled ``data/dict.txt`` (one word per line). Words are addressed by
position; the string compressor encodes those positions.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from fig.config import get_dictionary_path
from fig.errors import DictionaryUnavailable, IndexOutOfRange


class Dictionary:
    """Index-addressed, read-only word list."""

    __slots__ = ("_words", "_positions")

    def __init__(self, words: Iterable[str]):
        self._words: tuple[str, ...] = tuple(words)
        positions: dict[str, int] = {}
        for index, word in enumerate(self._words):
            # first occurrence wins so encoding is deterministic
            positions.setdefault(word, index)
        self._positions: Mapping[str, int] = MappingProxyType(positions)

    @classmethod
    def from_text(cls, text: str) -> Dictionary:
        return cls(line.strip() for line in text.splitlines() if line.strip())

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._positions

    def __repr__(self) -> str:
        return f"<Dictionary of {len(self._words)} words>"

    def lookup(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise IndexOutOfRange(index, len(self._words))
        return self._words[index]

    def index_of(self, word: str) -> int | None:
        return self._positions.get(word)


def load_dictionary(path: str | os.PathLike[str] | None = None) -> Dictionary:
    """Read a word list from disk; the bundled list when path is None."""
    resolved = Path(path) if path is not None else get_dictionary_path()
    return _load(resolved.resolve())


@lru_cache(maxsize=8)
def _load(path: Path) -> Dictionary:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise DictionaryUnavailable(f"cannot read word list {path}: {ex}") from ex
    return Dictionary.from_text(text)
