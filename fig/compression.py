"""Dictionary-backed compression for Fig string literals.

A compressed literal is a run over the compression alphabet. Three alphabet
characters are markers, the other 91 are radix-91 digits:

    ^   capitalise the next word
    _   glue the next word (no leading space)
    ~   literal: the following alphabet character is emitted as is

Every other position starts a two-digit group ``d0 * 91 + d1`` naming a
dictionary word. Words are separated by a single space unless glued; literals
are never spaced, and nothing is spaced before the first emitted item.

    "hello world"   ->  two groups
    "Hello, world!" ->  ^ group ~, group ~!
"""
from __future__ import annotations

import re

from fig.codepage import COMPRESSION_ALPHABET
from fig.dictionary import Dictionary
from fig.errors import IndexOutOfRange, MalformedCompressedLiteral, UncompressibleText

MARK_CAPITALIZE = "^"
MARK_GLUE = "_"
MARK_LITERAL = "~"
MARKERS = MARK_CAPITALIZE + MARK_GLUE + MARK_LITERAL

DIGITS = "".join(ch for ch in COMPRESSION_ALPHABET if ch not in MARKERS)
RADIX = len(DIGITS)
GROUP_WIDTH = 2
CAPACITY = RADIX ** GROUP_WIDTH

_DIGIT_VALUES: dict[str, int] = {ch: i for i, ch in enumerate(DIGITS)}
_ALPHABET = frozenset(COMPRESSION_ALPHABET)
_WORD_RE = re.compile(r"[A-Za-z]+|[^A-Za-z]")


def encode_index(index: int) -> str:
    """Render a dictionary index as a fixed-width digit group."""
    if not 0 <= index < CAPACITY:
        raise UncompressibleText(f"dictionary index {index} does not fit {GROUP_WIDTH} radix-{RADIX} digits")
    digits = []
    for _ in range(GROUP_WIDTH):
        index, digit = divmod(index, RADIX)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))


def decode_group(group: str, offset: int = 0) -> int:
    index = 0
    for position, ch in enumerate(group):
        value = _DIGIT_VALUES.get(ch)
        if value is None:
            raise MalformedCompressedLiteral(f"{ch!r} is not a radix-{RADIX} digit", offset + position)
        index = index * RADIX + value
    return index


class StringCompressor:
    """Encodes and decodes compressed literals against one dictionary."""

    __slots__ = ("dictionary",)

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary

    def decompress(self, run: str, offset: int = 0) -> str:
        """Expand a compressed run; offset is the source position of run[0]."""
        out: list[str] = []
        capitalize = glue = False
        pending: int | None = None  # position of the first unconsumed modifier
        pos = 0
        n = len(run)
        while pos < n:
            ch = run[pos]
            if ch == MARK_CAPITALIZE or ch == MARK_GLUE:
                if ch == MARK_CAPITALIZE:
                    capitalize = True
                else:
                    glue = True
                if pending is None:
                    pending = pos
                pos += 1
                continue

            if ch == MARK_LITERAL:
                if pending is not None:
                    raise MalformedCompressedLiteral("modifier marker is not followed by a word", offset + pending)
                if pos + 1 >= n:
                    raise MalformedCompressedLiteral("literal marker at end of string", offset + pos)
                literal = run[pos + 1]
                if literal not in _ALPHABET:
                    raise MalformedCompressedLiteral(
                        f"{literal!r} is not in the compression alphabet", offset + pos + 1
                    )
                out.append(literal)
                pos += 2
                continue

            if pos + GROUP_WIDTH > n:
                raise MalformedCompressedLiteral("truncated dictionary index", offset + pos)
            index = decode_group(run[pos:pos + GROUP_WIDTH], offset + pos)
            try:
                word = self.dictionary.lookup(index)
            except IndexOutOfRange as err:
                raise err.at(offset + pos)
            if capitalize:
                word = word[:1].upper() + word[1:]
            if out and not glue:
                out.append(" ")
            out.append(word)
            capitalize = glue = False
            pending = None
            pos += GROUP_WIDTH

        if pending is not None:
            raise MalformedCompressedLiteral("modifier marker is not followed by a word", offset + pending)
        return "".join(out)

    def compress(self, text: str) -> str:
        """Inverse of decompress: dictionary words where possible, literals elsewhere."""
        parts: list[str] = []
        emitted = False
        pending_space = False
        for match in _WORD_RE.finditer(text):
            token = match.group()
            if token == " ":
                if pending_space:
                    parts.append(MARK_LITERAL + " ")
                    emitted = True
                pending_space = True
                continue

            entry = self._word_entry(token)
            if entry is None:
                if pending_space:
                    parts.append(MARK_LITERAL + " ")
                    pending_space = False
                for position, ch in enumerate(token, start=match.start()):
                    if ch not in _ALPHABET:
                        raise UncompressibleText(f"{ch!r} at position {position} cannot be compressed")
                    parts.append(MARK_LITERAL + ch)
                emitted = True
                continue

            index, capitalize = entry
            if pending_space and not emitted:
                # a leading space has to be literal; the word then glues to it
                parts.append(MARK_LITERAL + " ")
                emitted = True
                pending_space = False
            if emitted and not pending_space:
                parts.append(MARK_GLUE)
            if capitalize:
                parts.append(MARK_CAPITALIZE)
            parts.append(encode_index(index))
            emitted = True
            pending_space = False

        if pending_space:
            parts.append(MARK_LITERAL + " ")
        return "".join(parts)

    def _word_entry(self, token: str) -> tuple[int, bool] | None:
        if not token.isalpha() or not token.isascii():
            return None
        lower = token.lower()
        if token == lower:
            capitalize = False
        elif token == lower[0].upper() + lower[1:]:
            capitalize = True
        else:
            return None
        index = self.dictionary.index_of(lower)
        if index is None or index >= CAPACITY:
            return None
        return index, capitalize
