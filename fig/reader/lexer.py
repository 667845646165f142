"""
  Fig Lexer

- Single linear pass over decoded source symbols, never backtracks
- Two modes: NORMAL, and IN_COMPRESSED_STRING between '"' delimiters
- Emits Token(type, lexeme, offset, value) named tuples:

    - space          -> no token
    - newline        -> "separator"
    - 12, 3.5        -> "number", value int/float
    - 'text'         -> "string", value with escapes resolved
    - "..."          -> "compressed", value decompressed by the StringCompressor
    - { } [ ]        -> "open" / "close"
    - anything else  -> "symbol" (every command is one character)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterator, NamedTuple

from fig.codepage import CODEPAGE, COMPRESSIBLE_CHARS, COMPRESSION_ALPHABET, Codepage
from fig.compression import StringCompressor
from fig.dictionary import load_dictionary
from fig.errors import (
    InvalidSymbol,
    MalformedCompressedLiteral,
    NumberTooLong,
    UnescapedCharacter,
    UnterminatedLiteral,
)
from fig.types.values import as_number

NORMAL = "normal"
IN_COMPRESSED_STRING = "compressed"

COMPRESSED_DELIMITER = '"'
STRING_DELIMITER = "'"
ESCAPE = "\\"
SEPARATOR = "\n"
WHITESPACE = " "
DECIMAL_POINT = "."
DIGIT_CHARS = frozenset("0123456789")

BLOCK_PAIRS: dict[str, str] = {"{": "}", "[": "]"}
LAMBDA_OPEN = "{"
BLOCK_CLOSERS = frozenset(BLOCK_PAIRS.values())

_COMPRESSION_SET = frozenset(COMPRESSION_ALPHABET)


class Token(NamedTuple):
    type: str
    lexeme: str
    offset: int
    value: Any

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.lexeme!r}, @{self.offset})"


@lru_cache(maxsize=1)
def default_compressor() -> StringCompressor:
    return StringCompressor(load_dictionary())


def lex(
    source: str,
    compressor: StringCompressor | None = None,
    codepage: Codepage = CODEPAGE,
) -> Iterator[Token]:
    """Token generator over decoded source text."""
    pos = 0
    n = len(source)
    mode = NORMAL
    start = 0

    while pos < n:
        ch = source[pos]
        if ch not in codepage:
            raise InvalidSymbol(pos, ch)

        # ----------------------
        # Inside "..."
        # ----------------------
        if mode == IN_COMPRESSED_STRING:
            if ch == COMPRESSED_DELIMITER:
                if compressor is None:
                    compressor = default_compressor()
                text = compressor.decompress(source[start + 1:pos], start + 1)
                yield Token("compressed", source[start:pos + 1], start, text)
                mode = NORMAL
            elif ch not in _COMPRESSION_SET:
                raise MalformedCompressedLiteral(f"{ch!r} cannot appear in a compressed string", pos)
            pos += 1
            continue

        if ch == WHITESPACE:
            pos += 1
            continue

        if ch == SEPARATOR:
            yield Token("separator", ch, pos, ch)
            pos += 1
            continue

        if ch == COMPRESSED_DELIMITER:
            mode = IN_COMPRESSED_STRING
            start = pos
            pos += 1
            continue

        if ch == STRING_DELIMITER:
            token = _read_string(source, pos, codepage)
            yield token
            pos += len(token.lexeme)
            continue

        if ch in DIGIT_CHARS:
            token = _read_number(source, pos)
            yield token
            pos += len(token.lexeme)
            continue

        if ch in BLOCK_PAIRS:
            yield Token("open", ch, pos, ch)
        elif ch in BLOCK_CLOSERS:
            yield Token("close", ch, pos, ch)
        else:
            yield Token("symbol", ch, pos, ch)
        pos += 1

    if mode == IN_COMPRESSED_STRING:
        raise UnterminatedLiteral("compressed string is never closed", start)


def _read_number(source: str, start: int) -> Token:
    """Digits with at most one fractional part; '.' needs a digit after it."""
    n = len(source)
    end = start
    while end < n and source[end] in DIGIT_CHARS:
        end += 1
    if end + 1 < n and source[end] == DECIMAL_POINT and source[end + 1] in DIGIT_CHARS:
        end += 1
        while end < n and source[end] in DIGIT_CHARS:
            end += 1
        lexeme = source[start:end]
        return Token("number", lexeme, start, as_number(float(lexeme)))
    lexeme = source[start:end]
    try:
        return Token("number", lexeme, start, int(lexeme))
    except ValueError:
        raise NumberTooLong(f"number literal has {len(lexeme)} digits", start) from None


def _read_string(source: str, start: int, codepage: Codepage) -> Token:
    """Read a '...' literal; raw characters must be compressible."""
    n = len(source)
    chars: list[str] = []
    pos = start + 1
    while pos < n:
        ch = source[pos]
        if ch not in codepage:
            raise InvalidSymbol(pos, ch)
        if ch == STRING_DELIMITER:
            return Token("string", source[start:pos + 1], start, "".join(chars))
        if ch == ESCAPE:
            if pos + 1 >= n:
                break
            escaped = source[pos + 1]
            if escaped not in codepage:
                raise InvalidSymbol(pos + 1, escaped)
            chars.append(escaped)
            pos += 2
            continue
        if ch not in COMPRESSIBLE_CHARS:
            raise UnescapedCharacter(f"{ch!r} must be escaped inside a string literal", pos)
        chars.append(ch)
        pos += 1
    raise UnterminatedLiteral("string literal is never closed", start)


def tokenize(
    data: bytes,
    compressor: StringCompressor | None = None,
    codepage: Codepage = CODEPAGE,
) -> list[Token]:
    """Decode codepage bytes and lex them."""
    return list(lex(codepage.decode(data), compressor, codepage))
