"""Fig codepage and codec.

Every Fig source symbol is one byte: byte ``b`` is the symbol at index ``b``
of the codepage. Index 0 is newline, index 1 is space, the remaining 94
entries are printable ASCII in order. ``decode`` and ``encode`` are exact
inverses over that range.

Two further alphabets are defined here because the lexer and the string
compressor both depend on them:

- the compression alphabet: the codepage without newline and ``"``, read
  positionally inside a compressed string literal;
- the compressible characters: symbols that may appear unescaped inside a
  plain string literal (everything but upper-case letters).
"""

from __future__ import annotations

from fig.errors import InvalidByte, InvalidSymbol

CODEPAGE_SYMBOLS = (
    "\n !\"#$%&'()*+,-./0123456789:;<=>?@"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)
COMPRESSION_ALPHABET = (
    " !#$%&'()*+,-./0123456789:;<=>?@"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)
COMPRESSIBLE_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyz\n0123456789'()*+,-. !\"#$%&/:;<=>?@[\\]^_`{|}~"
)


class Codepage:
    """Bijective byte <-> symbol table."""

    __slots__ = ("symbols", "_positions")

    def __init__(self, symbols: str):
        if len(set(symbols)) != len(symbols):
            raise ValueError("codepage symbols must be unique")
        if len(symbols) > 256:
            raise ValueError("a codepage holds at most 256 symbols")
        self.symbols: str = symbols
        self._positions: dict[str, int] = {ch: i for i, ch in enumerate(symbols)}

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, ch: object) -> bool:
        return ch in self._positions

    def __repr__(self) -> str:
        return f"Codepage({len(self.symbols)} symbols)"

    def decode_byte(self, value: int, offset: int = 0) -> str:
        if not 0 <= value < len(self.symbols):
            raise InvalidByte(offset, value)
        return self.symbols[value]

    def encode_symbol(self, ch: str, offset: int = 0) -> int:
        try:
            return self._positions[ch]
        except KeyError:
            raise InvalidSymbol(offset, ch) from None

    def decode(self, data: bytes) -> str:
        """Map raw source bytes to symbols; the first unmapped byte raises InvalidByte."""
        return "".join(self.decode_byte(value, offset) for offset, value in enumerate(data))

    def encode(self, text: str) -> bytes:
        """Inverse of decode; the first character outside the codepage raises InvalidSymbol."""
        return bytes(self.encode_symbol(ch, offset) for offset, ch in enumerate(text))

    def validate(self, text: str) -> str:
        """Return text unchanged if every character is a codepage symbol."""
        positions = self._positions
        for offset, ch in enumerate(text):
            if ch not in positions:
                raise InvalidSymbol(offset, ch)
        return text


CODEPAGE = Codepage(CODEPAGE_SYMBOLS)
