from __future__ import annotations

from typing import Iterable


class FigError(Exception):
    """ Base class for all Fig errors"""
    stage = "fig"

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    @property
    def kind(self) -> str:
        return type(self).__name__

    def at(self, offset: int | None) -> FigError:
        """Attach a source offset unless one is already known."""
        if self.offset is None:
            self.offset = offset
        return self

    def describe(self) -> str:
        where = f" at offset {self.offset}" if self.offset is not None else ""
        return f"{self.stage} error: {self.kind}{where}: {self.message}"

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (offset {self.offset})"


# -------------------------------
# Codepage
# -------------------------------
class CodepageError(FigError):
    stage = "codepage"


class InvalidByte(CodepageError):
    """ Raised when a source byte has no symbol in the codepage"""

    def __init__(self, offset: int, value: int):
        super().__init__(f"byte 0x{value:02x} is outside the codepage", offset)
        self.value = value


class InvalidSymbol(CodepageError):
    """ Raised when a source character has no byte in the codepage"""

    def __init__(self, offset: int, char: str):
        super().__init__(f"character {char!r} is outside the codepage", offset)
        self.char = char


# -------------------------------
# Dictionary and string compression
# -------------------------------
class CompressionError(FigError):
    stage = "compression"


class MalformedCompressedLiteral(CompressionError):
    """ Raised when a compressed string cannot be decoded"""


class IndexOutOfRange(CompressionError):
    """ Raised when a dictionary index is outside [0, size)"""

    def __init__(self, index: int, size: int, offset: int | None = None):
        super().__init__(f"dictionary index {index} is outside [0, {size})", offset)
        self.index = index
        self.size = size


class UncompressibleText(CompressionError):
    """ Raised when text holds characters the compression alphabet cannot express"""


class DictionaryUnavailable(FigError):
    """ Raised at startup when the word list cannot be read"""
    stage = "startup"


# -------------------------------
# Lexer
# -------------------------------
class LexError(FigError):
    stage = "lexer"


class UnterminatedLiteral(LexError):
    """ Raised when input ends inside a string literal"""


class UnescapedCharacter(LexError):
    """ Raised when a plain string holds a raw character that must be escaped"""


class NumberTooLong(LexError):
    """ Raised when a number literal has more digits than can be read"""


# -------------------------------
# Parser
# -------------------------------
class ParseError(FigError):
    stage = "parser"


class UnmatchedBlock(ParseError):
    """ Raised for a block opener without a closer, or a closer without an opener"""


class UnexpectedToken(ParseError):
    """ Raised when a token is invalid at its position"""


class NestingTooDeep(ParseError):
    """ Raised when blocks nest deeper than the parser can follow"""


# -------------------------------
# Interpreter
# -------------------------------
class EvaluationError(FigError):
    stage = "interpreter"


class UnknownCommand(EvaluationError):
    """ Raised when a symbol has no builtin"""

    def __init__(self, symbol: str, offset: int | None = None):
        super().__init__(f"no builtin for symbol {symbol!r}", offset)
        self.symbol = symbol


class StackUnderflow(EvaluationError):
    """ Raised when a command needs more values than the stack holds"""

    def __init__(self, symbol: str, needed: int, available: int, offset: int | None = None):
        super().__init__(f"{symbol!r} needs {needed} value(s) but the stack holds {available}", offset)
        self.symbol = symbol
        self.needed = needed
        self.available = available


class TypeMismatch(EvaluationError):
    """ Raised when an operand is outside a builtin's accepted types"""

    def __init__(self, symbol: str, operand_types: Iterable[str], offset: int | None = None):
        self.symbol = symbol
        self.operand_types = tuple(operand_types)
        shown = ", ".join(self.operand_types) or "nothing"
        super().__init__(f"{symbol!r} cannot be applied to ({shown})", offset)


class FigArithmeticError(EvaluationError):
    """ Raised for numeric domain errors such as division by zero"""


class RecursionLimitExceeded(EvaluationError):
    """ Raised when blocks run each other, or values nest, too deeply to follow"""
