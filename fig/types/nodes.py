"""AST node types produced by the parser.

Nodes are immutable and own their children. ``str(node)`` gives canonical
Fig source for the node, which is also how a Block value is printed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fig.codepage import COMPRESSIBLE_CHARS
from fig.errors import FigArithmeticError


def format_number(value: int | float) -> str:
    if not isinstance(value, int):
        return repr(value)
    try:
        return str(value)
    except ValueError as err:
        # Python caps decimal conversion of huge ints
        raise FigArithmeticError("number has too many digits to print") from err


def format_plain_string(text: str) -> str:
    """Quote text as a plain string literal, escaping whatever needs it."""
    out = ["'"]
    for ch in text:
        if ch in ("'", "\\") or ch not in COMPRESSIBLE_CHARS:
            out.append("\\")
        out.append(ch)
    out.append("'")
    return "".join(out)


@dataclass(frozen=True)
class LiteralNode:
    """A number or text literal."""
    value: int | float | str
    offset: int = 0

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return format_plain_string(self.value)
        return format_number(self.value)


@dataclass(frozen=True)
class CommandNode:
    """A single-symbol command; arity comes from the builtin table."""
    symbol: str
    offset: int = 0

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class BlockNode:
    """A bracketed sub-sequence.

    Lambda blocks (``{...}``) evaluate to themselves as Block values; list
    blocks (``[...]``) run in place and collect their results into a List.
    """
    body: tuple[Node, ...] = ()
    is_lambda: bool = True
    offset: int = 0

    def __str__(self) -> str:
        opener, closer = ("{", "}") if self.is_lambda else ("[", "]")
        return opener + " ".join(str(node) for node in self.body) + closer


@dataclass(frozen=True)
class SequenceNode:
    """Root node: the top-level program."""
    body: tuple[Node, ...] = ()
    offset: int = 0

    def __str__(self) -> str:
        return " ".join(str(node) for node in self.body)


Node = Union[LiteralNode, CommandNode, BlockNode, SequenceNode]
