"""
Static indexer for Fig buffers.

The buffer is lexed and parsed but never evaluated. The index records:
- every command symbol with its position, for hover
- the first lexer/parser error, as an error diagnostic
- commands with no builtin, as warnings (they would fail at run time)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fig.builtin import BUILTINS
from fig.compression import StringCompressor
from fig.errors import FigError
from fig.reader.lexer import lex
from fig.reader.parser import parse_tokens
from fig.types.nodes import BlockNode, CommandNode, Node

ERROR = "error"
WARNING = "warning"


@dataclass
class CommandRef:
    symbol: str
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int
    severity: str = ERROR
    kind: str = ""


@dataclass
class DocumentIndex:
    commands: List[CommandRef] = field(default_factory=list)
    problems: List[Problem] = field(default_factory=list)

    def command_at(self, line: int, col: int) -> Optional[CommandRef]:
        for ref in self.commands:
            if ref.line == line and ref.col == col:
                return ref
        return None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _walk(nodes: Tuple[Node, ...]):
    for node in nodes:
        if isinstance(node, BlockNode):
            yield from _walk(node.body)
        elif isinstance(node, CommandNode):
            yield node


def build_index(text: str, compressor: StringCompressor | None = None) -> DocumentIndex:
    idx = DocumentIndex()
    try:
        program = parse_tokens(lex(text, compressor))
    except FigError as err:
        line, col = _position_from_offset(text, err.offset or 0)
        idx.problems.append(Problem(err.describe(), line, col, ERROR, err.kind))
        return idx

    for node in _walk(program.body):
        line, col = _position_from_offset(text, node.offset)
        idx.commands.append(CommandRef(node.symbol, line, col))
        if node.symbol not in BUILTINS:
            idx.problems.append(
                Problem(f"no builtin for symbol {node.symbol!r}", line, col, WARNING, "UnknownCommand")
            )
    return idx


def _describe(symbol: str) -> str:
    builtin = BUILTINS[symbol]
    if builtin.doc:
        return f"{builtin.signature()}\n{builtin.doc}"
    return builtin.signature()


# Builtin signatures for hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {symbol: _describe(symbol) for symbol in sorted(BUILTINS)}
