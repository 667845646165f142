"""Pipeline facade: source -> tokens -> AST -> final stack."""
from __future__ import annotations

import sys
from typing import IO, Iterable, Mapping

from fig import FigValue
from fig.builtin import BUILTINS
from fig.codepage import CODEPAGE, Codepage
from fig.compression import StringCompressor
from fig.config import debug_switches
from fig.dictionary import Dictionary, load_dictionary
from fig.evaluation.evaluator import Evaluator, write_value
from fig.reader.lexer import Token, lex
from fig.reader.parser import parse_tokens
from fig.types.builtin import Builtin
from fig.types.nodes import SequenceNode
from fig.types.stack import Stack
from fig.types.values import parse_number


def parse_argument(raw: str) -> FigValue:
    """Program arguments that look like numbers are Numbers, the rest Text."""
    number = parse_number(raw)
    return raw if number is None else number


class Interpreter:
    """
    Runs Fig programs against one dictionary and builtin table.
    Each run gets a fresh Evaluator, so runs never share a stack.
    """

    def __init__(
        self,
        dictionary: Dictionary | None = None,
        *,
        codepage: Codepage = CODEPAGE,
        builtins: Mapping[str, Builtin] = BUILTINS,
        output: IO[str] | None = None,
        debug: Iterable[str] | None = None,
    ):
        self.dictionary = dictionary if dictionary is not None else load_dictionary()
        self.compressor = StringCompressor(self.dictionary)
        self.codepage = codepage
        self.builtins = builtins
        self.output = output
        self.debug = frozenset(debug) if debug is not None else debug_switches()

    def decode(self, source: str | bytes) -> str:
        if isinstance(source, bytes):
            return self.codepage.decode(source)
        return self.codepage.validate(source)

    def tokenize(self, source: str | bytes) -> list[Token]:
        tokens = list(lex(self.decode(source), self.compressor, self.codepage))
        if "tokens" in self.debug:
            from fig.debug_utils.pprint import pprint_tokens
            print(pprint_tokens(tokens), file=sys.stderr)
        return tokens

    def parse(self, source: str | bytes) -> SequenceNode:
        program = parse_tokens(self.tokenize(source))
        if "ast" in self.debug:
            from fig.debug_utils.pprint import pprint_ast
            print(pprint_ast(program, self.builtins), file=sys.stderr)
        return program

    def interpret(self, program: SequenceNode, args: Iterable[str] = ()) -> Stack:
        evaluator = Evaluator(self.builtins, self.output)
        return evaluator.run(program, [parse_argument(arg) for arg in args])

    def run(self, source: str | bytes, args: Iterable[str] = ()) -> list[FigValue]:
        """Run a program and return its final stack, bottom first."""
        return self.interpret(self.parse(source), args).to_list()

    def execute(self, source: str | bytes, args: Iterable[str] = ()) -> list[FigValue]:
        """Run a program and print its final stack, bottom to top, one value per line."""
        values = self.interpret(self.parse(source), args).to_list()
        out = self.output if self.output is not None else sys.stdout
        for value in values:
            write_value(value, out)
        return values
