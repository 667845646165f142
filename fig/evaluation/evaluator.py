"""Tree-walking evaluator for Fig programs.

One Evaluator owns one Stack for one run. Literals push themselves, lambda
blocks push themselves as Block values, list blocks run in place and collect
what their body left above the stack's low-water mark, and commands dispatch
through the builtin table.
"""
from __future__ import annotations

import sys
from typing import IO, Iterable, Mapping

from fig import FigValue
from fig.builtin import BUILTINS
from fig.errors import FigError, RecursionLimitExceeded, UnknownCommand
from fig.evaluation.vectorize import apply_builtin, check_operands
from fig.types.builtin import Builtin
from fig.types.nodes import BlockNode, CommandNode, LiteralNode, Node, SequenceNode
from fig.types.stack import Stack
from fig.types.values import iter_render


def write_value(value: FigValue, out: IO[str]) -> None:
    """Print one value and a newline; lazy lists are written as they are produced."""
    try:
        for chunk in iter_render(value):
            out.write(chunk)
    except RecursionError:
        raise RecursionLimitExceeded("value nests too deeply to print") from None
    out.write("\n")
    out.flush()


class Evaluator:
    def __init__(
        self,
        builtins: Mapping[str, Builtin] = BUILTINS,
        output: IO[str] | None = None,
    ):
        self.builtins = builtins
        self.output = output
        self.stack = Stack()

    @property
    def out(self) -> IO[str]:
        # resolved per write so a redirected sys.stdout is honoured
        return self.output if self.output is not None else sys.stdout

    def run(self, program: SequenceNode, args: Iterable[FigValue] = ()) -> Stack:
        self.stack.push(*args)
        try:
            self.evaluate(program)
        except RecursionError:
            raise RecursionLimitExceeded("program nests too deeply") from None
        return self.stack

    def evaluate(self, node: Node) -> None:
        match node:
            case LiteralNode(value=value):
                self.stack.push(value)
            case CommandNode():
                self.apply_command(node)
            case BlockNode(is_lambda=True):
                self.stack.push(node)
            case BlockNode(body=body):
                self.stack.mark()
                self.execute(body)
                self.stack.push(self.stack.collect())
            case SequenceNode(body=body):
                self.execute(body)
            case _:
                raise TypeError(f"cannot evaluate {node!r}")

    def execute(self, body: Iterable[Node]) -> None:
        for node in body:
            self.evaluate(node)

    def apply_command(self, node: CommandNode) -> None:
        builtin = self.builtins.get(node.symbol)
        if builtin is None:
            raise UnknownCommand(node.symbol, node.offset)
        try:
            operands = self.stack.pop_many(builtin.arity, builtin.symbol)
            if builtin.stack_effect:
                check_operands(builtin, operands)
                builtin.fn(self, *operands)
            else:
                self.stack.push(apply_builtin(builtin, operands))
        except FigError as err:
            raise err.at(node.offset)
        except RecursionError:
            raise RecursionLimitExceeded(f"{node.symbol!r} recursed too deeply", node.offset) from None

    # -------------------------------
    # Hooks used by higher-order builtins
    # -------------------------------
    def invoke(self, block: BlockNode) -> None:
        """Run a block's body against the current stack."""
        self.execute(block.body)

    def call_block(self, block: BlockNode, *args: FigValue) -> FigValue:
        """Push args, run block, and take its single result off the stack."""
        self.stack.push(*args)
        self.invoke(block)
        return self.stack.pop("block")

    def write(self, value: FigValue) -> None:
        write_value(value, self.out)
