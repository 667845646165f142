"""Stack shuffling builtins; each pushes its own results."""
from __future__ import annotations

from fig.types.builtin import Builtin, install
from fig.types.values import ANY


def dup(ev, a):
    ev.stack.push(a, a)


def swap(ev, a, b):
    ev.stack.push(b, a)


def drop(ev, a):
    pass


def rotate(ev, a, b, c):
    ev.stack.push(b, c, a)


DUP = Builtin(":", "dup", 1, (ANY,), dup, stack_effect=True, doc="a -> a a")
SWAP = Builtin("$", "swap", 2, (ANY, ANY), swap, stack_effect=True, doc="a b -> b a")
POP = Builtin(";", "drop", 1, (ANY,), drop, stack_effect=True, doc="a ->")
ROTATE = Builtin("@", "rotate", 3, (ANY, ANY, ANY), rotate, stack_effect=True, doc="a b c -> b c a")


def register(table: dict[str, Builtin]) -> None:
    install(table, DUP, SWAP, POP, ROTATE)
