"""List and text builtins.

Builtins that can receive a lazy list only force as much of it as their
result needs: take, drop, index, concat and head work on unbounded lists.
Length, reverse and a negative index realise the whole list.
"""
from __future__ import annotations

import sys
from itertools import islice

from fig import FigNumber, FigValue
from fig.builtin.arithmetic import ADD, MULTIPLY
from fig.errors import FigArithmeticError
from fig.evaluation.vectorize import apply_builtin
from fig.types.builtin import Builtin, install
from fig.types.lazy_list import LazyList
from fig.types.values import ANY, LISTS, NUMERIC, SEQUENCE, TEXTUAL, as_int, render


def _count(n: FigNumber) -> int:
    return min(max(as_int(n), 0), sys.maxsize)


def length(seq) -> int:
    if isinstance(seq, LazyList):
        return len(seq.materialize())
    return len(seq)


def pair(a: FigValue, b: FigValue) -> list:
    return [a, b]


def wrap(a: FigValue) -> list:
    return [a]


def one_range(n: FigNumber) -> list[int]:
    try:
        return list(range(1, as_int(n) + 1))
    except (OverflowError, MemoryError) as err:
        raise FigArithmeticError("range is too large") from err


def naturals() -> LazyList:
    return LazyList.naturals()


def head(seq) -> FigValue:
    if isinstance(seq, LazyList):
        try:
            return seq.first()
        except IndexError:
            raise FigArithmeticError("head of an empty list") from None
    if not seq:
        raise FigArithmeticError(f"head of an empty {'text' if isinstance(seq, str) else 'list'}")
    return seq[0]


def take(seq, n: FigNumber):
    if isinstance(seq, LazyList):
        return seq.take(_count(n))
    return seq[:_count(n)]


def drop(seq, n: FigNumber):
    if isinstance(seq, LazyList):
        return seq.drop(_count(n))
    return seq[_count(n):]


def index(seq, n: FigNumber) -> FigValue:
    i = as_int(n)
    if isinstance(seq, LazyList):
        if 0 <= i < sys.maxsize:
            for item in islice(seq, i, i + 1):
                return item
        seq = seq.materialize()
    if not seq:
        raise FigArithmeticError("index into an empty sequence")
    return seq[i % len(seq)]


def reverse(seq):
    if isinstance(seq, LazyList):
        seq = seq.materialize()
    return seq[::-1]


def concat(a, b):
    if isinstance(a, LazyList) or isinstance(b, LazyList):
        return LazyList.chain(a, b)
    return a + b


def _fold(builtin: Builtin, items, empty: FigValue) -> FigValue:
    iterator = iter(items)
    total = next(iterator, empty)
    for item in iterator:
        total = apply_builtin(builtin, (total, item))
    return total


def total(items) -> FigValue:
    return _fold(ADD, items, 0)


def product(items) -> FigValue:
    return _fold(MULTIPLY, items, 1)


def join(items, separator: str) -> str:
    return separator.join(render(item) for item in items)


def split(text: str, separator: str) -> list[str]:
    if not separator:
        return list(text)
    return text.split(separator)


LENGTH = Builtin("#", "length", 1, (SEQUENCE,), length)
PAIR = Builtin(",", "pair", 2, (ANY, ANY), pair)
WRAP = Builtin("w", "wrap", 1, (ANY,), wrap)
RANGE = Builtin("r", "range", 1, (NUMERIC,), one_range, doc="n -> [1, 2, ..., n]")
NATURALS = Builtin("N", "naturals", 0, (), naturals, doc="The unbounded lazy list 1, 2, 3, ...")
HEAD = Builtin("h", "head", 1, (SEQUENCE,), head)
TAKE = Builtin("t", "take", 2, (SEQUENCE, NUMERIC), take)
DROP = Builtin("d", "drop", 2, (SEQUENCE, NUMERIC), drop)
INDEX = Builtin("i", "index", 2, (SEQUENCE, NUMERIC), index, doc="Element n, wrapping around.")
REVERSE = Builtin("v", "reverse", 1, (SEQUENCE,), reverse)
CONCAT = Builtin("c", "concat", 2, (LISTS, LISTS), concat)
SUM = Builtin("S", "sum", 1, (LISTS,), total, doc="Fold a list with +; the empty sum is 0.")
PRODUCT = Builtin("P", "product", 1, (LISTS,), product, doc="Fold a list with *; the empty product is 1.")
JOIN = Builtin("j", "join", 2, (LISTS, TEXTUAL), join)
SPLIT = Builtin("s", "split", 2, (TEXTUAL, TEXTUAL), split)


def register(table: dict[str, Builtin]) -> None:
    install(
        table,
        LENGTH, PAIR, WRAP, RANGE, NATURALS,
        HEAD, TAKE, DROP, INDEX, REVERSE, CONCAT,
        SUM, PRODUCT, JOIN, SPLIT,
    )
