"""Operand checking and element-wise application of builtins.

A vectorising builtin applied to a List maps over it; applied to two operands
it walks them pairwise (two lists, truncated to the shorter) or broadcasts a
scalar against a list. Nested lists recurse. A lazy operand gives a lazy
result, so vectorising over an unbounded list never forces it.
"""
from __future__ import annotations

from itertools import repeat
from typing import Sequence

from fig import FigValue
from fig.errors import TypeMismatch
from fig.types.builtin import Builtin
from fig.types.lazy_list import LazyList
from fig.types.values import is_list, type_name


def check_operands(builtin: Builtin, operands: Sequence[FigValue]) -> None:
    kinds = [type_name(value) for value in operands]
    for kind, accepted in zip(kinds, builtin.accepts):
        if kind not in accepted:
            raise TypeMismatch(builtin.symbol, kinds)


def apply_builtin(builtin: Builtin, operands: Sequence[FigValue]) -> FigValue:
    """Apply a value-returning builtin, vectorising over list operands."""
    if builtin.vectorize and any(is_list(value) for value in operands):
        return _vectorized(builtin, operands)
    check_operands(builtin, operands)
    return builtin.fn(*operands)


def _vectorized(builtin: Builtin, operands: Sequence[FigValue]) -> FigValue:
    def combine(*items: FigValue) -> FigValue:
        return apply_builtin(builtin, items)

    def columns():
        return [iter(value) if is_list(value) else repeat(value) for value in operands]

    if any(isinstance(value, LazyList) for value in operands):
        return LazyList(lambda: map(combine, *columns()))
    return list(map(combine, *columns()))
