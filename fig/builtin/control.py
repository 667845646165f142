"""Higher-order and control-flow builtins.

These take Block operands and run them against the evaluator's current stack.
Map and filter over a lazy list stay lazy; the block runs when an element is
produced, against whatever the stack holds at that moment.
"""
from __future__ import annotations

from fig import FigValue
from fig.errors import FigArithmeticError
from fig.types.builtin import Builtin, install
from fig.types.lazy_list import LazyList
from fig.types.nodes import BlockNode
from fig.types.values import ANY, BLOCKS, NUMERIC, SEQUENCE, as_int, truthy


def _items(seq):
    return list(seq) if isinstance(seq, str) else seq


def map_block(ev, seq, block: BlockNode):
    seq = _items(seq)
    if isinstance(seq, LazyList):
        ev.stack.push(seq.map(lambda item: ev.call_block(block, item)))
    else:
        ev.stack.push([ev.call_block(block, item) for item in seq])


def filter_block(ev, seq, block: BlockNode):
    seq = _items(seq)
    if isinstance(seq, LazyList):
        ev.stack.push(seq.filter(lambda item: truthy(ev.call_block(block, item))))
    else:
        ev.stack.push([item for item in seq if truthy(ev.call_block(block, item))])


def fold_block(ev, seq, block: BlockNode):
    iterator = iter(_items(seq))
    try:
        acc = next(iterator)
    except StopIteration:
        raise FigArithmeticError("fold of an empty sequence") from None
    for item in iterator:
        acc = ev.call_block(block, acc, item)
    ev.stack.push(acc)


def call(ev, block: BlockNode):
    ev.invoke(block)


def if_else(ev, condition: FigValue, then: FigValue, otherwise: FigValue):
    chosen = then if truthy(condition) else otherwise
    if isinstance(chosen, BlockNode):
        ev.invoke(chosen)
    else:
        ev.stack.push(chosen)


def while_loop(ev, condition: BlockNode, body: BlockNode):
    while True:
        ev.invoke(condition)
        if not truthy(ev.stack.pop("W")):
            break
        ev.invoke(body)


def repeat(ev, n, block: BlockNode):
    for _ in range(max(as_int(n), 0)):
        ev.invoke(block)


def print_value(ev, value: FigValue):
    ev.write(value)


MAP = Builtin("m", "map", 2, (SEQUENCE, BLOCKS), map_block, stack_effect=True,
              doc="Run the block on each element, collecting one result per element.")
FILTER = Builtin("f", "filter", 2, (SEQUENCE, BLOCKS), filter_block, stack_effect=True,
                 doc="Keep the elements for which the block leaves a truthy value.")
FOLD = Builtin("F", "fold", 2, (SEQUENCE, BLOCKS), fold_block, stack_effect=True,
               doc="Combine elements left to right; the block sees acc and item.")
CALL = Builtin("e", "call", 1, (BLOCKS,), call, stack_effect=True)
IF = Builtin("?", "if", 3, (ANY, ANY, ANY), if_else, stack_effect=True,
             doc="cond then else: run or push the chosen branch.")
WHILE = Builtin("W", "while", 2, (BLOCKS, BLOCKS), while_loop, stack_effect=True,
                doc="Run body while the condition block leaves a truthy value.")
REPEAT = Builtin("D", "repeat", 2, (NUMERIC, BLOCKS), repeat, stack_effect=True)
PRINT = Builtin("p", "print", 1, (ANY,), print_value, stack_effect=True,
                doc="Write the value and a newline now.")


def register(table: dict[str, Builtin]) -> None:
    install(table, MAP, FILTER, FOLD, CALL, IF, WHILE, REPEAT, PRINT)
