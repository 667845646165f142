"""Value kinds, truthiness, number normalisation and output rendering."""
from __future__ import annotations

import re
from typing import Iterator

from fig import FigNumber, FigValue
from fig.errors import FigArithmeticError
from fig.types.lazy_list import LazyList
from fig.types.nodes import BlockNode, format_number

NUMBER = "number"
TEXT = "text"
LIST = "list"
BLOCK = "block"

SCALAR = frozenset({NUMBER, TEXT})
ANY = frozenset({NUMBER, TEXT, LIST, BLOCK})
NUMERIC = frozenset({NUMBER})
TEXTUAL = frozenset({TEXT})
SEQUENCE = frozenset({LIST, TEXT})
LISTS = frozenset({LIST})
BLOCKS = frozenset({BLOCK})

_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?")

# floats beyond this are not exact integers, so they stay floats
EXACT_FLOAT_LIMIT = 2 ** 53


def is_list(value: FigValue) -> bool:
    return isinstance(value, (list, LazyList))


def type_name(value: FigValue) -> str:
    match value:
        case int() | float():
            return NUMBER
        case str():
            return TEXT
        case list() | LazyList():
            return LIST
        case BlockNode():
            return BLOCK
    raise TypeError(f"not a Fig value: {value!r}")


def as_number(value: FigNumber) -> FigNumber:
    """Normalise a numeric result: bools become ints, exact integral floats become ints."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and value.is_integer() and abs(value) <= EXACT_FLOAT_LIMIT:
        return int(value)
    return value


def as_int(value: FigNumber) -> int:
    """Truncate a count or index operand; inf and nan are domain errors."""
    try:
        return int(value)
    except (OverflowError, ValueError) as err:
        raise FigArithmeticError(f"{format_number(value)} is not a usable integer") from err


def parse_number(text: str) -> FigNumber | None:
    """Number for ``-?digits(.digits)?`` text, else None."""
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    if "." in text:
        return as_number(float(text))
    try:
        return int(text)
    except ValueError as err:
        raise FigArithmeticError(f"number with {len(text)} digits is too long to read") from err


def truthy(value: FigValue) -> bool:
    if isinstance(value, LazyList):
        return not value.is_empty()
    if isinstance(value, BlockNode):
        return True
    return bool(value)


def as_flag(condition: bool) -> int:
    return 1 if condition else 0


# -------------------------------
# Rendering
# -------------------------------
def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def iter_render(value: FigValue, nested: bool = False) -> Iterator[str]:
    """Yield the printed form of value in chunks; lazy lists are streamed."""
    if is_list(value):
        yield "["
        first = True
        for item in value:
            if not first:
                yield ", "
            first = False
            yield from iter_render(item, nested=True)
        yield "]"
    elif isinstance(value, str):
        yield _quote(value) if nested else value
    elif isinstance(value, (int, float)):
        yield format_number(as_number(value))
    else:
        yield str(value)


def render(value: FigValue) -> str:
    return "".join(iter_render(value))
