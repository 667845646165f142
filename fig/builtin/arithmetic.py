"""Arithmetic, comparison, logic and text-conversion builtins.

All of these return one value. Everything except ``&`` and ``|`` vectorises,
so ``[1 2 3] 1 +`` gives ``[2, 3, 4]``.
"""
from __future__ import annotations

from fig import FigNumber, FigValue
from fig.errors import FigArithmeticError, TypeMismatch
from fig.types.builtin import Builtin, install
from fig.types.nodes import format_number
from fig.types.values import (
    ANY,
    NUMERIC,
    SCALAR,
    TEXTUAL,
    as_flag,
    as_int,
    as_number,
    parse_number,
    truthy,
    type_name,
)


def _text(value: FigValue) -> str:
    return value if isinstance(value, str) else format_number(value)


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: FigValue, b: FigValue) -> FigValue:
    if isinstance(a, str) or isinstance(b, str):
        return _text(a) + _text(b)
    try:
        return as_number(a + b)
    except OverflowError as err:
        raise FigArithmeticError(f"addition overflows: {err}") from err


def subtract(a: FigNumber, b: FigNumber) -> FigNumber:
    try:
        return as_number(a - b)
    except OverflowError as err:
        raise FigArithmeticError(f"subtraction overflows: {err}") from err


def multiply(a: FigValue, b: FigValue) -> FigValue:
    match a, b:
        case str(), str():
            raise TypeMismatch("*", (type_name(a), type_name(b)))
        case str(), _:
            text, times = a, as_int(b)
        case _, str():
            text, times = b, as_int(a)
        case _:
            text, times = None, 0
    try:
        if text is not None:
            return text * max(times, 0)
        return as_number(a * b)
    except (OverflowError, MemoryError) as err:
        raise FigArithmeticError("product is too large") from err


def divide(a: FigNumber, b: FigNumber) -> FigNumber:
    if b == 0:
        raise FigArithmeticError("division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    try:
        return as_number(a / b)
    except OverflowError as err:
        raise FigArithmeticError(f"division overflows: {err}") from err


def modulo(a: FigNumber, b: FigNumber) -> FigNumber:
    if b == 0:
        raise FigArithmeticError("modulo by zero")
    try:
        return as_number(a % b)
    except OverflowError as err:
        raise FigArithmeticError(f"modulo overflows: {err}") from err


def power(a: FigNumber, b: FigNumber) -> FigNumber:
    try:
        result = a ** b
    except ZeroDivisionError as err:
        raise FigArithmeticError("zero cannot be raised to a negative power") from err
    except OverflowError as err:
        raise FigArithmeticError(f"power overflows: {err}") from err
    if isinstance(result, complex):
        raise FigArithmeticError(f"{format_number(a)} ^ {format_number(b)} is not a real number")
    return as_number(result)


def negate(a: FigNumber) -> FigNumber:
    return as_number(-a)


def absolute(a: FigNumber) -> FigNumber:
    return as_number(abs(a))


def increment(a: FigNumber) -> FigNumber:
    return as_number(a + 1)


def decrement(a: FigNumber) -> FigNumber:
    return as_number(a - 1)


# -------------------------------
# Comparison and logic
# -------------------------------
def _comparable(symbol: str, a: FigValue, b: FigValue) -> None:
    if type_name(a) != type_name(b):
        raise TypeMismatch(symbol, (type_name(a), type_name(b)))


def less(a: FigValue, b: FigValue) -> int:
    _comparable("<", a, b)
    return as_flag(a < b)


def greater(a: FigValue, b: FigValue) -> int:
    _comparable(">", a, b)
    return as_flag(a > b)


def equal(a: FigValue, b: FigValue) -> int:
    return as_flag(type_name(a) == type_name(b) and a == b)


def logical_not(a: FigValue) -> int:
    return as_flag(not truthy(a))


def logical_and(a: FigValue, b: FigValue) -> int:
    return as_flag(truthy(a) and truthy(b))


def logical_or(a: FigValue, b: FigValue) -> int:
    return as_flag(truthy(a) or truthy(b))


# -------------------------------
# Text conversion
# -------------------------------
def upper(a: str) -> str:
    return a.upper()


def lower(a: str) -> str:
    return a.lower()


def to_number(a: FigValue) -> FigNumber:
    if not isinstance(a, str):
        return a
    number = parse_number(a)
    if number is None:
        raise FigArithmeticError(f"{a!r} is not a number")
    return number


def to_text(a: FigValue) -> str:
    return _text(a)


TWO_NUMBERS = (NUMERIC, NUMERIC)
TWO_SCALARS = (SCALAR, SCALAR)

ADD = Builtin("+", "add", 2, TWO_SCALARS, add, vectorize=True,
              doc="Sum two numbers, or concatenate when either side is text.")
SUBTRACT = Builtin("-", "subtract", 2, TWO_NUMBERS, subtract, vectorize=True)
MULTIPLY = Builtin("*", "multiply", 2, TWO_SCALARS, multiply, vectorize=True,
                   doc="Multiply two numbers; text times a number repeats the text.")
DIVIDE = Builtin("/", "divide", 2, TWO_NUMBERS, divide, vectorize=True,
                 doc="Divide; exact integer quotients stay integers.")
MODULO = Builtin("%", "modulo", 2, TWO_NUMBERS, modulo, vectorize=True)
POWER = Builtin("^", "power", 2, TWO_NUMBERS, power, vectorize=True)
NEGATE = Builtin("_", "negate", 1, (NUMERIC,), negate, vectorize=True)
ABSOLUTE = Builtin("a", "absolute", 1, (NUMERIC,), absolute, vectorize=True)
INCREMENT = Builtin(")", "increment", 1, (NUMERIC,), increment, vectorize=True)
DECREMENT = Builtin("(", "decrement", 1, (NUMERIC,), decrement, vectorize=True)
LESS = Builtin("<", "less", 2, TWO_SCALARS, less, vectorize=True,
               doc="1 if a < b else 0; both sides must be the same kind.")
GREATER = Builtin(">", "greater", 2, TWO_SCALARS, greater, vectorize=True,
                  doc="1 if a > b else 0; both sides must be the same kind.")
EQUAL = Builtin("=", "equal", 2, TWO_SCALARS, equal, vectorize=True)
NOT = Builtin("!", "not", 1, (ANY,), logical_not, vectorize=True)
AND = Builtin("&", "and", 2, (ANY, ANY), logical_and)
OR = Builtin("|", "or", 2, (ANY, ANY), logical_or)
UPPER = Builtin("u", "upper", 1, (TEXTUAL,), upper, vectorize=True)
LOWER = Builtin("l", "lower", 1, (TEXTUAL,), lower, vectorize=True)
TO_NUMBER = Builtin("n", "to-number", 1, (SCALAR,), to_number, vectorize=True,
                    doc="Read text as a number.")
TO_TEXT = Builtin("T", "to-text", 1, (SCALAR,), to_text, vectorize=True)


def register(table: dict[str, Builtin]) -> None:
    install(
        table,
        ADD, SUBTRACT, MULTIPLY, DIVIDE, MODULO, POWER,
        NEGATE, ABSOLUTE, INCREMENT, DECREMENT,
        LESS, GREATER, EQUAL, NOT, AND, OR,
        UPPER, LOWER, TO_NUMBER, TO_TEXT,
    )
