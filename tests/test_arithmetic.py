import pytest

from fig.errors import FigArithmeticError, StackUnderflow, TypeMismatch
from fig.types.values import as_int, as_number


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 2+", 3),
        ("5 7-", -2),
        ("6 7*", 42),
        ("6 3/", 2),
        ("7 2/", 3.5),
        ("1.5 1.5+", 3),
        ("7 3%", 1),
        ("2 10^", 1024),
        ("4 0.5^", 2),
        ("3_", -3),
        ("3_a", 3),
        ("4)", 5),
        ("4(", 3),
        ("1 2<", 1),
        ("2 1<", 0),
        ("'b' 'a'>", 1),
        ("1 1.0=", 1),
        ("1 '1'=", 0),
        ("0!", 1),
        ("'x'!", 0),
        ("1 0&", 0),
        ("1 0|", 1),
        ("'a' 1+", "a1"),
        ("2 'b'+", "2b"),
        ("'ab'3*", "ababab"),
        ("2'ab'*", "abab"),
        ("'fig'u", "FIG"),
        ("'\\F\\I\\G'l", "fig"),
        ("'42'n", 42),
        ("'2.5'n", 2.5),
        ("7T", "7"),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == [expected]


@pytest.mark.parametrize(
    "source, offset",
    [
        ("1 0/", 3),
        ("1 0%", 3),
        ("0 1_^", 4),
        ("2_ 0.5^", 6),
        ("'abc'n", 5),
    ],
)
def test_domain_errors(run, source, offset):
    with pytest.raises(FigArithmeticError) as excinfo:
        run(source)
    assert excinfo.value.offset == offset


@pytest.mark.parametrize(
    "source, offset",
    [
        ("'a' 1-", 5),
        ("'a' 'b'*", 7),
        ("'a' 1<", 5),
        ("{1}_", 3),
        ("3u", 1),
    ],
)
def test_type_mismatch(run, source, offset):
    with pytest.raises(TypeMismatch) as excinfo:
        run(source)
    assert excinfo.value.offset == offset
    assert excinfo.value.stage == "interpreter"


@pytest.mark.parametrize("source, offset, available", [("+", 0, 0), ("1 +", 2, 1)])
def test_stack_underflow(run, source, offset, available):
    with pytest.raises(StackUnderflow) as excinfo:
        run(source)
    assert excinfo.value.offset == offset
    assert excinfo.value.needed == 2
    assert excinfo.value.available == available


@pytest.mark.parametrize(
    "source, offset",
    [
        ("10 400^ 0.5+", 11),
        ("10 400^ 0.5-", 11),
        ("10 400^ 0.5%", 11),
        ("10 400^ 0.5*", 11),
        ("'ab' 10 400^*", 12),
        ("1.5 1000^:*r", 11),
        ("[1 2] 1.5 1000^:*t", 17),
        ("[1 2] 1.5 1000^:*i", 17),
        ("1.5 1000^:*{1}D", 14),
    ],
)
def test_overflow_is_a_domain_error(run, source, offset):
    with pytest.raises(FigArithmeticError) as excinfo:
        run(source)
    assert excinfo.value.offset == offset


def test_huge_integral_floats_stay_floats(run):
    (value,) = run("1.5 1000^")
    assert isinstance(value, float)
    assert run("2 60^") == [2 ** 60]
    assert run("4.0") == [4]


@pytest.mark.parametrize(
    "value, expected",
    [(4.0, 4), (-3.0, -3), (2.0 ** 53, 2 ** 53), (2.5, 2.5)],
)
def test_as_number_normalises_exact_floats(value, expected):
    result = as_number(value)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("value", [2.0 ** 60, -(2.0 ** 60), 1e300, float("inf")])
def test_as_number_keeps_inexact_floats(value):
    assert isinstance(as_number(value), float)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_as_int_rejects_non_finite(value):
    with pytest.raises(FigArithmeticError):
        as_int(value)
