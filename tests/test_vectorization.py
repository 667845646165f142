import pytest

from fig.builtin.arithmetic import ADD, NEGATE, SUBTRACT
from fig.errors import TypeMismatch
from fig.evaluation.vectorize import apply_builtin
from fig.types.lazy_list import LazyList


def test_list_and_scalar():
    assert apply_builtin(ADD, ([1, 2, 3], 1)) == [2, 3, 4]
    assert apply_builtin(SUBTRACT, (10, [1, 2])) == [9, 8]


def test_pairwise_truncates_to_shorter():
    assert apply_builtin(ADD, ([1, 2, 3], [10, 20])) == [11, 22]


def test_nested_lists_recurse():
    assert apply_builtin(ADD, ([[1, 2], [3]], 1)) == [[2, 3], [4]]
    assert apply_builtin(NEGATE, ([1, [2, [3]]],)) == [-1, [-2, [-3]]]


def test_lazy_operand_stays_lazy():
    result = apply_builtin(ADD, (LazyList.naturals(), 1))
    assert isinstance(result, LazyList)
    assert result.take(3) == [2, 3, 4]
    # restartable
    assert result.take(2) == [2, 3]


def test_mismatch_inside_list():
    with pytest.raises(TypeMismatch):
        apply_builtin(SUBTRACT, (["a"], 1))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("[1 2 3]1+", [2, 3, 4]),
        ("[[1 2][3]]1+", [[2, 3], [4]]),
        ("[1 2 3][10 20]+", [11, 22]),
        ("[1 2 3]2*", [2, 4, 6]),
        ("['a' 'b']u", ["A", "B"]),
        ("[0 1 2]!", [1, 0, 0]),
        ("[1 5 3]3<", [1, 0, 0]),
    ],
)
def test_vectorized_programs(run, source, expected):
    assert run(source) == [expected]


def test_vectorized_over_naturals(run):
    assert run("N2*4t") == [[2, 4, 6, 8]]
