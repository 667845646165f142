import pytest

from fig_lsp.indexer import BUILTIN_SIGNATURES, ERROR, WARNING, CommandRef, build_index


def test_index_records_commands():
    idx = build_index("1 2+\n{:}m")
    assert idx.problems == []
    assert idx.commands == [CommandRef("+", 0, 3), CommandRef(":", 1, 1), CommandRef("m", 1, 3)]
    assert idx.command_at(1, 3).symbol == "m"
    assert idx.command_at(0, 0) is None


@pytest.mark.parametrize(
    "text, kind, line, col",
    [
        ("1\n[2", "UnmatchedBlock", 1, 0),
        ("1 2\n 'aBc'", "UnescapedCharacter", 1, 3),
        ('"  \n"', "MalformedCompressedLiteral", 0, 3),
        ("1\t", "InvalidSymbol", 0, 1),
    ],
)
def test_syntax_errors_become_problems(text, kind, line, col):
    idx = build_index(text)
    (problem,) = idx.problems
    assert (problem.kind, problem.line, problem.col) == (kind, line, col)
    assert problem.severity == ERROR
    assert idx.commands == []


def test_unknown_commands_are_warnings():
    idx = build_index("1\n2b")
    (problem,) = idx.problems
    assert problem.severity == WARNING
    assert (problem.line, problem.col) == (1, 1)
    assert "'b'" in problem.message


def test_builtin_signatures():
    assert BUILTIN_SIGNATURES["+"].startswith("+  add (number|text number|text) (vectorizes)")
    assert BUILTIN_SIGNATURES["N"].startswith("N  naturals ()")
    assert "b" not in BUILTIN_SIGNATURES


def test_server_helpers():
    pytest.importorskip("pygls")
    from lsprotocol.types import DiagnosticSeverity
    from fig_lsp.server import diagnostics_for, hover_text

    idx = build_index("1+\n[")
    (diagnostic,) = diagnostics_for(idx)
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.range.start.line == 1

    idx = build_index("1 2+")
    assert hover_text(idx, 0, 3).startswith("+  add")
    assert hover_text(idx, 0, 0) is None
