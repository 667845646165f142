import pytest

from fig.__main__ import EXIT_OK, EXIT_PROGRAM_ERROR, EXIT_STARTUP_ERROR, main
from fig.codepage import CODEPAGE
from fig.config import debug_switches, get_dictionary_path


@pytest.fixture
def program(tmp_path):
    def _write(source, utf8=False):
        path = tmp_path / "prog.fig"
        if utf8:
            path.write_text(source, encoding="utf-8")
        else:
            path.write_bytes(CODEPAGE.encode(source))
        return str(path)
    return _write


def test_runs_program_with_arguments(program, capsys):
    assert main([program("+"), "3", "4"]) == EXIT_OK
    assert capsys.readouterr().out == "7\n"


def test_prints_compressed_greeting(program, capsys):
    assert main([program('"^+x~,#,~!"')]) == EXIT_OK
    assert capsys.readouterr().out == "Hello, world!\n"


def test_utf8_source(program, capsys):
    assert main(["--utf8", program("1 2+", utf8=True)]) == EXIT_OK
    assert capsys.readouterr().out == "3\n"


def test_utf8_source_outside_codepage(program, capsys):
    assert main(["--utf8", program("1\t2", utf8=True)]) == EXIT_PROGRAM_ERROR
    assert "InvalidSymbol at offset 1" in capsys.readouterr().err


def test_invalid_byte(tmp_path, capsys):
    path = tmp_path / "bad.fig"
    path.write_bytes(bytes([18, 96]))
    assert main([str(path)]) == EXIT_PROGRAM_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "fig: codepage error: InvalidByte at offset 1: byte 0x60 is outside the codepage"


@pytest.mark.parametrize(
    "source, message",
    [
        ("[1", "parser error: UnmatchedBlock at offset 0"),
        ("'abc", "lexer error: UnterminatedLiteral at offset 0"),
        ("1 0/", "interpreter error: FigArithmeticError at offset 3"),
        ('"}}"', "compression error: IndexOutOfRange at offset 1"),
        ("10 400^ 0.5+", "interpreter error: FigArithmeticError at offset 11"),
        ("'ab' 10 400^*", "interpreter error: FigArithmeticError at offset 12"),
        ("{:e}:e", "interpreter error: RecursionLimitExceeded"),
        ("[" * 3000 + "1" + "]" * 3000, "parser error: NestingTooDeep"),
    ],
)
def test_errors_exit_nonzero(program, capsys, source, message):
    assert main([program(source)]) == EXIT_PROGRAM_ERROR
    assert message in capsys.readouterr().err


def test_missing_source_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.fig")]) == EXIT_STARTUP_ERROR
    assert "cannot read" in capsys.readouterr().err


def test_missing_dictionary(program, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FIG_DICTIONARY_PATH", str(tmp_path / "missing.txt"))
    assert main([program("1")]) == EXIT_STARTUP_ERROR
    assert "DictionaryUnavailable" in capsys.readouterr().err


def test_dictionary_override(program, tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("alpha\n\nbeta\n", encoding="utf-8")
    monkeypatch.setenv("FIG_DICTIONARY_PATH", str(words))
    assert get_dictionary_path() == words
    assert main([program('" !"')]) == EXIT_OK
    assert capsys.readouterr().out == "beta\n"


def test_debug_flags(program, capsys):
    assert main(["--tokens", "--ast", program("1 2+")]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "3\n"
    assert "number" in captured.err
    assert "Program" in captured.err


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", frozenset()),
        ("tokens", frozenset({"tokens"})),
        ("AST, tokens", frozenset({"tokens", "ast"})),
        ("all", frozenset({"tokens", "ast"})),
        ("bogus", frozenset()),
    ],
)
def test_debug_switches(raw, expected):
    assert debug_switches(raw) == expected


def test_debug_env(program, monkeypatch, capsys):
    monkeypatch.setenv("FIG_DEBUG", "ast")
    assert main([program("1")]) == EXIT_OK
    assert "Program" in capsys.readouterr().err
