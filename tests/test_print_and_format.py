import pytest

from fig.debug_utils.pprint import DEFAULT_OPTIONS, pprint_ast, pprint_tokens
from fig.reader.lexer import lex
from fig.reader.parser import parse
from fig.types.lazy_list import LazyList
from fig.types.nodes import format_plain_string
from fig.types.values import render

PLAIN = {**DEFAULT_OPTIONS, "color": False}


@pytest.mark.parametrize(
    "value, text",
    [
        (7, "7"),
        (3.5, "3.5"),
        (2.0, "2"),
        ("raw text", "raw text"),
        ([1, "a", [2, 'q"']], '[1, "a", [2, "q\\""]]'),
        ([], "[]"),
        (LazyList(lambda: iter([1, 2])), "[1, 2]"),
    ],
)
def test_render(value, text):
    assert render(value) == text


@pytest.mark.parametrize(
    "text, literal",
    [
        ("abc", "'abc'"),
        ("Abc", "'\\Abc'"),
        ("it's", "'it\\'s'"),
        ("a\\b", "'a\\\\b'"),
    ],
)
def test_plain_string_source_form(text, literal):
    assert format_plain_string(text) == literal


def test_execute_prints_stack_bottom_to_top(interpreter, output):
    interpreter.execute("1 'two' [3 'x'] 7 2/")
    assert output.getvalue() == '1\ntwo\n[3, "x"]\n3.5\n'


def test_execute_streams_lazy_lists(interpreter, output):
    interpreter.execute("N{:*}m4t")
    assert output.getvalue() == "[1, 4, 9, 16]\n"


def test_execute_accepts_codepage_bytes(interpreter, output):
    interpreter.execute(bytes([18, 1, 19, 12]))
    assert output.getvalue() == "3\n"


def test_pprint_tokens(compressor):
    dump = pprint_tokens(lex('1 "  "+', compressor), PLAIN)
    lines = dump.splitlines()
    assert lines[0].startswith("number")
    assert "-> 'the'" in lines[1]
    assert lines[2].split() == ["symbol", "+", "@6"]


def test_pprint_ast(compressor):
    dump = pprint_ast(parse("1{:}b", compressor), options=PLAIN)
    assert dump.splitlines() == [
        "Program",
        "  Literal 1 (number) @0",
        "  Lambda block @1",
        "    Command : dup /1 @2",
        "  Command b (unknown) @4",
    ]


def test_pprint_colors_by_default(compressor):
    assert "\033[" in pprint_ast(parse("1+", compressor))


def test_debug_dumps_go_to_stderr(dictionary, output, capsys):
    from fig.interpreter import Interpreter
    Interpreter(dictionary, output=output, debug={"tokens", "ast"}).execute("1 2+")
    err = capsys.readouterr().err
    assert "number" in err
    assert "Program" in err
    assert output.getvalue() == "3\n"
