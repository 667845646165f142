from timeit import timeit

from fig.compression import StringCompressor
from fig.dictionary import load_dictionary
from fig.evaluation.evaluator import Evaluator
from fig.reader.lexer import lex
from fig.reader.parser import parse_tokens


COMPRESSOR = StringCompressor(load_dictionary())


def time_lexer(code: str, rounds: int) -> float:
    """Time lexing alone, compressed literals included."""
    list(lex(code, COMPRESSOR))
    return timeit(lambda: list(lex(code, COMPRESSOR)), number=rounds)


def time_parser(code: str, rounds: int) -> float:
    """Lex once, then time building the AST from the token list."""
    tokens = list(lex(code, COMPRESSOR))
    parse_tokens(tokens)
    return timeit(lambda: parse_tokens(tokens), number=rounds)


def time_evaluator(code: str, rounds: int) -> float:
    """Parse once, then time fresh evaluator runs over the same AST."""
    program = parse_tokens(lex(code, COMPRESSOR))
    Evaluator().run(program)
    return timeit(lambda: Evaluator().run(program), number=rounds)


SUM_RANGE_CODE = "1000rS"

SQUARES_CODE = "200r{:*}m S"

LAZY_FILTER_CODE = "N{3%!}f 100t S"

WHILE_LOOP_CODE = "0{:500<}{)}W"

VECTOR_CODE = "[500r 500r]1+ 2* S S"

GREETING_CODE = '"^+x~,#,~!" "^+x~,#,~!"+ #'


def _print_row(name: str, code: str, rounds: int) -> None:
    tlex = time_lexer(code, rounds)
    tparse = time_parser(code, rounds)
    teval = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  lex: {tlex:.6f}s  |  parse: {tparse:.6f}s  |  run: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print_row("sum of range 1..1000", SUM_RANGE_CODE, rounds=500)
    _print_row("map squares over 1..200", SQUARES_CODE, rounds=200)
    _print_row("lazy filter over naturals", LAZY_FILTER_CODE, rounds=200)
    _print_row("while loop to 500", WHILE_LOOP_CODE, rounds=50)
    _print_row("vectorised nested lists", VECTOR_CODE, rounds=200)
    _print_row("compressed string literals", GREETING_CODE, rounds=5000)
