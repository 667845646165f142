"""Command line entry point: ``fig [options] FILE [ARGS...]``."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fig import __version__
from fig.config import debug_switches
from fig.errors import DictionaryUnavailable, FigError
from fig.interpreter import Interpreter

EXIT_OK = 0
EXIT_PROGRAM_ERROR = 1
EXIT_STARTUP_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fig",
        description="Run a Fig program and print its final stack.",
    )
    parser.add_argument("file", type=Path, help="program source (codepage bytes unless --utf8)")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="program arguments, pushed in order")
    parser.add_argument("--utf8", action="store_true", help="read FILE as UTF-8 text instead of codepage bytes")
    parser.add_argument("--tokens", action="store_true", help="dump the token stream to stderr")
    parser.add_argument("--ast", action="store_true", help="dump the AST to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    opts = build_parser().parse_args(argv)

    debug = set(debug_switches())
    if opts.tokens:
        debug.add("tokens")
    if opts.ast:
        debug.add("ast")

    try:
        data = opts.file.read_bytes()
    except OSError as err:
        print(f"fig: cannot read {opts.file}: {err.strerror or err}", file=sys.stderr)
        return EXIT_STARTUP_ERROR

    try:
        interpreter = Interpreter(debug=debug)
        if opts.utf8:
            try:
                source: str | bytes = data.decode("utf-8")
            except UnicodeDecodeError as err:
                print(f"fig: {opts.file} is not valid UTF-8: {err}", file=sys.stderr)
                return EXIT_STARTUP_ERROR
        else:
            source = data
        interpreter.execute(source, opts.args)
    except DictionaryUnavailable as err:
        print(f"fig: {err.describe()}", file=sys.stderr)
        return EXIT_STARTUP_ERROR
    except FigError as err:
        sys.stdout.flush()
        print(f"fig: {err.describe()}", file=sys.stderr)
        return EXIT_PROGRAM_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
