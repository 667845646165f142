from __future__ import annotations

from typing import Iterable, Mapping, Optional

from fig.builtin import BUILTINS
from fig.reader.lexer import Token
from fig.types.builtin import Builtin
from fig.types.nodes import BlockNode, CommandNode, LiteralNode, Node, SequenceNode

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[94m"
COLOR_STRING = "\033[92m"
COLOR_COMMAND = "\033[95m"
COLOR_BLOCK = "\033[96m"
COLOR_UNKNOWN = "\033[91m"
COLOR_OFFSET = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color": True,
    "show_offsets": True,
    "show_arity": True,
    "max_depth": 16,
    "indent": "  ",
}

TOKEN_COLORS = {
    "number": COLOR_NUMBER,
    "string": COLOR_STRING,
    "compressed": COLOR_STRING,
    "symbol": COLOR_COMMAND,
    "open": COLOR_BLOCK,
    "close": COLOR_BLOCK,
}


def colorize(text: str, color: str, options: dict = DEFAULT_OPTIONS) -> str:
    if not options.get("color", True):
        return text
    return f"{color}{text}{RESET}"


def _offset(offset: int, options: dict) -> str:
    if not options.get("show_offsets", True):
        return ""
    return " " + colorize(f"@{offset}", COLOR_OFFSET, options)


# ----------------- Tokens -----------------
def pprint_tokens(tokens: Iterable[Token], options: dict = DEFAULT_OPTIONS) -> str:
    lines = []
    for tok in tokens:
        if tok.type == "separator":
            lines.append(colorize("separator", COLOR_OFFSET, options) + _offset(tok.offset, options))
            continue
        shown = colorize(tok.lexeme, TOKEN_COLORS.get(tok.type, RESET), options)
        line = f"{tok.type:<10} {shown}"
        if tok.type == "compressed":
            line += f" -> {tok.value!r}"
        lines.append(line + _offset(tok.offset, options))
    return "\n".join(lines)


# ----------------- AST -----------------
def pprint_ast(
    node: Node,
    builtins: Optional[Mapping[str, Builtin]] = None,
    options: dict = DEFAULT_OPTIONS,
    _depth: int = 0,
) -> str:
    if builtins is None:
        builtins = BUILTINS
    pad = options.get("indent", "  ") * _depth
    if _depth >= options.get("max_depth", 16):
        return pad + "..."

    match node:
        case LiteralNode(value=value):
            kind = "text" if isinstance(value, str) else "number"
            color = COLOR_STRING if isinstance(value, str) else COLOR_NUMBER
            return f"{pad}Literal {colorize(str(node), color, options)} ({kind})" + _offset(node.offset, options)
        case CommandNode(symbol=symbol):
            builtin = builtins.get(symbol)
            if builtin is None:
                return f"{pad}Command {colorize(symbol, COLOR_UNKNOWN, options)} (unknown)" + _offset(node.offset, options)
            arity = f" /{builtin.arity}" if options.get("show_arity", True) else ""
            return f"{pad}Command {colorize(symbol, COLOR_COMMAND, options)} {builtin.name}{arity}" + _offset(node.offset, options)
        case BlockNode(body=body, is_lambda=is_lambda):
            label = "Lambda" if is_lambda else "List"
            head = f"{pad}{colorize(label, COLOR_BLOCK, options)} block" + _offset(node.offset, options)
            children = [pprint_ast(child, builtins, options, _depth + 1) for child in body]
            return "\n".join([head, *children])
        case SequenceNode(body=body):
            children = [pprint_ast(child, builtins, options, _depth + 1) for child in body]
            return "\n".join([f"{pad}Program", *children])
    return pad + repr(node)
