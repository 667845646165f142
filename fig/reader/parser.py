"""
  Fig Parser

Recursive descent over the lexer's tokens, building the AST bottom-up as
blocks close:

    program  := sequence
    sequence := node*
    node     := literal | command | block
    block    := OPEN sequence CLOSE

Separators are dropped. Commands carry only their symbol; arity lives in the
builtin dispatch table.
"""

from __future__ import annotations

from typing import Iterable, Optional

from fig.errors import NestingTooDeep, UnexpectedToken, UnmatchedBlock
from fig.reader.lexer import BLOCK_PAIRS, LAMBDA_OPEN, Token, lex
from fig.types.nodes import BlockNode, CommandNode, LiteralNode, Node, SequenceNode

LITERAL_TOKENS = frozenset({"number", "string", "compressed"})


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_node(self) -> Node:
        tok = self.advance()
        if tok is None:
            raise UnexpectedToken("unexpected end of input")

        if tok.type in LITERAL_TOKENS:
            return LiteralNode(tok.value, tok.offset)

        if tok.type == "symbol":
            return CommandNode(tok.value, tok.offset)

        if tok.type == "open":
            try:
                body = self.parse_sequence(tok)
            except RecursionError:
                raise NestingTooDeep("blocks nest too deeply", tok.offset) from None
            return BlockNode(tuple(body), tok.lexeme == LAMBDA_OPEN, tok.offset)

        if tok.type == "close":
            raise UnmatchedBlock(f"{tok.lexeme!r} has no matching opener", tok.offset)

        raise UnexpectedToken(f"unexpected {tok.type} token {tok.lexeme!r}", tok.offset)

    def parse_sequence(self, opener: Optional[Token] = None) -> list[Node]:
        """Parse nodes up to the closer matching opener (or end of input at top level)."""
        body: list[Node] = []
        while True:
            tok = self.peek()
            if tok is None:
                if opener is None:
                    return body
                raise UnmatchedBlock(f"{opener.lexeme!r} is never closed", opener.offset)

            if tok.type == "separator":
                self.advance()
                continue

            if tok.type == "close":
                if opener is None:
                    raise UnmatchedBlock(f"{tok.lexeme!r} has no matching opener", tok.offset)
                expected = BLOCK_PAIRS[opener.lexeme]
                if tok.lexeme != expected:
                    raise UnexpectedToken(
                        f"expected {expected!r} to close the block opened at offset {opener.offset}, "
                        f"found {tok.lexeme!r}",
                        tok.offset,
                    )
                self.advance()
                return body

            body.append(self.parse_node())

    def parse_program(self) -> SequenceNode:
        return SequenceNode(tuple(self.parse_sequence()))


def parse_tokens(tokens: Iterable[Token]) -> SequenceNode:
    return TokenStream(tokens).parse_program()


def parse(source: str, compressor=None) -> SequenceNode:
    """Lex and parse decoded source text."""
    return parse_tokens(lex(source, compressor))
