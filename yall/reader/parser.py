"""
  yall Reader: lexer and recursive-descent parser

- Streaming, lazy tokenizing; parsing can be driven one form at a time
  (TokenStream.parse_expr) or eagerly over a whole buffer (read)
- Emits the expression classes from yall.types:

    - #t / #f -> TRUE / FALSE singletons
    - numeric literals -> Number (int when the literal is a plain integer,
      float otherwise); literals beyond the double range are rejected
    - "..." -> String, escapes kept verbatim
    - (a b c) and [a b c] -> right-nested Cells terminated by Empty
    - 'x and `x -> Quoted(x)
    - anything else -> Symbol
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterator, Optional, Iterable

from yall import Expression
from yall.types.atoms import FALSE, TRUE, Number, Quoted, String
from yall.types.cell import make_list
from yall.types.errors import (
    YallMissingQuotedExpression,
    YallNumberOutOfRange,
    YallParseError,
    YallUnterminatedList,
    YallUnterminatedString,
)
from yall.types.symbol import Symbol

logger = logging.getLogger(__name__)

Token = tuple[str, str]

TOKEN_RE = re.compile(
    r"(?P<lparen>[(\[])"  # ( and [
    r"|(?P<rparen>[)\]])"  # ) and ]
    r"|(?P<quote>['`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # , and ,@
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r'|(?P<atom>[^ \t\r\n()\[\]\'`,"]+)',  # fallback: atoms
    re.DOTALL,
)

WHITESPACE = " \t\r\n"

# Plain decimal literals only: Python's float() would also accept "inf",
# "nan" and "1_000", which must stay symbols.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos] in WHITESPACE:
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise YallParseError(f"Unexpected character at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        if kind == "open_string":
            raise YallUnterminatedString(f"Unterminated string starting at {m.start(kind)}")
        yield kind, m.group(kind)
        pos = m.end()


def _in_range(token: str, value: int | float) -> int | float:
    """Reject literals a double cannot hold; they would print as inf."""
    try:
        magnitude = float(value)
    except OverflowError:
        magnitude = math.inf
    if math.isinf(magnitude):
        raise YallNumberOutOfRange(f"Numeric literal out of range: {token}")
    return value


def parse_atom(token: str) -> Expression:
    """Classify an atom: boolean, then number, then symbol."""
    if token == "#t":
        return TRUE
    if token == "#f":
        return FALSE
    if INTEGER_RE.fullmatch(token):
        try:
            value = int(token)
        except ValueError:
            # past the interpreter's int digit limit
            value = float(token)
        return Number(_in_range(token, value))
    if NUMBER_RE.fullmatch(token):
        return Number(_in_range(token, float(token)))
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        """True when no further top-level expression can be read.

        A closing bracket with nothing open ends the input, like end of text.
        """
        tok_type, _ = self.peek()
        return tok_type is None or tok_type == "rparen"

    def parse_expr(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise YallParseError("Unexpected end of input")

        if tok_type == "atom":
            return parse_atom(tok_val)

        if tok_type == "string":
            return String(tok_val[1:-1])

        # Unquote markers carry no meaning of their own; they read as symbols.
        if tok_type == "unquote":
            return Symbol(tok_val)

        if tok_type == "quote":
            if self.at_end():
                raise YallMissingQuotedExpression(f"Nothing follows quote {tok_val!r}")
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise YallUnterminatedList(f"Unmatched {tok_val!r}")
                if next_type == "rparen":
                    self.advance()
                    return make_list(items)
                items.append(self.parse_expr())

        raise YallParseError(f"Unexpected token: {tok_val!r}")

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> list[Expression]:
    """Read every top-level expression in `source`.

    The whole text is parsed before anything is returned, so a malformed
    form anywhere aborts the read.
    """
    exprs = list(TokenStream(lex(source)).parse_all())
    logger.debug("read %d expression(s)", len(exprs))
    return exprs
