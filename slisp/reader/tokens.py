"""
  Token-stream reader for slisp.

A recursive-descent alternative to the pattern reader in slisp.reader.parser.
It produces the same Symbol/Atom/Call trees, but handles any number of sibling
nested calls at any depth:

    (f (g a) (h (k b)) c)

Tokens:
    lparen  (
    rparen  )
    quote   '         (list literals are recognised but not supported)
    string  "..."     backslash pairs are kept verbatim
    atom    any other run of characters up to whitespace, paren, or quote
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from slisp import Expression
from slisp.errors import SlispNotSupported, SlispParseError
from slisp.reader.parser import parse_value
from slisp.reader.patterns import SYMBOL_RE
from slisp.types.expr import Atom, Call
from slisp.types.symbol import Symbol


logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r'|(?P<atom>[^\s()\'"]+)'
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:].strip()
            if not rest:
                break
            if rest.startswith('"'):
                raise SlispParseError(f"unterminated string: `{rest}`", fragment=rest)
            raise SlispParseError(f"unexpected input at {pos}: `{rest}`", fragment=rest)
        for nm in TOKEN_RE.groupindex:
            if m.group(nm) is not None:
                yield nm, m.group(nm)
                break
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

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

    def parse_expr(self) -> Expression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise SlispParseError("unexpected end of input")

        if tok_type == "atom":
            self.advance()
            if SYMBOL_RE.fullmatch(tok_val):
                return Symbol(tok_val)
            return Atom(parse_value(tok_val))

        if tok_type == "string":
            self.advance()
            return Atom(tok_val[1:-1])

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] == "lparen":
                raise SlispNotSupported("list literals are not supported", fragment="'(")
            raise SlispParseError(f"malformed value: `'{self.peek()[1] or ''}`", fragment="'")

        if tok_type == "rparen":
            raise SlispParseError("unmatched ')'", fragment=")")

        # Call: ( name arg... )
        self.advance()
        head_type, head_val = self.peek()
        if head_type == "rparen":
            raise SlispParseError("empty call `()`", fragment="()")
        if head_type is None:
            raise SlispParseError("unmatched '('", fragment="(")
        if head_type != "atom" or not SYMBOL_RE.fullmatch(head_val):
            raise SlispParseError(f"malformed function name: `{head_val}`", fragment=head_val)
        self.advance()

        args = []
        while True:
            if self.peek()[0] == "rparen":
                self.advance()
                break
            if self.peek()[0] is None:
                raise SlispParseError(f"unmatched '(' in call to `{head_val}`", fragment="(")
            args.append(self.parse_expr())
        return Call(head_val, args)


def read_expression(source: str) -> Expression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise SlispParseError("expression is nested too deeply") from None
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise SlispParseError(f"unexpected trailing input: `{tok_val}`", fragment=tok_val)
    logger.debug("Read %r -> %r", source, expr)
    return expr
