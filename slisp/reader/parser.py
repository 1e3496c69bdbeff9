"""
  Pattern-driven reader for slisp source fragments.

- Each fragment is classified by whole-fragment pattern matches, in order:
    symbol -> Symbol
    (name args...) -> Call
    anything else -> Atom (integer, float, string; quoted lists are recognised
    but not yet constructible)
- Call arguments are split on single spaces. When the argument text holds a
  nested call, it is decomposed around the FIRST '(' and the LAST ')':

      (f a (g b) c)  ->  before="a ", nested="(g b)", after=" c"

  which supports exactly one nested group per call. Two or more sibling nested
  calls are not decomposed; they come back as a SlispParseError.
"""

from __future__ import annotations

import logging

from slisp import Expression, LispValue
from slisp.config import get_grammar
from slisp.errors import SlispNotSupported, SlispOverflowError, SlispParseError
from slisp.reader.patterns import CALL_RE, FLOAT_RE, INT_RE, LIST_RE, STR_RE, SYMBOL_RE
from slisp.types.expr import Atom, Call
from slisp.types.symbol import Symbol
from slisp.types.value import fits_int64

logger = logging.getLogger(__name__)


def parse_value(src: str) -> LispValue:
    """Parse an atomic literal: integer, float or string."""
    if INT_RE.fullmatch(src):
        n = int(src)
        if not fits_int64(n):
            raise SlispOverflowError(f"integer literal out of range: `{src}`", fragment=src)
        return n
    elif FLOAT_RE.fullmatch(src):
        return float(src)
    elif STR_RE.fullmatch(src):
        # Verbatim: escapes such as \" are kept as written
        return src[1:-1]
    elif LIST_RE.fullmatch(src):
        raise SlispNotSupported(f"list literals are not supported: `{src}`", fragment=src)
    raise SlispParseError(f"malformed value: `{src}`", fragment=src)


def parse_expression(src: str, grammar: str | None = None) -> Expression:
    """Parse `src` into a Symbol, Call or Atom.

    `grammar` selects the reader: "pattern" (this module) or "tokens"
    (slisp.reader.tokens). Defaults to the configured SLISP_GRAMMAR.
    """
    if grammar is None:
        grammar = get_grammar()
    if grammar == "tokens":
        from slisp.reader.tokens import read_expression
        return read_expression(src)
    if grammar != "pattern":
        raise ValueError(f"Unknown grammar: {grammar!r}")
    try:
        expr = _parse_fragment(src)
    except RecursionError:
        raise SlispParseError("expression is nested too deeply") from None
    logger.debug("Parsed %r -> %r", src, expr)
    return expr


def _split_args(text: str) -> list[str]:
    args = (arg.strip() for arg in text.split(" "))
    return [arg for arg in args if arg]


def _parse_fragment(src: str) -> Expression:
    if SYMBOL_RE.fullmatch(src):
        return Symbol(src)

    mat = CALL_RE.fullmatch(src)
    if mat is None:
        return Atom(parse_value(src))

    func_name = mat.group("funcname")
    raw_args = mat.group("args")
    args: list[Expression] = []

    if "(" in src[1:]:
        # until first function
        before, nested_after = raw_args.split("(", 1)
        if ")" not in nested_after:
            raise SlispParseError(f"unmatched parentheses: `{src}`", fragment=src)
        nested, after = nested_after.rsplit(")", 1)

        for arg in _split_args(before):
            args.append(_parse_fragment(arg))
        args.append(_parse_fragment("(" + nested + ")"))
        for arg in _split_args(after):
            args.append(_parse_fragment(arg))
    else:
        for arg in _split_args(raw_args):
            args.append(_parse_fragment(arg))

    return Call(func_name, args)
