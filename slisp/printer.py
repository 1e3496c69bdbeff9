"""Render values and expressions back to slisp source text."""
from __future__ import annotations

from slisp import Expression, LispValue
from slisp.types.expr import Atom, Call
from slisp.types.symbol import Symbol


def to_source(value: LispValue) -> str:
    """Render a value as source text.

    Non-finite floats (which only arise from float overflow) render as `inf`,
    `-inf` or `nan`. That output is for display; neither reader accepts it.
    """
    if isinstance(value, list):
        return "'(" + " ".join(to_source(v) for v in value) + ")"
    if isinstance(value, str):
        # Strings are kept verbatim, as the reader does
        return f'"{value}"'
    if isinstance(value, float):
        return repr(value)
    return str(value)


def expression_to_source(expr: Expression) -> str:
    if isinstance(expr, Symbol):
        return expr.name
    if isinstance(expr, Atom):
        return to_source(expr.value)
    if isinstance(expr, Call):
        if not expr.args:
            return f"({expr.name})"
        return f"({expr.name} " + " ".join(expression_to_source(a) for a in expr.args) + ")"
    raise TypeError(f"Not an expression: {expr!r}")
