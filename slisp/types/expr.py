"""Syntax tree nodes other than Symbol.

An expression tree is strictly tree shaped: a Call owns its argument nodes and
nothing points back up the tree.
"""
from __future__ import annotations

import sys
from typing import Iterable

from slisp import Expression, LispValue


class Atom:
    """A literal value that was resolved at parse time."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __eq__(self, other: object) -> bool:
        # type() check keeps Atom(1) != Atom(1.0) and Atom(1) != Atom(True)
        return (
            isinstance(other, Atom)
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __repr__(self):
        return f"Atom({self.value!r})"


class Call:
    """A parenthesised function call form: (name arg...)."""

    __slots__ = ("name", "args")

    def __init__(self, name: str, args: Iterable[Expression] = ()):
        self.name = sys.intern(name)
        self.args: tuple[Expression, ...] = tuple(args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Call) and self.name == other.name and self.args == other.args

    def __repr__(self):
        args = ", ".join(repr(a) for a in self.args)
        return f"Call({self.name!r}, [{args}])"
