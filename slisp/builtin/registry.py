"""Table of builtin operations callable from slisp code."""

from __future__ import annotations

import logging
from typing import Iterator

from slisp import BuiltinFn
from slisp.errors import SlispUnknownFunction
from slisp.reader.patterns import SYMBOL_RE

logger = logging.getLogger(__name__)


class BuiltinRegistry:
    """Maps function names to Python callables `fn(env, args) -> value`."""

    __slots__ = ("functions",)

    def __init__(self, functions: dict[str, BuiltinFn] | None = None):
        self.functions: dict[str, BuiltinFn] = {}
        for name, fn in (functions or {}).items():
            self.register(name, fn)

    def register(self, name: str, fn: BuiltinFn) -> None:
        """Register `fn` under `name`, replacing any earlier registration.

        `name` must be a valid symbol, otherwise no call could ever reach it.
        """
        if not isinstance(name, str) or not SYMBOL_RE.fullmatch(name):
            raise ValueError(f"Invalid builtin name: {name!r}")
        if not callable(fn):
            raise TypeError(f"Builtin {name!r} is not callable")
        self.functions[name] = fn

    def lookup(self, name: str) -> BuiltinFn:
        try:
            return self.functions[name]
        except KeyError:
            logger.debug("Unknown function %r", name)
            raise SlispUnknownFunction(f"unknown function `{name}`", name=name) from None

    def names(self) -> Iterator[str]:
        return iter(sorted(self.functions))

    def __contains__(self, name: object) -> bool:
        return name in self.functions

    def __len__(self) -> int:
        return len(self.functions)

    def __repr__(self) -> str:
        return f"<BuiltinRegistry {', '.join(self.names())}>"
