"""Runtime environment for slisp.

The Environment stores bindings of symbol names to evaluated values. Bindings are
write-once: a name moves from unbound to bound exactly once and there is no way
to rebind or unbind it. The whole environment is discarded with its session.
"""

from __future__ import annotations

import logging
import threading
from io import StringIO
from typing import Iterator

from slisp import LispValue
from slisp.errors import (
    SlispInvalidSymbol,
    SlispRedefinitionError,
    SlispTypeError,
    SlispUndefinedSymbol,
)
from slisp.types.symbol import Symbol
from slisp.types.value import copy_value, is_value, type_name

logger = logging.getLogger(__name__)


def _name_of(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.name
    if not isinstance(name, str):
        raise SlispInvalidSymbol(f"Cannot use {name!r} as a symbol name", name=None)
    return name


class Environment:
    """Write-once mapping from symbol names to values.

    Every public operation holds the same lock for its whole duration, so a
    reader sees either the state before a bind or the state after it.
    """

    __slots__ = ("vars", "_lock")

    def __init__(self):
        self.vars: dict[str, LispValue] = {}
        self._lock = threading.Lock()

    def bind(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` to `value` if `name` is not bound yet.

        Raises SlispRedefinitionError if `name` is already bound; the existing
        binding is left untouched. Raises SlispTypeError if `value` is not a
        runtime value.
        """
        key = _name_of(name)
        if not is_value(value):
            raise SlispTypeError(f"Cannot bind `{key}` to a {type_name(value)}")
        stored = copy_value(value)
        with self._lock:
            if key in self.vars:
                logger.debug("Rejected rebind of %r", key)
                raise SlispRedefinitionError(f"cannot reassign name `{key}`", name=key)
            self.vars[key] = stored

    def lookup(self, name: str | Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        Raises SlispUndefinedSymbol if `name` is not bound.
        """
        key = _name_of(name)
        with self._lock:
            try:
                value = self.vars[key]
            except KeyError:
                raise SlispUndefinedSymbol(f"name `{key}` is undefined", name=key) from None
            return copy_value(value)

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bind every entry of `mapping`; all names must be unbound.

        Either all entries are bound or, on any conflict, none are.
        """
        staged = {}
        for k, v in mapping.items():
            key = _name_of(k)
            if not is_value(v):
                raise SlispTypeError(f"Cannot bind `{key}` to a {type_name(v)}")
            staged[key] = copy_value(v)
        with self._lock:
            for key in staged:
                if key in self.vars:
                    raise SlispRedefinitionError(f"cannot reassign name `{key}`", name=key)
            self.vars.update(staged)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Symbol):
            name = name.name
        with self._lock:
            return name in self.vars

    def __len__(self) -> int:
        with self._lock:
            return len(self.vars)

    def names(self) -> Iterator[str]:
        with self._lock:
            return iter(sorted(self.vars))

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with self._lock, StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with self._lock, StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
