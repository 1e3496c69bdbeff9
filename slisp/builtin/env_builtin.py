"""Standard builtin functions for slisp.

Arithmetic, string and list helpers exposed to slisp code, plus `register()`
which installs them into a BuiltinRegistry.
"""
from __future__ import annotations

from slisp import LispValue
from slisp.builtin.registry import BuiltinRegistry
from slisp.errors import SlispArityError, SlispEvalError, SlispTypeError
from slisp.types.environment import Environment
from slisp.types.value import is_number, type_name


def _check_numbers(name: str, expr: list[LispValue]) -> None:
    for x in expr:
        if not is_number(x):
            raise SlispTypeError(f"All arguments to {name} must be numbers, got a {type_name(x)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (add) is 0."""
    _check_numbers("add", expr)
    try:
        return sum(expr)
    except OverflowError:
        raise SlispEvalError("Numeric overflow in add") from None


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise SlispArityError("sub requires at least 1 argument")
    _check_numbers("sub", expr)
    if len(expr) == 1:
        return -expr[0]
    result = expr[0]
    try:
        for x in expr[1:]:
            result -= x
    except OverflowError:
        raise SlispEvalError("Numeric overflow in sub") from None
    return result


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (mul) is 1."""
    _check_numbers("mul", expr)
    result = 1
    try:
        for x in expr:
            result *= x
    except OverflowError:
        raise SlispEvalError("Numeric overflow in mul") from None
    return result


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns reciprocal."""
    if not expr:
        raise SlispArityError("div requires at least 1 argument")
    _check_numbers("div", expr)
    try:
        if len(expr) == 1:
            return 1 / expr[0]
        result = expr[0]
        for x in expr[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise SlispEvalError("Division by zero") from None
    except OverflowError:
        raise SlispEvalError("Numeric overflow in div") from None


# -------------------------------
# Strings and lists
# -------------------------------
def concat(env: Environment, expr: list[LispValue]) -> str:
    """Join string arguments end to end."""
    for x in expr:
        if not isinstance(x, str):
            raise SlispTypeError(f"All arguments to concat must be strings, got a {type_name(x)}")
    return "".join(expr)


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def length(env: Environment, expr: list[LispValue]) -> int:
    if len(expr) != 1:
        raise SlispArityError("length requires exactly 1 argument")
    xs = expr[0]
    if not isinstance(xs, (str, list)):
        raise SlispTypeError(f"length requires a string or list, got a {type_name(xs)}")
    return len(xs)


def register(registry: BuiltinRegistry) -> BuiltinRegistry:
    """Register all standard builtins into the given registry and return it."""
    for name, fn in {
        "add": add,
        "sub": sub,
        "mul": mul,
        "div": div,
        "concat": concat,
        "list": list_builtin,
        "length": length,
    }.items():
        registry.register(name, fn)
    return registry


def standard_builtins() -> BuiltinRegistry:
    return register(BuiltinRegistry())
