"""Helpers for runtime values.

A value is an int, float, str, or a list of values. Values behave as immutable:
anything handed out of an Environment or an Atom is a fresh copy.
"""
from __future__ import annotations

import copy

from slisp import LispValue

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def is_value(obj: object) -> bool:
    """True if `obj` is a runtime value (bool is excluded even though it is an int)."""
    if isinstance(obj, bool):
        return False
    if isinstance(obj, (int, float, str)):
        return True
    if isinstance(obj, list):
        return all(is_value(item) for item in obj)
    return False


def is_number(obj: object) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def fits_int64(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def copy_value(value: LispValue) -> LispValue:
    # scalars are immutable, only lists need copying
    if isinstance(value, list):
        return copy.deepcopy(value)
    return value


def type_name(value: LispValue) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    return type(value).__name__
