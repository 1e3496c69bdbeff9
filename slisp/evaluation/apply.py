"""Application of builtin operations.

The evaluator resolves a Call's name and evaluates its arguments; this module
invokes the resolved builtin and checks that what comes back is a runtime value.
"""

from __future__ import annotations

from slisp import BuiltinFn, LispValue
from slisp.errors import SlispTypeError
from slisp.types.environment import Environment
from slisp.types.value import is_value, type_name


def apply(name: str, fn: BuiltinFn, args: list[LispValue], env: Environment) -> LispValue:
    """Apply builtin `fn` (registered as `name`) to already-evaluated `args`.

    Builtins receive the live environment and the argument list, and report
    arity/type problems by raising SlispArityError/SlispTypeError.
    """
    result = fn(env, args)
    if not is_value(result):
        raise SlispTypeError(f"{name} returned a {type_name(result)}, not a value")
    return result
