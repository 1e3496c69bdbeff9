"""Core evaluator for slisp.

    Atom(v)            -> a copy of v
    Symbol(s)          -> env.lookup(s)
    Call(name, args)   -> args evaluated left to right, then the builtin `name`
                          from the registry is applied to them

There are no special forms and no user-defined procedures.
"""

from __future__ import annotations

import logging

from slisp import Expression, LispValue
from slisp.builtin.registry import BuiltinRegistry
from slisp.errors import SlispApplicationNotSupported, SlispEvalError
from slisp.evaluation.apply import apply
from slisp.types.environment import Environment
from slisp.types.expr import Atom, Call
from slisp.types.symbol import Symbol
from slisp.types.value import copy_value

logger = logging.getLogger(__name__)


def evaluate(
    expr: Expression, env: Environment, builtins: BuiltinRegistry | None = None
) -> LispValue:
    """Evaluate `expr` against `env`.

    Without a `builtins` registry, calls cannot be applied and raise
    SlispApplicationNotSupported. Any failure while evaluating an argument
    aborts the whole call.
    """
    try:
        return _evaluate(expr, env, builtins)
    except RecursionError:
        raise SlispEvalError("expression is nested too deeply") from None


def _evaluate(
    expr: Expression, env: Environment, builtins: BuiltinRegistry | None
) -> LispValue:
    match expr:
        case Atom(value=value):
            return copy_value(value)

        case Symbol(name=name):
            value = env.lookup(name)
            logger.debug("Symbol %s -> %r", name, value)
            return value

        case Call(name=name, args=arg_exprs):
            if builtins is None:
                raise SlispApplicationNotSupported(
                    f"cannot apply `{name}`: function application is not supported"
                )
            args = [_evaluate(arg, env, builtins) for arg in arg_exprs]
            fn = builtins.lookup(name)
            result = apply(name, fn, args, env)
            logger.debug("Call %s%r -> %r", name, tuple(args), result)
            return result

    raise SlispEvalError(f"Cannot evaluate {expr!r}: not an expression")
