# Core type aliases for slisp's data model.
# Runtime values are plain Python types (int, float, str, list of values).
# Syntax trees are built from the node classes in slisp.types (Symbol, Atom, Call).
#
# Naming guidance:
# - Expression: Use in reader/evaluator code to denote a parsed syntax tree node.
# - LispValue:  Use in environment/builtin code to denote an evaluated value.

from typing import Any, Callable, Union

# Runtime value alias: int | float | str | list[LispValue]
LispValue = Union[int, float, str, list]
# Syntax tree node alias: Symbol | Atom | Call
Expression = Any

# Builtin function type: fn(env, args) -> LispValue
BuiltinFn = Callable[..., LispValue]
