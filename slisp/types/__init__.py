from slisp.types.symbol import Symbol
from slisp.types.expr import Atom, Call
from slisp.types.environment import Environment

__all__ = ["Symbol", "Atom", "Call", "Environment"]
