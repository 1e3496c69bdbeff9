import logging
import sys
from typing import TextIO

from slisp import LispValue
from slisp.builtin.env_builtin import standard_builtins
from slisp.builtin.registry import BuiltinRegistry
from slisp.config import get_log_level
from slisp.errors import SlispError
from slisp.evaluation.evaluator import evaluate
from slisp.printer import to_source
from slisp.reader.parser import parse_expression
from slisp.types.environment import Environment

logger = logging.getLogger(__name__)

GREETING = "Hello, world!"


class Interpreter:
    """
    An evaluation session for slisp expressions.
    Keeps one live Environment, so bindings persist across evaluations.
    """
    def __init__(self, builtins: BuiltinRegistry | None = None, grammar: str | None = None):
        self.env = Environment()
        self.builtins = builtins if builtins is not None else standard_builtins()
        self.grammar = grammar

    def parse(self, code: str):
        return parse_expression(code.strip(), self.grammar)

    def eval(self, code: str) -> LispValue:
        """Parse a single expression from `code` and evaluate it."""
        expr = self.parse(code)
        return evaluate(expr, self.env, self.builtins)

    def define(self, name: str, value: LispValue) -> None:
        self.env.bind(name, value)

    def define_source(self, name: str, code: str) -> LispValue:
        """Bind `name` to the value of `code`; returns that value."""
        value = self.eval(code)
        self.env.bind(name, value)
        return value


def main(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Read expressions line by line and print their values."""
    logging.basicConfig(level=get_log_level())
    interp = Interpreter()
    print(GREETING, file=stdout)
    for line in stdin:
        code = line.strip()
        if not code:
            continue
        try:
            result = interp.eval(code)
        except SlispError as ex:
            logger.debug("Evaluation of %r failed", code, exc_info=True)
            print(f"error: {ex}", file=stdout)
            continue
        print(to_source(result), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
