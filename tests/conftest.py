import pytest

from slisp.builtin.env_builtin import standard_builtins
from slisp.types.environment import Environment

# Tests that use the `grammar` fixture run twice:
# 1) with the pattern reader (slisp.reader.parser) ["pattern"]
# 2) with the token-stream reader (slisp.reader.tokens) ["tokens"]
# Both readers must agree on every input the pattern reader accepts.


@pytest.fixture(params=["pattern", "tokens"])
def grammar(request):
    return request.param


@pytest.fixture
def env():
    """Fresh, empty environment."""
    return Environment()


@pytest.fixture
def builtins():
    """Registry holding the standard builtins."""
    return standard_builtins()
