import pytest

from banglisp.interpreter import Interpreter
from banglisp.reader.parser import read_from_string
from banglisp.runtime_context import RuntimeContext

# Every test gets its own RuntimeContext, so symbols, packages and global
# values never leak between tests.


@pytest.fixture
def ctx():
    return RuntimeContext()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def read(ctx):
    """Read the first form of a source string in the `ctx` fixture's package."""
    def _read(source):
        return read_from_string(source, ctx)
    return _read
