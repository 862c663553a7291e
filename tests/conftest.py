import os

import pytest

from yall.evaluation.evaluator import evaluate
from yall.interpreter import Interpreter
from yall.reader.parser import read
from yall.types.empty import Empty
from yall.types.environment import Environment
from yall.types.printer import to_string


# Keep a developer's prelude files out of the test runs
os.environ.pop("YALL_PRELUDE_PATH", None)


@pytest.fixture
def env():
    """Fresh root environment; builtins come from the shared table."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


def run(source: str, env: Environment):
    """Evaluate every form in `source` and return the last value."""
    result = Empty
    for expr in read(source):
        result = evaluate(expr, env)
    return result


def run_print(source: str, env: Environment) -> str:
    return to_string(run(source, env))
