import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Evaluator
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def evaluator():
    return Evaluator()
