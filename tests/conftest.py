import pytest

from cinder.builtin import env_builtin
from cinder.interpreter import Program
from cinder.types.environment import Environment


@pytest.fixture
def env():
    env = Environment()
    env_builtin.register(env)
    return env


@pytest.fixture
def program():
    return Program()

