import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from brick_breaker.session import Game, Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def env():
    from brick_breaker.env import GameEnv

    env = GameEnv()
    yield env
    env.close()
