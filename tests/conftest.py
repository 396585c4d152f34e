import os

import pytest

# pygame renders off-screen in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from pyman.game import Game  # noqa: E402
from pyman.maze import Maze  # noqa: E402


@pytest.fixture
def maze():
    return Maze()


@pytest.fixture
def game():
    return Game(seed=1)


@pytest.fixture
def playing(game):
    """A fresh game with the READY freeze skipped."""
    game.lock = None
    return game
