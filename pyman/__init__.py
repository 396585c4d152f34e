"""Py-Man: arcade maze chase simulation with a pygame front end."""

from .game import OVER, PLAYING, Game, SnapshotError
from .maze import Maze

__version__ = "0.1.0"

__all__ = ["Game", "Maze", "SnapshotError", "PLAYING", "OVER"]
