from .maze import ENERGIZER, PILL
from .settings import ENERGIZER_VALUE, PILL_VALUE

VALUES = {PILL: PILL_VALUE, ENERGIZER: ENERGIZER_VALUE}


class FoodGrid:
    """Pellets still on the board for the current level."""

    def __init__(self, maze):
        self.cells = dict(maze.food)
        self.total = len(self.cells)

    @property
    def remaining(self):
        return len(self.cells)

    @property
    def eaten(self):
        return self.total - len(self.cells)

    def at(self, tile):
        return self.cells.get(tile)

    def eat(self, tile):
        """Clear a tile; returns the pellet kind that was there or None."""
        return self.cells.pop(tile, None)

    def snapshot(self):
        return {
            "total": self.total,
            "cells": [[c, r, kind] for (c, r), kind in sorted(self.cells.items())],
        }

    def restore(self, data):
        self.total = data["total"]
        self.cells = {(c, r): kind for c, r, kind in data["cells"]}
