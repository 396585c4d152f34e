import pygame
import pytest

from pyman.app import HUD_H, KEY_DIRS, WALL_BLUE, Renderer, held_direction
from pyman.game import Game


@pytest.fixture
def renderer():
    pygame.init()
    game = Game(seed=1)
    surface = pygame.Surface((game.maze.w * 16, game.maze.h * 16 + HUD_H))
    r = Renderer(surface, game.maze, scale=2)
    r.sync(game.food.cells, game.level)
    yield r, game
    pygame.quit()


def test_held_direction():
    keys = {key: False for key in KEY_DIRS}
    assert held_direction(keys) is None
    keys[pygame.K_w] = True
    assert held_direction(keys) == "up"


def test_draws_walls(renderer):
    r, game = renderer
    r.draw(game.view())
    assert tuple(r.surface.get_at((8, HUD_H + 8)))[:3] == WALL_BLUE


def test_pellet_diffs(renderer):
    r, game = renderer
    game.lock = None
    game.player.place(*game.maze.tile_center((12, 23)), "left")
    game.tick(1)
    r.apply(game.view())
    assert (12, 23) not in r.pellets
    assert len(r.pellets) == 243
    r.draw(game.view(), high_score=500, clock_ms=1234)
