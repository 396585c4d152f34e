import pytest

from pyman.actors import Agent, PenPath, Player
from pyman.settings import PLAYER_CORNER


@pytest.fixture
def player(maze):
    return Player(maze)


def test_player_starts_between_tiles(player, maze):
    assert (player.x, player.y) == maze.player_start
    assert player.tile == (14, 23)
    assert player.dir == "left"


def test_moves_onto_next_centre(player):
    player.advance(4)
    assert (player.x, player.y) == (108, 188)
    assert player.tile == (13, 23)


def test_reversal_is_instant(player):
    player.request_turn("right")
    assert player.dir == "right"
    assert player.pending is None


def test_stops_at_wall_until_legal_turn(player, maze):
    player.place(*maze.tile_center((1, 23)), "left")
    player.advance(5)
    assert (player.x, player.y) == (12, 188)
    assert player.stopped

    player.request_turn("up")
    player.advance(2)
    assert player.dir == "up"
    assert (player.x, player.y) == (12, 186)


def test_illegal_turn_is_dropped_at_centre(player, maze):
    player.place(*maze.tile_center((8, 5)), "left")
    player.request_turn("down")
    player.advance(8)
    assert player.tile == (7, 5)
    assert player.dir == "left"
    assert player.pending is None


def test_corners_early_then_commits(player, maze):
    player.place(*maze.tile_center((7, 5)), "left")
    player.request_turn("down")
    player.advance(8 - PLAYER_CORNER * 8)
    assert (player.x, player.y) == (55, 44)
    assert not player.cornering

    player.advance(1)
    assert player.cornering
    assert (player.x, player.y) == (54, 45)

    player.advance(2)
    assert not player.cornering
    assert player.dir == "down"
    assert (player.x, player.y) == (52, 47)
    assert player.tile == (6, 5)


def test_reversal_waits_for_corner_to_finish(player, maze):
    player.place(*maze.tile_center((7, 5)), "left")
    player.request_turn("down")
    player.advance(5)
    player.advance(1)
    assert player.cornering

    player.request_turn("up")
    assert player.dir == "left"
    assert player.pending == "up"

    player.advance(2)
    assert not player.cornering
    assert player.dir == "up"


def test_tunnel_wrap_keeps_tile_consistent(player, maze):
    player.place(*maze.tile_center((0, 14)), "left")
    player.advance(6)
    assert player.x == 222
    assert player.tile == (27, 14)
    player.advance(2)
    assert (player.x, player.y) == maze.tile_center((27, 14))


def test_tile_follows_pixels(player, maze):
    for _ in range(400):
        player.advance(0.7)
        assert player.tile == maze.pixel_to_tile(player.x, player.y)


def test_pen_path_legs(maze):
    agent = Agent(maze, 112, 116, "up")
    path = PenPath("caged", [("up", 0.5), ("down", 1.0), ("up", 0.5)], (112, 116))
    assert not path.follow(agent, 4)
    assert (agent.x, agent.y) == (112, 112)
    assert not path.follow(agent, 8)
    assert (agent.x, agent.y) == (112, 120)
    assert agent.dir == "down"
    assert path.follow(agent, 10)
    assert (agent.x, agent.y) == (112, 116)


def test_pen_path_drops_empty_legs():
    path = PenPath("exiting", [("down", 0), ("left", 2)], (112, 116))
    assert path.legs == [("left", 2)]


def test_pen_path_snapshot():
    path = PenPath("exiting", [("left", 2), ("up", 3)], (112, 116))
    path.index = 1
    path.covered = 5.0
    copy = PenPath.restore(path.snapshot())
    assert copy.legs == path.legs
    assert (copy.index, copy.covered, copy.origin) == (1, 5.0, (112, 116))


@pytest.mark.parametrize("step", [0.1, 0.07, 1 / 3, 0.3 * 9.47 * 8 / 120, 0.6])
def test_small_steps_stop_at_wall_centre(player, maze, step):
    # (1, 20) has a wall to its left
    player.place(*maze.tile_center((3, 20)), "left")
    for _ in range(400):
        player.advance(step)
        assert not maze.is_wall(player.tile)
    assert player.stopped
    assert player.tile == (1, 20)
    assert (player.x, player.y) == maze.tile_center((1, 20))


def test_reversal_into_wall_is_dropped(player, maze):
    player.place(*maze.tile_center((1, 20)), "right")
    player.request_turn("left")
    assert player.dir == "right"
    assert player.pending is None


def test_reversal_between_centres(player):
    player.advance(1)
    player.request_turn("right")
    assert player.dir == "right"
