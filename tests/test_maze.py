from pyman.maze import (
    ENERGIZER, INTERSECTION, PELLET_INTERSECTION, PELLET_PATH, PILL, TUNNEL, WALL,
    perpendicular,
)
from pyman.settings import TILE


def test_classic_food_count(maze):
    kinds = list(maze.food.values())
    assert len(kinds) == 244
    assert kinds.count(ENERGIZER) == 4
    assert kinds.count(PILL) == 240


def test_turn_table_lists_exits_in_arcade_order(maze):
    assert maze.turns_at((6, 5)) == ("up", "left", "down", "right")
    assert maze.turns_at((3, 5)) == ("left", "right")
    assert maze.turns_at((0, 0)) == ()


def test_cell_kinds(maze):
    assert maze.kind((0, 0)) == WALL
    assert maze.kind((3, 5)) == PELLET_PATH
    assert maze.kind((6, 5)) == PELLET_INTERSECTION
    assert maze.kind((12, 11)) == INTERSECTION
    assert maze.kind((0, 14)) == TUNNEL


def test_pen_and_door_are_not_walkable(maze):
    assert maze.door == [(13, 12), (14, 12)]
    assert maze.is_wall((13, 12))
    assert maze.is_wall((13, 14))


def test_tunnel_wraps(maze):
    assert maze.neighbor((0, 14), "left") == (27, 14)
    assert maze.neighbor((27, 14), "right") == (0, 14)
    assert maze.turns_at((0, 14)) == ("left", "right")
    assert maze.wrap_x(-1) == maze.w * TILE - 1
    assert maze.wrap_x(maze.w * TILE) == 0


def test_pen_geometry(maze):
    assert maze.door_x == 112
    assert maze.entrance_y == 92
    assert maze.pen_y == 116
    assert maze.entrance_tile == (13, 11)
    homes = maze.homes()
    assert homes["inky"][0] < homes["pinky"][0] < homes["clyde"][0]


def test_tile_center_round_trip(maze):
    for tile in [(1, 1), (13, 23), (27, 14)]:
        assert maze.pixel_to_tile(*maze.tile_center(tile)) == tile


def test_perpendicular():
    assert perpendicular("up", "left")
    assert perpendicular("right", "down")
    assert not perpendicular("up", "down")
    assert not perpendicular("left", "left")
