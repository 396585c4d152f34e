from types import SimpleNamespace

import pytest

from pyman.ghosts import BLUE, CHASE, SCATTER, WHITE
from pyman.levels import level_data
from pyman.modes import CALM, SWITCH, ModeScheduler, PenRelease


@pytest.fixture
def modes():
    return ModeScheduler(level_data(1))


def caged(*names):
    return [SimpleNamespace(name=name, dot_counter=0) for name in names]


def test_scatter_then_chase(modes):
    assert modes.phase == SCATTER
    assert modes.update(6.9) is None
    assert modes.update(0.2) == SWITCH
    assert modes.phase == CHASE


def test_chase_forever_after_table(modes):
    switches = [modes.update(1.0) for _ in range(120)].count(SWITCH)
    assert switches == 7
    assert modes.phase == CHASE
    assert modes.update(1000.0) is None


def test_fright_pauses_timeline(modes):
    modes.update(3.0)
    assert modes.frighten()
    assert modes.mode == BLUE
    assert modes.update(5.9) is None
    assert modes.update(0.1) == CALM
    assert not modes.frightened
    assert modes.elapsed == 3.0
    assert modes.mode == SCATTER


def test_fright_blinks_white_first(modes):
    modes.frighten()
    modes.update(3.0)
    assert modes.mode == BLUE
    modes.update(1.05)
    assert modes.mode == WHITE
    modes.update(0.2)
    assert modes.mode == BLUE
    modes.update(0.2)
    assert modes.mode == WHITE


def test_second_energizer_restarts_countdown(modes):
    modes.frighten()
    modes.update(4.0)
    modes.frighten()
    assert modes.fright_left == 6.0


def test_zero_fright_time():
    modes = ModeScheduler(level_data(19))
    assert not modes.frighten()
    assert modes.mode == SCATTER


def test_personal_counters():
    pen = PenRelease(level_data(1))
    ghosts = caged("pinky", "inky", "clyde")
    assert pen.check(ghosts) is ghosts[0]

    inky, clyde = ghosts[1:]
    for _ in range(29):
        assert pen.pellet_eaten([inky, clyde]) is None
    assert pen.pellet_eaten([inky, clyde]) is inky
    assert inky.dot_counter == 30
    assert clyde.dot_counter == 0


def test_global_counter_then_personal():
    pen = PenRelease(level_data(1), use_global=True)
    pinky, inky, clyde = caged("pinky", "inky", "clyde")
    for _ in range(6):
        assert pen.pellet_eaten([pinky, inky, clyde]) is None
    assert pen.pellet_eaten([pinky, inky, clyde]) is pinky
    for _ in range(9):
        assert pen.pellet_eaten([inky, clyde]) is None
    assert pen.pellet_eaten([inky, clyde]) is inky
    for _ in range(14):
        assert pen.pellet_eaten([clyde]) is None
    assert pen.pellet_eaten([clyde]) is clyde
    assert not pen.use_global
    assert pen.global_counter == 32


def test_force_timer():
    pen = PenRelease(level_data(1))
    ghosts = caged("inky", "clyde")
    assert pen.update(3.9, ghosts) is None
    assert pen.update(0.2, ghosts) is ghosts[0]
    assert pen.idle == 0.0
    pen.update(3.0, ghosts)
    pen.pellet_eaten(ghosts)
    assert pen.update(3.0, ghosts) is None


def test_snapshot_restore(modes):
    modes.update(8.5)
    modes.frighten()
    copy = ModeScheduler(level_data(1))
    copy.restore(modes.snapshot())
    assert copy.snapshot() == modes.snapshot()
    assert copy.mode == modes.mode
