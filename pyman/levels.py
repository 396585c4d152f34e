from dataclasses import dataclass
from typing import Dict, Tuple

# -----------------------------
# Per-level tuning table
# -----------------------------
# Speeds are percentages of settings.BASE_SPEED_TPS. Elroy thresholds are
# pellets *remaining*. Mode times alternate scatter, chase, scatter, ...;
# after the last entry the ghosts chase for good.


@dataclass(frozen=True)
class LevelData:
    fruit: str
    fruit_points: int
    pac_speed: int
    pac_dots_speed: int
    ghost_speed: int
    ghost_tunnel_speed: int
    elroy1_dots: int
    elroy1_speed: int
    elroy2_dots: int
    elroy2_speed: int
    fright_pac_speed: int
    fright_pac_dots_speed: int
    fright_ghost_speed: int
    fright_time: float
    fright_flashes: int
    mode_times: Tuple[float, ...]
    pen_dot_limits: Dict[str, int]
    pen_force_time: float

    def elroy_thresholds(self):
        return (self.elroy1_dots, self.elroy2_dots)


MODES_1 = (7, 20, 7, 20, 5, 20, 5)
MODES_2_4 = (7, 20, 7, 20, 5, 1033, 1 / 60)
MODES_5 = (5, 20, 5, 20, 5, 1037, 1 / 60)

SPEEDS_1 = (80, 71, 75, 40)
SPEEDS_2_4 = (90, 79, 85, 45)
SPEEDS_5 = (100, 87, 95, 50)
SPEEDS_21 = (90, 79, 95, 50)


def _row(fruit, points, speeds, elroy, fright_speeds, fright, modes, pen_limits, force_time):
    pac, pac_dots, ghost, tunnel = speeds
    e1_dots, e1_speed, e2_dots, e2_speed = elroy
    fr_pac, fr_pac_dots, fr_ghost = fright_speeds
    fright_time, flashes = fright
    pinky, inky, clyde = pen_limits
    return LevelData(
        fruit=fruit, fruit_points=points,
        pac_speed=pac, pac_dots_speed=pac_dots,
        ghost_speed=ghost, ghost_tunnel_speed=tunnel,
        elroy1_dots=e1_dots, elroy1_speed=e1_speed,
        elroy2_dots=e2_dots, elroy2_speed=e2_speed,
        fright_pac_speed=fr_pac, fright_pac_dots_speed=fr_pac_dots,
        fright_ghost_speed=fr_ghost,
        fright_time=fright_time, fright_flashes=flashes,
        mode_times=modes,
        pen_dot_limits={"pinky": pinky, "inky": inky, "clyde": clyde},
        pen_force_time=force_time,
    )


LEVELS = (
    _row("cherry", 100, SPEEDS_1, (20, 80, 10, 85), (90, 79, 50), (6, 5), MODES_1, (0, 30, 60), 4.0),
    _row("strawberry", 300, SPEEDS_2_4, (30, 90, 15, 95), (95, 83, 55), (5, 5), MODES_2_4, (0, 0, 50), 4.0),
    _row("peach", 500, SPEEDS_2_4, (40, 90, 20, 95), (95, 83, 55), (4, 5), MODES_2_4, (0, 0, 0), 4.0),
    _row("peach", 500, SPEEDS_2_4, (40, 90, 20, 95), (95, 83, 55), (3, 5), MODES_2_4, (0, 0, 0), 4.0),
    _row("apple", 700, SPEEDS_5, (40, 100, 20, 105), (100, 87, 60), (2, 5), MODES_5, (0, 0, 0), 3.0),
    _row("apple", 700, SPEEDS_5, (50, 100, 25, 105), (100, 87, 60), (5, 5), MODES_5, (0, 0, 0), 3.0),
    _row("grapes", 1000, SPEEDS_5, (50, 100, 25, 105), (100, 87, 60), (2, 5), MODES_5, (0, 0, 0), 3.0),
    _row("grapes", 1000, SPEEDS_5, (50, 100, 25, 105), (100, 87, 60), (2, 5), MODES_5, (0, 0, 0), 3.0),
    _row("galaxian", 2000, SPEEDS_5, (60, 100, 30, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("galaxian", 2000, SPEEDS_5, (60, 100, 30, 105), (100, 87, 60), (5, 5), MODES_5, (0, 0, 0), 3.0),
    _row("bell", 3000, SPEEDS_5, (60, 100, 30, 105), (100, 87, 60), (2, 5), MODES_5, (0, 0, 0), 3.0),
    _row("bell", 3000, SPEEDS_5, (80, 100, 40, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (80, 100, 40, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (80, 100, 40, 105), (100, 87, 60), (3, 5), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (100, 100, 50, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (100, 100, 50, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (100, 100, 50, 105), (100, 87, 60), (0, 0), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (100, 100, 50, 105), (100, 87, 60), (1, 3), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (120, 100, 60, 105), (100, 87, 60), (0, 0), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_5, (120, 100, 60, 105), (100, 87, 60), (0, 0), MODES_5, (0, 0, 0), 3.0),
    _row("key", 5000, SPEEDS_21, (120, 100, 60, 105), (100, 87, 60), (0, 0), MODES_5, (0, 0, 0), 3.0),
)


def level_data(level):
    """Row for a 1-based level number; levels past the table reuse the last row."""
    index = max(1, level) - 1
    return LEVELS[min(index, len(LEVELS) - 1)]
