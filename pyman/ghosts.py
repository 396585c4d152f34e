import logging
import random
from dataclasses import dataclass
from functools import partial
from typing import Callable, Tuple

from .actors import EPSILON, Agent, PenPath
from .maze import DIRS, OPPOSITE
from .settings import GHOST_CORNER, PEN_BOUNCE, TILE

logger = logging.getLogger(__name__)

SCATTER = "scatter"
CHASE = "chase"
BLUE = "blue"
WHITE = "white"
EYES = "eyes"
FRIGHT_MODES = (BLUE, WHITE)

CAGED = "caged"
EXITING = "exiting"
ENTERING = "entering"


@dataclass(frozen=True)
class Pursuit:
    """Everything a ghost may look at when it picks a direction."""
    player_tile: Tuple[int, int]
    player_dir: str
    blinky_tile: Tuple[int, int]
    phase: str
    rng: random.Random


def ahead(tile, dir_name, n):
    """Tile `n` steps ahead; facing up also shifts `n` tiles left (arcade overflow bug)."""
    dx, dy = DIRS[dir_name]
    x, y = tile[0] + dx * n, tile[1] + dy * n
    if dir_name == "up":
        x -= n
    return x, y


# --- chase targets: (own tile, pursuit, scatter corner) -> target tile ---
def shadow_target(own, pursuit, corner):
    return pursuit.player_tile


def speedy_target(own, pursuit, corner):
    return ahead(pursuit.player_tile, pursuit.player_dir, 4)


def bashful_target(own, pursuit, corner):
    px, py = ahead(pursuit.player_tile, pursuit.player_dir, 2)
    bx, by = pursuit.blinky_tile
    return 2 * px - bx, 2 * py - by


def pokey_target(own, pursuit, corner):
    dx = own[0] - pursuit.player_tile[0]
    dy = own[1] - pursuit.player_tile[1]
    if dx * dx + dy * dy > 8 * 8:
        return pursuit.player_tile
    return corner


@dataclass(frozen=True)
class Role:
    name: str
    corner: Tuple[int, int]
    chase: Callable


ROLES = {
    "blinky": Role("blinky", (25, -3), shadow_target),
    "pinky": Role("pinky", (2, -3), speedy_target),
    "inky": Role("inky", (27, 31), bashful_target),
    "clyde": Role("clyde", (0, 31), pokey_target),
}
ROLE_ORDER = ("blinky", "pinky", "inky", "clyde")


class Ghost(Agent):
    corner_window = GHOST_CORNER

    def __init__(self, maze, name):
        self.name = name
        self.role = ROLES[name]
        self.home = maze.homes()[name]
        super().__init__(maze, self.home[0], self.home[1], "up")
        self.dot_counter = 0
        self.reset()

    def reset(self):
        self.mode = SCATTER
        self.scared = False
        self.reverse_pending = False
        self.elroy = 0
        if self.name == "blinky":
            self.place(self.maze.door_x, self.maze.entrance_y, "left")
            self.path = None
        else:
            self.place(self.home[0], self.home[1], "down" if self.name == "pinky" else "up")
            self.path = self._bounce()

    @property
    def frightened(self):
        return self.mode in FRIGHT_MODES

    @property
    def pen_state(self):
        return self.path.kind if self.path is not None else None

    @property
    def caged(self):
        return self.pen_state == CAGED

    def target(self, pursuit):
        if self.mode == EYES:
            return self.maze.entrance_tile
        if self.mode == SCATTER and not self.elroy:
            return self.role.corner
        return self.role.chase(self.tile, pursuit, self.role.corner)

    # --- pen choreography ---
    def _bounce(self):
        first = self.dir if self.dir in ("up", "down") else "up"
        legs = [(first, PEN_BOUNCE), (OPPOSITE[first], 2 * PEN_BOUNCE), (first, PEN_BOUNCE)]
        return PenPath(CAGED, legs, (self.x, self.y))

    def release(self):
        """Leave the pen: back to the home row, across to the door, up and out."""
        hx, hy = self.home
        dy = (hy - self.y) / TILE
        dx = (self.maze.door_x - hx) / TILE
        legs = [
            ("down" if dy > 0 else "up", abs(dy)),
            ("right" if dx > 0 else "left", abs(dx)),
            ("up", (hy - self.maze.entrance_y) / TILE),
        ]
        self.path = PenPath(EXITING, legs, (self.x, self.y))

    def _enter(self):
        hx, _ = self.home
        dx = (hx - self.maze.door_x) / TILE
        legs = [
            ("down", (self.maze.pen_y - self.maze.entrance_y) / TILE),
            ("right" if dx > 0 else "left", abs(dx)),
        ]
        self.path = PenPath(ENTERING, legs, (self.x, self.y))

    def _path_done(self, pursuit):
        kind = self.path.kind
        if kind == CAGED:
            self.path = self._bounce()
        elif kind == ENTERING:
            self.x, self.y = self.home
            self.tile = self.maze.pixel_to_tile(self.x, self.y)
            self.mode = pursuit.phase
            self.scared = False
            logger.debug("%s revived in the pen", self.name)
            self.release()
        else:
            self.path = None
            self.place(self.maze.door_x, self.maze.entrance_y, "left")
            self.reverse_pending = False
            self._steer(pursuit)

    def _door_gap(self):
        if self.cornering or self.y != self.maze.entrance_y or self.dir not in ("left", "right"):
            return None
        gap = (self.maze.door_x - self.x) * DIRS[self.dir][0]
        return gap if gap >= 0 else None

    # --- movement ---
    def _steer(self, pursuit):
        """Pick the direction to take at the centre of the tile being approached."""
        tile, _ = self.approach()
        back = OPPOSITE[self.dir]
        exits = [d for d in self.maze.turns_at(tile) if d != back]
        if not exits:
            logger.warning("%s found no exit at %s, reversing", self.name, tile)
            exits = [back]
        if self.frightened:
            self.pending = pursuit.rng.choice(exits)
            return
        tx, ty = self.target(pursuit)

        def cost(d):
            nx, ny = self.maze.neighbor(tile, d)
            return (nx - tx) ** 2 + (ny - ty) ** 2

        # min() keeps the first of equal costs, i.e. ORDERED_DIRS order
        self.pending = min(exits, key=cost)

    def step(self, dt, pursuit):
        distance = self.speed * TILE * dt
        if self.path is not None:
            if self.path.follow(self, distance):
                self._path_done(pursuit)
            return
        steer = partial(self._steer, pursuit)
        if not self.cornering:
            if self.reverse_pending:
                self.reverse_pending = False
                self.request_turn(OPPOSITE[self.dir])
                steer()
            elif self.pending is None:
                steer()
        if self.mode == EYES:
            gap = self._door_gap()
            if gap is not None and gap <= distance:
                self.advance(gap, steer)
                if self.y == self.maze.entrance_y and abs(self.x - self.maze.door_x) <= EPSILON:
                    self.x = self.maze.door_x
                    self.tile = self.maze.pixel_to_tile(self.x, self.y)
                    logger.debug("%s reached the pen door", self.name)
                    self._enter()
                    if self.path.follow(self, distance - gap):
                        self._path_done(pursuit)
                    return
                distance -= gap
        self.advance(distance, steer)

    def snapshot(self):
        data = super().snapshot()
        data.update(
            name=self.name,
            mode=self.mode,
            scared=self.scared,
            reverse_pending=self.reverse_pending,
            dot_counter=self.dot_counter,
            elroy=self.elroy,
            path=self.path.snapshot() if self.path is not None else None,
        )
        return data

    def restore(self, data):
        super().restore(data)
        self.mode = data["mode"]
        self.scared = data["scared"]
        self.reverse_pending = data["reverse_pending"]
        self.dot_counter = data["dot_counter"]
        self.elroy = data["elroy"]
        self.path = PenPath.restore(data["path"]) if data["path"] is not None else None
