from .maze import DIRS, OPPOSITE, perpendicular
from .settings import PLAYER_CORNER, TILE

# slack when deciding that an agent has reached a centre or its cornering threshold
EPSILON = 1e-9


class Agent:
    """
    Tile-locked mover shared by the player and the ghosts.

    - Position is a pixel point; `tile` is always the tile that point falls in.
    - Turns are committed at a tile centre only. A pending perpendicular turn
      that is legal at the centre being approached starts a *corner* once the
      agent is within `corner_window` tiles of it: the agent then moves along
      both axes until it lines up on the centre, then takes the new direction.
    - Reversal is instant unless the agent is mid-corner.
    - An agent facing a wall stops at the centre until a legal turn shows up.
    """

    corner_window = 0.0

    def __init__(self, maze, x, y, dir_name):
        self.maze = maze
        self.place(x, y, dir_name)
        self.speed = 0.0

    def place(self, x, y, dir_name):
        self.x, self.y = x, y
        self.tile = self.maze.pixel_to_tile(x, y)
        self.dir = dir_name
        self.pending = None
        self.corner_dir = None
        self.stopped = self.centered

    @property
    def centered(self):
        return (self.x, self.y) == self.maze.tile_center(self.tile)

    @property
    def cornering(self):
        return self.corner_dir is not None

    def request_turn(self, dir_name):
        if dir_name == OPPOSITE[self.dir] and not self.cornering:
            if self.centered and dir_name not in self.maze.turns_at(self.tile):
                return
            self.dir = dir_name
            self.pending = None
            return
        self.pending = dir_name

    def approach(self):
        """(tile whose centre we are heading for, pixels left to it)."""
        dx, dy = DIRS[self.dir]
        cx, cy = self.maze.tile_center(self.tile)
        along = (self.x - cx) * dx + (self.y - cy) * dy
        if along < 0:
            return self.tile, -along
        return self.maze.neighbor(self.tile, self.dir), TILE - along

    def advance(self, distance, steer=None):
        """Move `distance` pixels; `steer` is called after every committed centre or corner."""
        if self.stopped and not self._at_centre(steer):
            return
        window = self.corner_window * TILE
        while distance > 0:
            if self.corner_dir is not None:
                distance = self._corner(distance, steer)
                continue
            target, gap = self.approach()
            ready = self._corner_ready(target)
            if ready and gap <= window + EPSILON:
                self.corner_dir = self.pending
                self.pending = None
                continue
            step = min(distance, gap - window if ready else gap)
            self._shift(self.dir, step)
            distance -= step
            if gap - step <= EPSILON:
                self.x, self.y = self.maze.tile_center(target)
                self.tile = target
                if not self._at_centre(steer):
                    break

    def _corner_ready(self, target):
        return (
            self.corner_window > 0
            and self.pending is not None
            and perpendicular(self.pending, self.dir)
            and self.pending in self.maze.turns_at(target)
        )

    def _corner(self, distance, steer):
        dx, dy = DIRS[self.dir]
        cx, cy = self.maze.tile_center(self.tile)
        gap = abs((self.x - cx) * dx + (self.y - cy) * dy)
        step = min(distance, gap)
        self._shift(self.dir, step)
        self._shift(self.corner_dir, step)
        if step == gap:
            if dx:
                self.x = cx
            else:
                self.y = cy
            self.tile = self.maze.pixel_to_tile(self.x, self.y)
            self.dir = self.corner_dir
            self.corner_dir = None
            if self.pending == OPPOSITE[self.dir]:
                self.dir = self.pending
                self.pending = None
            if steer is not None:
                steer()
        return distance - step

    def _at_centre(self, steer):
        exits = self.maze.turns_at(self.tile)
        if self.pending is not None:
            if self.pending in exits:
                self.dir = self.pending
            self.pending = None
        if steer is not None:
            steer()
        self.stopped = self.dir not in exits
        return not self.stopped

    def _shift(self, dir_name, step):
        dx, dy = DIRS[dir_name]
        self.x = self.maze.wrap_x(self.x + dx * step)
        self.y += dy * step
        self.tile = self.maze.pixel_to_tile(self.x, self.y)

    def snapshot(self):
        return {
            "x": self.x, "y": self.y, "dir": self.dir,
            "pending": self.pending, "corner_dir": self.corner_dir,
            "stopped": self.stopped, "speed": self.speed,
        }

    def restore(self, data):
        self.x, self.y = data["x"], data["y"]
        self.tile = self.maze.pixel_to_tile(self.x, self.y)
        self.dir = data["dir"]
        self.pending = data["pending"]
        self.corner_dir = data["corner_dir"]
        self.stopped = data["stopped"]
        self.speed = data["speed"]


class Player(Agent):
    corner_window = PLAYER_CORNER

    def __init__(self, maze):
        x, y = maze.player_start
        super().__init__(maze, x, y, "left")

    def step(self, dt):
        self.advance(self.speed * TILE * dt)


class PenPath:
    """Scripted (direction, tiles) legs walked without wall checks."""

    def __init__(self, kind, legs, origin):
        self.kind = kind
        self.legs = [(d, n) for d, n in legs if n > 0]
        self.index = 0
        self.covered = 0.0
        self.origin = origin

    @property
    def done(self):
        return self.index >= len(self.legs)

    def follow(self, agent, distance):
        """Walk `agent` up to `distance` pixels along the legs; True once the path ends."""
        while distance > 0 and not self.done:
            dir_name, tiles = self.legs[self.index]
            length = tiles * TILE
            step = min(distance, length - self.covered)
            self.covered += step
            distance -= step
            dx, dy = DIRS[dir_name]
            ox, oy = self.origin
            if self.covered >= length:
                agent.x, agent.y = ox + dx * length, oy + dy * length
                self.origin = (agent.x, agent.y)
                self.index += 1
                self.covered = 0.0
            else:
                agent.x, agent.y = ox + dx * self.covered, oy + dy * self.covered
            agent.dir = dir_name
            agent.tile = agent.maze.pixel_to_tile(agent.x, agent.y)
        return self.done

    def snapshot(self):
        return {
            "kind": self.kind,
            "legs": [list(leg) for leg in self.legs],
            "index": self.index,
            "covered": self.covered,
            "origin": list(self.origin),
        }

    @classmethod
    def restore(cls, data):
        path = cls(data["kind"], [tuple(leg) for leg in data["legs"]], tuple(data["origin"]))
        path.index = data["index"]
        path.covered = data["covered"]
        return path
