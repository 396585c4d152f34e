import json
import logging
import random

from .actors import Player
from .events import (
    ActorView, ExtraLife, Frame, FruitEaten, GameOver, GhostEaten, LevelComplete,
    LifeLost, PelletEaten,
)
from .food import VALUES, FoodGrid
from .ghosts import EYES, ROLE_ORDER, Ghost, Pursuit
from .levels import level_data
from .maze import DIRS, ENERGIZER, Maze
from .modes import CALM, SWITCH, ModeScheduler, PenRelease
from .settings import (
    BASE_SPEED_TPS, DYING_TIME, EXTRA_LIFE_SCORE, EYES_SPEED, FRUIT_DOTS, FRUIT_ROW,
    FRUIT_TIME, GHOST_EAT_BASE, GHOST_EATEN_TIME, LEVEL_CLEAR_TIME, LIVES_START,
    MAX_FRAME_DT, PEN_SPEED, READY_TIME, SCORE_MULTIPLIER, SUBSTEP, TILE,
)

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

PLAYING = "playing"
OVER = "over"

# animation locks
READY = "ready"
GHOST_EATEN = "ghost_eaten"
DYING = "dying"
LEVEL_CLEAR = "level_clear"


class SnapshotError(ValueError):
    """A saved game could not be restored."""


class Game:
    """
    One game of Py-Man: maze, food, agents, mode scheduler and pen policy.

    The core is passive: the host calls `tick(ms)` with the elapsed time and
    `request_turn(dir)` on input, reads `view()` to draw and consumes the
    events returned by `tick` (or pushed to `subscribe`d callbacks).
    Each tick runs, per substep: timers and mode propagation, motion,
    pellet/ghost/fruit collisions, then pen release bookkeeping.
    """

    def __init__(self, seed=None, level=1, lives=LIVES_START, maze=None):
        self.maze = maze or Maze()
        self.rng = random.Random(seed)
        self.level = level
        self.lives = lives
        self.score = 0
        self.state = PLAYING
        self.paused = False
        self.lock = None
        self.kills = 0
        self.extra_life_awarded = False
        self.fruit_left = 0.0
        self.listeners = []
        self.events = []
        self.eaten_tiles = []
        y = FRUIT_ROW * TILE + TILE / 2
        self.fruit_tiles = {
            self.maze.pixel_to_tile(self.maze.door_x - TILE / 2, y),
            self.maze.pixel_to_tile(self.maze.door_x, y),
        }
        self.player = Player(self.maze)
        self.ghosts = [Ghost(self.maze, name) for name in ROLE_ORDER]
        self._start_level()

    # --- lifecycle ---
    def _start_level(self):
        self.data = level_data(self.level)
        self.food = FoodGrid(self.maze)
        self.pen = PenRelease(self.data)
        for g in self.ghosts:
            g.dot_counter = 0
        self.elroy_active = True
        self._reset_agents()
        logger.info("level %d started (%d pellets)", self.level, self.food.remaining)

    def _restart_life(self):
        self.pen = PenRelease(self.data, use_global=True)
        self.elroy_active = False
        self._reset_agents()

    def _reset_agents(self):
        self.player = Player(self.maze)
        for g in self.ghosts:
            g.reset()
        self.modes = ModeScheduler(self.data)
        self.kills = 0
        self.fruit_left = 0.0
        self.lock = [READY, READY_TIME]
        self._update_elroy()

    def _unlock(self, kind):
        if kind == DYING:
            self._restart_life()
        elif kind == LEVEL_CLEAR:
            self.level += 1
            self._start_level()

    # --- host interface ---
    def subscribe(self, callback):
        self.listeners.append(callback)

    def request_turn(self, dir_name):
        if dir_name not in DIRS:
            raise ValueError(f"unknown direction: {dir_name!r}")
        if self.state != OVER:
            self.player.request_turn(dir_name)

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def toggle_pause(self):
        self.paused = not self.paused

    def tick(self, dt_ms):
        """Advance by `dt_ms` milliseconds of wall time; returns the events raised."""
        self.events = []
        self.eaten_tiles = []
        if self.state == OVER or self.paused:
            return []
        remaining = min(max(dt_ms, 0) / 1000.0, MAX_FRAME_DT)
        while remaining > 0 and self.state != OVER:
            dt = min(SUBSTEP, remaining)
            remaining -= dt
            self._substep(dt)
        for callback in self.listeners:
            for event in self.events:
                callback(event)
        return list(self.events)

    def view(self):
        actors = [ActorView("player", self.player.x, self.player.y, self.player.tile,
                            self.player.dir, None)]
        for g in self.ghosts:
            actors.append(ActorView(g.name, g.x, g.y, g.tile, g.dir, g.mode, g.pen_state))
        return Frame(
            level=self.level,
            score=self.score,
            lives=self.lives,
            state=self.state,
            lock=self.lock[0] if self.lock else None,
            mode=self.modes.mode,
            actors=tuple(actors),
            eaten=tuple(self.eaten_tiles),
            fruit=self.data.fruit if self.fruit_left > 0 else None,
            paused=self.paused,
        )

    # --- one substep ---
    def _substep(self, dt):
        if self.lock is not None:
            self.lock[1] -= dt
            if self.lock[1] <= 0:
                kind = self.lock[0]
                self.lock = None
                self._unlock(kind)
            return
        self._update_timers(dt)
        self._propagate()
        self._move(dt)
        self._collide()

    def _update_timers(self, dt):
        change = self.modes.update(dt)
        if change == SWITCH:
            for g in self.ghosts:
                if g.mode != EYES and g.path is None:
                    g.reverse_pending = True
        elif change == CALM:
            for g in self.ghosts:
                g.scared = False
        if self.fruit_left > 0:
            self.fruit_left = max(0.0, self.fruit_left - dt)
        ghost = self.pen.update(dt, self._caged())
        if ghost is not None:
            self._release(ghost, "timer")
        self._update_elroy()

    def _propagate(self):
        frightened = self.modes.frightened
        for g in self.ghosts:
            if g.mode == EYES:
                continue
            g.mode = self.modes.mode if g.scared and frightened else self.modes.phase

    def _update_elroy(self):
        blinky = self.ghosts[0]
        if not self.elroy_active and self.ghosts[3].path is None:
            self.elroy_active = True
        level = 0
        if self.elroy_active:
            first, second = self.data.elroy_thresholds()
            if self.food.remaining <= second:
                level = 2
            elif self.food.remaining <= first:
                level = 1
        if level != blinky.elroy:
            logger.debug("elroy level %d at %d pellets", level, self.food.remaining)
            blinky.elroy = level

    def _move(self, dt):
        self.player.speed = self._player_speed()
        self.player.step(dt)
        pursuit = Pursuit(self.player.tile, self.player.dir, self.ghosts[0].tile,
                          self.modes.phase, self.rng)
        for g in self.ghosts:
            g.speed = self._ghost_speed(g)
            g.step(dt, pursuit)

    def _player_speed(self):
        d = self.data
        on_food = self.food.at(self.player.tile) is not None
        if self.modes.frightened:
            pct = d.fright_pac_dots_speed if on_food else d.fright_pac_speed
        else:
            pct = d.pac_dots_speed if on_food else d.pac_speed
        return pct / 100 * BASE_SPEED_TPS

    def _ghost_speed(self, g):
        d = self.data
        if g.mode == EYES:
            pct = EYES_SPEED
        elif g.path is not None:
            pct = PEN_SPEED
        elif self.maze.is_tunnel(g.tile):
            pct = d.ghost_tunnel_speed
        elif g.frightened:
            pct = d.fright_ghost_speed
        elif g.elroy == 2:
            pct = d.elroy2_speed
        elif g.elroy == 1:
            pct = d.elroy1_speed
        else:
            pct = d.ghost_speed
        return pct / 100 * BASE_SPEED_TPS

    # --- collision / scoring ---
    def _collide(self):
        tile = self.player.tile
        kind = self.food.eat(tile)
        if kind is not None:
            self._eat_pellet(tile, kind)
            if self.food.remaining == 0:
                self._emit(LevelComplete(self.level))
                logger.info("level %d complete, score %d", self.level, self.score)
                self.lock = [LEVEL_CLEAR, LEVEL_CLEAR_TIME]
                return
        if self.fruit_left > 0 and tile in self.fruit_tiles:
            self.fruit_left = 0.0
            self._add_score(self.data.fruit_points)
            self._emit(FruitEaten(self.data.fruit_points, self.data.fruit))
        for g in self.ghosts:
            if g.path is not None or g.mode == EYES or g.tile != tile:
                continue
            if g.frightened:
                self._eat_ghost(g)
            else:
                self._lose_life()
                return
        if kind is not None:
            ghost = self.pen.pellet_eaten(self._caged())
        else:
            ghost = self.pen.check(self._caged())
        if ghost is not None:
            self._release(ghost, "dots")

    def _eat_pellet(self, tile, kind):
        points = VALUES[kind] * SCORE_MULTIPLIER
        self.eaten_tiles.append(tile)
        self._add_score(points)
        self._emit(PelletEaten(points, kind, tile))
        if kind == ENERGIZER:
            self._frighten()
        if self.food.eaten in FRUIT_DOTS:
            self.fruit_left = FRUIT_TIME

    def _frighten(self):
        self.kills = 0
        scared = self.modes.frighten()
        for g in self.ghosts:
            if g.mode == EYES:
                continue
            if g.path is None:
                g.reverse_pending = True
            g.scared = scared
        self._propagate()

    def _eat_ghost(self, g):
        self.kills += 1
        bonus = GHOST_EAT_BASE * 2 ** self.kills
        self._add_score(bonus)
        g.mode = EYES
        g.scared = False
        g.reverse_pending = False
        self._emit(GhostEaten(bonus, g.name, g.tile))
        self.lock = [GHOST_EATEN, GHOST_EATEN_TIME]

    def _lose_life(self):
        if self.lives == 0:
            self.state = OVER
            self.lock = None
            self._emit(GameOver(self.score))
            logger.info("game over, final score %d", self.score)
            return
        self.lives -= 1
        self._emit(LifeLost(self.lives))
        logger.info("life lost, %d left", self.lives)
        self.lock = [DYING, DYING_TIME]

    def _add_score(self, points):
        self.score += points
        if not self.extra_life_awarded and self.score >= EXTRA_LIFE_SCORE:
            self.extra_life_awarded = True
            self.lives += 1
            self._emit(ExtraLife(self.lives))

    def _caged(self):
        return [g for g in self.ghosts if g.caged]

    def _release(self, ghost, reason):
        logger.debug("releasing %s (%s)", ghost.name, reason)
        ghost.release()

    def _emit(self, event):
        self.events.append(event)

    # --- snapshot / restore ---
    def snapshot(self):
        version, internal, gauss = self.rng.getstate()
        return {
            "version": SNAPSHOT_VERSION,
            "maze": [self.maze.w, self.maze.h],
            "level": self.level,
            "lives": self.lives,
            "score": self.score,
            "state": self.state,
            "paused": self.paused,
            "lock": list(self.lock) if self.lock else None,
            "kills": self.kills,
            "extra_life_awarded": self.extra_life_awarded,
            "elroy_active": self.elroy_active,
            "fruit_left": self.fruit_left,
            "rng": [version, list(internal), gauss],
            "modes": self.modes.snapshot(),
            "pen": self.pen.snapshot(),
            "food": self.food.snapshot(),
            "player": self.player.snapshot(),
            "ghosts": [g.snapshot() for g in self.ghosts],
        }

    @classmethod
    def restore(cls, data, maze=None):
        game = cls(maze=maze)
        if data.get("version") != SNAPSHOT_VERSION:
            logger.warning("restoring snapshot version %r", data.get("version"))
        try:
            if list(data["maze"]) != [game.maze.w, game.maze.h]:
                raise SnapshotError(f"snapshot is for a {data['maze']} maze")
            game.level = data["level"]
            game.data = level_data(game.level)
            game.lives = data["lives"]
            game.score = data["score"]
            game.state = data["state"]
            game.paused = data["paused"]
            game.lock = list(data["lock"]) if data["lock"] else None
            game.kills = data["kills"]
            game.extra_life_awarded = data["extra_life_awarded"]
            game.elroy_active = data["elroy_active"]
            game.fruit_left = data["fruit_left"]
            version, internal, gauss = data["rng"]
            game.rng.setstate((version, tuple(internal), gauss))
            game.modes = ModeScheduler(game.data)
            game.modes.restore(data["modes"])
            game.pen = PenRelease(game.data)
            game.pen.restore(data["pen"])
            game.food.restore(data["food"])
            game.player.restore(data["player"])
            ghosts = {g["name"]: g for g in data["ghosts"]}
            for g in game.ghosts:
                g.restore(ghosts[g.name])
        except SnapshotError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"bad snapshot: {exc}") from exc
        return game

    def to_json(self):
        return json.dumps(self.snapshot())

    @classmethod
    def from_json(cls, text, maze=None):
        return cls.restore(json.loads(text), maze=maze)
