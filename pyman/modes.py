import logging

from .ghosts import BLUE, CHASE, SCATTER, WHITE
from .settings import BLINK_INTERVAL, GLOBAL_DOT_LIMITS

logger = logging.getLogger(__name__)

# what ModeScheduler.update() reports
SWITCH = "switch"
CALM = "calm"


class ModeScheduler:
    """
    Scatter/chase timeline for one life plus the fright override.

    The timeline is paused while fright runs; fright blinks white in its
    last `fright_flashes` blue/white cycles.
    """

    def __init__(self, data):
        self.times = data.mode_times
        self.fright_time = data.fright_time
        self.flashes = data.fright_flashes
        self.index = 0
        self.elapsed = 0.0
        self.fright_left = 0.0

    @property
    def phase(self):
        return SCATTER if self.index % 2 == 0 else CHASE

    @property
    def frightened(self):
        return self.fright_left > 0

    @property
    def mode(self):
        if not self.frightened:
            return self.phase
        window = self.flashes * 2 * BLINK_INTERVAL
        if self.fright_left > window:
            return BLUE
        ticks = int((window - self.fright_left) / BLINK_INTERVAL)
        return WHITE if ticks % 2 == 0 else BLUE

    def frighten(self):
        """(Re)start the countdown from full; False when this level has no fright."""
        self.fright_left = float(self.fright_time)
        return self.frightened

    def update(self, dt):
        if self.fright_left > 0:
            self.fright_left = max(0.0, self.fright_left - dt)
            return CALM if self.fright_left == 0 else None
        if self.index >= len(self.times):
            return None
        self.elapsed += dt
        if self.elapsed >= self.times[self.index]:
            self.elapsed -= self.times[self.index]
            self.index += 1
            logger.debug("scatter/chase switch %d -> %s", self.index, self.phase)
            return SWITCH
        return None

    def snapshot(self):
        return {"index": self.index, "elapsed": self.elapsed, "fright_left": self.fright_left}

    def restore(self, data):
        self.index = data["index"]
        self.elapsed = data["elapsed"]
        self.fright_left = data["fright_left"]


class PenRelease:
    """
    Decides when caged ghosts leave the pen.

    Personal counters: only the frontmost caged ghost counts pellets, against
    the level's per-ghost limit. Global counter (after a life is lost): one
    shared count against fixed per-ghost limits; once the last ghost is let
    out by it, personal counters take over again. Independently, a ghost is
    forced out when no pellet has been eaten for `force_time` seconds.
    """

    def __init__(self, data, use_global=False):
        self.limits = data.pen_dot_limits
        self.force_time = data.pen_force_time
        self.use_global = use_global
        self.global_counter = 0
        self.idle = 0.0

    def pellet_eaten(self, caged):
        self.idle = 0.0
        if self.use_global:
            self.global_counter += 1
        elif caged:
            caged[0].dot_counter += 1
        return self.check(caged)

    def check(self, caged):
        if not caged:
            return None
        front = caged[0]
        if self.use_global:
            if self.global_counter < GLOBAL_DOT_LIMITS[front.name]:
                return None
            if front.name == "clyde":
                self.use_global = False
            return front
        if front.dot_counter >= self.limits[front.name]:
            return front
        return None

    def update(self, dt, caged):
        self.idle += dt
        if caged and self.idle >= self.force_time:
            self.idle = 0.0
            return caged[0]
        return None

    def snapshot(self):
        return {"use_global": self.use_global, "global_counter": self.global_counter, "idle": self.idle}

    def restore(self, data):
        self.use_global = data["use_global"]
        self.global_counter = data["global_counter"]
        self.idle = data["idle"]
