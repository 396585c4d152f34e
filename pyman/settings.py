# -----------------------------
# Py-Man simulation settings
# -----------------------------
# Distances are in simulation pixels (TILE per tile), speeds in tiles/second,
# durations in seconds.

TILE = 8

# 100% speed of the level table percentages (arcade: ~75.76 px/s on 8 px tiles)
BASE_SPEED_TPS = 9.47

EYES_SPEED = 160        # % of base, eaten ghost returning home
PEN_SPEED = 50          # % of base, bouncing in / leaving the pen

# how far before a tile centre an agent may start rounding a corner (tiles)
PLAYER_CORNER = 0.375
GHOST_CORNER = 0.25

PILL_VALUE = 1
ENERGIZER_VALUE = 5
SCORE_MULTIPLIER = 10
GHOST_EAT_BASE = 100    # bonus = GHOST_EAT_BASE * 2 ** kills_this_fright

FRUIT_DOTS = (70, 170)  # pellets eaten when the bonus fruit shows up
FRUIT_TIME = 9.5
FRUIT_ROW = 17

EXTRA_LIFE_SCORE = 10000
LIVES_START = 3

BLINK_INTERVAL = 0.2    # blue/white half period while fright runs out

# global dot counter thresholds used after a life is lost
GLOBAL_DOT_LIMITS = {"pinky": 7, "inky": 17, "clyde": 32}

PEN_BOUNCE = 0.5        # tiles above/below the home slot

READY_TIME = 2.0
GHOST_EATEN_TIME = 1.0
DYING_TIME = 1.5
LEVEL_CLEAR_TIME = 2.0

MAX_FRAME_DT = 0.25
SUBSTEP = 1.0 / 120
