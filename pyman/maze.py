from .settings import TILE

# Maze legend:
# '#' wall  '.' pill  'o' energizer  ' ' open path  '=' tunnel (slows ghosts)
# '-' pen door (ghosts only, scripted)  '_' pen floor
MAZE_LAYOUT = [
"############################",
"#............##............#",
"#.####.#####.##.#####.####.#",
"#o####.#####.##.#####.####o#",
"#.####.#####.##.#####.####.#",
"#..........................#",
"#.####.##.########.##.####.#",
"#.####.##.########.##.####.#",
"#......##....##....##......#",
"######.##### ## #####.######",
"######.##### ## #####.######",
"######.##          ##.######",
"######.## ###--### ##.######",
"######.## #______# ##.######",
"======.   #______#   .======",
"######.## #______# ##.######",
"######.## ######## ##.######",
"######.##          ##.######",
"######.## ######## ##.######",
"######.## ######## ##.######",
"#............##............#",
"#.####.#####.##.#####.####.#",
"#.####.#####.##.#####.####.#",
"#o..##.......  .......##..o#",
"###.##.##.########.##.##.###",
"###.##.##.########.##.##.###",
"#......##....##....##......#",
"#.##########.##.##########.#",
"#.##########.##.##########.#",
"#..........................#",
"############################",
]

PLAYER_ROW = 23

# arcade enumeration order, also the tie-break order for ghost turns
ORDERED_DIRS = ("up", "left", "down", "right")
DIRS = {
    "up": (0, -1),
    "left": (-1, 0),
    "down": (0, 1),
    "right": (1, 0),
}
OPPOSITE = {"up": "down", "down": "up", "left": "right", "right": "left"}

PILL = "pill"
ENERGIZER = "energizer"

WALL = "wall"
PATH = "path"
PELLET_PATH = "pellet-path"
INTERSECTION = "intersection"
PELLET_INTERSECTION = "intersection-with-pellet"
TUNNEL = "tunnel"


def perpendicular(a, b):
    return (DIRS[a][0] == 0) != (DIRS[b][0] == 0)


class Maze:
    """Static tile grid with its turn table and pen geometry. Never mutated after load."""

    def __init__(self, lines=None):
        lines = lines or MAZE_LAYOUT
        self.w = len(lines[0])
        self.h = len(lines)
        self.grid = [list(row) for row in lines]
        self.food = {}
        self.tunnels = set()
        self.door = []
        self.pen = set()
        self._scan()
        self.turns = {}
        for r in range(self.h):
            for c in range(self.w):
                if self._open(c, r):
                    self.turns[(c, r)] = tuple(
                        d for d in ORDERED_DIRS if self._open(*self.neighbor((c, r), d))
                    )
        self._pen_geometry()

    def _scan(self):
        for r in range(self.h):
            for c in range(self.w):
                ch = self.grid[r][c]
                if ch == '.':
                    self.food[(c, r)] = PILL
                elif ch == 'o':
                    self.food[(c, r)] = ENERGIZER
                elif ch == '=':
                    self.tunnels.add((c, r))
                elif ch == '-':
                    self.door.append((c, r))
                elif ch == '_':
                    self.pen.add((c, r))

    def _open(self, c, r):
        if not (0 <= c < self.w and 0 <= r < self.h):
            return False
        return self.grid[r][c] in ('.', 'o', ' ', '=')

    def _pen_geometry(self):
        door_row = self.door[0][1]
        xs = [self.tile_center(t)[0] for t in self.door]
        rows = sorted(r for _, r in self.pen)
        self.door_x = sum(xs) / len(xs)
        self.entrance_y = (door_row - 1) * TILE + TILE / 2
        self.pen_y = ((rows[0] + rows[-1]) // 2) * TILE + TILE / 2
        self.entrance_tile = self.pixel_to_tile(self.door_x - TILE / 2, self.entrance_y)
        self.player_start = (self.door_x, PLAYER_ROW * TILE + TILE / 2)

    def homes(self):
        """Pen slots (pixel centres) per ghost role."""
        return {
            "blinky": (self.door_x, self.pen_y),
            "pinky": (self.door_x, self.pen_y),
            "inky": (self.door_x - 2 * TILE, self.pen_y),
            "clyde": (self.door_x + 2 * TILE, self.pen_y),
        }

    # --- queries, all O(1) against the static tables ---
    def is_wall(self, tile):
        return tile not in self.turns

    def is_tunnel(self, tile):
        return tile in self.tunnels

    def is_intersection(self, tile):
        exits = self.turns.get(tile, ())
        if len(exits) > 2:
            return True
        return len(exits) == 2 and OPPOSITE[exits[0]] != exits[1]

    def has_pellet(self, tile):
        return tile in self.food

    def kind(self, tile):
        if self.is_wall(tile):
            return WALL
        if self.is_tunnel(tile):
            return TUNNEL
        if self.is_intersection(tile):
            return PELLET_INTERSECTION if self.has_pellet(tile) else INTERSECTION
        return PELLET_PATH if self.has_pellet(tile) else PATH

    def turns_at(self, tile):
        return self.turns.get(tile, ())

    def neighbor(self, tile, dir_name):
        dx, dy = DIRS[dir_name]
        return (tile[0] + dx) % self.w, tile[1] + dy

    def tile_center(self, tile):
        return tile[0] * TILE + TILE / 2, tile[1] * TILE + TILE / 2

    def pixel_to_tile(self, x, y):
        return int(x // TILE), int(y // TILE)

    def wrap_x(self, x):
        span = self.w * TILE
        if x < 0:
            x += span
        if x >= span:
            x -= span
        return x
