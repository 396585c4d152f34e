import argparse
import logging
import math
import sys

import pygame

from .events import GameOver, LevelComplete
from .game import OVER, Game
from .maze import DIRS
from .settings import FRUIT_ROW, TILE

# -----------------------------
# Py-Man: pygame front end
# -----------------------------
# Controls: Arrows / WASD to move, Enter to start, P to pause, Esc to quit

FPS = 120
FONT_SIZE = 24
TITLE = "Py-Man"
HUD_H = 60

BLACK = (0, 0, 0)
WALL_BLUE = (33, 33, 222)
DOOR_PINK = (255, 184, 255)
PELLET_COLOR = (255, 184, 151)
POWER_COLOR = (255, 255, 255)
TEXT_YELLOW = (255, 255, 0)
HUD_WHITE = (240, 240, 240)
GAMEOVER_RED = (255, 64, 64)
FRUIT_RED = (222, 0, 0)

GHOST_COLORS = {
    "blinky": (255, 0, 0),
    "pinky": (255, 184, 255),
    "inky": (0, 255, 255),
    "clyde": (255, 184, 82),
}
FRIGHT_BLUE = (5, 5, 255)
FRIGHT_FLASH = (255, 255, 255)

KEY_DIRS = {
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
}

logger = logging.getLogger(__name__)


def held_direction(keys):
    """First direction key held down, in the order the table lists them."""
    for key, dir_name in KEY_DIRS.items():
        if keys[key]:
            return dir_name
    return None


class Renderer:
    """Draws frames of a Game onto a surface; pellets are kept from per-tick diffs."""

    def __init__(self, surface, maze, scale=3):
        self.surface = surface
        self.maze = maze
        self.scale = scale
        self.cell = TILE * scale
        self.pellets = {}
        self.level = None
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.font_big = pygame.font.Font(None, FONT_SIZE * 2)

    def sync(self, food_cells, level):
        self.pellets = dict(food_cells)
        self.level = level

    def apply(self, frame):
        for tile in frame.eaten:
            self.pellets.pop(tile, None)

    def to_screen(self, x, y):
        return int(x * self.scale), int(y * self.scale) + HUD_H

    def draw(self, frame, high_score=0, clock_ms=0):
        self.surface.fill(BLACK)
        flash = frame.lock == "level_clear" and (clock_ms // 150) % 2 == 0
        self.draw_maze(flash)
        if frame.lock != "level_clear":
            self.draw_pellets(clock_ms)
        if frame.fruit:
            self.draw_fruit()
        for actor in frame.actors[1:]:
            self.draw_ghost(actor)
        self.draw_player(frame.actors[0], clock_ms)
        self.draw_hud(frame, high_score)
        if frame.lock == "ready":
            self.draw_center_text("READY!", self.font_big, TEXT_YELLOW)
        elif frame.paused:
            self.draw_center_text("PAUSED", self.font_big, HUD_WHITE)
        elif frame.state == OVER:
            self.draw_center_text("GAME OVER", self.font_big, GAMEOVER_RED)
            self.draw_center_text("Press ENTER to restart", self.font, HUD_WHITE, dy=40)

    def draw_maze(self, flash=False):
        wall_color = (255, 255, 255) if flash else WALL_BLUE
        c = self.cell
        for r in range(self.maze.h):
            for col in range(self.maze.w):
                ch = self.maze.grid[r][col]
                x, y = col * c, r * c + HUD_H
                if ch == '#':
                    pygame.draw.rect(self.surface, wall_color, (x, y, c, c), border_radius=4)
                elif ch == '-':
                    pygame.draw.rect(self.surface, DOOR_PINK, (x, y + c // 2 - 2, c, 4))

    def draw_pellets(self, clock_ms):
        power_on = (clock_ms // 300) % 2 == 0
        for tile, kind in self.pellets.items():
            cx, cy = self.to_screen(*self.maze.tile_center(tile))
            if kind == "pill":
                pygame.draw.circle(self.surface, PELLET_COLOR, (cx, cy), max(2, self.cell // 8))
            else:
                color = POWER_COLOR if power_on else (180, 180, 180)
                pygame.draw.circle(self.surface, color, (cx, cy), self.cell // 4)

    def draw_fruit(self):
        cx, cy = self.to_screen(self.maze.door_x, FRUIT_ROW * TILE + TILE / 2)
        pygame.draw.circle(self.surface, FRUIT_RED, (cx, cy), self.cell // 3)

    def draw_player(self, actor, clock_ms):
        cx, cy = self.to_screen(actor.x, actor.y)
        radius = self.cell // 2 - 2
        open_frac = 0.25 * (1 - math.cos((clock_ms / 160.0) % 1.0 * math.tau))
        mouth = max(0.1, min(0.45, open_frac))
        angle = {"right": 0, "up": 90, "left": 180, "down": 270}[actor.dir]
        start_angle = math.radians(angle) + math.radians(mouth * 90)
        end_angle = math.radians(angle) - math.radians(mouth * 90)
        pygame.draw.circle(self.surface, TEXT_YELLOW, (cx, cy), radius)
        points = [(cx, cy)]
        for a in (start_angle, end_angle):
            points.append((cx + radius * math.cos(a), cy - radius * math.sin(a)))
        pygame.draw.polygon(self.surface, BLACK, points)

    def draw_ghost(self, actor):
        cx, cy = self.to_screen(actor.x, actor.y)
        radius = self.cell // 2 - 3
        dx, dy = DIRS[actor.dir]
        if actor.mode == "eyes":
            self._draw_eyes(cx, cy, dx, dy)
            return
        if actor.mode == "white":
            color = FRIGHT_FLASH
        elif actor.mode == "blue":
            color = FRIGHT_BLUE
        else:
            color = GHOST_COLORS[actor.name]
        pygame.draw.circle(self.surface, color, (cx, cy), radius)
        for i in range(-2, 3):
            pygame.draw.circle(self.surface, color, (cx + i * 4, cy + radius - 2), 3)
        self._draw_eyes(cx, cy, dx, dy)

    def _draw_eyes(self, cx, cy, dx, dy):
        pygame.draw.circle(self.surface, (255, 255, 255), (cx - 4, cy - 2), 4)
        pygame.draw.circle(self.surface, (255, 255, 255), (cx + 4, cy - 2), 4)
        pygame.draw.circle(self.surface, (0, 0, 255), (cx - 4 + 2 * dx, cy - 2 + 2 * dy), 2)
        pygame.draw.circle(self.surface, (0, 0, 255), (cx + 4 + 2 * dx, cy - 2 + 2 * dy), 2)

    def draw_hud(self, frame, high_score):
        s = f"SCORE {frame.score:06d}    HIGH {max(high_score, frame.score):06d}    LVL {frame.level}"
        txt = self.font.render(s, True, HUD_WHITE)
        self.surface.blit(txt, (8, 18))
        for i in range(max(0, frame.lives)):
            x = self.surface.get_width() - 30 - i * 28
            pygame.draw.circle(self.surface, TEXT_YELLOW, (x, 28), 10)
            pygame.draw.polygon(self.surface, BLACK, [(x, 28), (x - 10, 24), (x - 10, 32)])

    def draw_center_text(self, s, font, color, dy=0):
        txt = font.render(s, True, color)
        w, h = self.surface.get_size()
        rect = txt.get_rect(center=(w // 2, HUD_H + (h - HUD_H) // 2 + dy))
        self.surface.blit(txt, rect)


class App:
    def __init__(self, level=1, seed=None, scale=3):
        pygame.init()
        pygame.display.set_caption(TITLE)
        self.start_level = level
        self.seed = seed
        self.game = Game(seed=seed, level=level)
        cell = TILE * scale
        self.screen = pygame.display.set_mode((self.game.maze.w * cell, self.game.maze.h * cell + HUD_H))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, self.game.maze, scale)
        self.high_score = 0
        self.started = False
        self.new_game()

    def new_game(self):
        self.game = Game(seed=self.seed, level=self.start_level)
        self.game.subscribe(self.on_event)
        self.renderer.sync(self.game.food.cells, self.game.level)

    def on_event(self, event):
        if isinstance(event, GameOver):
            self.high_score = max(self.high_score, event.score)
            logger.info("game over with %d points", event.score)
        elif isinstance(event, LevelComplete):
            logger.info("cleared level %d", event.level)

    def handle_keydown(self, key):
        if key == pygame.K_ESCAPE:
            pygame.quit()
            sys.exit(0)
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if not self.started:
                self.started = True
            elif self.game.state == OVER:
                self.new_game()
        if key == pygame.K_p and self.started:
            self.game.toggle_pause()

    def update(self, dt_ms, keys):
        if not self.started:
            return
        dir_name = held_direction(keys)
        if dir_name:
            self.game.request_turn(dir_name)
        self.game.tick(dt_ms)
        frame = self.game.view()
        if frame.level != self.renderer.level:
            self.renderer.sync(self.game.food.cells, frame.level)
        self.renderer.apply(frame)
        self.high_score = max(self.high_score, frame.score)

    def draw(self):
        self.renderer.draw(self.game.view(), self.high_score, pygame.time.get_ticks())
        if not self.started:
            self.renderer.draw_center_text("PY-MAN", self.renderer.font_big, TEXT_YELLOW, dy=-40)
            self.renderer.draw_center_text("Press ENTER to start", self.renderer.font, HUD_WHITE, dy=10)
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            keys = pygame.key.get_pressed()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_keydown(event.key)
            self.update(dt_ms, keys)
            self.draw()
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scale", type=int, default=3)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    App(level=args.level, seed=args.seed, scale=args.scale).run()


if __name__ == "__main__":
    main()
