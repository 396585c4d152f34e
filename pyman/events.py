from dataclasses import dataclass
from typing import Optional, Tuple

# --- score/life sink events ---


@dataclass(frozen=True)
class PelletEaten:
    value: int
    kind: str
    tile: Tuple[int, int]


@dataclass(frozen=True)
class GhostEaten:
    bonus: int
    ghost: str
    tile: Tuple[int, int]


@dataclass(frozen=True)
class FruitEaten:
    bonus: int
    fruit: str


@dataclass(frozen=True)
class ExtraLife:
    lives: int


@dataclass(frozen=True)
class LifeLost:
    lives: int


@dataclass(frozen=True)
class LevelComplete:
    level: int


@dataclass(frozen=True)
class GameOver:
    score: int


# --- render sink: read-only picture of one tick ---


@dataclass(frozen=True)
class ActorView:
    name: str
    x: float
    y: float
    tile: Tuple[int, int]
    dir: str
    mode: Optional[str]
    pen: Optional[str] = None


@dataclass(frozen=True)
class Frame:
    level: int
    score: int
    lives: int
    state: str
    lock: Optional[str]
    mode: str
    actors: Tuple[ActorView, ...]
    eaten: Tuple[Tuple[int, int], ...]
    fruit: Optional[str]
    paused: bool = False
