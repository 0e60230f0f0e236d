"""The four built-in levels and their scoring."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator

from .entities import (
    BLACK,
    BLUE,
    BROWN,
    DARKBLUE,
    DARKGRAY,
    DARKGREEN,
    DARKPURPLE,
    GOLD,
    GRAY,
    GREEN,
    MAROON,
    ORANGE,
    PURPLE,
    RED,
    SKYBLUE,
    YELLOW,
    Color,
    Obstacle,
)
from .geometry import Rect

POINTS_PER_BLOCK = 10


class LevelState(enum.Enum):
    PLAYING = "playing"
    COMPLETED = "completed"
    FAILED = "failed"


class Level(ABC):
    """A named set of obstacles with a score needed to finish it."""

    name: str = ""
    target_score: int = 0

    def __init__(self) -> None:
        self.obstacles: list[Obstacle] = []
        self.initialized = False
        self.state = LevelState.PLAYING

    @abstractmethod
    def _blocks(self, ground_y: float) -> Iterator[Obstacle]:
        """Yield the level's obstacles for the given ground line."""

    def build(self, ground_y: float) -> None:
        """Lay out the obstacles, replacing any from an earlier build."""
        self.obstacles = list(self._blocks(ground_y))
        self.initialized = True

    def reset(self) -> None:
        for obstacle in self.obstacles:
            obstacle.visible = True
        self.state = LevelState.PLAYING

    def current_score(self) -> int:
        return POINTS_PER_BLOCK * sum(1 for o in self.obstacles if not o.visible)

    def update(self) -> None:
        if self.current_score() >= self.target_score:
            self.state = LevelState.COMPLETED


def _block(x: float, y: float, w: float, h: float, fill: Color, stroke: Color) -> Obstacle:
    return Obstacle(Rect(x, y, w, h), fill, stroke)


class StarterTower(Level):
    name = "Starter Tower"
    target_score = 100

    def _blocks(self, ground_y):
        center_x = 800.0
        width, height, spacing = 30.0, 40.0, 35.0
        layers = [(9, GREEN, DARKGREEN), (7, YELLOW, GOLD), (5, ORANGE, BROWN), (3, BLUE, DARKBLUE)]
        for level, (count, fill, stroke) in enumerate(layers, start=1):
            start_x = center_x - (count - 1) * spacing / 2
            for i in range(count):
                yield _block(start_x + i * spacing, ground_y - height * level, width, height, fill, stroke)
        yield _block(center_x - width / 2, ground_y - height * 5, width, height, RED, MAROON)


class FortifiedCastle(Level):
    name = "Fortified Castle"
    target_score = 150

    def _blocks(self, ground_y):
        size = 40.0
        small = 20.0
        base_x = 700.0

        def cell(col, row, fill=SKYBLUE, stroke=DARKBLUE, w=size):
            return _block(base_x + col * size, ground_y - row * size, w, size, fill, stroke)

        for i in range(8):
            yield cell(i, 1, GRAY, DARKGRAY)
            yield cell(i, 2, GRAY, DARKGRAY)

        for col in (0, 7):
            for row in (3, 4, 5):
                yield cell(col, row)

        for i in range(1, 7):
            if i in (3, 4):
                continue
            yield cell(i, 3)
            yield cell(i, 4)

        for i in range(8):
            yield cell(i, 5)

        yield cell(0, 6)
        yield cell(0, 7)
        yield cell(7, 6)
        yield cell(7, 7)
        yield cell(2, 6)
        yield cell(5, 6)

        for i in range(8):
            if i not in (1, 3, 4, 6):
                yield cell(i, 7)

        for row in (6, 7, 8):
            yield cell(3, row, BLUE, DARKBLUE, 2 * size)
        yield cell(3, 9, PURPLE, DARKPURPLE, 2 * size)

        for col in (-1, 8):
            yield cell(col, 1, DARKGRAY, BLACK)
            yield cell(col, 2, DARKGRAY, BLACK)

        yield _block(
            base_x + 3.5 * size - small,
            ground_y - 7.5 * size,
            small * 2,
            small * 2,
            SKYBLUE,
            BLUE,
        )


class Stronghold(Level):
    name = "Stronghold"
    target_score = 250

    def _blocks(self, ground_y):
        center_x = 800.0
        size = 40.0
        base_y = ground_y - size
        rings = [
            (11, BLACK, BLACK),
            (9, DARKGRAY, BLACK),
            (7, GRAY, DARKGRAY),
            (5, DARKBLUE, BLACK),
            (3, BLUE, DARKBLUE),
        ]
        for depth, (count, fill, stroke) in enumerate(rings):
            yield from self._square(center_x, base_y - depth * size, count, size, fill, stroke)
        yield _block(center_x - size / 2, base_y - 5 * size - size / 2, size, size, GOLD, ORANGE)

    @staticmethod
    def _square(center_x, base_y, count, size, fill, stroke):
        """A hollow square outline of count blocks per side."""
        offset = count * size / 2
        for i in range(count):
            yield _block(center_x - offset + i * size, base_y, size, size, fill, stroke)
            yield _block(center_x - offset + i * size, base_y - (count - 1) * size, size, size, fill, stroke)
            if 0 < i < count - 1:
                yield _block(center_x - offset, base_y - i * size, size, size, fill, stroke)
                yield _block(center_x + offset - size, base_y - i * size, size, size, fill, stroke)


class UltimateChallenge(Level):
    name = "Ultimate Challenge"
    target_score = 250

    def _blocks(self, ground_y):
        size = 40.0
        left_x, right_x = 700.0, 900.0
        tower_height, tower_width = 10, 3

        for tower_x in (left_x, right_x):
            for height in range(tower_height):
                for width in range(tower_width):
                    yield _block(
                        tower_x + width * size, ground_y - (height + 1) * size, size, size, BLUE, DARKBLUE
                    )

        platform_start = left_x + tower_width * size
        platform_length = int((right_x - platform_start) / size)
        for i in range(platform_length):
            yield _block(
                platform_start + i * size, ground_y - tower_height * size, size, size, BLUE, DARKBLUE
            )

        center_x = platform_start + platform_length * size / 2 - size / 2
        yield _block(center_x, ground_y - (tower_height + 1) * size, size, size, GOLD, ORANGE)


def create_levels(ground_y: float) -> list[Level]:
    """All levels in play order, already built for the given ground line."""
    levels: list[Level] = [StarterTower(), FortifiedCastle(), Stronghold(), UltimateChallenge()]
    for level in levels:
        level.build(ground_y)
    return levels