"""Game entities: coloured obstacles and the launched ball."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .geometry import Rect, Vec2, to_radians

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RAYWHITE: Color = (245, 245, 245, 255)
GRAY: Color = (130, 130, 130, 255)
DARKGRAY: Color = (80, 80, 80, 255)
YELLOW: Color = (253, 249, 0, 255)
GOLD: Color = (255, 203, 0, 255)
ORANGE: Color = (255, 161, 0, 255)
RED: Color = (230, 41, 55, 255)
MAROON: Color = (190, 33, 55, 255)
GREEN: Color = (0, 228, 48, 255)
DARKGREEN: Color = (0, 117, 44, 255)
SKYBLUE: Color = (102, 191, 255, 255)
BLUE: Color = (0, 121, 241, 255)
DARKBLUE: Color = (0, 82, 172, 255)
PURPLE: Color = (200, 122, 255, 255)
DARKPURPLE: Color = (112, 31, 126, 255)
BROWN: Color = (127, 106, 79, 255)

PROBE_QUANTITY = 10
VELOCITY_MULTIPLIER = 50
LAUNCH_MAX_DISTANCE = 100
GRAVITY = 1.0
SPLIT_SCALE = 0.7

# Ten probe slots, of which only the first eight are given distinct angles.
PROBE_ANGLES: tuple[float, ...] = (0, 45, 90, 135, 180, 225, 270, 315, 0, 0)


@dataclass
class Obstacle:
    """A destructible block."""

    rect: Rect
    fill_color: Color
    stroke_color: Color
    visible: bool = True


@dataclass
class Ball:
    """The bird: a circle that flies under gravity and knocks out obstacles."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    radius: float = 40.0
    friction: float = 0.99
    elasticity: float = 0.9
    rotation_angle: float = 0.0
    probe_angles: tuple[float, ...] = PROBE_ANGLES
    fill_color: Color = BLUE
    stroke_color: Color = DARKBLUE
    is_split: bool = False
    is_active: bool = True

    @property
    def draw_radius(self) -> float:
        """Radius used for drawing and collision probes."""
        return self.radius * SPLIT_SCALE if self.is_split else self.radius

    def probe_position(self, for_x: bool, index: int) -> float:
        """One coordinate of a collision probe; indices past the first ring sit at half radius."""
        origin = self.pos.x if for_x else self.pos.y
        angle = to_radians(self.probe_angles[index % PROBE_QUANTITY])
        t = math.cos(angle) if for_x else math.sin(angle)
        ring = 0.5 if index // PROBE_QUANTITY > 0 else 1.0
        return origin + self.draw_radius * ring * t

    def probes(self):
        """Yield every collision probe point."""
        for index in range(PROBE_QUANTITY * 2):
            yield Vec2(self.probe_position(True, index), self.probe_position(False, index))

    def collides_with(self, obstacle: Obstacle) -> bool:
        if not obstacle.visible or not self.is_active:
            return False
        return any(obstacle.rect.contains(point) for point in self.probes())

    def split(self, angle_offset: float) -> Ball:
        """A smaller copy flying at the same speed, turned by angle_offset degrees."""
        heading = self.vel.angle + to_radians(angle_offset)
        speed = self.vel.length
        return replace(
            self,
            pos=self.pos.copy(),
            vel=Vec2(math.cos(heading) * speed, math.sin(heading) * speed),
            radius=self.radius * SPLIT_SCALE,
            is_split=True,
        )

    def trajectory(self, steps: int = 50) -> list[Vec2]:
        """Predicted positions for the next steps frames, starting at the current one."""
        px, py = self.pos
        vx, vy = self.vel
        points = []
        for _ in range(steps):
            points.append(Vec2(px, py))
            px += vx
            py += vy
            vy += GRAVITY
        return points