"""The playing field: slingshot, ball flight, level progression and the split power-up."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .entities import GRAVITY, LAUNCH_MAX_DISTANCE, SPLIT_SCALE, VELOCITY_MULTIPLIER, Ball
from .geometry import Rect, Vec2, point_in_circle
from .levels import Level, LevelState, create_levels

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SLING_X = 200.0
BALL_RADIUS = 40.0
START_VELOCITY = (50.0, -50.0)
ATTEMPTS_PER_LEVEL = 3
POWERUP_COST = 50
LEVEL_ADVANCE_DELAY = 2.0
SPIN_PER_FRAME = 5.0
REST_SPEED = 0.1


@dataclass
class InputState:
    """What the player did during one frame."""

    mouse: Vec2 = field(default_factory=Vec2)
    left_pressed: bool = False
    left_down: bool = False
    left_released: bool = False
    right_pressed: bool = False
    space_pressed: bool = False
    level_key: int | None = None


class GameWorld:
    """Everything that happens on the playing screen, independent of drawing."""

    def __init__(self, screen_width: int = SCREEN_WIDTH, screen_height: int = SCREEN_HEIGHT) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.x_start = SLING_X
        self.y_start = float(screen_height - 200)
        self.ground_y = float(screen_height - 40)

        self.ball = Ball(pos=Vec2(self.x_start, self.y_start), vel=Vec2(*START_VELOCITY), radius=BALL_RADIUS)
        self.split_balls: list[Ball] = []
        self.levels: list[Level] = create_levels(self.ground_y)
        self.current_level: Level = self.levels[0]
        self.current_level_index = 1

        self.selected = False
        self.launched = False
        self.launch_angle = 0.0
        self.relative_angle = 0.0
        self.launch_distance = 0
        self.x_offset = 0
        self.y_offset = 0

        self.score = 0
        self.attempts = ATTEMPTS_PER_LEVEL
        self.powerup_cost = POWERUP_COST
        self.can_use_powerup = False
        self.powerup_active = False
        self.powerup_button = Rect(screen_width - 150.0, 60.0, 100.0, 40.0)
        self._completion_time = 0.0

        self.set_level(1)

    @property
    def powerup_available(self) -> bool:
        """True when a click during flight would split the ball."""
        return self.can_use_powerup and self.launched and not self.powerup_active and not self.ball.is_split

    @property
    def balls(self) -> list[Ball]:
        return [self.ball, *self.split_balls]

    def total_score(self) -> int:
        return sum(level.current_score() for level in self.levels)

    def set_level(self, number: int) -> None:
        """Switch to level number (1-4); anything else falls back to the first level."""
        self.reset()
        self.current_level = self.levels[number - 1] if 1 <= number <= len(self.levels) else self.levels[0]
        self.current_level_index = number
        self.attempts = ATTEMPTS_PER_LEVEL
        self.current_level.reset()

    def update(self, inputs: InputState, dt: float = 1 / 60) -> None:
        """Advance the game by one frame."""
        if self.current_level.state is LevelState.COMPLETED:
            if self.current_level_index < len(self.levels):
                self._completion_time += dt
                if self._completion_time > LEVEL_ADVANCE_DELAY:
                    self.set_level(self.current_level_index + 1)
                    self._completion_time = 0.0
            return

        self.score = self.total_score()
        self.can_use_powerup = self.score >= self.powerup_cost

        if (
            self.launched
            and self.can_use_powerup
            and not self.powerup_active
            and not self.ball.is_split
            and self.ball.is_active
            and inputs.left_pressed
        ):
            self.activate_split_powerup()

        if inputs.left_pressed and not self.launched:
            if point_in_circle(inputs.mouse, self.ball.pos, self.ball.radius):
                self.selected = True
                self.x_offset = int(inputs.mouse.x - self.ball.pos.x)
                self.y_offset = int(inputs.mouse.y - self.ball.pos.y)

        if inputs.left_down and self.selected:
            self._drag(inputs.mouse)

        if inputs.left_released:
            moved = self.ball.pos.x != self.x_start or self.ball.pos.y != self.y_start
            if self.selected and moved:
                self.launched = True
                self.attempts -= 1
                self.powerup_active = False
            self.selected = False

        if self.launched:
            self._fly()

        if inputs.right_pressed or inputs.space_pressed:
            self.reset()
            self.current_level.reset()
            self.attempts = ATTEMPTS_PER_LEVEL

        if inputs.level_key in (1, 2, 3, 4):
            self.set_level(inputs.level_key)

    def _drag(self, mouse: Vec2) -> None:
        ball = self.ball
        ball.pos.x = mouse.x - self.x_offset
        ball.pos.y = mouse.y - self.y_offset

        dx = int(self.x_start - ball.pos.x)
        dy = int(self.y_start - ball.pos.y)
        self.launch_distance = int(math.sqrt(dx * dx + dy * dy))
        self.relative_angle = math.atan2(dy, dx) + math.pi
        self.launch_angle = math.pi - self.relative_angle

        if self.launch_distance > LAUNCH_MAX_DISTANCE:
            ball.pos.x = self.x_start + math.cos(self.relative_angle) * LAUNCH_MAX_DISTANCE
            ball.pos.y = self.y_start + math.sin(self.relative_angle) * LAUNCH_MAX_DISTANCE

        vx = abs(ball.pos.x - self.x_start) / LAUNCH_MAX_DISTANCE
        vy = -abs(ball.pos.y - self.y_start) / LAUNCH_MAX_DISTANCE
        ball.vel.x = vx * math.cos(self.launch_angle) * VELOCITY_MULTIPLIER
        ball.vel.y = vy * math.sin(self.launch_angle) * VELOCITY_MULTIPLIER

    def _fly(self) -> None:
        for ball in self.balls:
            if ball.is_active:
                self.update_ball(ball)

        if not any(ball.is_active for ball in self.balls):
            if self.attempts <= 0 and self.current_level.state is not LevelState.COMPLETED:
                self.current_level.state = LevelState.FAILED
            self.reset_balls()

    def update_ball(self, ball: Ball) -> None:
        """Move one ball a frame: knock out obstacles, bounce off the ground, apply gravity and friction."""
        hit_any = False
        for obstacle in self.current_level.obstacles:
            if ball.collides_with(obstacle):
                hit_any = True
                obstacle.visible = False
                ball.vel.x *= ball.elasticity
        if hit_any:
            self.current_level.update()

        if ball.pos.y + ball.radius > self.screen_height:
            ball.pos.y = self.screen_height - ball.radius
            ball.vel.y *= -ball.elasticity

        ball.pos.x += ball.vel.x
        ball.pos.y += ball.vel.y
        ball.vel.y += GRAVITY

        ball.rotation_angle += SPIN_PER_FRAME
        ball.vel.x *= ball.friction
        ball.vel.y *= ball.friction

        resting = abs(ball.vel.x) < REST_SPEED and abs(ball.vel.y) < REST_SPEED
        if resting and ball.pos.y > self.screen_height - ball.radius - 1:
            ball.is_active = False

    def activate_split_powerup(self) -> bool:
        """Split the flying ball in three; returns whether the split happened."""
        if not self.can_use_powerup or not self.launched or self.ball.is_split or self.split_balls:
            return False
        self.score -= self.powerup_cost
        self.powerup_active = True
        self.split_balls.append(self.ball.split(-30.0))
        self.split_balls.append(self.ball.split(30.0))
        self.ball.is_split = True
        self.ball.radius *= SPLIT_SCALE
        return True

    def reset(self) -> None:
        self.reset_balls()
        self.split_balls.clear()
        self.powerup_active = False

    def reset_balls(self) -> None:
        """Put the ball back on the sling, ready for another shot."""
        ball = self.ball
        ball.pos = Vec2(self.x_start, self.y_start)
        ball.vel = Vec2(*START_VELOCITY)
        ball.rotation_angle = 0.0
        ball.is_split = False
        ball.is_active = True
        ball.radius = BALL_RADIUS
        self.launched = False
        self.selected = False
        self.split_balls.clear()