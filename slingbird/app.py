"""Window, menus and drawing for the slingshot game."""

from __future__ import annotations

import argparse
import enum
import functools
import math
from pathlib import Path

import pygame

from .entities import (
    BLACK,
    BLUE,
    DARKGRAY,
    GRAY,
    GREEN,
    RAYWHITE,
    RED,
    WHITE,
    YELLOW,
    Ball,
    Color,
)
from .geometry import Rect, Vec2
from .levels import LevelState
from .world import SCREEN_HEIGHT, SCREEN_WIDTH, GameWorld, InputState

FPS = 60
BUTTON_SCALE = 0.65
TITLE = "Angry Birds"
LEVEL_SELECT_TITLE = "Select Level"
WINDOW_CAPTION = "Angry Bird"
LEVEL_BUTTON_SPACING = 50.0
TRAJECTORY_STEPS = 50
SLING_COLOR: Color = (100, 100, 100, 200)
OVERLAY_COLOR: Color = (0, 0, 0, 200)
TOP_BAR_COLOR: Color = (0, 0, 0, 120)
CLOUD_COLOR: Color = (255, 255, 255, 240)

ASSET_FILES: dict[str, str] = {
    "staring": "resources/meStaring.png",
    "surprised": "resources/meSurprised.png",
    "launched": "resources/meLaunched.png",
    "split": "resources/meSplit.png",
    "level_background": "graphics/level_image.png",
    "powerup_button": "graphics/powerup_button.png",
    "menu_background": "graphics/start_image.png",
    "level_select_background": "graphics/level_select_bg.png",
    "start_button": "graphics/start_button.png",
    "exit_button": "graphics/exit_button.png",
    "back_button": "graphics/back_button.png",
    "level1_button": "graphics/level1_button.png",
    "level2_button": "graphics/level2_button.png",
    "level3_button": "graphics/level3_button.png",
    "level4_button": "graphics/level4_button.png",
}

LEVEL_DESCRIPTIONS = (
    "Level 1: Starter Tower",
    "Level 2: Fortified Castle",
    "Level 3: Stronghold",
    "Level 4: Ultimate Challenge",
)


class Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    LEVEL_SELECT = "level_select"
    EXIT_GAME = "exit_game"


class Button:
    """An image button that fires when pressed and released over it."""

    def __init__(self, image: pygame.Surface, position, scale: float = 1.0) -> None:
        size = (int(image.get_width() * scale), int(image.get_height() * scale))
        self.image = pygame.transform.scale(image, size)
        self.position = Vec2(*position)
        self.scale = scale
        self._was_pressed = False

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    @property
    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, float(self.width), float(self.height))

    def clicked(self, mouse_pos, pressed: bool, released: bool) -> bool:
        """Feed one frame of left-button state; True on a completed click."""
        over = self.rect.contains(Vec2(*mouse_pos))
        if over and pressed:
            self._was_pressed = True
            return False
        if over and self._was_pressed and released:
            self._was_pressed = False
            return True
        if released:
            self._was_pressed = False
        return False

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.image, (int(self.position.x), int(self.position.y)))


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, int(size * 1.25))


def _text_width(text: str, size: int) -> int:
    return _font(size).size(text)[0]


def _draw_text(surface, text: str, x: float, y: float, size: int, color: Color, font=None) -> None:
    rendered = (font or _font(size)).render(text, True, color)
    surface.blit(rendered, (int(x), int(y)))


def _fill_alpha(surface, x: float, y: float, width: float, height: float, color: Color) -> None:
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        return
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, (int(x), int(y)))


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def _stretch(surface, image: pygame.Surface, target: Rect, tint: Color | None = None) -> None:
    scaled = pygame.transform.scale(image, (int(target.width), int(target.height)))
    if tint is not None:
        scaled = scaled.copy()
        scaled.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(scaled, (int(target.x), int(target.y)))


def draw_cloud(surface: pygame.Surface, x: int, y: int, scale: int = 1) -> None:
    """Three overlapping translucent ellipses forming a cloud."""
    ellipses = [
        (x, y, 30 * scale, 20 * scale),
        (x + 20 * scale, y - 10 * scale, 25 * scale, 18 * scale),
        (x + 40 * scale, y, 30 * scale, 20 * scale),
    ]
    left = min(cx - rx for cx, _, rx, _ in ellipses)
    top = min(cy - ry for _, cy, _, ry in ellipses)
    right = max(cx + rx for cx, _, rx, _ in ellipses)
    bottom = max(cy + ry for _, cy, _, ry in ellipses)
    overlay = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
    for cx, cy, rx, ry in ellipses:
        pygame.draw.ellipse(overlay, CLOUD_COLOR, (cx - rx - left, cy - ry - top, 2 * rx, 2 * ry))
    surface.blit(overlay, (left, top))


def _draw_ball(surface, ball: Ball, launched: bool, selected: bool, sling: Vec2, assets) -> None:
    if not ball.is_active:
        return
    if not launched:
        pygame.draw.line(surface, BLACK, tuple(sling), tuple(ball.pos))
        points = ball.trajectory(TRAJECTORY_STEPS)
        for start, end in zip(points, points[1:]):
            pygame.draw.line(surface, ball.stroke_color, tuple(start), tuple(end))

    if selected:
        key = "surprised"
    elif launched:
        key = "split" if ball.is_split else "launched"
    else:
        key = "staring"
    texture = assets.get(key)
    radius = ball.draw_radius
    center = (int(ball.pos.x), int(ball.pos.y))
    if texture is None:
        pygame.draw.circle(surface, ball.fill_color, center, int(radius))
        pygame.draw.circle(surface, ball.stroke_color, center, int(radius), 2)
        return
    size = max(1, int(radius * 2))
    scaled = pygame.transform.scale(texture, (size, size))
    rotated = pygame.transform.rotate(scaled, -ball.rotation_angle)
    surface.blit(rotated, rotated.get_rect(center=center))


def _centered_banner(surface, message: str, colour: Color, subtitle: str) -> None:
    width, height = surface.get_size()
    text_width = _text_width(message, 40)
    _fill_alpha(surface, (width - text_width) / 2 - 10, height / 2 - 30, text_width + 20, 60, OVERLAY_COLOR)
    _draw_text(surface, message, (width - text_width) / 2, height / 2 - 20, 40, colour)
    sub_width = _text_width(subtitle, 20)
    _draw_text(surface, subtitle, (width - sub_width) / 2, height / 2 + 30, 20, WHITE)


def draw_world(surface: pygame.Surface, world: GameWorld, font: pygame.font.Font, assets) -> None:
    """Draw the playing screen: background, sling, blocks, balls, HUD and messages."""
    width, height = surface.get_size()

    background = assets.get("level_background")
    if background is not None:
        _stretch(surface, background, Rect(0.0, 0.0, float(width), float(height)))
    else:
        surface.fill(DARKGRAY)
        _draw_text(surface, "Failed to load background texture!", 10, height // 2, 20, RED, font)

    ball = world.ball
    _fill_alpha(
        surface,
        world.x_start - 10,
        world.y_start - ball.radius - 10,
        20,
        ball.radius * 2 + 130,
        SLING_COLOR,
    )

    for obstacle in world.current_level.obstacles:
        if obstacle.visible:
            rect = _to_pygame_rect(obstacle.rect)
            pygame.draw.rect(surface, obstacle.fill_color, rect)
            pygame.draw.rect(surface, obstacle.stroke_color, rect, 2)

    sling = Vec2(world.x_start, world.y_start)
    for split_ball in world.split_balls:
        _draw_ball(surface, split_ball, world.launched, False, sling, assets)
    _draw_ball(surface, ball, world.launched, world.selected, sling, assets)

    _fill_alpha(surface, 0, 0, width, 50, TOP_BAR_COLOR)
    level = world.current_level
    _draw_text(surface, f"Level {world.current_level_index}: {level.name}", 10, 10, 20, WHITE, font)
    _draw_text(surface, f"Score: {level.current_score()}/{level.target_score}", 400, 10, 20, WHITE, font)
    _draw_text(surface, f"Total Score: {world.score}", 600, 10, 20, WHITE, font)
    _draw_text(surface, f"Attempts: {world.attempts}", 800, 10, 20, WHITE, font)

    button = world.powerup_button
    available = world.powerup_available
    button_image = assets.get("powerup_button")
    if button_image is not None:
        _stretch(surface, button_image, button, None if available else GRAY)
    else:
        rect = _to_pygame_rect(button)
        pygame.draw.rect(surface, BLUE if available else DARKGRAY, rect)
        pygame.draw.rect(surface, BLACK, rect, 2)
        _draw_text(surface, "SPLIT", button.x + 10, button.y + 10, 20, WHITE, font)
    _draw_text(surface, f"Cost: {world.powerup_cost}", button.x, button.bottom + 5, 16, WHITE)

    if level.state is LevelState.COMPLETED:
        if world.current_level_index < len(world.levels):
            subtitle = "Next level loading..."
        else:
            subtitle = "Congratulations! You completed all levels!"
        _centered_banner(surface, "LEVEL COMPLETED!", GREEN, subtitle)
    elif level.state is LevelState.FAILED and world.attempts <= 0:
        _centered_banner(surface, "NO ATTEMPTS LEFT!", RED, "Press SPACE to retry")

    _draw_text(
        surface,
        "Controls: 1,2,3,4 - Select Level | SPACE - Reset | ESC - Menu",
        10,
        height - 30,
        20,
        WHITE,
        font,
    )
    _draw_text(surface, "Left click during flight to activate power-up!", 10, height - 60, 20, YELLOW, font)


def load_assets(base_dir=None) -> dict[str, pygame.Surface | None]:
    """Load every image the game uses; missing or unreadable files map to None."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    assets: dict[str, pygame.Surface | None] = {}
    for name, relative in ASSET_FILES.items():
        path = base / relative
        image = None
        if path.is_file():
            try:
                image = pygame.image.load(str(path))
            except pygame.error:
                image = None
        assets[name] = image
    if assets["split"] is None:
        assets["split"] = assets["launched"]
    return assets


def _placeholder(label: str, size=(300, 100)) -> pygame.Surface:
    image = pygame.Surface(size)
    image.fill(BLUE)
    pygame.draw.rect(image, BLACK, image.get_rect(), 4)
    text = _font(36).render(label, True, WHITE)
    image.blit(text, text.get_rect(center=image.get_rect().center))
    return image


def _button_image(assets, key: str, label: str) -> pygame.Surface:
    image = assets.get(key)
    return image if image is not None else _placeholder(label)


def _poll_input() -> tuple[InputState, bool, bool]:
    """Gather one frame of input; also whether the window closed and escape was pressed."""
    inputs = InputState(mouse=Vec2(*pygame.mouse.get_pos()))
    quit_requested = False
    escape = False
    level_keys = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4}
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                inputs.left_pressed = True
            elif event.button == 3:
                inputs.right_pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            inputs.left_released = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                inputs.space_pressed = True
            elif event.key == pygame.K_ESCAPE:
                escape = True
            elif event.key in level_keys:
                number = level_keys[event.key]
                inputs.level_key = number if inputs.level_key is None else min(inputs.level_key, number)
    inputs.left_down = bool(pygame.mouse.get_pressed()[0])
    return inputs, quit_requested, escape


def _draw_titled(surface, title: str, x: float, y: float, size: int) -> None:
    _draw_text(surface, title, x + 2, y + 2, size, DARKGRAY)
    _draw_text(surface, title, x, y, size, BLACK)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="slingbird", description="Slingshot arcade game.")
    parser.add_argument("--assets", default=".", help="directory holding graphics/ and resources/")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_CAPTION)
        clock = pygame.time.Clock()
        assets = load_assets(args.assets)
        hud_font = _font(20)

        start_image = _button_image(assets, "start_button", "START")
        exit_image = _button_image(assets, "exit_button", "EXIT")
        back_image = _button_image(assets, "back_button", "BACK")
        level_images = [
            _button_image(assets, f"level{n}_button", f"LEVEL {n}") for n in range(1, 5)
        ]

        start_w = int(start_image.get_width() * BUTTON_SCALE)
        start_h = int(start_image.get_height() * BUTTON_SCALE)
        exit_w = int(exit_image.get_width() * BUTTON_SCALE)
        back_h = int(back_image.get_height() * BUTTON_SCALE)
        level_w = int(level_images[0].get_width() * BUTTON_SCALE)
        level_h = int(level_images[0].get_height() * BUTTON_SCALE)

        start_y = SCREEN_HEIGHT / 2 - 50
        start_button = Button(start_image, ((SCREEN_WIDTH - start_w) / 2, start_y), BUTTON_SCALE)
        exit_button = Button(
            exit_image, ((SCREEN_WIDTH - exit_w) / 2, start_y + start_h + 20), BUTTON_SCALE
        )
        back_button = Button(back_image, (50.0, SCREEN_HEIGHT - back_h - 30), BUTTON_SCALE)

        total_width = 4 * level_w + 3 * LEVEL_BUTTON_SPACING
        levels_x = (SCREEN_WIDTH - total_width) / 2
        levels_y = SCREEN_HEIGHT / 2 - level_h / 2
        level_buttons = [
            Button(image, (levels_x + i * (level_w + LEVEL_BUTTON_SPACING), levels_y), BUTTON_SCALE)
            for i, image in enumerate(level_images)
        ]

        game: GameWorld | None = None
        screen = Screen.MENU

        while True:
            inputs, quit_requested, escape = _poll_input()
            if quit_requested:
                break
            clock.tick(FPS)
            dt = 1.0 / FPS
            mouse = inputs.mouse
            pressed, released = inputs.left_pressed, inputs.left_released

            if screen is Screen.MENU:
                if start_button.clicked(mouse, pressed, released):
                    screen = Screen.LEVEL_SELECT
                if exit_button.clicked(mouse, pressed, released):
                    screen = Screen.EXIT_GAME
            elif screen is Screen.LEVEL_SELECT:
                if game is None:
                    game = GameWorld(SCREEN_WIDTH, SCREEN_HEIGHT)
                for number, button in enumerate(level_buttons, start=1):
                    if button.clicked(mouse, pressed, released):
                        game.set_level(number)
                        screen = Screen.PLAYING
                        break
                if back_button.clicked(mouse, pressed, released):
                    screen = Screen.MENU
            elif screen is Screen.PLAYING and game is not None:
                game.update(inputs, dt)
                if escape:
                    screen = Screen.LEVEL_SELECT

            if screen is Screen.EXIT_GAME:
                break

            if screen is Screen.MENU:
                background = assets.get("menu_background")
                surface.fill(RAYWHITE)
                if background is not None:
                    surface.blit(background, (0, 0))
                title_x = (SCREEN_WIDTH - _text_width(TITLE, 60)) // 2
                bounce = math.sin(pygame.time.get_ticks() / 1000 * 2.0) * 10.0
                title_y = int(start_y) - 100 + int(bounce)
                _draw_titled(surface, TITLE, title_x, title_y, 60)
                start_button.draw(surface)
                exit_button.draw(surface)
            elif screen is Screen.LEVEL_SELECT:
                background = assets.get("level_select_background")
                if background is not None:
                    _stretch(surface, background, Rect(0.0, 0.0, float(SCREEN_WIDTH), float(SCREEN_HEIGHT)))
                else:
                    surface.fill(RAYWHITE)
                title_x = (SCREEN_WIDTH - _text_width(LEVEL_SELECT_TITLE, 50)) // 2
                _draw_titled(surface, LEVEL_SELECT_TITLE, title_x, 100, 50)
                for description, button in zip(LEVEL_DESCRIPTIONS, level_buttons):
                    _draw_text(
                        surface, description, button.position.x, button.position.y + level_h + 10, 18, BLACK
                    )
                for button in level_buttons:
                    button.draw(surface)
                back_button.draw(surface)
            elif screen is Screen.PLAYING and game is not None:
                draw_world(surface, game, hud_font, assets)

            pygame.display.flip()
    finally:
        pygame.quit()
    return 0