import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from slingbird.app import Button, draw_cloud, draw_world, load_assets  # noqa: E402
from slingbird.entities import DARKGRAY, RED  # noqa: E402
from slingbird.geometry import Vec2  # noqa: E402
from slingbird.world import GameWorld  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def _solid(size, colour):
    image = pygame.Surface(size)
    image.fill(colour)
    return image


def _button():
    return Button(_solid((200, 80), (255, 0, 0)), (10, 20), 0.5)


def test_button_is_scaled():
    button = _button()
    assert (button.width, button.height) == (100, 40)


def test_button_rect_starts_at_position():
    button = _button()
    assert (button.rect.x, button.rect.y) == (10, 20)


def test_press_then_release_over_button_clicks():
    button = _button()
    inside = Vec2(50, 40)
    assert button.clicked(inside, True, False) is False
    assert button.clicked(inside, False, False) is False
    assert button.clicked(inside, False, True) is True


def test_click_fires_only_once():
    button = _button()
    inside = (50, 40)
    button.clicked(inside, True, False)
    assert button.clicked(inside, False, True) is True
    assert button.clicked(inside, False, True) is False


def test_release_without_press_does_not_click():
    button = _button()
    assert button.clicked((50, 40), False, True) is False


def test_release_outside_cancels_press():
    button = _button()
    button.clicked((50, 40), True, False)
    assert button.clicked((500, 500), False, True) is False
    assert button.clicked((50, 40), False, True) is False


def test_right_edge_is_outside():
    button = _button()
    edge = (button.rect.right, 30)
    button.clicked(edge, True, False)
    assert button.clicked(edge, False, True) is False


def test_button_draw_blits_image():
    surface = _solid((300, 200), (0, 0, 0))
    button = _button()
    button.draw(surface)
    assert tuple(surface.get_at((15, 25)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_cloud_is_light_and_local():
    surface = _solid((400, 300), (0, 0, 0))
    draw_cloud(surface, 100, 100, 1)
    centre = tuple(surface.get_at((100, 100)))
    assert min(centre[:3]) > 200
    assert tuple(surface.get_at((350, 250)))[:3] == (0, 0, 0)


def test_load_assets_missing_files_are_none(tmp_path):
    assets = load_assets(tmp_path)
    assert "staring" in assets
    assert all(image is None for image in assets.values())


def test_load_assets_reads_images(tmp_path):
    (tmp_path / "resources").mkdir()
    pygame.image.save(_solid((12, 7), (1, 2, 3)), str(tmp_path / "resources" / "meStaring.png"))
    assets = load_assets(tmp_path)
    assert assets["staring"].get_size() == (12, 7)
    assert assets["surprised"] is None


def test_split_texture_falls_back_to_launched(tmp_path):
    (tmp_path / "resources").mkdir()
    pygame.image.save(_solid((5, 5), (9, 9, 9)), str(tmp_path / "resources" / "meLaunched.png"))
    assets = load_assets(tmp_path)
    assert assets["split"] is assets["launched"]


def _render(world, assets):
    surface = pygame.Surface((world.screen_width, world.screen_height))
    draw_world(surface, world, pygame.font.Font(None, 24), assets)
    return surface


def test_world_without_background_is_dark_gray():
    world = GameWorld()
    surface = _render(world, {})
    assert tuple(surface.get_at((1250, 400)))[:3] == DARKGRAY[:3]


def test_world_uses_background_asset():
    world = GameWorld()
    surface = _render(world, {"level_background": _solid((64, 36), RED[:3])})
    assert tuple(surface.get_at((1250, 400)))[:3] == RED[:3]


def test_visible_obstacle_is_drawn_and_hidden_one_is_not():
    world = GameWorld()
    top = world.current_level.obstacles[-1]
    centre = (int(top.rect.center.x), int(top.rect.center.y))

    surface = _render(world, {})
    assert tuple(surface.get_at(centre))[:3] == top.fill_color[:3]

    top.visible = False
    surface = _render(world, {})
    assert tuple(surface.get_at(centre))[:3] == DARKGRAY[:3]