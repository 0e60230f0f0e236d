import math

import pytest

from slingbird.entities import (
    GRAVITY,
    PROBE_QUANTITY,
    SPLIT_SCALE,
    Ball,
    Obstacle,
    GREEN,
    DARKGREEN,
)
from slingbird.geometry import Rect, Vec2, to_radians


def make_ball(**kwargs):
    defaults = dict(pos=Vec2(200, 300), vel=Vec2(12, -7))
    defaults.update(kwargs)
    return Ball(**defaults)


def block(x, y, w, h, visible=True):
    return Obstacle(Rect(x, y, w, h), GREEN, DARKGREEN, visible)


def test_ball_defaults_match_source():
    ball = Ball()
    assert ball.radius == 40
    assert ball.friction == pytest.approx(0.99)
    assert ball.elasticity == pytest.approx(0.9)
    assert ball.is_active and not ball.is_split


def test_probe_zero_is_right_of_center():
    ball = make_ball()
    assert ball.probe_position(True, 0) == pytest.approx(ball.pos.x + ball.radius)
    assert ball.probe_position(False, 0) == pytest.approx(ball.pos.y)


def test_inner_ring_at_half_radius():
    ball = make_ball()
    outer = ball.probe_position(True, 0) - ball.pos.x
    inner = ball.probe_position(True, PROBE_QUANTITY) - ball.pos.x
    assert inner == pytest.approx(outer * 0.5)


def test_unset_probe_slots_repeat_angle_zero():
    ball = make_ball()
    for index in (8, 9):
        assert ball.probe_position(True, index) == pytest.approx(ball.probe_position(True, 0))
        assert ball.probe_position(False, index) == pytest.approx(ball.probe_position(False, 0))


def test_probes_lie_within_radius():
    ball = make_ball()
    for point in ball.probes():
        assert (point - ball.pos).length <= ball.radius + 1e-9


def test_split_ball_probes_shrink():
    ball = make_ball(is_split=True)
    offset = ball.probe_position(True, 0) - ball.pos.x
    assert offset == pytest.approx(ball.radius * SPLIT_SCALE)


def test_collides_with_overlapping_block():
    ball = make_ball()
    obstacle = block(ball.pos.x, ball.pos.y - 20, 60, 40)
    assert ball.collides_with(obstacle)


def test_no_collision_far_away():
    ball = make_ball()
    assert not ball.collides_with(block(1000, 1000, 40, 40))


def test_no_collision_with_hidden_block():
    ball = make_ball()
    assert not ball.collides_with(block(ball.pos.x, ball.pos.y - 20, 60, 40, visible=False))


def test_inactive_ball_never_collides():
    ball = make_ball(is_active=False)
    assert not ball.collides_with(block(ball.pos.x, ball.pos.y - 20, 60, 40))


@pytest.mark.parametrize("offset", [-30.0, 30.0])
def test_split_keeps_speed_and_turns(offset):
    ball = make_ball()
    piece = ball.split(offset)
    assert piece.vel.length == pytest.approx(ball.vel.length)
    turned = piece.vel.angle - ball.vel.angle
    assert math.remainder(turned - to_radians(offset), 2 * math.pi) == pytest.approx(0, abs=1e-9)
    assert piece.radius == pytest.approx(ball.radius * SPLIT_SCALE)
    assert piece.is_split


def test_split_leaves_original_untouched():
    ball = make_ball()
    piece = ball.split(30.0)
    piece.pos.x += 100
    assert ball.pos == Vec2(200, 300)
    assert not ball.is_split
    assert ball.vel == Vec2(12, -7)


def test_trajectory_shape():
    ball = make_ball()
    points = ball.trajectory(50)
    assert len(points) == 50
    assert points[0] == ball.pos
    assert points[1] == ball.pos + ball.vel


def test_trajectory_applies_gravity():
    ball = make_ball()
    points = ball.trajectory(10)
    dy = [b.y - a.y for a, b in zip(points, points[1:])]
    dx = [b.x - a.x for a, b in zip(points, points[1:])]
    assert all(d == pytest.approx(ball.vel.x) for d in dx)
    assert all(b - a == pytest.approx(GRAVITY) for a, b in zip(dy, dy[1:]))


def test_trajectory_does_not_move_ball():
    ball = make_ball()
    ball.trajectory(20)
    assert ball.pos == Vec2(200, 300)
    assert ball.vel == Vec2(12, -7)