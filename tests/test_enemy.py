import math
import random

import pytest

from polybow.enemy import (
    ENEMY_HP,
    ENEMY_RADIUS,
    ENEMY_SPEED,
    ORB_COUNT,
    ORB_MAX_RADIUS,
    ORB_MIN_RADIUS,
    ORB_SCATTER,
    Enemy,
    intercept_direction,
    spawn_orbs,
    split_sum,
)
from polybow.physics import Vec2, Velocity


def _cross(a, b):
    return a.x * b.y - a.y * b.x


def test_intercept_stationary_target_points_straight_at_it():
    d = intercept_direction(Vec2(0, 0), Vec2(10, 0), Vec2(0, 0), 1.0)
    assert d.x == pytest.approx(1.0)
    assert d.y == pytest.approx(0.0)


def test_intercept_unreachable_target_returns_none():
    assert intercept_direction(Vec2(0, 0), Vec2(10, 0), Vec2(5, 0), 1.0) is None


@pytest.mark.parametrize(
    "shooter,target,velocity,speed",
    [
        (Vec2(0, 0), Vec2(10, 5), Vec2(0.3, -0.2), 1.0),
        (Vec2(-4, 7), Vec2(20, -3), Vec2(-0.5, 0.5), 2.0),
        (Vec2(100, 100), Vec2(0, 0), Vec2(0.1, 0.4), 1.5),
    ],
)
def test_intercept_meets_target(shooter, target, velocity, speed):
    d = intercept_direction(shooter, target, velocity, speed)
    assert d.length() == pytest.approx(1.0)
    relative = target - shooter
    closing = velocity - d * speed
    assert _cross(relative, closing) == pytest.approx(0.0, abs=1e-9)
    assert relative.dot(closing) < 0


def test_intercept_target_as_fast_as_shooter_coming_closer():
    d = intercept_direction(Vec2(0, 0), Vec2(10, 0), Vec2(-1, 0), 1.0)
    assert d.x == pytest.approx(1.0)
    assert d.y == pytest.approx(0.0)


def test_intercept_target_as_fast_moving_sideways_is_none():
    assert intercept_direction(Vec2(0, 0), Vec2(10, 0), Vec2(0, 1), 1.0) is None


def test_split_sum_adds_up():
    rng = random.Random(3)
    parts = split_sum(ORB_COUNT, 5.0, rng)
    assert len(parts) == ORB_COUNT
    assert sum(parts) == pytest.approx(5.0)
    assert all(p >= 0 for p in parts)


def test_split_sum_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_sum(0, 5.0, random.Random(1))


def test_spawn_orbs_scattered_and_worth_total():
    center = Vec2(50, -20)
    orbs = spawn_orbs(5.0, center, random.Random(9))
    assert len(orbs) == ORB_COUNT
    assert sum(o.value for o in orbs) == pytest.approx(5.0)
    for orb in orbs:
        assert abs(orb.position.x - center.x) <= ORB_SCATTER
        assert abs(orb.position.y - center.y) <= ORB_SCATTER
        assert ORB_MIN_RADIUS <= orb.radius <= ORB_MAX_RADIUS


def test_triangle_chases_player():
    enemy = Enemy(sides=3, position=Vec2(0, 0))
    enemy.steer(Vec2(0, 50), Velocity(3, 0))
    assert math.hypot(enemy.velocity.dx, enemy.velocity.dy) == pytest.approx(ENEMY_SPEED)
    assert enemy.velocity.dx == pytest.approx(0.0, abs=1e-12)
    assert enemy.velocity.dy > 0


def test_square_heads_at_still_player():
    enemy = Enemy(sides=4, position=Vec2(0, 0))
    enemy.steer(Vec2(-30, 0), Velocity(0, 0))
    assert enemy.velocity.dx == pytest.approx(-ENEMY_SPEED)
    assert enemy.velocity.dy == pytest.approx(0.0)


def test_square_keeps_velocity_when_player_unreachable():
    enemy = Enemy(sides=4, position=Vec2(0, 0), velocity=Velocity(0.25, 0.5))
    enemy.steer(Vec2(10, 0), Velocity(5, 0))
    assert (enemy.velocity.dx, enemy.velocity.dy) == (0.25, 0.5)


def test_other_shapes_do_not_steer():
    enemy = Enemy(sides=5, velocity=Velocity(0.25, 0.5))
    enemy.steer(Vec2(10, 10), Velocity(0, 0))
    assert (enemy.velocity.dx, enemy.velocity.dy) == (0.25, 0.5)


def test_health_and_death():
    enemy = Enemy(sides=3)
    assert enemy.hp == ENEMY_HP
    assert enemy.health_fraction() == 1.0
    assert not enemy.is_dead()
    enemy.hp = -2
    assert enemy.health_fraction() == 0.0
    assert enemy.is_dead()


def test_radius_scales():
    enemy = Enemy(sides=3, scale=2.0)
    assert enemy.radius() == pytest.approx(ENEMY_RADIUS * 2.0)


def test_step_moves_by_velocity():
    enemy = Enemy(sides=3, position=Vec2(1, 2), velocity=Velocity(0.5, -1))
    enemy.step()
    assert enemy.position == Vec2(1.5, 1)
    assert enemy.health_bar_position.x == enemy.position.x
    assert enemy.health_bar_position.y > enemy.position.y