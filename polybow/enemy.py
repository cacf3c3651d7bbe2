"""Enemies: chasing behaviour, hit points and the experience they drop."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from polybow.physics import Vec2, Velocity, apply_velocity
from polybow.player import XPOrb

ENEMY_SPEED = 1.0
ENEMY_DAMAGE = 1
ENEMY_RADIUS = 30.0
ENEMY_HP = 4
HEALTH_BAR_OFFSET = 40.0
ORB_COUNT = 4
ORB_XP = 5.0
ORB_SCATTER = 30.0
ORB_MIN_RADIUS = 0.5
ORB_MAX_RADIUS = 2.3


@dataclass
class Enemy:
    """A spinning polygon; its number of sides decides how it hunts."""

    sides: int
    position: Vec2 = field(default_factory=Vec2)
    velocity: Velocity = field(default_factory=Velocity)
    hp: int = ENEMY_HP
    max_hp: int = ENEMY_HP
    collider: float = ENEMY_RADIUS
    scale: float = 1.0
    rotation: float = 0.0

    def radius(self) -> float:
        """Hit radius, taking the enemy's scale into account."""
        return self.collider * self.scale

    def is_dead(self) -> bool:
        return self.hp <= 0

    def health_fraction(self) -> float:
        """Remaining health as a fraction between 0 and 1."""
        fraction = max(self.hp, 0) / max(self.max_hp, 1)
        return min(max(fraction, 0.0), 1.0)

    @property
    def health_bar_position(self) -> Vec2:
        """Where the enemy's health bar floats."""
        return Vec2(self.position.x, self.position.y + HEALTH_BAR_OFFSET)

    def steer(self, player_position: Vec2, player_velocity: Velocity) -> None:
        """Point the velocity at the player: triangles chase, squares intercept."""
        if self.sides == 3:
            angle = math.atan2(
                player_position.y - self.position.y,
                player_position.x - self.position.x,
            )
            self.velocity.dx = math.cos(angle) * ENEMY_SPEED
            self.velocity.dy = math.sin(angle) * ENEMY_SPEED
        elif self.sides == 4:
            direction = intercept_direction(
                self.position,
                player_position,
                Vec2(player_velocity.dx, player_velocity.dy),
                ENEMY_SPEED,
            )
            if direction is not None:
                self.velocity.dx = direction.x * ENEMY_SPEED
                self.velocity.dy = direction.y * ENEMY_SPEED

    def step(self) -> None:
        """Advance by one frame."""
        self.position = apply_velocity(self.position, self.velocity)


def intercept_direction(
    shooter: Vec2, target: Vec2, target_velocity: Vec2, speed: float
) -> Vec2 | None:
    """Unit direction that meets a target moving at constant velocity, if any."""
    to_target = target - shooter
    a = target_velocity.dot(target_velocity) - speed * speed
    b = 2.0 * to_target.dot(target_velocity)
    c = to_target.dot(to_target)

    if a == 0.0:
        if b == 0.0:
            return None
        t = -c / b
        if t <= 0.0:
            return None
    else:
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None
        root = math.sqrt(discriminant)
        t1 = (-b - root) / (2.0 * a)
        t2 = (-b + root) / (2.0 * a)
        if t1 > 0.0:
            t = t1
        elif t2 > 0.0:
            t = t2
        else:
            return None

    aim = target + target_velocity * t
    try:
        return (aim - shooter).normalized()
    except ValueError:
        return None


def split_sum(n: int, total: float, rng: random.Random) -> list[float]:
    """n random non-negative numbers that add up to total."""
    if n < 1:
        raise ValueError("n must be at least 1")
    numbers = [rng.random() for _ in range(n)]
    weight = sum(numbers)
    if weight == 0.0:
        return [total / n] * n
    return [value / weight * total for value in numbers]


def spawn_orbs(total: float, position: Vec2, rng: random.Random) -> list[XPOrb]:
    """Experience orbs scattered around position, worth total between them."""
    return [
        XPOrb(
            position=position
            + Vec2(
                rng.uniform(-ORB_SCATTER, ORB_SCATTER),
                rng.uniform(-ORB_SCATTER, ORB_SCATTER),
            ),
            value=value,
            radius=rng.uniform(ORB_MIN_RADIUS, ORB_MAX_RADIUS),
        )
        for value in split_sum(ORB_COUNT, total, rng)
    ]