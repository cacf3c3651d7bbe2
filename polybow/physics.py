"""Shared vector maths, motion, screen shake and player trail effects."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

ROTATION_SPEED = 120.0
TRAUMA_FALLOFF_SPEED = 6.0
SHAKE_AMPLITUDE = 10.0
TRAIL_STEP = 0.005
TRAIL_LIFETIME = 0.2
TRAIL_ALPHA = 0.2
TRAIL_RADIUS = 20.0
MIN_TRAIL_SCALE = 0.01

ENEMY_COLOR = (245, 59, 93)
PLAYER_COLOR = (5, 157, 240)


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalise a zero-length or non-finite vector")
        return self / length

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation towards other by factor t."""
        return self + (other - self) * t


@dataclass
class Velocity:
    """Per-frame displacement of a moving body."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class ScreenShake:
    """Camera trauma that decays over time and jitters the view."""

    trauma: float = 0.0

    def add(self, trauma: float) -> None:
        """Set the trauma level, as a hit or collision does."""
        self.trauma = trauma

    def update(self, dt: float, rng: random.Random) -> Vec2:
        """Decay the trauma and return the camera offset for this frame."""
        self.trauma = min(max(self.trauma - dt * TRAUMA_FALLOFF_SPEED, 0.0), 1.0)
        if self.trauma <= 0.0:
            return Vec2(0.0, 0.0)
        intensity = self.trauma**2.5
        offset_x = rng.uniform(-1.0, 1.0) * SHAKE_AMPLITUDE * intensity
        offset_y = rng.uniform(-1.0, 1.0) * SHAKE_AMPLITUDE * intensity
        return Vec2(offset_x, offset_y)


@dataclass
class Trail:
    """A fading circle left behind the moving player."""

    position: Vec2
    lifetime: float
    scale: float = 1.0
    alpha: float = TRAIL_ALPHA

    @property
    def alive(self) -> bool:
        return self.lifetime > 0.0

    def update(self, dt: float) -> float:
        """Age the trail piece and return its new scale."""
        self.lifetime -= dt
        ratio = self.lifetime / TRAIL_LIFETIME
        scale = math.log1p(ratio) if ratio > -1.0 else MIN_TRAIL_SCALE
        self.scale = max(scale, MIN_TRAIL_SCALE)
        self.alpha = self.scale * 0.5
        return self.scale


def trail_segments(start: Vec2, end: Vec2) -> list[Trail]:
    """Trail pieces evenly spread from start towards end; older ones fade sooner."""
    steps = math.ceil(start.distance(end) / (TRAIL_STEP * 1000.0))
    return [
        Trail(
            position=start.lerp(end, i / steps),
            lifetime=max(TRAIL_LIFETIME - (steps - i) * TRAIL_STEP, TRAIL_STEP),
        )
        for i in range(steps)
    ]


def rotation_step(dt: float) -> float:
    """Angle in radians that spinning actors turn through in dt seconds."""
    return math.radians(ROTATION_SPEED * dt)


def apply_velocity(position: Vec2, velocity: Velocity) -> Vec2:
    """Position after one frame of movement."""
    return Vec2(position.x + velocity.dx, position.y + velocity.dy)