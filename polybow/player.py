"""The player: movement, health segments, experience, bow and arrows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from polybow.physics import Vec2, Velocity, apply_velocity

PLAYER_SPEED = 10.0
FRICTION = 0.5
BOW_OFFSET = 55.0
ARROW_SPEED = 10.0
ARROW_COOLDOWN = 0.5
REGENERATE_SPEED = 1.0
REGENERATE_COOLDOWN = 3.0
G = 50000.0
MIN_ORB_FORCE = 50.0
ORB_FORCE_EXPONENT = 1.2
CAMERA_SMOOTHNESS = 5.0
PLAYER_RADIUS = 30.0
XP_BASE = 50.0
XP_BAR_WIDTH = 600.0
HEALTH_SEGMENT_WIDTH = 100.0


@dataclass
class PlayerHealth:
    """Health split into segments; a segment emptied by damage is lost for good."""

    current: float = 36.0
    per_segment: int = 10
    num_segments: int = 4

    @property
    def capacity(self) -> float:
        """Most health the remaining segments can hold."""
        return float(self.num_segments * self.per_segment)

    @property
    def alive(self) -> bool:
        return self.current > 0.0

    def _current_segment(self) -> int:
        return math.floor(self.current / self.per_segment)

    def take_damage(self, amount: float) -> None:
        """Lose health and drop every segment above the one now in use."""
        self.current -= amount
        segment = self._current_segment()
        if segment + 1 < self.num_segments:
            self.num_segments = max(segment + 1, 0)

    def regenerate(self, last_damage: float, elapsed: float, dt: float) -> None:
        """Heal slowly once enough time has passed since the last hit."""
        gain = dt * REGENERATE_SPEED
        if (
            last_damage + REGENERATE_COOLDOWN < elapsed
            and self.current + gain < self.capacity
        ):
            self.current += gain

    def segment_fills(self) -> list[float]:
        """Fill level between 0 and 1 of each remaining segment, in order."""
        segment = self._current_segment()
        full = min(max(segment, 0), self.num_segments)
        fills = [1.0] * full
        if 0 <= segment < self.num_segments:
            partial = (self.current - segment * self.per_segment) / self.per_segment
            fills.append(partial)
        return fills


@dataclass
class XPBar:
    """Experience level and progress towards the next one."""

    level: int = 0
    current: float = 0.0

    def per_level(self) -> float:
        """Experience needed to finish the current level."""
        return 2.0**self.level * XP_BASE

    def add(self, amount: float) -> None:
        """Gain experience."""
        self.current += amount

    def update(self) -> float:
        """Level up when the bar overflows; return the bar's fill fraction."""
        if self.current > self.per_level():
            self.level += 1
            self.current = 0.0
        return self.current / self.per_level()


@dataclass
class XPOrb:
    """A collectible carrying some experience."""

    position: Vec2
    value: float
    radius: float = 1.0


@dataclass
class Arrow:
    """A projectile flying in a straight line."""

    position: Vec2
    velocity: Velocity
    angle: float

    def step(self) -> None:
        """Advance by one frame."""
        self.position = apply_velocity(self.position, self.velocity)


@dataclass
class Player:
    """The player-controlled triangle holding a bow."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Velocity = field(default_factory=Velocity)
    previous_position: Vec2 = field(default_factory=Vec2)
    health: PlayerHealth = field(default_factory=PlayerHealth)
    xp: XPBar = field(default_factory=XPBar)
    radius: float = PLAYER_RADIUS
    rotation: float = 0.0
    cooldown: float = 0.0

    def handle_keys(
        self, left: bool, right: bool, up: bool, down: bool, dt: float
    ) -> None:
        """Accelerate according to the held movement keys."""
        push = PLAYER_SPEED * dt
        if left:
            self.velocity.dx -= push
        if right:
            self.velocity.dx += push
        if up:
            self.velocity.dy += push
        if down:
            self.velocity.dy -= push

    def apply_friction(self, dt: float) -> None:
        """Slow down; velocity halves every second."""
        factor = FRICTION**dt
        self.velocity.dx *= factor
        self.velocity.dy *= factor

    def aim_angle(self, target: Vec2) -> float:
        """Angle in radians from the player towards target."""
        return math.atan2(target.y - self.position.y, target.x - self.position.x)

    def bow_position(self, angle: float) -> Vec2:
        """Where the bow sits when aimed at angle."""
        return Vec2(
            self.position.x + BOW_OFFSET * math.cos(angle),
            self.position.y + BOW_OFFSET * math.sin(angle),
        )

    def reload(self, dt: float) -> None:
        """Let time pass on the bow's cooldown."""
        self.cooldown += dt

    def shoot(self, target: Vec2) -> Arrow | None:
        """Loose an arrow towards target if the bow is ready."""
        if self.cooldown <= ARROW_COOLDOWN:
            return None
        angle = self.aim_angle(target)
        arrow = Arrow(
            position=self.bow_position(angle),
            velocity=Velocity(
                ARROW_SPEED * math.cos(angle), ARROW_SPEED * math.sin(angle)
            ),
            angle=angle,
        )
        self.cooldown = 0.0
        return arrow

    def step(self) -> None:
        """Advance by one frame."""
        self.position = apply_velocity(self.position, self.velocity)


def orb_step(orb_position: Vec2, player_position: Vec2, dt: float) -> Vec2:
    """New position of an orb pulled towards the player."""
    distance = player_position.distance(orb_position)
    if distance == 0.0:
        return orb_position
    direction = (player_position - orb_position).normalized()
    force = max(G / distance**ORB_FORCE_EXPONENT, MIN_ORB_FORCE)
    return orb_position + direction * (force * dt)


def camera_follow(camera: Vec2, target: Vec2, dt: float) -> Vec2:
    """Camera position eased towards target."""
    return camera.lerp(target, dt * CAMERA_SMOOTHNESS)