"""The game world: spawning, combat, pickups and the per-frame update."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from polybow.enemy import ENEMY_DAMAGE, ORB_XP, Enemy, spawn_orbs
from polybow.physics import (
    ScreenShake,
    Trail,
    Vec2,
    rotation_step,
    trail_segments,
)
from polybow.player import Arrow, Player, XPOrb, camera_follow, orb_step

SPAWN_MIN_DISTANCE = 120.0
SPAWN_MAX_DISTANCE = 500.0
SPAWN_MAX_ANGLE = 355.0
HIT_TRAUMA = 1.0
KILL_TRAUMA = 4.0
COLLISION_TRAUMA = 2.0


@dataclass
class Controls:
    """Player input for one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shooting: bool = False
    aim: Vec2 | None = None


@dataclass
class World:
    """Everything alive in a game and the rules that move it forward."""

    player: Player = field(default_factory=Player)
    enemies: list[Enemy] = field(default_factory=list)
    arrows: list[Arrow] = field(default_factory=list)
    orbs: list[XPOrb] = field(default_factory=list)
    trails: list[Trail] = field(default_factory=list)
    shake: ScreenShake = field(default_factory=ScreenShake)
    enemy_count: int = 0
    last_damage: float = 0.0
    spawn_cooldown: float = 0.0
    camera: Vec2 = field(default_factory=Vec2)
    camera_offset: Vec2 = field(default_factory=Vec2)
    rng: random.Random = field(default_factory=random.Random)

    def spawn_interval(self) -> float:
        """Seconds between spawns; grows with the number of live enemies."""
        return (self.enemy_count / 5.0) ** 2 + 0.1

    def spawn_enemies(self, dt: float) -> Enemy | None:
        """Spawn an enemy near the player once the cooldown has passed."""
        self.spawn_cooldown += dt
        if self.spawn_cooldown <= self.spawn_interval():
            return None
        self.spawn_cooldown = 0.0
        angle = self.rng.uniform(0.0, SPAWN_MAX_ANGLE)
        r = self.rng.uniform(SPAWN_MIN_DISTANCE, SPAWN_MAX_DISTANCE)
        sides = self.rng.randrange(3, 5)
        origin = self.player.position
        enemy = Enemy(
            sides=sides,
            position=Vec2(r * math.cos(angle) + origin.x, r * math.sin(angle) + origin.y),
        )
        self.enemies.append(enemy)
        self.enemy_count += 1
        return enemy

    def handle_arrow_hits(self) -> list[Enemy]:
        """Apply arrow hits to enemies; return the enemies killed."""
        killed: list[Enemy] = []
        for enemy in self.enemies:
            radius = enemy.radius()
            remaining: list[Arrow] = []
            for arrow in self.arrows:
                if enemy.is_dead() or enemy.position.distance(arrow.position) > radius:
                    remaining.append(arrow)
                    continue
                enemy.hp -= 1
                self.shake.add(HIT_TRAUMA)
                if enemy.is_dead():
                    killed.append(enemy)
                    self.shake.add(KILL_TRAUMA)
                    self.enemy_count -= 1
                    self.orbs.extend(spawn_orbs(ORB_XP, enemy.position, self.rng))
            self.arrows = remaining
        self.enemies = [e for e in self.enemies if not e.is_dead()]
        return killed

    def handle_player_collisions(self, elapsed: float) -> int:
        """Damage the player for every enemy touching it; return the hit count."""
        hits = 0
        survivors: list[Enemy] = []
        player = self.player
        for enemy in self.enemies:
            touching = (
                enemy.position.distance(player.position) < enemy.collider + player.radius
            )
            if touching and enemy.sides in (3, 4):
                player.health.take_damage(ENEMY_DAMAGE)
                self.enemy_count -= 1
                self.last_damage = elapsed
                self.shake.add(COLLISION_TRAUMA)
                hits += 1
            else:
                survivors.append(enemy)
        self.enemies = survivors
        return hits

    def collect_orbs(self) -> float:
        """Pick up orbs touching the player; return the experience gained."""
        gained = 0.0
        remaining: list[XPOrb] = []
        for orb in self.orbs:
            if orb.position.distance(self.player.position) < self.player.radius:
                self.player.xp.add(orb.value)
                gained += orb.value
            else:
                remaining.append(orb)
        self.orbs = remaining
        return gained

    def update(self, dt: float, elapsed: float, controls: Controls) -> None:
        """Advance the whole world by one frame."""
        player = self.player
        player.handle_keys(controls.left, controls.right, controls.up, controls.down, dt)
        player.apply_friction(dt)

        for enemy in self.enemies:
            enemy.steer(player.position, player.velocity)

        self.spawn_enemies(dt)
        self.handle_arrow_hits()
        self.handle_player_collisions(elapsed)

        self.orbs = [
            XPOrb(orb_step(o.position, player.position, dt), o.value, o.radius)
            for o in self.orbs
        ]
        self.collect_orbs()
        player.xp.update()
        player.health.regenerate(self.last_damage, elapsed, dt)

        if controls.shooting and controls.aim is not None:
            arrow = player.shoot(controls.aim)
            if arrow is not None:
                self.arrows.append(arrow)
        player.reload(dt)

        player.step()
        for enemy in self.enemies:
            enemy.step()
        for arrow in self.arrows:
            arrow.step()

        spin = rotation_step(dt)
        player.rotation += spin
        for enemy in self.enemies:
            enemy.rotation += spin

        self.trails.extend(trail_segments(player.previous_position, player.position))
        player.previous_position = player.position
        for trail in self.trails:
            trail.update(dt)
        self.trails = [t for t in self.trails if t.alive]

        self.camera_offset = self.shake.update(dt, self.rng)
        self.camera = camera_follow(self.camera, player.position, dt)