"""Window, input and drawing for the game."""

from __future__ import annotations

import argparse
import math
import random

import pygame

from polybow.enemy import Enemy
from polybow.physics import ENEMY_COLOR, PLAYER_COLOR, TRAIL_RADIUS, Vec2
from polybow.player import (
    BOW_OFFSET,
    HEALTH_SEGMENT_WIDTH,
    XP_BAR_WIDTH,
    Player,
)
from polybow.world import Controls, World

BACKGROUND = (10, 10, 16)
DARK_GRAY = (64, 64, 64)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
ORB_COLOR = (255, 255, 0)
HEALTH_BAR_COLOR = (255, 0, 0)
BAR_HEIGHT = 30
BAR_MARGIN = 15
ENEMY_BAR_WIDTH = 75
ENEMY_BAR_HEIGHT = 15
ARROW_LENGTH = 24.0
BOW_HALF_WIDTH = 14.0
ORB_DRAW_SCALE = 3.0


def world_to_screen(point: Vec2, camera: Vec2, size: tuple[int, int]) -> Vec2:
    """Screen pixel of a world point; the camera sits at the screen centre, y up."""
    width, height = size
    return Vec2(point.x - camera.x + width / 2, height / 2 - (point.y - camera.y))


def screen_to_world(point: Vec2, camera: Vec2, size: tuple[int, int]) -> Vec2:
    """World point under a screen pixel; the inverse of world_to_screen."""
    width, height = size
    return Vec2(point.x - width / 2 + camera.x, height / 2 - point.y + camera.y)


def _polygon(center: Vec2, radius: float, sides: int, rotation: float) -> list[Vec2]:
    """Corners of a regular polygon pointing up before rotation."""
    return [
        center
        + Vec2(
            radius * math.cos(rotation + math.pi / 2 + 2 * math.pi * k / sides),
            radius * math.sin(rotation + math.pi / 2 + 2 * math.pi * k / sides),
        )
        for k in range(sides)
    ]


class _Renderer:
    """Draws a world onto a pygame surface."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.Font(None, 60)
        self.overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)

    @property
    def size(self) -> tuple[int, int]:
        return self.screen.get_size()

    def _to_screen(self, point: Vec2, camera: Vec2) -> tuple[float, float]:
        return tuple(world_to_screen(point, camera, self.size))

    def draw(self, world: World, camera: Vec2, aim: Vec2 | None) -> None:
        self.screen.fill(BACKGROUND)
        self._draw_trails(world, camera)
        for orb in world.orbs:
            pygame.draw.circle(
                self.screen,
                ORB_COLOR,
                self._to_screen(orb.position, camera),
                max(1, round(orb.radius * ORB_DRAW_SCALE)),
            )
        for enemy in world.enemies:
            self._draw_enemy(enemy, camera)
        for arrow in world.arrows:
            tail = arrow.position - Vec2(math.cos(arrow.angle), math.sin(arrow.angle)) * ARROW_LENGTH
            pygame.draw.line(
                self.screen,
                WHITE,
                self._to_screen(tail, camera),
                self._to_screen(arrow.position, camera),
                3,
            )
        self._draw_player(world.player, camera, aim)
        self._draw_health(world.player)
        self._draw_xp(world.player)

    def _draw_trails(self, world: World, camera: Vec2) -> None:
        self.overlay.fill((0, 0, 0, 0))
        for trail in world.trails:
            alpha = max(0, min(255, round(trail.alpha * 255)))
            pygame.draw.circle(
                self.overlay,
                (*PLAYER_COLOR, alpha),
                self._to_screen(trail.position, camera),
                max(1, round(TRAIL_RADIUS * trail.scale)),
            )
        self.screen.blit(self.overlay, (0, 0))

    def _draw_enemy(self, enemy: Enemy, camera: Vec2) -> None:
        corners = _polygon(enemy.position, enemy.radius(), enemy.sides, enemy.rotation)
        pygame.draw.polygon(
            self.screen, ENEMY_COLOR, [self._to_screen(c, camera) for c in corners]
        )
        bar_center = self._to_screen(enemy.health_bar_position, camera)
        width = ENEMY_BAR_WIDTH * enemy.health_fraction()
        pygame.draw.rect(
            self.screen,
            HEALTH_BAR_COLOR,
            pygame.Rect(
                bar_center[0] - width / 2,
                bar_center[1] - ENEMY_BAR_HEIGHT / 2,
                width,
                ENEMY_BAR_HEIGHT,
            ),
        )

    def _draw_player(self, player: Player, camera: Vec2, aim: Vec2 | None) -> None:
        corners = _polygon(player.position, player.radius, 3, player.rotation)
        pygame.draw.polygon(
            self.screen, PLAYER_COLOR, [self._to_screen(c, camera) for c in corners]
        )
        if aim is None:
            return
        angle = player.aim_angle(aim)
        bow = player.bow_position(angle)
        across = Vec2(-math.sin(angle), math.cos(angle)) * BOW_HALF_WIDTH
        pygame.draw.line(
            self.screen,
            WHITE,
            self._to_screen(bow - across, camera),
            self._to_screen(bow + across, camera),
            3,
        )
        grip = player.position + Vec2(math.cos(angle), math.sin(angle)) * (BOW_OFFSET - 6)
        pygame.draw.line(
            self.screen,
            WHITE,
            self._to_screen(grip, camera),
            self._to_screen(bow, camera),
            1,
        )

    def _draw_health(self, player: Player) -> None:
        width, height = self.size
        count = player.health.num_segments
        fills = player.health.segment_fills()
        step = HEALTH_SEGMENT_WIDTH + BAR_MARGIN
        left = BAR_MARGIN + (width - BAR_MARGIN - count * step) / 2
        top = height - BAR_MARGIN - BAR_HEIGHT
        for index in range(count):
            x = left + index * step
            fill = fills[index] if index < len(fills) else 0.0
            if fill > 0.0:
                pygame.draw.rect(
                    self.screen,
                    RED,
                    pygame.Rect(x, top, HEALTH_SEGMENT_WIDTH * fill, BAR_HEIGHT),
                )
            else:
                pygame.draw.rect(
                    self.screen,
                    DARK_GRAY,
                    pygame.Rect(x, top, HEALTH_SEGMENT_WIDTH, BAR_HEIGHT),
                )

    def _draw_xp(self, player: Player) -> None:
        width, _ = self.size
        fraction = min(max(player.xp.current / player.xp.per_level(), 0.0), 1.0)
        bar_width = XP_BAR_WIDTH * fraction
        pygame.draw.rect(
            self.screen,
            YELLOW,
            pygame.Rect((width - bar_width) / 2, BAR_MARGIN, bar_width, BAR_HEIGHT),
        )
        label = self.font.render(str(player.xp.level), True, WHITE)
        self.screen.blit(
            label,
            ((width - label.get_width()) / 2, BAR_MARGIN + BAR_HEIGHT + 20),
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="polybow", description="Top-down polygon archery.")
    parser.add_argument("--width", type=int, default=1280, help="window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=60, help="frame rate limit")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or the player dies."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("polybow")
        renderer = _Renderer(screen)
        clock = pygame.time.Clock()
        world = World(rng=random.Random(args.seed))
        elapsed = 0.0
        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0
            elapsed += dt
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            view = world.camera + world.camera_offset
            aim = None
            if pygame.mouse.get_focused():
                aim = screen_to_world(Vec2(*pygame.mouse.get_pos()), view, screen.get_size())
            keys = pygame.key.get_pressed()
            controls = Controls(
                left=bool(keys[pygame.K_a]),
                right=bool(keys[pygame.K_d]),
                up=bool(keys[pygame.K_w]),
                down=bool(keys[pygame.K_s]),
                shooting=bool(pygame.mouse.get_pressed()[0]),
                aim=aim,
            )
            world.update(dt, elapsed, controls)
            if not world.player.health.alive:
                running = False

            renderer.draw(world, world.camera + world.camera_offset, aim)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0