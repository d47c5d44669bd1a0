"""
Renderer - Reads world snapshots and draws them onto a pygame surface.
This is a THIN ADAPTER - no game logic here.
"""
import math
from typing import Optional, Tuple

import pygame

from gorillas.gameplay.entities import Banana, Building, Explosion, Gorilla, Sun
from gorillas.gameplay.world import WorldSnapshot


# Colors
COLOR_SKY = "#000da3"
COLOR_HUD = (200, 200, 200)
COLOR_HITBOX = (255, 0, 255)

SUN_RADIUS = 12
SUN_RAY_LENGTH = 8
SUN_RAY_COUNT = 16


class Renderer:
    """
    Draws snapshots onto a target surface.

    The skyline never changes within a run, so it is rasterized once and
    reused until a snapshot arrives with a different city.
    """

    def __init__(self, surface: pygame.Surface, show_hitboxes: bool = False):
        self.surface = surface
        self.show_hitboxes = show_hitboxes
        self.frames_drawn = 0

        self._city_surface: Optional[pygame.Surface] = None
        self._city_key: Optional[Tuple[Building, ...]] = None
        self._font: Optional[pygame.font.Font] = None

    def __call__(self, snapshot: WorldSnapshot) -> None:
        self.draw(snapshot)

    def draw(self, snapshot: WorldSnapshot) -> None:
        """Render one frame."""
        self.surface.fill(COLOR_SKY)
        self._draw_sun(snapshot.sun)
        self.surface.blit(self._get_city_surface(snapshot), (0, 0))

        for actor in snapshot.actors:
            self._draw_gorilla(actor.model)
            if self.show_hitboxes:
                box = actor.hitbox
                pygame.draw.rect(self.surface, COLOR_HITBOX, (box.x, box.y, box.width, box.height), 1)

        for banana in snapshot.bananas:
            self._draw_banana(banana)

        for explosion in snapshot.explosions:
            self._draw_explosion(explosion)

        self._draw_hud(snapshot)
        self.frames_drawn += 1

    # =========================================================================
    # CITY
    # =========================================================================

    def _get_city_surface(self, snapshot: WorldSnapshot) -> pygame.Surface:
        if self._city_surface is None or self._city_key is not snapshot.buildings:
            size = (snapshot.canvas_width, snapshot.canvas_height)
            city = pygame.Surface(size, pygame.SRCALPHA)
            for building in snapshot.buildings:
                self._draw_building(city, building)
            self._city_surface = city
            self._city_key = snapshot.buildings
        return self._city_surface

    @staticmethod
    def _draw_building(target: pygame.Surface, building: Building) -> None:
        pygame.draw.rect(target, building.color, (building.x, building.y, building.width, building.height))
        for window in building.windows:
            pygame.draw.rect(target, window.color, (window.x, window.y, window.width, window.height))

    # =========================================================================
    # ACTORS
    # =========================================================================

    def _draw_gorilla(self, gorilla: Gorilla) -> None:
        x, y = int(gorilla.x), int(gorilla.y)
        body = gorilla.body_color

        # Head and neck
        pygame.draw.rect(self.surface, body, (x - 4, y + 1, 7, 7))
        pygame.draw.rect(self.surface, body, (x - 5, y + 3, 9, 3))
        pygame.draw.rect(self.surface, body, (x - 3, y + 8, 5, 1))

        # Torso
        pygame.draw.rect(self.surface, body, (x - 9, y + 9, 17, 8))
        pygame.draw.rect(self.surface, body, (x - 7, y + 15, 13, 6))

        # Arms, raised when the pose says so
        left_arm_y = y + 2 if gorilla.left_arm_up else y + 10
        right_arm_y = y + 2 if gorilla.right_arm_up else y + 10
        pygame.draw.rect(self.surface, body, (x - 13, left_arm_y, 4, 10))
        pygame.draw.rect(self.surface, body, (x + 8, right_arm_y, 4, 10))

        # Legs
        pygame.draw.rect(self.surface, body, (x - 8, y + 21, 5, 11))
        pygame.draw.rect(self.surface, body, (x + 2, y + 21, 5, 11))

        # Eyes and brow
        line = gorilla.line_color
        pygame.draw.rect(self.surface, line, (x - 3, y + 4, 2, 1))
        pygame.draw.rect(self.surface, line, (x, y + 4, 2, 1))
        pygame.draw.rect(self.surface, line, (x - 3, y + 2, 5, 1))

    def _draw_sun(self, sun: Sun) -> None:
        center = (int(sun.x), int(sun.y))
        pygame.draw.circle(self.surface, sun.color, center, SUN_RADIUS)

        for i in range(SUN_RAY_COUNT):
            angle = 2 * math.pi * i / SUN_RAY_COUNT
            start = (center[0] + SUN_RADIUS * math.cos(angle), center[1] + SUN_RADIUS * math.sin(angle))
            reach = SUN_RADIUS + SUN_RAY_LENGTH
            end = (center[0] + reach * math.cos(angle), center[1] + reach * math.sin(angle))
            pygame.draw.line(self.surface, sun.color, start, end)

        # Face
        pygame.draw.circle(self.surface, COLOR_SKY, (center[0] - 4, center[1] - 3), 2)
        pygame.draw.circle(self.surface, COLOR_SKY, (center[0] + 4, center[1] - 3), 2)
        if sun.is_surprised:
            pygame.draw.circle(self.surface, COLOR_SKY, (center[0], center[1] + 5), 3)
        else:
            smile = pygame.Rect(center[0] - 6, center[1] - 4, 12, 12)
            pygame.draw.arc(self.surface, COLOR_SKY, smile, math.pi * 1.15, math.pi * 1.85, 2)

    # =========================================================================
    # PROJECTILES
    # =========================================================================

    def _draw_banana(self, banana: Banana) -> None:
        radius = banana.outer_radius
        bounds = pygame.Rect(0, 0, radius * 2, radius * 2)
        bounds.center = (int(banana.x), int(banana.y))
        start = math.radians(banana.rotation_dg)
        thickness = max(1, int(banana.outer_radius - banana.inner_radius))
        pygame.draw.arc(self.surface, banana.line_color, bounds, start, start + math.pi, thickness)

    def _draw_explosion(self, explosion: Explosion) -> None:
        center = (int(explosion.x), int(explosion.y))
        pygame.draw.circle(self.surface, explosion.color, center, int(explosion.radius))

    # =========================================================================
    # HUD
    # =========================================================================

    def _draw_hud(self, snapshot: WorldSnapshot) -> None:
        if not pygame.font.get_init():
            return
        if self._font is None:
            self._font = pygame.font.SysFont("consolas", 14)

        wind = snapshot.environment.wind_speed
        text = f"wind {wind:+.1f}  gravity {snapshot.environment.gravity:.1f}  tick {snapshot.tick_number}"
        label = self._font.render(text, True, COLOR_HUD)
        self.surface.blit(label, (4, snapshot.canvas_height - label.get_height() - 1))
