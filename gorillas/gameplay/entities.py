"""
World entities: Building, Window, Gorilla, Actor, Banana, Explosion, Sun.
NO UI DEPENDENCIES.

City pieces and actors are frozen once built. Bananas and explosions change
every tick and are the only mutable entities.
"""
from dataclasses import dataclass
from typing import Tuple

from .geometry import Rect, square_around
from .constants import (
    BANANA_OUTER_RADIUS, BANANA_INNER_RADIUS, BANANA_COLOR, BANANA_LINE_COLOR,
    EXPLOSION_RADIUS, EXPLOSION_COLOR, DEFAULT_EXPLOSION_TTL, EXPLOSION_TTL_EPSILON,
    GORILLA_BODY_COLOR, GORILLA_LINE_COLOR, SUN_COLOR,
)


@dataclass(frozen=True)
class Window:
    """A single window on a building facade."""
    x: int
    y: int
    width: int
    height: int
    color: str

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Building:
    """
    One building of the skyline.
    (x, y) is the top-left corner of the facade.
    """
    x: int
    y: int
    width: int
    height: int
    color: str
    windows: Tuple[Window, ...] = ()

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class Gorilla:
    """
    Gorilla sprite model.
    (x, y) is the anchor at the top-center of the sprite.
    """
    x: float
    y: float
    left_arm_up: bool = False
    right_arm_up: bool = False
    body_color: str = GORILLA_BODY_COLOR
    line_color: str = GORILLA_LINE_COLOR


@dataclass(frozen=True)
class Actor:
    """A gorilla bound to its collision hitbox and the building it stands on."""
    model: Gorilla
    hitbox: Rect
    building_index: int


@dataclass
class Banana:
    """
    The thrown projectile.
    Velocities are in units per second; y velocity is physics-up.
    """
    x: float
    y: float
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    rotation_dg: float = 0.0
    outer_radius: float = BANANA_OUTER_RADIUS
    inner_radius: float = BANANA_INNER_RADIUS
    thrower: int = 0
    color: str = BANANA_COLOR
    line_color: str = BANANA_LINE_COLOR

    @property
    def bounds(self) -> Rect:
        """Bounding square used for collision."""
        return square_around(self.x, self.y, self.outer_radius)


@dataclass
class Explosion:
    """A transient blast left behind by a banana impact."""
    x: float
    y: float
    radius: float = EXPLOSION_RADIUS
    color: str = EXPLOSION_COLOR
    ttl: float = DEFAULT_EXPLOSION_TTL

    @property
    def expired(self) -> bool:
        # Repeated float subtraction can leave a sliver above zero
        return self.ttl <= EXPLOSION_TTL_EPSILON

    def age(self, dt: float) -> None:
        """Count down the time left on screen."""
        self.ttl = max(0.0, self.ttl - dt)


@dataclass(frozen=True)
class Sun:
    """Decorative sun. Takes no part in collisions."""
    x: float
    y: float
    is_surprised: bool = False
    color: str = SUN_COLOR


@dataclass(frozen=True)
class Environment:
    """Wind and gravity for a run. Fixed between resets."""
    wind_speed: float = 0.0
    gravity: float = 9.8
