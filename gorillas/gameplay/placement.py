"""
Actor placement - seats the two gorillas on the skyline.
NO UI DEPENDENCIES.
"""
import random
from typing import Optional, Sequence, Tuple

from .entities import Actor, Building, Gorilla, Sun
from .geometry import Rect
from .errors import PlacementError
from .constants import GORILLA_HEIGHT, GORILLA_WIDTH, MIN_BUILDINGS_FOR_PLACEMENT, SUN_Y


def actor_on_building(buildings: Sequence[Building], index: int) -> Actor:
    """
    Build an actor standing on the roof of buildings[index].

    The anchor is the top-center of the sprite. The hitbox hangs from the
    anchor, GORILLA_WIDTH wide and one pixel shorter than the sprite so it
    never touches the roof it stands on.
    """
    building = buildings[index]
    x = building.center_x
    y = building.y - GORILLA_HEIGHT

    model = Gorilla(x, y)
    hitbox = Rect(x - GORILLA_WIDTH / 2, y, GORILLA_WIDTH, GORILLA_HEIGHT - 1)
    return Actor(model=model, hitbox=hitbox, building_index=index)


def place_gorillas(buildings: Sequence[Building], rng: Optional[random.Random] = None) -> Tuple[Actor, Actor]:
    """
    Place one gorilla on the left side and one on the right side of the city.

    The left gorilla takes the 2nd or 3rd building, the right gorilla the
    2nd or 3rd from last. Returns (left, right).
    """
    if len(buildings) < MIN_BUILDINGS_FOR_PLACEMENT:
        raise PlacementError(
            f"Need at least {MIN_BUILDINGS_FOR_PLACEMENT} buildings to place gorillas, "
            f"got {len(buildings)}"
        )

    if rng is None:
        rng = random.Random()

    last = len(buildings) - 1
    left_index = rng.choice((1, 2))
    right_index = rng.choice((last - 1, last - 2))

    return actor_on_building(buildings, left_index), actor_on_building(buildings, right_index)


def place_sun(canvas_width: int) -> Sun:
    """The sun sits at the top center of the canvas."""
    return Sun(canvas_width / 2, SUN_Y)
