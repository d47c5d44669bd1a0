"""
Procedural city generation.
NO UI DEPENDENCIES.

A city is a row of adjacent buildings laid out left to right. The heights
follow one of six skyline profiles with random jitter on top, and every
building carries a grid of randomly lit windows.
"""
import logging
import random
from enum import Enum, auto
from typing import List, Optional, Tuple

from .entities import Building, Window
from .errors import CityGenerationError
from .constants import (
    CITY_START_X, BUILDING_GAP, BUILDING_MIN_WIDTH, BUILDING_MAX_WIDTH,
    HEIGHT_INCREASE_STEP, HEIGHT_JITTER, CEILING_MARGIN, GROUND_MARGIN,
    GORILLA_CLEARANCE, LOW_START_FRACTION, HIGH_START_FRACTION,
    BUILDING_COLORS, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_PITCH_X,
    WINDOW_PITCH_Y, WINDOW_MARGIN_SIDE, WINDOW_MARGIN_TOP,
    WINDOW_MARGIN_BOTTOM, WINDOW_COLORS,
)

logger = logging.getLogger(__name__)


class SkylineProfile(Enum):
    """Height progression rules for a skyline."""
    RISING = auto()        # Low on the left, one step up per building
    FALLING = auto()       # High on the left, one step down per building
    VALLEY = auto()        # Down to the middle, then back up
    PEAK = auto()          # Up to the middle, then back down
    STEEP_VALLEY = auto()  # Valley with double steps
    STEEP_PEAK = auto()    # Peak with double steps

    def start_height(self, canvas_height: int) -> int:
        """Base height before the first building's delta is applied."""
        if self in (SkylineProfile.RISING, SkylineProfile.PEAK, SkylineProfile.STEEP_PEAK):
            return int(canvas_height * LOW_START_FRACTION)
        return int(canvas_height * HIGH_START_FRACTION)

    def height_delta(self, x: int, canvas_width: int) -> int:
        """Change in base height for a building whose left edge is at x."""
        if self == SkylineProfile.RISING:
            return HEIGHT_INCREASE_STEP
        if self == SkylineProfile.FALLING:
            return -HEIGHT_INCREASE_STEP

        step = HEIGHT_INCREASE_STEP
        if self in (SkylineProfile.STEEP_VALLEY, SkylineProfile.STEEP_PEAK):
            step *= 2

        past_middle = x > canvas_width // 2
        if self in (SkylineProfile.PEAK, SkylineProfile.STEEP_PEAK):
            return -step if past_middle else step
        return step if past_middle else -step


def max_building_height(canvas_height: int) -> int:
    """Tallest building allowed on a canvas of the given height."""
    return canvas_height - CEILING_MARGIN + GORILLA_CLEARANCE


def build_windows(x: int, y: int, width: int, height: int, rng: random.Random) -> Tuple[Window, ...]:
    """
    Lay out the window grid for a building facade.

    The grid starts WINDOW_MARGIN_SIDE inside the left edge and
    WINDOW_MARGIN_TOP below the roof. Columns stop before crossing the right
    margin and rows stop WINDOW_MARGIN_BOTTOM short of the ground, so the
    window count depends only on the building size.
    """
    windows: List[Window] = []

    right_limit = x + width - WINDOW_MARGIN_SIDE
    bottom_limit = y + height - WINDOW_MARGIN_BOTTOM

    window_y = y + WINDOW_MARGIN_TOP
    while window_y + WINDOW_HEIGHT <= bottom_limit:
        window_x = x + WINDOW_MARGIN_SIDE
        while window_x + WINDOW_WIDTH <= right_limit:
            color = rng.choice(WINDOW_COLORS)
            windows.append(Window(window_x, window_y, WINDOW_WIDTH, WINDOW_HEIGHT, color))
            window_x += WINDOW_PITCH_X
        window_y += WINDOW_PITCH_Y

    return tuple(windows)


def generate_city(
    canvas_width: int,
    canvas_height: int,
    rng: Optional[random.Random] = None,
    profile: Optional[SkylineProfile] = None,
) -> List[Building]:
    """
    Generate the skyline for a canvas.

    Buildings start at CITY_START_X and are separated by BUILDING_GAP. The
    last building is truncated so it ends exactly on the canvas edge.
    Heights are clamped to the minimum step first and to the ceiling second.

    Pass profile to force a skyline shape; otherwise one is picked from rng.
    """
    min_canvas_height = CEILING_MARGIN - GORILLA_CLEARANCE + HEIGHT_INCREASE_STEP
    if canvas_width <= CITY_START_X or canvas_height < min_canvas_height:
        raise CityGenerationError(
            f"Canvas {canvas_width}x{canvas_height} is too small for a city "
            f"(need width > {CITY_START_X} and height >= {min_canvas_height})"
        )

    if rng is None:
        rng = random.Random()
    if profile is None:
        profile = rng.choice(list(SkylineProfile))

    base_height = profile.start_height(canvas_height)
    ceiling = max_building_height(canvas_height)

    buildings: List[Building] = []
    x = CITY_START_X
    while x < canvas_width:
        base_height += profile.height_delta(x, canvas_width)

        width = rng.randint(BUILDING_MIN_WIDTH, BUILDING_MAX_WIDTH)
        if x + width > canvas_width:
            width = canvas_width - x

        height = base_height + rng.randint(0, HEIGHT_JITTER)
        if height < HEIGHT_INCREASE_STEP:
            height = HEIGHT_INCREASE_STEP
        if height > ceiling:
            height = ceiling

        y = canvas_height - height - GROUND_MARGIN
        windows = build_windows(x, y, width, height, rng)
        color = rng.choice(BUILDING_COLORS)

        buildings.append(Building(x, y, width, height, color, windows))
        x += width + BUILDING_GAP

    logger.debug(f"Generated {len(buildings)} buildings with {profile.name} skyline")
    return buildings
