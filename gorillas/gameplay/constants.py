"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# CITY LAYOUT (pixels)
# =============================================================================
CITY_START_X = 2              # first building's left edge
BUILDING_GAP = 2              # horizontal gap between adjacent buildings
BUILDING_MIN_WIDTH = 37
BUILDING_MAX_WIDTH = 74
HEIGHT_INCREASE_STEP = 10     # per-building height delta, also the min height
HEIGHT_JITTER = 120           # random height added on top of the profile base
CEILING_MARGIN = 100          # max height is canvas height minus this margin
GROUND_MARGIN = 10            # gap between building bottoms and canvas bottom
GORILLA_CLEARANCE = 5         # allowance above the ceiling for the gorilla

LOW_START_FRACTION = 0.05     # base height as a fraction of canvas height
HIGH_START_FRACTION = 0.4

BUILDING_COLORS = ("#00aaaa", "#aa0000", "#aaaaaa")

# =============================================================================
# WINDOWS (pixels)
# =============================================================================
WINDOW_WIDTH = 3
WINDOW_HEIGHT = 6
WINDOW_PITCH_X = 6
WINDOW_PITCH_Y = 10
WINDOW_MARGIN_SIDE = 3        # left/right inset inside the building
WINDOW_MARGIN_TOP = 2
WINDOW_MARGIN_BOTTOM = 6

WINDOW_COLORS = ("#ffff55", "#555555")  # lit, dark

# =============================================================================
# ACTORS (pixels)
# =============================================================================
GORILLA_HEIGHT = 33
GORILLA_WIDTH = 28
GORILLA_BODY_COLOR = "#ffaa52"
GORILLA_LINE_COLOR = "#0000aa"
MIN_BUILDINGS_FOR_PLACEMENT = 7

SUN_Y = 25
SUN_COLOR = "#fffe55"

# =============================================================================
# PROJECTILES
# =============================================================================
BANANA_OUTER_RADIUS = 5
BANANA_INNER_RADIUS = 3
BANANA_SPIN_DG = 45           # rotation per tick, degrees
BANANA_COLOR = "#ffff00"
BANANA_LINE_COLOR = "#ffff00"

EXPLOSION_RADIUS = 10
EXPLOSION_COLOR = "#ff2222"

# =============================================================================
# TIMING
# =============================================================================
DEFAULT_FRAMES_PER_SECOND = 10
DEFAULT_EXPLOSION_TTL = 1.0   # seconds an explosion stays visible
EXPLOSION_TTL_EPSILON = 1e-9  # remaining ttl treated as zero
