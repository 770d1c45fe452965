# fsm_logic_designer/utils/config.py
"""
Central configuration file for the FSM Logic Designer.

Contains static application settings, the constants of the force layout and
the default colors used when an FSM is drawn with Qt.
"""

# ==============================================================================
# STATIC APPLICATION CONFIGURATION
# ==============================================================================

APP_VERSION = "1.0.0"
APP_NAME = "FSM Logic Designer"


# ==============================================================================
# GEOMETRY
# ==============================================================================

# Raster used by FSM.to_raster()
GRID_SIZE = 20

# State radius is derived from the length of its name
STATE_MIN_RADIUS = 30.0
STATE_CHAR_WIDTH = 9.0
STATE_PADDING = 14.0

# Self loops are drawn as a small circle sitting on top of their state
LOOP_OFFSET_FACTOR = 1.0
LOOP_RADIUS_FACTOR = 0.5

# Number of line segments used to approximate a transition curve
CURVE_SEGMENTS = 24
ARROW_SIZE = 10.0


# ==============================================================================
# FORCE LAYOUT
# ==============================================================================
# All forces are integrated with an explicit Euler step: pos += force * dt.

# Repulsion between two states: STATE_REPULSION * r1 * r2 / d^2
STATE_REPULSION = 500.0
# Spring between the endpoints of a transition, resting length is
# SPRING_DISTANCE_FACTOR * max(r1, r2)
SPRING_CONSTANT = 0.5
SPRING_DISTANCE_FACTOR = 5.0
# Pull of a transition midpoint towards the middle of its endpoints
TRANSITION_ATTRACTION = 0.3
# Repulsion of a transition midpoint from states (scaled by the state radius)
TRANSITION_STATE_REPULSION = 40.0
# Repulsion between two transition midpoints
TRANSITION_REPULSION = 1500.0
# Distances below this value are clamped to keep forces finite
MIN_REPULSION_DISTANCE = 10.0


# ==============================================================================
# INTERACTION & ANIMATION
# ==============================================================================

TRANSITION_HIT_TOLERANCE = 6.0
TRANSITION_LABEL_HIT_RADIUS = 10.0

LAYOUT_TICK_INTERVAL_MS = 20
LAYOUT_TIMESTEP = 0.05


# ==============================================================================
# RENDERING DEFAULTS
# ==============================================================================

COLOR_ITEM_STATE_DEFAULT_BG = "#E3F2FD"
COLOR_ITEM_STATE_DEFAULT_BORDER = "#64B5F6"
COLOR_ITEM_TRANSITION_DEFAULT = "#00796B"
COLOR_TEXT_PRIMARY = "#212121"
COLOR_TEXT_SECONDARY = "#757575"

DEFAULT_STATE_BORDER_WIDTH = 1.8
DEFAULT_TRANSITION_LINE_WIDTH = 2.2

APP_FONT_FAMILY = "Segoe UI, Arial, sans-serif"
APP_FONT_SIZE_STANDARD = 9
