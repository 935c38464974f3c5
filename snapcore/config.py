"""
snapcore/config.py
------------------
Shared constants for the Snap sketch tools.

Everything is in screen units (pixels, y pointing down). Modules import the
values they need directly; the demo layout is read through get_demo_layout().
"""
import math

# ---------------------------------------------------------------
# GEOMETRY TOLERANCES
# ---------------------------------------------------------------

# Determinant threshold for reporting two lines as parallel.
# 0.0 keeps the exact-zero test; raise it to treat near-parallel as parallel.
PARALLEL_TOL = 0.0


# ---------------------------------------------------------------
# INTERACTION
# ---------------------------------------------------------------

POINT_RADIUS = 10                  # draggable point hit/draw radius
ARROW_HIT_RADIUS = 20              # arrow endpoint hit radius
PRIMARY_BUTTON = 1                 # left mouse button


# ---------------------------------------------------------------
# ARROW GEOMETRY
# ---------------------------------------------------------------

ARROW_HEAD_LENGTH = 20
ARROW_HEAD_ANGLE = math.pi / 7     # half-angle of the arrowhead wedge
ARROW_LINE_WIDTH = 8


# ---------------------------------------------------------------
# OVERLAY SIZES
# ---------------------------------------------------------------

NORMAL_RAY_LENGTH = 30
MARKER_RADIUS = 5
LINE_WIDTH = 5
POINT_OUTLINE_WIDTH = 3
MARKER_OUTLINE_WIDTH = 2


# ---------------------------------------------------------------
# COLOURS
# ---------------------------------------------------------------

POINT_COLOR = "red"
SELECTED_COLOR = "orange"
OUTLINE_COLOR = "black"
TEXT_COLOR = "black"
INTERSECTION_COLOR = "yellow"
INTERSECTION_RAY_COLOR = "red"
DISTANCE_LINE_COLOR = "blue"
CLOSEST_POINT_COLOR = "purple"
LINE_PROJECTION_COLOR = "pink"
NORMAL_PROJECTION_COLOR = "lime"


# ---------------------------------------------------------------
# DASH PATTERNS
# ---------------------------------------------------------------

LINE_NORMAL_DASH = [1, 6]
INTERSECTION_NORMAL_DASH = [1, 3]
DISTANCE_DASH = [5, 5]


# ---------------------------------------------------------------
# TEXT PLACEMENT
# ---------------------------------------------------------------

STATUS_TEXT_POS = (10, 20)
NO_INTERSECTION_TEXT_POS = (10, 30)
FONT_SIZE = 10


# ---------------------------------------------------------------
# WINDOW / DEMO SCENE
# ---------------------------------------------------------------

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
WINDOW_TITLE = "snapsketch"

DEMO_LINE = ((100, 100), (300, 200))
DEMO_POINT = (400, 600)
DEMO_POINT_COLOR = "lightgreen"
DEMO_ARROW = ((500, 100), (600, 200))


def get_demo_layout():
    """
    Returns the demo scene description as a plain dictionary:
    - 'line'  : ((x1, y1), (x2, y2))
    - 'point' : ((x, y), colour)
    - 'arrow' : ((x1, y1), (x2, y2))
    """
    return {
        "line": DEMO_LINE,
        "point": (DEMO_POINT, DEMO_POINT_COLOR),
        "arrow": DEMO_ARROW,
    }
