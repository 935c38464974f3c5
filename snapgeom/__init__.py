# snapgeom/__init__.py

__version__ = "1.0"

# Import Roles
from .base import Drawable, Interactive

# Import Vector / Line Algebra
from .vector import scale, add, inverse, side_of_line, vector, dist, near
from .geometry import (intersection, intersect, closest_point_on_line, closest_pt,
                       shortest_distance_to_line, unit_normal, visible)

# Import Scene Entities
from .primitives import Point, Line, Arrow, draw_arrow, draw_vector, circle
from .overlay import IntersectionOverlay
