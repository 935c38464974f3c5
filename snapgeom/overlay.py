''' overlay.py
    ----------
    Derived drawables that only read other entities.
'''
from snapcore.config import (
    NORMAL_RAY_LENGTH, MARKER_RADIUS, MARKER_OUTLINE_WIDTH,
    INTERSECTION_COLOR, INTERSECTION_RAY_COLOR, INTERSECTION_NORMAL_DASH,
    OUTLINE_COLOR, TEXT_COLOR, NO_INTERSECTION_TEXT_POS,
)
from .base import Drawable
from .geometry import intersect, unit_normal, visible
from .primitives import circle
from .vector import add, inverse, scale


class IntersectionOverlay(Drawable):
    """
    Marks where the infinite lines through two line-like entities cross.

    `first` and `second` only need `p1` / `p2` attributes (a Line, an Arrow,
    ...). Nothing is cached: the intersection is recomputed on every draw,
    so the overlay always follows the current positions.
    """
    def __init__(self, first, second):
        self.first = first
        self.second = second

    @property
    def intersect(self):
        ''' The intersection point, or None for parallel lines. '''
        return intersect(self.first, self.second)

    @property
    def normal(self):
        ''' Inverse unit normal of the first entity (None if degenerate). '''
        n = unit_normal(self.first.p1, self.first.p2)
        if n is None:
            return None
        return inverse(n)

    def draw(self, sink):
        ip = self.intersect
        if ip is not None and visible(ip, sink.bounds):
            self.draw_normal_to_intersection(sink, ip)

            circle(sink, ip[0], ip[1], MARKER_RADIUS, INTERSECTION_COLOR)
            sink.fill_style = TEXT_COLOR
            sink.fill_text(f"Intersection: ({ip[0]:.2f}, {ip[1]:.2f})", ip[0] + 10, ip[1] + 10)
        else:
            sink.fill_style = TEXT_COLOR
            sink.fill_text("No visible intersection", *NO_INTERSECTION_TEXT_POS)

    def draw_normal_to_intersection(self, sink, ip):
        normal = self.normal
        if normal is None:
            return

        end = add(ip, scale(normal, NORMAL_RAY_LENGTH))

        sink.stroke_style = INTERSECTION_RAY_COLOR
        sink.line_width = MARKER_OUTLINE_WIDTH
        sink.set_line_dash(INTERSECTION_NORMAL_DASH)
        sink.begin_path()
        sink.move_to(ip[0], ip[1])
        sink.line_to(end[0], end[1])
        sink.stroke()
        sink.close_path()
        sink.set_line_dash([])
        sink.stroke_style = OUTLINE_COLOR

    def __repr__(self):
        return f"IntersectionOverlay({self.first!r}, {self.second!r})"
