"""
snapview/scene.py
-----------------
The scene graph and the per-frame redraw.

A Scene owns the ordered list of drawables and a reference to the
InputCoordinator whose redraw requests it answers. Each redraw clears the
sink, recomputes every derived overlay from the current positions of the
"featured" entities, paints those overlays, then paints every drawable in
registration order. Nothing derived is kept between frames except the last
FrameOverlays, which is exposed for inspection only.
"""
from snapcore.config import (
    POINT_RADIUS, POINT_COLOR, MARKER_RADIUS, TEXT_COLOR, STATUS_TEXT_POS,
    DISTANCE_LINE_COLOR, DISTANCE_DASH, CLOSEST_POINT_COLOR,
    LINE_PROJECTION_COLOR, NORMAL_PROJECTION_COLOR,
)
from snapgeom.base import Drawable
from snapgeom.geometry import (closest_point_on_line, closest_pt, intersect,
                               shortest_distance_to_line, visible)
from snapgeom.overlay import IntersectionOverlay
from snapgeom.primitives import Point, Line, Arrow, circle, draw_vector
from snapgeom.vector import add, as_vec, vector

from .mouse import InputCoordinator


class Featured:
    ''' The entities the frame overlays are computed from. Any may be None. '''
    def __init__(self, point=None, line=None, arrow=None):
        self.point = point
        self.line = line
        self.arrow = arrow

    def __repr__(self):
        return f"Featured(point={self.point!r}, line={self.line!r}, arrow={self.arrow!r})"


class FrameOverlays:
    """
    Derived values for one frame. A field stays None when its inputs are
    missing, degenerate or off-screen.

    Attributes:
        source (np.ndarray): Position of the featured point.
        distance (float): Distance from the point to the line SEGMENT.
        segment_point (np.ndarray): Clamped closest point on the segment.
        closest_point (np.ndarray): Unclamped projection onto the line.
        line_projections (tuple): Arrow p1, p2 projected onto the line.
        intersection (np.ndarray): Arrow/line intersection (visible only).
        normal_projections (tuple): Arrow p1, p2 projected onto the line's
            normal through the intersection.
        reflection (np.ndarray): Along-line part of the arrow plus its
            reversed along-normal part.
    """
    def __init__(self):
        self.source = None
        self.distance = None
        self.segment_point = None
        self.closest_point = None
        self.line_projections = None
        self.intersection = None
        self.normal_projections = None
        self.reflection = None


def compose_overlays(featured, bounds):
    """ Computes the FrameOverlays for the featured entities on a surface of the given bounds. """
    o = FrameOverlays()
    point, line, arrow = featured.point, featured.line, featured.arrow

    # --- 1. Point to line distance ---
    if point is not None and line is not None:
        o.source = as_vec(point)
        o.distance, o.segment_point = shortest_distance_to_line(line.p1, line.p2, point)
        o.closest_point = closest_pt(point, line)

    if arrow is None or line is None:
        return o

    # --- 2. Arrow projected onto the line ---
    cp1 = closest_pt(arrow.p1, line)
    cp2 = closest_pt(arrow.p2, line)
    o.line_projections = (cp1, cp2)

    # --- 3. Arrow projected onto the normal through the intersection ---
    inter = intersect(arrow, line)
    normal = line.normal
    if inter is None or normal is None or not visible(inter, bounds):
        return o

    o.intersection = inter
    inter_n = add(inter, normal)
    cn1 = closest_point_on_line(arrow.p1, inter, inter_n)
    cn2 = closest_point_on_line(arrow.p2, inter, inter_n)
    o.normal_projections = (cn1, cn2)

    # --- 4. Reflection ---
    para_vec = vector(cp2, cp1)
    norm_vec = vector(cn1, cn2)  # reversed
    o.reflection = add(para_vec, norm_vec)
    return o


def draw_overlays(sink, o):
    bounds = sink.bounds

    if o.closest_point is not None:
        cp = o.closest_point

        sink.begin_path()
        sink.set_line_dash(DISTANCE_DASH)
        sink.stroke_style = DISTANCE_LINE_COLOR
        sink.move_to(o.source[0], o.source[1])
        sink.line_to(cp[0], cp[1])
        sink.stroke()
        sink.set_line_dash([])
        sink.close_path()

        sink.fill_style = TEXT_COLOR
        sink.fill_text(f"Distance: {o.distance:.2f}", cp[0] + 20, cp[1] + 20)
        sink.fill_text(f"Closest Point: ({cp[0]:.2f}, {cp[1]:.2f})", cp[0] + 20, cp[1] + 40)

        circle(sink, cp[0], cp[1], MARKER_RADIUS, CLOSEST_POINT_COLOR)

    if o.line_projections is not None:
        for p in o.line_projections:
            if visible(p, bounds):
                circle(sink, p[0], p[1], MARKER_RADIUS, LINE_PROJECTION_COLOR)

    if o.normal_projections is not None:
        for p in o.normal_projections:
            if visible(p, bounds):
                circle(sink, p[0], p[1], MARKER_RADIUS, NORMAL_PROJECTION_COLOR)

    if o.reflection is not None:
        draw_vector(sink, o.intersection, o.reflection)


class Scene:
    def __init__(self, sink, mouse=None, featured=None):
        self.sink = sink
        self.mouse = mouse if mouse is not None else InputCoordinator()
        self.mouse.on_redraw = self.redraw
        self.featured = featured if featured is not None else Featured()
        self.drawables = []
        self.frame = None

    # --- Registry ---

    def add(self, drawable):
        """ Appends a drawable. Paint order is registration order. """
        if not isinstance(drawable, Drawable):
            raise TypeError(f"{type(drawable).__name__} does not implement Drawable.")
        self.drawables.append(drawable)
        return drawable

    def add_point(self, x, y, radius=POINT_RADIUS, color=POINT_COLOR):
        return self.add(Point(self.mouse, x, y, radius, color))

    def add_line(self, p1, p2):
        return self.add(Line(self.mouse, p1, p2))

    def add_arrow(self, x1, y1, x2, y2):
        return self.add(Arrow(self.mouse, x1, y1, x2, y2))

    def add_intersection(self, first, second):
        return self.add(IntersectionOverlay(first, second))

    def feature(self, point=None, line=None, arrow=None):
        ''' Replaces the featured entities used for the frame overlays. '''
        self.featured = Featured(point, line, arrow)

    # --- Rendering ---

    def redraw(self):
        sink = self.sink
        sink.clear()

        sink.fill_style = TEXT_COLOR
        status = "Selected" if self.mouse.selected is not None else "No point selected"
        sink.fill_text(status, *STATUS_TEXT_POS)

        self.frame = compose_overlays(self.featured, sink.bounds)
        draw_overlays(sink, self.frame)

        for drawable in self.drawables:
            drawable.draw(sink)

        sink.present()
