import math
import numpy as np

from snapcore.config import (
    POINT_RADIUS, POINT_COLOR, SELECTED_COLOR, OUTLINE_COLOR,
    POINT_OUTLINE_WIDTH, MARKER_OUTLINE_WIDTH, LINE_WIDTH,
    NORMAL_RAY_LENGTH, LINE_NORMAL_DASH, ARROW_HIT_RADIUS,
    ARROW_HEAD_LENGTH, ARROW_HEAD_ANGLE, ARROW_LINE_WIDTH,
)
from .base import Drawable, Interactive
from .geometry import unit_normal
from .vector import as_vec, add, scale, dist, near


class Point(Drawable, Interactive):
    ''' A draggable disc on the drawing surface.

    Points are the handles the user grabs. They register with the
    InputCoordinator they are given as soon as they are created and stay
    registered until remove() is called. Selection is exclusive across the
    whole coordinator: a point can only become selected when nothing else
    currently holds the selection.

    Attributes:
        mouse (InputCoordinator): The coordinator this point receives events from.
        x (float): Screen X-coordinate
        y (float): Screen Y-coordinate
        radius (float): Hit-test and drawing radius
        color (str): Fill colour when not selected
        is_dragging (bool): True while following the cursor
        is_selected (bool): True while holding the coordinator's selection
    '''

    def __init__(self, mouse, x, y, radius=POINT_RADIUS, color=POINT_COLOR):
        if radius <= 0:
            raise ValueError(f"Point radius must be positive (got {radius}).")

        self.mouse = mouse
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)
        self.color = color
        self.is_dragging = False
        self.is_selected = False
        mouse.register(self)

    def to_array(self):
        ''' Returns the coordinates as a numpy array for calculation. '''
        return np.array([self.x, self.y], dtype=np.float64)

    def update_from_array(self, arr):
        self.x = float(arr[0])
        self.y = float(arr[1])

    def drag(self, cursor):
        if self.is_dragging:
            self.update_from_array(cursor)
            self.mouse.request_redraw()

    def select(self, cursor):
        if self.mouse.selected is not None:
            return
        if dist(self, cursor) <= self.radius:
            self.is_selected = True
            self.is_dragging = True
            self.mouse.claim(self)
        elif self.is_selected:
            # Pressed elsewhere: lose a stale selection.
            self.is_selected = False
            self.is_dragging = False

    def unselect(self):
        self.is_selected = False
        self.is_dragging = False
        if self.mouse.release(self):
            self.mouse.request_redraw()

    def remove(self):
        ''' Stops receiving pointer events. '''
        self.mouse.release(self)
        self.mouse.unregister(self)

    def draw(self, sink):
        sink.save()
        sink.fill_style = SELECTED_COLOR if self.is_selected else self.color
        sink.begin_path()
        sink.arc(self.x, self.y, self.radius, 0, 2 * math.pi)
        sink.fill()
        sink.stroke_style = OUTLINE_COLOR
        sink.line_width = POINT_OUTLINE_WIDTH
        sink.stroke()
        sink.close_path()
        sink.restore()

    def __repr__(self):
        return f'Point(x = {self.x:10.4f}, y = {self.y:10.4f}, r = {self.radius:g})'


class Line(Drawable):
    ''' A segment between two draggable Points.

    The Line owns its end Points: they are created from the given
    coordinates (never shared with the caller) and registered with the
    coordinator. The Line itself is not interactive.

    Properties:
        length (float): Euclidean length.
        midpoint (np.ndarray): (x, y) midpoint.
        slope (float): dy/dx, +/-inf when vertical, None when degenerate.
        normal (np.ndarray): Unit normal (-dy, dx)/|d|, None when degenerate.
    '''

    def __init__(self, mouse, p1, p2):
        a, b = as_vec(p1), as_vec(p2)
        self.p1 = Point(mouse, a[0], a[1])
        self.p2 = Point(mouse, b[0], b[1])

    @property
    def vector(self):
        ''' Returns the vector (p2 - p1). '''
        return self.p2.to_array() - self.p1.to_array()

    @property
    def length(self):
        d = self.vector
        return float(np.hypot(d[0], d[1]))

    @property
    def midpoint(self):
        return 0.5 * (self.p1.to_array() + self.p2.to_array())

    @property
    def slope(self):
        dx, dy = self.vector
        if dx == 0:
            if dy == 0:
                return None
            return math.copysign(math.inf, dy)
        return float(dy / dx)

    @property
    def normal(self):
        return unit_normal(self.p1, self.p2)

    def remove(self):
        ''' Unregisters both end points from the coordinator. '''
        self.p1.remove()
        self.p2.remove()

    def draw(self, sink):
        sink.stroke_style = OUTLINE_COLOR
        sink.line_width = LINE_WIDTH
        sink.begin_path()
        sink.move_to(self.p1.x, self.p1.y)
        sink.line_to(self.p2.x, self.p2.y)
        sink.stroke()
        sink.close_path()
        self.p1.draw(sink)
        self.p2.draw(sink)
        self.draw_normal(sink)

    def draw_normal(self, sink):
        ''' Short dotted ray along the normal, starting at the midpoint. '''
        normal = self.normal
        if normal is None:
            return

        mid = self.midpoint
        end = add(mid, scale(normal, NORMAL_RAY_LENGTH))

        sink.stroke_style = OUTLINE_COLOR
        sink.line_width = 2
        sink.set_line_dash(LINE_NORMAL_DASH)
        sink.begin_path()
        sink.move_to(mid[0], mid[1])
        sink.line_to(end[0], end[1])
        sink.stroke()
        sink.set_line_dash([])
        sink.close_path()

    def __repr__(self):
        return (f'Line(({self.p1.x:.2f}, {self.p1.y:.2f}) -> '
                f'({self.p2.x:.2f}, {self.p2.y:.2f}), len = {self.length:.3f})')


class Arrow(Drawable, Interactive):
    ''' An arrow whose two free endpoints can be dragged.

    The endpoints are plain numpy arrays rather than Points. Whichever
    endpoint is grabbed becomes `drag_point` (an alias of p1 or p2, updated
    in place). The head is drawn at p1, so the arrow points from p2 to p1.
    '''

    def __init__(self, mouse, x1, y1, x2, y2):
        self.mouse = mouse
        self.p1 = np.array([x1, y1], dtype=np.float64)
        self.p2 = np.array([x2, y2], dtype=np.float64)
        self.drag_point = None
        self.is_dragging = False
        mouse.register(self)

    @property
    def is_selected(self):
        return self.drag_point is not None

    @property
    def length(self):
        return dist(self.p1, self.p2)

    def drag(self, cursor):
        if self.is_dragging:
            self.drag_point[:] = as_vec(cursor)
            self.mouse.request_redraw()

    def select(self, cursor):
        if self.mouse.selected is not None:
            return

        # p1 wins when both endpoints are in range
        for endpoint in (self.p1, self.p2):
            if near(endpoint, cursor, ARROW_HIT_RADIUS):
                self.is_dragging = True
                self.drag_point = endpoint
                self.mouse.claim(self)
                self.mouse.request_redraw()
                return

    def unselect(self):
        self.is_dragging = False
        self.drag_point = None
        if self.mouse.release(self):
            self.mouse.request_redraw()

    def remove(self):
        self.mouse.release(self)
        self.mouse.unregister(self)

    def draw(self, sink):
        draw_arrow(sink, self.p1[0], self.p1[1], self.p2[0], self.p2[1])

    def __repr__(self):
        return (f'Arrow(({self.p1[0]:.2f}, {self.p1[1]:.2f}) <- '
                f'({self.p2[0]:.2f}, {self.p2[1]:.2f}))')


# --- Shared drawing routines ---

def arrow_head(x1, y1, x2, y2):
    """
    Returns the two wing points of an arrowhead whose tip is (x1, y1) and
    whose shaft runs towards (x2, y2).
    """
    angle = math.atan2(y2 - y1, x2 - x1)

    w1 = (x1 + ARROW_HEAD_LENGTH * math.cos(angle + ARROW_HEAD_ANGLE),
          y1 + ARROW_HEAD_LENGTH * math.sin(angle + ARROW_HEAD_ANGLE))
    w2 = (x1 + ARROW_HEAD_LENGTH * math.cos(angle - ARROW_HEAD_ANGLE),
          y1 + ARROW_HEAD_LENGTH * math.sin(angle - ARROW_HEAD_ANGLE))
    return w1, w2


def draw_arrow(sink, x1, y1, x2, y2):
    """ Draws a shaft from (x2, y2) to (x1, y1) with a filled head at (x1, y1). """
    sink.line_width = ARROW_LINE_WIDTH
    sink.stroke_style = OUTLINE_COLOR
    sink.line_join = 'miter'
    sink.fill_style = OUTLINE_COLOR
    sink.line_cap = 'round'

    (ax1, ay1), (ax2, ay2) = arrow_head(x1, y1, x2, y2)

    # 1. Shaft
    sink.begin_path()
    sink.move_to(x2, y2)
    sink.line_to(x1, y1)
    sink.stroke()

    # 2. Head
    sink.begin_path()
    sink.move_to(ax1, ay1)
    sink.line_to(x1, y1)
    sink.line_to(ax2, ay2)
    sink.close_path()
    sink.fill()
    sink.stroke()


def draw_vector(sink, p, v):
    ''' Draws v as an arrow rooted at p (head at p + v). '''
    tip = add(p, v)
    root = as_vec(p)
    draw_arrow(sink, tip[0], tip[1], root[0], root[1])


def circle(sink, x, y, r, color=POINT_COLOR):
    ''' Filled disc with a black outline. '''
    sink.fill_style = color
    sink.begin_path()
    sink.arc(x, y, r, 0, 2 * math.pi)
    sink.fill()
    sink.stroke_style = OUTLINE_COLOR
    sink.line_width = MARKER_OUTLINE_WIDTH
    sink.stroke()
    sink.close_path()
