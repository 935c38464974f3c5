"""
snapview/sink.py
----------------
Drawing sinks: the surfaces scene entities paint on.

A sink follows the familiar 2D-canvas model: a small style state with a
save/restore stack, a current path built from move_to / line_to / arc, and
fill() / stroke() / fill_text() calls that consume it. Entities only ever
emit these intents; how they become pixels is up to the backend.

    DrawingSink      - path + style bookkeeping, abstract rendering hooks
    RecordingSink    - headless, records every fill/stroke/text (tests)
    MatplotlibSink   - renders onto a matplotlib Axes in screen coordinates
"""
import math
from abc import ABC, abstractmethod

import numpy as np
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from snapcore.config import FONT_SIZE

# Segments used to flatten a full circle
ARC_SEGMENTS = 64

# Screen pixels -> typographic points (matplotlib widths / font sizes)
PX_TO_PT = 72.0 / 96.0


class DrawingSink(ABC):
    """
    Base class for all sinks. Subclasses implement clear(), bounds and the
    three _render hooks; everything else is shared.
    """
    def __init__(self):
        self.fill_style = "black"
        self.stroke_style = "black"
        self.line_width = 1.0
        self.line_cap = "butt"
        self.line_join = "miter"
        self._dash = []
        self._stack = []
        self._subpaths = []

    # --- Surface ---

    @property
    @abstractmethod
    def bounds(self):
        """ (width, height) of the visible surface. """
        pass

    @abstractmethod
    def clear(self):
        """ Wipes everything drawn so far. """
        pass

    def present(self):
        """ Called once at the end of a frame. Backends may flush here. """
        pass

    # --- Style State ---

    def save(self):
        self._stack.append((self.fill_style, self.stroke_style, self.line_width,
                            self.line_cap, self.line_join, list(self._dash)))

    def restore(self):
        if not self._stack:
            return
        (self.fill_style, self.stroke_style, self.line_width,
         self.line_cap, self.line_join, self._dash) = self._stack.pop()

    def set_line_dash(self, segments):
        self._dash = [float(s) for s in segments]

    def get_line_dash(self):
        return list(self._dash)

    def _style(self):
        return {
            "fill": self.fill_style,
            "stroke": self.stroke_style,
            "width": float(self.line_width),
            "cap": self.line_cap,
            "join": self.line_join,
            "dash": list(self._dash),
        }

    # --- Path Construction ---

    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append({"points": [(float(x), float(y))], "closed": False})

    def line_to(self, x, y):
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1]["points"].append((float(x), float(y)))

    def arc(self, x, y, r, start, end):
        """ Appends a clockwise-in-screen (increasing angle) arc to the current subpath. """
        sweep = end - start
        n = max(2, int(math.ceil(ARC_SEGMENTS * abs(sweep) / (2 * math.pi))) + 1)
        theta = np.linspace(start, end, n)
        pts = [(float(x + r * np.cos(t)), float(y + r * np.sin(t))) for t in theta]

        if self._subpaths and not self._subpaths[-1]["closed"]:
            self._subpaths[-1]["points"].extend(pts)
        else:
            self._subpaths.append({"points": pts, "closed": False})

    def close_path(self):
        if not self._subpaths:
            return
        current = self._subpaths[-1]
        current["closed"] = True
        # A new subpath starts where the closed one began
        self._subpaths.append({"points": [current["points"][0]], "closed": False})

    def _drawable_subpaths(self, minimum):
        return [(list(sp["points"]), sp["closed"]) for sp in self._subpaths
                if len(sp["points"]) >= minimum]

    # --- Painting ---

    def fill(self):
        subpaths = self._drawable_subpaths(3)
        if subpaths:
            self._render_fill(subpaths, self._style())

    def stroke(self):
        subpaths = self._drawable_subpaths(2)
        if subpaths:
            self._render_stroke(subpaths, self._style())

    def fill_text(self, text, x, y):
        self._render_text(str(text), float(x), float(y), self._style())

    @abstractmethod
    def _render_fill(self, subpaths, style):
        pass

    @abstractmethod
    def _render_stroke(self, subpaths, style):
        pass

    @abstractmethod
    def _render_text(self, text, x, y, style):
        pass


class RecordingSink(DrawingSink):
    """
    Headless sink. Every painted primitive is appended to `ops` as a dict:

        {'op': 'fill',   'subpaths': [...], 'style': {...}, 'arcs': [...]}
        {'op': 'stroke', 'subpaths': [...], 'style': {...}, 'arcs': [...]}
        {'op': 'text',   'text': str, 'x': float, 'y': float, 'style': {...}}
        {'op': 'clear'} / {'op': 'present'}

    `arcs` lists the (x, y, r) circles that went into the path, which makes
    discs easy to find again.
    """
    def __init__(self, width=800, height=600):
        super().__init__()
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive (got {width}x{height}).")
        self.width = width
        self.height = height
        self.ops = []
        self.frames = 0
        self._arcs = []

    @property
    def bounds(self):
        return (self.width, self.height)

    def resize(self, width, height):
        self.width = width
        self.height = height

    def clear(self):
        self.ops.append({"op": "clear"})

    def present(self):
        self.frames += 1
        self.ops.append({"op": "present"})

    def begin_path(self):
        super().begin_path()
        self._arcs = []

    def arc(self, x, y, r, start, end):
        super().arc(x, y, r, start, end)
        self._arcs.append((float(x), float(y), float(r)))

    def _render_fill(self, subpaths, style):
        self.ops.append({"op": "fill", "subpaths": subpaths, "style": style,
                         "arcs": list(self._arcs)})

    def _render_stroke(self, subpaths, style):
        self.ops.append({"op": "stroke", "subpaths": subpaths, "style": style,
                         "arcs": list(self._arcs)})

    def _render_text(self, text, x, y, style):
        self.ops.append({"op": "text", "text": text, "x": x, "y": y, "style": style})

    # --- Queries ---

    def last_frame(self):
        ''' Ops recorded since the most recent clear(). '''
        for i in range(len(self.ops) - 1, -1, -1):
            if self.ops[i]["op"] == "clear":
                return self.ops[i + 1:]
        return list(self.ops)

    def texts(self):
        return [op["text"] for op in self.last_frame() if op["op"] == "text"]

    def discs(self, color=None):
        ''' (x, y, r) of every filled circle in the last frame, optionally by colour. '''
        found = []
        for op in self.last_frame():
            if op["op"] != "fill":
                continue
            if color is not None and op["style"]["fill"] != color:
                continue
            found.extend(op["arcs"])
        return found

    def strokes(self, color=None):
        return [op for op in self.last_frame()
                if op["op"] == "stroke" and (color is None or op["style"]["stroke"] == color)]


class MatplotlibSink(DrawingSink):
    """
    Paints onto a matplotlib Axes. The axes limits are pinned to the surface
    size with the y-axis inverted, so screen coordinates (origin top-left)
    are used as data coordinates unchanged.

    Artists get increasing z-orders so later calls paint over earlier ones
    regardless of artist type.
    """
    CAPS = {"butt": "butt", "round": "round", "square": "projecting"}
    JOINS = {"miter": "miter", "round": "round", "bevel": "bevel"}

    def __init__(self, ax, width, height):
        super().__init__()
        self.ax = ax
        self._artists = []
        self._z = 0
        self.resize(width, height)

    @property
    def bounds(self):
        return (self.width, self.height)

    def resize(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive (got {width}x{height}).")
        self.width = width
        self.height = height
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)

    def clear(self):
        for artist in self._artists:
            artist.remove()
        self._artists = []
        self._z = 0

    def present(self):
        self.ax.figure.canvas.draw_idle()

    def _add(self, artist):
        self._z += 1
        artist.set_zorder(self._z)
        self._artists.append(artist)
        return artist

    def _linestyle(self, style):
        if not style["dash"] or not any(style["dash"]):
            return "solid"
        # matplotlib scales dashes by line width; canvas dashes are absolute
        w = max(style["width"], 1e-6)
        return (0, tuple(d / w for d in style["dash"]))

    def _render_fill(self, subpaths, style):
        for points, _closed in subpaths:
            patch = Polygon(np.array(points), closed=True,
                            facecolor=style["fill"], edgecolor="none")
            self.ax.add_patch(self._add(patch))

    def _render_stroke(self, subpaths, style):
        for points, closed in subpaths:
            pts = np.array(points)
            if closed:
                pts = np.vstack([pts, pts[:1]])
            line = Line2D(pts[:, 0], pts[:, 1],
                          color=style["stroke"],
                          linewidth=style["width"] * PX_TO_PT,
                          linestyle=self._linestyle(style),
                          solid_capstyle=self.CAPS.get(style["cap"], "butt"),
                          dash_capstyle=self.CAPS.get(style["cap"], "butt"),
                          solid_joinstyle=self.JOINS.get(style["join"], "miter"))
            self.ax.add_line(self._add(line))

    def _render_text(self, text, x, y, style):
        artist = self.ax.text(x, y, text, color=style["fill"],
                              fontsize=FONT_SIZE * PX_TO_PT,
                              ha="left", va="baseline")
        self._add(artist)
