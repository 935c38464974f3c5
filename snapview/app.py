"""
snapview/app.py
---------------
Bootstrap: builds the demo scene and runs it in a matplotlib window.

    python -m snapview [--width W] [--height H] [--quiet]

Drag the red line handles, the green point or either end of the arrow.
"""
import argparse

import matplotlib
import matplotlib.pyplot as plt

from snapcore.config import (WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE,
                             get_demo_layout)
from snapcore.display import SessionDisplay

from .mouse import InputCoordinator
from .scene import Scene
from .sink import MatplotlibSink

NON_INTERACTIVE_BACKENDS = {"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"}
DPI = 100


def build_demo_scene(sink, mouse=None, layout=None):
    """
    Creates the demo arrangement on the given sink and renders it once:
    a Line, a free Point, an Arrow and the Line/Arrow intersection overlay.
    """
    if layout is None:
        layout = get_demo_layout()

    scene = Scene(sink, mouse)

    (l1, l2) = layout["line"]
    line = scene.add_line(l1, l2)

    (px, py), color = layout["point"]
    point = scene.add_point(px, py, color=color)

    (a1, a2) = layout["arrow"]
    arrow = scene.add_arrow(a1[0], a1[1], a2[0], a2[1])

    scene.add_intersection(line, arrow)
    scene.feature(point=point, line=line, arrow=arrow)

    scene.redraw()
    return scene


class SketchWindow:
    """
    A matplotlib figure whose single axes fills the window and maps one data
    unit to one pixel. Forwards mouse and resize events to the scene.
    """
    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, display=None):
        self.display = display

        self.fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_axis_off()
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)

        self.sink = MatplotlibSink(self.ax, width, height)
        self.mouse = InputCoordinator(display=display)
        self.scene = build_demo_scene(self.sink, self.mouse)

        connect = self.fig.canvas.mpl_connect
        connect("button_press_event", self._on_press)
        connect("motion_notify_event", self._on_motion)
        connect("button_release_event", self._on_release)
        connect("resize_event", self._on_resize)
        connect("close_event", self._on_close)

    def _on_press(self, e):
        if e.inaxes is not self.ax or e.button is None:
            return
        self.mouse.pointer_down(e.xdata, e.ydata, button=int(e.button))

    def _on_motion(self, e):
        if e.inaxes is not self.ax:
            return
        self.mouse.pointer_move(e.xdata, e.ydata)

    def _on_release(self, e):
        if e.button is None:
            return
        self.mouse.pointer_up(button=int(e.button))

    def _on_resize(self, e):
        if e.width <= 0 or e.height <= 0:
            return
        self.sink.resize(e.width, e.height)
        self.scene.redraw()

    def _on_close(self, e):
        if self.display is not None:
            self.display.success()


def _create_argument_parser():
    parser = argparse.ArgumentParser(
        description="Interactive line / intersection / reflection sketch.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH,
                        help="Initial window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT,
                        help="Initial window height in pixels")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not log selection events to the console")
    return parser


def run(width=WINDOW_WIDTH, height=WINDOW_HEIGHT, quiet=False):
    """ Opens the window and blocks until it is closed. Returns an exit code. """
    backend = matplotlib.get_backend()
    display = SessionDisplay("Line / Arrow Reflection", f"{backend} | {width}x{height}")
    display.header()

    if backend.lower() in NON_INTERACTIVE_BACKENDS:
        display.error(f"matplotlib backend '{backend}' is not interactive")
        return 1

    if not quiet:
        display.section("Pointer Events")
        display.setup_stats_columns(["Event", "X", "Y", "Target"])

    SketchWindow(width, height, display=None if quiet else display)
    plt.show()
    return 0


def main(argv=None):
    args = _create_argument_parser().parse_args(argv)
    return run(args.width, args.height, quiet=args.quiet)


if __name__ == "__main__":
    raise SystemExit(main())
