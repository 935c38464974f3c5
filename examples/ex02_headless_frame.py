"""
ex02_headless_frame.py
----------------------
Goal: Drive the demo scene without a window.
Pointer events are fed straight into the coordinator, the frame is
recorded by a RecordingSink, and a final frame is saved as a PNG.
"""
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from snapcore.display import SessionDisplay
from snapview.app import build_demo_scene
from snapview.mouse import InputCoordinator
from snapview.sink import MatplotlibSink, RecordingSink

W, H = 1200, 800

def report(scene):
    o = scene.frame
    print(f"Distance to segment : {o.distance:.2f}")
    print(f"Intersection        : {o.intersection}")
    print(f"Reflection vector   : {o.reflection}")

def run():
    display = SessionDisplay("Headless Frame", f"RecordingSink | {W}x{H}")
    display.header()

    display.section("Initial Frame")
    sink = RecordingSink(W, H)
    scene = build_demo_scene(sink, InputCoordinator(display=display))
    report(scene)

    display.section("Drag Arrow Tail")
    display.setup_stats_columns(["Event", "X", "Y", "Target"])
    m = scene.mouse
    m.pointer_down(600, 200)
    for y in range(200, 320, 20):
        m.pointer_move(600, y)
    m.pointer_up()
    report(scene)
    print(f"Frames recorded: {sink.frames}")

    # --- Same scene state, rendered to an image ---
    fig = plt.figure(figsize=(W / 100, H / 100), dpi=100)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_axis_off()
    scene.sink = MatplotlibSink(ax, W, H)
    scene.redraw()
    fig.savefig("ex02_frame.png")
    display.success("Saved ex02_frame.png")

if __name__ == "__main__":
    run()
