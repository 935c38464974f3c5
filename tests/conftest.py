"""Shared pytest fixtures for the snapsketch test suite.

Everything renders into a RecordingSink, so no window or display is needed.
The matplotlib backend is forced to Agg before anything imports pyplot.

Fixtures:
    mouse: A fresh InputCoordinator
    sink: 800x600 RecordingSink
    wide_sink: 1200x800 RecordingSink (same size as the default window)
    scene: Empty Scene bound to `sink`
    demo_scene: The default demo arrangement rendered on `wide_sink`
    redraws: Counter of redraw requests made to `mouse`
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

# Add project root to path for imports when not installed
sys.path.insert(0, str(Path(__file__).parent.parent))

from snapview.mouse import InputCoordinator
from snapview.scene import Scene
from snapview.sink import RecordingSink


@pytest.fixture
def mouse():
    return InputCoordinator()


@pytest.fixture
def sink():
    return RecordingSink(800, 600)


@pytest.fixture
def wide_sink():
    return RecordingSink(1200, 800)


@pytest.fixture
def scene(sink, mouse):
    return Scene(sink, mouse)


@pytest.fixture
def demo_scene(wide_sink):
    from snapview.app import build_demo_scene
    return build_demo_scene(wide_sink)


class RedrawCounter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def redraws(mouse):
    counter = RedrawCounter()
    mouse.on_redraw = counter
    return counter
