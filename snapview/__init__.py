"""
snapview: Interactive sketch surface.
"""
from .sink import DrawingSink, RecordingSink, MatplotlibSink
from .mouse import InputCoordinator
from .scene import Scene, Featured, FrameOverlays, compose_overlays

__version__ = "0.1.0"
