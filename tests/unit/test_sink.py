"""Unit tests for the drawing sinks (path model, recording, matplotlib backend)."""

import math

import numpy as np
import pytest
from matplotlib.figure import Figure

from snapgeom.primitives import circle
from snapview.sink import MatplotlibSink, RecordingSink


class TestPathModel:

    def test_stroke_records_subpath(self, sink):
        sink.begin_path()
        sink.move_to(0, 0)
        sink.line_to(10, 5)
        sink.stroke()
        assert sink.ops[-1]["subpaths"] == [([(0.0, 0.0), (10.0, 5.0)], False)]

    def test_line_to_without_move_starts_subpath(self, sink):
        sink.begin_path()
        sink.line_to(1, 1)
        sink.line_to(2, 2)
        sink.stroke()
        assert sink.ops[-1]["subpaths"][0][0] == [(1.0, 1.0), (2.0, 2.0)]

    def test_fill_needs_an_area(self, sink):
        sink.begin_path()
        sink.move_to(0, 0)
        sink.line_to(10, 0)
        sink.fill()
        assert sink.ops == []

    def test_close_path(self, sink):
        sink.begin_path()
        sink.move_to(0, 0)
        sink.line_to(10, 0)
        sink.line_to(10, 10)
        sink.close_path()
        sink.fill()
        assert sink.ops[-1]["subpaths"] == [([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)], True)]

    def test_begin_path_resets(self, sink):
        sink.begin_path()
        sink.move_to(0, 0)
        sink.line_to(10, 0)
        sink.begin_path()
        sink.stroke()
        assert sink.ops == []

    def test_full_arc_is_closed_ring(self, sink):
        sink.begin_path()
        sink.arc(50, 50, 10, 0, 2 * math.pi)
        sink.fill()
        pts = np.array(sink.ops[-1]["subpaths"][0][0])
        np.testing.assert_allclose(np.hypot(pts[:, 0] - 50, pts[:, 1] - 50), 10.0)
        np.testing.assert_allclose(pts[0], pts[-1], atol=1e-9)
        assert sink.ops[-1]["arcs"] == [(50.0, 50.0, 10.0)]


class TestStyleState:

    def test_save_restore(self, sink):
        sink.fill_style = "red"
        sink.line_width = 4
        sink.set_line_dash([2, 2])
        sink.save()
        sink.fill_style = "blue"
        sink.line_width = 9
        sink.set_line_dash([])
        sink.restore()
        assert sink.fill_style == "red"
        assert sink.line_width == 4
        assert sink.get_line_dash() == [2.0, 2.0]

    def test_restore_on_empty_stack(self, sink):
        sink.fill_style = "red"
        sink.restore()
        assert sink.fill_style == "red"

    def test_style_snapshot_per_op(self, sink):
        sink.stroke_style = "blue"
        sink.set_line_dash([5, 5])
        sink.begin_path()
        sink.move_to(0, 0)
        sink.line_to(1, 1)
        sink.stroke()
        sink.set_line_dash([])
        style = sink.ops[-1]["style"]
        assert style["stroke"] == "blue"
        assert style["dash"] == [5.0, 5.0]


class TestRecordingSink:

    def test_rejects_empty_surface(self):
        with pytest.raises(ValueError):
            RecordingSink(0, 100)

    def test_last_frame(self, sink):
        sink.fill_text("old", 0, 0)
        sink.clear()
        sink.fill_text("new", 0, 0)
        sink.present()
        assert sink.texts() == ["new"]
        assert sink.frames == 1

    def test_discs_by_colour(self, sink):
        circle(sink, 1, 2, 3, "pink")
        circle(sink, 4, 5, 6, "lime")
        assert sink.discs("lime") == [(4.0, 5.0, 6.0)]
        assert len(sink.discs()) == 2


class TestMatplotlibSink:

    @pytest.fixture
    def mpl_sink(self):
        fig = Figure(figsize=(2, 1), dpi=100)
        ax = fig.add_axes([0, 0, 1, 1])
        return MatplotlibSink(ax, 200, 100)

    def test_screen_coordinates(self, mpl_sink):
        assert mpl_sink.ax.get_xlim() == (0.0, 200.0)
        assert mpl_sink.ax.get_ylim() == (100.0, 0.0)
        assert mpl_sink.bounds == (200, 100)

    def test_artists_paint_in_call_order(self, mpl_sink):
        circle(mpl_sink, 50, 50, 5, "pink")
        mpl_sink.fill_text("label", 10, 20)
        mpl_sink.begin_path()
        mpl_sink.move_to(0, 0)
        mpl_sink.line_to(100, 100)
        mpl_sink.stroke()

        ax = mpl_sink.ax
        assert len(ax.patches) == 1
        assert len(ax.texts) == 1
        assert len(ax.lines) == 2
        z = [a.get_zorder() for a in mpl_sink._artists]
        assert z == sorted(z) and len(set(z)) == len(z)
        mpl_sink.present()

    def test_clear_removes_artists(self, mpl_sink):
        circle(mpl_sink, 50, 50, 5, "pink")
        mpl_sink.fill_text("label", 10, 20)
        mpl_sink.clear()
        ax = mpl_sink.ax
        assert len(ax.patches) == 0 and len(ax.lines) == 0 and len(ax.texts) == 0

    def test_dashed_stroke(self, mpl_sink):
        mpl_sink.line_width = 2
        mpl_sink.set_line_dash([5, 5])
        mpl_sink.begin_path()
        mpl_sink.move_to(0, 0)
        mpl_sink.line_to(10, 0)
        mpl_sink.stroke()
        assert mpl_sink.ax.lines[0].get_linestyle() == "--"

    def test_resize(self, mpl_sink):
        mpl_sink.resize(400, 300)
        assert mpl_sink.ax.get_xlim() == (0.0, 400.0)
        assert mpl_sink.ax.get_ylim() == (300.0, 0.0)
        with pytest.raises(ValueError):
            mpl_sink.resize(-1, 10)
