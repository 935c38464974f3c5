"""Unit tests for the console SessionDisplay."""

import io

import numpy as np

from snapcore.display import SessionDisplay


def _display():
    out = io.StringIO()
    return SessionDisplay("Demo", "Agg | 800x600", stream=out), out


def test_header():
    display, out = _display()
    display.header()
    text = out.getvalue()
    assert "snapsketch :: Demo" in text
    assert "Agg | 800x600" in text


def test_row_formatting():
    display, out = _display()
    display.setup_stats_columns(["Event", "X", "Y", "Target"], widths=[8, 8, 8, 8])
    display.log_stats("select", np.float64(1.5), None, "Point")
    row = out.getvalue().splitlines()[-1]
    assert row.split() == ["select", "1.50", "-", "Point"]


def test_wrong_column_count():
    display, out = _display()
    display.setup_stats_columns(["A", "B"])
    display.log_stats(1)
    assert "[Display Error]" in out.getvalue()


def test_error_banner():
    display, out = _display()
    display.error("boom")
    assert "!! CRITICAL ERROR: boom !!" in out.getvalue()
