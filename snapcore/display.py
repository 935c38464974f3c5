"""
snapcore/display.py
-------------------
Standardized console output for interactive sketch sessions.
Provides a header, section breaks and a fixed-width event log.
"""
import time
import numpy as np

class SessionDisplay:
    def __init__(self, title, context_info, stream=None):
        """
        Initialize the display manager.

        Args:
            title (str): Name of the session (e.g. "Reflection Demo")
            context_info (str): Backend / surface info (e.g. "TkAgg | 1200x800")
            stream (file, optional): Where to write. Defaults to stdout.
        """
        self.title = title
        self.context = context_info
        self.stream = stream
        self.start_time = time.time()
        self._col_widths = []
        self._headers = []

    def _print(self, *args, **kwargs):
        print(*args, file=self.stream, **kwargs)

    def header(self):
        """Prints the Minimalist Header."""
        width = 70
        self._print("-" * width)
        self._print(f"snapsketch :: {self.title}")
        self._print(f"Surface    :: {self.context}")
        self._print("-" * width + "\n")

    def section(self, name):
        """Prints a visual break for a new phase (e.g., 'Scene Setup')."""
        self._print(f"--- {name} ---")

    def setup_stats_columns(self, headers, widths=None):
        """
        Defines the columns for the event log.

        Args:
            headers (list of str): Column names, e.g. ["Event", "X", "Y"]
            widths (list of int, optional): Width of each column. Defaults to 12.
        """
        self._headers = headers
        if widths is None:
            self._col_widths = [12] * len(headers)
        else:
            self._col_widths = widths

        self._print("")
        header_str = "  ".join([h.rjust(w) for h, w in zip(self._headers, self._col_widths)])
        self._print(header_str)
        self._print("-" * len(header_str))

    def log_stats(self, *args):
        """
        Logs a row of data matching the columns defined in setup_stats_columns.
        Floats are printed with two decimals, None as '-'.
        """
        if len(args) != len(self._col_widths):
            self._print(f" [Display Error] Expected {len(self._col_widths)} args, got {len(args)}: {args}")
            return

        row_str = []
        for val, width in zip(args, self._col_widths):
            if val is None:
                s = "-".rjust(width)
            elif isinstance(val, (bool, np.bool_)):
                s = str(bool(val)).rjust(width)
            elif isinstance(val, (int, np.integer)):
                s = f"{int(val):d}".rjust(width)
            elif isinstance(val, (float, np.floating)):
                s = f"{float(val):.2f}".rjust(width)
            else:
                s = str(val).rjust(width)
            row_str.append(s)

        self._print("  ".join(row_str))

    def success(self, message="Session Closed"):
        """Prints the footer with elapsed time."""
        elapsed = time.time() - self.start_time
        self._print(f"\n>> {message} ({elapsed:.2f}s)\n")

    def error(self, message):
        """Prints a critical error message."""
        self._print(f"\n!! CRITICAL ERROR: {message} !!\n")

# -- Convenience Alias --
Display = SessionDisplay
