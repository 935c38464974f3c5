"""
snapview/mouse.py
-----------------
The single dispatcher of pointer events.

The coordinator keeps the ordered list of interactive entities and owns the
selection: at most one entity holds it at a time, and only the coordinator
changes it (entities ask through claim() / release()). Because every
entity's select() checks `selected` first, the first entity in registration
order that matches a press wins and every later one is ignored until the
button is released.
"""
import numpy as np

from snapcore.config import PRIMARY_BUTTON
from snapgeom.base import Interactive


class InputCoordinator:
    def __init__(self, display=None):
        """
        Args:
            display (SessionDisplay, optional): If given, selection changes
                are logged as rows (Event, X, Y, Target).
        """
        self.objects = []
        self.display = display
        self.on_redraw = None
        self._selected = None
        self._primary_down = False
        self._last_cursor = None

    # --- Registry ---

    def register(self, obj):
        if not isinstance(obj, Interactive):
            raise TypeError(f"{type(obj).__name__} does not implement Interactive.")
        self.objects.append(obj)

    def unregister(self, obj):
        """ Removes obj if registered. Unknown objects are ignored. """
        if obj in self.objects:
            self.objects.remove(obj)

    # --- Selection ---

    @property
    def selected(self):
        return self._selected

    def claim(self, obj):
        """ Gives the selection to obj. Returns False if someone else holds it. """
        if self._selected is not None and self._selected is not obj:
            return False
        self._selected = obj
        self._log("select", obj)
        return True

    def release(self, obj):
        """ Drops the selection if obj holds it. Returns True if it did. """
        if self._selected is not obj:
            return False
        self._selected = None
        self._log("release", obj)
        return True

    def request_redraw(self):
        if self.on_redraw is not None:
            self.on_redraw()

    # --- Event Dispatch ---

    def pointer_down(self, x, y, button=PRIMARY_BUTTON):
        if button != PRIMARY_BUTTON:
            return
        self._primary_down = True
        cursor = self._cursor(x, y)
        for obj in list(self.objects):
            obj.select(cursor)

    def pointer_move(self, x, y):
        """ Ignored unless the primary button is held down. """
        if not self._primary_down:
            return
        cursor = self._cursor(x, y)
        for obj in list(self.objects):
            obj.drag(cursor)

    def pointer_up(self, button=PRIMARY_BUTTON):
        if button != PRIMARY_BUTTON:
            return
        self._primary_down = False
        for obj in list(self.objects):
            obj.unselect()

    def _cursor(self, x, y):
        cursor = np.array([x, y], dtype=np.float64)
        self._last_cursor = cursor
        return cursor

    def _log(self, event, obj):
        if self.display is None:
            return
        if self._last_cursor is None:
            x = y = None
        else:
            x, y = self._last_cursor
        self.display.log_stats(event, x, y, type(obj).__name__)
