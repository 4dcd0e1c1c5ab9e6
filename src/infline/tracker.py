"""
tracker.py
----------

Keeps one displayed line clipped to the current view rectangle.

The tracker solves the line against the axes limits once when created, then
again after every limit change (pan, zoom, autoscale), always from scratch.
Removing the line cancels the limit-change subscription; there is no other
teardown path.
"""

from __future__ import annotations

__all__ = ["LineTracker"]

import logging
from typing import Optional, Tuple

from matplotlib.lines import Line2D

from .geometry import LineEquation, Segment, segment_xy
from .host import AxesHost

logger = logging.getLogger(__name__)


class LineTracker:
    """
    Observer tying a `LineEquation` to a displayed line.

    Args:
        equation: Line to display.
        line: Line created by `host`; its data is overwritten.
        host: Axes adapter providing bounds, notifications and line updates.

    Attributes:
        segment: Segment pushed by the most recent update (None if the line
            is outside the view).
    """

    def __init__(self, equation: LineEquation, line: Line2D, host: AxesHost):
        self.equation = equation
        self.line = line
        self.host = host
        self.segment: Optional[Segment] = None
        self._token: Optional[Tuple[int, ...]] = None

        self.update()
        self._token = host.on_bounds_changed(self._on_bounds_changed)
        host.on_destroyed(line, self._on_line_destroyed)

    @property
    def connected(self) -> bool:
        """True while the tracker follows limit changes."""
        return self._token is not None

    def update(self) -> Optional[Segment]:
        """Recompute the visible segment and push it to the line."""
        rect = self.host.get_current_bounds()
        segment = self.equation.clip(rect)
        xs, ys = segment_xy(segment)
        self.host.set_line_data(self.line, xs, ys)
        self.segment = segment
        logger.debug(f"{self.equation} clipped to {rect}: {segment}")
        return segment

    # -------------------------------------------------------------------------
    # Host callbacks
    # -------------------------------------------------------------------------
    def _on_bounds_changed(self, _ax=None) -> None:
        self.update()

    def _on_line_destroyed(self, _line=None) -> None:
        if self._token is None:
            return
        self.host.unsubscribe(self._token)
        self._token = None
        logger.debug(f"Line for {self.equation} removed; tracker disconnected")

    def __repr__(self) -> str:
        state = "connected" if self.connected else "disconnected"
        return f"<{self.__class__.__name__} {self.equation} {state}>"
