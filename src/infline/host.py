"""
host.py
-------

Thin adapter between the line tracker and a Matplotlib Axes.

Responsibilities:
  - Report the current view rectangle (x/y limits)
  - Subscribe/unsubscribe to limit-change notifications
  - Create lines, update their data, and notify when a line is removed
  - Keep tracked lines out of legends
"""

from __future__ import annotations

__all__ = ["InfiniteLine2D", "AxesHost", "BOUNDS_SIGNALS"]

import logging
from typing import Any, Callable, List, Sequence, Tuple

from matplotlib.axes import Axes
from matplotlib.lines import Line2D

from .config import DEFAULTS
from .errors import InvalidArgumentError
from .geometry import Rectangle

logger = logging.getLogger(__name__)

# Axes callback signals fired whenever the view rectangle changes.
BOUNDS_SIGNALS = ("xlim_changed", "ylim_changed")

DestroyCallback = Callable[[Line2D], Any]


class InfiniteLine2D(Line2D):
    """
    `Line2D` that notifies registered callbacks when it is removed.

    Attributes:
        tracker: The `LineTracker` keeping this line clipped, if any.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tracker = None
        self._destroy_callbacks: List[DestroyCallback] = []

    def add_destroy_callback(self, func: DestroyCallback) -> DestroyCallback:
        """Call ``func(line)`` once, after the line is removed from its axes."""
        self._destroy_callbacks.append(func)
        return func

    def remove(self) -> None:
        super().remove()
        callbacks, self._destroy_callbacks = self._destroy_callbacks, []
        for func in callbacks:
            func(self)


class AxesHost:
    """
    Expose the operations a `LineTracker` needs from a Matplotlib Axes.

    Args:
        ax: Target Axes.

    Raises:
        InvalidArgumentError: `ax` is not a Matplotlib Axes.
    """

    def __init__(self, ax: Axes):
        if not isinstance(ax, Axes):
            raise InvalidArgumentError(f"Unsupported ax type: {type(ax).__name__}")
        self.ax = ax

    # -------------------------------------------------------------------------
    # View rectangle
    # -------------------------------------------------------------------------
    def get_current_bounds(self) -> Rectangle:
        return Rectangle.from_ranges(self.ax.get_xlim(), self.ax.get_ylim())

    def on_bounds_changed(self, callback: Callable[[Axes], Any]) -> Tuple[int, ...]:
        """
        Call ``callback(ax)`` after every x or y limit change.

        Matplotlib holds bound methods weakly; the caller must keep the
        method's owner alive for the subscription to stay active.

        Returns:
            Token to pass to `unsubscribe`.
        """
        token = tuple(self.ax.callbacks.connect(signal, callback) for signal in BOUNDS_SIGNALS)
        logger.debug(f"Subscribed to {BOUNDS_SIGNALS} on {self.ax!r}: cids={token}")
        return token

    def unsubscribe(self, token: Sequence[int]) -> None:
        for cid in token:
            self.ax.callbacks.disconnect(cid)
        logger.debug(f"Unsubscribed cids={tuple(token)} on {self.ax!r}")

    # -------------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------------
    def create_line(self, xs: Sequence[float], ys: Sequence[float], **style) -> InfiniteLine2D:
        """Create a line with the given data and `Line2D` properties and add it to the axes."""
        line = InfiniteLine2D(xs, ys, **style)
        self.ax.add_line(line)
        return line

    def set_line_data(self, line: Line2D, xs: Sequence[float], ys: Sequence[float]) -> None:
        line.set_data(xs, ys)

    def on_destroyed(self, line: InfiniteLine2D, callback: DestroyCallback) -> None:
        line.add_destroy_callback(callback)

    def exclude_from_legend(self, line: Line2D) -> None:
        """Hide the line from legends while keeping an explicit user label readable."""
        label = line.get_label()
        if not label:
            line.set_label(DEFAULTS.legend_label)
        elif not label.startswith("_"):
            line.set_label(f"_{label}")
