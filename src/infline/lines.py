"""
lines.py
--------

Public entry points: draw infinite, horizontal and vertical lines that stay
clipped to the visible axes rectangle as the view is panned or zoomed.

Example:
    >>> fig, ax = plt.subplots()
    >>> ax.plot([0, 10], [0, 5], "o")
    >>> draw_horizontal_line(2.5, "r--")
    >>> draw_vertical_line(4)
    >>> draw_infinite_line(0.5, 0, 0, ax=ax, linewidth=2)

The lines are added without data, so they do not widen the axes data limits,
and are hidden from legends.
"""

from __future__ import annotations

__all__ = ["draw_infinite_line", "draw_horizontal_line", "draw_vertical_line"]

import math
import logging
from typing import Any, Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from .geometry import LineEquation
from .host import AxesHost, InfiniteLine2D
from .style import resolve_style
from .tracker import LineTracker

logger = logging.getLogger(__name__)


def draw_infinite_line(slope: float, bx: float, by: float,
                       fmt: Optional[str] = None, *,
                       ax: Optional[Axes] = None,
                       **kwargs: Any) -> InfiniteLine2D:
    """
    Draw the line ``(y - by) = slope * (x - bx)`` across the current view.

    Args:
        slope: Line slope; ``math.inf`` for a vertical line.
        bx, by: A point on the line.
        fmt: Optional Matplotlib format string, e.g. "r--".
        ax: Target Axes. Defaults to `plt.gca()`.
        **kwargs: `Line2D` properties.

    Returns:
        InfiniteLine2D: The displayed line. Its `tracker` attribute holds the
        `LineTracker` keeping it clipped; `line.remove()` disconnects it.

    Raises:
        InvalidArgumentError: Invalid line parameters, Axes, or style. No line
            is created in that case.
    """
    equation = LineEquation(slope, bx, by)
    style = resolve_style(fmt, **kwargs)
    # gca() creates a figure when none is open; only reach it with valid input.
    host = AxesHost(plt.gca() if ax is None else ax)

    # Start empty so adding the line leaves the axes data limits alone.
    line = host.create_line([], [], **style)
    host.exclude_from_legend(line)
    line.tracker = LineTracker(equation, line, host)
    logger.debug(f"Drew infinite line {equation} on {host.ax!r}")
    return line


def draw_horizontal_line(y: float = 0.0, fmt: Optional[str] = None, *,
                         ax: Optional[Axes] = None, **kwargs: Any) -> InfiniteLine2D:
    """Draw the horizontal line ``y = y``; see `draw_infinite_line`."""
    return draw_infinite_line(0.0, 0.0, y, fmt, ax=ax, **kwargs)


def draw_vertical_line(x: float = 0.0, fmt: Optional[str] = None, *,
                       ax: Optional[Axes] = None, **kwargs: Any) -> InfiniteLine2D:
    """Draw the vertical line ``x = x``; see `draw_infinite_line`."""
    return draw_infinite_line(math.inf, x, 0.0, fmt, ax=ax, **kwargs)
