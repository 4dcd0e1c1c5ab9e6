"""
style.py
--------

Resolve the styling arguments accepted by the line-drawing entry points into
`Line2D` keyword arguments.

Accepted input mirrors `Axes.plot`:
  - an optional format string, e.g. "r--", ":", "g", "ko"
  - `Line2D` properties as keywords, aliases included ("c", "ls", "lw")

Anything the caller leaves unset falls back to `config.DEFAULTS`.
"""

from __future__ import annotations

__all__ = ["resolve_style"]

from typing import Any, Dict, Optional

from matplotlib import cbook, colors
# Private parser behind `Axes.plot` format strings. Checked against
# Matplotlib 3.5-3.9: `_process_plot_format(fmt, *, ambiguous_fmt_datakey=False)`
# returning `(linestyle, marker, color)`.
from matplotlib.axes._base import _process_plot_format
from matplotlib.lines import Line2D

from .config import DEFAULTS, LineDefaults
from .errors import InvalidArgumentError


def resolve_style(fmt: Optional[str] = None,
                  defaults: LineDefaults = DEFAULTS,
                  **kwargs: Any) -> Dict[str, Any]:
    """
    Merge a format string, explicit properties and defaults.

    Explicit keywords win over the format string; the format string wins over
    `defaults`.

    Args:
        fmt: Matplotlib format string, or None.
        defaults: Fallback color and linestyle.
        **kwargs: `Line2D` properties.

    Returns:
        dict[str, Any]: Keyword arguments for `Line2D`.

    Raises:
        InvalidArgumentError: `fmt` is not a valid format string, or the
            resolved color is not a Matplotlib color.
    """
    style = cbook.normalize_kwargs(kwargs, Line2D)

    if fmt is not None:
        if not isinstance(fmt, str):
            raise InvalidArgumentError(f"Unsupported fmt type: {type(fmt).__name__}")
        try:
            linestyle, marker, color = _process_plot_format(fmt)
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid format string {fmt!r}: {exc}") from exc
        for key, value in (("linestyle", linestyle), ("marker", marker), ("color", color)):
            if value is not None:
                style.setdefault(key, value)

    style.setdefault("color", defaults.color)
    style.setdefault("linestyle", defaults.linestyle)

    if not colors.is_color_like(style["color"]):
        raise InvalidArgumentError(f"Invalid color: {style['color']!r}")
    return style
