"""
test_lines.py
-------------
Tests for the public line-drawing entry points in lines.py.
"""

import math

import numpy as np
import pytest
import matplotlib.pyplot as plt

from infline import (
    draw_infinite_line, draw_horizontal_line, draw_vertical_line,
    InfiniteLine2D, LineTracker, InvalidArgumentError,
)


# A. Geometry on the current view

def test_horizontal_line_default_on_current_axes(view_ax):
  plt.sca(view_ax)
  line = draw_horizontal_line()
  assert line.axes is view_ax
  assert np.array_equal(line.get_xdata(), [0.0, 10.0])
  assert np.array_equal(line.get_ydata(), [0.0, 0.0])


def test_vertical_line_default_is_x_zero(fig_ax):
  _, ax = fig_ax
  ax.set_xlim(-1, 1)
  ax.set_ylim(2, 4)
  line = draw_vertical_line(ax=ax)
  assert np.array_equal(line.get_xdata(), [0.0, 0.0])
  assert np.array_equal(line.get_ydata(), [2.0, 4.0])


@pytest.mark.parametrize("xlim, ylim", [
    ((1.776, 10.266), (1.72, 7.92)),
    ((1.3, 3.5), (-4.4, 5.433)),
])
def test_diagonal_through_view_corners(fig_ax, xlim, ylim):
  _, ax = fig_ax
  ax.set_xlim(*xlim)
  ax.set_ylim(*ylim)
  slope = (ylim[1] - ylim[0]) / (xlim[1] - xlim[0])
  line = draw_infinite_line(slope, xlim[1], ylim[1], ax=ax)
  assert np.array_equal(line.get_xdata(), list(xlim))
  assert np.array_equal(line.get_ydata(), list(ylim))


def test_vertical_line_at_value(view_ax):
  line = draw_vertical_line(3, ax=view_ax)
  assert np.array_equal(line.get_xdata(), [3.0, 3.0])
  assert np.array_equal(line.get_ydata(), [-1.0, 1.0])


def test_infinite_line_follows_pan_and_zoom(fig_ax):
  _, ax = fig_ax
  ax.set_xlim(-5, 5)
  ax.set_ylim(-5, 5)
  line = draw_infinite_line(1, 0, 0, ax=ax)
  assert np.array_equal(line.get_xdata(), [-5.0, 5.0])
  assert np.array_equal(line.get_ydata(), [-5.0, 5.0])

  ax.set_xlim(0, 2)           # zoom in on x
  assert np.array_equal(line.get_xdata(), [0.0, 2.0])
  assert np.array_equal(line.get_ydata(), [0.0, 2.0])

  ax.set_ylim(10, 20)         # pan away: nothing visible
  assert line.get_xdata().size == 0


def test_line_outside_view_is_empty(view_ax):
  line = draw_horizontal_line(10, ax=view_ax)
  assert line.get_xdata().size == 0
  assert line.get_ydata().size == 0


def test_returns_tracked_line(view_ax):
  line = draw_infinite_line(-0.1, 0, 0, ax=view_ax)
  assert isinstance(line, InfiniteLine2D)
  assert isinstance(line.tracker, LineTracker)
  assert line.tracker.connected
  assert line in view_ax.lines


def test_remove_disconnects(view_ax):
  line = draw_horizontal_line(0.5, ax=view_ax)
  tracker = line.tracker
  line.remove()
  assert not tracker.connected
  view_ax.set_xlim(2, 3)
  assert np.array_equal(line.get_xdata(), [0.0, 10.0])


# B. Styling

def test_default_style_is_solid_black(view_ax):
  line = draw_horizontal_line(ax=view_ax)
  assert line.get_color() == "k"
  assert line.get_linestyle() == "-"


def test_format_string(view_ax):
  line = draw_horizontal_line(0.2, "r--", ax=view_ax)
  assert line.get_color() == "r"
  assert line.get_linestyle() == "--"


def test_keyword_aliases_and_override(view_ax):
  line = draw_vertical_line(1, "r--", ax=view_ax, c="g", lw=3)
  assert line.get_color() == "g"
  assert line.get_linestyle() == "--"
  assert line.get_linewidth() == 3


# C. Legends and data limits

def test_excluded_from_legend(view_ax):
  view_ax.plot([0, 1], [0, 1], label="data")
  draw_horizontal_line(0.5, ax=view_ax)
  draw_vertical_line(2, ax=view_ax, label="threshold")
  _, labels = view_ax.get_legend_handles_labels()
  assert labels == ["data"]


def test_does_not_change_data_limits(fig_ax):
  _, ax = fig_ax
  ax.plot([0, 2], [0, 3])
  before = tuple(ax.dataLim.bounds)
  draw_infinite_line(1, 0, 0, ax=ax)
  draw_horizontal_line(1, ax=ax)
  assert tuple(ax.dataLim.bounds) == before


# D. Invalid input

@pytest.mark.parametrize("args", [
    (float("nan"), 0, 0),
    (1.0, math.inf, 0),
    ("steep", 0, 0),
])
def test_invalid_line_creates_nothing(view_ax, args):
  before = len(view_ax.lines)
  with pytest.raises(InvalidArgumentError):
    draw_infinite_line(*args, ax=view_ax)
  assert len(view_ax.lines) == before


@pytest.mark.parametrize("kwargs", [
    {"fmt": "q?"},
    {"fmt": 5},
    {"color": "not-a-color"},
])
def test_invalid_style_creates_nothing(view_ax, kwargs):
  before = len(view_ax.lines)
  with pytest.raises(InvalidArgumentError):
    draw_horizontal_line(0.0, ax=view_ax, **kwargs)
  assert len(view_ax.lines) == before


def test_invalid_style_opens_no_figure():
  plt.close("all")
  with pytest.raises(InvalidArgumentError):
    draw_horizontal_line(0.0, "zz")
  assert plt.get_fignums() == []


def test_invalid_axes():
  with pytest.raises(InvalidArgumentError):
    draw_horizontal_line(0.0, ax=[1, 2])


def test_missing_arguments():
  with pytest.raises(TypeError):
    draw_infinite_line(1.0, 2.0)
