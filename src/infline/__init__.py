from .errors import InflineError, InvalidArgumentError, GeometryInvariantViolation
from .geometry import LineEquation, Rectangle, intersect, segment_xy
from .host import AxesHost, InfiniteLine2D
from .tracker import LineTracker
from .lines import draw_infinite_line, draw_horizontal_line, draw_vertical_line


__all__ = [
    "draw_infinite_line", "draw_horizontal_line", "draw_vertical_line",
    "LineEquation", "Rectangle", "intersect", "segment_xy",
    "AxesHost", "InfiniteLine2D", "LineTracker",
    "InflineError", "InvalidArgumentError", "GeometryInvariantViolation",
]
