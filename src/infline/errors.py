"""
errors.py
---------

Exception types raised by infline.
"""

__all__ = ["InflineError", "InvalidArgumentError", "GeometryInvariantViolation"]


class InflineError(Exception):
    """Base class for all infline errors."""


class InvalidArgumentError(InflineError, TypeError, ValueError):
    """
    Bad input to a line-drawing entry point.

    Raised before any line is created, so a failed call leaves the axes
    untouched.
    """


class GeometryInvariantViolation(InflineError, RuntimeError):
    """
    The line/rectangle solver reached a state a well-posed input cannot produce.

    A straight line crosses the boundary of a convex rectangle at zero or two
    distinct points; anything else means malformed input or a logic defect.
    """
