"""
Path commands, as produced by the TextPathIterator.

All coordinates are floats in caller space: the font's em-square is scaled
to unit size and the y-axis points down.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


class PathCommand:
    """Base class for the path commands."""

    __slots__ = ()

    svg_letter = ""

    @property
    def points(self):
        """A tuple with the points of this command, in drawing order."""
        return ()


@dataclass(frozen=True)
class MoveTo(PathCommand):
    """Start a new contour at ``point``."""

    point: Point
    svg_letter = "M"

    @property
    def points(self):
        return (self.point,)


@dataclass(frozen=True)
class LineTo(PathCommand):
    """Straight line to ``point``."""

    point: Point
    svg_letter = "L"

    @property
    def points(self):
        return (self.point,)


@dataclass(frozen=True)
class QuadTo(PathCommand):
    """Quadratic Bezier curve via ``control`` to ``point``."""

    control: Point
    point: Point
    svg_letter = "Q"

    @property
    def points(self):
        return (self.control, self.point)


@dataclass(frozen=True)
class CurveTo(PathCommand):
    """Cubic Bezier curve via ``control1`` and ``control2`` to ``point``."""

    control1: Point
    control2: Point
    point: Point
    svg_letter = "C"

    @property
    def points(self):
        return (self.control1, self.control2, self.point)


@dataclass(frozen=True)
class ClosePath(PathCommand):
    """Close the current contour."""

    svg_letter = "Z"


def to_svg_path(commands, precision=6):
    """Get the SVG path data (the "d" attribute) for a sequence of commands.

    Parameters:
        commands (iterable): the PathCommand objects, e.g. a TextPathIterator.
        precision (int): the number of significant digits per coordinate.
    """
    parts = []
    for command in commands:
        parts.append(command.svg_letter)
        for point in command.points:
            parts.append(f"{point.x:.{precision}g},{point.y:.{precision}g}")
    return " ".join(parts)


def get_control_box(commands):
    """Get the box (left, top, right, bottom) that contains all points.

    Control points are included, so the box can be a bit larger than the
    exact bounds of the curves. Returns None if there are no points.
    """
    left = top = float("inf")
    right = bottom = -float("inf")
    for command in commands:
        for x, y in command.points:
            left = min(left, x)
            right = max(right, x)
            top = min(top, y)
            bottom = max(bottom, y)
    if left > right:
        return None
    return left, top, right, bottom
