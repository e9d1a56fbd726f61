"""
The transformation from glyph outlines in font space to path commands in
caller space.

Font space has the y-axis pointing up, with the baseline at zero, measured
in font units. Caller space has the y-axis pointing down, with the
ascender at zero, and one em maps to one unit.
"""

from ._commands import Point, MoveTo, LineTo, QuadTo, CurveTo, ClosePath


def transform_point(x, y, scale, ascender, offset):
    """Transform a point from font space to caller space.

    Parameters:
        x, y (float): the point, in font units.
        scale (float): the scale factor, typically ``1 / units_per_em``.
        ascender (float): the flip anchor, in font units.
        offset (tuple): the (x, y) translation in font units, which
            includes the pen position.
    """
    return Point(
        (x + offset[0]) * scale,
        (ascender - (y + offset[1])) * scale,
    )


class Outliner:
    """Outline sink that appends transformed path commands to a list.

    The font face calls the drawing methods of this object while it walks
    a glyph's contours. Each call appends exactly one command to ``path``.

    Parameters:
        path (list): the list to append the PathCommand objects to.
        ascender (float): the font's ascender, in font units.
        scale (float): the scale factor, typically ``1 / units_per_em``.
        offset (tuple): the (x, y) translation of the glyph, in font units.
    """

    __slots__ = ["_ascender", "_offset", "_path", "_scale"]

    def __init__(self, path, ascender, scale, offset):
        self._path = path
        self._ascender = ascender
        self._scale = scale
        self._offset = offset

    def _point(self, x, y):
        return transform_point(x, y, self._scale, self._ascender, self._offset)

    def move_to(self, x, y):
        self._path.append(MoveTo(self._point(x, y)))

    def line_to(self, x, y):
        self._path.append(LineTo(self._point(x, y)))

    def quad_to(self, x1, y1, x, y):
        self._path.append(QuadTo(self._point(x1, y1), self._point(x, y)))

    def curve_to(self, x1, y1, x2, y2, x, y):
        self._path.append(
            CurveTo(self._point(x1, y1), self._point(x2, y2), self._point(x, y))
        )

    def close(self):
        self._path.append(ClosePath())
