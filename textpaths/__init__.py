"""Convert text into a lazily produced sequence of vector path commands."""

# ruff: noqa: F401

from ._version import __version__, version_info
from .utils import logger

from .text import (
    Font,
    TextPathIterator,
    PenOffset,
    FontFace,
    Shaper,
    ShapedGlyphs,
    PositionedGlyph,
    StyledFont,
    Outliner,
    Point,
    PathCommand,
    MoveTo,
    LineTo,
    QuadTo,
    CurveTo,
    ClosePath,
    plan_line_breaks,
    to_svg_path,
    get_control_box,
)
