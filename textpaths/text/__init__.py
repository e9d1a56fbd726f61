"""
The stages of turning text into paths:

* Font loading (FontFace for outlines, Shaper for shaping)
* Shaping
* Line breaking
* Outline extraction & transformation
* Iteration

The Font object ties these together: ``Font.render()`` shapes the text
with the first font, plans the line breaks, and returns a TextPathIterator
that extracts and transforms glyph outlines on demand.
"""

from ._commands import (  # noqa: F401
    Point,
    PathCommand,
    MoveTo,
    LineTo,
    QuadTo,
    CurveTo,
    ClosePath,
    to_svg_path,
    get_control_box,
)
from ._face import FontFace  # noqa: F401
from ._shaper import Shaper, ShapedGlyphs, PositionedGlyph  # noqa: F401
from ._outliner import Outliner, transform_point  # noqa: F401
from ._styled import StyledFont  # noqa: F401
from ._linebreak import plan_line_breaks  # noqa: F401
from ._font import Font, TextPathIterator, PenOffset  # noqa: F401
