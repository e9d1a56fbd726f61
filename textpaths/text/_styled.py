from ._outliner import Outliner
from ._shaper import ShapedGlyphs


class StyledFont:
    """Pairs a FontFace (for outlines) with a Shaper (for shaping).

    The shaped glyphs of the most recent call to ``shape()`` are kept in a
    buffer that is reused for the next call.
    """

    def __init__(self, face, shaper):
        self.face = face
        self.shaper = shaper
        self.shaped = None

    def __repr__(self):
        return f"<StyledFont {self.face.family_name!r} at {hex(id(self))}>"

    def shape(self, text):
        """Shape the text into the cached buffer, and return that buffer."""
        if self.shaped is None:
            self.shaped = ShapedGlyphs()
        return self.shaper.shape(text, self.shaped)

    def produce_path(self, index, path, offset):
        """Append the path commands of the shaped glyph at index to path.

        The pen offset is advanced by the glyph's advance, also for glyphs
        that have no outline.
        """
        if self.shaped is None:
            raise RuntimeError("StyledFont.produce_path() called before shape().")
        glyph = self.shaped[index]

        scale = 1 / self.face.units_per_em
        x_offset = glyph.x_offset + offset.x
        y_offset = glyph.y_offset + offset.y
        offset.x += glyph.x_advance
        offset.y += glyph.y_advance

        outliner = Outliner(path, self.face.ascender, scale, (x_offset, y_offset))
        self.face.outline_glyph(glyph.glyph_id, outliner)
