"""
Glyph outlines and font metrics with FreeType.

Relevant links:
* https://freetype.org/freetype2/docs/glyphs/glyphs-6.html
* https://freetype.org/freetype2/docs/reference/ft2-outline_processing.html

"""

import io

import freetype


class FontFace:
    """A font face loaded from bytes, providing metrics and glyph outlines.

    Parameters:
        font_data (bytes): the contents of a TTF or OTF font file.
        index (int): the index of the face, for font collections. Default 0.

    Raises ValueError if the data cannot be loaded as a scalable font.
    """

    def __init__(self, font_data, index=0):
        data = bytes(font_data)
        try:
            face = freetype.Face(io.BytesIO(data), index)
        except freetype.FT_Exception as err:
            raise ValueError(f"Could not load font data: {err}") from None
        if not face.is_scalable or not face.units_per_EM:
            raise ValueError("Font data does not contain a scalable font.")
        self._face = face
        self._index = index

    def __repr__(self):
        return f"<FontFace '{self.family_name}' ({self.glyph_count} glyphs) at {hex(id(self))}>"

    @property
    def index(self):
        """The index of this face in the font data."""
        return self._index

    @property
    def family_name(self):
        """The family name of the font, e.g. "Noto Sans"."""
        name = self._face.family_name or b""
        return name.decode(errors="ignore")

    @property
    def glyph_count(self):
        """The number of glyphs in this font."""
        return self._face.num_glyphs

    @property
    def units_per_em(self):
        """The size of the em square, in font units."""
        return self._face.units_per_EM

    @property
    def ascender(self):
        """The distance from the baseline to the top of the font, in font units."""
        return self._face.ascender

    @property
    def descender(self):
        """The distance from the baseline to the bottom (negative), in font units."""
        return self._face.descender

    def outline_glyph(self, glyph_id, builder):
        """Walk the outline of a glyph, calling the builder's drawing methods.

        The builder gets ``move_to(x, y)``, ``line_to(x, y)``,
        ``quad_to(x1, y1, x, y)``, ``curve_to(x1, y1, x2, y2, x, y)`` and
        ``close()`` calls, with coordinates in font units (y-axis up).
        Each contour ends with one ``close()``. Glyphs without contours
        (e.g. a space) do not call the builder at all.
        """
        if not 0 <= glyph_id < self._face.num_glyphs:
            raise IndexError(f"Glyph id {glyph_id} out of range.")

        self._face.load_glyph(glyph_id, freetype.FT_LOAD_NO_SCALE)

        contours = []

        def move_to(p, _):
            contours.append([("move_to", (p.x, p.y))])

        def line_to(p, _):
            contours[-1].append(("line_to", (p.x, p.y)))

        def conic_to(c, p, _):
            contours[-1].append(("quad_to", (c.x, c.y, p.x, p.y)))

        def cubic_to(c1, c2, p, _):
            contours[-1].append(("curve_to", (c1.x, c1.y, c2.x, c2.y, p.x, p.y)))

        self._face.glyph.outline.decompose(
            move_to=move_to, line_to=line_to, conic_to=conic_to, cubic_to=cubic_to
        )

        for contour in contours:
            # FreeType ends each contour with a line back to its start. The
            # close command implies that line, so drop it.
            start = contour[0][1]
            if len(contour) > 2 and contour[-1] == ("line_to", start):
                contour.pop()
            for name, args in contour:
                getattr(builder, name)(*args)
            builder.close()
