"""
Text shaping with Harfbuzz.

Relevant links:
* https://harfbuzz.github.io/
* https://harfbuzz.github.io/shaping-and-shape-plans.html

"""

from typing import NamedTuple

import numpy as np
import uharfbuzz


class PositionedGlyph(NamedTuple):
    """A shaped glyph. All values are integers in font units."""

    glyph_id: int
    x_advance: int
    y_advance: int
    x_offset: int
    y_offset: int


class ShapedGlyphs:
    """A reusable buffer of shaped glyphs.

    The glyph ids and positions are stored in numpy arrays that only grow.
    Clearing the buffer keeps the arrays, so that shaping text again does
    not need to allocate, unless the new text has more glyphs.
    """

    def __init__(self):
        self._count = 0
        self._glyph_ids = np.zeros((0,), np.uint32)
        # x_advance, y_advance, x_offset, y_offset
        self._positions = np.zeros((0, 4), np.int32)
        self.text = None

    def __repr__(self):
        return f"<ShapedGlyphs with {self._count} glyphs at {hex(id(self))}>"

    def __len__(self):
        return self._count

    def __getitem__(self, index):
        if not 0 <= index < self._count:
            raise IndexError(f"Glyph index {index} out of range.")
        pos = self._positions[index]
        return PositionedGlyph(
            int(self._glyph_ids[index]),
            int(pos[0]),
            int(pos[1]),
            int(pos[2]),
            int(pos[3]),
        )

    def __iter__(self):
        for i in range(self._count):
            yield self[i]

    @property
    def capacity(self):
        """The number of glyphs that fit in the buffer without growing it."""
        return len(self._glyph_ids)

    @property
    def glyph_ids(self):
        """Array with the glyph ids (a view, valid until the next change)."""
        return self._glyph_ids[: self._count]

    @property
    def x_advances(self):
        """Array with the x-advances (a view, valid until the next change)."""
        return self._positions[: self._count, 0]

    @property
    def y_advances(self):
        """Array with the y-advances (a view, valid until the next change)."""
        return self._positions[: self._count, 1]

    def clear(self):
        """Remove all glyphs, keeping the allocated memory."""
        self._count = 0
        self.text = None

    def reserve(self, n):
        """Make sure that n glyphs fit in the buffer."""
        if n <= len(self._glyph_ids):
            return

        new_size = 2 ** int(np.ceil(np.log2(n)))
        new_size = max(16, new_size)

        glyph_ids = np.zeros((new_size,), np.uint32)
        positions = np.zeros((new_size, 4), np.int32)
        glyph_ids[: self._count] = self._glyph_ids[: self._count]
        positions[: self._count] = self._positions[: self._count]
        self._glyph_ids = glyph_ids
        self._positions = positions

    def append(self, glyph_id, x_advance, y_advance, x_offset, y_offset):
        """Add one glyph at the end."""
        self.reserve(self._count + 1)
        i = self._count
        self._glyph_ids[i] = glyph_id
        self._positions[i] = x_advance, y_advance, x_offset, y_offset
        self._count += 1


class Shaper:
    """Shapes text for one font, using Harfbuzz.

    Parameters:
        font_data (bytes): the contents of a TTF or OTF font file.
        index (int): the index of the face, for font collections. Default 0.

    The font is scaled to its units-per-em, so all advances and offsets
    are in font units.
    """

    def __init__(self, font_data, index=0):
        blob = uharfbuzz.Blob(bytes(font_data))
        self._face = uharfbuzz.Face(blob, index)
        self._font = uharfbuzz.Font(self._face)
        upem = self._face.upem
        self._font.scale = upem, upem

    def shape(
        self,
        text,
        shaped=None,
        *,
        direction=None,
        script=None,
        language=None,
        features=None,
    ):
        """Shape the given text.

        Parameters:
            text (str): the text to shape.
            shaped (ShapedGlyphs, optional): the buffer to write the result
                to. It is cleared first. If not given, a new buffer is created.
            direction (str, optional): "ltr", "rtl", "ttb" or "btt". Guessed
                from the text if not given.
            script (str, optional): the ISO 15924 script tag, e.g. "Latn".
                Guessed from the text if not given.
            language (str, optional): the BCP 47 language tag, e.g. "en".
            features (dict, optional): OpenType features to enable or disable,
                e.g. ``{"liga": False}``.

        Returns the ShapedGlyphs buffer.
        """

        # Prepare buffer
        buf = uharfbuzz.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        if direction is not None:
            buf.direction = direction
        if script is not None:
            buf.script = script
        if language is not None:
            buf.language = language

        # Shape!
        uharfbuzz.shape(self._font, buf, features)

        if shaped is None:
            shaped = ShapedGlyphs()
        shaped.clear()

        glyph_infos = buf.glyph_infos
        glyph_positions = buf.glyph_positions
        # Harfbuzz gives None instead of an empty list for empty text
        n_glyphs = len(glyph_infos or ())

        shaped.reserve(n_glyphs)
        for i in range(n_glyphs):
            pos = glyph_positions[i]
            shaped.append(
                glyph_infos[i].codepoint,
                pos.x_advance,
                pos.y_advance,
                pos.x_offset,
                pos.y_offset,
            )
        shaped.text = text

        return shaped
