"""
The Font object and the iterator that it returns when rendering text.

The Font owns the reusable buffers: the shaped glyphs (per styled font) and
a scratch list of path commands. The TextPathIterator borrows these while
it is alive, so a Font can have only one active iterator at a time.
"""

import weakref

from ..utils import logger
from ._face import FontFace
from ._shaper import Shaper
from ._styled import StyledFont
from ._linebreak import plan_line_breaks


class PenOffset:
    """The running pen position, in font units."""

    __slots__ = ["x", "y"]

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"<PenOffset({self.x}, {self.y})>"

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        try:
            return tuple(self) == tuple(other)
        except TypeError:
            return NotImplemented


class Font:
    """A collection of TTF/OTF fonts used as a single font.

    Add fonts with ``push()``, then call ``render()`` to get the path
    commands for a piece of text. Note that only the first font is
    currently used to shape and outline text.
    """

    def __init__(self):
        self._paths = []
        self._fonts = []
        self._active_iterator = None

    def __repr__(self):
        return f"<Font with {len(self._fonts)} fonts at {hex(id(self))}>"

    def __len__(self):
        return len(self._fonts)

    @property
    def faces(self):
        """A tuple with the FontFace objects, in the order they were pushed."""
        return tuple(styled.face for styled in self._fonts)

    def push(self, font_data, index=0):
        """Add a TTF or OTF font.

        Parameters:
            font_data (bytes): the contents of the font file.
            index (int): the index of the face, for font collections. Default 0.

        Returns this Font, or None if the data could not be loaded, in which
        case the Font is left unchanged.
        """
        try:
            face = FontFace(font_data, index)
        except ValueError as err:
            logger.warning(f"Could not push font: {err}")
            return None
        shaper = Shaper(font_data, index)
        self._fonts.append(StyledFont(face, shaper))
        logger.debug(f"Pushed font {face.family_name!r}")
        return self

    def render(self, text, row_length, row_drop):
        """Render some text. Returns a TextPathIterator.

        Parameters:
            text (str): the text to render.
            row_length (int): the x position (in font units) beyond which
                lines are wrapped.
            row_drop (int): the y shift (in font units) for new lines. Use
                a negative value to move lines down.

        Only one iterator can be active at a time. An iterator is done when
        it is exhausted, closed, or no longer referenced.
        """
        if not isinstance(text, str):
            raise TypeError(f"Text must be str, not {type(text).__name__}.")
        if not self._fonts:
            raise RuntimeError("Cannot render text without fonts, use push() first.")
        if self._get_active_iterator() is not None:
            raise RuntimeError(
                "Cannot render while a previous TextPathIterator is still active."
            )

        # Replace the glyph buffer using the text. Only the first font is used.
        shaped = self._fonts[0].shape(text)

        # Find where lines break
        line_break_indices = plan_line_breaks(text, shaped.x_advances, row_length)

        logger.debug(f"Rendering {len(shaped)} glyphs for {len(text)} characters")

        self._paths.clear()
        iterator = TextPathIterator(self, len(shaped), line_break_indices, row_drop)
        self._active_iterator = weakref.ref(iterator)
        return iterator

    def _get_active_iterator(self):
        if self._active_iterator is None:
            return None
        return self._active_iterator()

    def _release(self, iterator):
        if self._get_active_iterator() is iterator:
            self._active_iterator = None


class TextPathIterator:
    """Iterator that generates the path commands for the rendered text.

    Commands are produced one glyph at a time. The ``offset`` attribute
    holds the current pen position (in font units), so after exhausting the
    iterator it represents the position after the last glyph.
    """

    def __init__(self, font, until, line_break_indices, row_drop):
        # Contains the reusable glyph and path buffers
        self._font = font
        # Glyph index to stop rendering at
        self._until = until
        # Current glyph index
        self._index = 0
        # Index into the path buffer
        self._path_i = 0
        # Glyph indices after which a new line starts
        self._line_break_indices = frozenset(line_break_indices)
        # Y offset change on line breaks
        self._row_drop = row_drop
        self.offset = PenOffset()

    def __repr__(self):
        return f"<TextPathIterator at glyph {self._index}/{self._until} at {hex(id(self))}>"

    def __iter__(self):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def glyph_count(self):
        """The number of shaped glyphs."""
        return self._until

    @property
    def line_break_indices(self):
        """The indices at which lines break."""
        return self._line_break_indices

    def close(self):
        """Stop this iterator, so that the font can render again."""
        if self._font is not None:
            self._font._release(self)
            self._font = None

    def __next__(self):
        font = self._font
        if font is None:
            raise StopIteration()
        paths = font._paths

        while self._path_i == len(paths):
            # No path commands left, clear the buffer for reuse
            paths.clear()
            self._path_i = 0
            if self._index == self._until:
                self.close()
                raise StopIteration()
            font._fonts[0].produce_path(self._index, paths, self.offset)
            if self._index in self._line_break_indices:
                self.offset.x = 0
                self.offset.y += self._row_drop
            self._index += 1

        command = paths[self._path_i]
        self._path_i += 1
        return command
