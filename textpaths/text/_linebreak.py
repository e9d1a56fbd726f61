from ..utils import logger


def plan_line_breaks(text, x_advances, row_length):
    """Get the set of text indices at which a line breaks.

    Parameters:
        text (str): the text that was shaped.
        x_advances (sequence): the x-advance of each shaped glyph, in font units.
        row_length (int): lines that get longer than this (in font units) wrap.

    A newline always breaks at its own index. Otherwise a line breaks at
    the last space once its advance exceeds ``row_length``, or at the
    current character if the line has no space.

    Indices are UTF-8 byte offsets into the text. The characters are zipped
    with the glyphs, and the iterator matches the indices against glyph
    indices, so breaks land correctly only for ASCII text in which each
    character maps to exactly one glyph.
    """
    x_pos = 0
    last_space_index = None
    line_break_indices = set()

    for (index, character), x_advance in zip(_char_indices(text), x_advances):
        x_pos += int(x_advance)
        if character == " ":
            last_space_index = index
        elif character == "\n":
            line_break_indices.add(index)
            x_pos = 0
            last_space_index = None
        elif x_pos > row_length:
            if last_space_index is None:
                line_break_indices.add(index)
            else:
                line_break_indices.add(last_space_index)
            x_pos = 0
            last_space_index = None

    logger.debug(f"Planned {len(line_break_indices)} line breaks")
    return line_break_indices


def _char_indices(text):
    """Yield (byte_offset, character) pairs, with offsets into the UTF-8 encoding."""
    index = 0
    for character in text:
        yield index, character
        index += len(character.encode("utf-8", "surrogatepass"))
