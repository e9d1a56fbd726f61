from textpaths import plan_line_breaks


def test_no_breaks():
    assert plan_line_breaks("ab ab", [600, 600, 250, 600, 600], 100000) == set()
    assert plan_line_breaks("", [], 0) == set()


def test_break_at_space():
    assert plan_line_breaks("a b", [600, 250, 600], 1000) == {1}


def test_break_mid_word():
    # No space in the line, so break at the character that overflows
    assert plan_line_breaks("abc", [600, 600, 600], 1000) == {1}
    assert plan_line_breaks("abab", [600, 600, 600, 600], 1000) == {1, 3}


def test_break_resets_last_space():
    text = "a b cd"
    advances = [600, 250, 600, 250, 600, 600]
    assert plan_line_breaks(text, advances, 1000) == {1, 3}


def test_exact_fit_does_not_break():
    assert plan_line_breaks("ab", [500, 500], 1000) == set()
    assert plan_line_breaks("abc", [500, 500, 1], 1000) == {2}


def test_newline_breaks():
    assert plan_line_breaks("ab\ncd", [600, 600, 0, 600, 600], 100000) == {2}
    assert plan_line_breaks("\n\n", [0, 0], 100000) == {0, 1}

    # The newline resets the line
    text = "ab\ncd"
    advances = [400, 400, 0, 400, 400]
    assert plan_line_breaks(text, advances, 1000) == {2}


def test_spaces_never_overflow():
    assert plan_line_breaks("a   ", [600, 600, 600, 600], 1000) == set()


def test_wrapping_paragraph():
    text = "ab ab ab ab ab ab"
    advances = [250 if c == " " else 600 for c in text]
    assert plan_line_breaks(text, advances, 2000) == {2, 5, 11, 14}


def test_indices_are_byte_offsets():
    # The "\u00e9" takes two bytes in UTF-8
    assert plan_line_breaks("\u00e9 b", [600, 250, 600], 1000) == {2}
    assert plan_line_breaks("\u00e9\nb", [600, 0, 600], 100000) == {2}
    assert plan_line_breaks("\u20ac\u20acb", [600, 600, 600], 1000) == {3}


def test_fewer_glyphs_than_characters():
    # Characters without a glyph are ignored (e.g. after a ligature)
    assert plan_line_breaks("abc", [600, 600], 1000) == {1}
    assert plan_line_breaks("ab\n", [600, 600], 100000) == set()


if __name__ == "__main__":
    for ob in list(globals().values()):
        if callable(ob) and ob.__name__.startswith("test_"):
            print(f"{ob.__name__} ...")
            ob()
    print("done")
