from pytest import approx

from textpaths import Point, MoveTo, LineTo, QuadTo, CurveTo, ClosePath, Outliner
from textpaths.text import transform_point


def test_transform_point():
    p = transform_point(100, 0, 1 / 1000, 800, (0, 0))
    assert (p.x, p.y) == approx((0.1, 0.8))

    # The offset is added before flipping
    p = transform_point(100, 0, 1 / 1000, 800, (1000, -800))
    assert (p.x, p.y) == approx((1.1, 1.6))

    # A point at the ascender ends up at zero
    p = transform_point(0, 800, 1 / 1000, 800, (0, 0))
    assert (p.x, p.y) == approx((0, 0))


def test_outliner():
    path = []
    outliner = Outliner(path, 10, 0.5, (2, 3))

    outliner.move_to(0, 0)
    outliner.line_to(4, 0)
    outliner.quad_to(4, 4, 6, 0)
    outliner.curve_to(0, 10, 10, 10, 10, 0)
    outliner.close()

    assert path == [
        MoveTo(Point(1, 3.5)),
        LineTo(Point(3, 3.5)),
        QuadTo(Point(3, 1.5), Point(4, 3.5)),
        CurveTo(Point(1, -1.5), Point(6, -1.5), Point(6, 3.5)),
        ClosePath(),
    ]


def test_outliner_appends():
    path = [ClosePath()]
    outliner = Outliner(path, 0, 1, (0, 0))

    outliner.move_to(1, 1)

    assert path == [ClosePath(), MoveTo(Point(1, -1))]


if __name__ == "__main__":
    for ob in list(globals().values()):
        if callable(ob) and ob.__name__.startswith("test_"):
            print(f"{ob.__name__} ...")
            ob()
    print("done")
