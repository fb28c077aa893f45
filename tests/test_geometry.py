from types import SimpleNamespace

from rockblast.geometry import center, overlaps


def box(x, y, w, h):
    return SimpleNamespace(x=x, y=y, width=w, height=h)


def test_overlap_basic():
    assert overlaps(box(0, 0, 10, 10), box(5, 5, 10, 10))
    assert not overlaps(box(0, 0, 10, 10), box(20, 0, 10, 10))


def test_touching_edges_do_not_collide():
    a = box(0, 0, 10, 10)
    assert not overlaps(a, box(10, 0, 10, 10))
    assert not overlaps(a, box(0, 10, 10, 10))
    assert overlaps(a, box(9.999, 0, 10, 10))


def test_overlap_is_symmetric_and_contains():
    outer = box(0, 0, 100, 100)
    inner = box(40, 40, 5, 5)
    assert overlaps(outer, inner) and overlaps(inner, outer)


def test_center():
    assert center(box(10, 20, 30, 40)) == (25, 40)
