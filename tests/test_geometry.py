import pytest

from checkpointer.geometry import Rect


def test_union_with_self_is_self():
    r = Rect(3, 4, 10, 20)
    assert r.union(r) == r


def test_union_of_nested_is_outer():
    outer = Rect(0, 0, 100, 50)
    inner = Rect(10, 5, 20, 10)
    assert inner.union(outer) == outer
    assert outer.union(inner) == outer


@pytest.mark.parametrize(
    "a, b",
    [
        (Rect(0, 0, 10, 10), Rect(20, 30, 5, 5)),
        (Rect(-5, 2, 3, 8), Rect(1, -4, 2, 2)),
        (Rect(1.5, 2.5, 3.0, 4.0), Rect(2.0, 1.0, 1.0, 10.0)),
    ],
)
def test_union_covers_both_corners(a, b):
    u = a.union(b)
    for r in (a, b):
        assert u.contains(r.x, r.y)
        assert u.contains(r.right, r.bottom)
    assert u.union(a) == u
    assert u.union(b) == u


def test_union_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, -3, 12, 4)
    assert a.union(b) == b.union(a)


def test_union_pinned_value():
    assert Rect(0, 0, 10, 10).union(Rect(20, 30, 5, 5)) == Rect(0, 0, 25, 35)


def test_intersect_with_self_is_self():
    r = Rect(3, 4, 10, 20)
    assert r.intersect(r) == r


def test_intersect_of_nested_is_inner():
    outer = Rect(0, 0, 100, 50)
    inner = Rect(10, 5, 20, 10)
    assert outer.intersect(inner) == inner
    assert inner.intersect(outer) == inner


def test_intersect_disjoint_has_no_area():
    a = Rect(0, 0, 10, 10)
    b = Rect(20, 30, 5, 5)
    result = a.intersect(b)
    assert result.w == 0
    assert result.h == 0


def test_intersect_partial_overlap():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersect(b) == Rect(5, 5, 5, 5)


def test_intersect_lies_within_both():
    a = Rect(-2, 1, 9, 7)
    b = Rect(3, -1, 4, 20)
    i = a.intersect(b)
    for r in (a, b):
        assert r.contains(i.x, i.y)
        assert r.contains(i.right, i.bottom)


def test_contains_is_inclusive_on_edges():
    r = Rect(10, 20, 30, 40)
    assert r.contains(r.x, r.y)
    assert r.contains(r.right, r.bottom)
    assert r.contains(r.x, r.bottom)


def test_contains_rejects_outside_points():
    r = Rect(10, 20, 30, 40)
    assert not r.contains(r.x - 1, r.y)
    assert not r.contains(r.x, r.bottom + 1)
    assert not r.contains(r.right + 0.5, r.y)