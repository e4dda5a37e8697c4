import pytest

from paintkit.geometry import PointArray, Rect


def test_append_and_iterate():
    pa = PointArray()
    pa.append(1, 2)
    pa.append(3, 4)
    assert len(pa) == 2
    assert list(pa) == [(1, 2), (3, 4)]
    assert pa[1] == (3, 4)


def test_init_from_points():
    pa = PointArray([(5, 6), (7, 8)])
    assert list(pa) == [(5, 6), (7, 8)]


def test_setitem_replaces_point():
    pa = PointArray([(0, 0), (1, 1)])
    pa[1] = (9, 10)
    assert list(pa) == [(0, 0), (9, 10)]


@pytest.mark.parametrize("index", [2, 5, -1])
def test_setitem_out_of_range(index):
    pa = PointArray([(0, 0), (1, 1)])
    with pytest.raises(IndexError):
        pa[index] = (3, 3)
    assert list(pa) == [(0, 0), (1, 1)]
    assert len(pa) == 2


def test_clear():
    pa = PointArray([(0, 0), (1, 1)])
    pa.clear()
    assert len(pa) == 0
    assert list(pa) == []


def test_clipbox_empty():
    assert PointArray().clipbox(10) == Rect(0, 0, 0, 0)


def test_clipbox_covers_points():
    points = [(2, 3), (10, 7), (6, 1)]
    box = PointArray(points).clipbox(0)
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert box.x == min(xs)
    assert box.y == min(ys)
    assert box.x + box.width - 1 == max(xs)
    assert box.y + box.height - 1 == max(ys)


def test_clipbox_single_point_is_one_pixel():
    assert PointArray([(4, 5)]).clipbox(0) == Rect(4, 5, 1, 1)


@pytest.mark.parametrize("pen", [2, 3, 4, 7])
def test_clipbox_widens_by_half_pen(pen):
    points = [(20, 30), (40, 35)]
    box = PointArray(points).clipbox(pen)
    half = pen // 2
    assert box.x == 20 - half
    assert box.y == 30 - half
    assert box.x + box.width - 1 == 40 + half
    assert box.y + box.height - 1 == 35 + half


def test_clipbox_clamped_to_limit():
    limit = Rect(0, 0, 10, 8)
    box = PointArray([(-5, -5), (20, 20)]).clipbox(4, limit)
    assert box == limit


def test_clipbox_limit_does_not_grow_box():
    limit = Rect(0, 0, 100, 100)
    pa = PointArray([(10, 10), (20, 30)])
    assert pa.clipbox(2, limit) == pa.clipbox(2)


def test_offset_moves_all_points():
    points = [(1, 2), (3, 4), (-5, 6)]
    pa = PointArray(points)
    pa.offset(10, -3)
    assert list(pa) == [(x + 10, y - 3) for x, y in points]


def test_offset_shifts_clipbox():
    pa = PointArray([(1, 2), (8, 9)])
    before = pa.clipbox(3)
    pa.offset(5, 7)
    after = pa.clipbox(3)
    assert (after.x, after.y) == (before.x + 5, before.y + 7)
    assert (after.width, after.height) == (before.width, before.height)


def test_copy_is_independent():
    pa = PointArray([(1, 1), (2, 2)])
    dup = pa.copy()
    assert list(dup) == list(pa)
    dup.append(3, 3)
    dup[0] = (9, 9)
    assert list(pa) == [(1, 1), (2, 2)]