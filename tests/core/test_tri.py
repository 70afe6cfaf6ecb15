"""core.tri の `Triangle` ラスタライズと barycentric 重みをテスト。"""

from __future__ import annotations

import pytest

from rasterix.core.rect import Rectangle
from rasterix.core.tri import Triangle


def _scaled(weights: tuple[float, ...], scale: float) -> list[int]:
    return [round(w * scale) for w in weights]


def test_small_right_triangle_points_and_weights() -> None:
    tri = Triangle.with_points([(0, 0), (3, 0), (0, 3)])
    coords = list(tri)

    assert [c.pos for c in coords] == [
        (0, 0),
        (1, 0),
        (2, 0),
        (0, 1),
        (1, 1),
        (2, 1),
        (0, 2),
        (1, 2),
    ]
    assert [_scaled(c.weights, 3) for c in coords] == [
        [3, 0, 0],
        [2, 1, 0],
        [1, 2, 0],
        [2, 0, 1],
        [1, 1, 1],
        [0, 2, 1],
        [1, 0, 2],
        [0, 1, 2],
    ]
    for c in coords:
        assert list(c.weights) == pytest.approx([w / 3 for w in _scaled(c.weights, 3)], abs=1e-12)


def test_accepted_weights_sum_to_one() -> None:
    tri = Triangle.with_points([(1.5, 2.25), (40.0, 7.5), (12.75, 33.0)])
    coords = list(tri)
    assert coords
    for c in coords:
        p1, p2, p3 = c.barycentric()
        assert p1 >= 0.0
        assert p2 >= 0.0
        assert p1 + p2 <= 1.0
        assert p1 + p2 + p3 == pytest.approx(1.0, abs=1e-12)


def test_vertex_order_does_not_change_covered_pixels() -> None:
    a, b, c = (0.0, 0.0), (9.0, 1.0), (2.0, 8.0)
    ccw = {coord.pos for coord in Triangle.with_points([a, b, c])}
    cw = {coord.pos for coord in Triangle.with_points([a, c, b])}
    assert ccw == cw
    assert Triangle.with_points([a, b, c]).det() == -Triangle.with_points([a, c, b]).det()


def test_degenerate_triangle_is_empty() -> None:
    tri = Triangle.with_points([(0, 0), (2, 2), (5, 5)])
    assert tri.det() == 0
    assert list(tri) == []


def test_coincident_vertices_are_empty() -> None:
    assert list(Triangle.with_points([(3, 3), (3, 3), (3, 3)])) == []


def test_bounds_is_half_open_bounding_box() -> None:
    tri = Triangle.with_points([(4, 1), (0, 6), (2, 3)])
    assert tri.bounds() == Rectangle(0, 4, 1, 6)
    # 最大行/列は走査されないので、(4, 1) や y == 6 の画素は出てこない。
    pts = {c.pos for c in tri}
    assert all(0 <= p.x < 4 and 1 <= p.y < 6 for p in pts)


def test_cost_follows_bounding_box_not_area() -> None:
    # 細長い三角形: 面積は小さいが走査範囲は bbox 全体。
    tri = Triangle.with_points([(0, 0), (200, 201), (201, 200)])
    bbox = tri.bounds()
    coords = list(tri)
    assert bbox.count() == 201 * 201
    assert len(coords) < bbox.count() // 50


def test_shared_edge_is_drawn_by_both_triangles() -> None:
    # 対角線を共有する 2 つの三角形。辺上の画素は両方から出る。
    upper = {c.pos for c in Triangle.with_points([(0, 0), (4, 0), (0, 4)])}
    lower = {c.pos for c in Triangle.with_points([(4, 0), (4, 4), (0, 4)])}
    shared = upper & lower
    assert shared
    assert all(p.x + p.y == 4 for p in shared)


def test_triangle_vertices_and_validation() -> None:
    assert Triangle.with_points([(0, 0), (1, 0), (0, 1)]).vertices() == 3
    with pytest.raises(ValueError):
        Triangle.with_points([(0, 0), (1, 0)])


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
@pytest.mark.parametrize("index", [0, 1, 2])
def test_non_finite_vertex_yields_nothing_in_any_position(bad: float, index: int) -> None:
    points = [(0.0, 0.0), (3.0, 0.0), (0.0, 3.0)]
    points[index] = (bad, points[index][1])
    assert list(Triangle.with_points(points)) == []

    points[index] = (points[index][0], bad)
    assert list(Triangle.with_points(points)) == []
