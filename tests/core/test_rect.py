"""core.rect の `Rectangle` 走査をテスト。"""

from __future__ import annotations

import pytest

from rasterix.core.point import Point2
from rasterix.core.rect import Rectangle


def test_rect_small_grid_is_row_major() -> None:
    assert list(Rectangle(0, 2, 0, 2)) == [(0, 0), (1, 0), (0, 1), (1, 1)]


@pytest.mark.parametrize(
    "x0, x1, y0, y1",
    [(0, 5, 0, 3), (-2, 2, 1, 4), (3, 4, -3, 0), (10, 17, 20, 21)],
)
def test_rect_count_and_order(x0: int, x1: int, y0: int, y1: int) -> None:
    points = list(Rectangle(x0, x1, y0, y1))
    assert len(points) == (x1 - x0) * (y1 - y0)
    assert points[0] == (x0, y0)
    assert points == [(x, y) for y in range(y0, y1) for x in range(x0, x1)]
    assert Rectangle(x0, x1, y0, y1).count() == len(points)


@pytest.mark.parametrize(
    "x0, x1, y0, y1",
    [(3, 0, 0, 3), (0, 3, 3, 0), (2, 2, 0, 3), (0, 3, 1, 1), (5, 1, 5, 1)],
)
def test_rect_reversed_or_zero_extent_is_empty(x0: int, x1: int, y0: int, y1: int) -> None:
    rect = Rectangle(x0, x1, y0, y1)
    assert list(rect) == []
    assert rect.is_empty()
    assert rect.count() == 0
    # 空でも Rectangle 自体は真として扱われる。
    assert rect


def test_rect_float_bounds_are_truncated() -> None:
    # 0 方向への切り捨て: 0.9 -> 0, 2.7 -> 2, -0.5 -> 0
    points = list(Rectangle(0.9, 2.7, -0.5, 1.2))
    assert points == [(0, 0), (1, 0)]
    assert all(isinstance(p, Point2) for p in points)
    assert all(isinstance(p.x, int) and isinstance(p.y, int) for p in points)


def test_rect_iterator_is_lazy_and_not_restartable() -> None:
    rect = Rectangle(0, 1000, 0, 1000)
    it = iter(rect)
    assert next(it) == (0, 0)
    assert next(it) == (1, 0)
    # Rectangle 自体からは何度でも新しい走査を始められる。
    assert next(iter(rect)) == (0, 0)

    small = iter(Rectangle(0, 1, 0, 1))
    assert list(small) == [(0, 0)]
    assert list(small) == []


def test_rect_vertices() -> None:
    assert Rectangle(0, 1, 0, 1).vertices() == 4
    assert Rectangle(1, 0, 1, 0).vertices() == 4


@pytest.mark.parametrize(
    "x0, x1, y0, y1",
    [
        (0, float("inf"), 0, 3),
        (float("-inf"), 3, 0, 3),
        (0, 3, float("nan"), 3),
        (0, 3, 0, float("nan")),
    ],
)
def test_rect_non_finite_bounds_are_empty(x0: float, x1: float, y0: float, y1: float) -> None:
    rect = Rectangle(x0, x1, y0, y1)
    assert list(rect) == []
    assert rect.count() == 0
    assert rect.is_empty()
