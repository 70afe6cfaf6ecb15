"""
どこで: `src/rasterix/core/tri.py`。三角形プリミティブのラスタライズ。
何を: バウンディング矩形を走査し、内側判定を通った格子点を barycentric 重み (p1, p2, p3) 付きで遅延生成する。
なぜ: 頂点属性を画素ごとに補間するための重みを、点列と同時に得るため。
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from rasterix.core.drawable import Coordinate
from rasterix.core.point import Number, Point2
from rasterix.core.rect import Rectangle

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Triangle:
    """3 頂点からなる三角形プリミティブ。

    Parameters
    ----------
    points : tuple[Point2, Point2, Point2]
        頂点列。順序は det の符号に影響するが、最終的な重みの値には影響しない。

    Notes
    -----
    画素 (x, y) は ``p1 >= 0 and p2 >= 0 and p1 + p2 <= 1`` のとき採用する。
    辺上の画素も含むため、辺を共有する 2 つの三角形が同じ画素を両方とも
    出すことがある。
    det == 0（3 点が同一直線上）や NaN/inf 座標を含む三角形は何も生成しない。
    """

    points: tuple[Point2, Point2, Point2]

    def __post_init__(self) -> None:
        pts = tuple(Point2(*p) for p in self.points)
        if len(pts) != 3:
            raise ValueError(f"Triangle は 3 頂点である必要がある: got={len(pts)}")
        object.__setattr__(self, "points", pts)

    @classmethod
    def with_points(cls, points: Sequence[tuple[Number, Number]]) -> "Triangle":
        return cls(tuple(Point2(*p) for p in points))  # type: ignore[arg-type]

    def vertices(self) -> int:
        return 3

    def det(self) -> Number:
        """符号付き面積の 2 倍を返す。"""
        (x1, y1), (x2, y2), (x3, y3) = self.points
        return (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)

    def bounds(self) -> Rectangle:
        """走査対象となる半開バウンディング矩形を返す。"""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Rectangle(min(xs), max(xs), min(ys), max(ys))

    def __iter__(self) -> Iterator[Coordinate]:
        if not all(math.isfinite(v) for p in self.points for v in p):
            _logger.debug("non-finite triangle skipped: %s", self.points)
            return
        det = self.det()
        if det == 0:
            _logger.debug("degenerate triangle skipped: %s", self.points)
            return

        (x1, y1), (x2, y2), (x3, y3) = self.points
        # 走査中に不変な係数を先に求めておく。
        a1, b1 = y2 - y3, x3 - x2
        a2, b2 = y3 - y1, x1 - x3

        for p in self.bounds():
            dx = p.x - x3
            dy = p.y - y3
            p1 = (a1 * dx + b1 * dy) / det
            p2 = (a2 * dx + b2 * dy) / det
            if p1 >= 0 and p2 >= 0 and p1 + p2 <= 1:
                yield Coordinate(p, (p1, p2, 1 - p1 - p2))


__all__ = ["Triangle"]
