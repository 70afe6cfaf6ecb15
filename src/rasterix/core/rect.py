# どこで: `src/rasterix/core/rect.py`。
# 何を: 軸平行矩形の内部格子点を行優先で遅延列挙する Rectangle を定義する。
# なぜ: 三角形ラスタライザのバウンディングボックス走査の土台として再利用するため。

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from rasterix.core.point import Number, Point2


@dataclass(frozen=True, slots=True)
class Rectangle:
    """半開区間 [x0, x1) x [y0, y1) の矩形プリミティブ。

    Parameters
    ----------
    x0, x1 : int or float
        x 方向の下限（含む）と上限（含まない）。
    y0, y1 : int or float
        y 方向の下限（含む）と上限（含まない）。

    Notes
    -----
    境界は 0 方向への切り捨てで整数化する。x0 >= x1 または y0 >= y1 の場合は
    何も生成しない（エラーにはしない）。NaN/inf を含む境界も同様に空とする。
    """

    x0: Number
    x1: Number
    y0: Number
    y1: Number

    def vertices(self) -> int:
        return 4

    def _int_bounds(self) -> tuple[int, int, int, int] | None:
        # 非有限（NaN/inf）の境界を含む矩形は走査しない。
        bounds = (self.x0, self.x1, self.y0, self.y1)
        if not all(math.isfinite(v) for v in bounds):
            return None
        x0, x1, y0, y1 = (int(v) for v in bounds)
        return x0, x1, y0, y1

    def is_empty(self) -> bool:
        """走査対象の格子点が 1 つも無いかを返す。"""
        return self.count() == 0

    def count(self) -> int:
        """走査される格子点の数を返す。"""
        bounds = self._int_bounds()
        if bounds is None:
            return 0
        x0, x1, y0, y1 = bounds
        if x0 >= x1 or y0 >= y1:
            return 0
        return (x1 - x0) * (y1 - y0)

    def __iter__(self) -> Iterator[Point2]:
        bounds = self._int_bounds()
        if bounds is None:
            return
        x0, x1, y0, y1 = bounds
        for y in range(y0, y1):
            for x in range(x0, x1):
                yield Point2(x, y)


__all__ = ["Rectangle"]
