# どこで: `src/rasterix/core/point.py`。
# 何を: 2D 点 `Point2` と、点 1 つだけを描く Drawable `Point` を定義する。
# なぜ: 全プリミティブが共有する最小の座標単位を 1 箇所にまとめるため。

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

Number = int | float


class Point2(NamedTuple):
    """スクリーン空間上の 2D 点。

    Notes
    -----
    Coord 契約を満たすが、重み（barycentric）は持たない。
    """

    x: Number
    y: Number

    def point(self) -> "Point2":
        return self

    def barycentric(self) -> tuple[float, ...] | None:
        return None


@dataclass(frozen=True, slots=True)
class Point:
    """点プリミティブ。反復すると自身の座標を 1 回だけ返す。"""

    pos: Point2

    def __post_init__(self) -> None:
        if not isinstance(self.pos, Point2):
            x, y = self.pos
            object.__setattr__(self, "pos", Point2(x, y))

    @property
    def x(self) -> Number:
        return self.pos.x

    @property
    def y(self) -> Number:
        return self.pos.y

    def vertices(self) -> int:
        return 1

    def __iter__(self) -> Iterator[Point2]:
        yield self.pos


__all__ = ["Number", "Point", "Point2"]
