"""
どこで: `src/rasterix/core/drawable.py`。
何を: Renderer が受け取る座標 (Coord) と描画可能プリミティブ (Drawable) の契約を定義する。
なぜ: Renderer.draw をプリミティブの種類に依存しない汎用アルゴリズムとして書くため。
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple, Protocol, runtime_checkable

from rasterix.core.point import Point2


@runtime_checkable
class Coord(Protocol):
    """スクリーン空間の点と、任意の補間重みを公開する座標。

    Notes
    -----
    `barycentric()` は重みを持たない座標（点・矩形）では None を返す。
    """

    def point(self) -> Point2: ...

    def barycentric(self) -> tuple[float, ...] | None: ...


@runtime_checkable
class Drawable(Protocol):
    """Coord 列を生成するプリミティブ。

    Notes
    -----
    `vertices()` は統計用の頂点数であり、生成されるフラグメント数とは無関係。
    """

    def vertices(self) -> int: ...

    def __iter__(self) -> Iterator[Coord]: ...


class Coordinate(NamedTuple):
    """補間重み付きの座標（線分は 2 要素、三角形は 3 要素）。"""

    pos: Point2
    weights: tuple[float, ...]

    def point(self) -> Point2:
        return self.pos

    def barycentric(self) -> tuple[float, ...] | None:
        return self.weights


__all__ = ["Coord", "Coordinate", "Drawable"]
