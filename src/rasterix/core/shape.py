# どこで: `src/rasterix/core/shape.py`。
# 何を: Point/Line/Rectangle/Triangle の閉じた直和型 Shape と、その一様な反復を定義する。
# なぜ: 種類の混在したメッシュを 1 つの Drawable 列として Renderer に渡せるようにするため。

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rasterix.core.line import Line
from rasterix.core.point import Point, Point2
from rasterix.core.rect import Rectangle
from rasterix.core.tri import Triangle

Primitive = Point | Line | Rectangle | Triangle

_KINDS: dict[type, str] = {
    Point: "point",
    Line: "line",
    Rectangle: "rect",
    Triangle: "tri",
}


@dataclass(frozen=True, slots=True)
class Shape:
    """4 種のプリミティブのいずれか 1 つを包む Drawable。

    Notes
    -----
    反復は包んだプリミティブへ委譲し、Line/Triangle の重みは捨てて
    Point2 のみを返す。種類が揃ったメッシュはプリミティブを直接渡せば
    分岐のコストもかからない。
    """

    payload: Primitive

    def __post_init__(self) -> None:
        if type(self.payload) not in _KINDS:
            raise TypeError(f"Shape に包めないプリミティブ型: {type(self.payload)!r}")

    @property
    def kind(self) -> str:
        """包んでいるプリミティブの種類名（point/line/rect/tri）。"""
        return _KINDS[type(self.payload)]

    def vertices(self) -> int:
        return self.payload.vertices()

    def __iter__(self) -> Iterator[Point2]:
        payload = self.payload
        # 重み付きの変種は位置だけを取り出す。
        match payload:
            case Point() | Rectangle():
                yield from payload
            case Line() | Triangle():
                for c in payload:
                    yield c.pos
            case _:
                raise TypeError(f"未対応のプリミティブ型: {type(payload)!r}")


def to_shape(value: Primitive | Shape) -> Shape:
    """プリミティブ（または Shape）を Shape に変換して返す。"""
    if isinstance(value, Shape):
        return value
    return Shape(value)


__all__ = ["Primitive", "Shape", "to_shape"]
