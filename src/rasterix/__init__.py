# どこで: `src/rasterix/__init__.py`。
# 何を: ルート `rasterix` パッケージとして、プリミティブと Renderer を再エクスポートする。
# なぜ: import 起点を `rasterix` に統一するため。

from __future__ import annotations

from rasterix.core.drawable import Coord, Coordinate, Drawable
from rasterix.core.interp import interpolate
from rasterix.core.line import Line
from rasterix.core.point import Point, Point2
from rasterix.core.rect import Rectangle
from rasterix.core.shape import Shape, to_shape
from rasterix.core.tri import Triangle
from rasterix.render.renderer import DrawStats, RenderError, Renderer
from rasterix.render.simple import SimpleRenderer

__all__ = [
    "Coord",
    "Coordinate",
    "DrawStats",
    "Drawable",
    "Line",
    "Point",
    "Point2",
    "RenderError",
    "Rectangle",
    "Renderer",
    "Shape",
    "SimpleRenderer",
    "Triangle",
    "interpolate",
    "to_shape",
]
