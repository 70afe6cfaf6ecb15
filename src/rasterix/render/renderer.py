"""
どこで: `src/rasterix/render/renderer.py`。
何を: 画素バッファを所有する Renderer の基底クラスと、メッシュを畳み込む汎用 draw を定義する。
なぜ: プリミティブの種類やバッファの実体に依存せず、クリップ・書き込み・統計を 1 箇所で扱うため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, NamedTuple

from rasterix.core.drawable import Drawable
from rasterix.core.point import Point2

_logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """Renderer 固有の失敗（属性書き込みの拒否、バッファ確保の失敗など）。"""


class DrawStats(NamedTuple):
    """draw 1 回分の統計。

    Parameters
    ----------
    shapes : int
        処理したプリミティブ数。
    vertices : int
        各プリミティブの vertices() の総和。画面上の占有とは無関係。
    fragments : int
        ビューポート内に収まった点の数。属性が未設定で書き込みが
        起きなかった点も数える。
    """

    shapes: int
    vertices: int
    fragments: int

    def as_tuple(self) -> tuple[int, int, int]:
        return self.shapes, self.vertices, self.fragments


class Renderer:
    """画素バッファ（front/back）を所有し、メッシュを描画する Renderer の基底。

    Notes
    -----
    サブクラスは `put_pixel` / `swap` / `width` / `height` を実装する。
    属性（現在の描画色など）を持たない Renderer は `get_attr` / `set_attr` を
    上書きしなくてよい。その場合 draw は画素を書かずに統計だけを数える。
    """

    def put_pixel(self, p: Point2, px: Any) -> None:
        """back バッファの (x, y) に画素を書く。範囲チェックは呼び出し側の責務。"""
        raise NotImplementedError

    def swap(self) -> None:
        """front と back を入れ替える。内容はコピーしない。"""
        raise NotImplementedError

    @property
    def width(self) -> int:
        raise NotImplementedError

    @property
    def height(self) -> int:
        raise NotImplementedError

    def get_attr(self, slot: int) -> Any | None:
        """slot 番目の属性を返す。属性を持たない Renderer は None。"""
        return None

    def set_attr(self, slot: int, value: Any) -> None:
        """slot 番目の属性を設定する。既定では何もしない。"""
        return None

    def to_pixel(self, attr: Any) -> Any:
        """属性を画素型に変換する。既定では属性をそのまま画素として扱う。"""
        return attr

    def draw(self, mesh: Iterable[Drawable]) -> DrawStats:
        """メッシュ（Drawable 列）を slot 0 の属性で back バッファへ描画する。

        Parameters
        ----------
        mesh : Iterable[Drawable]
            有限の Drawable 列。無限列を渡すと終了しない。

        Returns
        -------
        DrawStats
            (shapes, vertices, fragments) の統計。

        Raises
        ------
        RenderError
            バッファ書き込みが失敗し得る Renderer が失敗を報告する場合。
        """
        width = self.width
        height = self.height
        shapes = 0
        vertices = 0
        fragments = 0

        for drawable in mesh:
            shapes += 1
            vertices += drawable.vertices()
            for coord in drawable:
                x, y = coord.point()
                # NaN/inf もここで落とす。
                if not (0 <= x < width and 0 <= y < height):
                    continue
                xi = int(x)
                yi = int(y)
                attr = self.get_attr(0)
                if attr is not None:
                    self.put_pixel(Point2(xi, yi), self.to_pixel(attr))
                fragments += 1

        stats = DrawStats(shapes=shapes, vertices=vertices, fragments=fragments)
        _logger.debug(
            "drawn %d primitives, %d vertices and %d fragments",
            stats.shapes,
            stats.vertices,
            stats.fragments,
        )
        return stats


__all__ = ["DrawStats", "RenderError", "Renderer"]
