"""
どこで: `src/rasterix/render/simple.py`。
何を: numpy 配列 2 枚をダブルバッファとして持つ参照実装 SimpleRenderer を定義する。
なぜ: 単色でどんなメッシュも描ける最小の Renderer を、導入用・テスト用に提供するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from rasterix.core.point import Point2
from rasterix.core.runtime_config import runtime_config
from rasterix.render.renderer import Renderer


class SimpleRenderer(Renderer):
    """単色で描画する参照 Renderer。

    Parameters
    ----------
    width, height : int
        バッファのサイズ（生成後は不変）。
    channels : int or None, optional
        画素あたりのチャンネル数。None の場合は shape (height, width) のスカラー画素。
    dtype : numpy dtype, optional
        画素の型。
    clear_value : float, optional
        バッファ初期化と `clear()` の既定値。

    Notes
    -----
    属性は slot 0（現在の描画色）のみ対応し、他の slot への設定は無視する。
    `swap()` は front/back の参照を入れ替えるだけで、内容はコピーしない。
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        channels: int | None = None,
        dtype: Any = np.uint8,
        clear_value: float = 0,
    ) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"width/height は正の値である必要がある: got=({width}, {height})")
        if channels is not None and int(channels) <= 0:
            raise ValueError(f"channels は正の値である必要がある: got={channels}")

        self._width = int(width)
        self._height = int(height)
        self._dtype = np.dtype(dtype)
        self._pixel_shape: tuple[int, ...] = () if channels is None else (int(channels),)
        self._clear_value = clear_value
        self._color: np.ndarray | None = None

        shape = (self._height, self._width, *self._pixel_shape)
        self._front = np.full(shape, clear_value, dtype=self._dtype)
        self._back = np.full(shape, clear_value, dtype=self._dtype)

    @classmethod
    def from_config(cls, *, channels: int | None = None, dtype: Any = np.uint8) -> "SimpleRenderer":
        """実行時設定の `renderer.size` / `renderer.clear_value` から生成する。"""
        cfg = runtime_config()
        width, height = cfg.renderer_size
        return cls(width, height, channels=channels, dtype=dtype, clear_value=cfg.clear_value)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> np.ndarray:
        """公開済み（front）バッファの読み取り専用ビューを返す。"""
        view = self._front.view()
        view.setflags(write=False)
        return view

    def put_pixel(self, p: Point2, px: Any) -> None:
        self._back[p[1], p[0]] = px

    def swap(self) -> None:
        self._front, self._back = self._back, self._front

    def clear(self, value: Any | None = None) -> None:
        """back バッファを value（省略時は clear_value）で埋める。"""
        self._back[...] = self._clear_value if value is None else value

    def get_attr(self, slot: int) -> np.ndarray | None:
        if slot != 0:
            return None
        return self._color

    def set_attr(self, slot: int, value: Any) -> None:
        if slot != 0:
            return
        if value is None:
            self._color = None
            return
        color = np.asarray(value, dtype=self._dtype)
        if color.shape != self._pixel_shape:
            raise ValueError(
                f"画素の shape が一致しない: expected={self._pixel_shape}, got={color.shape}"
            )
        self._color = color


__all__ = ["SimpleRenderer"]
