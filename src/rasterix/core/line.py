"""
どこで: `src/rasterix/core/line.py`。線分プリミティブのラスタライズ。
何を: 浮動小数の 2 端点から中点法で格子点列を遅延生成し、各点に補間重み (f, 1 - f) を付ける。
なぜ: 線分上の属性（色・UV など）を始点/終点から補間できるようにするため。
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from rasterix.core.drawable import Coordinate
from rasterix.core.point import Number, Point2
from rasterix.core.runtime_config import DEGENERATE_LINE_POLICIES, runtime_config

_logger = logging.getLogger(__name__)


def _round_half_away(v: float) -> int:
    """0.5 を 0 から遠い側へ丸める（組み込み round の偶数丸めは使わない）。"""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def _octant(dx: float, dy: float) -> int:
    """(dx, dy) を第 1 象限の x 主導 (0 <= dy <= dx) へ写す八分円番号を返す。"""
    octant = 0
    if dy < 0:
        dx, dy = -dx, -dy
        octant += 4
    if dx < 0:
        dx, dy = dy, -dx
        octant += 2
    if dx < dy:
        octant += 1
    return octant


def _to_octant(octant: int, x: float, y: float) -> tuple[float, float]:
    if octant == 0:
        return x, y
    if octant == 1:
        return y, x
    if octant == 2:
        return y, -x
    if octant == 3:
        return -x, y
    if octant == 4:
        return -x, -y
    if octant == 5:
        return -y, -x
    if octant == 6:
        return -y, x
    return x, -y


def _from_octant(octant: int, x: int, y: int) -> tuple[int, int]:
    if octant == 0:
        return x, y
    if octant == 1:
        return y, x
    if octant == 2:
        return -y, x
    if octant == 3:
        return -x, y
    if octant == 4:
        return -x, -y
    if octant == 5:
        return -y, -x
    if octant == 6:
        return y, -x
    return x, -y


def midpoint(start: Point2, end: Point2) -> Iterator[Point2]:
    """中点法で start から end までの格子点を順に生成する。

    Parameters
    ----------
    start, end : Point2
        浮動小数の端点。どちらも 0.5 を 0 から遠い側へ丸めた格子点から走査する。

    Yields
    ------
    Point2
        始点から終点（含む）までの整数格子点。

    Notes
    -----
    八分円変換で x 主導・右上がりの場合に帰着させ、各ステップで理想直線に
    中心が最も近いセル（E または NE）を選ぶ。NaN/inf を含む端点では何も生成しない。
    """
    if not all(math.isfinite(v) for v in (*start, *end)):
        return
    octant = _octant(end[0] - start[0], end[1] - start[1])
    sx, sy = _to_octant(octant, float(start[0]), float(start[1]))
    ex, ey = _to_octant(octant, float(end[0]), float(end[1]))

    a = -(ey - sy)
    b = ex - sx
    c = sx * ey - ex * sy

    x = _round_half_away(sx)
    y = _round_half_away(sy)
    k = a * (x + 1.0) + b * (y + 0.5) + c
    end_x = _round_half_away(ex)

    while x <= end_x:
        px, py = _from_octant(octant, x, y)
        yield Point2(px, py)
        if k <= 0:
            k += b
            y += 1
        k += a
        x += 1


@dataclass(frozen=True, slots=True)
class Line:
    """2 端点からなる線分プリミティブ。

    Parameters
    ----------
    start, end : Point2
        線分の始点と終点。
    degenerate : str or None, optional
        長さ 0 の線分の扱い。"point" は丸めた始点を重み (0.0, 1.0) で 1 回出し、
        "skip" は何も出さない。None の場合は実行時設定 `raster.degenerate_line` に従う。

    Notes
    -----
    重みは (f, 1 - f)。f は始点からの距離 / 線分長で、始点で 0、終点で 1 になる。
    """

    start: Point2
    end: Point2
    degenerate: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Point2(*self.start))
        object.__setattr__(self, "end", Point2(*self.end))
        if self.degenerate is not None and self.degenerate not in DEGENERATE_LINE_POLICIES:
            raise ValueError(
                f"degenerate は {DEGENERATE_LINE_POLICIES} のいずれかである必要がある: "
                f"got={self.degenerate!r}"
            )

    @classmethod
    def with_points(cls, start: tuple[Number, Number], end: tuple[Number, Number]) -> "Line":
        return cls(Point2(*start), Point2(*end))

    def vertices(self) -> int:
        return 2

    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def _degenerate_policy(self) -> str:
        if self.degenerate is not None:
            return self.degenerate
        return runtime_config().degenerate_line

    def __iter__(self) -> Iterator[Coordinate]:
        length = self.length()
        if length == 0.0:
            policy = self._degenerate_policy()
            _logger.debug("zero-length line at %s (policy=%s)", self.start, policy)
            if policy == "skip":
                return
            for p in midpoint(self.start, self.end):
                yield Coordinate(p, (0.0, 1.0))
            return

        sx, sy = self.start
        len_recip = 1.0 / length
        for p in midpoint(self.start, self.end):
            f = math.hypot(p.x - sx, p.y - sy) * len_recip
            yield Coordinate(p, (f, 1.0 - f))


__all__ = ["Line", "midpoint"]
