"""
どこで: `src/rasterix/core/interp.py`。
何を: 線分/三角形の補間重みで頂点属性（色・法線・UV など）をブレンドする。
なぜ: ラスタライザが返す重みを、呼び出し側が同じ書き方で使えるようにするため。
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def interpolate(weights: Sequence[float], values: Sequence[object] | np.ndarray) -> np.ndarray:
    """重み付き和 ``sum_i weights[i] * values[i]`` を返す。

    Parameters
    ----------
    weights : Sequence[float]
        Coordinate.weights（長さ 2 または 3）。
    values : Sequence or np.ndarray
        頂点ごとの属性。shape (N,) のスカラー列か (N, C) のベクトル列。

    Returns
    -------
    np.ndarray
        float64 の補間結果。スカラー属性なら 0 次元配列、ベクトル属性なら shape (C,)。

    Raises
    ------
    ValueError
        weights と values の頂点数が一致しない場合。
    """
    w = np.asarray(weights, dtype=np.float64)
    v = np.asarray(values, dtype=np.float64)
    if w.ndim != 1:
        raise ValueError(f"weights は 1 次元である必要がある: shape={w.shape}")
    if v.ndim == 0 or v.shape[0] != w.shape[0]:
        raise ValueError(
            f"weights と values の頂点数が一致しない: weights={w.shape}, values={v.shape}"
        )
    return np.tensordot(w, v, axes=1)


__all__ = ["interpolate"]
