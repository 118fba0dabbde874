"""
どこで: `engine.core` の変換ユーティリティ。
何を: 2D 同次座標（3x3）の平行移動/拡大行列の生成と、点列への適用。
なぜ: ホストへ渡すアニメーション行列と `Path.transform` が同一の行列規約を共有するため。

規約:
- 行列は列ベクトル前提（`p' = M @ [x, y, 1]^T`）。平行移動成分は `M[0, 2], M[1, 2]`。
"""

from __future__ import annotations

import numpy as np


def identity() -> np.ndarray:
    """単位行列（float64, 3x3）。"""
    return np.eye(3, dtype=np.float64)


def translation_matrix(dx: float, dy: float) -> np.ndarray:
    """平行移動行列を返す。"""
    m = identity()
    m[0, 2] = float(dx)
    m[1, 2] = float(dy)
    return m


def scale_matrix(sx: float, sy: float, center: tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """`center` 基準の拡大縮小行列を返す。"""
    cx, cy = center
    m = identity()
    m[0, 0] = float(sx)
    m[1, 1] = float(sy)
    m[0, 2] = cx - sx * cx
    m[1, 2] = cy - sy * cy
    return m


def compose(*matrices: np.ndarray) -> np.ndarray:
    """左から順に適用される変換を 1 つの行列に合成する（`compose(a, b)` は a→b の順）。"""
    out = identity()
    for m in matrices:
        out = np.asarray(m, dtype=np.float64) @ out
    return out


def apply_matrix(points: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """`(N, 2)` 点列に行列を適用した新しい配列を返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"matrix は形状 (3, 3) である必要があります: got {m.shape}")
    return pts @ m[:2, :2].T + m[:2, 2]


def translation_of(matrix: np.ndarray) -> tuple[float, float]:
    """行列の平行移動成分 `(dx, dy)` を返す。"""
    m = np.asarray(matrix, dtype=np.float64)
    return float(m[0, 2]), float(m[1, 2])


__all__ = [
    "identity",
    "translation_matrix",
    "scale_matrix",
    "compose",
    "apply_matrix",
    "translation_of",
]
