"""
どこで: `common` の型定義。
何を: キャンバス座標の 2D 点 `Point` と矩形 `BBox`。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    """ホストキャンバス座標系の点（y 軸は下向き）。"""

    x: float
    y: float


class BBox(NamedTuple):
    """軸平行バウンディングボックス（ホストの `getBBox()` と同じ minX/maxX/minY/maxY 構成）。"""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def around_circle(cls, cx: float, cy: float, r: float) -> "BBox":
        return cls(cx - r, cx + r, cy - r, cy + r)


__all__ = ["Point", "BBox"]
