"""
どこで: `engine.render` 型定義。
何を: ゲージ描画が依存するホスト側の契約（Protocol）と、受け渡し用の軽量データクラス。
なぜ: グローバルなシェイプ登録に頼らず、描画先（コンテナ/座標系/アニメーション）を注入可能にするため。

契約:
- `CoordinateMapper.parse_point(x, y)`: 単位正方形の座標をキャンバス座標へ写像。
- `RenderSink.add_group/add_shape`: 子要素の追加（挿入順に描画）。
- `Group.set_clip/get_clip_shape`: 円形クリップの設定と、bbox 問い合わせ用の参照取得。
- `Shape.animate(spec)`: 失敗時は例外ではなく `AnimationError` を返す（成功時 None）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

import numpy as np

from common.types import BBox, Point

Attrs = dict[str, Any]


@dataclass(frozen=True)
class ClipCircle:
    """円形クリップ領域。"""

    x: float
    y: float
    r: float

    @property
    def kind(self) -> str:
        return "circle"

    def attrs(self) -> Attrs:
        return {"x": self.x, "y": self.y, "r": self.r}


@dataclass(frozen=True)
class AnimationSpec:
    """ホストへ要求するアニメーション。

    `matrix` は終端状態の 3x3 変換行列（`engine.core.transform_utils` 規約）。
    `repeat=True` で終端到達後に初期状態へ戻って無限に繰り返す。
    """

    matrix: np.ndarray = field(compare=False)
    duration_ms: float
    repeat: bool = False


@dataclass(frozen=True)
class AnimationError:
    """アニメーション開始に失敗したことを表す値（例外としては送出しない）。"""

    shape_name: str
    reason: str

    def __str__(self) -> str:
        return f"animation failed for '{self.shape_name}': {self.reason}"


@runtime_checkable
class CoordinateMapper(Protocol):
    def parse_point(self, x: float, y: float) -> Point: ...


@runtime_checkable
class Shape(Protocol):
    name: str
    kind: str
    attrs: Attrs

    def get_bbox(self) -> BBox: ...

    def animate(self, spec: AnimationSpec) -> AnimationError | None: ...


@runtime_checkable
class RenderSink(Protocol):
    def add_group(self, name: str) -> "Group": ...

    def add_shape(self, kind: str, *, name: str, attrs: Mapping[str, Any]) -> Shape: ...


@runtime_checkable
class Group(RenderSink, Protocol):
    def set_clip(self, clip: ClipCircle) -> None: ...

    def get_clip_shape(self) -> Shape | None: ...


__all__ = [
    "Attrs",
    "ClipCircle",
    "AnimationSpec",
    "AnimationError",
    "CoordinateMapper",
    "Shape",
    "RenderSink",
    "Group",
]
