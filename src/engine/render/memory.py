"""
どこで: `engine.render.memory`。
何を: `engine.render.types` の契約を満たすインメモリ実装（座標系・コンテナ・グループ・シェイプ）。
なぜ: 実ホスト無しでゲージ描画を最後まで実行し、テスト/SVG 出力で結果を検査できるようにするため。

注意:
- 描画そのものは行わない。追加された要素とアニメーション要求を挿入順に記録するだけ。
- `attached=False` のコンテナ配下では描画面が無い扱いとなり、`animate` は `AnimationError` を返す。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Union

from common.types import BBox, Point
from engine.core.path import Path

from .types import AnimationError, AnimationSpec, Attrs, ClipCircle


@dataclass(frozen=True)
class RectCoordinate:
    """単位正方形 → キャンバス矩形の直交座標系（単位 y=0 が矩形の下端）。"""

    x: float
    y: float
    width: float
    height: float

    def parse_point(self, x: float, y: float) -> Point:
        return Point(self.x + x * self.width, self.y + self.height - y * self.height)


class MemoryShape:
    """記録用シェイプ。`kind` は "circle" または "path"。"""

    def __init__(self, kind: str, name: str, attrs: Mapping[str, Any], owner: "_Node") -> None:
        self.kind = kind
        self.name = name
        self.attrs: Attrs = dict(attrs)
        self.animations: list[AnimationSpec] = []
        self._owner = owner

    def __repr__(self) -> str:
        return f"MemoryShape(kind={self.kind!r}, name={self.name!r})"

    def get_bbox(self) -> BBox:
        if self.kind == "circle":
            a = self.attrs
            return BBox.around_circle(float(a["x"]), float(a["y"]), float(a["r"]))
        if self.kind == "path":
            path = self.attrs["path"]
            if not isinstance(path, Path):
                path = Path.from_list(path)
            return path.bounds()
        raise ValueError(f"bbox を計算できない kind です: {self.kind!r}")

    def animate(self, spec: AnimationSpec) -> AnimationError | None:
        if not self._owner.is_attached:
            return AnimationError(self.name, "no rendering surface")
        self.animations.append(spec)
        return None


class _Node:
    """子要素リストを持つ内部基底（コンテナ/グループ共通）。"""

    def __init__(self, name: str, parent: "_Node | None") -> None:
        self.name = name
        self.children: list[Union[MemoryShape, "MemoryGroup"]] = []
        self._parent = parent

    @property
    def is_attached(self) -> bool:
        node: _Node | None = self
        while node._parent is not None:
            node = node._parent
        return isinstance(node, MemoryContainer) and node.attached

    def add_group(self, name: str) -> "MemoryGroup":
        group = MemoryGroup(name, self)
        self.children.append(group)
        return group

    def add_shape(self, kind: str, *, name: str, attrs: Mapping[str, Any]) -> MemoryShape:
        shape = MemoryShape(kind, name, attrs, self)
        self.children.append(shape)
        return shape

    def iter_shapes(self) -> Iterator[MemoryShape]:
        """配下のシェイプを深さ優先・挿入順に列挙する（クリップ形状は含まない）。"""
        for child in self.children:
            if isinstance(child, MemoryGroup):
                yield from child.iter_shapes()
            else:
                yield child

    def find(self, name: str) -> MemoryShape | None:
        return next((s for s in self.iter_shapes() if s.name == name), None)


class MemoryGroup(_Node):
    def __init__(self, name: str, parent: _Node) -> None:
        super().__init__(name, parent)
        self.clip: ClipCircle | None = None
        self._clip_shape: MemoryShape | None = None

    def __repr__(self) -> str:
        return f"MemoryGroup(name={self.name!r}, children={len(self.children)})"

    def set_clip(self, clip: ClipCircle) -> None:
        self.clip = clip
        self._clip_shape = MemoryShape(clip.kind, f"{self.name}-clip", clip.attrs(), self)

    def get_clip_shape(self) -> MemoryShape | None:
        return self._clip_shape


class MemoryContainer(_Node):
    """ルートコンテナ。`attached=False` でオフスクリーン（描画面なし）を模擬する。"""

    def __init__(self, name: str = "root", *, attached: bool = True) -> None:
        super().__init__(name, None)
        self.attached = attached

    def __repr__(self) -> str:
        return f"MemoryContainer(name={self.name!r}, attached={self.attached})"

    def clear(self) -> None:
        """子要素をすべて破棄する（再描画前にホストが行う後始末）。"""
        self.children.clear()


__all__ = ["RectCoordinate", "MemoryShape", "MemoryGroup", "MemoryContainer"]
