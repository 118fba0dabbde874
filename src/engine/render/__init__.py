"""
どこで: `engine.render` サブパッケージ。
何を: 描画ホストとの契約（RenderSink/Group/Shape/CoordinateMapper）と、そのインメモリ実装。
なぜ: ゲージの合成ロジックを特定の描画基盤から切り離し、注入された描画先へ出力するため。
"""

from .memory import MemoryContainer, MemoryGroup, MemoryShape, RectCoordinate
from .types import (
    AnimationError,
    AnimationSpec,
    ClipCircle,
    CoordinateMapper,
    Group,
    RenderSink,
    Shape,
)

__all__ = [
    "AnimationError",
    "AnimationSpec",
    "ClipCircle",
    "CoordinateMapper",
    "Group",
    "RenderSink",
    "Shape",
    "MemoryContainer",
    "MemoryGroup",
    "MemoryShape",
    "RectCoordinate",
]
