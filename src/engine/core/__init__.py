"""
どこで: `engine.core` サブパッケージ。
何を: 描画パス `Path`（MoveTo/CubicTo/LineTo/ClosePath）と 2D 同次変換ユーティリティを提供。
なぜ: 形状生成（shapes）とホスト出力（render/export）が同じ幾何表現を共有するため。
"""

from .path import ClosePath, CubicTo, LineTo, MoveTo, Path, PathCommand
from .transform_utils import apply_matrix, translation_matrix

__all__ = [
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "Path",
    "PathCommand",
    "apply_matrix",
    "translation_matrix",
]
