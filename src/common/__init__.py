"""
どこで: `common` パッケージ。
何を: 各層で使う軽量ユーティリティ（Point 型、線形補間、環境設定、ロギング）。
なぜ: 最内層に共通基盤を分離し、依存の向きを単純化するため。
"""

from .interp import lerp, stagger_factor
from .types import BBox, Point

__all__ = [
    "BBox",
    "Point",
    "lerp",
    "stagger_factor",
]
