"""
どこで: `common.interp`
何を: 線形補間 `lerp` と、インデックス→補間係数 `stagger_factor`。
なぜ: 複数の水波に振幅/不透明度/周期を段階的に割り振る計算を一箇所に集約するため。
"""

from __future__ import annotations


def lerp(a: float, b: float, factor: float) -> float:
    """`a`→`b` を `factor` で線形補間する（factor は 0..1 を想定、外挿もそのまま許容）。"""
    return (1.0 - factor) * a + factor * b


def stagger_factor(index: int, count: int) -> float:
    """`count` 個中 `index` 番目の補間係数 `index/(count-1)`。`count<=1` では 0。"""
    if count <= 1:
        return 0.0
    return index / (count - 1)


__all__ = ["lerp", "stagger_factor"]
