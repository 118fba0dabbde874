"""
どこで: `shapes` パッケージ。
何を: ゲージを構成する形状（ベジェ近似の水波パス）の生成関数を公開する。
なぜ: 生成ステージを合成層（api）から分離し、純関数として単体で検査できるようにするため。
"""

from .wave import normalize_phase, wave_curve_count, wave_path, wave_segment

__all__ = [
    "wave_segment",
    "wave_path",
    "wave_curve_count",
    "normalize_phase",
]
