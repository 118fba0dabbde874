"""
どこで: `effects` パッケージ。
何を: 幾何を変えずに描画属性を解決するスタイルエフェクト（水波の塗り/リングの線）。
なぜ: 生成/加工/描画の責務分離に従い、属性の優先順位ルールを一箇所に集約するため。
"""

from .style import LINE_DEFAULTS, StyleAttrs, fill_attrs, line_attrs

__all__ = ["LINE_DEFAULTS", "StyleAttrs", "fill_attrs", "line_attrs"]
