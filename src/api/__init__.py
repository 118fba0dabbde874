"""
どこで: `api` 入口（高レベル公開 API）。
何を: ゲージ設定 `GaugeConfig`・合成器 `LiquidGauge`/`draw_liquid_gauge` と、インメモリ描画先を再輸出。
なぜ: 利用者が単一名前空間から設定→描画→SVG 出力まで完結できるようにするため。

Usage:
    from api import GaugeConfig, MemoryContainer, RectCoordinate, draw_liquid_gauge, render_svg

    cfg = GaugeConfig.from_mapping({"points": [{"x": 0, "y": 0.5}, {"x": 1, "y": 0.7}], "color": "#5B8FF9"})
    root = draw_liquid_gauge(cfg, MemoryContainer(), RectCoordinate(0, 0, 400, 400))
    svg = render_svg(root)
"""

from engine.core.path import Path
from engine.export.svg import SvgParams, render_svg, write_svg
from engine.render.memory import MemoryContainer, RectCoordinate

from .gauge_config import GaugeConfig
from .liquid import (
    GaugeGeometry,
    GaugeRender,
    LiquidGauge,
    WaveInstance,
    draw_liquid_gauge,
    resolve_geometry,
    wave_instances,
)

__all__ = [
    # メインAPI
    "GaugeConfig",
    "LiquidGauge",
    "draw_liquid_gauge",
    # 補助（検査/拡張向け）
    "GaugeGeometry",
    "GaugeRender",
    "WaveInstance",
    "resolve_geometry",
    "wave_instances",
    "Path",
    # インメモリ描画先と出力
    "MemoryContainer",
    "RectCoordinate",
    "SvgParams",
    "render_svg",
    "write_svg",
]

# バージョン情報
__version__ = "2026.10"
