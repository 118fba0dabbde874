"""
どこで: `api.liquid`（ゲージ合成の入口）。
何を: 設定と座標系からゲージ形状（円クリップ内の水波 N 本 + 外周リング）を組み立て、描画先へ出力する。
なぜ: 水波パス生成（shapes）と属性解決（effects）を束ね、ホストの描画コンテナへ一括で渡すため。

処理の流れ:
1. 中心/半径/水位を `CoordinateMapper` で解決（`resolve_geometry`）。
2. 円クリップ付きグループ "waves" を作成し、クリップ形状の bbox を基準寸法にする。
3. 水波ごとに振幅/不透明度/周期をずらしてパスを追加し、水平移動のループアニメーションを要求。
4. 最後に外周リング "wrap" を重ねる。

注意:
- 呼び出し間で状態を持たない。再描画は毎回すべてを作り直す（古い要素の破棄はホストの責務）。
- アニメーションの失敗（描画面なし等）は警告ログのみで無視し、静止したゲージとして描画を続ける。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from common import settings
from common.interp import lerp, stagger_factor
from common.types import BBox, Point
from effects.style import fill_attrs, line_attrs
from engine.core.transform_utils import translation_matrix
from engine.render.types import (
    AnimationError,
    AnimationSpec,
    ClipCircle,
    CoordinateMapper,
    Group,
    RenderSink,
    Shape,
)
from shapes.wave import wave_path

from .gauge_config import GaugeConfig

logger = logging.getLogger(__name__)

SinkT = TypeVar("SinkT", bound=RenderSink)

WAVE_GROUP_NAME = "waves"
RING_NAME = "wrap"

# 単位正方形上のゲージ中心
CENTER_UNIT = (0.5, 0.5)
# index 0 → 最後の水波で補間する (先頭, 末尾)
AMPLITUDE_DIVISORS = (56.0, 64.0)
OPACITY_FACTORS = (0.6, 0.3)
DURATION_DECAY = 0.7
# 水波は平行移動しても端が見えないよう、クリップ半径より大きく生成する
WAVE_RADIUS_SCALE = 4.0


@dataclass(frozen=True)
class GaugeGeometry:
    center: Point
    radius: float
    fill_level: float


@dataclass(frozen=True)
class WaveInstance:
    """水波 1 本分のずらし量。振幅は `bbox 幅 / amplitude_divisor`。"""

    index: int
    amplitude_divisor: float
    opacity_factor: float
    duration_ms: float


@dataclass
class GaugeRender(Generic[SinkT]):
    """1 回の描画結果。`animation_errors` は無視されたアニメーション失敗の一覧。"""

    container: SinkT
    geometry: GaugeGeometry
    waves: list[Shape] = field(default_factory=list)
    ring: Shape | None = None
    animation_errors: list[AnimationError] = field(default_factory=list)


def wave_instances(count: int, duration_ms: float = 5000.0) -> list[WaveInstance]:
    """`count` 本の水波のずらし量を返す（index が進むほど低振幅・淡色・短周期）。"""
    out: list[WaveInstance] = []
    for i in range(count):
        f = stagger_factor(i, count)
        out.append(
            WaveInstance(
                index=i,
                amplitude_divisor=lerp(AMPLITUDE_DIVISORS[0], AMPLITUDE_DIVISORS[1], f),
                opacity_factor=lerp(OPACITY_FACTORS[0], OPACITY_FACTORS[1], f),
                duration_ms=lerp(duration_ms, DURATION_DECAY * duration_ms, f),
            )
        )
    return out


def resolve_geometry(config: GaugeConfig, coordinate: CoordinateMapper) -> GaugeGeometry:
    """中心・半径・水位を解決する。

    - 半径は「中心から最小 x までの水平距離」と「中心高さ × radius_ratio」の小さい方。
    - 水位は `1 - points[1].y`（上流のデータ契約で 0..1 を前提とし、ここでは丸めない）。
    """
    cx, cy = CENTER_UNIT
    min_x = min(p.x for p in config.points)
    center = coordinate.parse_point(cx, cy)
    min_x_point = coordinate.parse_point(min_x, cy)
    half_width = center.x - min_x_point.x
    radius = min(half_width, min_x_point.y * float(config.radius_ratio))
    return GaugeGeometry(center=center, radius=radius, fill_level=1.0 - config.points[1].y)


class LiquidGauge:
    """液体充填ゲージの合成器。設定を保持し、`draw` ごとに全要素を生成する。"""

    def __init__(self, config: GaugeConfig) -> None:
        self.config = config

    def draw(self, container: SinkT, coordinate: CoordinateMapper) -> SinkT:
        return self.render(container, coordinate).container

    def render(self, container: SinkT, coordinate: CoordinateMapper) -> GaugeRender[SinkT]:
        cfg = self.config
        geom = resolve_geometry(cfg, coordinate)
        result: GaugeRender[SinkT] = GaugeRender(container=container, geometry=geom)
        cx, cy = geom.center

        waves = container.add_group(WAVE_GROUP_NAME)
        waves.set_clip(ClipCircle(cx, cy, geom.radius))
        clip = waves.get_clip_shape()
        bbox = clip.get_bbox() if clip is not None else BBox.around_circle(cx, cy, geom.radius)

        self._add_waves(waves, geom, bbox, result)

        ring_attrs: dict[str, Any] = {
            **line_attrs(cfg.style, cfg.color, cfg.opacity),
            "x": cx,
            "y": cy,
            "r": geom.radius,
            "fill": "transparent",
        }
        result.ring = container.add_shape("circle", name=RING_NAME, attrs=ring_attrs)
        return result

    def _add_waves(
        self, group: Group, geom: GaugeGeometry, bbox: BBox, result: GaugeRender[Any]
    ) -> None:
        cfg = self.config
        attrs = fill_attrs(cfg.style, cfg.color)
        fill = attrs.get("fill")
        base_opacity = float(attrs.get("opacity", 1))
        width = bbox.width
        water_level = bbox.min_y + bbox.height * geom.fill_level
        animate = cfg.animate and not settings.get().DISABLE_ANIMATION

        for inst in wave_instances(int(cfg.wave_count), float(cfg.duration_ms)):
            path = wave_path(
                geom.radius * WAVE_RADIUS_SCALE,
                water_level,
                width / 4.0,
                0.0,
                width / inst.amplitude_divisor,
                geom.center.x,
                geom.center.y,
            )
            shape = group.add_shape(
                "path",
                name=f"wave-path-{inst.index}",
                attrs={
                    "path": path,
                    "fill": fill,
                    "opacity": inst.opacity_factor * base_opacity,
                },
            )
            result.waves.append(shape)
            if not animate:
                continue

            spec = AnimationSpec(
                matrix=translation_matrix(width / 2.0, 0.0),
                duration_ms=inst.duration_ms,
                repeat=True,
            )
            err = shape.animate(spec)
            if err is not None:
                logger.warning("%s; wave stays static", err)
                result.animation_errors.append(err)


def draw_liquid_gauge(
    config: GaugeConfig, container: SinkT, coordinate: CoordinateMapper
) -> SinkT:
    """`LiquidGauge(config).draw(container, coordinate)` の関数版。"""
    return LiquidGauge(config).draw(container, coordinate)


__all__ = [
    "GaugeGeometry",
    "WaveInstance",
    "GaugeRender",
    "LiquidGauge",
    "wave_instances",
    "resolve_geometry",
    "draw_liquid_gauge",
]
