"""
どこで: `api.gauge_config`
何を: ゲージ描画の入力設定 `GaugeConfig`（型付き・境界で 1 度だけ検証）と、その既定値の解決。
なぜ: ホストの緩い設定辞書をそのまま奥へ流さず、既定値/型/範囲を入口で確定させるため。

既定値の優先順:
- `GaugeConfig` の明示フィールド > `configs/default.yaml`（+ ルート `config.yaml`）の `liquid:` > 組込み既定。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from numbers import Real
from typing import Any, Iterable, Mapping

from common.types import Point
from util.color import to_css_color
from util.utils import load_section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GaugeDefaults:
    radius_ratio: float = 0.9
    wave_count: int = 3
    duration_ms: float = 5000.0


def _positive_float(value: object, name: str) -> float:
    if not isinstance(value, Real) or isinstance(value, bool):
        raise TypeError(f"{name} は数値である必要があります: got {value!r}")
    v = float(value)
    if not math.isfinite(v) or v <= 0.0:
        raise ValueError(f"{name} は正の有限値である必要があります: got {value!r}")
    return v


def _non_negative_int(value: object, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} は整数である必要があります: got {value!r}")
    if value < 0:
        raise ValueError(f"{name} は 0 以上である必要があります: got {value!r}")
    return value


@lru_cache(maxsize=1)
def load_defaults() -> GaugeDefaults:
    """YAML の `liquid:` セクションから既定値を読む（不正値は警告して組込み既定へ）。"""
    section = load_section("liquid")
    builtin = GaugeDefaults()
    values: dict[str, Any] = {}
    for key, check in (
        ("radius_ratio", _positive_float),
        ("wave_count", _non_negative_int),
        ("duration_ms", _positive_float),
    ):
        if key not in section:
            continue
        try:
            values[key] = check(section[key], f"liquid.{key}")
        except (TypeError, ValueError) as exc:
            logger.warning("ignoring config value: %s", exc)
    return GaugeDefaults(
        radius_ratio=values.get("radius_ratio", builtin.radius_ratio),
        wave_count=values.get("wave_count", builtin.wave_count),
        duration_ms=values.get("duration_ms", builtin.duration_ms),
    )


def _to_point(value: object) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise ValueError(f"点には x と y が必要です: got {value!r}")
        return Point(float(value["x"]), float(value["y"]))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Point(float(value[0]), float(value[1]))
    raise TypeError(f"点として解釈できません: {value!r}")


@dataclass(frozen=True)
class GaugeConfig:
    """ゲージの入力設定。

    属性:
        points: 正規化座標の入力点列（2 点以上）。全点の最小 x で水平範囲、2 点目の y で水位を決める。
        color: 水波の塗り/リングの線に使う色（CSS 文字列または RGB(A) タプル。CSS 文字列へ正規化）。
        style: 明示スタイル（`fill`/`stroke`/`opacity` など。色より優先）。
        radius_ratio: 半径比（高さ方向の上限に掛ける係数）。None で既定値（0.9）。
        wave_count: 水波の本数。None で既定値（3）。
        duration_ms: 先頭の水波の 1 周期時間。以降は 0.7 倍まで段階的に短くなる。None で既定値（5000）。
        opacity: 外周リングの不透明度（`opacity`/`strokeOpacity` を一括上書き）。
        animate: False で水波のループアニメーションを要求しない。
    """

    points: tuple[Point, ...]
    color: str | None = None
    style: Mapping[str, Any] = field(default_factory=dict)
    radius_ratio: float | None = None
    wave_count: int | None = None
    duration_ms: float | None = None
    opacity: float | None = None
    animate: bool = True

    def __post_init__(self) -> None:
        defaults = load_defaults()
        points = tuple(_to_point(p) for p in self.points)
        if len(points) < 2:
            raise ValueError(f"points には 2 点以上が必要です: got {len(points)}")
        if not isinstance(self.style, Mapping):
            raise TypeError(f"style は Mapping である必要があります: got {type(self.style)!r}")
        # style.opacity は水波の不透明度の基準値（数値）
        style_opacity = self.style.get("opacity", 1)
        if not isinstance(style_opacity, Real) or isinstance(style_opacity, bool):
            raise TypeError(f"style.opacity は数値である必要があります: got {style_opacity!r}")
        color = None if self.color is None else to_css_color(self.color)

        radius_ratio = (
            defaults.radius_ratio
            if self.radius_ratio is None
            else _positive_float(self.radius_ratio, "radius_ratio")
        )
        wave_count = (
            defaults.wave_count
            if self.wave_count is None
            else _non_negative_int(self.wave_count, "wave_count")
        )
        duration_ms = (
            defaults.duration_ms
            if self.duration_ms is None
            else _positive_float(self.duration_ms, "duration_ms")
        )
        if self.opacity is not None and (
            not isinstance(self.opacity, Real) or isinstance(self.opacity, bool)
        ):
            raise TypeError(f"opacity は数値である必要があります: got {self.opacity!r}")

        # frozen のため object.__setattr__ で正規化値を確定する
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "style", dict(self.style))
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "radius_ratio", radius_ratio)
        object.__setattr__(self, "wave_count", wave_count)
        object.__setattr__(self, "duration_ms", duration_ms)
        object.__setattr__(self, "animate", bool(self.animate))

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "GaugeConfig":
        """ホスト形式の設定辞書から生成する。

        受理キー: `points`, `color`, `style`, `customInfo.radius`（または `custom_info`/`radius_ratio`）,
        `waveCount`/`wave_count`, `duration`/`durationMs`/`duration_ms`, `opacity`, `animate`。
        それ以外のキーは無視する（ホストが付与する描画用キーを許容するため）。
        """
        if not isinstance(cfg, Mapping):
            raise TypeError(f"設定は Mapping である必要があります: got {type(cfg)!r}")
        if "points" not in cfg:
            raise ValueError("設定に points がありません")

        custom = cfg.get("customInfo", cfg.get("custom_info")) or {}
        if not isinstance(custom, Mapping):
            raise TypeError(f"customInfo は Mapping である必要があります: got {custom!r}")
        radius_ratio = custom.get("radius", cfg.get("radius_ratio"))
        # 数値以外の radius は未指定扱い（既定値へ）
        if radius_ratio is not None and (
            not isinstance(radius_ratio, Real) or isinstance(radius_ratio, bool)
        ):
            logger.debug("non-numeric customInfo.radius ignored: %r", radius_ratio)
            radius_ratio = None

        known = {
            "points", "color", "style", "customInfo", "custom_info", "radius_ratio",
            "waveCount", "wave_count", "duration", "durationMs", "duration_ms",
            "opacity", "animate",
        }  # fmt: skip
        extra = sorted(str(k) for k in cfg if k not in known)
        if extra:
            logger.debug("unused gauge config keys: %s", extra)

        points: Iterable[object] = cfg["points"]
        return cls(
            points=tuple(points),
            color=cfg.get("color"),
            style=cfg.get("style") or {},
            radius_ratio=radius_ratio,
            wave_count=cfg.get("waveCount", cfg.get("wave_count")),
            duration_ms=cfg.get("durationMs", cfg.get("duration_ms", cfg.get("duration"))),
            opacity=cfg.get("opacity"),
            animate=cfg.get("animate", True),
        )


__all__ = ["GaugeConfig", "GaugeDefaults", "load_defaults"]
