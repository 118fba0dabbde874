"""
どこで: `effects` 層。
何を: 水波の塗り属性と外周リングの線属性を、呼び出し側 style/color から解決する非幾何エフェクト。
なぜ: 既定値・色由来値・明示 style の優先順位（明示 > 色 > 既定）を一箇所で保証するため。

注意:
- 入力の style は変更しない。常に新しい dict を返す。
- キーはホストの属性名（`fillOpacity`, `lineWidth`, `strokeOpacity` など）をそのまま用いる。
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Mapping

StyleAttrs = dict[str, Any]

LINE_DEFAULTS: Mapping[str, Any] = {
    "fill": "#fff",
    "fillOpacity": 0,
    "lineWidth": 2,
}


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def fill_attrs(style: Mapping[str, Any] | None = None, color: str | None = None) -> StyleAttrs:
    """水波の塗り属性を返す。

    挙動:
    - `{"opacity": 1}` に style を上書きマージ。
    - color があり、style が `fill` を（真値で）指定していなければ `fill = color`。
    """
    attrs: StyleAttrs = {"opacity": 1, **(style or {})}
    if color and not attrs.get("fill"):
        attrs["fill"] = color
    return attrs


def line_attrs(
    style: Mapping[str, Any] | None = None,
    color: str | None = None,
    opacity: float | None = None,
) -> StyleAttrs:
    """外周リングの線属性を返す。

    挙動:
    - `LINE_DEFAULTS`（白・塗り透明・線幅 2）に style を上書きマージ。
    - color があり、style が `stroke` を指定していなければ `stroke = color`。
    - opacity が数値なら `opacity` と `strokeOpacity` を同値で上書き（style より優先）。
    """
    attrs: StyleAttrs = {**LINE_DEFAULTS, **(style or {})}
    if color and not attrs.get("stroke"):
        attrs["stroke"] = color
    if _is_number(opacity):
        attrs["opacity"] = attrs["strokeOpacity"] = opacity
    return attrs


__all__ = ["StyleAttrs", "LINE_DEFAULTS", "fill_attrs", "line_attrs"]
