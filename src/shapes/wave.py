"""
水波パス（ベジェ曲線によるサイン波近似）

- サイン波 1 周期を 4 本の 3 次ベジェ（1/4 周期ずつ）で近似し、円形クリップ内を覆う閉パスを生成します。
- 生成したパスは水位線から上へ波を描き、下端は中心から `radius` 下まで塗りつぶします。

近似の考え方（1/4 周期 a→d の制御点 a-b-c-d、k = 波長 / 4π）:

             c *----* d
        b *
          |
    ... a * ..................

    a: (0, 0), b: (k, A/2), c: (2k, A), d: (λ/4, A)

- stage 0: 0 → +A（上り）、stage 1: +A → 0（下り）、
  stage 2: 0 → -A（下り）、stage 3: -A → 0（上り）。

パラメータ:
- wave_length [px] > 0、amplitude [px] >= 0、phase [rad]（内部で (-2π, 0] に正規化）。

注意:
- 半径/波長の正値性は呼び出し側の前提条件であり、ここでは検査しません。
"""

from __future__ import annotations

import math

from common.types import Point
from engine.core.path import ClosePath, CubicTo, LineTo, MoveTo, Path, PathCommand

TWO_PI = 2.0 * math.pi


def wave_segment(
    x: float, stage: int, wave_length: float, amplitude: float
) -> tuple[Point, Point, Point]:
    """1/4 周期分のベジェ制御点 2 つと終点を返す。

    引数:
        x: 区間左端のローカル x
        stage: 0–3（周期内の位置。4 以上は剰余で扱う）
        wave_length: 波長
        amplitude: 振幅（y は上向き正、基準線 0）

    返り値:
        (制御点1, 制御点2, 終点)
    """
    k = wave_length / (4.0 * math.pi)
    quarter = x + wave_length / 4.0
    stage = stage % 4
    sign = 1.0 if stage < 2 else -1.0
    a = sign * amplitude

    if stage in (0, 2):
        return (
            Point(x + k, a / 2.0),
            Point(x + 2.0 * k, a),
            Point(quarter, a),
        )
    return (
        Point(x + k * (math.pi - 2.0), a),
        Point(x + k * (math.pi - 1.0), a / 2.0),
        Point(quarter, 0.0),
    )


def normalize_phase(phase: float) -> float:
    """位相を半開区間 (-2π, 0] に写像する（2π の剰余）。"""
    p = math.fmod(phase, TWO_PI)
    if p > 0.0:
        p -= TWO_PI
    if p <= -TWO_PI:
        p += TWO_PI
    return p


def wave_curve_count(radius: float, wave_length: float) -> int:
    """直径の 2 倍を覆う 1/4 周期区間の本数（偶数へ切り上げ）。"""
    return math.ceil((2.0 * radius / wave_length) * 4.0) * 2


def wave_path(
    radius: float,
    water_level: float,
    wave_length: float,
    phase: float,
    amplitude: float,
    cx: float,
    cy: float,
) -> Path:
    """水波の閉パスを生成する。

    引数:
        radius: 覆う範囲の半径（ゲージ側では余裕を持たせて拡大した値を渡す）
        water_level: 水位線のキャンバス y
        wave_length: 波長
        phase: 位相（ラジアン）
        amplitude: 振幅
        cx, cy: 円の中心

    返り値:
        Path: MoveTo → CubicTo × N → LineTo × 2 → ClosePath
    """
    offset = normalize_phase(phase) / TWO_PI * wave_length
    curves = wave_curve_count(radius, wave_length)

    # 左へ直径 1 つ分余分にずらし、平行移動アニメーション中も端が見えないようにする
    left = cx - radius + offset - radius * 2.0
    bottom = cy + radius

    cmds: list[PathCommand] = [MoveTo(left, water_level)]

    wave_right = 0.0
    for c in range(curves):
        p1, p2, p3 = wave_segment(c * wave_length / 4.0, c % 4, wave_length, amplitude)
        cmds.append(
            CubicTo(
                p1.x + left,
                water_level - p1.y,
                p2.x + left,
                water_level - p2.y,
                p3.x + left,
                water_level - p3.y,
            )
        )
        wave_right = p3.x

    cmds.append(LineTo(wave_right + left, bottom))
    cmds.append(LineTo(left, bottom))
    cmds.append(ClosePath())
    return Path(cmds)


__all__ = [
    "TWO_PI",
    "wave_segment",
    "normalize_phase",
    "wave_curve_count",
    "wave_path",
]
