"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255, CSS 文字列）を一元化。
なぜ: ゲージ設定と SVG 出力で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def _looks_like_hex(s: str) -> bool:
    t = s.strip()
    return t.startswith("#") or t.lower().startswith("0x")


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RGB", "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RGB, RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> tuple[float, float, float, float]:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise TypeError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0)
    # まず 0–1 とみなし、範囲外を含むなら 0–255 として扱う
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    if len(seq) == 3:
        fseq[3] = 255.0
    r8, g8, b8, a8 = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r8 / 255.0, g8 / 255.0, b8 / 255.0, a8 / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def to_css_color(value: object) -> str:
    """色を CSS 色文字列へ変換する。

    - Hex 以外の文字列（"transparent", "red", "rgb(...)" 等）は検証せずそのまま返す。
    - Hex 文字列は検証のみ行い、表記は保持する（"#f00" は "#f00" のまま、"0x" 接頭辞は "#" へ）。
    - タプル/リストは不透明なら "#rrggbb"、半透明なら "rgba(r, g, b, a)"。
    """
    if isinstance(value, str):
        t = value.strip()
        if _looks_like_hex(t):
            parse_hex_color_str(t)
            return t if t.startswith("#") else "#" + t[2:]
        return t
    r, g, b, a = to_u8_rgba(value)
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {a / 255.0:.3g})"


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_css_color",
]
