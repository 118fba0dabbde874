"""
Headless preview for the liquid fill gauge.

Draws the gauge into an in-memory container and rasterizes one animation
frame to PNG with Matplotlib, so wave density/amplitude can be judged
without a host renderer.

Usage (from repo root):
    python scripts/preview_liquid.py --out screenshots/liquid_preview.png
    python scripts/preview_liquid.py --percent 0.3 --time 1.25 --out screenshots/liquid_t125.png
    python scripts/preview_liquid.py --color steelblue --out screenshots/liquid_css.png

Notes:
    - Uses Matplotlib Agg backend (no window required).
    - Colours are any CSS/Matplotlib colour string the gauge accepts ("#5B8FF9", "red", ...).
    - `--time` [s] advances each wave along its looping translation
      (offset = (t mod duration) / duration * dx).
    - Y axis is flipped to match on-screen orientation (origin top-left).
"""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path

os.environ.setdefault("MPLCONFIGDIR", os.path.join("screenshots", ".mplconfig"))

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
from matplotlib.patches import Circle, Polygon

sys.path.insert(0, str((Path(__file__).resolve().parents[1] / "src")))

from api import GaugeConfig, GaugeRender, MemoryContainer, RectCoordinate  # noqa: E402
from api.liquid import LiquidGauge  # noqa: E402
from engine.core.transform_utils import translation_of  # noqa: E402


_CSS_RGB = re.compile(r"^rgba?\(\s*([^)]*)\)$")


def _mpl_color(value: object) -> tuple[float, float, float, float] | None:
    """CSS 色文字列を Matplotlib の RGBA へ。未指定（None/空/"transparent"）は None。

    `rgb(r, g, b)` / `rgba(r, g, b, a)` は Matplotlib が解釈しないためここで展開する。
    """
    if value is None or value == "" or value == "transparent":
        return None
    if isinstance(value, str):
        m = _CSS_RGB.match(value.strip())
        if m:
            parts = [float(p) for p in m.group(1).split(",")]
            if len(parts) not in (3, 4):
                raise ValueError(f"invalid CSS colour: {value!r}")
            alpha = parts[3] if len(parts) == 4 else 1.0
            return (parts[0] / 255.0, parts[1] / 255.0, parts[2] / 255.0, alpha)
    return to_rgba(value)  # type: ignore[arg-type]


def _frame_offset(shape, t_sec: float) -> float:
    if not shape.animations:
        return 0.0
    spec = shape.animations[0]
    dx, _ = translation_of(spec.matrix)
    phase = (t_sec * 1000.0 % spec.duration_ms) / spec.duration_ms
    return dx * phase


def render_png(result: GaugeRender, size: float, t_sec: float, out: Path) -> Path:
    """描画結果の 1 フレームを PNG に保存して保存先を返す。"""
    geom = result.geometry
    cx, cy = geom.center

    fig, ax = plt.subplots(figsize=(4, 4), dpi=100)
    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    clip = Circle((cx, cy), geom.radius, transform=ax.transData)
    for shape in result.waves:
        face = _mpl_color(shape.attrs.get("fill"))
        if face is None:
            continue
        path = shape.attrs["path"].translate(_frame_offset(shape, t_sec), 0.0)
        for line in path.flatten(samples=12):
            patch = Polygon(
                line, closed=True, facecolor=face[:3], alpha=float(shape.attrs["opacity"])
            )
            patch.set_clip_path(clip)
            ax.add_patch(patch)

    ring = result.ring
    if ring is not None:
        a = ring.attrs
        edge = _mpl_color(a.get("stroke"))
        if edge is not None:
            ax.add_patch(
                Circle(
                    (a["x"], a["y"]),
                    a["r"],
                    fill=False,
                    edgecolor=edge[:3],
                    linewidth=float(a.get("lineWidth", 2)),
                )
            )

    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out)
    plt.close(fig)
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Rasterize one liquid gauge frame to PNG")
    ap.add_argument("--percent", type=float, default=0.7)
    ap.add_argument("--size", type=float, default=400.0)
    ap.add_argument("--time", type=float, default=0.0, help="animation time [s]")
    ap.add_argument("--color", default="#5B8FF9", help="CSS colour; empty string for none")
    ap.add_argument("--out", type=Path, default=Path("screenshots") / "liquid_preview.png")
    args = ap.parse_args(argv)

    cfg = GaugeConfig(points=((0.0, 0.5), (1.0, args.percent)), color=args.color or None)
    result = LiquidGauge(cfg).render(
        MemoryContainer(), RectCoordinate(0, 0, args.size, args.size)
    )
    out = render_png(result, args.size, args.time, args.out)
    print(f"saved: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
