"""
液体充填ゲージのデモ（SVG 出力）。

Usage (from repo root):
    python demo/liquid_gauge.py --percent 0.7 --out screenshots/liquid_70.svg
    python demo/liquid_gauge.py --percent 0.25 --waves 5 --color "#30BF78" --size 300
    python demo/liquid_gauge.py --static --out screenshots/liquid_static.svg

Notes:
    - `--percent` は水位（0..1）。入力点 2 点目の y としてゲージへ渡す。
    - `--static` で水波のループアニメーションを要求しない。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str((Path(__file__).resolve().parents[1] / "src")))

from api import (  # noqa: E402  # after sys.path tweak
    GaugeConfig,
    MemoryContainer,
    RectCoordinate,
    SvgParams,
    draw_liquid_gauge,
    write_svg,
)
from common.logging import setup_default_logging  # noqa: E402

logger = logging.getLogger("demo.liquid_gauge")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a liquid fill gauge to SVG")
    p.add_argument("--percent", type=float, default=0.7, help="fill level 0..1")
    p.add_argument("--size", type=float, default=400.0, help="canvas size [px]")
    p.add_argument("--waves", type=int, default=None, help="number of waves")
    p.add_argument("--radius", type=float, default=None, help="radius ratio")
    p.add_argument("--color", default="#5B8FF9")
    p.add_argument("--static", action="store_true", help="do not request wave animation")
    p.add_argument("--out", type=Path, default=Path("screenshots") / "liquid_gauge.svg")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    setup_default_logging()
    args = _parse_args(argv)
    if not 0.0 <= args.percent <= 1.0:
        logger.error("--percent must be within 0..1: got %s", args.percent)
        return 2

    cfg = GaugeConfig.from_mapping(
        {
            "points": [{"x": 0.0, "y": 0.5}, {"x": 1.0, "y": args.percent}],
            "color": args.color,
            "customInfo": {"radius": args.radius},
            "waveCount": args.waves,
            "animate": not args.static,
        }
    )
    root = draw_liquid_gauge(cfg, MemoryContainer(), RectCoordinate(0, 0, args.size, args.size))
    out = write_svg(root, args.out, SvgParams(width=args.size, height=args.size))
    logger.info("saved %s", out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
