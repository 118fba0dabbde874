"""
どこで: `engine.export` サブパッケージ。
何を: 描画結果のファイル出力（SVG）。
"""

from .svg import SvgParams, SvgWriter, render_svg, write_svg

__all__ = ["SvgParams", "SvgWriter", "render_svg", "write_svg"]
