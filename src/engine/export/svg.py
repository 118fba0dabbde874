"""
どこで: `engine.export.svg`。
何を: インメモリコンテナ（`engine.render.memory`）の記録内容を SVG テキストとして書き出す。
なぜ: 実ホスト無しでゲージの見た目（クリップ・水波・リング・ループアニメーション）を確認できるようにするため。

対応範囲:
- グループ → `<g>`（円クリップは `<clipPath>` として `<defs>` に出力）。
- kind "path" → `<path d=...>`、kind "circle" → `<circle>`。
- 属性名はホスト表記から SVG 表記へ写像（`fillOpacity` → `fill-opacity`, `lineWidth` → `stroke-width` 等）。
- 平行移動アニメーション → `<animateTransform type="translate">`（repeat は `indefinite`）。
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from pathlib import Path as FsPath
from typing import IO, Any, Mapping
from xml.sax.saxutils import quoteattr

from engine.core.path import Path
from engine.core.transform_utils import translation_of
from engine.render.memory import MemoryContainer, MemoryGroup, MemoryShape
from engine.render.types import AnimationSpec

# ホスト属性名 → SVG 属性名（ここに無いキーは出力しない）
SVG_ATTR_NAMES: Mapping[str, str] = {
    "fill": "fill",
    "stroke": "stroke",
    "opacity": "opacity",
    "fillOpacity": "fill-opacity",
    "strokeOpacity": "stroke-opacity",
    "lineWidth": "stroke-width",
}


@dataclass(frozen=True)
class SvgParams:
    """SVG 出力パラメータ。

    属性:
        width: 画像幅 [px]。
        height: 画像高さ [px]。
        decimals: 座標の小数点以下桁数。
        background: 背景色（None で透過）。
        animate: False でアニメーション要素を出力しない。
    """

    width: float = 400.0
    height: float = 400.0
    decimals: int = 3
    background: str | None = None
    animate: bool = True


def _fmt(v: float, decimals: int) -> str:
    s = f"{float(v):.{decimals}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


class SvgWriter:
    """SVG 書き出しクラス（最小実装）。"""

    def write(self, container: MemoryContainer, params: SvgParams, fp: IO[str]) -> None:
        """コンテナの内容を SVG として `fp` に書き出す。"""
        defs: list[str] = []
        body: list[str] = []
        self._write_children(container, params, defs, body, depth=1)

        w = _fmt(params.width, params.decimals)
        h = _fmt(params.height, params.decimals)
        fp.write(
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">\n'
        )
        if defs:
            fp.write("  <defs>\n")
            fp.write("".join(defs))
            fp.write("  </defs>\n")
        if params.background is not None:
            fp.write(f'  <rect width="100%" height="100%" fill={quoteattr(params.background)}/>\n')
        fp.write("".join(body))
        fp.write("</svg>\n")

    def _write_children(
        self,
        node: MemoryContainer | MemoryGroup,
        params: SvgParams,
        defs: list[str],
        body: list[str],
        depth: int,
    ) -> None:
        pad = "  " * depth
        for child in node.children:
            if isinstance(child, MemoryGroup):
                clip_ref = ""
                if child.clip is not None:
                    clip_id = f"clip-{child.name}-{len(defs)}"
                    c = child.clip
                    defs.append(
                        f'    <clipPath id="{clip_id}"><circle cx="{_fmt(c.x, params.decimals)}" '
                        f'cy="{_fmt(c.y, params.decimals)}" r="{_fmt(c.r, params.decimals)}"/>'
                        "</clipPath>\n"
                    )
                    clip_ref = f' clip-path="url(#{clip_id})"'
                body.append(f"{pad}<g id={quoteattr(child.name)}{clip_ref}>\n")
                self._write_children(child, params, defs, body, depth + 1)
                body.append(f"{pad}</g>\n")
            else:
                body.append(self._shape_element(child, params, pad))

    def _shape_element(self, shape: MemoryShape, params: SvgParams, pad: str) -> str:
        a = shape.attrs
        d = params.decimals
        if shape.kind == "path":
            path = a["path"] if isinstance(a["path"], Path) else Path.from_list(a["path"])
            head = f"<path id={quoteattr(shape.name)} d={quoteattr(path.to_svg(d))}"
            tag = "path"
        elif shape.kind == "circle":
            head = (
                f"<circle id={quoteattr(shape.name)} cx=\"{_fmt(a['x'], d)}\" "
                f"cy=\"{_fmt(a['y'], d)}\" r=\"{_fmt(a['r'], d)}\""
            )
            tag = "circle"
        else:
            raise ValueError(f"SVG に変換できない kind です: {shape.kind!r}")

        head += self._style_attrs(a, d)
        animations = shape.animations if params.animate else []
        if not animations:
            return f"{pad}{head}/>\n"
        inner = "".join(f"{pad}  {self._animation_element(spec, d)}\n" for spec in animations)
        return f"{pad}{head}>\n{inner}{pad}</{tag}>\n"

    @staticmethod
    def _style_attrs(attrs: Mapping[str, Any], decimals: int) -> str:
        parts: list[str] = []
        for key, svg_name in SVG_ATTR_NAMES.items():
            value = attrs.get(key)
            if value is None:
                continue
            text = _fmt(value, decimals) if isinstance(value, (int, float)) else str(value)
            parts.append(f" {svg_name}={quoteattr(text)}")
        return "".join(parts)

    @staticmethod
    def _animation_element(spec: AnimationSpec, decimals: int) -> str:
        dx, dy = translation_of(spec.matrix)
        repeat = "indefinite" if spec.repeat else "1"
        freeze = "" if spec.repeat else ' fill="freeze"'
        return (
            '<animateTransform attributeName="transform" type="translate" '
            f'from="0 0" to="{_fmt(dx, decimals)} {_fmt(dy, decimals)}" '
            f'dur="{_fmt(spec.duration_ms, decimals)}ms" repeatCount="{repeat}"{freeze}/>'
        )


def render_svg(container: MemoryContainer, params: SvgParams | None = None) -> str:
    """コンテナを SVG 文字列にして返す。"""
    buf = StringIO()
    SvgWriter().write(container, params or SvgParams(), buf)
    return buf.getvalue()


def write_svg(
    container: MemoryContainer, path: str | FsPath, params: SvgParams | None = None
) -> FsPath:
    """コンテナを SVG ファイルとして保存し、保存先パスを返す。"""
    out = FsPath(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fp:
        SvgWriter().write(container, params or SvgParams(), fp)
    return out


__all__ = ["SVG_ATTR_NAMES", "SvgParams", "SvgWriter", "render_svg", "write_svg"]
