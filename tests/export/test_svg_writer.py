from __future__ import annotations

import io
import xml.etree.ElementTree as ET

import pytest

from api import GaugeConfig, LiquidGauge
from engine.core.path import ClosePath, LineTo, MoveTo, Path
from engine.export.svg import SvgParams, SvgWriter, render_svg, write_svg
from engine.render.memory import MemoryContainer

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture()
def drawn(gauge_cfg, coord) -> MemoryContainer:
    root = MemoryContainer()
    LiquidGauge(gauge_cfg).draw(root, coord)
    return root


def test_gauge_svg_structure(drawn) -> None:
    text = render_svg(drawn)
    tree = ET.fromstring(text)
    assert tree.tag == f"{SVG_NS}svg"
    assert tree.get("width") == "400"

    clips = tree.findall(f"{SVG_NS}defs/{SVG_NS}clipPath")
    assert len(clips) == 1
    circle = clips[0].find(f"{SVG_NS}circle")
    assert circle is not None
    assert (circle.get("cx"), circle.get("cy"), circle.get("r")) == ("200", "200", "180")

    group = tree.find(f"{SVG_NS}g")
    assert group is not None
    assert group.get("id") == "waves"
    assert group.get("clip-path") == f"url(#{clips[0].get('id')})"
    paths = group.findall(f"{SVG_NS}path")
    assert len(paths) == 3
    assert all(p.get("fill") == "#ff0000" for p in paths)
    assert [p.get("opacity") for p in paths] == ["0.6", "0.45", "0.3"]
    assert all(p.get("d", "").startswith("M ") and p.get("d", "").endswith(" Z") for p in paths)

    ring = tree.find(f"{SVG_NS}circle")
    assert ring is not None
    assert ring.get("id") == "wrap"
    assert ring.get("fill") == "transparent"
    assert ring.get("stroke") == "#ff0000"
    assert ring.get("stroke-width") == "2"


def test_gauge_svg_animations(drawn) -> None:
    text = render_svg(drawn)
    assert text.count('repeatCount="indefinite"') == 3
    tree = ET.fromstring(text)
    anims = tree.findall(f".//{SVG_NS}animateTransform")
    assert [a.get("dur") for a in anims] == ["5000ms", "4250ms", "3500ms"]
    assert {a.get("to") for a in anims} == {"180 0"}


def test_animation_can_be_omitted(drawn) -> None:
    text = render_svg(drawn, SvgParams(animate=False))
    assert "animateTransform" not in text


def test_static_gauge_has_no_animation(coord) -> None:
    root = MemoryContainer(attached=False)
    LiquidGauge(GaugeConfig(points=((0, 0.5), (1, 0.7)))).draw(root, coord)
    text = render_svg(root)
    assert "animateTransform" not in text
    assert text.count("<path ") == 3


def test_background_and_size() -> None:
    root = MemoryContainer()
    text = render_svg(root, SvgParams(width=120.5, height=80, background="#000"))
    assert 'viewBox="0 0 120.5 80"' in text
    assert '<rect width="100%" height="100%" fill="#000"/>' in text
    assert "<defs>" not in text


def test_path_given_as_list_is_accepted() -> None:
    root = MemoryContainer()
    path = Path([MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), ClosePath()])
    root.add_shape("path", name="p", attrs={"path": path.to_list(), "fill": "red"})
    text = render_svg(root)
    assert 'd="M 0 0 L 10 0 L 10 10 Z"' in text


def test_unknown_kind_raises() -> None:
    root = MemoryContainer()
    root.add_shape("rect", name="r", attrs={})
    with pytest.raises(ValueError):
        SvgWriter().write(root, SvgParams(), io.StringIO())


@pytest.mark.integration
def test_write_svg_creates_file(drawn, tmp_path) -> None:
    out = write_svg(drawn, tmp_path / "nested" / "gauge.svg")
    assert out.exists()
    text = out.read_text(encoding="utf-8")
    assert text == render_svg(drawn)
    ET.fromstring(text)
