from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

pytest.importorskip("matplotlib")

from api import GaugeConfig, LiquidGauge, MemoryContainer, RectCoordinate  # noqa: E402

REPO_ROOT = Path(__file__).resolve().parents[2]
PNG_MAGIC = b"\x89PNG"


@pytest.fixture(scope="module")
def preview():
    spec = importlib.util.spec_from_file_location(
        "preview_liquid", REPO_ROOT / "scripts" / "preview_liquid.py"
    )
    assert spec is not None and spec.loader is not None
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.mark.integration
@pytest.mark.optional
@pytest.mark.parametrize("color", ["red", "steelblue", "#5B8FF9", "#f00", "0x00ff00"])
def test_preview_accepts_css_colours(preview, tmp_path: Path, color: str) -> None:
    out = tmp_path / "frame.png"
    assert preview.main(["--color", color, "--time", "1.25", "--out", str(out)]) == 0
    assert out.read_bytes().startswith(PNG_MAGIC)


@pytest.mark.integration
@pytest.mark.optional
def test_preview_without_colour(preview, tmp_path: Path) -> None:
    # 色未指定では水波の fill が None、リングに stroke が無い
    out = tmp_path / "plain.png"
    assert preview.main(["--color", "", "--out", str(out)]) == 0
    assert out.read_bytes().startswith(PNG_MAGIC)


@pytest.mark.integration
@pytest.mark.optional
def test_preview_renders_rgba_from_tuple_colour(preview, tmp_path: Path) -> None:
    cfg = GaugeConfig(points=((0.0, 0.5), (1.0, 0.4)), color=(255, 0, 0, 128))
    assert cfg.color == "rgba(255, 0, 0, 0.502)"
    result = LiquidGauge(cfg).render(MemoryContainer(), RectCoordinate(0, 0, 200, 200))
    out = preview.render_png(result, 200.0, 0.0, tmp_path / "rgba.png")
    assert out.read_bytes().startswith(PNG_MAGIC)


@pytest.mark.optional
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("", None),
        ("transparent", None),
        ("red", (1.0, 0.0, 0.0, 1.0)),
        ("rgb(0, 255, 0)", (0.0, 1.0, 0.0, 1.0)),
        ("rgba(255, 0, 0, 0.5)", (1.0, 0.0, 0.0, 0.5)),
    ],
)
def test_mpl_color(preview, value, expected) -> None:
    got = preview._mpl_color(value)
    if expected is None:
        assert got is None
    else:
        assert got == pytest.approx(expected)
