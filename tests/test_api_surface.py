from __future__ import annotations

import pytest

# What this tests
# - Public API surface can be imported from the single `api` namespace.
# - A minimal flow `GaugeConfig.from_mapping -> draw_liquid_gauge -> render_svg` returns SVG text.


@pytest.mark.smoke
def test_api_import_and_min_flow():
    import api
    from api import GaugeConfig, MemoryContainer, RectCoordinate, draw_liquid_gauge, render_svg

    assert set(api.__all__) >= {"GaugeConfig", "LiquidGauge", "draw_liquid_gauge", "render_svg"}
    assert api.__version__

    cfg = GaugeConfig.from_mapping(
        {"points": [{"x": 0, "y": 0.5}, {"x": 1, "y": 0.7}], "color": "#5B8FF9"}
    )
    root = draw_liquid_gauge(cfg, MemoryContainer(), RectCoordinate(0, 0, 400, 400))
    svg = render_svg(root)
    assert svg.startswith("<svg ")
    assert svg.count("<path ") == 3
