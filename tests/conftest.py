"""共通フィクスチャ。

- 400x400 キャンバスの座標系とインメモリ描画先
- 既定のゲージ設定（水位点 y=0.7、水波 3 本）
- 環境変数由来の設定を各テストで初期化
"""

from __future__ import annotations

from typing import Iterator

import pytest

from api.gauge_config import GaugeConfig, load_defaults
from common import settings
from engine.render.memory import MemoryContainer, RectCoordinate


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`LQG_*` 環境変数を外し、設定と既定値キャッシュを読み直す。"""
    monkeypatch.delenv("LQG_DISABLE_ANIMATION", raising=False)
    monkeypatch.delenv("LQG_LOG_LEVEL", raising=False)
    settings.reload_from_env()
    load_defaults.cache_clear()
    yield
    settings.reload_from_env()
    load_defaults.cache_clear()


@pytest.fixture()
def coord() -> RectCoordinate:
    return RectCoordinate(0.0, 0.0, 400.0, 400.0)


@pytest.fixture()
def container() -> MemoryContainer:
    return MemoryContainer()


@pytest.fixture()
def detached_container() -> MemoryContainer:
    return MemoryContainer(attached=False)


@pytest.fixture()
def gauge_cfg() -> GaugeConfig:
    return GaugeConfig(
        points=({"x": 0.0, "y": 0.5}, {"x": 1.0, "y": 0.7}),
        color="#ff0000",
        wave_count=3,
    )
