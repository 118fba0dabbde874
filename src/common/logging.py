"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `level` 省略時は `common.settings` の `LOG_LEVEL`（環境変数 `LQG_LOG_LEVEL`）を使う
    - 上位のデモ/CLI から呼び出す想定
    """
    if level is None:
        from common import settings

        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
