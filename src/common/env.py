"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import os


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # 数値優先
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


def env_str(name: str, default: str) -> str:
    """文字列環境変数を取得（空白のみ/未設定は既定値）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_bool", "env_str"]
