"""
どこで: `util.utils`。
何を: リポジトリ同梱の YAML 設定（`configs/default.yaml` + ルート `config.yaml`）の読込。
なぜ: ゲージ既定値（`liquid:` セクション）をコード外で調整できるようにするため。
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("config file ignored: %s (%s)", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/util/` から上へ辿り、`.git` / `pyproject.toml` / `configs/` のいずれかを持つ
      最も近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - `root` 省略時はこのファイルの位置からプロジェクトルートを推定する。
    - いずれも存在しない/不正な場合は空辞書を返す（不正ファイルは警告ログのみ）。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    for path in (project_root / "configs" / "default.yaml", project_root / "config.yaml"):
        if path.exists():
            base.update(_safe_load_yaml(path))

    return base


def load_section(name: str, root: Optional[Path] = None) -> Dict[str, Any]:
    """`load_config()` のトップレベル `name` セクションを辞書で返す（無い/不正なら空辞書）。"""
    section = load_config(root).get(name)
    if section is not None and not isinstance(section, dict):
        logger.warning("config section '%s' is not a mapping; ignored", name)
        return {}
    return dict(section or {})
