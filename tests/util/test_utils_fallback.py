from __future__ import annotations

from pathlib import Path

from util.utils import _find_project_root


def test_find_project_root_prefers_configs_marker(tmp_path: Path) -> None:
    # <root>/configs があれば、src/util のような深い位置からでも <root> を返す
    (tmp_path / "configs").mkdir()
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path.resolve()


def test_find_project_root_of_this_repo() -> None:
    root = _find_project_root(Path(__file__).resolve().parent)
    assert (root / "configs" / "default.yaml").exists()
