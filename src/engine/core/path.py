"""
ベクタパス型（水波形状の中核データ）

本モジュールは、ゲージの水波や外周リングなどホストへ渡す描画パスの表現 `Path` を提供する。

データモデル（不変条件）:
- コマンドは `MoveTo` / `CubicTo` / `LineTo` / `ClosePath` の 4 種（frozen dataclass）。
- `Path` はコマンドの不変タプル。空でなければ先頭は必ず `MoveTo`。
- 座標はホストキャンバス座標（y 下向き）をそのまま保持し、単位変換は行わない。

API 方針:
- 変換（`translate/transform`）は新しい `Path` を返す純関数。
- ホストの配列表現 `[["M", x, y], ["C", ...], ["L", x, y], ["Z"]]` と SVG の `d` 文字列へ出力できる。
- 数値検査用に `points()`（全座標）/`flatten()`（曲線サンプリング）を numpy 配列で返す。

直感図（水波パス）:

    M ~~~~~~~~~~ C…C (wave)
      |        |
      +--------+  L, L, Z
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Sequence, Union

import numpy as np

from common.types import BBox

from .transform_utils import apply_matrix, translation_matrix


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    code: ClassVar[str] = "M"

    def coords(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CubicTo:
    """3 次ベジェ。`(x1, y1)`/`(x2, y2)` が制御点、`(x, y)` が終点。"""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    code: ClassVar[str] = "C"

    def coords(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    code: ClassVar[str] = "L"

    def coords(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ClosePath:
    code: ClassVar[str] = "Z"

    def coords(self) -> tuple[float, ...]:
        return ()


PathCommand = Union[MoveTo, CubicTo, LineTo, ClosePath]

_COMMAND_TYPES: dict[str, type] = {"M": MoveTo, "C": CubicTo, "L": LineTo, "Z": ClosePath}
_ARITY = {"M": 2, "C": 6, "L": 2, "Z": 0}


def _make_command(code: str, values: Sequence[float]) -> PathCommand:
    key = code.upper()
    if key not in _COMMAND_TYPES:
        raise ValueError(f"未対応のパスコマンドです: {code!r}")
    if len(values) != _ARITY[key]:
        raise ValueError(f"'{key}' は {_ARITY[key]} 個の数値を取ります: got {len(values)}")
    return _COMMAND_TYPES[key](*(float(v) for v in values))


def _format_number(v: float, precision: int) -> str:
    s = f"{v:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


class Path:
    """描画パス（コマンド列）の不変コンテナ。

    - 生成時に先頭が `MoveTo` であることを検証する（空パスは許容）。
    - 等価性はコマンド列の完全一致。数値誤差を許す比較は `points()` を用いる。
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[PathCommand]) -> None:
        cmds = tuple(commands)
        if cmds and not isinstance(cmds[0], MoveTo):
            raise ValueError("Path の先頭コマンドは MoveTo である必要があります")
        for c in cmds:
            if not isinstance(c, (MoveTo, CubicTo, LineTo, ClosePath)):
                raise TypeError(f"未対応のパスコマンド型です: {c!r}")
        self._commands: tuple[PathCommand, ...] = cmds

    # ── ファクトリ ───────────────────
    @classmethod
    def from_list(cls, items: Iterable[Sequence[object]]) -> "Path":
        """ホストの配列表現（`[["M", x, y], ..., ["Z"]]`）から `Path` を生成する。"""
        cmds: list[PathCommand] = []
        for item in items:
            if not item or not isinstance(item[0], str):
                raise ValueError(f"パス要素の形式が不正です: {item!r}")
            cmds.append(_make_command(item[0], [float(v) for v in item[1:]]))  # type: ignore[arg-type]
        return cls(cmds)

    # ── コンテナ ───────────────────
    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return self._commands

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __getitem__(self, index: int) -> PathCommand:
        return self._commands[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Path) and self._commands == other._commands

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        return f"Path(commands={len(self._commands)})"

    def count(self, kind: type) -> int:
        """指定型のコマンド数。"""
        return sum(1 for c in self._commands if isinstance(c, kind))

    @property
    def is_closed(self) -> bool:
        return bool(self._commands) and isinstance(self._commands[-1], ClosePath)

    # ── 出力 ───────────────────
    def to_list(self) -> list[list[object]]:
        """ホストの配列表現へ変換する。"""
        return [[c.code, *c.coords()] for c in self._commands]

    def to_svg(self, precision: int = 3) -> str:
        """SVG の `d` 属性文字列を返す（小数は `precision` 桁で丸め、末尾 0 は省略）。"""
        parts: list[str] = []
        for c in self._commands:
            nums = " ".join(_format_number(v, precision) for v in c.coords())
            parts.append(f"{c.code} {nums}" if nums else c.code)
        return " ".join(parts)

    # ── 数値ビュー ───────────────────
    def points(self) -> np.ndarray:
        """全コマンドが持つ座標（制御点を含む）を `(N, 2)` float64 で返す。"""
        flat = [v for c in self._commands for v in c.coords()]
        return np.asarray(flat, dtype=np.float64).reshape(-1, 2)

    def cubic_segments(self) -> np.ndarray:
        """各 `CubicTo` を始点込みの `(K, 4, 2)` 配列（p0, p1, p2, p3）で返す。"""
        segs: list[list[tuple[float, float]]] = []
        current = (0.0, 0.0)
        start = current
        for c in self._commands:
            if isinstance(c, MoveTo):
                current = start = (c.x, c.y)
            elif isinstance(c, CubicTo):
                segs.append([current, (c.x1, c.y1), (c.x2, c.y2), (c.x, c.y)])
                current = (c.x, c.y)
            elif isinstance(c, LineTo):
                current = (c.x, c.y)
            else:
                current = start
        if not segs:
            return np.empty((0, 4, 2), dtype=np.float64)
        return np.asarray(segs, dtype=np.float64)

    def flatten(self, samples: int = 16) -> list[np.ndarray]:
        """曲線をサンプリングしたポリライン列（サブパスごとに `(N, 2)`）を返す。

        `CubicTo` は 1 本あたり `samples` 点で近似し、`ClosePath` は始点を末尾に追加する。
        """
        if samples < 1:
            raise ValueError("samples は 1 以上である必要があります")
        t = np.linspace(0.0, 1.0, samples + 1, dtype=np.float64)[1:, None]
        w0 = (1.0 - t) ** 3
        w1 = 3.0 * (1.0 - t) ** 2 * t
        w2 = 3.0 * (1.0 - t) * t**2
        w3 = t**3

        lines: list[np.ndarray] = []
        chunks: list[np.ndarray] = []
        current = np.zeros(2, dtype=np.float64)
        start = current

        def _flush() -> None:
            if chunks:
                lines.append(np.concatenate(chunks, axis=0))
                chunks.clear()

        for c in self._commands:
            if isinstance(c, MoveTo):
                _flush()
                current = start = np.array([c.x, c.y], dtype=np.float64)
                chunks.append(current[None, :])
            elif isinstance(c, CubicTo):
                p1 = np.array([c.x1, c.y1])
                p2 = np.array([c.x2, c.y2])
                p3 = np.array([c.x, c.y])
                chunks.append(w0 * current + w1 * p1 + w2 * p2 + w3 * p3)
                current = p3
            elif isinstance(c, LineTo):
                current = np.array([c.x, c.y], dtype=np.float64)
                chunks.append(current[None, :])
            else:
                chunks.append(start[None, :])
                current = start
        _flush()
        return lines

    def bounds(self, samples: int = 16) -> BBox:
        """曲線サンプリングに基づくバウンディングボックス。空パスは原点の退化矩形。"""
        lines = self.flatten(samples)
        if not lines:
            return BBox(0.0, 0.0, 0.0, 0.0)
        pts = np.concatenate(lines, axis=0)
        mn = pts.min(axis=0)
        mx = pts.max(axis=0)
        return BBox(float(mn[0]), float(mx[0]), float(mn[1]), float(mx[1]))

    # ── 変換（純粋） ───────────────────
    def transform(self, matrix: np.ndarray) -> "Path":
        """3x3 同次行列を全座標に適用した新しい `Path` を返す。"""
        if not self._commands:
            return self
        moved = apply_matrix(self.points(), matrix).reshape(-1)
        out: list[PathCommand] = []
        i = 0
        for c in self._commands:
            n = _ARITY[c.code]
            out.append(_make_command(c.code, moved[i : i + n].tolist()))
            i += n
        return Path(out)

    def translate(self, dx: float, dy: float) -> "Path":
        """平行移動した新しい `Path` を返す。"""
        return self.transform(translation_matrix(dx, dy))


__all__ = [
    "MoveTo",
    "CubicTo",
    "LineTo",
    "ClosePath",
    "PathCommand",
    "Path",
]
