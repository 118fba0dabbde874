from __future__ import annotations

import numpy as np
import pytest

from engine.core.path import ClosePath, CubicTo, LineTo, MoveTo, Path


def _square() -> Path:
    return Path([MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), LineTo(0, 10), ClosePath()])


def test_path_must_start_with_move_to() -> None:
    with pytest.raises(ValueError):
        Path([LineTo(1, 1)])
    assert len(Path([])) == 0


def test_path_rejects_foreign_commands() -> None:
    with pytest.raises(TypeError):
        Path([MoveTo(0, 0), ("L", 1, 1)])  # type: ignore[list-item]


def test_to_list_uses_host_array_form() -> None:
    path = Path([MoveTo(0, 1), CubicTo(1, 2, 3, 4, 5, 6), LineTo(7, 8), ClosePath()])
    assert path.to_list() == [
        ["M", 0, 1],
        ["C", 1, 2, 3, 4, 5, 6],
        ["L", 7, 8],
        ["Z"],
    ]


def test_from_list_roundtrip_keeps_commands() -> None:
    path = Path([MoveTo(0, 1), CubicTo(1, 2, 3, 4, 5, 6), LineTo(7, 8), ClosePath()])
    assert Path.from_list(path.to_list()) == path


@pytest.mark.parametrize(
    "items",
    [
        [["Q", 0, 0, 1, 1]],
        [["M", 0]],
        [[]],
        [["M", 0, 0], ["Z", 1]],
    ],
)
def test_from_list_rejects_malformed_items(items: list[list[object]]) -> None:
    with pytest.raises(ValueError):
        Path.from_list(items)


def test_to_svg_trims_trailing_zeros() -> None:
    path = Path([MoveTo(0.5, 1.0), CubicTo(1, 2, 3, 4, 5.25, -6), ClosePath()])
    assert path.to_svg() == "M 0.5 1 C 1 2 3 4 5.25 -6 Z"
    assert Path([MoveTo(1 / 3, 0)]).to_svg(precision=2) == "M 0.33 0"


def test_points_collects_every_coordinate() -> None:
    path = Path([MoveTo(0, 1), CubicTo(1, 2, 3, 4, 5, 6), ClosePath()])
    np.testing.assert_array_equal(path.points(), [[0, 1], [1, 2], [3, 4], [5, 6]])


def test_translate_is_pure() -> None:
    path = _square()
    moved = path.translate(5, -2)
    np.testing.assert_allclose(moved.points(), path.points() + [5, -2])
    assert path.points()[0].tolist() == [0.0, 0.0]
    assert isinstance(moved[-1], ClosePath)
    assert moved.is_closed
    assert not Path([MoveTo(0, 0), LineTo(1, 1)]).is_closed
    assert not Path([]).is_closed


def test_transform_with_scale_matrix() -> None:
    from engine.core.transform_utils import scale_matrix

    path = _square().transform(scale_matrix(2, 3, center=(5, 5)))
    np.testing.assert_allclose(path.points()[0], [-5, -10])
    np.testing.assert_allclose(path.points()[2], [15, 20])


def test_flatten_samples_cubic_and_closes() -> None:
    path = Path([MoveTo(0, 0), CubicTo(0, 10, 10, 10, 10, 0), ClosePath()])
    (line,) = path.flatten(samples=8)
    # MoveTo 1 点 + 曲線 8 点 + 閉じ 1 点
    assert line.shape == (10, 2)
    np.testing.assert_allclose(line[-2], [10, 0])
    np.testing.assert_allclose(line[-1], [0, 0])
    # t=0.5 の点（対称なので x=5, y=7.5）
    np.testing.assert_allclose(line[4], [5.0, 7.5])


def test_flatten_splits_subpaths() -> None:
    path = Path([MoveTo(0, 0), LineTo(1, 0), MoveTo(5, 5), LineTo(6, 5)])
    lines = path.flatten()
    assert [ln.shape[0] for ln in lines] == [2, 2]


def test_bounds_follow_the_curve_not_the_control_points() -> None:
    path = Path([MoveTo(0, 0), CubicTo(0, 10, 10, 10, 10, 0)])
    bbox = path.bounds(samples=64)
    assert bbox.min_x == pytest.approx(0.0)
    assert bbox.max_x == pytest.approx(10.0)
    # 曲線の頂点は 7.5（制御点の 10 までは届かない）
    assert bbox.max_y == pytest.approx(7.5, abs=1e-2)


def test_cubic_segments_start_at_previous_point() -> None:
    path = Path([MoveTo(0, 0), LineTo(2, 0), CubicTo(2, 1, 3, 1, 3, 0)])
    segs = path.cubic_segments()
    assert segs.shape == (1, 4, 2)
    np.testing.assert_array_equal(segs[0, 0], [2, 0])
