from __future__ import annotations

import numpy as np
import pytest

from engine.core.transform_utils import (
    apply_matrix,
    compose,
    identity,
    scale_matrix,
    translation_matrix,
    translation_of,
)


def test_translation_matrix_moves_points() -> None:
    m = translation_matrix(3.0, -1.5)
    out = apply_matrix(np.array([[0.0, 0.0], [1.0, 2.0]]), m)
    assert np.allclose(out, [[3.0, -1.5], [4.0, 0.5]])
    assert translation_of(m) == (3.0, -1.5)


def test_compose_order() -> None:
    # 単一点 (1, 0) を対象に、Scale(2)→Translate(+1, 0)
    m = compose(scale_matrix(2.0, 2.0), translation_matrix(1.0, 0.0))
    assert np.allclose(apply_matrix(np.array([[1.0, 0.0]]), m), [[3.0, 0.0]])
    # 逆順なら (1+1)*2 = 4
    m2 = compose(translation_matrix(1.0, 0.0), scale_matrix(2.0, 2.0))
    assert np.allclose(apply_matrix(np.array([[1.0, 0.0]]), m2), [[4.0, 0.0]])


def test_scale_matrix_keeps_center_fixed() -> None:
    m = scale_matrix(4.0, 0.5, center=(10.0, 20.0))
    assert np.allclose(apply_matrix(np.array([[10.0, 20.0]]), m), [[10.0, 20.0]])


def test_apply_matrix_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        apply_matrix(np.zeros((1, 2)), np.eye(2))


def test_identity_is_noop_and_input_untouched() -> None:
    pts = np.array([[1.0, 2.0], [3.0, 4.0]])
    out = apply_matrix(pts, identity())
    assert np.array_equal(out, pts)
    out[0, 0] = 99.0
    assert pts[0, 0] == 1.0
