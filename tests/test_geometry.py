import math

import numpy as np
import pytest

from wec_pto.pto.geometry import (
    as_vector,
    axis_angle_matrix,
    normalize,
    rotate_about_axis,
    rotate_about_point,
)


def row_convention_matrix(axis, t):
    """Axis-angle table applied as point @ R (row vector convention)."""
    ax, ay, az = axis
    c, s = math.cos(t), math.sin(t)
    r = np.zeros((3, 3))
    r[0, 0] = ax * ax * (1 - c) + c
    r[0, 1] = ay * ax * (1 - c) + az * s
    r[0, 2] = az * ax * (1 - c) - ay * s
    r[1, 0] = ax * ay * (1 - c) - az * s
    r[1, 1] = ay * ay * (1 - c) + c
    r[1, 2] = az * ay * (1 - c) + ax * s
    r[2, 0] = ax * az * (1 - c) + ay * s
    r[2, 1] = ay * az * (1 - c) - ax * s
    r[2, 2] = az * az * (1 - c) + c
    return r


def test_quarter_turn_about_z():
    result = rotate_about_axis([1, 0, 0], [0, 0, 1], math.pi / 2)
    np.testing.assert_allclose(result, [0, 1, 0], atol=1e-12)


def test_quarter_turn_about_x():
    result = rotate_about_axis([0, 1, 0], [1, 0, 0], math.pi / 2)
    np.testing.assert_allclose(result, [0, 0, 1], atol=1e-12)


def test_column_matrix_is_transpose_of_row_table(rng):
    for _ in range(20):
        axis = normalize(rng.normal(size=3))
        angle = rng.uniform(-math.pi, math.pi)
        point = rng.normal(size=3)

        row = row_convention_matrix(axis, angle)
        np.testing.assert_allclose(axis_angle_matrix(axis, angle), row.T, atol=1e-14)
        np.testing.assert_allclose(
            rotate_about_axis(point, axis, angle), point @ row, atol=1e-12
        )


def test_rotation_matrix_is_orthonormal(rng):
    axis = normalize(rng.normal(size=3))
    r = axis_angle_matrix(axis, 0.7)
    np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_axis_is_fixed_point():
    axis = np.array([1.0, 2.0, 2.0]) / 3.0
    np.testing.assert_allclose(rotate_about_axis(axis * 4, axis, 1.3), axis * 4)


def test_zero_angle_is_identity():
    np.testing.assert_allclose(axis_angle_matrix([0, 1, 0], 0.0), np.eye(3))


def test_non_unit_axis_is_not_normalized():
    r = axis_angle_matrix([0, 0, 2], math.pi / 2)
    assert not np.allclose(r @ r.T, np.eye(3))


def test_rotate_about_point_keeps_center():
    center = [1.0, 2.0, 3.0]
    np.testing.assert_allclose(
        rotate_about_point(center, center, [0, 0, 1], 0.4), center
    )


def test_rotate_about_offset_point():
    result = rotate_about_point([2, 1, 0], [1, 1, 0], [0, 0, 1], math.pi)
    np.testing.assert_allclose(result, [0, 1, 0], atol=1e-12)


def test_normalize_degenerate_vector():
    assert normalize(np.zeros(3)) is None
    np.testing.assert_allclose(normalize(np.array([0.0, 3.0, 4.0])), [0, 0.6, 0.8])


def test_as_vector_rejects_wrong_length():
    with pytest.raises(ValueError, match="point must have 3 components"):
        as_vector([1, 2], "point")
    with pytest.raises(ValueError):
        rotate_about_axis([1, 2, 3, 4], [0, 0, 1], 1.0)
