"""Vector utilities for PTO frames and rigid-body rotations.

All rotations use the column-vector convention: a point ``p`` is rotated as
``R @ p`` where ``R`` is the right-handed axis-angle (Rodrigues) matrix. A
positive angle turns counter-clockwise when looking down ``axis`` towards the
origin.
"""

import numpy as np


def as_vector(value, name: str = "vector") -> np.ndarray:
    """Convert a length-3 sequence to a float array.

    Args:
        value: Sequence of three numbers
        name: Name used in the error message

    Returns:
        Array of shape (3,)

    Raises:
        ValueError: If value does not hold exactly three components
    """
    vector = np.asarray(value, dtype=float).reshape(-1)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got {vector.size}")
    return vector


def normalize(vector: np.ndarray, tolerance: float = 1e-12) -> np.ndarray | None:
    """Scale a vector to unit length.

    Args:
        vector: Array of shape (3,)
        tolerance: Norm below which the vector is treated as zero

    Returns:
        Unit vector, or None if the vector is degenerate
    """
    norm = float(np.linalg.norm(vector))
    if not np.isfinite(norm) or norm < tolerance:
        return None
    return vector / norm


def axis_angle_matrix(axis, angle: float) -> np.ndarray:
    """Build the rotation matrix for an angle about a unit axis.

    The axis is used as given. A non-unit axis yields a matrix that is not a
    rigid rotation.

    Args:
        axis: Unit rotation axis (ax, ay, az)
        angle: Rotation angle in radians

    Returns:
        3x3 matrix R such that R @ p rotates p
    """
    ax, ay, az = as_vector(axis, "axis")
    cos_t = np.cos(angle)
    sin_t = np.sin(angle)
    one_minus_cos = 1.0 - cos_t

    return np.array([
        [ax * ax * one_minus_cos + cos_t,
         ax * ay * one_minus_cos - az * sin_t,
         ax * az * one_minus_cos + ay * sin_t],
        [ay * ax * one_minus_cos + az * sin_t,
         ay * ay * one_minus_cos + cos_t,
         ay * az * one_minus_cos - ax * sin_t],
        [az * ax * one_minus_cos - ay * sin_t,
         az * ay * one_minus_cos + ax * sin_t,
         az * az * one_minus_cos + cos_t],
    ])


def rotate_about_axis(point, axis, angle: float) -> np.ndarray:
    """Rotate a point about an axis through the origin.

    Args:
        point: Point coordinates (x, y, z)
        axis: Unit rotation axis
        angle: Rotation angle in radians

    Returns:
        Rotated point coordinates
    """
    return axis_angle_matrix(axis, angle) @ as_vector(point, "point")


def rotate_about_point(point, center, axis, angle: float) -> np.ndarray:
    """Rotate a point about the line through center along axis.

    Args:
        point: Point coordinates
        center: Any point on the rotation line
        axis: Unit direction of the rotation line
        angle: Rotation angle in radians

    Returns:
        Rotated point coordinates
    """
    point = as_vector(point, "point")
    center = as_vector(center, "center")
    return rotate_about_axis(point - center, axis, angle) + center
