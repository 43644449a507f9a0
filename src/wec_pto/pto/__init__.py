"""PTO configuration and geometry modules."""

from .config import (
    InitialDisplacement,
    LocationState,
    PtoConfig,
    PtoOrientation,
    ValidationPhase,
)
from .errors import (
    MissingLocationError,
    OrientationError,
    PretensionError,
    PtoConfigurationError,
)
from .geometry import (
    as_vector,
    axis_angle_matrix,
    normalize,
    rotate_about_axis,
    rotate_about_point,
)

__all__ = [
    "as_vector",
    "axis_angle_matrix",
    "InitialDisplacement",
    "LocationState",
    "MissingLocationError",
    "normalize",
    "OrientationError",
    "PretensionError",
    "PtoConfig",
    "PtoConfigurationError",
    "PtoOrientation",
    "rotate_about_axis",
    "rotate_about_point",
    "ValidationPhase",
]
