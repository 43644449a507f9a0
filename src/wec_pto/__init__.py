"""Power take-off connector configuration for multibody simulation."""

__version__ = "0.1.0"

from .pto.config import LocationState, PtoConfig, ValidationPhase
from .pto.errors import (
    MissingLocationError,
    OrientationError,
    PretensionError,
    PtoConfigurationError,
)

__all__ = [
    "LocationState",
    "MissingLocationError",
    "OrientationError",
    "PretensionError",
    "PtoConfig",
    "PtoConfigurationError",
    "ValidationPhase",
]
