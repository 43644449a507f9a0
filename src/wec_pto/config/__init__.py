"""Configuration and logging modules."""

from .logging import get_logger
from .settings import (
    LocationConfig,
    OrientationConfig,
    VisualizationConfig,
)

__all__ = [
    "get_logger",
    "LocationConfig",
    "OrientationConfig",
    "VisualizationConfig",
]
