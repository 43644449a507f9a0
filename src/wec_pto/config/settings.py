"""Settings for PTO setup and diagnostics."""

from dataclasses import dataclass


@dataclass
class OrientationConfig:
    """Tolerances used when building the PTO local frame."""
    orthogonality_tolerance: float = 0.001  # Max |dot(y, z)| after normalization
    degeneracy_tolerance: float = 1e-12  # Min norm of a vector before normalizing


@dataclass
class LocationConfig:
    """Mounting location placeholders and host initialization protocol."""
    unset_sentinel: tuple[float, float, float] = (999.0, 999.0, 999.0)
    pending_sentinel: tuple[float, float, float] = (888.0, 888.0, 888.0)
    default_location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    # Host runs its silent pass before the diagnostic pass
    two_pass: bool = True


@dataclass
class VisualizationConfig:
    """Frame rendering configuration."""
    axis_length: float = 1.0  # Triad arrow length (meters)
    colors: tuple[str, str, str] = ("red", "green", "blue")  # x, y, z
    default_dpi: int = 150
    figure_size: tuple[float, float] = (6.0, 6.0)

