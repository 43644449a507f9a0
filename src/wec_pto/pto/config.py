"""PTO connector configuration and setup."""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from ..config.logging import get_logger
from ..config.settings import LocationConfig, OrientationConfig
from .errors import MissingLocationError, OrientationError, PretensionError
from .geometry import as_vector, normalize, rotate_about_point

logger = get_logger(__name__)


class ValidationPhase(Enum):
    """Host initialization pass in which the location is checked."""

    WARN = "W"  # default a missing location, warn when diagnostics are available
    ERROR = "E"  # refuse a missing location


class LocationState(Enum):
    """Whether the mounting location has been supplied."""

    UNSET = "unset"
    PENDING = "pending"  # silent pass ran, waiting for the diagnostic pass
    SET = "set"


@dataclass(eq=False)
class PtoOrientation:
    """Local frame of the PTO.

    ``z`` and ``y`` are user inputs; ``x`` and ``rotation_matrix`` are filled
    in by ``PtoConfig.set_orientation``.
    """

    z: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    y: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    x: np.ndarray | None = None
    rotation_matrix: np.ndarray | None = None

    def __post_init__(self):
        self.z = as_vector(self.z, "orientation.z")
        self.y = as_vector(self.y, "orientation.y")


@dataclass(eq=False)
class InitialDisplacement:
    """Initial displacement of the PTO (meters)."""

    init_lin_disp: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.init_lin_disp = as_vector(self.init_lin_disp, "init_lin_disp")


@dataclass(eq=False)
class PtoConfig:
    """Power take-off connector between two bodies, or a body and ground.

    Holds the linear stiffness and damping, pretension, mounting location and
    local orientation of the PTO, and prepares them for the simulation engine.
    Setup order expected by the host: ``validate_location`` (once or twice in
    the warn phase), ``set_orientation``, ``resolve_pretension`` and optionally
    ``compute_initial_displacement``.
    """

    name: str = "NOT DEFINED"
    k: float = 0.0  # N/m or Nm/rad
    c: float = 0.0  # Ns/m or Nsm/rad
    equilibrium_position: float = 0.0
    pretension: float = 0.0  # N or Nm
    loc: np.ndarray | None = None  # [x, y, z] in meters
    orientation: PtoOrientation = field(default_factory=PtoOrientation)
    init_disp: InitialDisplacement = field(default_factory=InitialDisplacement)
    pto_num: int | None = None

    location_config: LocationConfig = field(
        default_factory=LocationConfig, repr=False
    )
    orientation_config: OrientationConfig = field(
        default_factory=OrientationConfig, repr=False
    )

    def __post_init__(self):
        if self.loc is None:
            self.loc = np.array(self.location_config.unset_sentinel, dtype=float)
        else:
            self.loc = as_vector(self.loc, "loc")

    @property
    def location_state(self) -> LocationState:
        """Report whether ``loc`` still holds a placeholder."""
        if np.array_equal(self.loc, self.location_config.unset_sentinel):
            return LocationState.UNSET
        if np.array_equal(self.loc, self.location_config.pending_sentinel):
            return LocationState.PENDING
        return LocationState.SET

    def validate_location(self, phase: ValidationPhase | str) -> None:
        """Check that a mounting location was supplied.

        In the warn phase a missing location is replaced by the default
        location. A two-pass host calls this twice: the first (silent) call
        only marks the location as pending, the second assigns the default
        and warns. In the error phase a missing location is rejected.

        Args:
            phase: ValidationPhase, or its value "W" / "E"

        Raises:
            MissingLocationError: In the error phase, if loc was never set
        """
        phase = ValidationPhase(phase)
        state = self.location_state

        if phase is ValidationPhase.ERROR:
            if state is LocationState.UNSET:
                raise MissingLocationError(
                    f"For {self.name}: pto.loc needs to be specified in the "
                    "input file. pto.loc is the [x y z] location, in meters, "
                    "for the PTO.",
                    pto_name=self.name,
                )
            return

        if state is LocationState.UNSET and self.location_config.two_pass:
            # Warnings cannot be surfaced during the host's first pass
            self.loc = np.array(self.location_config.pending_sentinel, dtype=float)
        elif state is not LocationState.SET:
            self.loc = np.array(self.location_config.default_location, dtype=float)
            logger.warning(
                "For %s: pto.loc was changed from %s to %s.",
                self.name,
                list(self.location_config.unset_sentinel),
                list(self.location_config.default_location),
            )

    def set_orientation(self) -> None:
        """Compute the x axis and rotation matrix of the local frame.

        Normalizes ``orientation.z`` and ``orientation.y``, then sets
        ``x = cross(y, z)`` (normalized) and a rotation matrix whose columns
        are ``[x, y, z]``. The matrix maps local vectors to the global frame.

        Raises:
            OrientationError: If y or z is zero, or they are not orthogonal
                within ``orthogonality_tolerance``
        """
        tolerance = self.orientation_config.degeneracy_tolerance
        z = normalize(as_vector(self.orientation.z, "orientation.z"), tolerance)
        y = normalize(as_vector(self.orientation.y, "orientation.y"), tolerance)
        if z is None or y is None:
            raise OrientationError(
                f"For {self.name}: the Y and Z vectors defining the PTO's "
                "orientation must be non-zero.",
                pto_name=self.name,
            )

        if abs(float(np.dot(y, z))) > self.orientation_config.orthogonality_tolerance:
            raise OrientationError(
                f"For {self.name}: the Y and Z vectors defining the PTO's "
                "orientation must be orthogonal.",
                pto_name=self.name,
            )

        x = normalize(np.cross(y, z), tolerance)
        if x is None:
            raise OrientationError(
                f"For {self.name}: the Y and Z vectors defining the PTO's "
                "orientation must be orthogonal.",
                pto_name=self.name,
            )

        self.orientation.z = z
        self.orientation.y = y
        self.orientation.x = x
        self.orientation.rotation_matrix = np.column_stack([x, y, z])
        logger.debug("Orientation set for %s: x=%s", self.name, x)

    def resolve_pretension(self) -> None:
        """Shift the equilibrium position so the PTO carries its pretension.

        Applies only while ``equilibrium_position`` is still zero; a value set
        by the user takes precedence.

        Raises:
            PretensionError: If pretension is requested with zero stiffness
        """
        if self.equilibrium_position != 0 or self.pretension == 0:
            return

        if self.k == 0:
            raise PretensionError(
                f"For {self.name}: pretension of {self.pretension:G} requires "
                "a non-zero stiffness k.",
                pto_name=self.name,
            )
        equilibrium_position = -self.pretension / self.k
        if not np.isfinite(equilibrium_position):
            raise PretensionError(
                f"For {self.name}: pretension {self.pretension:G} and stiffness "
                f"{self.k:G} give a non-finite equilibrium position.",
                pto_name=self.name,
            )

        self.equilibrium_position = equilibrium_position
        logger.debug(
            "Equilibrium position for %s set to %g from pretension",
            self.name, equilibrium_position,
        )

    def compute_initial_displacement(
        self,
        rotation_point,
        rotation_axis,
        rotation_angle: float,
        additional_linear_displacement,
    ) -> None:
        """Set the initial displacement caused by an initial body rotation.

        Args:
            rotation_point: Point on the rotation axis [x, y, z] (meters)
            rotation_axis: Unit rotation axis; it is not normalized here
            rotation_angle: Rotation angle (radians)
            additional_linear_displacement: Displacement added on top of the
                rotation-induced one [x, y, z] (meters)
        """
        loc = as_vector(self.loc, "loc")
        new_coord = rotate_about_point(
            loc, rotation_point, rotation_axis, rotation_angle
        )
        additional = as_vector(
            additional_linear_displacement, "additional_linear_displacement"
        )
        self.init_disp.init_lin_disp = (new_coord - loc) + additional

    def setup(self, phase: ValidationPhase | str = ValidationPhase.ERROR) -> None:
        """Run location validation, orientation and pretension in host order."""
        self.validate_location(phase)
        self.set_orientation()
        self.resolve_pretension()

    def _require_frame(self) -> np.ndarray:
        if self.orientation.rotation_matrix is None:
            raise OrientationError(
                f"For {self.name}: orientation has not been set; "
                "call set_orientation first.",
                pto_name=self.name,
            )
        return self.orientation.rotation_matrix

    def to_global(self, vector) -> np.ndarray:
        """Express a local-frame vector in the global frame."""
        return self._require_frame() @ as_vector(vector)

    def to_local(self, vector) -> np.ndarray:
        """Express a global-frame vector in the PTO's local frame."""
        return self._require_frame().T @ as_vector(vector)

    def describe(self) -> str:
        """Three-line summary of name, stiffness and damping."""
        return (
            f"\t***** PTO Name: {self.name} *****\n"
            f"\tPTO Stiffness           (N/m;Nm/rad) = {self.k:G}\n"
            f"\tPTO Damping           (Ns/m;Nsm/rad) = {self.c:G}"
        )

    def list_info(self) -> None:
        """Print the PTO summary."""
        print(f"\n{self.describe()}")
