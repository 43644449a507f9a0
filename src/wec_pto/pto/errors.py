"""Exceptions raised while configuring a PTO."""


class PtoConfigurationError(ValueError):
    """Invalid PTO input detected at configuration time."""

    def __init__(self, message: str, pto_name: str | None = None):
        super().__init__(message)
        self.pto_name = pto_name


class MissingLocationError(PtoConfigurationError):
    """Mounting location was never supplied."""


class OrientationError(PtoConfigurationError):
    """Y and Z orientation vectors cannot form a right-handed frame."""


class PretensionError(PtoConfigurationError, ZeroDivisionError):
    """Pretension requested on a PTO without stiffness."""
