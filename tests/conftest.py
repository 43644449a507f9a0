import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from wec_pto import PtoConfig


@pytest.fixture
def pto():
    """PTO with a mounting location and stiffness."""
    return PtoConfig("PTO1", k=10.0, c=1200.0, loc=[1.0, 0.0, 0.0])


@pytest.fixture
def unlocated_pto():
    """Freshly constructed PTO, location never supplied."""
    return PtoConfig("PTO2")


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
