import numpy as np
import pytest
from pytest import approx

from pyisa import (ISO_2533, InvalidAltitudeError,
                   geometric_from_geopotential, geopotential_from_geometric,
                   gravity, gravity_at_geopotential)


# ======================================================================

@pytest.mark.parametrize('H', np.linspace(-2000.0, 80000.0, 42))
def test_round_trip(H: float):
    h = geometric_from_geopotential(H)
    assert geopotential_from_geometric(h) == approx(H, rel=1e-6, abs=1e-9)


def test_known_values():
    assert geometric_from_geopotential(0.0) == 0.0
    assert geopotential_from_geometric(0.0) == 0.0

    # Geometric altitude is higher than geopotential above sea level.
    assert geometric_from_geopotential(11000.0) == approx(11019.0, abs=0.1)
    assert geometric_from_geopotential(80000.0) == approx(81020.0, abs=1.0)
    assert geometric_from_geopotential(-2000.0) == approx(-1999.4, abs=0.1)


def test_gravity():
    assert gravity(0.0) == ISO_2533.g_n
    assert gravity_at_geopotential(0.0) == ISO_2533.g_n
    assert gravity(10000.0) == approx(9.7759, abs=1e-4)
    assert gravity_at_geopotential(80000.0) == approx(
        gravity(geometric_from_geopotential(80000.0)))
    assert gravity(-2000.0) > ISO_2533.g_n


@pytest.mark.parametrize('H', [ISO_2533.radius, float('nan'), float('inf'),
                               'high'])
def test_invalid(H):
    with pytest.raises(InvalidAltitudeError):
        geometric_from_geopotential(H)
    with pytest.raises(InvalidAltitudeError):
        gravity_at_geopotential(H)


def test_invalid_geometric():
    with pytest.raises(InvalidAltitudeError):
        geopotential_from_geometric(-ISO_2533.radius)
    with pytest.raises(InvalidAltitudeError):
        gravity(-ISO_2533.radius)

    # Invalid input is also a ValueError.
    with pytest.raises(ValueError):
        geopotential_from_geometric(float('nan'))
