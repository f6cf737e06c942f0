from dataclasses import FrozenInstanceError, replace

import pytest
from pytest import approx

from pyisa import ISO_2533, PhysicalConstants


# ======================================================================

def test_iso_values():
    assert ISO_2533.g_n == 9.80665
    assert ISO_2533.p_n == 101325.0
    assert ISO_2533.rho_n == 1.225
    assert ISO_2533.T_n == 288.15
    assert ISO_2533.radius == 6356766.0
    assert ISO_2533.k == 1.4


def test_derived_constants():
    # Values given in ISO 2533-1975 §2.1.
    assert ISO_2533.M == approx(0.028964420, rel=1e-6)
    assert ISO_2533.R == approx(287.05287, rel=1e-7)

    # Always consistent with the primary values.
    c = ISO_2533
    assert c.R == approx(c.p_n / (c.rho_n * c.T_n), rel=1e-12)


def test_derived_follow_primaries():
    c = replace(ISO_2533, rho_n=1.2)
    assert c.M == approx(1.2 * c.R_star * c.T_n / c.p_n)
    assert c.R == approx(c.R_star / c.M)
    assert c.R != approx(ISO_2533.R)


def test_frozen():
    with pytest.raises(FrozenInstanceError):
        # noinspection PyDataclass
        ISO_2533.g_n = 10.0


@pytest.mark.parametrize('name, value', [('g_n', 0.0), ('p_n', -1.0),
                                         ('radius', float('inf')),
                                         ('T_n', float('nan'))])
def test_invalid(name: str, value: float):
    with pytest.raises(ValueError):
        replace(ISO_2533, **{name: value})

    with pytest.raises(TypeError):
        # noinspection PyArgumentList
        PhysicalConstants(9.80665)  # Keyword only.
