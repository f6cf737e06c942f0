"""
Geopotential / geometric altitude conversion and acceleration of free
fall (ISO 2533-1975 §2.3).

Notes:

- Uppercase `H` is always geopotential altitude and lowercase `h` is
    always geometric altitude, consistent with the source documents.
"""

from math import isfinite

from .constants import ISO_2533, PhysicalConstants
from .exceptions import InvalidAltitudeError


# ======================================================================

def check_altitude(alt: float) -> float:
    """Returns `alt` as a float, raising `InvalidAltitudeError` if it is
    not a finite real number."""
    try:
        alt = float(alt)
    except (TypeError, ValueError) as e:
        raise InvalidAltitudeError(f"Altitude must be a real number, "
                                   f"got {alt!r}.") from e
    if not isfinite(alt):
        raise InvalidAltitudeError(f"Altitude must be finite, got {alt}.")
    return alt


# ----------------------------------------------------------------------

# noinspection PyPep8Naming
def geometric_from_geopotential(
        H: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Convert geopotential to geometric altitude H → h per ISO 2533-1975
    Eqn 8.  ``H == radius`` is singular and raises
    `InvalidAltitudeError`."""
    H, r = check_altitude(H), constants.radius
    if H == r:
        raise InvalidAltitudeError(f"Geometric altitude is undefined at "
                                   f"H = {H} (Earth radius).")
    return r * H / (r - H)


def geopotential_from_geometric(
        h: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Convert geometric to geopotential altitude h → H per ISO 2533-1975
    Eqn 9."""
    h, r = check_altitude(h), constants.radius
    if h == -r:
        raise InvalidAltitudeError(f"Geopotential altitude is undefined "
                                   f"at h = {h} (Earth centre).")
    return r * h / (r + h)


# ----------------------------------------------------------------------

def gravity(h: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Acceleration of free fall (m/s²) at geometric altitude `h` per ISO
    2533-1975 Eqn 7."""
    h, r = check_altitude(h), constants.radius
    if h == -r:
        raise InvalidAltitudeError(f"Gravity is undefined at h = {h} "
                                   f"(Earth centre).")
    ratio = r / (r + h)
    return constants.g_n * ratio * ratio


# noinspection PyPep8Naming
def gravity_at_geopotential(
        H: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Acceleration of free fall (m/s²) at geopotential altitude `H`."""
    return gravity(geometric_from_geopotential(H, constants), constants)
