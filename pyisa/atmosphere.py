"""
Standard atmosphere properties as functions of geopotential altitude.

Contains:
    StandardAtmosphere  Immutable model holding constants, layers and
                        base pressures.
    AtmosphereState     All properties at a single altitude.
    ISA                 Default model (ISO 2533-1975 layers and constants).

Notes:

- Uses ISO 2533-1975 International Standard Atmosphere (ISA) by default.
    Altitude from -2 → +80 km.  Outside this range the nearest layer is
    extrapolated and an `AltitudeRangeWarning` is issued (see
    `pyisa.set_options`).

- Unless noted otherwise, all altitudes are geopotential (H) in metres
    and all other values are SI.

- Functions ending in ``_at`` take temperature (and where needed number
    density) directly instead of altitude.

- Dynamic viscosity is computed via Sutherland's formula which is
    reasonably accurate between 100 K - 1889 K (ref NACA TN 1135).
"""

from __future__ import annotations

import warnings
from dataclasses import asdict, dataclass
from math import sqrt

import numpy as np

from ._opts import get_options
from .altitude import (check_altitude, geometric_from_geopotential,
                       geopotential_from_geometric, gravity_at_geopotential)
from .constants import ISO_2533, PhysicalConstants
from .convert import kelvin_to_celsius, pa_to_mbar, pa_to_mmhg
from .exceptions import AltitudeRangeWarning, DomainError
from .layers import ISO_2533_LAYERS, LayerTable
from .pressure import PressureTable, alt_in_layer, press_in_layer
from .resolve import locate_layer


# ======================================================================

# noinspection PyPep8Naming,NonAsciiCharacters
@dataclass(frozen=True, kw_only=True)
class AtmosphereState:
    """
    Standard atmosphere properties at a single altitude.  Field names
    follow the column symbols of the ISO 2533 tables.

    Parameters
    ----------
    H : float
        Geopotential altitude (m).
    h : float
        Geometric altitude (m).
    T, T_C : float
        Temperature (K, °C).
    p, p_mbar, p_mmhg : float
        Pressure (Pa, mbar, mmHg).
    p_ratio : float
        Pressure ratio p / p_n.
    rho : float
        Density (kg/m³).
    rho_ratio, sqrt_rho_ratio : float
        Density ratio ρ / ρ_n and its square root.
    g : float
        Acceleration of free fall (m/s²).
    gamma : float
        Specific weight (N/m³).
    H_p : float
        Pressure scale height (m).
    n : float
        Air number density (1/m³).
    v_bar : float
        Mean air-particle speed (m/s).
    l : float
        Mean free path of air particles (m).
    omega : float
        Air-particle collision frequency (1/s).
    a : float
        Speed of sound (m/s).
    mu : float
        Dynamic viscosity (Pa.s).
    nu : float
        Kinematic viscosity (m²/s).
    lambda_ : float
        Thermal conductivity (W/(m.K)).
    """
    H: float
    h: float
    T: float
    T_C: float
    p: float
    p_mbar: float
    p_mmhg: float
    p_ratio: float
    rho: float
    rho_ratio: float
    sqrt_rho_ratio: float
    g: float
    gamma: float
    H_p: float
    n: float
    v_bar: float
    l: float
    omega: float
    a: float
    mu: float
    nu: float
    lambda_: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


# ----------------------------------------------------------------------

# Temperature based properties.

# noinspection PyPep8Naming
def _check_temp(T: float) -> float:
    if not T > 0:
        raise DomainError("Absolute temperature must be positive.", T=T)
    return T


# noinspection PyPep8Naming
def pressure_scale_height_at(
        T: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Pressure scale height H_p (m), ISO 2533-1975 Eqn 16."""
    return constants.R * _check_temp(T) / constants.g_n


# noinspection PyPep8Naming
def mean_particle_speed_at(
        T: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Mean air-particle speed v̄ (m/s), ISO 2533-1975 Eqn 18."""
    return 1.595769 * sqrt(constants.R * _check_temp(T))


# noinspection PyPep8Naming
def collision_frequency_at(
        n: float, T: float,
        constants: PhysicalConstants = ISO_2533) -> float:
    """Air-particle collision frequency ω (1/s) for number density `n`
    and temperature `T`, ``0.99407e-18 n sqrt(R T)``."""
    return 0.99407e-18 * n * sqrt(constants.R * _check_temp(T))


# noinspection PyPep8Naming
def speed_of_sound_at(
        T: float, constants: PhysicalConstants = ISO_2533) -> float:
    r"""Speed of sound :math:`a = \sqrt{k R T}` (m/s), ISO 2533-1975
    Eqn 21."""
    return sqrt(constants.k * constants.R * _check_temp(T))


# noinspection PyPep8Naming
def dynamic_viscosity_at(T: float) -> float:
    """Dynamic viscosity μ (Pa.s) using the empirical Sutherland equation
    shown in ISO 2533-1975 Eqn 22.  It is invalid for very high or low
    temperatures and conditions above 90 km."""
    # Sutherland constants β_s, S from ISO 2533-1975 Table 1.
    beta_s, S = 1.458e-6, 110.4
    T = _check_temp(T)
    return beta_s * T ** 1.5 / (T + S)


# noinspection PyPep8Naming
def kinematic_viscosity_at(
        T: float, constants: PhysicalConstants = ISO_2533) -> float:
    """Kinematic viscosity ν (m²/s) referred to sea level density,
    ``μ(T) / ρ_n``."""
    return dynamic_viscosity_at(T) / constants.rho_n


# noinspection PyPep8Naming
def thermal_conductivity_at(T: float) -> float:
    """Thermal conductivity λ (W/(m.K)),
    ``2.648151e-3 T^1.5 / (T + 245.4 x 10^(12/T))``."""
    T = _check_temp(T)
    return 2.648151e-3 * T ** 1.5 / (T + 245.4 * 10 ** (12 / T))


# ======================================================================

# noinspection PyPep8Naming
class StandardAtmosphere:
    """
    A standard atmosphere built from a set of physical constants and a
    table of temperature layers.  Base pressures for every layer are
    computed once on construction and the object is immutable
    thereafter, so a single instance can be shared freely.

    Examples
    --------
    >>> atm = StandardAtmosphere()
    >>> atm.standard
    'ISO 2533-1975'
    >>> print(f"T = {atm.temperature(11000):.2f} K")
    T = 216.65 K
    >>> print(f"ρ = {atm.density(0):.3f} kg/m³")
    ρ = 1.225 kg/m³
    """

    def __init__(self, layers: LayerTable = ISO_2533_LAYERS,
                 constants: PhysicalConstants = ISO_2533):
        """
        Parameters
        ----------
        layers : LayerTable, default = ISO_2533_LAYERS
            Temperature layers.  `ICAO_7488_LAYERS` may be given instead
            to extend the lowest layer down to -5 km.
        constants : PhysicalConstants, default = ISO_2533
            Primary constants.
        """
        self._layers = layers
        self._constants = constants
        self._P_b = PressureTable(layers, constants)

    def __repr__(self) -> str:
        return f"StandardAtmosphere(standard={self.standard!r})"

    # -- Properties ----------------------------------------------------

    @property
    def constants(self) -> PhysicalConstants:
        return self._constants

    @property
    def layers(self) -> LayerTable:
        return self._layers

    @property
    def pressure_table(self) -> PressureTable:
        return self._P_b

    @property
    def standard(self) -> str:
        """Name of the layer table in use."""
        return self._layers.name

    # -- Layer Resolution ----------------------------------------------

    def _locate(self, H: float) -> tuple[float, int]:
        """Returns `H` checked as a float and the index of the governing
        layer, issuing an `AltitudeRangeWarning` if the layer has to be
        extrapolated."""
        H = check_altitude(H)
        H_lo, H_hi = self._layers.lower_bound, self._layers.upper_bound

        # The top of the table is still inside the standard.
        if not H_lo <= H <= H_hi and get_options().warn_out_of_range:
            warnings.warn(f"H = {H} m is outside the {self.standard} "
                          f"range [{H_lo}, {H_hi}] m, values are "
                          f"extrapolated.", AltitudeRangeWarning,
                          stacklevel=3)

        return H, locate_layer(self._layers, H)

    def _T(self, H: float, idx: int) -> float:
        # ISO 2533-1975 Eqn 11.
        layer = self._layers[idx]
        return layer.T + layer.B * (H - layer.H)

    def _p(self, H: float, idx: int) -> float:
        layer = self._layers[idx]
        return press_in_layer(H, self._P_b[idx], layer.H, layer.T, layer.B,
                              self._constants, T=self._T(H, idx))

    def _rho(self, H: float, idx: int) -> float:
        # ISO 2533-1975 Eqn 14.
        return self._p(H, idx) / (self._constants.R * self._T(H, idx))

    # Every public altitude method calls `_locate` exactly once and
    # directly, so warnings are attributed to the caller.

    # -- Temperature ---------------------------------------------------

    def temperature(self, H: float) -> float:
        """Temperature T (K)."""
        return self._T(*self._locate(H))

    def temperature_celsius(self, H: float) -> float:
        """Temperature t (°C)."""
        return kelvin_to_celsius(self._T(*self._locate(H)))

    # -- Pressure ------------------------------------------------------

    def pressure(self, H: float) -> float:
        """
        Pressure p (Pa).  Uses the barotropic equation (ISO 2533-1975
        Eqn 12) where the layer has a temperature gradient, otherwise the
        isothermal equation (Eqn 13).  At every layer base the result
        equals the tabulated base pressure.

        Raises
        ------
        DomainError
            If `H` is extrapolated so far that the layer temperature
            would fall to zero.
        """
        return self._p(*self._locate(H))

    def pressure_ratio(self, H: float) -> float:
        """Pressure ratio δ = p / p_n."""
        return self._p(*self._locate(H)) / self._constants.p_n

    def pressure_mbar(self, H: float) -> float:
        return pa_to_mbar(self._p(*self._locate(H)))

    def pressure_mmhg(self, H: float) -> float:
        return pa_to_mmhg(self._p(*self._locate(H)))

    def pressure_altitude(self, p: float) -> float:
        """
        Returns the geopotential altitude (m) at which the standard
        pressure equals `p` (Pa).  Pressures beyond the end layers are
        found by extrapolating those layers and an `AltitudeRangeWarning`
        is issued.
        """
        if not p > 0:
            raise DomainError("Pressure must be positive.", p=p)

        P_lo, P_hi = self._P_b[len(self._P_b) - 1], self._P_b[0]
        if not P_lo <= p <= P_hi and get_options().warn_out_of_range:
            warnings.warn(f"p = {p} Pa is outside the {self.standard} "
                          f"range [{P_lo:.6G}, {P_hi:.6G}] Pa, altitude is "
                          f"extrapolated.", AltitudeRangeWarning,
                          stacklevel=2)

        # Base pressures are descending, so search on -P for the last
        # layer base with P_b >= p.
        idx = int(np.searchsorted(-self._P_b.pressures, -p,
                                  side='right')) - 1
        idx = min(max(idx, 0), len(self._layers) - 2)
        layer = self._layers[idx]
        return alt_in_layer(p, self._P_b[idx], layer.H, layer.T, layer.B,
                            self._constants)

    # -- Density and Specific Weight -----------------------------------

    def density(self, H: float) -> float:
        """Density ρ (kg/m³), ISO 2533-1975 Eqn 14."""
        return self._rho(*self._locate(H))

    def density_ratio(self, H: float) -> float:
        """Density ratio σ = ρ / ρ_n."""
        return self._rho(*self._locate(H)) / self._constants.rho_n

    def sqrt_density_ratio(self, H: float) -> float:
        return sqrt(self._rho(*self._locate(H)) / self._constants.rho_n)

    def gravity(self, H: float) -> float:
        """Acceleration of free fall g (m/s²)."""
        return gravity_at_geopotential(H, self._constants)

    def specific_weight(self, H: float) -> float:
        """Specific weight γ = ρ.g (N/m³), ISO 2533-1975 Eqn 15."""
        # Gravity first: H == radius is invalid input, not a domain error.
        g = gravity_at_geopotential(H, self._constants)
        return self._rho(*self._locate(H)) * g

    # -- Derived Properties --------------------------------------------

    def pressure_scale_height(self, H: float) -> float:
        return pressure_scale_height_at(self._T(*self._locate(H)),
                                        self._constants)

    def air_number_density(self, H: float) -> float:
        """Air number density n (1/m³), ISO 2533-1975 Eqn 17."""
        H, idx = self._locate(H)
        return self._number_density(self._T(H, idx), self._p(H, idx))

    def _number_density(self, T: float, p: float) -> float:
        c = self._constants
        return c.N_A * p / (c.R_star * T)

    def mean_particle_speed(self, H: float) -> float:
        return mean_particle_speed_at(self._T(*self._locate(H)),
                                      self._constants)

    def mean_free_path(self, H: float) -> float:
        """Mean free path of air particles l, evaluated as
        ``0.944407e-18 n sqrt(R T)``."""
        H, idx = self._locate(H)
        return self._mean_free_path(self._T(H, idx), self._p(H, idx))

    def _mean_free_path(self, T: float, p: float) -> float:
        n = self._number_density(T, p)
        return 0.944407e-18 * n * sqrt(self._constants.R * _check_temp(T))

    def collision_frequency(self, H: float) -> float:
        H, idx = self._locate(H)
        T, p = self._T(H, idx), self._p(H, idx)
        return collision_frequency_at(self._number_density(T, p), T,
                                      self._constants)

    def speed_of_sound(self, H: float) -> float:
        return speed_of_sound_at(self._T(*self._locate(H)), self._constants)

    def dynamic_viscosity(self, H: float) -> float:
        return dynamic_viscosity_at(self._T(*self._locate(H)))

    def kinematic_viscosity(self, H: float) -> float:
        return kinematic_viscosity_at(self._T(*self._locate(H)),
                                      self._constants)

    def thermal_conductivity(self, H: float) -> float:
        return thermal_conductivity_at(self._T(*self._locate(H)))

    # -- All Properties ------------------------------------------------

    def evaluate(self, H: float) -> AtmosphereState:
        """
        Compute every property at geopotential altitude `H` (m).

        Raises
        ------
        InvalidAltitudeError
            If `H` is not finite or equals the Earth radius.
        DomainError
            If `H` is extrapolated beyond zero absolute temperature.
        """
        return self._state(*self._locate(H))

    def evaluate_geometric(self, h: float) -> AtmosphereState:
        """Same as `evaluate` but for geometric altitude `h` (m)."""
        H = geopotential_from_geometric(h, self._constants)
        return self._state(*self._locate(H))

    def _state(self, H: float, idx: int) -> AtmosphereState:
        c = self._constants
        h = geometric_from_geopotential(H, c)
        T, p = _check_temp(self._T(H, idx)), self._p(H, idx)
        g = gravity_at_geopotential(H, c)
        rho = p / (c.R * T)
        n = self._number_density(T, p)

        return AtmosphereState(
            H=H, h=h,
            T=T, T_C=kelvin_to_celsius(T),
            p=p, p_mbar=pa_to_mbar(p), p_mmhg=pa_to_mmhg(p),
            p_ratio=p / c.p_n,
            rho=rho, rho_ratio=rho / c.rho_n,
            sqrt_rho_ratio=sqrt(rho / c.rho_n),
            g=g, gamma=rho * g,
            H_p=pressure_scale_height_at(T, c),
            n=n,
            v_bar=mean_particle_speed_at(T, c),
            l=self._mean_free_path(T, p),
            omega=collision_frequency_at(n, T, c),
            a=speed_of_sound_at(T, c),
            mu=dynamic_viscosity_at(T),
            nu=kinematic_viscosity_at(T, c),
            lambda_=thermal_conductivity_at(T))


# ----------------------------------------------------------------------

# Default model, built once on import and shared.
ISA = StandardAtmosphere()

# Module level shortcuts using the default model.
temperature = ISA.temperature
temperature_celsius = ISA.temperature_celsius
pressure = ISA.pressure
pressure_ratio = ISA.pressure_ratio
pressure_mbar = ISA.pressure_mbar
pressure_mmhg = ISA.pressure_mmhg
pressure_altitude = ISA.pressure_altitude
density = ISA.density
density_ratio = ISA.density_ratio
sqrt_density_ratio = ISA.sqrt_density_ratio
specific_weight = ISA.specific_weight
pressure_scale_height = ISA.pressure_scale_height
air_number_density = ISA.air_number_density
mean_particle_speed = ISA.mean_particle_speed
mean_free_path = ISA.mean_free_path
collision_frequency = ISA.collision_frequency
speed_of_sound = ISA.speed_of_sound
dynamic_viscosity = ISA.dynamic_viscosity
kinematic_viscosity = ISA.kinematic_viscosity
thermal_conductivity = ISA.thermal_conductivity
evaluate = ISA.evaluate
evaluate_geometric = ISA.evaluate_geometric
