"""
Primary constants of the standard atmosphere (ISO 2533-1975 Table 1)
and the air characteristics derived from them.

Notes:

- All values are SI.  The gas constant and Avogadro constant are taken
    per mole (not per kmol) so that the derived molar mass comes out in
    kg/mol and the specific gas constant in J/(kg.K).

- `M` and `R` are never stored.  They are always computed from the
    primary values, so a modified set of constants stays internally
    consistent.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from math import isfinite


# ======================================================================

# noinspection PyPep8Naming
@dataclass(frozen=True, kw_only=True)
class PhysicalConstants:
    """
    Fixed set of constants adopted for a standard atmosphere.

    Parameters
    ----------
    g_n : float
        Standard acceleration of free fall (m/s²).
    N_A : float
        Avogadro constant (1/mol).
    p_n : float
        Standard pressure at mean sea level (Pa).
    rho_n : float
        Standard air density at mean sea level (kg/m³).
    T_n : float
        Standard thermodynamic temperature at mean sea level (K).
    R_star : float
        Universal gas constant (J/(mol.K)).
    radius : float
        Nominal radius of the Earth (m).
    k : float
        Adiabatic index (ratio of specific heats), dimensionless.
    """
    g_n: float
    N_A: float
    p_n: float
    rho_n: float
    T_n: float
    R_star: float
    radius: float
    k: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isfinite(value) or value <= 0:
                raise ValueError(f"Constant '{f.name}' must be finite and "
                                 f"positive, got {value}.")

    @property
    def M(self) -> float:
        """Air molar mass at sea level (kg/mol), ISO 2533-1975 Eqn 2."""
        return self.rho_n * self.R_star * self.T_n / self.p_n

    @property
    def R(self) -> float:
        """Specific gas constant (J/(kg.K)), ISO 2533-1975 Eqn 3."""
        return self.R_star / self.M


# ----------------------------------------------------------------------

ISO_2533 = PhysicalConstants(
    g_n=9.80665,
    N_A=602.257e21,
    p_n=101325.0,
    rho_n=1.225,
    T_n=288.15,
    R_star=8.31432,
    radius=6356766.0,
    k=1.4
)
