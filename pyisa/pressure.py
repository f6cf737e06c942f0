"""
Pressure within a layer and the table of layer base pressures
(ISO 2533-1975 §2.7).
"""

from __future__ import annotations

from math import exp, log

import numpy as np

from .constants import PhysicalConstants
from .exceptions import DomainError
from .layers import LayerTable


# ======================================================================

# noinspection PyPep8Naming
def press_in_layer(H: float, P_b: float, H_b: float, T_b: float,
                   beta: float, constants: PhysicalConstants,
                   T: float = None) -> float:
    """
    Returns the pressure at geopotential altitude `H` within a layer of
    constant gradient `beta`, given base (_b) values of pressure,
    altitude and temperature.

    Parameters
    ----------
    T : float, optional
        Temperature used by the isothermal equation (``beta == 0``).  If
        omitted, `T_b` is used.

    Raises
    ------
    DomainError
        If the barotropic base ``1 + (β / T_b)(H - H_b)`` is not
        positive, i.e. the layer has been extrapolated past zero
        absolute temperature.
    """
    g_n, R = constants.g_n, constants.R
    if beta != 0:
        # ISO 2533-1975 Eqn 12.
        base = 1 + (beta / T_b) * (H - H_b)
        if base <= 0:
            raise DomainError("Barotropic pressure equation has a "
                              "non-positive base.", H=H, H_b=H_b, T_b=T_b,
                              beta=beta, base=base)
        return P_b * base ** (-g_n / (beta * R))
    else:
        # ISO 2533-1975 Eqn 13.
        T = T_b if T is None else T
        return P_b * exp(-(g_n / (R * T)) * (H - H_b))


# noinspection PyPep8Naming
def alt_in_layer(P: float, P_b: float, H_b: float, T_b: float,
                 beta: float, constants: PhysicalConstants) -> float:
    """Returns the geopotential altitude at which pressure `P` occurs
    within a layer of constant gradient `beta`, given base (_b) values of
    pressure, altitude and temperature.  Inverse of `press_in_layer`."""
    g_n, R = constants.g_n, constants.R
    if P <= 0:
        raise DomainError("Pressure must be positive.", P=P)
    if beta != 0:
        return H_b + (T_b / beta) * ((P / P_b) ** (-beta * R / g_n) - 1)
    else:
        return H_b - (R * T_b / g_n) * log(P / P_b)


# ----------------------------------------------------------------------

class PressureTable:
    """
    Base pressure (Pa) at the start of every layer of a `LayerTable`.
    Computed once on construction by working up the table from sea
    level, each entry depending on the one below.  Read-only thereafter.
    """

    def __init__(self, layers: LayerTable, constants: PhysicalConstants):
        P_b = np.empty(len(layers), dtype=float)

        for i, layer in enumerate(layers):
            ref_idx = max(i - 1, 0)
            ref = layers[ref_idx]

            # Layers starting at or below sea level are anchored to the
            # standard sea level values rather than the table entries.
            if ref.H <= 0:
                p_ref, H_ref, T_ref = constants.p_n, 0.0, constants.T_n
            else:
                p_ref, H_ref, T_ref = P_b[ref_idx], ref.H, ref.T

            P_b[i] = press_in_layer(layer.H, p_ref, H_ref, T_ref, ref.B,
                                    constants, T=layer.T)

        P_b.flags.writeable = False
        self._P_b = P_b

    def __getitem__(self, idx: int) -> float:
        return float(self._P_b[idx])

    def __len__(self) -> int:
        return len(self._P_b)

    def __repr__(self) -> str:
        return f"PressureTable({np.array2string(self._P_b, precision=6)})"

    @property
    def pressures(self) -> np.ndarray:
        """Read-only array of base pressures (Pa), one per layer."""
        return self._P_b
