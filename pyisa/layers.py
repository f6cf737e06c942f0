"""
Temperature layers of the standard atmosphere.

Contains:
    Layer             Base altitude, temperature and gradient of a layer.
    LayerTable        Immutable ordered sequence of layers.
    ISO_2533_LAYERS   ISO 2533-1975 Table 4 (-2 → +80 km).  Default.
    ICAO_7488_LAYERS  ICAO Doc 7488/3 variant (-5 → +80 km).

Notes:

- The two standards only differ below mean sea level.  Any table can be
    given to `StandardAtmosphere`, which reports the name of the table in
    use so that the active standard is never ambiguous.

- The last layer of a table has no gradient; it only marks the upper
    bound of the layer below.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

import numpy as np


# ======================================================================

# noinspection PyPep8Naming
@dataclass(frozen=True)
class Layer:
    """
    A band of constant temperature gradient.

    Parameters
    ----------
    H : float
        Base geopotential altitude (m).
    T : float
        Base temperature (K).
    B : float, optional
        Temperature gradient β (K/m).  May only be omitted for the last
        layer of a table.
    """
    H: float
    T: float
    B: Optional[float] = None


# ----------------------------------------------------------------------

class LayerTable:
    """
    An ordered, immutable table of atmospheric layers with strictly
    ascending base altitudes.
    """

    def __init__(self, layers: Iterable[Layer], name: str):
        """
        Parameters
        ----------
        layers : Iterable[Layer]
            At least two layers in ascending order of base altitude,
            the first starting at or below mean sea level.  Every layer
            except the last must have a gradient `B`.
        name : str
            Identifies the standard the table comes from.

        Raises
        ------
        ValueError
            If the layers do not form a valid table.
        """
        self._layers = tuple(layers)
        self._name = name

        if len(self._layers) < 2:
            raise ValueError("Layer table requires at least two layers.")

        # Base pressures are anchored to the standard sea level values.
        if self._layers[0].H > 0:
            raise ValueError(f"First layer must start at or below mean "
                             f"sea level, got H = {self._layers[0].H}.")

        for i, (lower, upper) in enumerate(zip(self._layers,
                                               self._layers[1:])):
            if not upper.H > lower.H:
                raise ValueError(f"Layer base altitudes must be strictly "
                                 f"ascending, got H = {lower.H} followed "
                                 f"by H = {upper.H}.")
            if lower.B is None:
                raise ValueError(f"Layer {i} (H = {lower.H}) has no "
                                 f"temperature gradient.")

        self._H = np.array([layer.H for layer in self._layers],
                           dtype=float)
        self._H.flags.writeable = False

    # -- Sequence Interface --------------------------------------------

    def __getitem__(self, idx: int) -> Layer:
        return self._layers[idx]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __repr__(self) -> str:
        return f"LayerTable(name={self._name!r}, layers={len(self)})"

    # -- Properties ----------------------------------------------------

    @property
    def base_altitudes(self) -> np.ndarray:
        """Read-only array of layer base altitudes `H` (m)."""
        return self._H

    @property
    def lower_bound(self) -> float:
        return self._layers[0].H

    @property
    def name(self) -> str:
        return self._name

    @property
    def upper_bound(self) -> float:
        return self._layers[-1].H

    # -- Methods -------------------------------------------------------

    def continuity_errors(self) -> list[tuple[int, float]]:
        """
        Returns the temperature mismatch at the top of each layer, i.e.
        ``T_i + B_i * (H_{i+1} - H_i) - T_{i+1}`` for every layer `i`
        except the last.  For a consistent table every error is zero to
        machine precision.  This is a check on the table values only;
        the atmosphere model does not enforce it.
        """
        return [(i, lower.T + lower.B * (upper.H - lower.H) - upper.T)
                for i, (lower, upper) in enumerate(zip(self._layers,
                                                       self._layers[1:]))]


# ----------------------------------------------------------------------

# ISO 2533-1975 Table 4.  Columns are geopotential base altitude H (m),
# temperature T (K) and temperature gradient β (K/m).
ISO_2533_LAYERS = LayerTable([
    Layer(-2000.0, 301.15, -0.0065),
    Layer(0.0, 288.15, -0.0065),
    Layer(11000.0, 216.65, 0.0),
    Layer(20000.0, 216.65, 0.001),
    Layer(32000.0, 228.65, 0.0028),
    Layer(47000.0, 270.65, 0.0),
    Layer(51000.0, 270.65, -0.0028),
    Layer(71000.0, 214.65, -0.002),
    Layer(80000.0, 196.65)
], name='ISO 2533-1975')

# ICAO Doc 7488/3 extends the lowest layer down to -5 km.
ICAO_7488_LAYERS = LayerTable(
    [Layer(-5000.0, 320.65, -0.0065), *ISO_2533_LAYERS[1:]],
    name='ICAO Doc 7488/3')
