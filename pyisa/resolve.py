"""
Locate the layer governing a given geopotential altitude.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from .altitude import check_altitude
from .layers import LayerTable


# ======================================================================

class LayerPosition(Enum):
    """Where an altitude lies relative to the layer table."""
    BELOW_RANGE = 'below'
    IN_RANGE = 'in'
    ABOVE_RANGE = 'above'


# ----------------------------------------------------------------------

# noinspection PyPep8Naming
def classify(table: LayerTable, H: float) -> tuple[LayerPosition, int]:
    """
    Classify geopotential altitude `H` against `table` using a binary
    search over the base altitudes.

    Returns
    -------
    position, idx : (LayerPosition, int)
        `idx` is the greatest index with ``table[idx].H <= H``, or -1 if
        `H` is below the first layer.  ``ABOVE_RANGE`` is returned when
        `H` is at or above the last base altitude (`idx` is then the last
        index).
    """
    H = check_altitude(H)
    idx = int(np.searchsorted(table.base_altitudes, H, side='right')) - 1
    if idx < 0:
        return LayerPosition.BELOW_RANGE, idx
    if idx >= len(table) - 1:
        return LayerPosition.ABOVE_RANGE, idx
    return LayerPosition.IN_RANGE, idx


# noinspection PyPep8Naming
def locate_layer(table: LayerTable, H: float) -> int:
    """
    Returns the index of the layer whose formulas apply at geopotential
    altitude `H`:

    - Below the first base altitude the lowest layer is extrapolated
      (index 0).
    - At or above the last base altitude the second to last layer is
      extrapolated.  The last layer has no gradient and only marks the
      top of the table.
    - Otherwise the layer starting at or immediately below `H`.  An
      altitude exactly on a boundary selects the layer starting there.
    """
    position, idx = classify(table, H)
    if position is LayerPosition.BELOW_RANGE:
        return 0
    if position is LayerPosition.ABOVE_RANGE:
        return len(table) - 2
    return idx
