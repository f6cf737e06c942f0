"""
Unit conversions for reporting atmosphere values.
"""

ZERO_CELSIUS = 273.15  # K
PA_TO_MBAR = 0.01
PA_TO_MMHG = 0.00750062


# ======================================================================

def kelvin_to_celsius(T: float) -> float:
    return T - ZERO_CELSIUS


def pa_to_mbar(p: float) -> float:
    return p * PA_TO_MBAR


def pa_to_mmhg(p: float) -> float:
    return p * PA_TO_MMHG
