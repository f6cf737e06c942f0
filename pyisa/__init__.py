"""
.. This module acts as the top-level API documentation.

.. module: pyisa

Standard atmosphere properties (ISO 2533-1975 / ICAO Doc 7488/3) as
functions of altitude.

.. autosummary::
    :toctree: generated/

    atmosphere
    altitude
    constants
    convert
    exceptions
    layers
    pressure
    resolve
"""

__version__ = "0.1.0"

import sys

from ._opts import AtmosphereOptions, get_options, set_options
from .altitude import (geometric_from_geopotential,
                       geopotential_from_geometric, gravity,
                       gravity_at_geopotential)
from .atmosphere import (
    ISA, AtmosphereState, StandardAtmosphere, air_number_density,
    collision_frequency, collision_frequency_at, density, density_ratio,
    dynamic_viscosity, dynamic_viscosity_at, evaluate, evaluate_geometric,
    kinematic_viscosity, kinematic_viscosity_at, mean_free_path,
    mean_particle_speed, mean_particle_speed_at, pressure,
    pressure_altitude, pressure_mbar, pressure_mmhg, pressure_ratio,
    pressure_scale_height, pressure_scale_height_at, specific_weight,
    speed_of_sound, speed_of_sound_at, sqrt_density_ratio, temperature,
    temperature_celsius, thermal_conductivity, thermal_conductivity_at)
from .constants import ISO_2533, PhysicalConstants
from .exceptions import AltitudeRangeWarning, DomainError, InvalidAltitudeError
from .layers import ICAO_7488_LAYERS, ISO_2533_LAYERS, Layer, LayerTable
from .pressure import PressureTable
from .resolve import LayerPosition, classify, locate_layer

# ======================================================================

assert sys.version_info >= (3, 10)
