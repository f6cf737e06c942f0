#!/usr/bin/env python3

# Examples of standard atmosphere usage.

import pyisa
from pyisa import ICAO_7488_LAYERS, StandardAtmosphere

# Show some ISA sea level values.
state = pyisa.evaluate(0.0)
print(f"ISA S/L -> p = {state.p:.1f} Pa, T = {state.T:.2f} K, "
      f"ρ = {state.rho:.4f} kg/m³")
# p = 101325.0 Pa, T = 288.15 K, ρ = 1.2250 kg/m³

# Tabulate the layer bases (geopotential altitudes).
print(f"\n{'H (m)':>9s} {'h (m)':>9s} {'T (K)':>7s} {'p (Pa)':>11s} "
      f"{'ρ (kg/m³)':>11s} {'a (m/s)':>8s} {'μ (Pa.s)':>10s}")
for layer in pyisa.ISO_2533_LAYERS:
    s = pyisa.evaluate(layer.H)
    print(f"{s.H:9.0f} {s.h:9.0f} {s.T:7.2f} {s.p:11.5G} {s.rho:11.5G} "
          f"{s.a:8.2f} {s.mu:10.4E}")

# Pressure altitude for an altimeter reading of 300 hPa.
print(f"\nH_press(300 hPa) = {pyisa.pressure_altitude(30000.0):.1f} m")
# H_press(300 hPa) ≈ 9164 m

# The ICAO table extends the lowest layer down to -5 km.
icao = StandardAtmosphere(ICAO_7488_LAYERS)
print(f"\n{icao.standard}: H = -4000 m -> T = {icao.temperature(-4000):.2f} "
      f"K, p = {icao.pressure(-4000):.1f} Pa")
