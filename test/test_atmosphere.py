from math import sqrt
from unittest import TestCase


class TestStandardAtmosphere(TestCase):
    def test__init__(self):
        from pyisa import (StandardAtmosphere, ICAO_7488_LAYERS,
                           ISO_2533_LAYERS, ISA)

        # Default model is ISO and is the shared instance's standard.
        atm = StandardAtmosphere()
        self.assertEqual(atm.standard, 'ISO 2533-1975')
        self.assertIs(atm.layers, ISO_2533_LAYERS)
        self.assertEqual(ISA.standard, atm.standard)
        self.assertEqual(len(atm.pressure_table), len(ISO_2533_LAYERS))
        self.assertIn('ISO 2533-1975', repr(atm))

        atm = StandardAtmosphere(ICAO_7488_LAYERS)
        self.assertEqual(atm.standard, 'ICAO Doc 7488/3')

    def test_sea_level(self):
        from pyisa import ISA

        # Sea level - thorough test.
        self.assertAlmostEqual(ISA.temperature(0), 288.15)
        self.assertAlmostEqual(ISA.temperature_celsius(0), 15.0)
        self.assertAlmostEqual(ISA.pressure(0), 101325.0, places=6)
        self.assertAlmostEqual(ISA.pressure_mbar(0), 1013.25, places=6)
        self.assertAlmostEqual(ISA.pressure_mmhg(0), 760.0, places=2)
        self.assertAlmostEqual(ISA.pressure_ratio(0), 1.0)
        self.assertAlmostEqual(ISA.density(0), 1.225)
        self.assertAlmostEqual(ISA.density_ratio(0), 1.0)
        self.assertAlmostEqual(ISA.sqrt_density_ratio(0), 1.0)
        self.assertAlmostEqual(ISA.gravity(0), 9.80665)
        self.assertAlmostEqual(ISA.specific_weight(0), 12.0131, places=3)
        self.assertAlmostEqual(ISA.pressure_scale_height(0), 8434.6,
                               places=0)
        self.assertAlmostEqual(ISA.air_number_density(0) / 1e25, 2.5471,
                               places=3)
        self.assertAlmostEqual(ISA.mean_particle_speed(0), 458.94,
                               places=1)
        self.assertAlmostEqual(ISA.speed_of_sound(0), 340.294, places=3)
        self.assertAlmostEqual(ISA.dynamic_viscosity(0), 1.7894e-5,
                               places=8)
        self.assertAlmostEqual(ISA.kinematic_viscosity(0), 1.4607e-5,
                               places=8)

    def test_layer_values(self):
        from pyisa import ISA

        # Known geopotential level.
        self.assertAlmostEqual(ISA.temperature(11000), 216.65, places=4)
        self.assertAlmostEqual(ISA.pressure(11000) / 1000, 22.632,
                               places=3)

        # Inter-level, low.
        self.assertAlmostEqual(ISA.temperature(1000), 281.65, places=3)
        self.assertAlmostEqual(ISA.pressure(1000) / 1000, 89.875, places=3)

        # Inter-level, high, no lapse.
        self.assertAlmostEqual(ISA.temperature(47500), 270.65, places=3)
        self.assertAlmostEqual(ISA.pressure(47500) / 1000, 0.104123,
                               places=4)
        self.assertAlmostEqual(ISA.dynamic_viscosity(47500), 1.7037e-5,
                               places=8)

    def test_formulas(self):
        from pyisa import ISA

        c = ISA.constants
        for H in [-1500.0, 0.0, 5000.0, 15000.0, 25000.0, 60000.0]:
            T, p = ISA.temperature(H), ISA.pressure(H)
            n = c.N_A * p / (c.R_star * T)
            self.assertAlmostEqual(ISA.air_number_density(H) / n, 1.0)
            self.assertAlmostEqual(
                ISA.mean_free_path(H) / (0.944407e-18 * n * sqrt(c.R * T)),
                1.0)
            self.assertAlmostEqual(
                ISA.collision_frequency(H) /
                (0.99407e-18 * n * sqrt(c.R * T)), 1.0)
            self.assertAlmostEqual(
                ISA.thermal_conductivity(H) /
                (2.648151e-3 * T ** 1.5 / (T + 245.4 * 10 ** (12 / T))),
                1.0)
            self.assertAlmostEqual(
                ISA.specific_weight(H) / (ISA.density(H) * ISA.gravity(H)),
                1.0)

    def test_evaluate(self):
        from pyisa import ISA, AtmosphereState, geometric_from_geopotential

        state = ISA.evaluate(5000.0)
        self.assertIsInstance(state, AtmosphereState)
        self.assertEqual(state.H, 5000.0)
        self.assertAlmostEqual(state.h, geometric_from_geopotential(5000.0))

        # Every field agrees with the individual functions.
        expected = {
            'T': ISA.temperature, 'T_C': ISA.temperature_celsius,
            'p': ISA.pressure, 'p_mbar': ISA.pressure_mbar,
            'p_mmhg': ISA.pressure_mmhg, 'p_ratio': ISA.pressure_ratio,
            'rho': ISA.density, 'rho_ratio': ISA.density_ratio,
            'sqrt_rho_ratio': ISA.sqrt_density_ratio, 'g': ISA.gravity,
            'gamma': ISA.specific_weight, 'H_p': ISA.pressure_scale_height,
            'n': ISA.air_number_density, 'v_bar': ISA.mean_particle_speed,
            'l': ISA.mean_free_path, 'omega': ISA.collision_frequency,
            'a': ISA.speed_of_sound, 'mu': ISA.dynamic_viscosity,
            'nu': ISA.kinematic_viscosity,
            'lambda_': ISA.thermal_conductivity}
        values = state.as_dict()
        self.assertEqual(set(values), set(expected) | {'H', 'h'})
        for name, func in expected.items():
            self.assertAlmostEqual(values[name] / func(5000.0), 1.0,
                                   msg=name)

        # Geometric altitude gives the same state.
        state_geo = ISA.evaluate_geometric(state.h)
        self.assertAlmostEqual(state_geo.H, 5000.0, places=6)
        self.assertAlmostEqual(state_geo.p, state.p, places=6)

        # Results are frozen.
        with self.assertRaises(AttributeError):
            # noinspection PyDataclass
            state.T = 0.0

    def test_pressure_altitude(self):
        from pyisa import ISA, DomainError

        self.assertAlmostEqual(ISA.pressure_altitude(101325.0), 0.0)
        for H in [-1999.0, -500.0, 3000.0, 11000.0, 15000.0, 20000.0,
                  35000.0, 49000.0, 60000.0, 75000.0, 80000.0]:
            self.assertAlmostEqual(ISA.pressure_altitude(ISA.pressure(H)),
                                   H, places=5)

        with self.assertRaises(DomainError):
            ISA.pressure_altitude(0.0)

    def test_icao_table(self):
        from pyisa import StandardAtmosphere, ICAO_7488_LAYERS, ISA

        icao = StandardAtmosphere(ICAO_7488_LAYERS)

        # Same atmosphere above -2 km, extended below without warning.
        for H in [-2000.0, -1000.0, 0.0, 11000.0, 50000.0]:
            self.assertAlmostEqual(icao.pressure(H) / ISA.pressure(H), 1.0)
            self.assertAlmostEqual(icao.temperature(H), ISA.temperature(H))

        self.assertAlmostEqual(icao.temperature(-5000.0), 320.65)
        self.assertAlmostEqual(icao.pressure(-5000.0),
                               icao.pressure_table[0])
        self.assertGreater(icao.pressure(-5000.0), icao.pressure(-2000.0))
