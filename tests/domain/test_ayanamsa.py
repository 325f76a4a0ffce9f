import unittest

from kundali_core.domain.kundali.ayanamsa import (
    is_supported_ayanamsa,
    lahiri_ayanamsa,
    normalize_degrees,
    signed_delta,
    tropical_to_sidereal,
)


class TestAyanamsa(unittest.TestCase):
    def test_lahiri_is_linear_in_year(self):
        self.assertAlmostEqual(lahiri_ayanamsa(1900), 23.85)
        self.assertAlmostEqual(lahiri_ayanamsa(2000), 25.2472)

    def test_sidereal_wraps_below_zero(self):
        self.assertAlmostEqual(tropical_to_sidereal(10.0, 2000), 344.7528)

    def test_sidereal_depends_only_on_arguments(self):
        self.assertEqual(
            tropical_to_sidereal(123.456, 1985),
            tropical_to_sidereal(123.456, 1985),
        )

    def test_normalize_degrees(self):
        self.assertEqual(normalize_degrees(720.5), 0.5)
        self.assertEqual(normalize_degrees(-30.0), 330.0)
        self.assertEqual(normalize_degrees(360.0), 0.0)
        # would round up to 360.0 with a bare modulo
        self.assertEqual(normalize_degrees(-1e-20), 0.0)

    def test_signed_delta_takes_short_way_round(self):
        self.assertAlmostEqual(signed_delta(350.0, 5.0), 15.0)
        self.assertAlmostEqual(signed_delta(5.0, 350.0), -15.0)
        self.assertEqual(signed_delta(0.0, 180.0), 180.0)
        self.assertEqual(signed_delta(180.0, 0.0), 180.0)

    def test_supported_names_are_case_insensitive(self):
        self.assertTrue(is_supported_ayanamsa("Lahiri"))
        self.assertTrue(is_supported_ayanamsa("lahiri"))
        self.assertFalse(is_supported_ayanamsa("Raman"))


if __name__ == "__main__":
    unittest.main()
