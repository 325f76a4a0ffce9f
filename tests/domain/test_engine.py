import unittest
from unittest.mock import patch

from pydantic import ValidationError

from kundali_core.config import Settings
from kundali_core.domain.kundali.ayanamsa import signed_delta
from kundali_core.domain.kundali.calculator import KundaliCalculator
from kundali_core.domain.kundali.converters import (
    chart_from_dict,
    chart_to_dict,
    format_planets_for_chart,
)
from kundali_core.domain.kundali.engine import BirthInput, KundaliEngine, build_engine
from kundali_core.domain.kundali.errors import CalculationError
from kundali_core.domain.kundali.positions.base import ProviderOutcome
from tests.fakes import CrashingEphemeris, FailingEphemeris, LinearEphemeris

ALL_BODIES = {"Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Rahu", "Ketu"}

SCENARIO_A = BirthInput(
    birth_date="2000-01-01",
    birth_time="12:00",
    latitude=28.6139,
    longitude=77.2090,
    timezone=5.5,
)


class ChartAssertions:
    def assert_complete_chart(self, chart):
        self.assertGreaterEqual(chart.ascendant.longitude, 0.0)
        self.assertLess(chart.ascendant.longitude, 360.0)

        self.assertEqual(len(chart.houses), 12)
        self.assertEqual(chart.houses[0].cusp, chart.ascendant.longitude)
        for current, following in zip(chart.houses, chart.houses[1:]):
            self.assertAlmostEqual(signed_delta(current.cusp, following.cusp), 30.0, places=9)

        self.assertEqual(set(chart.planets), ALL_BODIES)
        self.assertEqual(set(chart.nakshatras), ALL_BODIES)
        self.assertEqual(set(chart.rashis), ALL_BODIES)
        for name, planet in chart.planets.items():
            self.assertGreaterEqual(planet.longitude, 0.0)
            self.assertLess(planet.longitude, 360.0)
            self.assertTrue(1 <= chart.nakshatras[name].index <= 27)
            self.assertTrue(1 <= chart.nakshatras[name].pada <= 4)
            self.assertTrue(1 <= chart.rashis[name].sign <= 12)

        self.assertEqual(
            abs(signed_delta(chart.planets["Rahu"].longitude, chart.planets["Ketu"].longitude)),
            180.0,
        )


class TestKundaliEngine(ChartAssertions, unittest.TestCase):
    def setUp(self):
        self.engine = KundaliEngine(KundaliCalculator(ephemeris=LinearEphemeris()))

    def test_scenario_a_with_primary_strategies(self):
        chart = self.engine.generate(SCENARIO_A)

        self.assert_complete_chart(chart)
        self.assertEqual(chart.metadata.position_strategy, "swiss_ephemeris")
        self.assertEqual(chart.metadata.ascendant_strategy, "sidereal_time")
        self.assertFalse(chart.metadata.fallback_used)
        self.assertEqual(chart.metadata.ayanamsa, "Lahiri")
        self.assertAlmostEqual(chart.metadata.ayanamsa_degrees, 25.2472)
        self.assertAlmostEqual(chart.birth_info.julian_day, 2451544.7708333, places=6)

    def test_scenario_b_equator_and_greenwich(self):
        chart = self.engine.generate(BirthInput("2000-01-01", "12:00", 0, 0))

        self.assert_complete_chart(chart)

    def test_deterministic_apart_from_computed_at(self):
        exclude = {"metadata": {"computed_at"}}

        first = self.engine.generate(SCENARIO_A).model_dump(exclude=exclude)
        second = self.engine.generate(SCENARIO_A).model_dump(exclude=exclude)

        self.assertEqual(first, second)

    def test_planet_placements_follow_longitudes(self):
        chart = self.engine.generate(SCENARIO_A)
        sun = chart.planets["Sun"]

        self.assertEqual(chart.rashis["Sun"].sign, int(sun.longitude // 30) + 1)
        self.assertAlmostEqual(chart.rashis["Sun"].degree, sun.longitude % 30)

    def test_chart_is_immutable(self):
        chart = self.engine.generate(SCENARIO_A)

        with self.assertRaises(ValidationError):
            chart.ascendant = None
        with self.assertRaises(ValidationError):
            chart.planets["Sun"].longitude = 0.0


class TestFallback(ChartAssertions, unittest.TestCase):
    def test_failing_primary_still_yields_complete_chart(self):
        engine = KundaliEngine(KundaliCalculator(ephemeris=FailingEphemeris()))

        chart = engine.generate(SCENARIO_A)

        self.assert_complete_chart(chart)
        self.assertEqual(chart.metadata.position_strategy, "analytic_series")
        self.assertEqual(chart.metadata.ascendant_strategy, "julian_day_proxy")
        self.assertTrue(chart.metadata.fallback_used)

    def test_unexpected_primary_errors_still_fall_back(self):
        engine = KundaliEngine(KundaliCalculator(ephemeris=CrashingEphemeris()))

        with self.assertLogs("kundali_core.domain.kundali.positions.base", level="WARNING") as logs:
            chart = engine.generate(SCENARIO_A)

        self.assert_complete_chart(chart)
        self.assertEqual(chart.metadata.position_strategy, "analytic_series")
        self.assertEqual(chart.metadata.ascendant_strategy, "julian_day_proxy")
        self.assertTrue(chart.metadata.fallback_used)
        self.assertTrue(any("ephemeris backend crashed" in line for line in logs.output))

    def test_no_ephemeris_configured(self):
        engine = build_engine(Settings(USE_EPHEMERIS=False))

        chart = engine.generate(SCENARIO_A)

        self.assert_complete_chart(chart)
        self.assertEqual(chart.metadata.position_strategy, "analytic_series")

    def test_strategies_are_never_mixed_within_positions(self):
        engine = KundaliEngine(KundaliCalculator(ephemeris=FailingEphemeris()))
        chart = engine.generate(SCENARIO_A)

        # analytic series reports zero ecliptic latitude for every body
        self.assertTrue(all(p.latitude == 0.0 for p in chart.planets.values()))


class TestErrorBoundary(unittest.TestCase):
    def setUp(self):
        self.calculator = KundaliCalculator(ephemeris=FailingEphemeris())
        self.engine = KundaliEngine(self.calculator)

    def test_unexpected_failure_is_wrapped_with_cause(self):
        with patch.object(
            self.calculator.secondary_positions,
            "compute",
            side_effect=ZeroDivisionError("boom"),
        ):
            with self.assertLogs("kundali_core.domain.kundali.engine", level="ERROR"):
                with self.assertRaises(CalculationError) as ctx:
                    self.engine.generate(SCENARIO_A)

        self.assertIn("boom", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, ZeroDivisionError)

    def test_failing_secondary_surfaces_as_calculation_error(self):
        failure = ProviderOutcome.failure("analytic_series", "series diverged")
        with patch.object(self.calculator.secondary_positions, "compute", return_value=failure):
            with self.assertRaises(CalculationError) as ctx:
                self.engine.generate(SCENARIO_A)

        self.assertIn("series diverged", str(ctx.exception))


class TestConverters(unittest.TestCase):
    def setUp(self):
        engine = KundaliEngine(KundaliCalculator(ephemeris=LinearEphemeris()))
        self.chart = engine.generate(SCENARIO_A)

    def test_chart_to_dict_is_json_safe(self):
        data = chart_to_dict(self.chart)

        self.assertIsInstance(data["metadata"]["computed_at"], str)
        self.assertEqual(len(data["houses"]), 12)
        self.assertEqual(chart_from_dict(data), self.chart)

    def test_format_planets_for_chart(self):
        rows = format_planets_for_chart(self.chart)

        self.assertEqual({row["name"] for row in rows}, ALL_BODIES)
        for row in rows:
            self.assertTrue(0 <= row["sign"] <= 11)
            self.assertLess(row["degree"], 30.0)
        ketu = next(row for row in rows if row["name"] == "Ketu")
        self.assertTrue(ketu["retrograde"])


if __name__ == "__main__":
    unittest.main()
