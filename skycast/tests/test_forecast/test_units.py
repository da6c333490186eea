"""Tests for unit conversions and the rounding rule."""

import pytest

from skycast.forecast.units import (
    kelvin_to_celsius,
    meters_to_km,
    mps_to_kmh,
    round_half_away,
)


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (-2.5, -3), (0.5, 1), (-0.5, -1), (1.49, 1), (-1.49, -1), (0.0, 0)],
    )
    def test_ties_away_from_zero(self, value: float, expected: int):
        assert round_half_away(value) == expected

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3


class TestKelvinToCelsius:
    def test_freezing_point(self):
        assert kelvin_to_celsius(273.15) == 0

    def test_paris_afternoon(self):
        assert kelvin_to_celsius(297.15) == 24

    def test_below_zero(self):
        assert kelvin_to_celsius(263.15) == -10

    def test_monotonic(self):
        kelvins = [200 + i * 0.37 for i in range(400)]
        celsius = [kelvin_to_celsius(k) for k in kelvins]
        assert celsius == sorted(celsius)

    def test_matches_rounded_difference(self):
        for k in (250.0, 260.4, 273.15, 288.9, 301.61, 315.0):
            assert kelvin_to_celsius(k) == round_half_away(k - 273.15)


class TestSpeedAndDistance:
    def test_mps_to_kmh(self):
        assert mps_to_kmh(10) == 36
        assert mps_to_kmh(3.5) == 13  # 12.6
        assert mps_to_kmh(0) == 0

    def test_meters_to_km(self):
        assert meters_to_km(10000) == 10
        assert meters_to_km(1500) == 2
        assert meters_to_km(2500) == 3
        assert meters_to_km(400) == 0
