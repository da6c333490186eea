"""Numeric unit conversions. All results are rounded half away from zero."""

import math

KELVIN_OFFSET = 273.15
MPS_TO_KMH = 3.6


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def kelvin_to_celsius(kelvin: float) -> int:
    return round_half_away(kelvin - KELVIN_OFFSET)


def mps_to_kmh(mps: float) -> int:
    return round_half_away(mps * MPS_TO_KMH)


def meters_to_km(meters: float) -> int:
    return round_half_away(meters / 1000)
