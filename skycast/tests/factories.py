"""Builders for typed records and raw provider payloads used across tests."""

import json
from pathlib import Path

from skycast.models.weather import CurrentConditions, IntervalSample

FIXTURE_DIR = Path(__file__).parent / "fixtures"

KELVIN = 273.15
JAN_6_2026 = 1767657600  # 2026-01-06 00:00:00 UTC, a Tuesday
THREE_HOURS = 3 * 3600


def make_sample(
    timestamp: int,
    temp_c: float,
    code: str = "01d",
    group: str = "Clear",
    humidity: int = 50,
    wind_mps: float = 2.0,
) -> IntervalSample:
    return IntervalSample(
        timestamp=timestamp,
        temperature_k=temp_c + KELVIN,
        humidity=humidity,
        wind_speed_mps=wind_mps,
        condition_code=code,
        condition_group=group,
    )


def make_current(**overrides) -> CurrentConditions:
    fields = {
        "name": "Paris",
        "country": "FR",
        "lat": 48.8534,
        "lon": 2.3488,
        "temperature_k": 297.15,
        "feels_like_k": 298.15,
        "humidity": 40,
        "wind_speed_mps": 3.5,
        "visibility_m": 10000,
        "pressure_hpa": 1015,
        "sunrise": 1767684000,
        "sunset": 1767714000,
        "condition": "Clear",
        "description": "clear sky",
        "condition_code": "01d",
        "utc_offset_seconds": 3600,
    }
    fields.update(overrides)
    return CurrentConditions(**fields)


def raw_sample(timestamp: int, temp_k: float, icon: str = "01d", main: str = "Clear") -> dict:
    return {
        "dt": timestamp,
        "main": {"temp": temp_k, "humidity": 50},
        "weather": [{"main": main, "description": main.lower(), "icon": icon}],
        "wind": {"speed": 2.0},
    }


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)
