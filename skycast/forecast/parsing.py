"""Parse raw OpenWeather payloads into typed records.

Malformed interval samples, including ones carrying non-finite numbers
(``json`` accepts ``NaN`` and ``Infinity`` literals), are dropped and
logged rather than aborting the whole forecast; a malformed
current-conditions record is an UpstreamError since nothing sensible
can be shown without it.
"""

import logging
import math
from typing import Any

from skycast.errors import UpstreamError
from skycast.models.weather import CurrentConditions, IntervalSample

logger = logging.getLogger(__name__)

_MALFORMED = (KeyError, IndexError, TypeError, ValueError, OverflowError, AttributeError)


def parse_samples(raw_forecast: dict) -> list[IntervalSample]:
    """Extract interval samples from a /forecast payload, preserving order."""
    items = raw_forecast.get("list") or []
    samples: list[IntervalSample] = []
    for index, item in enumerate(items):
        sample = _parse_sample(item)
        if sample is None:
            logger.warning("Dropping malformed forecast sample at index %d", index)
            continue
        samples.append(sample)
    return samples


def _parse_sample(item: Any) -> IntervalSample | None:
    try:
        main = item["main"]
        weather = item["weather"][0]
        return IntervalSample(
            timestamp=int(item["dt"]),
            temperature_k=finite_float(main["temp"]),
            humidity=int(main["humidity"]),
            wind_speed_mps=finite_float(item["wind"]["speed"]),
            condition_code=str(weather.get("icon", "")),
            condition_group=str(weather.get("main", "")),
        )
    except _MALFORMED:
        return None


def parse_current(raw_current: dict) -> CurrentConditions:
    """Extract the current-conditions record from a /weather payload."""
    try:
        main = raw_current["main"]
        sys = raw_current.get("sys") or {}
        weather = (raw_current.get("weather") or [{}])[0]
        coord = raw_current["coord"]
        return CurrentConditions(
            name=str(raw_current.get("name", "")),
            country=str(sys.get("country", "")),
            lat=finite_float(coord["lat"]),
            lon=finite_float(coord["lon"]),
            temperature_k=finite_float(main["temp"]),
            feels_like_k=finite_float(main.get("feels_like", main["temp"])),
            humidity=int(main["humidity"]),
            wind_speed_mps=finite_float((raw_current.get("wind") or {}).get("speed", 0.0)),
            visibility_m=finite_float(raw_current.get("visibility", 0)),
            pressure_hpa=int(main.get("pressure", 0)),
            sunrise=int(sys.get("sunrise", 0)),
            sunset=int(sys.get("sunset", 0)),
            condition=str(weather.get("main", "")),
            description=str(weather.get("description", "")),
            condition_code=str(weather.get("icon", "")),
            utc_offset_seconds=int(raw_current.get("timezone", 0)),
        )
    except _MALFORMED as e:
        raise UpstreamError(f"Malformed current weather payload: {e!r}") from e


def utc_offset(raw_forecast: dict, current: CurrentConditions) -> int:
    """Location UTC offset in seconds: forecast city first, then current record."""
    city = raw_forecast.get("city") or {}
    try:
        return int(city["timezone"])
    except (KeyError, TypeError, ValueError, OverflowError):
        return current.utc_offset_seconds


def finite_float(value: Any) -> float:
    """float(value), rejecting NaN and infinities with ValueError."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite value: {value!r}")
    return number
