"""Forecast aggregator: snapshot, hourly sequence and daily roll-up.

Daily buckets are keyed on the local calendar date (UTC timestamp shifted
by the location's offset) so that "Today" lines up with the location's
own midnight. Buckets keep first-seen order; the first sample of each
day supplies the condition, icon, humidity and wind for that day.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

from skycast.config.schema import ForecastConfig
from skycast.forecast.icons import resolve_icon
from skycast.forecast.units import (
    kelvin_to_celsius,
    meters_to_km,
    mps_to_kmh,
    round_half_away,
)
from skycast.models.weather import (
    CurrentConditions,
    DailyAggregate,
    ForecastViews,
    HourlyView,
    IntervalSample,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

TODAY_LABEL = "Today"


@dataclass
class _DayBucket:
    first: IntervalSample
    temperatures: list[int] = field(default_factory=list)


class ForecastAggregator:
    def __init__(self, config: ForecastConfig | None = None):
        self.config = config or ForecastConfig()

    def build(
        self,
        current: CurrentConditions,
        samples: Sequence[IntervalSample],
        utc_offset_seconds: int = 0,
        uv_index: float | None = None,
    ) -> ForecastViews:
        """Produce all three views from one provider payload."""
        views = ForecastViews(
            snapshot=self.snapshot(current, uv_index),
            hourly=tuple(self.hourly(samples, utc_offset_seconds)),
            daily=tuple(self.daily(samples, utc_offset_seconds)),
        )
        logger.debug(
            "Built views for %s: %d hourly, %d daily",
            views.snapshot.location, len(views.hourly), len(views.daily),
        )
        return views

    def snapshot(
        self, current: CurrentConditions, uv_index: float | None = None
    ) -> WeatherSnapshot:
        return WeatherSnapshot(
            location=location_label(current.name, current.country),
            temperature=kelvin_to_celsius(current.temperature_k),
            feels_like=kelvin_to_celsius(current.feels_like_k),
            condition=current.condition,
            description=current.description,
            icon=resolve_icon(current.condition_code, current.condition),
            humidity=current.humidity,
            wind_speed_kmh=mps_to_kmh(current.wind_speed_mps),
            visibility_km=meters_to_km(current.visibility_m),
            pressure=current.pressure_hpa,
            sunrise=current.sunrise,
            sunset=current.sunset,
            lat=current.lat,
            lon=current.lon,
            uv_index=round_half_away(uv_index) if uv_index is not None else None,
            uv_available=uv_index is not None,
        )

    def hourly(
        self, samples: Sequence[IntervalSample], utc_offset_seconds: int = 0
    ) -> list[HourlyView]:
        return [
            HourlyView(
                time=format_hour(s.timestamp, utc_offset_seconds),
                temperature=kelvin_to_celsius(s.temperature_k),
                condition=s.condition_group,
                icon=resolve_icon(s.condition_code, s.condition_group),
                humidity=s.humidity,
                wind_speed_kmh=mps_to_kmh(s.wind_speed_mps),
            )
            for s in samples[: self.config.hourly_count]
        ]

    def daily(
        self, samples: Sequence[IntervalSample], utc_offset_seconds: int = 0
    ) -> list[DailyAggregate]:
        buckets: dict[date, _DayBucket] = {}
        for s in samples:
            key = local_date(s.timestamp, utc_offset_seconds)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = buckets[key] = _DayBucket(first=s)
            bucket.temperatures.append(kelvin_to_celsius(s.temperature_k))

        result: list[DailyAggregate] = []
        for index, (day, bucket) in enumerate(buckets.items()):
            if index >= self.config.daily_count:
                break
            first = bucket.first
            result.append(
                DailyAggregate(
                    day=TODAY_LABEL if index == 0 else format_day(day),
                    date=day.isoformat(),
                    high=max(bucket.temperatures),
                    low=min(bucket.temperatures),
                    condition=first.condition_group,
                    icon=resolve_icon(first.condition_code, first.condition_group),
                    humidity=first.humidity,
                    wind_speed_kmh=mps_to_kmh(first.wind_speed_mps),
                )
            )
        return result


def location_label(name: str, country: str) -> str:
    return f"{name}, {country}" if country else name


def _local_datetime(timestamp: int, utc_offset_seconds: int) -> datetime:
    return datetime.fromtimestamp(timestamp, UTC) + timedelta(seconds=utc_offset_seconds)


def local_date(timestamp: int, utc_offset_seconds: int = 0) -> date:
    return _local_datetime(timestamp, utc_offset_seconds).date()


def format_hour(timestamp: int, utc_offset_seconds: int = 0) -> str:
    """Local hour label like "3 PM" or "12 AM"."""
    dt = _local_datetime(timestamp, utc_offset_seconds)
    hour = dt.hour % 12 or 12
    return f"{hour} {'AM' if dt.hour < 12 else 'PM'}"


def format_day(day: date) -> str:
    """Weekday label like "Tue, Jan 6"."""
    return f"{day:%a}, {day:%b} {day.day}"
