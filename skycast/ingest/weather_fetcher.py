"""Weather fetcher: concurrent current + forecast fetch, then aggregation."""

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable

from skycast.errors import PartialDataError, SkycastError, UpstreamError
from skycast.forecast.aggregator import ForecastAggregator
from skycast.forecast.parsing import parse_current, parse_samples, utc_offset
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.models.weather import CurrentConditions, ForecastViews, WeatherQuery

logger = logging.getLogger(__name__)

UvSource = Callable[[float, float], Awaitable[float]]


class WeatherFetcher:
    def __init__(
        self,
        client: OpenWeatherClient,
        aggregator: ForecastAggregator | None = None,
        uv_source: UvSource | None = None,
    ):
        self.client = client
        self.aggregator = aggregator or ForecastAggregator()
        self.uv_source = uv_source

    async def fetch_raw(self, query: WeatherQuery) -> tuple[dict, dict]:
        """Fetch the raw current and forecast payloads concurrently.

        Both must succeed; one failure is a PartialDataError and the whole
        query fails. InputError is raised before any request is made.
        """
        query.params()
        current, forecast = await asyncio.gather(
            self.client.get_current(query),
            self.client.get_forecast(query),
            return_exceptions=True,
        )
        failures = [r for r in (current, forecast) if isinstance(r, BaseException)]
        for failure in failures:
            # Configuration problems and programming errors are never folded
            # into the upstream taxonomy.
            if not isinstance(failure, UpstreamError):
                raise failure
        if len(failures) == 2:
            raise UpstreamError("Failed to fetch weather data") from failures[0]
        if failures:
            which = "current" if isinstance(current, BaseException) else "forecast"
            logger.warning("Partial weather data for %s: %s fetch failed", query, which)
            raise PartialDataError(
                f"Failed to fetch {which} weather data",
                getattr(failures[0], "status_code", None),
            ) from failures[0]
        return current, forecast

    async def fetch(self, query: WeatherQuery) -> ForecastViews:
        raw_current, raw_forecast = await self.fetch_raw(query)
        current = parse_current(raw_current)
        samples = parse_samples(raw_forecast)
        uv_index = await self._uv_index(current)
        views = self.aggregator.build(
            current,
            samples,
            utc_offset_seconds=utc_offset(raw_forecast, current),
            uv_index=uv_index,
        )
        logger.info(
            "Fetched weather for %s: %d samples, %d days",
            views.snapshot.location, len(samples), len(views.daily),
        )
        return views

    async def _uv_index(self, current: CurrentConditions) -> float | None:
        if self.uv_source is None:
            return None
        try:
            value = await self.uv_source(current.lat, current.lon)
        except SkycastError as e:
            logger.warning("UV index unavailable for %s: %s", current.name, e)
            return None
        if value is None or not math.isfinite(value):
            logger.warning("UV index unavailable for %s: got %r", current.name, value)
            return None
        return value
