"""OpenWeather API client: current weather, 3-hourly forecast, geocoding, UV.

UV comes from the One Call 3.0 `current.uvi` field; the old 2.5 `/uvi`
endpoint is retired.

No retries: every failure is surfaced once as an UpstreamError and the
caller decides whether to try again.
"""

import logging
from typing import Any

import httpx

from skycast.config.loader import resolve_api_key
from skycast.config.schema import (
    OPENWEATHER_BASE_URL,
    OPENWEATHER_GEO_URL,
    OPENWEATHER_ONECALL_URL,
    ProviderConfig,
)
from skycast.errors import UpstreamError
from skycast.forecast.parsing import finite_float
from skycast.models.search import LocationSuggestion
from skycast.models.weather import WeatherQuery

logger = logging.getLogger(__name__)

GEOCODE_LIMIT = 5
ONECALL_EXCLUDE = "minutely,hourly,daily,alerts"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        geocode_url: str = OPENWEATHER_GEO_URL,
        onecall_url: str = OPENWEATHER_ONECALL_URL,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geocode_url = geocode_url.rstrip("/")
        self.onecall_url = onecall_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, provider: ProviderConfig, api_key: str | None = None) -> "OpenWeatherClient":
        """Build a client, raising ConfigurationError when no API key is available."""
        return cls(
            api_key=resolve_api_key(provider, api_key),
            base_url=provider.base_url,
            geocode_url=provider.geocode_url,
            onecall_url=provider.onecall_url,
            timeout=provider.timeout_seconds,
        )

    async def get_current(self, query: WeatherQuery) -> dict:
        return await self._get(f"{self.base_url}/weather", query.params())

    async def get_forecast(self, query: WeatherQuery) -> dict:
        return await self._get(f"{self.base_url}/forecast", query.params())

    async def get_uv_index(self, lat: float, lon: float) -> float:
        data = await self._get(
            f"{self.onecall_url}/onecall",
            {"lat": lat, "lon": lon, "exclude": ONECALL_EXCLUDE},
        )
        try:
            return finite_float(data["current"]["uvi"])
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise UpstreamError(f"Malformed UV payload: {e!r}") from e

    async def geocode(self, text: str, limit: int = GEOCODE_LIMIT) -> list[LocationSuggestion]:
        """Look up candidate locations for free text, in provider order."""
        data = await self._get(f"{self.geocode_url}/direct", {"q": text, "limit": limit})
        if not isinstance(data, list):
            raise UpstreamError("Geocoding response is not a list")
        suggestions = []
        for item in data:
            try:
                suggestions.append(
                    LocationSuggestion(
                        name=str(item["name"]),
                        country=str(item.get("country", "")),
                        lat=float(item["lat"]),
                        lon=float(item["lon"]),
                        region=item.get("state") or None,
                    )
                )
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed geocoding entry: %r", item)
        return suggestions[:limit]

    async def _get(self, url: str, params: dict[str, Any]) -> Any:
        query = {**params, "appid": self.api_key}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=query)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s -> %s", url, e)
            raise UpstreamError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("OpenWeather %d: %s", resp.status_code, url)
            raise UpstreamError(f"HTTP {resp.status_code}", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from {url}") from e
