"""Skycast HTTP app: FastAPI proxy in front of the OpenWeather API."""

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from skycast.config.defaults import DEFAULT_CONFIG_PATH
from skycast.config.loader import load_config
from skycast.config.schema import SkycastConfig
from skycast.errors import ConfigurationError, InputError, UpstreamError
from skycast.forecast.aggregator import ForecastAggregator
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.ingest.weather_fetcher import WeatherFetcher
from skycast.models.weather import WeatherQuery
from skycast.reporting.formatters import suggestion_to_dict, views_to_dict

logger = logging.getLogger(__name__)

CONFIG_PATH = os.environ.get("SKYCAST_CONFIG", str(DEFAULT_CONFIG_PATH))

app = FastAPI(title="Skycast", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _config() -> SkycastConfig:
    return load_config(CONFIG_PATH)


def _client(config: SkycastConfig) -> OpenWeatherClient:
    try:
        return OpenWeatherClient.from_config(config.provider)
    except ConfigurationError as e:
        logger.error("Refusing request: %s", e)
        raise HTTPException(status_code=500, detail="OpenWeather API key not configured") from e


def _query(lat: float | None, lon: float | None, city: str | None) -> WeatherQuery:
    query = WeatherQuery(lat=lat, lon=lon, city=city)
    try:
        query.params()
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return query


# ── Weather endpoints ───────────────────────────────────────────


@app.get("/api/weather")
async def get_weather(lat: float | None = None, lon: float | None = None, city: str | None = None):
    """Raw current + forecast payloads, fetched concurrently."""
    config = _config()
    client = _client(config)
    query = _query(lat, lon, city)
    fetcher = WeatherFetcher(client)
    try:
        current, forecast = await fetcher.fetch_raw(query)
    except UpstreamError as e:
        logger.error("Weather API error for %s: %s", query, e)
        raise HTTPException(status_code=502, detail="Failed to fetch weather data") from e
    return {"current": current, "forecast": forecast}


@app.get("/api/forecast")
async def get_forecast(lat: float | None = None, lon: float | None = None, city: str | None = None):
    """Normalized snapshot, hourly sequence and daily roll-up."""
    config = _config()
    client = _client(config)
    query = _query(lat, lon, city)
    fetcher = WeatherFetcher(
        client,
        ForecastAggregator(config.forecast),
        uv_source=client.get_uv_index if config.provider.uv_enabled else None,
    )
    try:
        views = await fetcher.fetch(query)
    except UpstreamError as e:
        logger.error("Forecast error for %s: %s", query, e)
        raise HTTPException(status_code=502, detail="Failed to fetch weather data") from e
    return views_to_dict(views)


# ── Geocoding ───────────────────────────────────────────────────


@app.get("/api/geocode")
async def geocode(city: str | None = None):
    config = _config()
    client = _client(config)
    if not city or not city.strip():
        raise HTTPException(status_code=400, detail="City name is required")
    try:
        suggestions = await client.geocode(city.strip(), limit=config.search.max_suggestions)
    except UpstreamError as e:
        logger.error("Geocoding API error for %r: %s", city, e)
        raise HTTPException(status_code=502, detail="Failed to fetch location data") from e
    return [suggestion_to_dict(s) for s in suggestions]


@app.get("/api/config")
def get_config():
    """Effective config (the API key itself is never part of it)."""
    return _config().model_dump()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
