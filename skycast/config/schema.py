"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skycast.config.defaults import DEFAULT_CITY

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_GEO_URL = "https://api.openweathermap.org/geo/1.0"
OPENWEATHER_ONECALL_URL = "https://api.openweathermap.org/data/3.0"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    geocode_url: str = OPENWEATHER_GEO_URL
    onecall_url: str = OPENWEATHER_ONECALL_URL  # UV index comes from One Call current.uvi
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    api_key_env: str = "OPENWEATHER_API_KEY"
    uv_enabled: bool = False


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_count: int = Field(default=8, ge=1, le=40)
    daily_count: int = Field(default=5, ge=1, le=5)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    debounce_ms: int = Field(default=300, ge=0)
    min_trigger_length: int = Field(default=1, ge=1)  # chars needed to issue a lookup
    min_display_length: int = Field(default=2, ge=1)  # chars needed to show results
    max_suggestions: int = Field(default=5, ge=1, le=5)


class SessionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = Field(default=DEFAULT_CITY, min_length=1)


class SkycastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    forecast: ForecastConfig = ForecastConfig()
    search: SearchConfig = SearchConfig()
    session: SessionConfig = SessionConfig()
