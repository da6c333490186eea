"""Weather observation and derived view models."""

from dataclasses import dataclass, field

from skycast.errors import InputError
from skycast.models.common import IconCategory


@dataclass(frozen=True)
class IntervalSample:
    timestamp: int  # UTC epoch seconds
    temperature_k: float
    humidity: int
    wind_speed_mps: float
    condition_code: str  # provider icon token, e.g. "10d"
    condition_group: str  # e.g. "Rain"


@dataclass(frozen=True)
class CurrentConditions:
    """Provider "now" record, still in raw units (Kelvin, m/s, meters)."""

    name: str
    country: str
    lat: float
    lon: float
    temperature_k: float
    feels_like_k: float
    humidity: int
    wind_speed_mps: float
    visibility_m: float
    pressure_hpa: int
    sunrise: int
    sunset: int
    condition: str
    description: str
    condition_code: str = ""
    utc_offset_seconds: int = 0


@dataclass(frozen=True)
class WeatherSnapshot:
    location: str
    temperature: int
    feels_like: int
    condition: str
    description: str
    icon: IconCategory
    humidity: int
    wind_speed_kmh: int
    visibility_km: int
    pressure: int
    sunrise: int
    sunset: int
    lat: float
    lon: float
    uv_index: int | None = None  # None when no UV source answered
    uv_available: bool = False


@dataclass(frozen=True)
class HourlyView:
    time: str
    temperature: int
    condition: str
    icon: IconCategory
    humidity: int
    wind_speed_kmh: int


@dataclass(frozen=True)
class DailyAggregate:
    day: str
    date: str  # YYYY-MM-DD, local calendar date
    high: int
    low: int
    condition: str
    icon: IconCategory
    humidity: int
    wind_speed_kmh: int


@dataclass(frozen=True)
class ForecastViews:
    snapshot: WeatherSnapshot
    hourly: tuple[HourlyView, ...] = field(default_factory=tuple)
    daily: tuple[DailyAggregate, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WeatherQuery:
    """Either a coordinate pair or a city name identifies a location."""

    lat: float | None = None
    lon: float | None = None
    city: str | None = None

    def params(self) -> dict[str, str | float]:
        """Provider query parameters; coordinates win over the city name."""
        if self.lat is not None and self.lon is not None:
            return {"lat": self.lat, "lon": self.lon}
        if self.city and self.city.strip():
            return {"q": self.city.strip()}
        raise InputError("Either coordinates (lat, lon) or city name is required")
