"""Output formatters for forecast views and suggestion lists."""

import json
from dataclasses import asdict

from skycast.models.search import LocationSuggestion
from skycast.models.weather import ForecastViews


def format_views_text(views: ForecastViews) -> str:
    """Plain text rendering for the terminal."""
    s = views.snapshot
    uv = str(s.uv_index) if s.uv_available else "n/a"
    lines = [
        f"=== {s.location} ===",
        f"{s.temperature}°C (feels like {s.feels_like}°C) | {s.condition}: {s.description}",
        f"Humidity {s.humidity}% | Wind {s.wind_speed_kmh} km/h | "
        f"Visibility {s.visibility_km} km | Pressure {s.pressure} hPa | UV {uv}",
    ]
    if views.hourly:
        lines.append("Hourly:")
        for h in views.hourly:
            lines.append(f"  {h.time:>5}  {h.temperature:>3}°C  {h.condition}")
    if views.daily:
        lines.append("Daily:")
        for d in views.daily:
            lines.append(f"  {d.day:<12} {d.high:>3}° / {d.low:>3}°  {d.condition}")
    return "\n".join(lines)


def views_to_dict(views: ForecastViews) -> dict:
    data = asdict(views)
    data["hourly"] = list(data["hourly"])
    data["daily"] = list(data["daily"])
    return data


def format_views_json(views: ForecastViews) -> str:
    """JSON rendering for programmatic consumption."""
    return json.dumps(views_to_dict(views), indent=2)


def suggestion_to_dict(suggestion: LocationSuggestion) -> dict:
    data = asdict(suggestion)
    data["display_name"] = suggestion.display_name
    return data


def format_suggestions_text(suggestions: tuple[LocationSuggestion, ...] | list[LocationSuggestion]) -> str:
    if not suggestions:
        return "No matching locations"
    return "\n".join(
        f"{i}. {s.display_name} ({s.lat:.4f}, {s.lon:.4f})"
        for i, s in enumerate(suggestions, start=1)
    )
