"""Tests for text and JSON output formatting."""

import json

from skycast.forecast.aggregator import ForecastAggregator
from skycast.models.search import LocationSuggestion
from skycast.reporting.formatters import (
    format_suggestions_text,
    format_views_json,
    format_views_text,
    suggestion_to_dict,
    views_to_dict,
)
from skycast.tests.factories import JAN_6_2026, THREE_HOURS, make_current, make_sample


def _views(uv_index=None):
    samples = [make_sample(JAN_6_2026 + i * THREE_HOURS, 10 + i) for i in range(4)]
    return ForecastAggregator().build(make_current(), samples, utc_offset_seconds=0, uv_index=uv_index)


class TestViewsText:
    def test_sections(self):
        text = format_views_text(_views())
        assert text.startswith("=== Paris, FR ===")
        assert "Hourly:" in text
        assert "Daily:" in text
        assert "Today" in text
        assert "UV n/a" in text

    def test_uv_shown_when_available(self):
        text = format_views_text(_views(uv_index=6.4))
        assert "UV 6" in text

    def test_no_forecast_sections_without_samples(self):
        views = ForecastAggregator().build(make_current(), [])
        text = format_views_text(views)
        assert "Hourly:" not in text
        assert "Daily:" not in text


class TestViewsJson:
    def test_dict_shape(self):
        data = views_to_dict(_views())
        assert isinstance(data["hourly"], list)
        assert isinstance(data["daily"], list)
        assert data["snapshot"]["location"] == "Paris, FR"

    def test_json_parses(self):
        data = json.loads(format_views_json(_views()))
        assert len(data["hourly"]) == 4
        assert data["daily"][0]["day"] == "Today"


class TestSuggestions:
    def test_empty(self):
        assert format_suggestions_text([]) == "No matching locations"

    def test_numbered(self):
        suggestions = [
            LocationSuggestion(name="London", country="GB", lat=51.5073, lon=-0.1276, region="England"),
            LocationSuggestion(name="Londrina", country="BR", lat=-23.31, lon=-51.16),
        ]
        lines = format_suggestions_text(suggestions).splitlines()
        assert lines[0] == "1. London, England, GB (51.5073, -0.1276)"
        assert lines[1].startswith("2. Londrina, BR")

    def test_dict_includes_display_name(self):
        data = suggestion_to_dict(LocationSuggestion(name="Paris", country="FR", lat=48.85, lon=2.35))
        assert data["display_name"] == "Paris, FR"
        assert data["region"] is None
