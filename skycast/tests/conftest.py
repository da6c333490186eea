"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from skycast.config.schema import SkycastConfig
from skycast.tests.factories import FIXTURE_DIR, load_fixture


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def paris_current() -> dict:
    return load_fixture("owm_current_paris.json")


@pytest.fixture
def paris_forecast() -> dict:
    return load_fixture("owm_forecast_paris.json")


@pytest.fixture
def geocode_lon() -> list[dict]:
    return load_fixture("owm_geocode_lon.json")


@pytest.fixture
def default_config() -> SkycastConfig:
    return SkycastConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "search": {"debounce_ms": 250},
        "session": {"default_city": "Berlin"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Provide an API key through the environment, as in production."""
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key-123")
    return "test-key-123"
