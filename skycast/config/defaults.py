"""Default config location and fallback city."""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("configs/skycast.yaml")

# Shown when no location has been chosen yet or geolocation is unavailable.
DEFAULT_CITY = "London"
