"""Common types and helpers shared across models."""

from enum import StrEnum
from typing import TypeAlias

SequenceNumber: TypeAlias = int


class IconCategory(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    FOG = "fog"
