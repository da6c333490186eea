"""Location search models."""

from dataclasses import dataclass
from enum import StrEnum

from skycast.models.common import SequenceNumber


class SearchPhase(StrEnum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    QUERYING = "querying"
    SETTLED = "settled"


@dataclass(frozen=True)
class SuggestionQuery:
    text: str
    sequence: SequenceNumber


@dataclass(frozen=True)
class LocationSuggestion:
    name: str
    country: str
    lat: float
    lon: float
    region: str | None = None

    @property
    def display_name(self) -> str:
        parts = [self.name]
        if self.region:
            parts.append(self.region)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)
