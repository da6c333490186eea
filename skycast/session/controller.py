"""Session controller: single owner of the per-session view state.

Views are replaced in one assignment on every successful load; a failed
load keeps the previous views (stale but present) and records the error.
Loads are sequence-guarded the same way suggestion lookups are, so a slow
superseded load can never overwrite a newer one.
"""

import logging
from dataclasses import dataclass

from skycast.config.schema import SkycastConfig
from skycast.errors import ConfigurationError, SkycastError
from skycast.ingest.weather_fetcher import WeatherFetcher
from skycast.models.common import SequenceNumber
from skycast.models.search import LocationSuggestion
from skycast.models.weather import ForecastViews, WeatherQuery
from skycast.search.debouncer import Lookup, SearchDebouncer

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    views: ForecastViews | None = None
    error: SkycastError | None = None
    fatal: bool = False
    loading: bool = False
    suggestions: tuple[LocationSuggestion, ...] = ()
    suggestions_visible: bool = False

    @property
    def stale(self) -> bool:
        """Previous views are still shown alongside a newer error."""
        return self.views is not None and self.error is not None


class SessionController:
    def __init__(
        self,
        fetcher: WeatherFetcher,
        lookup: Lookup,
        config: SkycastConfig | None = None,
    ):
        self.config = config or SkycastConfig()
        self.fetcher = fetcher
        self.state = SessionState()
        self.search = SearchDebouncer(lookup, self.config.search, on_change=self._on_suggestions)
        self._load_seq: SequenceNumber = 0

    async def load(self, query: WeatherQuery) -> SessionState:
        self._load_seq += 1
        seq = self._load_seq
        self.state.loading = True
        try:
            views = await self.fetcher.fetch(query)
        except SkycastError as e:
            if seq != self._load_seq:
                logger.info("Ignoring failure of superseded load #%d: %s", seq, e)
                return self.state
            self.state.error = e
            self.state.fatal = isinstance(e, ConfigurationError)
            self.state.loading = False
            if self.state.fatal:
                logger.error("Weather load #%d failed, configuration problem: %s", seq, e)
            else:
                logger.warning("Weather load #%d failed: %s", seq, e)
            return self.state

        if seq != self._load_seq:
            logger.info("Discarding superseded load #%d for %s", seq, views.snapshot.location)
            return self.state
        self.state.views = views
        self.state.error = None
        self.state.fatal = False
        self.state.loading = False
        return self.state

    async def refresh(self) -> SessionState:
        """Reload the current location, or the default city if there is none."""
        if self.state.views is not None:
            snap = self.state.views.snapshot
            return await self.load(WeatherQuery(lat=snap.lat, lon=snap.lon))
        return await self.load(WeatherQuery(city=self.config.session.default_city))

    async def submit(self, city: str | None = None) -> SessionState:
        """Load weather for typed text (or an explicit city) and close the list."""
        target = (city or self.search.search.text).strip()
        if not target:
            return self.state
        self.search.dismiss()
        return await self.load(WeatherQuery(city=target))

    async def select(self, suggestion: LocationSuggestion) -> SessionState:
        self.search.dismiss()
        return await self.load(WeatherQuery(lat=suggestion.lat, lon=suggestion.lon))

    def type_text(self, text: str) -> None:
        self.search.input(text)

    def dismiss_suggestions(self) -> None:
        self.search.dismiss()

    def close(self) -> None:
        self.search.close()

    def _on_suggestions(
        self, results: tuple[LocationSuggestion, ...], visible: bool
    ) -> None:
        self.state.suggestions = results
        self.state.suggestions_visible = visible
