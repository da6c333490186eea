"""Asyncio driver for SuggestionSearch.

Each keystroke cancels the pending timer handle before arming a new one,
so only input that stays quiet for the whole debounce window reaches the
lookup. Lookup failures are logged and clear the list; they never raise.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from skycast.config.schema import SearchConfig
from skycast.models.search import LocationSuggestion, SuggestionQuery
from skycast.search.state_machine import SuggestionSearch

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Awaitable[list[LocationSuggestion]]]
ChangeCallback = Callable[[tuple[LocationSuggestion, ...], bool], None]


class SearchDebouncer:
    def __init__(
        self,
        lookup: Lookup,
        config: SearchConfig | None = None,
        on_change: ChangeCallback | None = None,
    ):
        self.lookup = lookup
        self.search = SuggestionSearch(config)
        self.on_change = on_change
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    def input(self, text: str) -> None:
        """Feed the full input text after a keystroke. Must run inside the event loop."""
        loop = asyncio.get_running_loop()
        self._cancel_timer()
        had_results = bool(self.search.results)
        self.search.keystroke(text, loop.time())
        if self.search.deadline is not None:
            self._handle = loop.call_later(self.search.debounce_seconds, self._fire)
        elif had_results:
            self._notify()

    def submit(self) -> SuggestionQuery | None:
        """Skip the remaining debounce and look up the pending text now."""
        self._cancel_timer()
        return self._start(self.search.flush())

    def dismiss(self) -> None:
        self._cancel_timer()
        self.search.dismiss()
        self._notify()

    async def drain(self) -> None:
        """Wait for every lookup started so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def close(self) -> None:
        self._cancel_timer()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def _fire(self) -> None:
        self._handle = None
        self._start(self.search.flush())

    def _start(self, query: SuggestionQuery | None) -> SuggestionQuery | None:
        if query is None:
            return None
        task = asyncio.get_running_loop().create_task(self._run(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return query

    async def _run(self, query: SuggestionQuery) -> None:
        try:
            results = await self.lookup(query.text)
        except Exception:
            logger.exception("Suggestion lookup #%d for %r failed", query.sequence, query.text)
            if self.search.fail(query.sequence):
                self._notify()
            return
        if self.search.resolve(query.sequence, results, query.text):
            self._notify()

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.search.results, self.search.visible)
