"""Suggestion search state machine.

Turns keystrokes into at most one lookup per settled input. Time is passed
in explicitly (monotonic seconds) so the machine itself never sleeps; the
asyncio driver in ``skycast.search.debouncer`` supplies the clock.

Every issued lookup carries a strictly increasing sequence number. Only a
response for the newest issued lookup may be applied, and never one older
than a response already applied. Outstanding lookups are not cancelled;
their results are simply ignored once superseded.
"""

import logging
from collections.abc import Sequence

from skycast.config.schema import SearchConfig
from skycast.models.common import SequenceNumber
from skycast.models.search import LocationSuggestion, SearchPhase, SuggestionQuery

logger = logging.getLogger(__name__)


class SuggestionSearch:
    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()
        self.phase = SearchPhase.IDLE
        self.text = ""
        self.deadline: float | None = None
        self.settled_for: str | None = None
        self._results: tuple[LocationSuggestion, ...] = ()
        self._issued: SequenceNumber = 0
        self._applied: SequenceNumber = 0

    @property
    def debounce_seconds(self) -> float:
        return self.config.debounce_ms / 1000

    @property
    def results(self) -> tuple[LocationSuggestion, ...]:
        return self._results

    @property
    def last_issued(self) -> SequenceNumber:
        return self._issued

    @property
    def visible(self) -> bool:
        """Whether the suggestion list should be shown for the current text."""
        return bool(self._results) and len(self.text.strip()) >= self.config.min_display_length

    def keystroke(self, text: str, now: float) -> SearchPhase:
        """Record the full input text after a keystroke and (re)arm the debounce."""
        self.text = text
        if len(text.strip()) < self.config.min_trigger_length:
            self._reset()
            return self.phase
        self.phase = SearchPhase.DEBOUNCING
        self.deadline = now + self.debounce_seconds
        return self.phase

    def poll(self, now: float) -> SuggestionQuery | None:
        """Issue a lookup if the debounce window has elapsed."""
        if self.phase != SearchPhase.DEBOUNCING or self.deadline is None:
            return None
        if now < self.deadline:
            return None
        return self.flush()

    def flush(self) -> SuggestionQuery | None:
        """Issue the pending lookup immediately, ignoring the remaining debounce."""
        if self.phase != SearchPhase.DEBOUNCING:
            return None
        self._issued += 1
        self.phase = SearchPhase.QUERYING
        self.deadline = None
        query = SuggestionQuery(text=self.text.strip(), sequence=self._issued)
        logger.debug("Issuing suggestion lookup #%d for %r", query.sequence, query.text)
        return query

    def resolve(
        self, sequence: SequenceNumber, results: Sequence[LocationSuggestion], text: str = ""
    ) -> bool:
        """Apply lookup results. Returns False when the response is stale."""
        if not self._is_current(sequence):
            logger.debug(
                "Discarding stale suggestions #%d (latest issued #%d, applied #%d)",
                sequence, self._issued, self._applied,
            )
            return False
        self._applied = sequence
        self._results = tuple(results[: self.config.max_suggestions])
        self.settled_for = text or self.text.strip()
        # A newer keystroke may already be debouncing; it keeps its phase.
        if self.phase == SearchPhase.QUERYING:
            self.phase = SearchPhase.SETTLED
        return True

    def fail(self, sequence: SequenceNumber) -> bool:
        """Clear the list after a failed lookup. Stale failures are ignored."""
        if not self._is_current(sequence):
            return False
        self._applied = sequence
        self._results = ()
        self.settled_for = None
        if self.phase == SearchPhase.QUERYING:
            self.phase = SearchPhase.IDLE
        return True

    def dismiss(self) -> None:
        """Close the list (explicit close or a selection was made)."""
        self.text = ""
        self._reset()

    def _reset(self) -> None:
        self.phase = SearchPhase.IDLE
        self.deadline = None
        self.settled_for = None
        self._results = ()
        # Anything still in flight is now stale.
        self._applied = self._issued

    def _is_current(self, sequence: SequenceNumber) -> bool:
        return sequence == self._issued and sequence > self._applied
