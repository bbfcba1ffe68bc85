"""
SuggestionSession - owns the state of one autocomplete field.

The UI shell reports user intent through the public methods. Each call is
turned into an event, run through ``reduce`` and, when the state changed,
published as ``SessionStateChanged`` on the event bus. Query changes also
schedule a recompute, whose result comes back through the same path.
"""

from __future__ import annotations

from countrypick.application.casing import LocaleLike, resolve_locale
from countrypick.application.filtering import filter_suggestions
from countrypick.application.reducer import reduce
from countrypick.application.scheduler import RecomputeScheduler
from countrypick.domain.events import (
    DropdownDismissed,
    DropdownToggled,
    EventBus,
    InputCommitted,
    QueryChanged,
    SessionEvent,
    SessionStateChanged,
    SuggestionSelected,
    SuggestionsComputed,
)
from countrypick.domain.types import CandidatePool, SessionState, SuggestionList
from countrypick.logger import get_logger
from countrypick.utils import shorten

logger = get_logger("session")


class SuggestionSession:
    """Observer/reducer glue between the suggestion engine and a UI shell."""

    def __init__(
        self,
        pool: CandidatePool,
        locale: LocaleLike = None,
        event_bus: EventBus | None = None,
        *,
        debounce: float = 0.0,
        off_thread: bool = True,
    ):
        """
        Initialize the session.

        Args:
            pool: Immutable candidate pool
            locale: Locale used for case-folding (``None`` for root rules)
            event_bus: Bus to publish state changes on; a private one is created if omitted
            debounce: Seconds to wait after a keystroke before filtering
            off_thread: Run the filter in a worker thread
        """
        self.pool = pool
        self.locale = resolve_locale(locale)
        self.event_bus = event_bus or EventBus()
        self._state = SessionState.initial(pool)
        self._scheduler = RecomputeScheduler(
            self._compute,
            self._on_computed,
            debounce=debounce,
            off_thread=off_thread,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def suggestions(self) -> SuggestionList:
        return self._state.suggestions

    @property
    def dropdown_visible(self) -> bool:
        return self._state.dropdown_visible

    def start(self) -> None:
        """Issue the initial recompute for the (empty) starting query."""
        logger.info(f"Session started with {len(self.pool)} candidate(s), locale={self.locale}")
        self._scheduler.submit(self._state.latest_sequence, self._state.query)

    def update_query(self, text: str) -> SessionState:
        """The field's text changed."""
        logger.debug(f"Query changed to '{shorten(text)}'")
        return self.dispatch(QueryChanged(query=text))

    def select(self, value: str) -> SessionState:
        """The user picked ``value`` from the dropdown."""
        logger.info(f"Suggestion selected: {value}")
        return self.dispatch(SuggestionSelected(value=value))

    def dismiss(self) -> SessionState:
        return self.dispatch(DropdownDismissed())

    def commit(self) -> SessionState:
        return self.dispatch(InputCommitted())

    def toggle(self) -> SessionState:
        return self.dispatch(DropdownToggled())

    def dispatch(self, event: SessionEvent) -> SessionState:
        """
        Run ``event`` through the reducer and publish the outcome.

        Returns:
            The state after the event (unchanged object if nothing happened)
        """
        previous = self._state
        state = reduce(previous, event)
        if state is previous:
            return state

        self._state = state
        if state.latest_sequence != previous.latest_sequence:
            self._scheduler.submit(state.latest_sequence, state.query)

        self.event_bus.publish(SessionStateChanged(state=state, previous=previous, cause=event))
        return state

    async def wait_idle(self) -> None:
        """Wait for in-flight recomputes to land."""
        await self._scheduler.wait_idle()

    async def stop(self) -> None:
        await self._scheduler.stop()

    def _compute(self, query: str) -> SuggestionList:
        return filter_suggestions(self.pool, query, self.locale)

    def _on_computed(self, sequence: int, query: str, suggestions: SuggestionList) -> None:
        logger.debug(f"Suggestions #{sequence} ready: {len(suggestions)} match(es)")
        self.dispatch(SuggestionsComputed(sequence=sequence, query=query, suggestions=suggestions))
