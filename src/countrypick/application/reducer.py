"""
Session reducer - the dropdown state machine.

``reduce`` is a pure function from (state, event) to the next state. It
returns the *same* object when an event changes nothing, so callers can skip
publishing on identity.

Transitions:
    QueryChanged          new raw query -> store it, issue a new sequence number
    SuggestionsComputed   latest sequence -> store result, EXPANDED; older -> dropped
    SuggestionSelected    query := value, issue a new sequence number, COLLAPSED
    DropdownDismissed     COLLAPSED
    InputCommitted        COLLAPSED
    DropdownToggled       COLLAPSED <-> EXPANDED
"""

from countrypick.domain.events import (
    DropdownDismissed,
    DropdownToggled,
    InputCommitted,
    QueryChanged,
    SessionEvent,
    SuggestionSelected,
    SuggestionsComputed,
)
from countrypick.domain.types import DropdownState, SessionState
from countrypick.logger import get_logger

logger = get_logger("reducer")


def _with_query(state: SessionState, query: str) -> SessionState:
    if query == state.query:
        return state
    return state.evolve(query=query, latest_sequence=state.latest_sequence + 1)


def _collapse(state: SessionState) -> SessionState:
    if state.dropdown is DropdownState.COLLAPSED:
        return state
    return state.evolve(dropdown=DropdownState.COLLAPSED)


def reduce(state: SessionState, event: SessionEvent) -> SessionState:
    """Apply ``event`` to ``state`` and return the resulting state."""
    if isinstance(event, QueryChanged):
        return _with_query(state, event.query)

    if isinstance(event, SuggestionsComputed):
        if event.sequence != state.latest_sequence:
            logger.debug(
                f"Dropping stale suggestions (sequence={event.sequence}, latest={state.latest_sequence})"
            )
            return state
        # Expands even for an empty result; visibility is decided by dropdown_visible.
        return state.evolve(
            suggestions=tuple(event.suggestions),
            applied_sequence=event.sequence,
            dropdown=DropdownState.EXPANDED,
        )

    if isinstance(event, SuggestionSelected):
        return _collapse(_with_query(state, event.value))

    if isinstance(event, (DropdownDismissed, InputCommitted)):
        return _collapse(state)

    if isinstance(event, DropdownToggled):
        flipped = DropdownState.COLLAPSED if state.expanded else DropdownState.EXPANDED
        return state.evolve(dropdown=flipped)

    logger.warning(f"Ignoring unsupported event {type(event).__name__}")
    return state
