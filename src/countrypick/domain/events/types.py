"""Event types for the event bus system.

Session events describe user intent and engine results. They are fed through
the session reducer; ``SessionStateChanged`` is what the UI layer listens to.
"""

import time
from dataclasses import dataclass, field

from countrypick.domain.types import SessionState, SuggestionList


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class QueryChanged(Event):
    """The text in the field changed."""

    query: str


@dataclass
class SuggestionsComputed(Event):
    """A filter run finished.

    Attributes:
        sequence: Recompute number the run was issued with
        query: Query the run filtered against
        suggestions: Resulting SuggestionList
    """

    sequence: int
    query: str
    suggestions: SuggestionList


@dataclass
class SuggestionSelected(Event):
    """The user picked an item from the dropdown."""

    value: str


@dataclass
class DropdownDismissed(Event):
    """The user tapped away or pressed Escape."""


@dataclass
class InputCommitted(Event):
    """The user triggered the field's commit/next action."""


@dataclass
class DropdownToggled(Event):
    """The user toggled the dropdown explicitly (trailing icon)."""


@dataclass
class SessionStateChanged(Event):
    """Published after the reducer produced a new session state.

    Attributes:
        state: The new snapshot
        previous: The snapshot it replaced
        cause: The event that caused the transition
    """

    state: SessionState
    previous: SessionState
    cause: Event


SessionEvent = (
    QueryChanged
    | SuggestionsComputed
    | SuggestionSelected
    | DropdownDismissed
    | InputCommitted
    | DropdownToggled
)
