"""Event system for decoupled component communication.

The session publishes ``SessionStateChanged`` after every transition and the
presentation layer subscribes to it.

Example:
    ```python
    from countrypick.domain.events import EventBus, SessionStateChanged

    event_bus = EventBus()

    def handle_state(event: SessionStateChanged):
        print(event.state.suggestions)

    event_bus.subscribe(SessionStateChanged, handle_state)
    ```
"""

from .bus import EventBus
from .types import (
    DropdownDismissed,
    DropdownToggled,
    Event,
    InputCommitted,
    QueryChanged,
    SessionEvent,
    SessionStateChanged,
    SuggestionSelected,
    SuggestionsComputed,
)

__all__ = [
    "EventBus",
    "Event",
    "SessionEvent",
    "QueryChanged",
    "SuggestionsComputed",
    "SuggestionSelected",
    "DropdownDismissed",
    "InputCommitted",
    "DropdownToggled",
    "SessionStateChanged",
]
