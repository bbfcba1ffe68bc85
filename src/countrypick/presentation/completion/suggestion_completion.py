"""
Completion strategy serving the session's current SuggestionList.

Keeps the mapping from session state to dropdown items out of the widget so
it can be tested without a running app.
"""

from __future__ import annotations

from collections.abc import Callable

from textual_autocomplete import DropdownItem, TargetState

from countrypick.domain.types import SessionState
from countrypick.logger import get_logger

logger = get_logger("autocomplete.suggestions")


class SuggestionCompletionStrategy:
    """Turns the applied suggestions into dropdown items.

    Filtering already happened in the session, so candidates are returned as
    they are, in pool order. Nothing is offered while the dropdown is hidden.
    """

    def __init__(self, state_provider: Callable[[], SessionState]) -> None:
        self._state_provider = state_provider

    def __call__(self, target_state: TargetState) -> list[DropdownItem]:
        state = self._state_provider()
        if not state.dropdown_visible:
            return []
        logger.debug(f"Serving {len(state.suggestions)} suggestion(s) for text={target_state.text!r}")
        return [DropdownItem(main=name) for name in state.suggestions]
