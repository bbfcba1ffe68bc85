"""
Dropdown overlay showing the session's suggestions under the CountryInput.
"""

from __future__ import annotations

from textual import events
from textual.widgets import Input
from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from countrypick.application.session import SuggestionSession
from countrypick.domain.events import SessionStateChanged
from countrypick.logger import get_logger
from countrypick.presentation.completion import SuggestionCompletionStrategy
from countrypick.presentation.widgets.input_field import CountryInput

logger = get_logger("country_autocomplete")


class CountryAutoComplete(AutoComplete):
    """Overlay rendering ``SuggestionSession`` output.

    The overlay never filters on its own: candidates are the session's
    applied suggestions, and visibility follows the session's dropdown state.
    """

    def __init__(self, input_widget: CountryInput, session: SuggestionSession, **kwargs):
        self.session = session
        super().__init__(
            target=input_widget,
            candidates=SuggestionCompletionStrategy(lambda: self.session.state),
            prevent_default_enter=True,
            **kwargs,
        )

    def on_mount(self) -> None:
        self.session.event_bus.subscribe(SessionStateChanged, self._on_session_state_changed)
        logger.info(f"CountryAutoComplete mounted (target={self.target.id})")

    def on_unmount(self) -> None:
        self.session.event_bus.unsubscribe(SessionStateChanged, self._on_session_state_changed)

    def _listen_to_messages(self, event: events.Event) -> None:
        # The base class swallows Escape while the list is shown, so the
        # input's own binding never sees it.
        dismissing = isinstance(event, events.Key) and event.key == "escape" and self.display
        super()._listen_to_messages(event)
        if dismissing:
            logger.debug("Dropdown dismissed (escape)")
            self.session.dismiss()

    def get_search_string(self, target_state: TargetState) -> str:
        return target_state.text

    def get_matches(
        self,
        target_state: TargetState,
        candidates: list[DropdownItem],
        search_string: str,
    ) -> list[DropdownItem]:
        """Keep the session's pool order; no fuzzy re-ranking."""
        return candidates

    def should_show_dropdown(self, search_string: str) -> bool:
        return self.session.dropdown_visible and self.option_list.option_count > 0

    def apply_completion(self, value: str, state: TargetState) -> None:
        with self.prevent(Input.Changed):
            self.target.value = value
            self.target.cursor_position = len(value)
        self.session.select(value)

    def _on_session_state_changed(self, event: SessionStateChanged) -> None:
        if not self.is_mounted:
            return
        self._align_and_rebuild()

    def _align_and_rebuild(self) -> None:
        self._target_state = self._get_target_state()
        search_string = self.get_search_string(self._target_state)
        self._rebuild_options(self._target_state, search_string)
        self._align_to_target()
        self.display = self.should_show_dropdown(search_string)
        logger.debug(
            f"Dropdown rebuilt: {self.option_list.option_count} item(s), visible={self.display}"
        )
