"""
CountryPickApp - the single-screen Textual application.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, Input

from countrypick.application.session import SuggestionSession
from countrypick.domain.events import SessionStateChanged
from countrypick.logger import get_logger
from countrypick.presentation.widgets import CountryAutoComplete, CountryInput

logger = get_logger("countrypick_tui")


class CountryPickApp(App):
    """
    Text field with an autocomplete dropdown of country names.

    Layout:
    ┌─────────────────────────────┐
    │           Header            │
    ├─────────────────────────────┤
    │                             │
    │  ┌ Label ────────────── ▼ ┐ │
    │  │ Ch                     │ │
    │  └────────────────────────┘ │
    │    Chad                     │
    │    Chile                    │
    │    China                    │
    │                             │
    ├─────────────────────────────┤
    │           Footer            │
    └─────────────────────────────┘
    """

    TITLE = "countrypick"
    SUB_TITLE = "Country autocomplete"

    CSS = """
    #app-container {
        align: center middle;
    }

    #country {
        width: 60;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
        Binding("ctrl+t", "toggle_dropdown", "Toggle list"),
    ]

    def __init__(self, session: SuggestionSession):
        """
        Initialize the application.

        Args:
            session: The suggestion session backing the field. The app starts
                it on mount and stops it on unmount.
        """
        super().__init__()
        self.session = session
        self.session.event_bus.subscribe(SessionStateChanged, self._on_session_state_changed)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="app-container"):
            yield CountryInput(id="country")
        yield Footer()

    def on_mount(self) -> None:
        logger.info(f"countrypick TUI mounted with {len(self.session.pool)} candidate(s)")

        country_input = self._get_input()
        self.mount(CountryAutoComplete(country_input, self.session))
        country_input.focus()

        self.session.start()

    async def on_unmount(self) -> None:
        self.session.event_bus.unsubscribe(SessionStateChanged, self._on_session_state_changed)
        await self.session.stop()

    def _get_input(self) -> CountryInput:
        return self.query_one("#country", CountryInput)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.session.update_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        logger.debug(f"Input committed: {event.value!r}")
        self.session.commit()
        self.set_focus(None)

    def on_country_input_dismiss_requested(self, event: CountryInput.DismissRequested) -> None:
        logger.debug(f"Dropdown dismissed ({event.reason})")
        self.session.dismiss()

    def action_toggle_dropdown(self) -> None:
        self.session.toggle()

    def _on_session_state_changed(self, event: SessionStateChanged) -> None:
        if event.state.dropdown is event.previous.dropdown:
            return
        try:
            self._get_input().show_expanded(event.state.expanded)
        except NoMatches:
            logger.debug("Input not mounted; skipping dropdown indicator update")
