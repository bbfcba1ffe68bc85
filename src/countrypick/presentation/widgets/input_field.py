"""
CountryInput - the text field the autocomplete overlay attaches to.
"""

from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input

from countrypick.logger import get_logger

logger = get_logger("country_input")

EXPANDED_ICON = "▲"
COLLAPSED_ICON = "▼"


class CountryInput(Input):
    """
    Input that reports dismissal and shows a dropdown indicator.

    The indicator in the border subtitle plays the role of a trailing icon:
    it reflects the session's dropdown state, not whether anything is drawn.
    """

    BORDER_TITLE = "Label"

    BINDINGS = [
        Binding("escape", "dismiss_dropdown", "Hide list", show=False),
    ]

    class DismissRequested(Message):
        """Posted when the user presses Escape or moves focus away."""

        def __init__(self, reason: str) -> None:
            super().__init__()
            self.reason = reason

    def __init__(self, **kwargs):
        super().__init__(placeholder="Start typing a country name", **kwargs)
        self.border_subtitle = COLLAPSED_ICON

    def action_dismiss_dropdown(self) -> None:
        self.post_message(self.DismissRequested("escape"))

    def on_blur(self, event: events.Blur) -> None:
        logger.debug("CountryInput lost focus")
        self.post_message(self.DismissRequested("blur"))

    def show_expanded(self, expanded: bool) -> None:
        self.border_subtitle = EXPANDED_ICON if expanded else COLLAPSED_ICON
