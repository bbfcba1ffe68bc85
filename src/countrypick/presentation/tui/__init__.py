"""TUI (Terminal User Interface) application built with Textual."""

from countrypick.presentation.tui.country_app import CountryPickApp

__all__ = ["CountryPickApp"]
