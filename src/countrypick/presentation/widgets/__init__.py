"""Widgets for the countrypick TUI."""

from countrypick.presentation.widgets.autocomplete import CountryAutoComplete
from countrypick.presentation.widgets.input_field import CountryInput

__all__ = ["CountryAutoComplete", "CountryInput"]
