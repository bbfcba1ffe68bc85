"""countrypick - country name autocomplete with a debounced, last-query-wins suggestion engine."""

__version__ = "0.1.0"
