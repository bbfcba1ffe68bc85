"""
Completion for the country autocomplete overlay.
"""

from .suggestion_completion import SuggestionCompletionStrategy

__all__ = ["SuggestionCompletionStrategy"]
