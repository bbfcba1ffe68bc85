"""Query-driven suggestion filter."""

from __future__ import annotations

from collections.abc import Sequence

from countrypick.application.casing import LocaleLike, case_folder
from countrypick.domain.types import SuggestionList


def filter_suggestions(pool: Sequence[str], query: str, locale: LocaleLike = None) -> SuggestionList:
    """
    Return the candidates of ``pool`` that complete ``query``.

    An empty query returns the whole pool. Otherwise a candidate is kept when
    its lowercased form starts with the lowercased query and it is not exactly
    (case-sensitively) the raw query itself. Pool order is preserved.

    Pure function; safe to call from a worker thread.

    Example:
        >>> filter_suggestions(["Canada", "Chad", "China"], "ch")
        ('Chad', 'China')
    """
    if query == "":
        return tuple(pool)

    fold = case_folder(locale)
    needle = fold(query)
    return tuple(name for name in pool if fold(name).startswith(needle) and name != query)
