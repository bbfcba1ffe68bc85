"""Value types shared by the suggestion engine and the UI shell."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum

SuggestionList = tuple[str, ...]
"""Filtered, order-preserving view of a CandidatePool."""


class DropdownState(Enum):
    """Visibility state of the suggestion dropdown."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class CandidatePool(Sequence[str]):
    """Immutable, sorted, duplicate-free sequence of selectable names.

    Build instances with ``build_candidate_pool`` so the ordering and
    uniqueness guarantees hold; the constructor does not re-check them.
    """

    names: tuple[str, ...] = ()

    def __getitem__(self, index):  # type: ignore[override]
        return self.names[index]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, item: object) -> bool:
        return item in self.names


@dataclass(frozen=True)
class SessionState:
    """Snapshot of one autocomplete session.

    The reducer never mutates a state; each transition returns a new one, so
    subscribers can compare snapshots by identity.

    Attributes:
        query: Raw text currently in the field
        suggestions: Last applied SuggestionList
        dropdown: Dropdown visibility state
        latest_sequence: Number of the newest recompute issued for ``query``
        applied_sequence: Number of the recompute whose result is in ``suggestions``
    """

    query: str = ""
    suggestions: SuggestionList = ()
    dropdown: DropdownState = DropdownState.COLLAPSED
    latest_sequence: int = 0
    applied_sequence: int = 0

    @property
    def expanded(self) -> bool:
        return self.dropdown is DropdownState.EXPANDED

    @property
    def dropdown_visible(self) -> bool:
        """Whether the list should actually be drawn."""
        return self.expanded and len(self.suggestions) > 0

    @property
    def is_stale(self) -> bool:
        """True while a recompute for the current query is still in flight."""
        return self.applied_sequence != self.latest_sequence

    def evolve(self, **changes) -> "SessionState":
        return replace(self, **changes)

    @classmethod
    def initial(cls, pool: CandidatePool) -> "SessionState":
        """Collapsed state showing the whole pool, with recompute #1 issued for the empty query."""
        return cls(suggestions=tuple(pool), latest_sequence=1)
