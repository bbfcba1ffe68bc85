"""Display name provider protocol.

A provider is read exactly once at startup to build the CandidatePool.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

__all__ = ["DisplayNameProvider"]


@runtime_checkable
class DisplayNameProvider(Protocol):
    """Source of raw display names (country names, in the default setup).

    Returned names may contain duplicates, blanks and surrounding whitespace;
    ``build_candidate_pool`` cleans them up.

    Example:
        >>> provider = StaticDisplayNameProvider(["Chad", " Canada ", "Chad"])
        >>> pool = build_candidate_pool(provider.list_available_display_names())
        >>> list(pool)
        ['Canada', 'Chad']
    """

    def list_available_display_names(self) -> Sequence[str]:
        """Return every raw display name the provider knows about."""
        ...
