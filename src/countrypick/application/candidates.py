"""Candidate pool construction."""

from __future__ import annotations

import locale as _locale
from collections.abc import Callable, Iterable

from countrypick.domain.types import CandidatePool
from countrypick.logger import get_logger

logger = get_logger("candidates")


def build_candidate_pool(
    raw_names: Iterable[str],
    collation_key: Callable[[str], object] | None = None,
) -> CandidatePool:
    """
    Clean raw display names into a CandidatePool.

    Each name is trimmed, blanks are dropped and exact duplicates are removed
    (first occurrence wins). The survivors are sorted with the process's
    ``LC_COLLATE`` collation unless ``collation_key`` is given.

    Args:
        raw_names: Names as delivered by a DisplayNameProvider
        collation_key: Optional sort key overriding ``locale.strxfrm``

    Returns:
        Duplicate-free, blank-free, sorted pool
    """
    unique: dict[str, None] = {}
    dropped = 0
    for raw in raw_names:
        name = raw.strip()
        if not name or name in unique:
            dropped += 1
            continue
        unique[name] = None

    names = tuple(sorted(unique, key=collation_key or _locale.strxfrm))
    logger.debug(f"Built candidate pool with {len(names)} name(s), dropped {dropped}")
    return CandidatePool(names)
