"""Shared fixtures for countrypick tests."""

import pytest

from countrypick.application import build_candidate_pool
from countrypick.domain.types import CandidatePool

COUNTRIES = [
    "Canada",
    "Chad",
    "Chile",
    "China",
    "France",
    "Guinea",
    "Guinea-Bissau",
    "Germany",
    "India",
]


@pytest.fixture
def countries() -> list[str]:
    return list(COUNTRIES)


@pytest.fixture
def pool() -> CandidatePool:
    return build_candidate_pool(COUNTRIES)
