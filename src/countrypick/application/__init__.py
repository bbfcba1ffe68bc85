"""Application layer - the suggestion engine and its session glue."""

from countrypick.application.candidates import build_candidate_pool
from countrypick.application.casing import case_folder, lower_for_locale, resolve_locale
from countrypick.application.filtering import filter_suggestions
from countrypick.application.reducer import reduce
from countrypick.application.scheduler import RecomputeScheduler
from countrypick.application.session import SuggestionSession

__all__ = [
    "build_candidate_pool",
    "case_folder",
    "lower_for_locale",
    "resolve_locale",
    "filter_suggestions",
    "reduce",
    "RecomputeScheduler",
    "SuggestionSession",
]
