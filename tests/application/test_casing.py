import pytest
from babel import Locale

from countrypick.application.casing import (
    case_folder,
    is_known_locale,
    lower_for_locale,
    resolve_locale,
)
from countrypick.application.filtering import filter_suggestions


def test_turkish_dotted_and_dotless_i() -> None:
    assert lower_for_locale("I", "tr_TR") == "ı"
    assert lower_for_locale("İSTANBUL", "tr") == "istanbul"
    assert lower_for_locale("IRAK", "az_AZ") == "ırak"


def test_default_lowercasing_elsewhere() -> None:
    assert lower_for_locale("IRAK", "en_US") == "irak"
    assert lower_for_locale("ÉIRE", None) == "éire"


def test_turkish_filter_distinguishes_i_forms() -> None:
    pool = ["Irak", "İtalya"]

    assert filter_suggestions(pool, "i", "tr_TR") == ("İtalya",)
    assert filter_suggestions(pool, "ı", "tr_TR") == ("Irak",)
    assert filter_suggestions(pool, "i", "en_US") == ("Irak", "İtalya")


@pytest.mark.parametrize("identifier", ["en_US", "en-US", "pt_BR", "tr"])
def test_resolve_locale_accepts_both_separators(identifier: str) -> None:
    resolved = resolve_locale(identifier)

    assert isinstance(resolved, Locale)
    assert str(resolved) == identifier.replace("-", "_")


def test_resolve_locale_passes_through_locale_and_none() -> None:
    locale = Locale("de", "CH")

    assert resolve_locale(locale) is locale
    assert resolve_locale(None) is None


def test_is_known_locale() -> None:
    assert is_known_locale("fr_FR")
    assert not is_known_locale("zz")
    assert not is_known_locale("not a locale")


def test_case_folder_reuses_str_lower_for_default_languages() -> None:
    assert case_folder("en_GB") is str.lower
    assert case_folder("tr_TR") is not str.lower
