"""Locale-aware lowercasing used for case-insensitive prefix matching."""

from __future__ import annotations

from typing import Callable, Union

from babel import Locale, UnknownLocaleError

LocaleLike = Union[Locale, str, None]

# Languages whose dotted/dotless I pairs differ from the Unicode default mapping.
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})
_DOTTED_I_TABLE = str.maketrans({"I": "ı", "İ": "i"})


def resolve_locale(locale: LocaleLike) -> Locale | None:
    """
    Normalize a locale argument into a ``babel.Locale``.

    Accepts CLDR identifiers with either separator (``"tr_TR"``, ``"en-US"``).
    ``None`` stays ``None`` and means root (language-neutral) rules.

    Raises:
        ValueError: If the identifier is malformed
        babel.UnknownLocaleError: If CLDR has no data for the identifier
    """
    if locale is None or isinstance(locale, Locale):
        return locale
    sep = "-" if "-" in locale else "_"
    return Locale.parse(locale, sep=sep)


def is_known_locale(locale: str) -> bool:
    try:
        resolve_locale(locale)
    except (ValueError, UnknownLocaleError):
        return False
    return True


def case_folder(locale: LocaleLike) -> Callable[[str], str]:
    """Return the lowercasing function for ``locale``."""
    resolved = resolve_locale(locale)
    if resolved is not None and resolved.language in _DOTTED_I_LANGUAGES:
        return lambda text: text.translate(_DOTTED_I_TABLE).lower()
    return str.lower


def lower_for_locale(text: str, locale: LocaleLike) -> str:
    """Lowercase ``text`` using the rules of ``locale``."""
    return case_folder(locale)(text)
