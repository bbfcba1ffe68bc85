"""
Country names from Babel's CLDR locale data.

Mirrors a platform locale registry: every available locale that names a
territory contributes that territory's display name, translated into the
display locale. Several locales share a territory (``de_CH``, ``fr_CH``...),
so the raw list is full of duplicates; pool building removes them.
"""

from babel import Locale
from babel.core import parse_locale
from babel.localedata import locale_identifiers

from countrypick.application.casing import LocaleLike, resolve_locale
from countrypick.logger import get_logger

logger = get_logger("providers.cldr")


class BabelDisplayNameProvider:
    """DisplayNameProvider backed by the CLDR data shipped with Babel."""

    def __init__(self, display_locale: LocaleLike = "en_US"):
        """
        Args:
            display_locale: Locale whose language the names are rendered in
        """
        self.display_locale: Locale = resolve_locale(display_locale) or Locale("en")

    def list_available_display_names(self) -> list[str]:
        territories = self.display_locale.territories
        names: list[str] = []
        skipped = 0

        for identifier in locale_identifiers():
            try:
                _, territory, _, _ = parse_locale(identifier)[:4]
            except ValueError:
                skipped += 1
                continue
            if not territory:
                continue
            name = territories.get(territory)
            if name:
                names.append(name)
            else:
                skipped += 1

        logger.info(
            f"Collected {len(names)} territory name(s) in {self.display_locale} "
            f"({skipped} identifier(s) without a usable name)"
        )
        return names
