"""Display name providers and the factory that picks one from config."""

from countrypick.config import AppConfig
from countrypick.domain.protocols import DisplayNameProvider
from countrypick.infrastructure.providers.cldr import BabelDisplayNameProvider
from countrypick.infrastructure.providers.static import (
    FileDisplayNameProvider,
    StaticDisplayNameProvider,
)


def create_provider(config: AppConfig) -> DisplayNameProvider:
    """File provider when a names file is configured, CLDR otherwise."""
    if config.names_file is not None:
        return FileDisplayNameProvider(config.names_file)
    return BabelDisplayNameProvider(config.effective_display_locale)


__all__ = [
    "BabelDisplayNameProvider",
    "FileDisplayNameProvider",
    "StaticDisplayNameProvider",
    "create_provider",
]
