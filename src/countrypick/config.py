"""Configuration for countrypick.

Values come from the environment (a ``.env`` file is loaded by the CLI) and
can be overridden by explicit arguments, which is how CLI options are applied.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from babel import default_locale

from countrypick.application.casing import is_known_locale
from countrypick.utils import parse_bool

FALLBACK_LOCALE = "en_US"


def system_locale() -> str:
    """Locale identifier of the running process, as Babel reads it from the environment."""
    return default_locale() or FALLBACK_LOCALE


@dataclass
class AppConfig:
    """Runtime settings for the suggestion session and its UI."""

    # Case-folding locale
    locale: str = FALLBACK_LOCALE
    # Language the country names are displayed in (None = same as ``locale``)
    display_locale: Optional[str] = None

    # Recompute scheduling
    debounce_ms: int = 50
    off_thread: bool = True

    # Replaces the CLDR provider when set
    names_file: Optional[Path] = None

    debug: bool = False

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def effective_display_locale(self) -> str:
        return self.display_locale or self.locale


def load_config(
    *,
    locale: Optional[str] = None,
    display_locale: Optional[str] = None,
    names_file: Optional[Path] = None,
    debounce_ms: Optional[int] = None,
    off_thread: Optional[bool] = None,
    debug: Optional[bool] = None,
) -> AppConfig:
    """
    Build an AppConfig from environment variables and explicit overrides.

    Environment variables:
        COUNTRYPICK_LOCALE, COUNTRYPICK_DISPLAY_LOCALE, COUNTRYPICK_DEBOUNCE_MS,
        COUNTRYPICK_OFF_THREAD, COUNTRYPICK_NAMES_FILE, DEBUG

    Raises:
        ValueError: If a locale is unknown to CLDR or the debounce is not a non-negative integer
    """
    locale = locale or os.getenv("COUNTRYPICK_LOCALE") or system_locale()
    display_locale = display_locale or os.getenv("COUNTRYPICK_DISPLAY_LOCALE") or None

    for name, value in (("locale", locale), ("display locale", display_locale)):
        if value is not None and not is_known_locale(value):
            raise ValueError(f"Unknown {name}: {value!r}")

    if debounce_ms is None:
        raw = os.getenv("COUNTRYPICK_DEBOUNCE_MS", "50")
        try:
            debounce_ms = int(raw)
        except ValueError:
            raise ValueError(f"COUNTRYPICK_DEBOUNCE_MS must be an integer, got {raw!r}")
    if debounce_ms < 0:
        raise ValueError(f"Debounce must be >= 0 ms, got {debounce_ms}")

    if off_thread is None:
        off_thread = parse_bool(os.getenv("COUNTRYPICK_OFF_THREAD"), default=True)

    if names_file is None:
        env_file = os.getenv("COUNTRYPICK_NAMES_FILE", "").strip()
        names_file = Path(env_file) if env_file else None

    if debug is None:
        debug = parse_bool(os.getenv("DEBUG"), default=False)

    return AppConfig(
        locale=locale,
        display_locale=display_locale,
        debounce_ms=debounce_ms,
        off_thread=off_thread,
        names_file=names_file,
        debug=debug,
    )
