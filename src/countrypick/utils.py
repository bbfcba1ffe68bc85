"""
Utility functions for countrypick.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/countrypick).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Interpret an environment flag such as ``"true"``/``"0"``."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def shorten(text: str, limit: int = 50) -> str:
    """Trim text for log lines."""
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"
