"""Logging configuration for countrypick using loguru.

Records go to a rotating file; stderr output is opt-in because the Textual UI
owns the terminal while it runs.
"""

import os
import sys
from typing import Optional

from loguru import logger

from countrypick.utils import get_project_root

LOG_FILE_ENV = "COUNTRYPICK_LOG_FILE"
DEFAULT_LOG_NAME = "countrypick.log"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]}:{function}:{line} - {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> - <level>{message}</level>"
)

_log_file_path: Optional[str] = None


def resolve_log_file(log_file: Optional[str] = None) -> str:
    """
    Pick the log file path.

    Precedence: explicit argument, ``COUNTRYPICK_LOG_FILE``, the path used by a
    previous ``setup_logger`` call, then ``countrypick.log`` in the project root.
    Relative paths are taken relative to the project root.
    """
    candidate = log_file or os.getenv(LOG_FILE_ENV) or _log_file_path
    if not candidate:
        return os.path.join(get_project_root(), DEFAULT_LOG_NAME)
    if not os.path.isabs(candidate):
        return os.path.join(get_project_root(), candidate)
    return candidate


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "5 MB",
    retention: str = "7 days",
    console_output: bool = False,
) -> str:
    """
    Configure loguru sinks, replacing any previous configuration.

    Args:
        log_file: Path to the log file (see ``resolve_log_file``)
        log_level: Minimum level for every sink
        rotation: Size at which the file is rotated
        retention: How long rotated files are kept
        console_output: Also log to stderr

    Returns:
        The log file path in use
    """
    global _log_file_path
    _log_file_path = resolve_log_file(log_file)

    logger.remove()
    logger.configure(extra={"component": "countrypick"})

    if console_output:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    logger.add(
        _log_file_path,
        level=log_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    return _log_file_path


def get_logger(name: Optional[str] = None):
    """
    Get a logger tagged with a component name.

    Args:
        name: Component name written in each record (defaults to ``countrypick``)
    """
    if name:
        return logger.bind(component=name)
    return logger


setup_logger()
