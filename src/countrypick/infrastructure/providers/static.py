"""In-memory and file-backed display name providers."""

from collections.abc import Iterable
from pathlib import Path

from countrypick.logger import get_logger

logger = get_logger("providers.static")


class StaticDisplayNameProvider:
    """Serves a fixed list of names."""

    def __init__(self, names: Iterable[str]):
        self._names = tuple(names)

    def list_available_display_names(self) -> list[str]:
        return list(self._names)


class FileDisplayNameProvider:
    """Reads one display name per line from a UTF-8 text file."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def list_available_display_names(self) -> list[str]:
        """
        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Names file not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            names = f.read().splitlines()

        logger.info(f"Read {len(names)} line(s) from {self.path}")
        return names
