"""Filesystem storage for the calculation history blob."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from protein_calculator.services.history import HistoryBackend


@dataclass
class FileHistoryBackend(HistoryBackend):
    """Stores each key as ``<directory>/<key>.json``."""

    directory: Path

    def read(self, key: str) -> str | None:
        """Return the file contents for a key, if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Atomically replace the file for a key."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            Path(tmp_name).replace(self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        """Delete the file for a key."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
