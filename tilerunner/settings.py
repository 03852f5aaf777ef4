"""User settings stored as ``key=value`` lines."""

from __future__ import annotations

import sys
from functools import cache
from os import PathLike


class SettingsManager:
    """Reads the settings file on creation and on reset; save rewrites it."""

    def __init__(self, filename: str | PathLike[str] = "settings.txt") -> None:
        self.filename = filename
        self.values: dict[str, str] = {}
        self._load()

    def save(self) -> None:
        """Truncate and rewrite the settings file, reporting a failure on stderr."""
        try:
            with open(self.filename, "w", encoding="utf-8"):
                pass
        except OSError:
            print(
                f"[SettingsManager] Could not open settings file for writing: {self.filename}",
                file=sys.stderr,
            )

    def reset(self) -> None:
        """Discard unsaved changes by reading the file again."""
        self._load()

    def _load(self) -> None:
        self.values = {}
        try:
            handle = open(self.filename, encoding="utf-8")
        except OSError:
            return
        with handle:
            for raw in handle:
                key, sep, value = raw.rstrip("\n").partition("=")
                if sep and value:
                    self.values[key] = value


@cache
def get_settings() -> SettingsManager:
    """The shared settings of the running game."""
    return SettingsManager()