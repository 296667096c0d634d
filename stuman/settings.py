"""Persistent application settings stored in an INI file."""

from __future__ import annotations

import configparser
import os
from pathlib import Path

from stuman.database import DEFAULT_DATABASE_PATH

DEFAULT_SETTINGS_PATH = "config.ini"

_DATABASE = "Database"
_LOGIN = "Login"


class Settings:
    """Database path and login preferences, written through to disk."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_SETTINGS_PATH) -> None:
        self.path = Path(path)
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str  # type: ignore[assignment,method-assign]
        self._parser.read(self.path, encoding="utf-8")

    @property
    def database_path(self) -> str:
        return self._parser.get(_DATABASE, "Path", fallback=DEFAULT_DATABASE_PATH)

    @database_path.setter
    def database_path(self, value: str | os.PathLike[str]) -> None:
        self._set(_DATABASE, "Path", os.fspath(value))

    @property
    def cache_enabled(self) -> bool:
        return self._parser.getboolean(_LOGIN, "CacheEnabled", fallback=True)

    @cache_enabled.setter
    def cache_enabled(self, enabled: bool) -> None:
        self._set(_LOGIN, "CacheEnabled", "true" if enabled else "false")

    @property
    def last_user(self) -> str:
        return self._parser.get(_LOGIN, "LastUser", fallback="")

    @last_user.setter
    def last_user(self, user: str) -> None:
        self._set(_LOGIN, "LastUser", user)

    def _set(self, section: str, key: str, value: str) -> None:
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, value)
        self.save()

    def save(self) -> None:
        """Write the current settings to the INI file."""
        with self.path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle, space_around_delimiters=False)