"""SQLite connection management."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

DEFAULT_DATABASE_PATH = "StuManSys.db"


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class DatabaseManager:
    """Owns the single SQLite connection the application works with."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_DATABASE_PATH) -> None:
        self._path = os.fspath(path)
        self._connection: sqlite3.Connection | None = None
        self.open(self._path)

    @property
    def path(self) -> str:
        """Path of the current database file."""
        return self._path

    @path.setter
    def path(self, value: str | os.PathLike[str]) -> None:
        value = os.fspath(value)
        if value != self._path:
            self.open(value)

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection; raises DatabaseError when closed."""
        if self._connection is None:
            raise DatabaseError("database is not open")
        return self._connection

    def open(self, path: str | os.PathLike[str]) -> sqlite3.Connection:
        """Close any open connection and open the database at ``path``."""
        self.close()
        self._path = os.fspath(path)
        try:
            self._connection = sqlite3.connect(self._path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self._path!r}: {exc}") from exc
        return self._connection

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()