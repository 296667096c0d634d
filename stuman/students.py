"""Student records stored in the ``studentInfo`` table."""

from __future__ import annotations

import sqlite3
from collections.abc import Mapping, Sequence
from typing import Any

from stuman.database import DatabaseError

TABLE = "studentInfo"


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class StudentModel:
    """Reads and writes student rows; columns are whatever the caller names."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._connection:
                return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def all_students(self) -> list[dict[str, Any]]:
        """Every student as a dict of column name to value."""
        cursor = self._execute(f"SELECT * FROM {TABLE}")
        names = [column[0] for column in cursor.description]
        return [dict(zip(names, row)) for row in cursor.fetchall()]

    def add_student(self, data: Mapping[str, Any]) -> int:
        """Insert a student and return the new row id."""
        if not data:
            raise DatabaseError("no student fields given")
        keys = sorted(data)
        fields = ", ".join(_quote(key) for key in keys)
        marks = ", ".join("?" for _ in keys)
        cursor = self._execute(
            f"INSERT INTO {TABLE} ({fields}) VALUES ({marks})",
            [data[key] for key in keys],
        )
        return cursor.lastrowid or 0

    def update_student(self, student_id: int, data: Mapping[str, Any]) -> int:
        """Update the given columns of one student; return rows changed."""
        if not data:
            raise DatabaseError("no student fields given")
        keys = sorted(data)
        assignments = ", ".join(f"{_quote(key)} = ?" for key in keys)
        cursor = self._execute(
            f"UPDATE {TABLE} SET {assignments} WHERE id = ?",
            [*(data[key] for key in keys), student_id],
        )
        return cursor.rowcount

    def delete_student(self, student_id: int) -> int:
        """Delete one student; return rows removed."""
        cursor = self._execute(f"DELETE FROM {TABLE} WHERE id = ?", (student_id,))
        return cursor.rowcount