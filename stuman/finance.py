"""Payment records stored in the ``financialRecords`` table."""

from __future__ import annotations

import datetime
import sqlite3
from collections.abc import Sequence
from typing import Any

from stuman.database import DatabaseError

ALL_STUDENTS = "-1"
DATE_FORMAT = "%Y-%m-%d"


def _date_text(value: datetime.date) -> str:
    return value.strftime(DATE_FORMAT)


class FinancialModel:
    """Reads and writes payment records joined with student names."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._connection:
                return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def records(
        self,
        student_id: str | int | None,
        start_date: datetime.date,
        end_date: datetime.date,
    ) -> list[dict[str, Any]]:
        """Payments between two dates inclusive, for one student or, with
        ``"-1"`` or ``None``, for all of them."""
        sql = (
            "SELECT fr.id, s.name, fr.payment_date, fr.amount, "
            "fr.payment_type, fr.notes "
            "FROM financialRecords fr "
            "JOIN studentInfo s ON fr.student_id = s.id "
            "WHERE fr.payment_date BETWEEN ? AND ?"
        )
        params: list[Any] = [_date_text(start_date), _date_text(end_date)]
        if student_id is not None and str(student_id) != ALL_STUDENTS:
            sql += " AND fr.student_id = ?"
            params.append(str(student_id))
        cursor = self._execute(sql, params)
        names = [column[0] for column in cursor.description]
        return [dict(zip(names, row)) for row in cursor.fetchall()]

    def add_record(
        self,
        student_id: str | int,
        payment_date: datetime.date,
        amount: float,
        payment_type: str,
        notes: str,
    ) -> int:
        """Insert a payment and return its id."""
        cursor = self._execute(
            "INSERT INTO financialRecords "
            "(student_id, payment_date, amount, payment_type, notes) "
            "VALUES (?, ?, ?, ?, ?)",
            (student_id, _date_text(payment_date), float(amount), payment_type, notes),
        )
        return cursor.lastrowid or 0

    def update_record(
        self,
        record_id: int,
        student_id: str | int,
        payment_date: datetime.date,
        amount: float,
        payment_type: str,
        notes: str,
    ) -> int:
        """Replace every field of one payment; return rows changed."""
        cursor = self._execute(
            "UPDATE financialRecords SET student_id = ?, payment_date = ?, "
            "amount = ?, payment_type = ?, notes = ? WHERE id = ?",
            (
                student_id,
                _date_text(payment_date),
                float(amount),
                payment_type,
                notes,
                record_id,
            ),
        )
        return cursor.rowcount

    def delete_record(self, record_id: int) -> int:
        """Delete one payment; return rows removed."""
        cursor = self._execute(
            "DELETE FROM financialRecords WHERE id = ?", (record_id,)
        )
        return cursor.rowcount