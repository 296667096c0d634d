"""Weekly course timetable stored in the ``schedule`` table."""

from __future__ import annotations

import datetime
import sqlite3
from collections.abc import Iterable, Sequence
from typing import Any

from stuman.database import DatabaseError

DATE_FORMAT = "%Y-%m-%d"
DAYS_PER_WEEK = 7

_SLOT_PRESETS: dict[int, datetime.time] = {
    0: datetime.time(9, 0),
    1: datetime.time(11, 0),
    2: datetime.time(14, 0),
    3: datetime.time(16, 0),
    4: datetime.time(19, 0),
    5: datetime.time(21, 0),
}


def week_range(year: int, week: int) -> tuple[datetime.date, datetime.date]:
    """First and last day (Monday to Sunday) of an ISO week."""
    try:
        start = datetime.date.fromisocalendar(year, week, 1)
    except ValueError as exc:
        raise ValueError(f"invalid week {week} of year {year}") from exc
    return start, start + datetime.timedelta(days=DAYS_PER_WEEK - 1)


def default_time_for_slot(index: int) -> datetime.time | None:
    """Suggested start time for a timetable slot, or None for an unknown slot."""
    return _SLOT_PRESETS.get(index)


def course_label(student_name: str, time: datetime.time) -> str:
    """Text stored for a course: the student's name and the start time."""
    return f"{student_name},{time.strftime('%H:%M')}"


class ScheduleModel:
    """Reads and writes courses placed on a day and a named time slot."""

    def __init__(self, connection: sqlite3.Connection, times: Iterable[str]) -> None:
        self._connection = connection
        self.times = list(times)

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._connection:
                return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def schedule(self, year: int, week: int) -> list[list[str]]:
        """A grid of seven days by the slots in ``times``; empty cells are ''."""
        start, end = week_range(year, week)
        grid = [["" for _ in self.times] for _ in range(DAYS_PER_WEEK)]
        cursor = self._execute(
            "SELECT date, time, course_name FROM schedule WHERE date BETWEEN ? AND ?",
            (start.strftime(DATE_FORMAT), end.strftime(DATE_FORMAT)),
        )
        for date_text, slot, course_name in cursor.fetchall():
            try:
                day = datetime.datetime.strptime(str(date_text), DATE_FORMAT).date()
            except ValueError:
                continue
            day_index = (day - start).days
            if not 0 <= day_index < DAYS_PER_WEEK or slot not in self.times:
                continue
            grid[day_index][self.times.index(slot)] = (
                "" if course_name is None else str(course_name)
            )
        return grid

    def add_course(self, day: datetime.date, slot: str, course_name: str) -> int:
        """Place a course on a day and slot; return its row id."""
        cursor = self._execute(
            "INSERT INTO schedule (date, time, course_name) VALUES (?, ?, ?)",
            (day.strftime(DATE_FORMAT), slot, course_name),
        )
        return cursor.lastrowid or 0

    def delete_course(self, day: datetime.date, slot: str) -> int:
        """Remove the courses on a day and slot; return rows removed."""
        cursor = self._execute(
            "DELETE FROM schedule WHERE date = ? AND time = ?",
            (day.strftime(DATE_FORMAT), slot),
        )
        return cursor.rowcount