"""Picture gallery ("honor wall") stored in the ``honorWall`` table."""

from __future__ import annotations

import datetime
import io
import logging
import os
import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from PIL import Image

from stuman.database import DatabaseError

log = logging.getLogger(__name__)

THUMBNAIL_WIDTH = 300
THUMBNAIL_HEIGHT = 500
COLUMNS = 3
DEFAULT_DESCRIPTION = "未填写描述"

_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class HonorImage:
    """One stored picture."""

    id: int
    image_data: bytes


def grid_position(index: int) -> tuple[int, int]:
    """Row and column of the ``index``-th picture in a three-column grid."""
    if index < 0:
        raise ValueError(f"grid index must not be negative: {index}")
    return divmod(index, COLUMNS)


def _decode(image_data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(image_data))
        image.load()
    except (OSError, ValueError) as exc:
        raise ValueError(f"cannot decode image: {exc}") from exc
    return image


def thumbnail(image_data: bytes) -> Image.Image:
    """The picture scaled to fit the wall's cell, keeping its aspect ratio."""
    image = _decode(image_data)
    scale = min(THUMBNAIL_WIDTH / image.width, THUMBNAIL_HEIGHT / image.height)
    size = (max(1, round(image.width * scale)), max(1, round(image.height * scale)))
    return image.resize(size, Image.Resampling.LANCZOS)


def _load_as_png(path: str | os.PathLike[str]) -> bytes:
    try:
        with Image.open(path) as image:
            image.load()
            if image.mode not in _PNG_MODES:
                image = image.convert("RGBA")
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
    except (OSError, ValueError) as exc:
        raise ValueError(f"cannot load image {os.fspath(path)!r}: {exc}") from exc
    return buffer.getvalue()


def _text_date(day: datetime.date) -> str:
    return f"{_DAY_NAMES[day.weekday()]} {_MONTH_NAMES[day.month - 1]} {day.day} {day.year}"


class HonorWall:
    """Adds, replaces, deletes and lists pictures stored as PNG data."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._connection:
                return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def images(self) -> list[HonorImage]:
        """Every stored picture that decodes; broken ones are skipped."""
        cursor = self._execute("SELECT id, image_data FROM honorWall")
        result = []
        for image_id, data in cursor.fetchall():
            data = bytes(data or b"")
            try:
                _decode(data)
            except ValueError:
                log.warning("cannot load image data of picture %s", image_id)
                continue
            result.append(HonorImage(int(image_id), data))
        return result

    def add_image(self, path: str | os.PathLike[str]) -> int:
        """Store the picture at ``path`` as PNG; return its id."""
        data = _load_as_png(path)
        cursor = self._execute(
            "INSERT INTO honorWall (image_data, description, added_date) "
            "VALUES (?, ?, ?)",
            (data, DEFAULT_DESCRIPTION, _text_date(datetime.date.today())),
        )
        return cursor.lastrowid or 0

    def replace_image(self, image_id: int, path: str | os.PathLike[str]) -> int:
        """Replace the data of one picture; return rows changed."""
        data = _load_as_png(path)
        cursor = self._execute(
            "UPDATE honorWall SET image_data = ? WHERE id = ?", (data, image_id)
        )
        return cursor.rowcount

    def delete_image(self, image_id: int) -> int:
        """Delete one picture; return rows removed."""
        cursor = self._execute("DELETE FROM honorWall WHERE id = ?", (image_id,))
        return cursor.rowcount