import sqlite3

import pytest

from stuman.database import DatabaseError
from stuman.students import StudentModel


@pytest.fixture
def model():
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE studentInfo ("
        "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, gender TEXT, photo BLOB)"
    )
    yield StudentModel(connection)
    connection.close()


def test_empty_table(model):
    assert model.all_students() == []


def test_add_and_list(model):
    new_id = model.add_student({"name": "Li Lei", "gender": "M"})
    students = model.all_students()
    assert students == [
        {"id": new_id, "name": "Li Lei", "gender": "M", "photo": None}
    ]


def test_ids_increase(model):
    first = model.add_student({"name": "A"})
    second = model.add_student({"name": "B"})
    assert second > first
    assert [s["name"] for s in model.all_students()] == ["A", "B"]


def test_photo_roundtrip(model):
    photo = b"\x89PNG\r\n\x1a\nfake"
    new_id = model.add_student({"name": "Han Meimei", "photo": photo})
    (student,) = model.all_students()
    assert student["id"] == new_id
    assert student["photo"] == photo


def test_update(model):
    new_id = model.add_student({"name": "A", "gender": "F"})
    changed = model.update_student(new_id, {"name": "B"})
    assert changed == 1
    (student,) = model.all_students()
    assert student["name"] == "B"
    assert student["gender"] == "F"


def test_update_missing_row(model):
    assert model.update_student(99, {"name": "B"}) == 0


def test_delete(model):
    keep = model.add_student({"name": "A"})
    drop = model.add_student({"name": "B"})
    assert model.delete_student(drop) == 1
    assert [s["id"] for s in model.all_students()] == [keep]
    assert model.delete_student(drop) == 0


def test_unknown_column_raises(model):
    with pytest.raises(DatabaseError):
        model.add_student({"nickname": "x"})


def test_empty_data_raises(model):
    with pytest.raises(DatabaseError):
        model.add_student({})
    with pytest.raises(DatabaseError):
        model.update_student(1, {})


def test_missing_table_raises():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(DatabaseError):
        StudentModel(connection).all_students()
    connection.close()