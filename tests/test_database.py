import pytest

from stuman.database import DEFAULT_DATABASE_PATH, DatabaseError, DatabaseManager


def test_open_creates_file(tmp_path):
    target = tmp_path / "school.db"
    manager = DatabaseManager(target)
    try:
        manager.connection.execute("CREATE TABLE t (x INTEGER)")
        manager.connection.commit()
        assert manager.is_open
        assert manager.path == str(target)
        assert target.exists()
    finally:
        manager.close()


def test_context_manager_closes(tmp_path):
    with DatabaseManager(tmp_path / "a.db") as manager:
        assert manager.is_open
    assert not manager.is_open
    with pytest.raises(DatabaseError):
        manager.connection


def test_setting_same_path_keeps_connection(tmp_path):
    with DatabaseManager(tmp_path / "a.db") as manager:
        before = manager.connection
        manager.path = tmp_path / "a.db"
        assert manager.connection is before


def test_setting_new_path_reopens(tmp_path):
    with DatabaseManager(tmp_path / "a.db") as manager:
        before = manager.connection
        manager.path = tmp_path / "b.db"
        assert manager.connection is not before
        assert manager.path == str(tmp_path / "b.db")
        assert (tmp_path / "b.db").exists()


def test_data_persists_across_reopen(tmp_path):
    target = tmp_path / "a.db"
    with DatabaseManager(target) as manager:
        manager.connection.execute("CREATE TABLE t (x INTEGER)")
        manager.connection.execute("INSERT INTO t VALUES (7)")
        manager.connection.commit()
        manager.open(target)
        rows = manager.connection.execute("SELECT x FROM t").fetchall()
    assert rows == [(7,)]


def test_unopenable_path_raises(tmp_path):
    with pytest.raises(DatabaseError):
        DatabaseManager(tmp_path / "missing" / "dir" / "x.db")


def test_default_path():
    assert DEFAULT_DATABASE_PATH.endswith(".db")