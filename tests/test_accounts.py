import sqlite3

import pytest

from stuman.accounts import PasswordError, change_password, hash_password
from stuman.database import DatabaseError


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (username TEXT PRIMARY KEY, password TEXT)")
    conn.execute(
        "INSERT INTO users VALUES (?, ?)", ("admin", hash_password("password"))
    )
    conn.commit()
    yield conn
    conn.close()


def _stored(conn, username):
    return conn.execute(
        "SELECT password FROM users WHERE username = ?", (username,)
    ).fetchone()[0]


def test_hash_of_empty_string():
    assert hash_password("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_is_hex_and_deterministic():
    digest = hash_password("secret")
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")
    assert digest == hash_password("secret")
    assert digest != hash_password("password")


def test_change_password_success(connection):
    change_password(connection, "admin", "password", "secret", "secret")
    assert _stored(connection, "admin") == hash_password("secret")


def test_mismatched_confirmation(connection):
    with pytest.raises(PasswordError):
        change_password(connection, "admin", "password", "secret", "token")
    assert _stored(connection, "admin") == hash_password("password")


def test_wrong_old_password(connection):
    with pytest.raises(PasswordError):
        change_password(connection, "admin", "token", "secret", "secret")
    assert _stored(connection, "admin") == hash_password("password")


def test_empty_username(connection):
    with pytest.raises(PasswordError):
        change_password(connection, "", "password", "secret", "secret")


def test_unknown_user(connection):
    with pytest.raises(PasswordError):
        change_password(connection, "nobody", "password", "secret", "secret")


def test_missing_table_raises_database_error():
    conn = sqlite3.connect(":memory:")
    with pytest.raises(DatabaseError):
        change_password(conn, "admin", "password", "secret", "secret")
    conn.close()