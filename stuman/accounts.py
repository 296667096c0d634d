"""User password hashing and changing."""

from __future__ import annotations

import hashlib
import sqlite3

from stuman.database import DatabaseError


class PasswordError(ValueError):
    """Raised when a password change is rejected."""


def hash_password(password: str) -> str:
    """Hex SHA-256 digest of the UTF-8 encoded password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def change_password(
    connection: sqlite3.Connection,
    username: str,
    old_password: str,
    new_password: str,
    confirm_password: str,
) -> None:
    """Replace a user's stored password hash after checking the old one."""
    if new_password != confirm_password:
        raise PasswordError("new password and confirmation do not match")
    if not username:
        raise PasswordError("no current user")
    try:
        row = connection.execute(
            "SELECT password FROM users WHERE username = ?", (username,)
        ).fetchone()
    except sqlite3.Error as exc:
        raise DatabaseError(f"user lookup failed: {exc}") from exc
    if row is None:
        raise PasswordError(f"user {username!r} not found")
    if str(row[0]) != hash_password(old_password):
        raise PasswordError("old password is incorrect")
    try:
        with connection:
            connection.execute(
                "UPDATE users SET password = ? WHERE username = ?",
                (hash_password(new_password), username),
            )
    except sqlite3.Error as exc:
        raise DatabaseError(f"password update failed: {exc}") from exc