"""SQLite storage for users and revoked tokens."""

from __future__ import annotations

import logging
import sqlite3
import time
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from .password import hash_password

__all__ = ["User", "Database"]

_log = logging.getLogger(__name__)

_CREATE_USERS = """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT UNIQUE NOT NULL,
        password TEXT NOT NULL
    )
"""

_CREATE_BLACKLIST = """
    CREATE TABLE IF NOT EXISTS blacklist (
        token TEXT PRIMARY KEY,
        expires_at INTEGER NOT NULL
    )
"""


@dataclass(frozen=True)
class User:
    """A stored user; *password* holds the password hash."""

    id: int
    username: str
    password: str


class Database:
    """Users table and a blacklist of revoked tokens."""

    def __init__(self, path: str | Path = "users.db") -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(_CREATE_USERS)
            self._conn.execute(_CREATE_BLACKLIST)
        _log.info("database initialized at %s", path)

    def add_user(self, username: str, password: str) -> bool:
        """Store a user with the hash of *password*; False if the name is taken."""
        hashed = hash_password(password)
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO users (username, password) VALUES (?, ?)",
                    (username, hashed),
                )
        except sqlite3.IntegrityError:
            return False
        return True

    def get_user(self, username: str) -> User | None:
        """Return the user named *username*, or None."""
        row = self._conn.execute(
            "SELECT id, username, password FROM users WHERE username = ?",
            (username,),
        ).fetchone()
        return None if row is None else User(*row)

    def blacklist_token(self, token: str, expires_at: int) -> None:
        """Revoke *token* until *expires_at* (UNIX time); repeats are ignored."""
        with self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO blacklist (token, expires_at) VALUES (?, ?)",
                (token, int(expires_at)),
            )

    def is_token_blacklisted(self, token: str) -> bool:
        """True when *token* has been revoked."""
        row = self._conn.execute(
            "SELECT 1 FROM blacklist WHERE token = ? LIMIT 1", (token,)
        ).fetchone()
        return row is not None

    def cleanup_blacklist(self) -> int:
        """Delete revoked tokens that have expired; return how many were removed."""
        with self._conn:
            cursor = self._conn.execute(
                "DELETE FROM blacklist WHERE expires_at < ?", (int(time.time()),)
            )
        return cursor.rowcount

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()