"""Connection to the SQLite database that holds the player's progress."""

from __future__ import annotations

import os
import sqlite3
from os import PathLike
from types import TracebackType
from typing import Any, Iterable

_SCHEMA = {
    "game_progress": (
        "CREATE TABLE IF NOT EXISTS game_progress ("
        "id INTEGER PRIMARY KEY, "
        "coins INTEGER NOT NULL DEFAULT 0, "
        "level_xp INTEGER NOT NULL DEFAULT 0, "
        "level INTEGER NOT NULL DEFAULT 1)"
    ),
    "maps": (
        "CREATE TABLE IF NOT EXISTS maps ("
        "id INTEGER PRIMARY KEY, "
        "name TEXT NOT NULL)"
    ),
    "map_progress": (
        "CREATE TABLE IF NOT EXISTS map_progress ("
        "map_id INTEGER PRIMARY KEY, "
        "max_wave INTEGER NOT NULL DEFAULT 0)"
    ),
    "tower_unlocks": (
        "CREATE TABLE IF NOT EXISTS tower_unlocks ("
        "id INTEGER PRIMARY KEY, "
        "name TEXT NOT NULL, "
        "require_level INTEGER NOT NULL, "
        "unlocked INTEGER NOT NULL DEFAULT 0)"
    ),
}

TABLES = tuple(_SCHEMA)


class DatabaseError(Exception):
    """Raised when the progress database cannot be opened or queried."""


def sql_quote(text: str) -> str:
    """Escape ``text`` for use inside a single-quoted SQL literal."""
    return text.replace("'", "''")


class UserProgressDB:
    """An open-or-closed connection to the user progress database."""

    def __init__(self) -> None:
        self._connection: sqlite3.Connection | None = None

    def __enter__(self) -> UserProgressDB:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """The underlying connection; raises when the database is closed."""
        if self._connection is None:
            raise DatabaseError("database is not open")
        return self._connection

    def open(self, db_path: str | PathLike[str]) -> None:
        """Open the database at ``db_path``, closing any previous connection."""
        self.close()
        try:
            self._connection = sqlite3.connect(os.fspath(db_path))
        except sqlite3.Error as error:
            raise DatabaseError(f"cannot open database {db_path}: {error}") from error

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def table_exists(self, table_name: str) -> bool:
        rows = self.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table_name,),
        )
        return bool(rows)

    def create_tables(self) -> None:
        """Create every table that is not present yet."""
        for name, statement in _SCHEMA.items():
            if not self.table_exists(name):
                self.execute(statement)

    def execute(self, query: str, params: Iterable[Any] = ()) -> list[tuple]:
        """Run one statement, commit, and return the rows it produced."""
        connection = self.connection
        try:
            with connection:
                cursor = connection.execute(query, tuple(params))
                return cursor.fetchall()
        except sqlite3.Error as error:
            raise DatabaseError(f"query failed: {error}") from error