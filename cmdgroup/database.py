"""SQLite-backed store of command groups and the commands recorded in them."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

from cmdgroup.errors import (
    ERROR_SQL_INIT,
    ERROR_SQL_OPEN,
    CommandNotFoundError,
    GroupNotFoundError,
    StorageError,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS groups (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  group_name TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS commands (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  group_id INTEGER NOT NULL,
  command_name TEXT NOT NULL,
  command TEXT NOT NULL,
  FOREIGN KEY(group_id) REFERENCES groups(id) ON DELETE CASCADE,
  UNIQUE(group_id, command_name)
);
"""


def _require(**values: object) -> None:
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise TypeError(f"missing value for {', '.join(missing)}")


class CommandStore:
    """Groups of named shell commands kept in an SQLite database file.

    Lookups of a group or command that is not recorded raise
    GroupNotFoundError or CommandNotFoundError; a write that would break a
    uniqueness rule (a duplicate name) returns False.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        try:
            connection = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise StorageError(ERROR_SQL_OPEN, str(exc)) from exc
        try:
            connection.execute("PRAGMA foreign_keys = ON")
            connection.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            connection.close()
            raise StorageError(ERROR_SQL_INIT, str(exc)) from exc
        self._db = connection

    def close(self) -> None:
        """Close the underlying database connection."""
        self._db.close()

    def __enter__(self) -> CommandStore:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()

    def group_id(self, group_name: str) -> int | None:
        """Return the id of the named group, or None if it is not recorded."""
        _require(group_name=group_name)
        row = self._db.execute(
            "SELECT id FROM groups WHERE group_name = ?;", (group_name,)
        ).fetchone()
        return row[0] if row else None

    def command_id(self, group_name: str, command_name: str) -> int | None:
        """Return the id of a command in a group, or None if either is missing."""
        _require(group_name=group_name, command_name=command_name)
        group_id = self.group_id(group_name)
        if group_id is None:
            return None
        row = self._db.execute(
            "SELECT id FROM commands WHERE command_name = ? AND group_id = ?;",
            (command_name, group_id),
        ).fetchone()
        return row[0] if row else None

    def create_group(self, group_name: str) -> int:
        """Return the id of the named group, recording it first if needed."""
        _require(group_name=group_name)
        existing = self.group_id(group_name)
        if existing is not None:
            return existing
        cursor = self._db.execute(
            "INSERT INTO groups (group_name) VALUES (?);", (group_name,)
        )
        return cursor.lastrowid

    def add_group(self, group_name: str) -> bool:
        """Make sure the named group is recorded."""
        return self.create_group(group_name) is not None

    def add_command(self, group_name: str, command_name: str, command: str) -> bool:
        """Record a command in a group, creating the group if needed.

        Returns False if the group already holds a command of that name.
        """
        _require(group_name=group_name, command_name=command_name, command=command)
        group_id = self.create_group(group_name)
        try:
            self._db.execute(
                "INSERT INTO commands (group_id, command_name, command) "
                "VALUES (?, ?, ?);",
                (group_id, command_name, command),
            )
        except sqlite3.IntegrityError:
            return False
        return True

    def get_command(self, group_name: str, command_name: str) -> str:
        """Return the command line stored under a name in a group."""
        _require(group_name=group_name, command_name=command_name)
        group_id = self.group_id(group_name)
        if group_id is None:
            raise GroupNotFoundError()
        row = self._db.execute(
            "SELECT command FROM commands "
            "WHERE group_id = ? AND command_name = ? LIMIT 1;",
            (group_id, command_name),
        ).fetchone()
        if row is None or row[0] is None:
            raise CommandNotFoundError()
        return row[0]

    def remove_command(self, group_name: str, command_name: str) -> bool:
        """Delete a command from a group."""
        _require(group_name=group_name, command_name=command_name)
        group_id = self.group_id(group_name)
        if group_id is None:
            raise GroupNotFoundError()
        if self.command_id(group_name, command_name) is None:
            raise CommandNotFoundError()
        self._db.execute(
            "DELETE FROM commands WHERE group_id = ? AND command_name = ?;",
            (group_id, command_name),
        )
        return True

    def remove_group(self, group_name: str) -> bool:
        """Delete a group and its commands; a missing group is not an error."""
        _require(group_name=group_name)
        self._db.execute("DELETE FROM groups WHERE group_name = ?;", (group_name,))
        return True

    def rename_command(
        self, group_name: str, command_name: str, new_command_name: str
    ) -> bool:
        """Rename a command; False if the new name is taken in the group."""
        _require(
            group_name=group_name,
            command_name=command_name,
            new_command_name=new_command_name,
        )
        if self.group_id(group_name) is None:
            raise GroupNotFoundError()
        command_id = self.command_id(group_name, command_name)
        if command_id is None:
            raise CommandNotFoundError()
        try:
            self._db.execute(
                "UPDATE commands SET command_name = ? WHERE id = ?;",
                (new_command_name, command_id),
            )
        except sqlite3.IntegrityError:
            return False
        return True

    def rename_group(self, group_name: str, new_group_name: str) -> bool:
        """Rename a group; False if the new name is already taken."""
        _require(group_name=group_name, new_group_name=new_group_name)
        group_id = self.group_id(group_name)
        if group_id is None:
            raise GroupNotFoundError()
        try:
            self._db.execute(
                "UPDATE groups SET group_name = ? WHERE id = ?;",
                (new_group_name, group_id),
            )
        except sqlite3.IntegrityError:
            return False
        return True

    def list_groups(self) -> list[str]:
        """Return the names of all groups in the order they were recorded."""
        rows = self._db.execute("SELECT group_name FROM groups ORDER BY id;")
        return [name for (name,) in rows if name is not None]

    def list_commands(self, group_name: str) -> list[str]:
        """Return the command names of a group in the order they were recorded."""
        _require(group_name=group_name)
        group_id = self.group_id(group_name)
        if group_id is None:
            raise GroupNotFoundError()
        rows = self._db.execute(
            "SELECT command_name FROM commands WHERE group_id = ? ORDER BY id;",
            (group_id,),
        )
        return [name for (name,) in rows if name is not None]