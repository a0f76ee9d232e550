"""Operations behind the command line, each run against its own store session."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TextIO

from cmdgroup.database import CommandStore
from cmdgroup.errors import (
    DATABASE_NAME,
    ERROR_NO_COMMANDS_IN_GROUP,
    ERROR_NO_GROUPS,
    README,
    CmdGroupError,
    CommandFailedError,
)
from cmdgroup.helpers import file_exists, get_storage_path

_LOCAL_MANUAL = ".cg/cg.1"
_INSTALLED_MANUAL = "cg"


def _require(**values: object) -> None:
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise TypeError(f"missing value for {', '.join(missing)}")


@contextmanager
def _store(db_path: str | os.PathLike[str] | None) -> Iterator[CommandStore]:
    path = get_storage_path(DATABASE_NAME) if db_path is None else db_path
    with CommandStore(path) as store:
        yield store


def _write_items(items: Iterable[str], out: TextIO | None) -> None:
    target = sys.stdout if out is None else out
    for item in items:
        target.write(f" - {item}\n")
    target.flush()


def show_help(readme: str | os.PathLike[str] = README) -> str:
    """Open the manual page and return the page that was shown.

    The local page is used when the readme sits in the working directory,
    the installed one otherwise.
    """
    page = _LOCAL_MANUAL if file_exists(readme) else _INSTALLED_MANUAL
    try:
        subprocess.run(["man", page], check=False)
    except OSError:
        pass
    return page


def add_group(group_name: str, db_path: str | os.PathLike[str] | None = None) -> bool:
    """Record a group; recording an existing group succeeds."""
    _require(group_name=group_name)
    with _store(db_path) as store:
        return store.add_group(group_name)


def add_command(
    group_name: str,
    command_name: str,
    command: str,
    db_path: str | os.PathLike[str] | None = None,
) -> bool:
    """Record a command in a group; False if the name is already taken there."""
    _require(group_name=group_name, command_name=command_name, command=command)
    with _store(db_path) as store:
        return store.add_command(group_name, command_name, command)


def remove_group(group_name: str, db_path: str | os.PathLike[str] | None = None) -> bool:
    """Delete a group together with its commands."""
    _require(group_name=group_name)
    with _store(db_path) as store:
        return store.remove_group(group_name)


def remove_command(
    group_name: str,
    command_name: str,
    db_path: str | os.PathLike[str] | None = None,
) -> bool:
    """Delete a command from its group."""
    _require(group_name=group_name, command_name=command_name)
    with _store(db_path) as store:
        return store.remove_command(group_name, command_name)


def rename_group(
    group_name: str,
    new_group_name: str,
    db_path: str | os.PathLike[str] | None = None,
) -> bool:
    """Rename a group; False if the new name is already taken."""
    _require(group_name=group_name, new_group_name=new_group_name)
    with _store(db_path) as store:
        return store.rename_group(group_name, new_group_name)


def rename_command(
    group_name: str,
    command_name: str,
    new_command_name: str,
    db_path: str | os.PathLike[str] | None = None,
) -> bool:
    """Rename a command in a group; False if the new name is already taken."""
    _require(
        group_name=group_name,
        command_name=command_name,
        new_command_name=new_command_name,
    )
    with _store(db_path) as store:
        return store.rename_command(group_name, command_name, new_command_name)


def list_groups(
    db_path: str | os.PathLike[str] | None = None, out: TextIO | None = None
) -> list[str]:
    """Write the recorded groups as a bulleted list and return them."""
    with _store(db_path) as store:
        groups = store.list_groups()
    if not groups:
        raise CmdGroupError(ERROR_NO_GROUPS)
    _write_items(groups, out)
    return groups


def list_commands_by_group(
    group_name: str,
    db_path: str | os.PathLike[str] | None = None,
    out: TextIO | None = None,
) -> list[str]:
    """Write the command names of a group as a bulleted list and return them."""
    _require(group_name=group_name)
    with _store(db_path) as store:
        commands = store.list_commands(group_name)
    if not commands:
        raise CmdGroupError(ERROR_NO_COMMANDS_IN_GROUP, group_name)
    _write_items(commands, out)
    return commands


def execute(
    group_name: str,
    command_name: str,
    db_path: str | os.PathLike[str] | None = None,
) -> str:
    """Run a stored command through the shell and return its command line.

    The command's own error output is discarded; a non-zero exit status
    raises CommandFailedError.
    """
    _require(group_name=group_name, command_name=command_name)
    with _store(db_path) as store:
        command = store.get_command(group_name, command_name)
    sys.stdout.flush()
    completed = subprocess.run(command, shell=True, stderr=subprocess.DEVNULL)
    if completed.returncode != 0:
        raise CommandFailedError()
    return command