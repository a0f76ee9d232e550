"""Exit codes, user-facing messages and the exception hierarchy."""

from __future__ import annotations

SUCCESS = 0
FAIL = 1

DATABASE_NAME = "gc.db"
README = "README.md"

ERROR_CREATE_GROUP_ARGUMENTS = "Not enough arguments for adding group\n"
ERROR_CREATE_COMMAND_ARGUMENTS = "Not enough arguments for adding command\n"

ERROR_REMOVE_GROUP_ARGUMENTS = "Not enough arguments for removing group\n"
ERROR_REMOVE_COMMAND_ARGUMENTS = "Not enough arguments for removing command\n"

ERROR_RENAME_GROUP_ARGUMENTS = "Not enough arguments for renaming group\n"
ERROR_RENAME_COMMAND_ARGUMENTS = "Not enough arguments for renaming command\n"

ERROR_EXECUTE_ARGUMENTS = "Can't execute that\n"

ERROR_COMMAND_EXECUTION = "Command has failed\n"

ERROR_SQL_OPEN = "Failed to open SQLite: %s\n"
ERROR_SQL_INIT = "Failed to init SQLite: %s\n"
ERROR_SQL_COMMAND_IS_NULL = "Command is NULL\n"

ERROR_NO_GROUPS = "There are no groups recorded\n"
ERROR_NO_COMMANDS_IN_GROUP = 'There are no commands within group "%s"\n'
ERROR_NON_EXISTING_GROUP = "Group doesn't exists\n"
ERROR_NON_EXISTING_COMMAND = "Command doesn't exists\n"

ERROR_NO_GROUP_PROVIDED = "No group name was provided\n"


class CmdGroupError(Exception):
    """Base error carrying a message template and its format arguments."""

    default_message: str | None = None

    def __init__(self, message: str | None = None, *args: object) -> None:
        if message is None:
            message = self.default_message
        if message is None:
            raise TypeError(f"{type(self).__name__} requires a message")
        super().__init__(message, *args)
        self.message = message
        self.params = args

    @property
    def text(self) -> str:
        """The full message as written to the terminal, newline included."""
        return self.message % self.params if self.params else self.message

    def __str__(self) -> str:
        return self.text.rstrip("\n")


class GroupNotFoundError(CmdGroupError):
    """The named group is not recorded."""

    default_message = ERROR_NON_EXISTING_GROUP


class CommandNotFoundError(CmdGroupError):
    """The named command is not recorded in its group."""

    default_message = ERROR_NON_EXISTING_COMMAND


class StorageError(CmdGroupError):
    """The command store could not be opened or initialised."""


class CommandFailedError(CmdGroupError):
    """A stored command ran and exited unsuccessfully."""

    default_message = ERROR_COMMAND_EXECUTION


class UsageError(CmdGroupError):
    """The command line did not carry what the requested action needs."""

    default_message = ERROR_EXECUTE_ARGUMENTS