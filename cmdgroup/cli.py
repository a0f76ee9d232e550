"""Command-line entry point: manage and run groups of named shell commands."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from cmdgroup.actions import (
    add_command,
    add_group,
    execute,
    list_commands_by_group,
    list_groups,
    remove_command,
    remove_group,
    rename_command,
    rename_group,
    show_help,
)
from cmdgroup.errors import (
    ERROR_CREATE_COMMAND_ARGUMENTS,
    ERROR_CREATE_GROUP_ARGUMENTS,
    ERROR_EXECUTE_ARGUMENTS,
    ERROR_NO_GROUP_PROVIDED,
    ERROR_REMOVE_COMMAND_ARGUMENTS,
    ERROR_REMOVE_GROUP_ARGUMENTS,
    ERROR_RENAME_COMMAND_ARGUMENTS,
    ERROR_RENAME_GROUP_ARGUMENTS,
    FAIL,
    SUCCESS,
    CmdGroupError,
)
from cmdgroup.helpers import to_lower
from cmdgroup.io import error

# Subcommand -> (action, operands it needs, message when they are missing)
_SUBCOMMANDS: dict[str, dict[str, tuple[Callable[..., object], int, str]]] = {
    "add": {
        "group": (add_group, 1, ERROR_CREATE_GROUP_ARGUMENTS),
        "command": (add_command, 3, ERROR_CREATE_COMMAND_ARGUMENTS),
    },
    "remove": {
        "group": (remove_group, 1, ERROR_REMOVE_GROUP_ARGUMENTS),
        "command": (remove_command, 2, ERROR_REMOVE_COMMAND_ARGUMENTS),
    },
    "list": {
        "groups": (list_groups, 0, ERROR_NO_GROUP_PROVIDED),
        "commands": (list_commands_by_group, 1, ERROR_NO_GROUP_PROVIDED),
    },
    "rename": {
        "group": (rename_group, 2, ERROR_RENAME_GROUP_ARGUMENTS),
        "command": (rename_command, 3, ERROR_RENAME_COMMAND_ARGUMENTS),
    },
}

# Verbs whose unknown subcommands fall through to the remaining rules.
_FALL_THROUGH = frozenset({"list", "rename"})

_CHOICES = {
    "add": "- command\n- group",
    "remove": "- command\n- group",
    "list": "- groups\n- commands",
    "rename": "- group\n- command",
}

_ALIASES: dict[str, tuple[Callable[..., object], int, str]] = {
    "-ag": (add_group, 1, ERROR_CREATE_GROUP_ARGUMENTS),
    "-ac": (add_command, 3, ERROR_CREATE_COMMAND_ARGUMENTS),
    "-dg": (remove_group, 1, ERROR_REMOVE_GROUP_ARGUMENTS),
    "-dc": (remove_command, 2, ERROR_REMOVE_COMMAND_ARGUMENTS),
    "-lg": (list_groups, 0, ERROR_NO_GROUP_PROVIDED),
    "-lc": (list_commands_by_group, 1, ERROR_NO_GROUP_PROVIDED),
    "-rc": (rename_command, 3, ERROR_RENAME_COMMAND_ARGUMENTS),
    "-rg": (rename_group, 2, ERROR_RENAME_GROUP_ARGUMENTS),
}


def _fail(message: str) -> int:
    error(message)
    return FAIL


def _run(action: Callable[..., object], operands: Sequence[str]) -> int:
    try:
        outcome = action(*operands)
    except CmdGroupError as exc:
        error(exc.message, *exc.params)
        return FAIL
    return FAIL if outcome is False else SUCCESS


def _dispatch(spec: tuple[Callable[..., object], int, str], operands: list[str]) -> int:
    action, needed, missing_message = spec
    if len(operands) < needed:
        return _fail(missing_message)
    return _run(action, operands[:needed])


def _help() -> int:
    show_help()
    return SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _help()

    args[0] = to_lower(args[0])
    verb = args[0]
    if verb in ("-h", "--help"):
        return _help()

    if verb in _SUBCOMMANDS:
        if len(args) < 2:
            print(_CHOICES[verb])
            return SUCCESS
        args[1] = to_lower(args[1])
        spec = _SUBCOMMANDS[verb].get(args[1])
        if spec is not None:
            return _dispatch(spec, args[2:])
        if verb not in _FALL_THROUGH:
            return FAIL

    alias = _ALIASES.get(verb)
    if alias is not None:
        return _dispatch(alias, args[1:])

    if len(args) >= 2:
        return _run(execute, args[:2])

    return _fail(ERROR_EXECUTE_ARGUMENTS)


if __name__ == "__main__":
    sys.exit(main())