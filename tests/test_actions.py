from io import StringIO
from unittest.mock import patch

import pytest

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
from cmdgroup.database import CommandStore
from cmdgroup.errors import (
    ERROR_COMMAND_EXECUTION,
    ERROR_NO_GROUPS,
    CmdGroupError,
    CommandFailedError,
    CommandNotFoundError,
    GroupNotFoundError,
)

GROUP_NAME = "group_name"
GROUP_NAME_1 = "example_group1"
NON_EXISTING_NAME = "non_existing"

COMMAND_NAME = "example_command"
COMMAND_NAME_1 = "example_command1"
COMMAND_NAME_2 = "example_command2"

LS = "ls"
ECHO = "echo 'test'"
INVALID_COMMAND = "youcantrunthismate"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "gc_test.db"


def _seed_groups(db_path, *names):
    with CommandStore(db_path) as store:
        for name in names:
            store.add_group(name)


def _seed_command(db_path, group, name, command):
    with CommandStore(db_path) as store:
        store.add_command(group, name, command)


# GROUPS


def test_create_group_null_name(db_path):
    with pytest.raises(TypeError):
        add_group(None, db_path)
    assert not db_path.exists()


def test_create_group_valid_name(db_path):
    assert add_group(GROUP_NAME, db_path) is True
    with CommandStore(db_path) as store:
        assert store.list_groups() == [GROUP_NAME]


def test_create_existing_group_succeeds_once(db_path):
    assert add_group(GROUP_NAME, db_path) is True
    assert add_group(GROUP_NAME, db_path) is True
    with CommandStore(db_path) as store:
        assert store.list_groups() == [GROUP_NAME]


def test_remove_group_null_name(db_path):
    with pytest.raises(TypeError):
        remove_group(None, db_path)


def test_remove_existing_group(db_path):
    _seed_groups(db_path, GROUP_NAME)
    assert remove_group(GROUP_NAME, db_path) is True
    with CommandStore(db_path) as store:
        assert store.list_groups() == []


def test_remove_non_existing_group(db_path):
    assert remove_group(NON_EXISTING_NAME, db_path) is True


def test_list_groups_empty(db_path):
    out = StringIO()
    with pytest.raises(CmdGroupError) as info:
        list_groups(db_path, out)
    assert info.value.text == ERROR_NO_GROUPS
    assert out.getvalue() == ""


def test_list_existing_groups(db_path):
    _seed_groups(db_path, GROUP_NAME, GROUP_NAME_1)
    out = StringIO()
    assert list_groups(db_path, out) == [GROUP_NAME, GROUP_NAME_1]
    assert out.getvalue() == f" - {GROUP_NAME}\n - {GROUP_NAME_1}\n"


def test_list_groups_defaults_to_stdout(db_path, capsys):
    _seed_groups(db_path, GROUP_NAME)
    list_groups(db_path)
    assert capsys.readouterr().out == f" - {GROUP_NAME}\n"


def test_rename_group_null_args(db_path):
    with pytest.raises(TypeError):
        rename_group(None, None, db_path)


def test_rename_non_existing_group(db_path):
    with pytest.raises(GroupNotFoundError):
        rename_group(GROUP_NAME, GROUP_NAME_1, db_path)


def test_rename_existing_group(db_path):
    _seed_groups(db_path, GROUP_NAME)
    assert rename_group(GROUP_NAME, GROUP_NAME_1, db_path) is True
    with CommandStore(db_path) as store:
        assert store.list_groups() == [GROUP_NAME_1]


def test_rename_group_to_taken_name(db_path):
    _seed_groups(db_path, GROUP_NAME, GROUP_NAME_1)
    assert rename_group(GROUP_NAME, GROUP_NAME_1, db_path) is False


# COMMANDS


def test_create_command_null_args(db_path):
    with pytest.raises(TypeError):
        add_command(None, None, None, db_path)
    assert not db_path.exists()


def test_create_command_in_non_existing_group(db_path):
    assert add_command(NON_EXISTING_NAME, COMMAND_NAME, LS, db_path) is True
    with CommandStore(db_path) as store:
        assert store.get_command(NON_EXISTING_NAME, COMMAND_NAME) == LS


def test_create_command_in_existing_group(db_path):
    _seed_groups(db_path, GROUP_NAME)
    assert add_command(GROUP_NAME, COMMAND_NAME, LS, db_path) is True


def test_create_duplicate_command(db_path):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, LS)
    assert add_command(GROUP_NAME, COMMAND_NAME, ECHO, db_path) is False
    with CommandStore(db_path) as store:
        assert store.get_command(GROUP_NAME, COMMAND_NAME) == LS


def test_remove_command_null_args(db_path):
    with pytest.raises(TypeError):
        remove_command(None, None, db_path)


def test_remove_command_from_non_existing_group(db_path):
    with pytest.raises(GroupNotFoundError):
        remove_command(NON_EXISTING_NAME, COMMAND_NAME, db_path)


def test_remove_non_existing_command_from_group(db_path):
    _seed_groups(db_path, GROUP_NAME)
    with pytest.raises(CommandNotFoundError):
        remove_command(GROUP_NAME, NON_EXISTING_NAME, db_path)


def test_remove_existing_command(db_path):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, LS)
    assert remove_command(GROUP_NAME, COMMAND_NAME, db_path) is True
    with CommandStore(db_path) as store:
        assert store.list_commands(GROUP_NAME) == []


def test_list_commands_null_group(db_path):
    with pytest.raises(TypeError):
        list_commands_by_group(None, db_path)


def test_list_commands_non_existing_group(db_path):
    with pytest.raises(GroupNotFoundError) as info:
        list_commands_by_group(GROUP_NAME, db_path)
    assert info.value.text == "Group doesn't exists\n"


def test_list_commands_empty_list(db_path):
    _seed_groups(db_path, GROUP_NAME)
    with pytest.raises(CmdGroupError) as info:
        list_commands_by_group(GROUP_NAME, db_path, StringIO())
    assert info.value.text == 'There are no commands within group "group_name"\n'


def test_list_existing_commands_in_group(db_path):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, LS)
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME_1, LS)
    out = StringIO()
    assert list_commands_by_group(GROUP_NAME, db_path, out) == [
        COMMAND_NAME,
        COMMAND_NAME_1,
    ]
    assert out.getvalue() == f" - {COMMAND_NAME}\n - {COMMAND_NAME_1}\n"


def test_rename_command_null_args(db_path):
    with pytest.raises(TypeError):
        rename_command(None, None, None, db_path)


def test_rename_command_non_existing_group(db_path):
    with pytest.raises(GroupNotFoundError):
        rename_command(NON_EXISTING_NAME, COMMAND_NAME, COMMAND_NAME_1, db_path)


def test_rename_non_existing_command(db_path):
    _seed_groups(db_path, GROUP_NAME)
    with pytest.raises(CommandNotFoundError):
        rename_command(GROUP_NAME, NON_EXISTING_NAME, COMMAND_NAME_1, db_path)


def test_rename_existing_command(db_path):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, ECHO)
    assert rename_command(GROUP_NAME, COMMAND_NAME, COMMAND_NAME_1, db_path) is True
    with CommandStore(db_path) as store:
        assert store.get_command(GROUP_NAME, COMMAND_NAME_1) == ECHO


# RELATIONS (GROUPS + COMMANDS)


def test_remove_group_removes_its_commands_single(db_path):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, LS)
    assert remove_group(GROUP_NAME, db_path) is True
    with CommandStore(db_path) as store:
        with pytest.raises(GroupNotFoundError):
            store.get_command(GROUP_NAME, COMMAND_NAME)


def test_remove_group_removes_its_commands_multiple(db_path):
    for name in (COMMAND_NAME, COMMAND_NAME_1, COMMAND_NAME_2):
        _seed_command(db_path, GROUP_NAME, name, LS)
    assert remove_group(GROUP_NAME, db_path) is True
    with CommandStore(db_path) as store:
        for name in (COMMAND_NAME, COMMAND_NAME_1, COMMAND_NAME_2):
            with pytest.raises(GroupNotFoundError):
                store.get_command(GROUP_NAME, name)
    add_group(GROUP_NAME, db_path)
    with CommandStore(db_path) as store:
        assert store.list_commands(GROUP_NAME) == []


# EXECUTION


def test_execute_null_args(db_path):
    with pytest.raises(TypeError):
        execute(None, None, db_path)


def test_execute_non_existing_group(db_path):
    with pytest.raises(GroupNotFoundError):
        execute(NON_EXISTING_NAME, COMMAND_NAME, db_path)


def test_execute_non_existing_command(db_path):
    _seed_groups(db_path, GROUP_NAME)
    with pytest.raises(CommandNotFoundError):
        execute(GROUP_NAME, NON_EXISTING_NAME, db_path)


def test_execute_invalid_command(db_path, capfd):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, INVALID_COMMAND)
    with pytest.raises(CommandFailedError) as info:
        execute(GROUP_NAME, COMMAND_NAME, db_path)
    assert info.value.text == ERROR_COMMAND_EXECUTION
    assert capfd.readouterr().err == ""


def test_execute_valid_command(db_path, capfd):
    _seed_command(db_path, GROUP_NAME, COMMAND_NAME, ECHO)
    assert execute(GROUP_NAME, COMMAND_NAME, db_path) == ECHO
    assert capfd.readouterr().out == "test\n"


# OTHER


def test_help_uses_local_page_when_readme_present(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text("manual")
    with patch("cmdgroup.actions.subprocess.run") as run:
        assert show_help(readme) == ".cg/cg.1"
    run.assert_called_once_with(["man", ".cg/cg.1"], check=False)


def test_help_uses_installed_page_without_readme(tmp_path):
    with patch("cmdgroup.actions.subprocess.run") as run:
        assert show_help(tmp_path / "README.md") == "cg"
    run.assert_called_once_with(["man", "cg"], check=False)


def test_help_survives_missing_man(tmp_path):
    with patch("cmdgroup.actions.subprocess.run", side_effect=FileNotFoundError):
        assert show_help(tmp_path / "README.md") == "cg"