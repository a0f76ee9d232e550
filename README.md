# cmdgroup

`cmdgroup` keeps shell commands you use often in a small SQLite database,
sorted into named groups. Each stored command has a short name, and you run
it later with `cg <group> <command>`.

## Installation

```
pip install .
```

This installs the `cg` command.

## Storage

The database file `gc.db` lives in a `.cg` directory next to the `cg`
program, which is the directory of the running script. The directory is not
created for you. If it is missing, every operation fails with
`Failed to open SQLite: ...`. Create it once after installing:

```
mkdir "$(dirname "$(command -v cg)")/.cg"
```

## Usage

### Groups

```
cg add group <group>                 # or: cg -ag <group>
cg remove group <group>              # or: cg -dg <group>
cg rename group <group> <new-name>   # or: cg -rg <group> <new-name>
cg list groups                       # or: cg -lg
```

- Adding a group that already exists succeeds.
- Removing a group also removes every command stored in it. Removing a group
  that does not exist is not an error.
- Renaming fails, with exit status 1, when the group does not exist
  (`Group doesn't exists`) or when the new name is already taken.
- Listing prints each group as ` - <name>`, in the order the groups were
  added. With no groups it reports `There are no groups recorded`.

### Commands

```
cg add command <group> <name> "<shell command>"       # or: cg -ac ...
cg remove command <group> <name>                      # or: cg -dc ...
cg rename command <group> <name> <new-name>           # or: cg -rc ...
cg list commands <group>                              # or: cg -lc <group>
```

- Adding a command to a group that does not exist yet creates the group.
  Adding a name that the group already holds fails with exit status 1.
- Removing or renaming reports `Group doesn't exists` or
  `Command doesn't exists` when the group or the command is missing.
- Listing an empty group reports `There are no commands within group "<group>"`.

### Running a command

```
cg <group> <name>
```

The stored command line is run through the shell. Its own error output is
discarded. If it exits with a non-zero status, `cg` reports
`Command has failed` and exits with status 1.

The first argument is lower-cased before it is looked at, so in this form the
group name is always matched in lower case. The subcommand words (`add`,
`group`, `-ag` and so on) are matched without regard to case.

### Other behaviour

- `cg add`, `cg remove`, `cg list` or `cg rename` with nothing after it
  prints the kinds of thing the subcommand accepts and exits with status 0.
- `cg add` or `cg remove` followed by an unknown word exits with status 1.
- Missing operands print a message such as
  `Not enough arguments for adding command`.
- Errors are written to standard error in red, and `cg` exits with status 1
  whenever an operation fails.

## Example

```
cg add command git st "git status --short"
cg list commands git
cg git st
```

## Using it from Python

`cmdgroup.database.CommandStore` is the store itself and works as a context
manager:

```python
from cmdgroup.database import CommandStore

with CommandStore("commands.db") as store:
    store.add_command("git", "st", "git status --short")
    print(store.list_groups())          # ['git']
    print(store.list_commands("git"))   # ['st']
    print(store.get_command("git", "st"))
```

Looking up a missing group or command raises
`cmdgroup.errors.GroupNotFoundError` or `CommandNotFoundError`; a write that
would duplicate a name returns `False`.

`cmdgroup.actions` holds the operations behind the command line
(`add_group`, `add_command`, `remove_group`, `remove_command`,
`rename_group`, `rename_command`, `list_groups`, `list_commands_by_group`,
`execute`, `show_help`). Each takes an optional `db_path`. Without one it
uses the storage location above. `cmdgroup.cli.main(argv)` runs the command
line and returns the exit status.

## What is not included

`cg` with no arguments, or with `-h` / `--help`, runs `man`. It opens
`.cg/cg.1` when a `README.md` is in the current directory, and `man cg`
otherwise. The package does not ship or install a manual page, so this shows
nothing useful unless you have provided one yourself.