"""
Command Registry.

The closed set of shell commands and their static metadata. Declaration
order of Command is the order help lists them in.
"""

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    HELP = "help"
    EXIT = "exit"
    OPEN = "open"
    CLOSE = "close"
    READ = "read"
    WRITE = "write"
    DUMP = "dump"


@dataclass(frozen=True)
class CommandInfo:
    """
    Static metadata for one command.

    arity is the exact argument count; None would mean unchecked, which no
    command currently uses.
    """

    description: str
    args_hint: str = ""
    arity: int | None = 0
    requires_open: bool = False


COMMANDS: dict[Command, CommandInfo] = {
    Command.HELP: CommandInfo("Print this help message"),
    Command.EXIT: CommandInfo("Exit the repl"),
    Command.OPEN: CommandInfo("Open database", args_hint="path", arity=1),
    Command.CLOSE: CommandInfo("Close database", requires_open=True),
    Command.READ: CommandInfo("Read value from database", args_hint="key", arity=1, requires_open=True),
    Command.WRITE: CommandInfo("Write value to database", args_hint="key value", arity=2, requires_open=True),
    Command.DUMP: CommandInfo("Dump whole database", requires_open=True),
}

if set(COMMANDS) != set(Command):
    raise RuntimeError("Command registry is missing metadata for some commands")


def lookup(name: str) -> Command | None:
    """Resolve a command name. Matching is exact and case-sensitive."""
    try:
        return Command(name)
    except ValueError:
        return None


def metadata(command: Command) -> CommandInfo:
    return COMMANDS[command]
