"""
Command Handlers.

One function per command. Handlers receive arguments the dispatcher has
already validated, act on the session's store and return an Outcome for
the session loop to render. Storage failures are caught here and turned
into an error line; they never leave a handler.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from kvrepl.core.config import get_app_config
from kvrepl.core.exceptions import BackendError
from kvrepl.core.logging import get_logger
from kvrepl.shell.registry import COMMANDS, Command
from kvrepl.shell.session import Session
from kvrepl.storage.store import KeyValueStore

logger = get_logger(__name__)

OK = "OK"


@dataclass
class Outcome:
    """Result of one command: lines to print and whether the loop ends."""

    lines: Iterable[RenderableType] = ()
    ok: bool = True
    terminate: bool = False


Handler = Callable[[Session, Sequence[str]], Outcome]


def encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="backslashreplace")


def _failure(operation: str, args: Sequence[str], error: BackendError) -> Outcome:
    words = " ".join([operation, *args])
    logger.warning("Storage operation failed", extra={"operation": operation, "code": error.code, "status": error.message})
    return Outcome([f"error: {words} status='{error.message}'"], ok=False)


def help_table() -> RenderableType:
    """Header text plus one row per command, in declaration order."""
    example = get_app_config().shell.example

    table = Table(box=None, pad_edge=False, show_edge=False, header_style="bold")
    table.add_column("Instruction", min_width=15, no_wrap=True)
    table.add_column("Arguments", min_width=20, no_wrap=True)
    table.add_column("Description")

    for command, info in COMMANDS.items():
        table.add_row(command.value, info.args_hint, info.description)

    return Group(
        Text("Help\n"),
        Text("Input format is: <instruction> <args>"),
        Text(f"Example: {example}\n"),
        table,
    )


def handle_help(session: Session, args: Sequence[str]) -> Outcome:
    return Outcome([help_table()])


def handle_exit(session: Session, args: Sequence[str]) -> Outcome:
    session.release()
    return Outcome(terminate=True)


def handle_open(session: Session, args: Sequence[str]) -> Outcome:
    path = args[0]
    try:
        session.open(path)
    except BackendError as e:
        return _failure("open", args, e)
    return Outcome([OK])


def handle_close(session: Session, args: Sequence[str]) -> Outcome:
    session.release()
    return Outcome([OK])


def handle_read(session: Session, args: Sequence[str]) -> Outcome:
    try:
        value = session.store.get(encode(args[0]))
    except BackendError as e:
        return _failure("read", args, e)
    return Outcome([decode(value)])


def handle_write(session: Session, args: Sequence[str]) -> Outcome:
    key, value = args
    try:
        session.store.put(encode(key), encode(value), sync=True)
    except BackendError as e:
        return _failure("write", args, e)
    return Outcome([OK])


def _dump_lines(store: KeyValueStore) -> Iterator[str]:
    try:
        for key, value in store.iterate():
            yield f"{decode(key)}: {decode(value)}"
    except BackendError as e:
        logger.warning("Dump failed", extra={"status": e.message})
        yield f"error: dump status='{e.message}'"


def handle_dump(session: Session, args: Sequence[str]) -> Outcome:
    return Outcome(_dump_lines(session.store))


HANDLERS: dict[Command, Handler] = {
    Command.HELP: handle_help,
    Command.EXIT: handle_exit,
    Command.OPEN: handle_open,
    Command.CLOSE: handle_close,
    Command.READ: handle_read,
    Command.WRITE: handle_write,
    Command.DUMP: handle_dump,
}

if set(HANDLERS) != set(Command):
    raise RuntimeError("Every command needs exactly one handler")
