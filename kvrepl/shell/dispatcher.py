"""
Command Dispatcher.

Validates a tokenized command line against the registry and runs its
handler. Each check is a hard gate; the first failure raises and nothing
after it runs:

    1. command name is known           -> UnknownInstructionError
    2. open session when required      -> PreconditionError
    3. exact argument count            -> ArityError
    4. handler                         -> Outcome, returned unchanged
"""

from collections.abc import Sequence

from kvrepl.core.config import get_app_config
from kvrepl.core.exceptions import ArityError, PreconditionError, UnknownInstructionError
from kvrepl.core.logging import get_logger
from kvrepl.shell.handlers import HANDLERS, Outcome
from kvrepl.shell.registry import lookup, metadata
from kvrepl.shell.session import Session

logger = get_logger(__name__)


def dispatch(tokens: Sequence[str], session: Session) -> Outcome:
    """
    Run one command line.

    Args:
        tokens: Output of tokenize(); tokens[0] is the command name
        session: Session the command acts on

    Raises:
        UnknownInstructionError: If tokens[0] is not a command
        PreconditionError: If the command needs an open store and none is open
        ArityError: If the argument count does not match
    """
    name, *args = tokens

    command = lookup(name)
    if command is None:
        raise UnknownInstructionError(name)

    info = metadata(command)

    if info.requires_open and not session.is_open:
        raise PreconditionError(command.value, get_app_config().shell.requirement)

    if info.arity is not None and len(args) != info.arity:
        raise ArityError(command.value, info.arity, len(args))

    logger.debug("Dispatching command", extra={"command": command.value, "argc": len(args)})
    return HANDLERS[command](session, args)
