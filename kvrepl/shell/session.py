"""
Shell Session.

Two-state machine holding at most one open store:

    CLOSED --open--> OPEN --close/exit/interrupt--> CLOSED
    OPEN   --open--> OPEN (new handle replaces the old one)

release() is idempotent and only ever moves the session towards CLOSED,
so it is safe to call from the interrupt path at any point.
"""

from collections.abc import Callable
from enum import Enum

from kvrepl.core.logging import get_logger
from kvrepl.storage.store import KeyValueStore

logger = get_logger(__name__)

StoreOpener = Callable[[str], KeyValueStore]


class SessionState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class Session:
    """
    Explicit session context passed to the dispatcher and handlers.

    Args:
        opener: Factory used by the open command. Defaults to
            KeyValueStore.open_or_create.
    """

    def __init__(self, opener: StoreOpener | None = None) -> None:
        self._opener = opener or KeyValueStore.open_or_create
        self._store: KeyValueStore | None = None

    @property
    def state(self) -> SessionState:
        return SessionState.OPEN if self._store is not None else SessionState.CLOSED

    @property
    def is_open(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> KeyValueStore:
        if self._store is None:
            raise RuntimeError("No store is open in this session")
        return self._store

    def open(self, path: str) -> KeyValueStore:
        """
        Open a store and bind it.

        A previously bound store is released only after the new one opened;
        if opening fails the session is left untouched.

        Raises:
            BackendError: If the store cannot be opened
        """
        store = self._opener(path)
        previous, self._store = self._store, store
        if previous is not None:
            logger.info("Replacing open store", extra={"previous": previous.path, "path": path})
            previous.close()
        return store

    def release(self) -> None:
        """Close the bound store, if any, and return to CLOSED."""
        store, self._store = self._store, None
        if store is not None and store.is_open:
            store.close()
