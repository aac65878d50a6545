"""Fan-out of property deletions to registered listeners."""

import logging
from typing import Protocol, Sequence, runtime_checkable

from realty_engine.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@runtime_checkable
class PropertyDeletionListener(Protocol):
    """Anything that wants to hear about removed properties."""

    def on_property_deleted(self, address: list[int]) -> None:
        ...


class DeletionNotifier:
    """Ordered list of deletion listeners, invoked synchronously."""

    def __init__(self) -> None:
        self._listeners: list[PropertyDeletionListener] = []

    def register(self, listener: PropertyDeletionListener) -> None:
        """Append a listener; it will be called after those already registered."""
        if not isinstance(listener, PropertyDeletionListener):
            raise InvalidArgumentError("Listener must implement on_property_deleted")
        self._listeners.append(listener)

    @property
    def listeners(self) -> list[PropertyDeletionListener]:
        return list(self._listeners)

    def notify(self, address: Sequence[int]) -> int:
        """Tell every listener, in registration order, that ``address`` was removed.

        Each listener receives its own copy of the address.

        Returns
        -------
        int
            Number of listeners notified.
        """
        for listener in self._listeners:
            listener.on_property_deleted(list(address))
        if self._listeners:
            logger.debug("Notified %d listener(s) of deletion at %s", len(self._listeners), list(address))
        return len(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)
