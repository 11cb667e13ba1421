"""
Named event properties.

An EventProperty binds one event handle to its host so consumers can write
``host.DataReceived.add_listener(cb)`` instead of
``host.on(host.DataReceived, cb)``.
"""

from typing import Any, Generic, TypeVar

from multicast_events.identity import EventId
from multicast_events.ports import SupportsEvents
from multicast_events.registry import Listener

T = TypeVar("T")


class EventProperty(Generic[T]):
    """Event handle bound to the host that owns it."""

    __slots__ = ("_host", "_event_id")

    def __init__(self, host: SupportsEvents, event_id: EventId[T]) -> None:
        self._host = host
        self._event_id = event_id

    @property
    def event_id(self) -> EventId[T]:
        """Handle of the bound event."""
        return self._event_id

    @property
    def name(self) -> str:
        """Name the event was registered under."""
        return self._event_id.name

    def emit(self, arg: T) -> None:
        """Emit the event, calling each registered listener."""
        self._host.emit(self._event_id, arg)

    def add_listener(self, callback: Listener[T]) -> None:
        """Register a listener for the event."""
        self._host.on(self._event_id, callback)

    def add_one_time_listener(self, callback: Listener[T]) -> None:
        """Register a listener removed after the first time it is triggered."""
        self._host.once(self._event_id, callback)

    def remove_listener(self, callback: Listener[T]) -> bool:
        """
        If the callback is a registered listener, remove it.

        Returns:
            True if the listener was found and removed.
        """
        return self._host.off(self._event_id, callback)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EventProperty):
            return NotImplemented
        return self._host is other._host and self._event_id == other._event_id

    def __hash__(self) -> int:
        return hash((id(self._host), self._event_id))

    def __repr__(self) -> str:
        return f"EventProperty({self._event_id!r})"
