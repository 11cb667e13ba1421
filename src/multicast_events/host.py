"""
Event host facade.

EventHost maps event handles to their MulticastEvent registries and
forwards on/once/off/emit to them. Hosts either hold an EventHost as a
field or mix in EventMixin, which keeps one in a dedicated attribute.

Usage:
    events = EventHost()
    data_received = events.register_event("DataReceived")

    events.on(data_received, handle_data)
    events.emit(data_received, {"value": 6})
"""

import logging
import threading
from typing import Any, Union

from multicast_events.config import EventsConfig
from multicast_events.errors import UnknownEventError
from multicast_events.identity import EventId
from multicast_events.property import EventProperty
from multicast_events.registry import Listener, MulticastEvent

logger = logging.getLogger(__name__)

# Anything the facade accepts as an event handle
EventHandle = Union[EventId[Any], EventProperty[Any]]


class EventHost:
    """
    Owns the events registered on one host object.

    Registering a name twice yields two independent events; the name then
    refers to the later one. Handles from other hosts are rejected with
    UnknownEventError.
    """

    def __init__(self, config: EventsConfig | None = None) -> None:
        self._config = config or EventsConfig()
        self._events: dict[EventId[Any], MulticastEvent[Any]] = {}
        self._names: dict[str, EventId[Any]] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> EventsConfig:
        """Get event configuration."""
        return self._config

    def register_event(self, name: str) -> EventId[Any]:
        """
        Set up a named event ready to receive listeners.

        Args:
            name: Name of the event being registered.

        Returns:
            Handle for the new event.
        """
        event_id: EventId[Any] = EventId(name)
        event: MulticastEvent[Any] = MulticastEvent(
            name,
            error_policy=self._config.error_policy,
            warn_on_duplicate_listener=self._config.warn_on_duplicate_listener,
        )

        with self._lock:
            shadowed = self._names.get(name)
            self._events[event_id] = event
            self._names[name] = event_id

        if shadowed is not None:
            logger.debug("Event %r re-registered, shadowing %r", name, shadowed)
        logger.debug("Registered event %r", event_id)
        return event_id

    def emit(self, event: EventHandle, arg: Any) -> None:
        """
        Emit an event, executing every registered listener.

        Args:
            event: Handle of the event being emitted.
            arg: Payload passed to each listener.

        Raises:
            UnknownEventError: If the handle does not belong to this host.
        """
        self._resolve(event).raise_event(arg)

    def on(self, event: EventHandle, callback: Listener[Any]) -> None:
        """
        Register a listener to be run each time the event is emitted.

        Raises:
            UnknownEventError: If the handle does not belong to this host.
        """
        self._resolve(event).register_callback(callback)

    def once(self, event: EventHandle, callback: Listener[Any]) -> None:
        """
        Register a listener to be run the next time the event is emitted.

        After it runs once the listener is removed.

        Raises:
            UnknownEventError: If the handle does not belong to this host.
        """
        self._resolve(event).register_callback_with_removal(callback)

    def off(self, event: EventHandle, callback: Listener[Any]) -> bool:
        """
        Unregister a listener so it is no longer run when the event is emitted.

        Returns:
            True if the listener was found and removed.

        Raises:
            UnknownEventError: If the handle does not belong to this host.
        """
        return self._resolve(event).unregister_callback(callback)

    def get_event(self, name: str) -> EventId[Any]:
        """
        Get the handle currently registered under a name.

        Raises:
            UnknownEventError: If no event has that name.
        """
        with self._lock:
            try:
                return self._names[name]
            except KeyError:
                raise UnknownEventError(name) from None

    def bind(self, event: EventHandle) -> EventProperty[Any]:
        """Get a named property forwarding to this host for an event."""
        return EventProperty(self, self._resolve_id(event))

    def event_names(self) -> list[str]:
        """Get names of all registered events."""
        with self._lock:
            return list(self._names.keys())

    def listener_count(self, event: EventHandle) -> int:
        """Get the number of listeners registered for an event."""
        return len(self._resolve(event))

    def owns(self, event: EventHandle) -> bool:
        """Check if a handle belongs to this host."""
        try:
            self._resolve(event)
        except UnknownEventError:
            return False
        return True

    def _resolve_id(self, event: EventHandle) -> EventId[Any]:
        event_id = _unwrap(event)
        self._resolve(event_id)
        return event_id

    def _resolve(self, event: EventHandle) -> MulticastEvent[Any]:
        key = _unwrap(event)
        with self._lock:
            registry = self._events.get(key) if isinstance(key, EventId) else None
        if registry is None:
            raise UnknownEventError(event)
        return registry


def _unwrap(event: EventHandle) -> EventId[Any]:
    """Get the EventId behind a handle."""
    return event.event_id if isinstance(event, EventProperty) else event
