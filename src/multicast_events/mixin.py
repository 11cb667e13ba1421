"""
Event capability mixin.

Adds register_event/emit/on/once/off to any class. All event state lives
in one attribute holding an EventHost, created on first use so the mixin
needs no cooperation from the host's __init__.

Example:
    class DataConsumer(Connection, EventMixin):
        DataReceived: EventProperty[dict]

        def __init__(self) -> None:
            super().__init__()
            self.register_event("DataReceived")

    consumer = DataConsumer()
    consumer.DataReceived.add_listener(print)
    consumer.emit(consumer.DataReceived, {"value": 6})
"""

from typing import Any, ClassVar

from multicast_events.config import EventsConfig
from multicast_events.host import EventHandle, EventHost
from multicast_events.identity import EventId
from multicast_events.property import EventProperty
from multicast_events.registry import Listener


class EventMixin:
    """
    Mixin giving a class its own named events.

    register_event(name) also exposes the event as an EventProperty
    attribute called ``name`` on the instance.
    """

    # Override in subclasses to change dispatch behaviour
    event_config: ClassVar[EventsConfig | None] = None

    @property
    def event_host(self) -> EventHost:
        """Get the EventHost holding this object's events."""
        try:
            return self.__dict__["_event_host"]
        except KeyError:
            # setdefault keeps the first host when threads race here
            return self.__dict__.setdefault(
                "_event_host", EventHost(self.event_config)
            )

    def register_event(self, name: str) -> EventId[Any]:
        """
        Set up a named event property ready to receive listeners.

        Args:
            name: Name of the event; also the attribute it is exposed as.

        Returns:
            Handle for the new event.

        Raises:
            ValueError: If the name clashes with an attribute of the class,
                such as emit() or event_host.
        """
        if hasattr(type(self), name):
            raise ValueError(
                f"Event name {name!r} clashes with an attribute of "
                f"{type(self).__name__}"
            )

        event_id = self.event_host.register_event(name)
        setattr(self, name, EventProperty(self, event_id))
        return event_id

    def emit(self, event: EventHandle, arg: Any) -> None:
        """
        Emit an event, executing any registered listeners.

        Args:
            event: Property or handle of the event being emitted.
            arg: Payload passed to each listener.
        """
        self.event_host.emit(event, arg)

    def on(self, event: EventHandle, callback: Listener[Any]) -> None:
        """Register a listener to be run when the event is emitted."""
        self.event_host.on(event, callback)

    def once(self, event: EventHandle, callback: Listener[Any]) -> None:
        """
        Register a listener to be run the next time the event is emitted.

        After it runs once the listener is removed.
        """
        self.event_host.once(event, callback)

    def off(self, event: EventHandle, callback: Listener[Any]) -> bool:
        """
        Unregister a listener so it is not run when the event is emitted.

        Returns:
            True if the listener was found and removed.
        """
        return self.event_host.off(event, callback)
