"""
Event host port interface.

Defines the capability surface a host object declares conformance to.
EventHost implements it directly; EventMixin adds it to any class.
"""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from multicast_events.identity import EventId

T = TypeVar("T")


@runtime_checkable
class SupportsEvents(Protocol):
    """
    Protocol for objects that own named events.

    Every operation other than register_event() takes the handle returned by
    register_event() on the same object.
    """

    def register_event(self, name: str) -> EventId[Any]:
        """
        Initialize a new event for this object.

        Args:
            name: Name of the event to register.

        Returns:
            The handle identifying the new event.
        """
        ...

    def emit(self, event: Any, arg: Any) -> None:
        """
        Emit an event, calling each registered listener.

        Args:
            event: Handle of the event being emitted.
            arg: Payload passed to each listener.
        """
        ...

    def on(self, event: Any, callback: Callable[[Any], Any]) -> None:
        """Add a listener called every time the event is emitted."""
        ...

    def once(self, event: Any, callback: Callable[[Any], Any]) -> None:
        """Add a listener removed after the next time the event is emitted."""
        ...

    def off(self, event: Any, callback: Callable[[Any], Any]) -> bool:
        """
        Remove a listener.

        Args:
            event: Handle of the event.
            callback: Listener previously added with on() or once().

        Returns:
            True if the listener was found and removed.
        """
        ...
