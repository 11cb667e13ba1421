"""
Event system exceptions.

All errors raised by this package derive from EventError so callers can
catch the whole family with a single except clause.
"""

from typing import Any, Callable


class EventError(Exception):
    """Base exception for event errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownEventError(EventError, KeyError):
    """
    Raised when an event handle or name does not belong to the resolving host.

    Signals a programming error (stale or foreign identity), not a runtime
    failure.
    """

    def __init__(self, event: Any):
        self.event = event
        super().__init__(f"Event not registered on this host: {event!r}")


class DispatchError(EventError):
    """Raised after a dispatch pass in which one or more listeners failed."""

    def __init__(
        self,
        event: Any,
        errors: list[tuple[Callable[..., Any], Exception]],
    ):
        self.event = event
        self.errors = errors
        super().__init__(
            f"{len(errors)} listener(s) failed while raising {event!r}"
        )
