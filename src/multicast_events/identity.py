"""
Event identity handles.

An EventId names one event channel on one host. Identity is per
registration: two registrations of the same name never compare equal.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import uuid4

T = TypeVar("T")


def _generate_token() -> str:
    """Generate a unique identifier."""
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class EventId(Generic[T]):
    """
    Opaque handle returned by register_event().

    Frozen so a handle cannot be re-pointed after creation. Equality and
    hashing use the token only; the name is informational.

    Example:
        data_received: EventId[int] = host.register_event("DataReceived")
        host.emit(data_received, 42)
    """

    name: str = field(compare=False)
    token: str = field(default_factory=_generate_token)

    def __repr__(self) -> str:
        return f"EventId({self.name!r}, {self.token[:8]})"
