"""
Multicast Events - Named events with multicast listeners.

Objects register named events, attach and detach listener callbacks, and
emit payloads to every listener currently registered. One-time listeners
remove themselves the first time they fire. Listeners may add, remove or
emit while a dispatch is in progress.

Architecture Rules:
- No side effects on import
- No logging initialization
- No environment file loading

Modules:
- registry: Per-event listener collection and dispatch
- host: Maps event handles to registries
- mixin: Adds event capabilities to any class
- property: Named event properties bound to a host
- ports: Host protocol
- config: Dispatch settings
- errors: Exception hierarchy

Usage:
    from multicast_events import EventHost

    events = EventHost()
    data_received = events.register_event("DataReceived")
    events.once(data_received, print)
    events.emit(data_received, {"value": 6})
"""

__version__ = "0.1.0"

from multicast_events.config import ErrorPolicy, EventsConfig
from multicast_events.errors import DispatchError, EventError, UnknownEventError
from multicast_events.host import EventHandle, EventHost
from multicast_events.identity import EventId
from multicast_events.mixin import EventMixin
from multicast_events.ports import SupportsEvents
from multicast_events.property import EventProperty
from multicast_events.registry import Listener, MulticastEvent

__all__ = [
    # Registry
    "Listener",
    "MulticastEvent",
    # Host
    "EventHandle",
    "EventHost",
    "EventId",
    "EventMixin",
    "EventProperty",
    "SupportsEvents",
    # Config
    "ErrorPolicy",
    "EventsConfig",
    # Errors
    "EventError",
    "UnknownEventError",
    "DispatchError",
]
