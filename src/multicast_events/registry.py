"""
Per-event listener registry.

MulticastEvent holds the ordered listeners of a single event channel and
dispatches payloads to them. Listeners may add or remove listeners (their
own registration included) and re-raise events while a dispatch pass is in
progress.

Dispatch walks a snapshot of the registrations taken when the pass starts,
while additions and removals are applied to the live list. Each step of the
pass consults live state before invoking:

- registrations removed earlier in the pass are skipped
- one-time registrations are removed before they are invoked
- registrations added during the pass wait for the next raise
"""

import logging
import threading
from dataclasses import dataclass
from types import MethodType
from typing import Any, Callable, Generic, TypeVar

from multicast_events.config import ErrorPolicy
from multicast_events.errors import DispatchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Listener callbacks receive the event payload; return values are ignored
Listener = Callable[[T], Any]


@dataclass(eq=False, slots=True)
class _Registration:
    """A single registration of a listener."""

    callback: Callable[[Any], Any]
    once: bool = False
    live: bool = True


class MulticastEvent(Generic[T]):
    """
    Ordered collection of listeners for one event.

    Registering the same listener twice creates two registrations; it is
    invoked twice per raise and needs two unregister calls to remove fully.
    Listeners are matched by identity; bound methods match when they wrap
    the same function on the same instance.

    Example:
        event: MulticastEvent[int] = MulticastEvent("DataReceived")
        event.register_callback(print)
        event.register_callback_with_removal(lambda v: print("first", v))
        event.raise_event(6)
    """

    def __init__(
        self,
        name: str = "",
        error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE,
        warn_on_duplicate_listener: bool = False,
    ) -> None:
        self._name = name
        self._error_policy = error_policy
        self._warn_on_duplicate = warn_on_duplicate_listener
        self._registrations: list[_Registration] = []
        # Guards _registrations and the live flags; never held while a
        # listener runs
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Event name (informational)."""
        return self._name

    @property
    def error_policy(self) -> ErrorPolicy:
        """Policy applied when a listener raises."""
        return self._error_policy

    def register_callback(self, callback: Listener[T]) -> None:
        """
        Add a listener to be called on every raise.

        Args:
            callback: Function called with the event payload.
        """
        self._add(_Registration(callback))

    def register_callback_with_removal(self, callback: Listener[T]) -> None:
        """
        Add a listener that is removed the first time it is raised.

        Any other registration of the same callback is left untouched.

        Args:
            callback: Function called with the event payload.
        """
        self._add(_Registration(callback, once=True))

    def unregister_callback(self, callback: Listener[T]) -> bool:
        """
        Remove the first registration of a listener.

        Any one-time flag held by the listener's remaining registrations is
        cleared as well, so they stay registered after the next raise.

        Args:
            callback: Function previously registered.

        Returns:
            True if a registration was found and removed.
        """
        with self._lock:
            for index, registration in enumerate(self._registrations):
                if _same_listener(registration.callback, callback):
                    registration.live = False
                    del self._registrations[index]
                    break
            else:
                return False

            for registration in self._registrations:
                if _same_listener(registration.callback, callback):
                    registration.once = False

        logger.debug("Removed listener %r from %s", callback, self._label)
        return True

    def raise_event(self, arg: T) -> None:
        """
        Invoke every registered listener with the payload.

        Args:
            arg: Event payload passed to each listener.

        Raises:
            DispatchError: Under the collect policy, if any listener failed.
            Exception: Under the propagate policy, whatever the failing
                listener raised. Later listeners are not invoked.
        """
        with self._lock:
            snapshot = list(self._registrations)

        logger.debug("Raising %s to %d listener(s)", self._label, len(snapshot))

        errors: list[tuple[Callable[..., Any], Exception]] = []
        for registration in snapshot:
            if not self._claim(registration):
                continue

            if self._error_policy is ErrorPolicy.PROPAGATE:
                registration.callback(arg)
                continue

            try:
                registration.callback(arg)
            except Exception as e:
                logger.exception(
                    "Listener %r failed while raising %s",
                    registration.callback,
                    self._label,
                )
                errors.append((registration.callback, e))

        if errors:
            raise DispatchError(self._name, errors)

    def listeners(self) -> tuple[Listener[T], ...]:
        """Get the currently registered listeners, in call order."""
        with self._lock:
            return tuple(r.callback for r in self._registrations)

    def one_time_listeners(self) -> tuple[Listener[T], ...]:
        """Get the registered listeners flagged for removal after one call."""
        with self._lock:
            return tuple(r.callback for r in self._registrations if r.once)

    def clear(self) -> None:
        """Remove all listeners."""
        with self._lock:
            for registration in self._registrations:
                registration.live = False
            self._registrations.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def __contains__(self, callback: object) -> bool:
        with self._lock:
            return any(
                _same_listener(r.callback, callback) for r in self._registrations
            )

    def __repr__(self) -> str:
        return f"MulticastEvent({self._name!r}, listeners={len(self)})"

    @property
    def _label(self) -> str:
        return repr(self._name) if self._name else "event"

    def _add(self, registration: _Registration) -> None:
        with self._lock:
            duplicate = self._warn_on_duplicate and any(
                _same_listener(r.callback, registration.callback)
                for r in self._registrations
            )
            self._registrations.append(registration)

        if duplicate:
            logger.warning(
                "Listener %r registered more than once on %s",
                registration.callback,
                self._label,
            )
        logger.debug(
            "Added %slistener %r to %s",
            "one-time " if registration.once else "",
            registration.callback,
            self._label,
        )

    def _claim(self, registration: _Registration) -> bool:
        """
        Decide whether a snapshot entry runs in the current pass.

        Returns False for registrations removed since the snapshot was taken.
        One-time registrations are removed from live state here, before the
        caller invokes them.
        """
        with self._lock:
            if not registration.live:
                return False
            if registration.once:
                registration.live = False
                self._registrations.remove(registration)
        return True


def _same_listener(a: object, b: object) -> bool:
    """Check whether two callbacks are the same listener."""
    if a is b:
        return True
    if isinstance(a, MethodType) and isinstance(b, MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    return False
