"""Events and the local event buses that carry them.

Every reactive component owns an `EventBus`. Emitting on a bus invokes the
handlers registered on it synchronously, in registration order, and then
forwards the very same `Event` object to the bus it bubbles to (if any).

Event names are dot-namespaced: a handler registered for ``"changed"`` also
receives ``"changed.tags"`` and ``"changed.status"``, while a handler for
``"changed.tags"`` only receives that event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

from tasklane.domain.errors import BubbleCycleError

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

EventHandler = Callable[["Event"], None]
"""A callable invoked with each event it is registered for."""

EventHandlerUninstaller = Callable[[], None]
"""A callable that removes the registration it was returned for."""

O = TypeVar("O", bound="Observable")


@dataclass(frozen=True, slots=True)
class Event:
    """A notification emitted by a component."""

    name: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # freeze a private copy so handlers cannot mutate what others receive
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def matches(self, pattern: str) -> bool:
        """Return True if a handler registered for `pattern` should receive this event."""
        return self.name == pattern or self.name.startswith(pattern + ".")


class _Subscription:
    """One registration of a handler under an event name."""

    __slots__ = ("pattern", "handler", "active")

    def __init__(self, pattern: str, handler: EventHandler) -> None:
        self.pattern = pattern
        self.handler = handler
        self.active = True


class EventBus:
    """A local publish/subscribe channel with optional bubbling.

    Note:
        Dispatch works on a snapshot of the registrations taken when it starts.
        Handlers registered during a dispatch are first invoked on the next
        emission. Handlers removed during a dispatch (including a handler
        removing itself) are not invoked again, even later in the same dispatch.
    """

    def __init__(self) -> None:
        self._subscriptions: list[_Subscription] = []
        self._parent: EventBus | None = None

    # --- Registration ---

    def on(self, event: str, handler: EventHandler) -> EventBus:
        """Register `handler` for `event` and return the bus for chaining."""
        self._subscribe(event, handler)
        return self

    def off(self, event: str, handler: EventHandler) -> EventBus:
        """Remove every registration of `handler` under `event`."""
        remaining = []
        for subscription in self._subscriptions:
            if subscription.pattern == event and subscription.handler == handler:
                subscription.active = False
            else:
                remaining.append(subscription)
        self._subscriptions = remaining
        return self

    def handle(self, event: str, handler: EventHandler) -> EventHandlerUninstaller:
        """Register `handler` for `event` and return a callable that unregisters it.

        Unlike `off`, the returned uninstaller removes only this one
        registration, even if the same handler was registered more than once.
        """
        subscription = self._subscribe(event, handler)

        def uninstall() -> None:
            if subscription.active:
                subscription.active = False
                self._subscriptions.remove(subscription)

        return uninstall

    def _subscribe(self, event: str, handler: EventHandler) -> _Subscription:
        subscription = _Subscription(event, handler)
        self._subscriptions.append(subscription)
        return subscription

    # --- Bubbling ---

    @property
    def parent(self) -> EventBus | None:
        """The bus events are forwarded to, if any."""
        return self._parent

    def bubble_to(self, parent: EventBus | None) -> EventBus:
        """Forward every event dispatched on this bus to `parent`.

        Args:
            parent: The bus to forward to, or None to stop forwarding.

        Raises:
            BubbleCycleError: If `parent` is this bus or already forwards into it.
        """
        target = parent
        while target is not None:
            if target is self:
                raise BubbleCycleError()
            target = target.parent
        self._parent = parent
        return self

    # --- Dispatch ---

    def trigger(self, event: str, payload: Mapping[str, Any] | None = None) -> Event:
        """Build an event and dispatch it.

        Args:
            event: The event name, e.g. ``"changed.tags"``.
            payload: Data describing the change.

        Returns:
            The dispatched event.
        """
        emitted = Event(event, payload if payload is not None else {})
        self.dispatch(emitted)
        return emitted

    def dispatch(self, event: Event) -> None:
        """Invoke the matching local handlers, then forward `event` to the parent.

        Raises:
            Exception: Whatever a handler raises; remaining handlers are skipped.
        """
        for subscription in list(self._subscriptions):
            if not subscription.active or not event.matches(subscription.pattern):
                continue
            try:
                subscription.handler(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception in handler %r for event %s", subscription.handler, event.name
                )
                raise
        if self._parent is not None:
            self._parent.dispatch(event)


class Observable:
    """Base for components that announce their changes on an own `EventBus`.

    Subclasses emit with `self._events.trigger(...)`; observers use the
    chainable `on` / `off` / `bubble_to` methods or `handle`.
    """

    def __init__(self) -> None:
        self._events = EventBus()

    @property
    def events(self) -> EventBus:
        """The bus this component emits on."""
        return self._events

    def on(self: O, event: str, handler: EventHandler) -> O:
        """Listen to an event."""
        self._events.on(event, handler)
        return self

    def off(self: O, event: str, handler: EventHandler) -> O:
        """Stop listening to an event."""
        self._events.off(event, handler)
        return self

    def handle(self, event: str, handler: EventHandler) -> EventHandlerUninstaller:
        """Listen to an event; returns a callable that stops listening."""
        return self._events.handle(event, handler)

    def bubble_to(self: O, target: EventBus | Observable | None) -> O:
        """Forward every event of this component to `target`."""
        if isinstance(target, Observable):
            target = target.events
        self._events.bubble_to(target)
        return self
