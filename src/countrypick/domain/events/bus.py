"""Event bus for observer-style communication between the session and the UI.

The session publishes state snapshots and the UI shell subscribes to them.
Neither side imports the other.

Event Handler Contract:
    Handlers MUST be synchronous functions; this is enforced at subscription
    time. A handler that needs async work should schedule it (for example with
    ``asyncio.create_task`` or Textual's ``call_later``) instead of awaiting it.
"""

import asyncio
from typing import Callable, Type, TypeVar

from countrypick.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Example:
        ```python
        event_bus = EventBus()

        def on_state(event: SessionStateChanged):
            render(event.state)

        event_bus.subscribe(SessionStateChanged, on_state)
        event_bus.publish(SessionStateChanged(state=new, previous=old, cause=cause))
        ```

    Thread safety:
        Not thread-safe. All publishing happens on the event loop thread; only
        the pure filter ever runs on a worker thread.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to
            handler: Synchronous callback receiving the event instance

        Raises:
            TypeError: If handler is a coroutine function
        """
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is a coroutine function. "
                f"Schedule async work from a synchronous handler instead."
            )

        handlers = self._handlers.setdefault(event_type, [])

        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Remove a handler. Unknown handlers are ignored.
        """
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Handlers run synchronously in subscription order. A handler that
        raises is logged and does not prevent the remaining handlers from
        running.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.exception(f"Error in event handler for {event_type.__name__}: {e}")
