"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides the adapter
(InMemoryEventBus). Handlers are registered once at startup by the
container and run concurrently on every publish.

Usage:
    >>> from src.core.container import get_event_bus
    >>> from src.domain.events.password_reset_events import PasswordResetInitiated
    >>>
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(
    ...     PasswordResetInitiated(user_id=user.id, email=user.email)
    ... )
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable receiving one event and returning None (side effects only)."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never reaches the publisher.
        2. **Async support**: All handlers are async.
        3. **Exact type routing**: Handlers registered for an event type only
           receive events of that exact type (no inheritance matching).
        4. **No ordering guarantees**: Handlers execute concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async function to call when event is published.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Executes all handlers registered for the event's type concurrently.
        Handler exceptions are logged but NOT propagated to publisher.
        No handlers registered is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...
