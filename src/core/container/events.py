"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribes the
logging handler to every password reset event at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with LoggingEventHandler subscribed.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(PasswordResetCompleted(...))
    """
    from src.core.container.infrastructure import get_logger
    from src.domain.events.password_reset_events import (
        PasswordResetCompleted,
        PasswordResetFailed,
        PasswordResetInitiated,
        PasswordResetOTPSent,
        PasswordResetOTPVerified,
    )
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())

    # Handler signatures are narrower than EventHandler
    event_bus.subscribe(
        PasswordResetInitiated,
        logging_handler.handle_password_reset_initiated,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PasswordResetOTPSent,
        logging_handler.handle_password_reset_otp_sent,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PasswordResetOTPVerified,
        logging_handler.handle_password_reset_otp_verified,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PasswordResetCompleted,
        logging_handler.handle_password_reset_completed,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PasswordResetFailed,
        logging_handler.handle_password_reset_failed,  # type: ignore[arg-type]
    )

    return event_bus
