"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_reset_password_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, hashing, tokens, email, clock)
- events: Event bus and subscriptions
- password_reset_handlers: Request-scoped handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_clock,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_reset_token_codec,
)

# Event bus
from src.core.container.events import get_event_bus

# Password reset handlers
from src.core.container.password_reset_handlers import (
    get_initiate_password_reset_handler,
    get_reset_password_handler,
    get_send_password_reset_otp_handler,
    get_verify_password_reset_otp_handler,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_reset_token_codec",
    # Events
    "get_event_bus",
    # Handlers
    "get_initiate_password_reset_handler",
    "get_reset_password_handler",
    "get_send_password_reset_otp_handler",
    "get_verify_password_reset_otp_handler",
]
