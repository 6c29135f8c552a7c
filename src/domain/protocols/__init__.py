"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.reset_token_codec_protocol import (
    ResetTokenCodecProtocol,
    ResetTokenPayload,
)

# Repository protocols
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "ClockProtocol",
    "EmailProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "ResetTokenCodecProtocol",
    "ResetTokenPayload",
    # Repository protocols
    "UserRepository",
]
