"""Infrastructure layer - Adapters for domain protocols.

Concrete implementations of the ports declared in src.domain.protocols:
bcrypt hashing, JWT reset tokens, SQLAlchemy persistence, email delivery,
structlog logging and the in-memory event bus.
"""
