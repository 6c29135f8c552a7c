"""Repository implementations (SQLAlchemy adapters)."""

from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
