"""Infrastructure enums."""

from src.infrastructure.enums.infrastructure_error_code import InfrastructureErrorCode

__all__ = ["InfrastructureErrorCode"]
