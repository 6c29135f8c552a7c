"""Application services shared by several handlers."""

from src.application.services.password_reset_verifier import PasswordResetVerifier

__all__ = ["PasswordResetVerifier"]
