"""User database model.

Only the columns the password reset flow reads or writes; the rest of the
account lives with the user CRUD subsystem.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - reset_otp_hash: NEVER stores the plaintext one-time code
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model with password reset state.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        reset_token: Last issued reset token (traceability only)
        reset_otp_hash: Bcrypt hash of pending one-time code
        reset_otp_expires_at: Expiry of pending one-time code

    Constraints:
        - ck_users_reset_otp_pair: OTP hash and expiry are null together
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "(reset_otp_hash IS NULL) = (reset_otp_expires_at IS NULL)",
            name="ck_users_reset_otp_pair",
        ),
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    reset_token: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Last issued password reset token (not authoritative)",
    )

    reset_otp_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Bcrypt hash of pending password reset code",
    )

    reset_otp_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Expiry of pending password reset code",
    )
