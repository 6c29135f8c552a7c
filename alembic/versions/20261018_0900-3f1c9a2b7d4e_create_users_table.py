"""create_users_table

Revision ID: 3f1c9a2b7d4e
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table with password reset columns."""
    op.create_table(
        "users",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        # Account
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        # Password reset state
        sa.Column(
            "reset_token",
            sa.Text(),
            nullable=True,
            comment="Last issued password reset token (not authoritative)",
        ),
        sa.Column(
            "reset_otp_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt hash of pending password reset code",
        ),
        sa.Column(
            "reset_otp_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Expiry of pending password reset code",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(reset_otp_hash IS NULL) = (reset_otp_expires_at IS NULL)",
            name="ck_users_reset_otp_pair",
        ),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)


def downgrade() -> None:
    """Drop users table."""
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
