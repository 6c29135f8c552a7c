"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.

Every write is one UPDATE statement followed by commit, relying on the
database's per-row atomicity. Reads refresh any instance already in the
session so callers always see the latest committed row.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models.user import User as UserModel


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo; stored values are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = (
            select(UserModel)
            .where(func.lower(UserModel.email) == email.lower())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()

    async def start_password_reset(self, user_id: UUID, reset_token: str) -> None:
        """Record issued token and clear any pending one-time code.

        Args:
            user_id: User starting the reset.
            reset_token: Token just issued.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                reset_token=reset_token,
                reset_otp_hash=None,
                reset_otp_expires_at=None,
                updated_at=datetime.now(UTC),
            )
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def save_reset_otp(
        self,
        user_id: UUID,
        otp_hash: str,
        expires_at: datetime,
    ) -> None:
        """Store one-time code hash and expiry together (last write wins).

        Args:
            user_id: User receiving the code.
            otp_hash: Hash of the plaintext code.
            expires_at: When the code stops being accepted.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                reset_otp_hash=otp_hash,
                reset_otp_expires_at=expires_at,
                updated_at=datetime.now(UTC),
            )
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def complete_password_reset(
        self,
        user_id: UUID,
        expected_otp_hash: str,
        new_password_hash: str,
    ) -> bool:
        """Swap password and clear reset state if the code is unchanged.

        Args:
            user_id: User resetting their password.
            expected_otp_hash: Hash observed when the code was validated.
            new_password_hash: Hash of the new password.

        Returns:
            True if exactly one row was updated, False otherwise.
        """
        stmt = (
            update(UserModel)
            .where(
                UserModel.id == user_id,
                UserModel.reset_otp_hash == expected_otp_hash,
            )
            .values(
                password_hash=new_password_hash,
                reset_token=None,
                reset_otp_hash=None,
                reset_otp_expires_at=None,
                updated_at=datetime.now(UTC),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            created_at=_as_utc(user_model.created_at),  # type: ignore[arg-type]
            updated_at=_as_utc(user_model.updated_at),  # type: ignore[arg-type]
            reset_token=user_model.reset_token,
            reset_otp_hash=user_model.reset_otp_hash,
            reset_otp_expires_at=_as_utc(user_model.reset_otp_expires_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model.

        Args:
            user: Domain User entity.

        Returns:
            SQLAlchemy UserModel instance.
        """
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
            reset_token=user.reset_token,
            reset_otp_hash=user.reset_otp_hash,
            reset_otp_expires_at=user.reset_otp_expires_at,
        )
