"""User Repository implementation using SQLAlchemy.

This module provides the infrastructure adapter behind `IUserRepository`:
lookups by id and by email, and overwriting the user's outstanding OTP.
Driver errors are logged and re-raised as `DatabaseError`.
"""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from authcore.core.exceptions import DatabaseError, UserNotFoundError
from authcore.core.logging import mask_email
from authcore.domain.entities.user import User
from authcore.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of `IUserRepository`.

    The session is injected per request; this repository commits its own
    writes.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID.

        Args:
            user_id: User ID to search for

        Returns:
            User entity if found, None otherwise. Ids below 1 never match.

        Raises:
            DatabaseError: If the query fails
        """
        if user_id <= 0:
            logger.warning("Invalid user ID provided", user_id=user_id)
            return None

        try:
            result = await self.db_session.execute(select(User).where(User.id == user_id))
            user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving user by ID",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError(f"Failed to load user {user_id}") from e

        logger.debug("User lookup by ID completed", user_id=user_id, found=user is not None)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, case-insensitively.

        Args:
            email: Email address to search for

        Returns:
            User entity if found, None otherwise

        Raises:
            DatabaseError: If the query fails
        """
        normalized = email.strip().lower()
        if not normalized:
            return None

        try:
            statement = select(User).where(func.lower(User.email) == normalized)
            result = await self.db_session.execute(statement)
            user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving user by email",
                email=mask_email(normalized),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError("Failed to load user by email") from e

        logger.debug(
            "User lookup by email completed",
            email=mask_email(normalized),
            found=user is not None,
        )
        return user

    async def update_otp(self, user_id: int, otp: Optional[str]) -> None:
        """Overwrite the stored OTP of a user.

        Raises:
            UserNotFoundError: If no row has this ID
            DatabaseError: If the write fails
        """
        try:
            result = await self.db_session.execute(
                update(User).where(User.id == user_id).values(otp=otp)
            )
            if result.rowcount == 0:
                await self.db_session.rollback()
                raise UserNotFoundError()
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error(
                "Error updating user OTP",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError(f"Failed to update OTP for user {user_id}") from e

        logger.debug("User OTP updated", user_id=user_id, cleared=otp is None)
