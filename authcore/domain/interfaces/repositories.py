"""Repository interfaces for abstracting data persistence in the domain layer.

The domain services depend on these abstract base classes (ports); concrete
adapters live in the `infrastructure` layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from authcore.domain.entities.user import User


class IUserRepository(ABC):
    """An interface defining the contract for user lookups and OTP writes.

    `id` and `email` are both unique lookup keys.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieves a user by their unique identifier.

        Args:
            user_id: The unique integer ID of the user.

        Returns:
            An optional `User` entity. Returns `None` if no user is found.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieves a user by their email address (case-insensitively).

        Args:
            email: The email address to search for.

        Returns:
            An optional `User` entity. Returns `None` if no user is found.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_otp(self, user_id: int, otp: Optional[str]) -> None:
        """Overwrites the user's current one-time password.

        Args:
            user_id: The unique integer ID of the user.
            otp: The new code, or `None` to clear it.

        Raises:
            UserNotFoundError: If no user has this ID.
            DatabaseError: If the write fails.
        """
        raise NotImplementedError
