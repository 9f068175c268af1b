"""Token signing interface."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional


class ITokenSigner(ABC):
    """Signs claims into opaque tokens and validates them back.

    Implementations stamp an expiry on every token: `expires_in` when given,
    otherwise their configured default lifetime.
    """

    @property
    @abstractmethod
    def default_expires_in(self) -> timedelta:
        """Lifetime applied when `sign` is called without `expires_in`."""
        raise NotImplementedError

    @abstractmethod
    def sign(self, claims: Mapping[str, Any], expires_in: Optional[timedelta] = None) -> str:
        """Signs `claims` into a token.

        Args:
            claims: Payload claims, at minimum `sub`.
            expires_in: Lifetime of the token; the signer default when omitted.

        Returns:
            str: The encoded token.
        """
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """Validates the signature and expiry of `token`.

        Returns:
            Dict[str, Any]: The decoded claims.

        Raises:
            TokenVerificationError: If the token is malformed, tampered with,
                signed with another key, or expired.
        """
        raise NotImplementedError
