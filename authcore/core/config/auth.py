"""Token signing settings.
"""

import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_SYMMETRIC_ALGORITHMS = {"HS256", "HS384", "HS512"}


class AuthSettings(BaseSettings):
    """Defines the JWT configuration used to sign access and refresh tokens.

    Security Note:
        - JWT_SECRET_KEY must be a high-entropy value stored outside version
          control and rotated regularly to prevent token forgery
          (OWASP A02:2021 - Cryptographic Failures).
        - Rotating the secret invalidates every outstanding token, since no
          server-side session record exists.
    """

    JWT_SECRET_KEY: SecretStr = SecretStr("")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=15, ge=1)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _validate_jwt_algorithm(self) -> "AuthSettings":
        """Rejects algorithms the symmetric signer cannot use.

        Returns:
            Self instance with a validated algorithm.

        """
        if self.JWT_ALGORITHM not in _SYMMETRIC_ALGORITHMS:
            error_msg = (
                f"Unsupported JWT_ALGORITHM {self.JWT_ALGORITHM!r}; "
                f"expected one of {sorted(_SYMMETRIC_ALGORITHMS)}"
            )
            logger.error(error_msg)
            raise ValueError(error_msg)
        return self
