"""PyJWT-backed token signer."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from jwt import decode as jwt_decode, encode as jwt_encode, PyJWTError
from structlog import get_logger

from authcore.core.config.auth import AuthSettings
from authcore.core.exceptions import TokenVerificationError
from authcore.domain.interfaces.security import ITokenSigner

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenSigner(ITokenSigner):
    """Signs and verifies JWTs with a shared secret (HS256 by default).

    Every token gets `iat` and `exp` claims computed from `clock`, so tests can
    mint tokens that are already past their expiry. Verification always uses
    the real current time.

    Attributes:
        secret_key (str): HMAC key.
        algorithm (str): JWS algorithm.
        default_expires_in (timedelta): Lifetime when `sign` gets no explicit one.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        default_expires_in: timedelta = timedelta(minutes=15),
        clock: Clock = _utcnow,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self._default_expires_in = default_expires_in
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: AuthSettings, clock: Clock = _utcnow) -> "JwtTokenSigner":
        return cls(
            secret_key=settings.JWT_SECRET_KEY.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            default_expires_in=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            clock=clock,
        )

    @property
    def default_expires_in(self) -> timedelta:
        return self._default_expires_in

    def sign(self, claims: Mapping[str, Any], expires_in: Optional[timedelta] = None) -> str:
        issued_at = self._clock()
        payload = {
            **claims,
            "iat": issued_at,
            "exp": issued_at + (expires_in if expires_in is not None else self._default_expires_in),
        }
        return jwt_encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            return jwt_decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except PyJWTError as e:
            logger.debug("JWT decode failed", error_type=type(e).__name__)
            raise TokenVerificationError() from e
