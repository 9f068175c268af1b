from datetime import timedelta
from typing import Optional

from structlog import get_logger

from authcore.core.exceptions import AuthenticationError, UserNotFoundError
from authcore.domain.interfaces.repositories import IUserRepository
from authcore.domain.interfaces.security import ITokenSigner
from authcore.domain.value_objects.token_pair import TokenPair

logger = get_logger(__name__)

REFRESH_TOKEN_LIFETIME = timedelta(days=2)


class TokenService:
    """Service for issuing and validating signed access and refresh tokens.

    No server-side session record is kept: a token is valid exactly as long as
    its signature checks out and its `exp` claim lies in the future. There is
    no revocation state.

    Attributes:
        user_repository (IUserRepository): Lookup of users by id.
        token_signer (ITokenSigner): Signs and verifies token claims.
        refresh_token_expires_in (timedelta): Lifetime of refresh tokens.

    """

    def __init__(
        self,
        user_repository: IUserRepository,
        token_signer: ITokenSigner,
        refresh_token_expires_in: timedelta = REFRESH_TOKEN_LIFETIME,
    ):
        self.user_repository = user_repository
        self.token_signer = token_signer
        self.refresh_token_expires_in = refresh_token_expires_in

    async def issue_token_pair(self, user_id: int) -> TokenPair:
        """Issue an access token and a refresh token for an existing user.

        Args:
            user_id (int): Identity the tokens are issued for.

        Returns:
            TokenPair: Freshly signed tokens, both with `sub` set to `user_id`.

        Raises:
            AuthenticationError: If no user has this id. A missing user is an
                authorization failure here, not a lookup failure.

        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            logger.warning("Token pair requested for unknown user", user_id=user_id)
            raise AuthenticationError("User not found")

        access_token = self.issue_access_token(user_id)
        refresh_token = self.issue_refresh_token(user_id)
        logger.info("Token pair issued", user_id=user_id)
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(self.token_signer.default_expires_in.total_seconds()),
        )

    def issue_access_token(self, user_id: int) -> str:
        """Sign an access token with the signer's default lifetime."""
        return self.token_signer.sign({"sub": str(user_id)})

    def issue_refresh_token(self, user_id: int) -> str:
        """Sign a refresh token valid for `refresh_token_expires_in`."""
        return self.token_signer.sign(
            {"sub": str(user_id)}, expires_in=self.refresh_token_expires_in
        )

    async def verify_refresh_token(self, refresh_token: str) -> Optional[int]:
        """Resolve a refresh token to the user id it was issued for.

        Args:
            refresh_token (str): Token presented by the client.

        Returns:
            Optional[int]: The user id, or None when the token is malformed,
            carries a bad signature, has expired, or names a user that no
            longer exists, or when the user store cannot be reached.

        Note:
            All failure causes collapse to None so callers cannot tell an
            attacker which check failed. The cause is logged server-side only.

        """
        try:
            claims = self.token_signer.verify(refresh_token)
            user_id = int(claims["sub"])

            user = await self.user_repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()

            return user_id
        except Exception as e:
            logger.warning(
                "Refresh token rejected",
                reason=getattr(e, "code", type(e).__name__),
                error=str(e),
            )
            return None
