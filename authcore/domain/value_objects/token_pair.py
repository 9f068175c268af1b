"""Token pair value object returned on login and refresh."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPair:
    """Access and refresh tokens minted together for one user.

    Not persisted: validity is carried entirely by each token's signature and
    expiry claim.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 0  # Access token lifetime in seconds
