from __future__ import annotations

"""Refresh endpoint: trade a refresh token for a new token pair."""

from fastapi import APIRouter, Depends, status
from structlog import get_logger

from authcore.adapters.api.v1.auth.schemas import RefreshTokenRequest, TokenPairResponse
from authcore.core.exceptions import AuthenticationError
from authcore.domain.services.auth.token import TokenService
from authcore.infrastructure.dependency_injection.auth_dependencies import get_token_service

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=TokenPairResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Refresh tokens",
    responses={
        200: {"description": "New access and refresh tokens"},
        401: {"description": "Refresh token invalid, expired, or for an unknown user"},
    },
)
async def refresh_tokens(
    payload: RefreshTokenRequest,
    token_service: TokenService = Depends(get_token_service),
) -> TokenPairResponse:
    """Issue a new token pair for the user named by a valid refresh token.

    Every rejection reason yields the same 401 response.
    """
    user_id = await token_service.verify_refresh_token(payload.refresh_token)
    if user_id is None:
        raise AuthenticationError("Invalid refresh token", code="invalid_refresh_token")

    token_pair = await token_service.issue_token_pair(user_id)
    return TokenPairResponse(
        access_token=token_pair.access_token,
        refresh_token=token_pair.refresh_token,
        token_type=token_pair.token_type,
        expires_in=token_pair.expires_in,
    )
