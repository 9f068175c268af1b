from __future__ import annotations

"""Request and response models for the auth endpoints."""

from pydantic import BaseModel, EmailStr, Field


class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class OtpRequest(BaseModel):
    email: EmailStr


class TokenPairResponse(BaseModel):
    """JWT access & refresh tokens with additional metadata."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # Access token expiration time in seconds


class MessageResponse(BaseModel):
    message: str
