"""Dependency injection for the authentication services.

FastAPI `Depends` factories that build each service from explicit
constructor arguments. This is the only layer that reads the settings
singleton; domain services receive plain collaborators.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.core.config.settings import settings
from authcore.domain.interfaces.email import IMailTransport
from authcore.domain.interfaces.repositories import IUserRepository
from authcore.domain.interfaces.security import ITokenSigner
from authcore.domain.services.auth.otp import OtpService
from authcore.domain.services.auth.token import TokenService
from authcore.domain.services.email.template_renderer import EmailTemplateRenderer
from authcore.infrastructure.database.async_db import get_async_db
from authcore.infrastructure.repositories.user_repository import UserRepository
from authcore.infrastructure.services.authentication.jwt_signer import JwtTokenSigner
from authcore.infrastructure.services.email.smtp_transport import SmtpMailTransport


AsyncDB = Annotated[AsyncSession, Depends(get_async_db)]


def get_user_repository(db_session: AsyncDB) -> IUserRepository:
    return UserRepository(db_session)


@lru_cache
def get_token_signer() -> ITokenSigner:
    return JwtTokenSigner.from_settings(settings.auth_settings())


@lru_cache
def get_mail_transport() -> IMailTransport:
    return SmtpMailTransport(settings.email_settings())


@lru_cache
def get_template_renderer() -> EmailTemplateRenderer:
    return EmailTemplateRenderer(settings.EMAIL_TEMPLATES_DIR)


def get_token_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    token_signer: Annotated[ITokenSigner, Depends(get_token_signer)],
) -> TokenService:
    return TokenService(
        user_repository,
        token_signer,
        refresh_token_expires_in=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    )


def get_otp_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    mail_transport: Annotated[IMailTransport, Depends(get_mail_transport)],
    renderer: Annotated[EmailTemplateRenderer, Depends(get_template_renderer)],
) -> OtpService:
    return OtpService(
        user_repository,
        mail_transport,
        sender=settings.FROM_EMAIL or settings.SMTP_USERNAME or "",
        renderer=renderer,
    )
