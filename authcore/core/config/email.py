"""Email configuration settings for OTP delivery.

This module defines the SMTP parameters used by the mail transport. The
transport receives an `EmailSettings` instance at construction time instead of
reading process-wide configuration on every send.
"""

from typing import Optional

from pydantic import EmailStr, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseSettings):
    """Email configuration settings with secure defaults and validation.

    Security considerations:
    - SMTP credentials are handled as SecretStr to prevent logging
    - STARTTLS on the submission port (587) is the default; implicit TLS is off

    Attributes:
        SMTP_HOST: SMTP server hostname
        SMTP_PORT: SMTP server port (587 for STARTTLS, 465 for implicit TLS)
        SMTP_USERNAME: SMTP authentication username
        SMTP_PASSWORD: SMTP authentication password (SecretStr)
        SMTP_USE_TLS: Upgrade the connection with STARTTLS
        SMTP_USE_SSL: Use implicit TLS from the first byte
        FROM_EMAIL: Sender address, defaults to SMTP_USERNAME
        FROM_NAME: Sender display name
        EMAIL_TEMPLATES_DIR: Directory containing email templates
        EMAIL_TEST_MODE: Log messages instead of delivering them
    """

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    SMTP_HOST: str = Field(
        default="localhost",
        description="SMTP server hostname"
    )
    SMTP_PORT: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port (587 for STARTTLS, 465 for implicit TLS)"
    )
    SMTP_USERNAME: Optional[str] = Field(
        default=None,
        description="SMTP authentication username"
    )
    SMTP_PASSWORD: Optional[SecretStr] = Field(
        default=None,
        description="SMTP authentication password"
    )
    SMTP_USE_TLS: bool = Field(
        default=True,
        description="Upgrade the connection with STARTTLS"
    )
    SMTP_USE_SSL: bool = Field(
        default=False,
        description="Use implicit TLS (alternative to STARTTLS)"
    )

    FROM_EMAIL: Optional[EmailStr] = Field(
        default=None,
        description="Sender address; falls back to SMTP_USERNAME"
    )
    FROM_NAME: str = Field(
        default="authcore",
        description="Default sender name"
    )

    EMAIL_TEMPLATES_DIR: Optional[str] = Field(
        default=None,
        description="Directory containing email templates; bundled templates when unset"
    )

    EMAIL_TEST_MODE: bool = Field(
        default=False,
        description="Enable test mode (emails logged instead of sent)"
    )

    @model_validator(mode="after")
    def _default_sender(self) -> "EmailSettings":
        """Uses the SMTP login as the sender address when none is configured."""
        if self.FROM_EMAIL is None and self.SMTP_USERNAME and "@" in self.SMTP_USERNAME:
            self.FROM_EMAIL = self.SMTP_USERNAME
        return self

    def validate_smtp_config(self) -> None:
        """Validate SMTP configuration for production use.

        Raises:
            ValueError: If SMTP configuration is invalid or insecure
        """
        if self.EMAIL_TEST_MODE:
            return

        if not self.SMTP_USERNAME or not self.SMTP_PASSWORD:
            raise ValueError(
                "SMTP_USERNAME and SMTP_PASSWORD are required when EMAIL_TEST_MODE is off"
            )

        if not self.FROM_EMAIL:
            raise ValueError(
                "FROM_EMAIL is required when SMTP_USERNAME is not an email address"
            )

        if self.SMTP_USE_TLS and self.SMTP_USE_SSL:
            raise ValueError(
                "Cannot enable both SMTP_USE_TLS and SMTP_USE_SSL simultaneously"
            )
