"""Main application settings and configuration management.

This module composes the settings from the different modules (app, database,
auth, email) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object. Only the dependency-injection layer
reads this singleton; services receive the section they need at construction.

Environment Support:
- Development: Uses .env, SMTP credentials not required, email test mode on
- Test: Uses .env.test, SMTP credentials not required, email test mode on
- Staging/Production: Uses .env.staging / .env.production, SMTP credentials required
"""

import logging
import os
from pathlib import Path

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .email import EmailSettings

logger = logging.getLogger(__name__)


class Settings(AppSettings, DatabaseSettings, AuthSettings, EmailSettings):
    """The main settings class that aggregates all application configurations.

    Security Note:
        - Sensitive fields (JWT_SECRET_KEY, POSTGRES_PASSWORD, SMTP_PASSWORD)
          are SecretStr and must never be logged
          (OWASP A02:2021 - Cryptographic Failures).
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._set_environment_defaults(self.APP_ENV)

    def _set_environment_defaults(self, env: str) -> None:
        """Set environment-specific default values.

        Args:
            env: Environment name
        """
        if env in ("development", "test"):
            self.EMAIL_TEST_MODE = True

        if env == "development":
            self.DEBUG = True

        logger.info(f"Application running in {env} environment")
        logger.info(f"Email test mode: {self.EMAIL_TEST_MODE}")

    def auth_settings(self) -> AuthSettings:
        """Returns the token-signing section as a standalone settings object."""
        return AuthSettings.model_validate(
            {name: getattr(self, name) for name in AuthSettings.model_fields}
        )

    def email_settings(self) -> EmailSettings:
        """Returns the SMTP section as a standalone settings object."""
        return EmailSettings.model_validate(
            {name: getattr(self, name) for name in EmailSettings.model_fields}
        )

    def validate_required_fields(self) -> None:
        """Validates that security-critical settings are present.

        Outside development and test a missing signing secret is fatal, while
        an incomplete SMTP configuration is only logged so that token refresh
        keeps working when mail is down.

        Raises:
            ValueError: If JWT_SECRET_KEY is missing in staging or production.

        """
        relaxed = self.APP_ENV in ("development", "test")

        if not self.JWT_SECRET_KEY.get_secret_value():
            error_msg = "Missing required environment variable: JWT_SECRET_KEY"
            if relaxed:
                logger.warning(f"{self.APP_ENV} mode: {error_msg}")
            else:
                logger.error(error_msg)
                raise ValueError(error_msg)

        try:
            self.validate_smtp_config()
            logger.info("Email configuration validated successfully.")
        except ValueError as e:
            if relaxed:
                logger.warning(f"{self.APP_ENV} mode: Email config warning - {e}")
            else:
                logger.error(f"Email configuration error: {e}")


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    env = os.getenv("APP_ENV", "development")

    env_files = {
        "development": ".env",
        "test": ".env.test",
        "staging": ".env.staging",
        "production": ".env.production",
    }
    env_file = env_files.get(env, ".env")

    if env != "development" and Path(env_file).exists():
        logger.info(f"Loading environment configuration from {env_file}")
        return Settings(_env_file=env_file)
    if Path(".env").exists():
        logger.info(f"Loading environment configuration from .env (environment: {env})")
    else:
        logger.warning(f"No .env file found, using environment variables only (environment: {env})")
    return Settings()


settings = create_settings()
settings.validate_required_fields()
