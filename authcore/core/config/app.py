"""
Application-specific settings.
"""
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and logging.

    Security Note:
        - DEBUG must stay disabled outside development so that stack traces
          are never rendered to API clients
          (OWASP A05:2021 - Security Misconfiguration).
    """
    PROJECT_NAME: str = "authcore"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
