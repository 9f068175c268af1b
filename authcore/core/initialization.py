"""Application initialization and setup."""

from dotenv import load_dotenv

from authcore.core.config.settings import settings
from authcore.core.logging import configure_logging


def initialize_application() -> None:
    """Load `.env` into the process environment and configure logging."""
    load_dotenv(override=False)
    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
