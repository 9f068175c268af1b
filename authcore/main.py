"""Main application entry point for the FastAPI application."""

from authcore.core.application import create_application
from authcore.core.initialization import initialize_application

initialize_application()

app = create_application()
