"""Jinja2 rendering of email bodies."""

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from structlog import get_logger

from authcore.core.exceptions import TemplateRenderError

logger = get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates" / "email"


class EmailTemplateRenderer:
    """Renders email templates from a directory with auto-escaping enabled."""

    def __init__(self, templates_dir: Optional[Union[str, Path]] = None):
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """Render `template_name` with `context`.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        try:
            rendered = self.jinja_env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            logger.error("Template not found", template=template_name, error=str(e))
            raise TemplateRenderError(f"Template file not found: {template_name}") from e
        except TemplateError as e:
            logger.error("Template rendering failed", template=template_name, error=str(e))
            raise TemplateRenderError(f"Template rendering failed: {e}") from e

        logger.debug(
            "Template rendered successfully",
            template=template_name,
            context_keys=list(context.keys()),
        )
        return rendered
