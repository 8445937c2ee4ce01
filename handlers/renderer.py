import logging
import os
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


class TemplateRenderer:
    def __init__(self, template_dir: Optional[str] = None):
        self.template_dir = template_dir or TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=False,
        )

    def render(self, name: str, context: Dict[str, Any]) -> str:
        try:
            template = self.env.get_template(name)
            return template.render(**context).strip()
        except Exception as e:
            logger.error(f"Template {name} failed to render: {e}")
            raise
