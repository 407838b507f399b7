"""
Page renderer.

``PageRenderer`` turns the static content into the final HTML document.
Rendering is a single synchronous pass with no I/O besides loading the
template: the only value that changes between two renders is the
copyright year, taken from ``now`` (defaults to the current local
time).
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from legal_services_site.app.core.config import Settings
from legal_services_site.app.services.content_service import ContentService
from legal_services_site.app.services.structured_data_service import (
    build_structured_data,
    check_faq_parity,
    json_ld_script,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE = "landing.html"


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Jinja2 environment with HTML autoescaping enabled."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class PageRenderer:
    """Render the landing page for a given ``Settings`` instance."""

    def __init__(self, settings: Settings, environment: Optional[Environment] = None) -> None:
        self.settings = settings
        self.environment = environment or create_environment()

    def render(self, now: Optional[datetime] = None) -> str:
        """Return the full HTML document.

        Two calls with the same ``now`` return identical strings.
        """
        now = now or datetime.now()
        content = ContentService.get_landing_content(self.settings)
        structured_data = build_structured_data(self.settings, content.faqs)

        ok, errors = check_faq_parity(structured_data, content.faqs)
        if not ok:
            logger.warning("Structured data FAQ is out of sync: %s", "; ".join(errors))

        template = self.environment.get_template(PAGE_TEMPLATE)
        html = template.render(
            page=content,
            json_ld=json_ld_script(structured_data),
            year=now.year,
        )
        logger.debug("Rendered %s (%d characters)", PAGE_TEMPLATE, len(html))
        return html
