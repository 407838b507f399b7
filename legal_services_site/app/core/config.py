"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the published site, so the page renders identically with no
environment at all.  Override them via environment variables when
deploying to a staging domain or changing the contact address.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Venezuelan Legal Services"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    # Canonical URL of the site.  Used for the canonical link, Open Graph
    # tags and the ``url`` of the structured data document.
    site_url: str = field(default_factory=lambda: _env("SITE_URL", "https://www.venezuelanlegalservices.com/"))

    contact_email: str = field(default_factory=lambda: _env("CONTACT_EMAIL", "contacto@venezuelanlegalservices.com"))

    # WhatsApp click-to-chat base.  ``WHATSAPP_PHONE`` (digits only, with
    # country code) is appended when set; the bare ``https://wa.me/``
    # placeholder is used otherwise.
    whatsapp_url: str = field(default_factory=lambda: _env("WHATSAPP_URL", "https://wa.me/"))
    whatsapp_phone: str = field(default_factory=lambda: _env("WHATSAPP_PHONE", ""))

    site_host: str = field(default_factory=lambda: _env("SITE_HOST", "0.0.0.0"))
    site_port: int = field(default_factory=lambda: int(_env("SITE_PORT", "8000")))


def load_settings() -> Settings:
    """Read a fresh ``Settings`` instance from the current environment."""
    return Settings()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = load_settings()
