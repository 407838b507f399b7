"""
Shared test configuration.
Fixtures build settings from a clean environment so every test sees the published defaults.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Iterator
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from legal_services_site.app.core.config import Settings, load_settings  # noqa: E402
from legal_services_site.app.main import app  # noqa: E402
from legal_services_site.app.services.render_service import PageRenderer  # noqa: E402

SITE_ENV_VARS = (
    "PROJECT_NAME",
    "API_VERSION",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FILE",
    "SITE_URL",
    "CONTACT_EMAIL",
    "WHATSAPP_URL",
    "WHATSAPP_PHONE",
    "SITE_HOST",
    "SITE_PORT",
)

RENDER_TIME = datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in SITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> Settings:
    return load_settings()


@pytest.fixture
def renderer(settings: Settings) -> PageRenderer:
    return PageRenderer(settings)


@pytest.fixture
def page_html(renderer: PageRenderer) -> str:
    return renderer.render(now=RENDER_TIME)


@pytest.fixture
def page(page_html: str) -> BeautifulSoup:
    return BeautifulSoup(page_html, "html.parser")


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
