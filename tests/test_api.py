# HTTP surface: landing page, content API, structured data and static assets.

from __future__ import annotations

from bs4 import BeautifulSoup


def test_landing_page(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    page = BeautifulSoup(response.text, "html.parser")
    assert len(page.select("article.service-card")) == 4


def test_full_content(client) -> None:
    response = client.get("/api/v1/content/")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload["services"]) == 4
    assert len(payload["faqs"]) == 3
    assert payload["contact"]["mailto_url"].startswith("mailto:")


def test_single_section(client) -> None:
    response = client.get("/api/v1/content/faqs")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 3
    assert set(payload[0]) == {"question", "answer"}


def test_unknown_section_returns_404(client) -> None:
    response = client.get("/api/v1/content/pricing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Section not found"}


def test_structured_data_matches_embedded_payload(client) -> None:
    response = client.get("/api/v1/structured-data/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/ld+json")
    assert response.json()["@type"] == "LegalService"

    page = BeautifulSoup(client.get("/").text, "html.parser")
    embedded = page.find("script", type="application/ld+json").string
    assert response.text == embedded


def test_stylesheet_is_served(client) -> None:
    response = client.get("/static/site.css")

    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]
