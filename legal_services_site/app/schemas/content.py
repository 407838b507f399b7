"""
Pydantic models for the visible content of the landing page.

Each section of the page is rendered from a tuple of these records.
The same models are returned by the read-only ``/api/v1/content``
endpoints so that other clients can reuse the copy without scraping
the HTML.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _ContentModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ServiceItem(_ContentModel):
    """A service card.  ``title`` doubles as the display key."""

    title: str
    description: str


class ReasonItem(_ContentModel):
    """A benefit card in the "why us" grid."""

    title: str
    body: str


class StepItem(_ContentModel):
    """One entry of the ordered process list."""

    number: int = Field(..., ge=1)
    body: str

    @property
    def label(self) -> str:
        return f"Paso {self.number}"


class FaqItem(_ContentModel):
    """A question and its answer.

    The visible disclosure list and the JSON-LD FAQ listing are both
    built from the same ``FaqItem`` records.
    """

    question: str
    answer: str


class NavLink(_ContentModel):
    label: str
    href: str
    external: bool = False


class FooterColumn(_ContentModel):
    title: str
    links: List[NavLink]


class ContactLinks(_ContentModel):
    """Deep-links used by the contact call-to-action and the footer."""

    whatsapp_url: str
    email: str
    mailto_url: str


class PageMetadata(_ContentModel):
    """Document head metadata: title, description, canonical, robots and social cards."""

    title: str
    description: str
    canonical_url: str
    robots: str = "index, follow"
    locale: str = "es_US"
    site_name: str


class LandingContent(_ContentModel):
    """Everything the page template needs, minus the structured data."""

    metadata: PageMetadata
    hero_title: str
    hero_body: str
    reasons: List[ReasonItem]
    services: List[ServiceItem]
    steps_title: str
    steps: List[StepItem]
    faqs: List[FaqItem]
    about: str
    contact: ContactLinks
    footer_tagline: str
    footer_columns: List[FooterColumn]
    disclaimer: str
