"""
Pydantic models for the schema.org JSON-LD document.

Field aliases carry the exact JSON-LD keys (``@context``, ``@type``,
``areaServed`` ...).  Dump with ``model_dump(by_alias=True)``; the
field declaration order is the key order of the serialized payload.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _JsonLdModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Answer(_JsonLdModel):
    type_: str = Field("Answer", alias="@type")
    text: str


class Question(_JsonLdModel):
    type_: str = Field("Question", alias="@type")
    name: str
    accepted_answer: Answer = Field(..., alias="acceptedAnswer")


class FAQPage(_JsonLdModel):
    type_: str = Field("FAQPage", alias="@type")
    main_entity: List[Question] = Field(default_factory=list, alias="mainEntity")


class Country(_JsonLdModel):
    type_: str = Field("Country", alias="@type")
    name: str


class LegalService(_JsonLdModel):
    """Top-level document describing the organisation and its FAQ."""

    context: str = Field("https://schema.org", alias="@context")
    type_: str = Field("LegalService", alias="@type")
    name: str
    url: str
    slogan: str
    area_served: Country = Field(..., alias="areaServed")
    available_language: List[str] = Field(default_factory=list, alias="availableLanguage")
    same_as: List[str] = Field(default_factory=list, alias="sameAs")
    main_entity: FAQPage = Field(..., alias="mainEntity")
