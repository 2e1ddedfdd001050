"""Pydantic models for inbound requests and structured responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ExtractRequest(BaseModel):
    """Request to extract an article from a URL."""

    url: str = ''


class ExtractResponse(BaseModel):
    """Structured extraction outcome: never raised, always returned."""

    success: bool
    title: str | None = None
    content: str | None = None
    error: str | None = None


class SummaryRequest(BaseModel):
    """Request to summarize either a URL or an already extracted article.

    When ``url`` is set the article is scraped first and ``title``/``content``
    are ignored.
    """

    url: str | None = None
    title: str | None = None
    content: str | None = None


class SummaryResponse(BaseModel):
    """Structured summarization outcome."""

    success: bool
    summary: str | None = None
    method: Literal['ai', 'extractive'] | None = None
    title: str | None = None
    error: str | None = None


class SupportedSite(BaseModel):
    """A publisher accepted by the supported-site gate."""

    domain: str
    name: str
    url: str


class NewsArticle(BaseModel):
    """A fully processed article, as saved by the output formatters."""

    url: str
    title: str
    content: str
    summary: str
    extracted_at: datetime = Field(default_factory=datetime.now)
