"""Result types for fetching, extraction and summarization."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field


@dataclass
class FetchResult:
    """Result of a successful HTML fetch.

    Attributes:
        url: URL from which the HTML was fetched
        html: Response body decoded as text
        status_code: HTTP status code of the response
        fetch_time: Total time for the HTML to be fetched

    """

    url: str
    html: str
    status_code: int = 200
    fetch_time: float = 0.0


class ExtractedArticle(BaseModel):
    """Title and body text extracted from one article page."""

    title: str = Field(default='', description='Article headline')
    content: str = Field(default='', description='Normalized article body text')


@dataclass
class ExtractionResult:
    """Outcome of scraping one URL.

    Attributes:
        url: URL that was scraped
        domain: Hostname without a leading 'www.'
        site_key: Publisher token when the domain has a site profile
        article: Extracted title and content, None when extraction failed
        failure_reason: Why extraction failed ('content_not_found'), None on success

    """

    url: str
    domain: str
    site_key: str | None = None
    article: ExtractedArticle | None = None
    failure_reason: str | None = None

    @property
    def success(self) -> bool:
        """Whether a body text was extracted."""
        return self.article is not None and self.failure_reason is None

    @classmethod
    def failed(cls, url: str, domain: str, site_key: str | None, reason: str) -> 'ExtractionResult':
        """Build a failed result."""
        return cls(url=url, domain=domain, site_key=site_key, article=None, failure_reason=reason)


@dataclass
class Sentence:
    """A candidate sentence during extractive summarization."""

    text: str
    original_index: int
    score: float = 0.0


@dataclass
class SummaryResult:
    """A formatted summary and the strategy that produced it.

    Attributes:
        summary: Summary text wrapped in the header/footer template
        method: 'ai' for an abstractive LLM summary, 'extractive' otherwise

    """

    summary: str
    method: Literal['ai', 'extractive']
