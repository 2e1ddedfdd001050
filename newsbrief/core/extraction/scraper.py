"""Fetches an article page and extracts its headline and body text."""

import logging

import logfire

from newsbrief.core.extraction.generic import extract_generic
from newsbrief.core.extraction.selectors import extract_by_selectors, parse_html
from newsbrief.core.extraction.title import resolve_title
from newsbrief.core.fetcher import HTMLFetcher, SimpleFetcher
from newsbrief.core.sites import SiteResolution, resolve_site
from newsbrief.models.results import ExtractedArticle, ExtractionResult


class NewsScraper:
    """Site-aware article scraper.

    Site profiles are tried first; pages from unknown publishers, or where the
    profile selectors find nothing, fall back to generic extraction.

    Attributes:
        fetcher: Transport used to download pages
        logger: Logger instance

    """

    def __init__(self, fetcher: HTMLFetcher | None = None):
        """Initialize the scraper.

        Args:
            fetcher: HTML fetcher to use. Defaults to a SimpleFetcher.

        """
        self.fetcher = fetcher or SimpleFetcher()
        self.logger = logging.getLogger(__name__)

    def scrape(self, url: str) -> ExtractionResult:
        """Fetch ``url`` and extract its title and content.

        Args:
            url: Article URL

        Returns:
            ExtractionResult; ``success`` is False when no body text was found.

        Raises:
            FetchError: If the page could not be fetched
            InvalidUrlError: If the URL has no hostname

        """
        with logfire.span('scrape', url=url):
            resolution = resolve_site(url)
            result = self.fetcher.fetch(url)
            return self.extract(url, result.html, resolution)

    def extract(self, url: str, html: str, resolution: SiteResolution | None = None) -> ExtractionResult:
        """Extract title and content from already fetched HTML.

        Args:
            url: URL the HTML came from
            html: Raw HTML
            resolution: Site resolution for ``url``. Resolved when omitted.

        Returns:
            ExtractionResult for the page.

        """
        resolution = resolution or resolve_site(url)
        soup = parse_html(html)

        title = resolve_title(soup, resolution.profile)

        content = ''
        if resolution.profile is not None:
            content = extract_by_selectors(soup, resolution.profile.content_selectors)
            if not content:
                self.logger.info(f'Site selectors for {resolution.site_key} found no content, using generic extraction')

        if not content:
            content = extract_generic(soup)

        if not content:
            logfire.warn('Content extraction failed', url=url, domain=resolution.domain)
            self.logger.warning(f'No content extracted from {url}')
            return ExtractionResult.failed(url, resolution.domain, resolution.site_key, 'content_not_found')

        logfire.info('Article extracted', url=url, title_length=len(title), content_length=len(content))
        return ExtractionResult(
            url=url,
            domain=resolution.domain,
            site_key=resolution.site_key,
            article=ExtractedArticle(title=title, content=content),
        )
