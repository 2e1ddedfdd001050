"""Request handling for article extraction and summarization.

Every failure is turned into a structured response; nothing raised by the
fetcher, extractor or summarizers escapes the public methods.
"""

import logging

import logfire
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from newsbrief.config import AppConfig
from newsbrief.core.extraction import NewsScraper
from newsbrief.core.fetcher import HTMLFetcher, create_fetcher
from newsbrief.core.sites import (
    extract_domain,
    get_supported_sites,
    is_supported_site,
    supported_site_names,
    validate_url,
)
from newsbrief.core.summarization import AISummarizer, SummaryService
from newsbrief.exceptions import ExtractionError, NewsBriefError, UnsupportedSiteError
from newsbrief.models import (
    ExtractedArticle,
    ExtractRequest,
    ExtractResponse,
    NewsArticle,
    SummaryRequest,
    SummaryResponse,
    SupportedSite,
)

MIN_TITLE_LENGTH = 5
MIN_CONTENT_LENGTH = 100
TRUNCATION_MARK = '...'

MISSING_URL_MESSAGE = 'URL이 필요합니다.'
MISSING_ARTICLE_MESSAGE = '제목과 본문이 필요합니다.'
UNEXPECTED_EXTRACT_MESSAGE = '뉴스를 가져오는 중 오류가 발생했습니다.'
UNEXPECTED_SUMMARY_MESSAGE = '요약 생성 중 오류가 발생했습니다.'


class Pipeline:
    """Extracts articles from supported news sites and summarizes them.

    Attributes:
        config: Runtime settings
        console: Rich console instance for formatted output
        scraper: Site-aware article scraper
        summaries: Summary service (AI first when configured, extractive otherwise)
        logger: Logger instance

    """

    def __init__(
        self,
        config: AppConfig | None = None,
        fetcher: HTMLFetcher | None = None,
        ai: AISummarizer | None = None,
        console: Console | None = None,
    ):
        """Initialize the pipeline.

        Args:
            config: Runtime settings. Defaults to AppConfig().
            fetcher: HTML fetcher. Defaults to a SimpleFetcher with the configured timeout.
            ai: AI summarizer. Built from ``config.llm`` when omitted and AI is enabled.
            console: Rich console instance for formatted output

        """
        self.config = config or AppConfig()
        self.custom_theme = Theme(
            {
                'info': 'dim cyan',
                'warning': 'magenta',
                'danger': 'bold red',
                'success': 'bold green',
                'step': 'bold blue',
            }
        )
        self.console = console or Console(theme=self.custom_theme)
        self.logger = logging.getLogger(__name__)

        fetcher = fetcher or create_fetcher('simple', timeout=self.config.fetch_timeout)
        self.scraper = NewsScraper(fetcher=fetcher)

        if ai is None and self.config.use_ai and self.config.llm is not None:
            ai = AISummarizer(llm_config=self.config.llm, input_chars=self.config.summary_input_chars)
        self.summaries = SummaryService(
            ai=ai if self.config.use_ai else None,
            max_sentences=self.config.max_sentences,
            min_content_length=self.config.min_summary_chars,
        )

    # ============================================================================
    # Public API
    # ============================================================================

    def supported_sites(self) -> list[SupportedSite]:
        """List the publishers accepted by the pipeline."""
        return get_supported_sites()

    def extract(self, url: str | ExtractRequest | None) -> ExtractResponse:
        """Extract the title and content of an article.

        Args:
            url: Article URL, or an ExtractRequest carrying it

        Returns:
            ExtractResponse; ``error`` holds a user-facing message on failure.

        """
        if isinstance(url, ExtractRequest):
            url = url.url
        if not url:
            return ExtractResponse(success=False, error=MISSING_URL_MESSAGE)

        with logfire.span('extract', url=url):
            try:
                article = self.extract_article(url)
            except NewsBriefError as e:
                self._log_failure(url, e)
                return ExtractResponse(success=False, error=e.message)
            except Exception:
                self.logger.exception(f'Unexpected error extracting {url}')
                return ExtractResponse(success=False, error=UNEXPECTED_EXTRACT_MESSAGE)

        return ExtractResponse(success=True, title=article.title, content=article.content)

    def summarize(self, request: SummaryRequest) -> SummaryResponse:
        """Summarize an article given by URL or by title and content.

        With a URL the supported-site gate runs before anything is fetched.

        Args:
            request: URL, or title and content, to summarize

        Returns:
            SummaryResponse; ``error`` holds a user-facing message on failure.

        """
        with logfire.span('summarize_request', url=request.url):
            try:
                if request.url:
                    article = self.extract_article(request.url)
                elif request.title and request.content:
                    article = ExtractedArticle(title=request.title, content=request.content)
                else:
                    return SummaryResponse(success=False, error=MISSING_ARTICLE_MESSAGE)

                result = self.summaries.summarize(article.title, article.content)
            except NewsBriefError as e:
                self._log_failure(request.url, e)
                return SummaryResponse(success=False, error=e.message)
            except Exception:
                self.logger.exception('Unexpected error while summarizing')
                return SummaryResponse(success=False, error=UNEXPECTED_SUMMARY_MESSAGE)

        return SummaryResponse(success=True, summary=result.summary, method=result.method, title=article.title)

    def extract_article(self, url: str) -> ExtractedArticle:
        """Validate, gate, scrape and check one article.

        Args:
            url: Article URL

        Returns:
            The extracted article, with content truncated to ``max_content_chars``.

        Raises:
            InvalidUrlError: If the URL is malformed
            UnsupportedSiteError: If the domain is not a supported publisher
            FetchError: If the page could not be fetched
            ExtractionError: If no usable title or content was found

        """
        url = validate_url(url)
        domain = extract_domain(url)
        if not is_supported_site(domain):
            raise UnsupportedSiteError(domain, supported_site_names())

        result = self.scraper.scrape(url)
        if not result.success or result.article is None:
            raise ExtractionError(result.failure_reason or 'content_not_found')

        article = result.article
        if len(article.title) < MIN_TITLE_LENGTH:
            raise ExtractionError('title_not_found')
        if len(article.content) < MIN_CONTENT_LENGTH:
            raise ExtractionError('content_not_found')

        return ExtractedArticle(title=article.title, content=self._truncate(article.content))

    def process_url(self, url: str) -> NewsArticle | None:
        """Extract and summarize one URL, reporting progress on the console.

        Args:
            url: Article URL

        Returns:
            NewsArticle on success, None otherwise.

        """
        self.console.print(Panel(f'Processing: {escape(url)}', style='bold blue'))

        self.console.print('[step]Step 1: Extracting article...[/step]')
        extracted = self.extract(url)
        if not extracted.success:
            self.console.print(f'[danger]Extraction failed: {escape(extracted.error or "")}[/danger]')
            return None
        assert extracted.title is not None and extracted.content is not None
        title = escape(extracted.title)
        self.console.print(f'[success]Extracted "{title}" ({len(extracted.content):,} chars)[/success]')

        self.console.print('[step]Step 2: Summarizing...[/step]')
        summary = self.summarize(SummaryRequest(title=extracted.title, content=extracted.content))
        if not summary.success or summary.summary is None:
            self.console.print(f'[danger]Summarization failed: {escape(summary.error or "")}[/danger]')
            return None
        self.console.print(f'[success]Summary generated ({summary.method})[/success]')

        return NewsArticle(url=url, title=extracted.title, content=extracted.content, summary=summary.summary)

    def process_urls(self, urls: list[str]) -> dict[str, list]:
        """Process multiple URLs and collect results.

        Args:
            urls: URLs to process

        Returns:
            Dictionary with 'successful' (list of NewsArticle) and 'failed' (list of URLs).

        """
        results: dict[str, list] = {'successful': [], 'failed': []}

        with logfire.span('process_urls', total_urls=len(urls)):
            for idx, url in enumerate(urls, 1):
                self.console.print(f'\n[bold blue]Processing URL {idx}/{len(urls)}[/bold blue]')
                article = self.process_url(url)
                if article is not None:
                    results['successful'].append(article)
                else:
                    results['failed'].append(url)

            logfire.info(
                'Processing complete',
                total=len(urls),
                successful=len(results['successful']),
                failed=len(results['failed']),
            )

        return results

    def show_supported_sites(self) -> None:
        """Print the supported publishers as a table."""
        table = Table(title='Supported News Sites')
        table.add_column('Domain', style='cyan')
        table.add_column('Name', style='green')
        table.add_column('URL', style='dim')

        for site in self.supported_sites():
            table.add_row(site.domain, site.name, site.url)

        self.console.print(table)

    # ============================================================================
    # Private helper methods
    # ============================================================================

    def _truncate(self, content: str) -> str:
        limit = self.config.max_content_chars
        if len(content) > limit:
            return content[:limit] + TRUNCATION_MARK
        return content

    def _log_failure(self, url: str | None, error: NewsBriefError) -> None:
        self.logger.warning(f'{type(error).__name__} for {url}: {error.message}')
        logfire.warn('Request failed', url=url, error_type=type(error).__name__, error=error.message)
