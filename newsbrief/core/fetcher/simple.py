"""HTTP fetcher with browser-like headers."""

import logging
import time

import requests

from newsbrief.core.fetcher.base import HTMLFetcher
from newsbrief.exceptions import FetchError
from newsbrief.models.results import FetchResult
from newsbrief.utils.headers import HeaderGenerator, UserAgentRotator

DEFAULT_TIMEOUT = 10.0


class SimpleFetcher(HTMLFetcher):
    """Fetches pages with ``requests`` and fails fast on any non-2xx status.

    Attributes:
        timeout: Request timeout in seconds
        rotate_user_agent: Whether to pick a random user agent per request
        session: Requests session used for connection pooling, or None

    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        rotate_user_agent: bool = True,
        use_session: bool = True,
    ):
        """Initialize the simple fetcher.

        Args:
            timeout: Seconds to wait for the server before giving up
            rotate_user_agent: If True, use a random user agent for each request
            use_session: If True, reuse connections through a requests.Session

        """
        self.timeout = timeout
        self.rotate_user_agent = rotate_user_agent
        self.session: requests.Session | None = requests.Session() if use_session else None
        self.logger = logging.getLogger(__name__)

    def _get_headers(self) -> dict[str, str]:
        """Get headers for the request."""
        user_agent = UserAgentRotator.get_random() if self.rotate_user_agent else UserAgentRotator.get_chrome_windows()
        return HeaderGenerator.generate_headers(user_agent=user_agent)

    @staticmethod
    def _decode(response: requests.Response) -> str:
        """Decode the body, sniffing the charset when the server omits it.

        requests assumes ISO-8859-1 for text/* without a charset, which garbles
        EUC-KR and UTF-8 Korean pages.
        """
        encoding = response.encoding
        if encoding is None or encoding.lower() == 'iso-8859-1':
            response.encoding = response.apparent_encoding
        return response.text

    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML for ``url``.

        Args:
            url: The URL that is being fetched

        Returns:
            FetchResult with the decoded HTML.

        Raises:
            FetchError: 'timeout' when the request times out, 'blocked' on 403,
                'not_found' on 404, 'generic' for other statuses and transport errors

        """
        start_time = time.time()
        headers = self._get_headers()

        try:
            if self.session:
                response = self.session.get(url, headers=headers, timeout=self.timeout, allow_redirects=True)
            else:
                response = requests.get(url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.Timeout as e:
            self.logger.warning(f'Timed out after {self.timeout}s fetching {url}')
            raise FetchError(url, kind='timeout') from e
        except requests.RequestException as e:
            self.logger.warning(f'Transport error fetching {url}: {e}')
            raise FetchError(url, kind='generic') from e

        status_code = response.status_code
        self.check_status(url, status_code)

        html = self._decode(response)
        fetch_time = time.time() - start_time
        self.logger.debug(f'Fetched {len(html)} chars from {url} in {fetch_time:.2f}s')

        return FetchResult(url=url, html=html, status_code=status_code, fetch_time=fetch_time)

    def close(self) -> None:
        """Close the session if it exists."""
        if self.session:
            self.session.close()
