"""Abstract base class for HTML fetchers."""

from abc import ABC, abstractmethod

from newsbrief.exceptions import FetchError, FetchErrorKind
from newsbrief.models.results import FetchResult


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Implement this interface to plug in a different transport (e.g. a
    headless browser) without touching the extraction code.
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML from a URL.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with the decoded HTML

        Raises:
            FetchError: On timeout, transport failure or a non-success status

        """

    @staticmethod
    def classify_status(status_code: int) -> FetchErrorKind | None:
        """Map an HTTP status code to a fetch failure kind.

        Args:
            status_code: HTTP status of the response

        Returns:
            None for 2xx responses, otherwise the failure kind.

        """
        if 200 <= status_code < 300:
            return None
        if status_code == 403:
            return 'blocked'
        if status_code == 404:
            return 'not_found'
        return 'generic'

    def check_status(self, url: str, status_code: int) -> None:
        """Raise a FetchError for non-success statuses.

        Raises:
            FetchError: If ``status_code`` is not 2xx

        """
        kind = self.classify_status(status_code)
        if kind is not None:
            raise FetchError(url, kind=kind, status_code=status_code)

    def close(self) -> None:
        """Release transport resources. No-op by default."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
