"""Custom exceptions for newsbrief."""

from typing import ClassVar, Literal

FetchErrorKind = Literal['timeout', 'blocked', 'not_found', 'generic']


class NewsBriefError(Exception):
    """Base class for all newsbrief exceptions.

    Attributes:
        message: User-facing message describing the failure

    """

    def __init__(self, message: str):
        """Initialize the error with a user-facing message.

        Args:
            message: Message that can be shown to the end user

        """
        self.message = message
        super().__init__(message)


class InvalidUrlError(NewsBriefError):
    """Raised when the requested URL is malformed."""

    def __init__(self, url: str):
        """Initialize invalid URL error.

        Args:
            url: The URL that failed validation

        """
        self.url = url
        super().__init__('올바른 URL 형식이 아닙니다.')


class UnsupportedSiteError(NewsBriefError):
    """Raised when a URL points to a publisher outside the supported-site table."""

    def __init__(self, domain: str, supported: list[str]):
        """Initialize unsupported site error.

        Args:
            domain: Domain extracted from the requested URL
            supported: Display names of the supported publishers

        """
        self.domain = domain
        self.supported = supported
        super().__init__(f'지원하지 않는 사이트입니다 ({domain}). 지원 사이트: {", ".join(supported)}')


class FetchError(NewsBriefError):
    """Raised when the article page could not be fetched.

    Attributes:
        url: URL that was requested
        kind: Failure category ('timeout', 'blocked', 'not_found', 'generic')
        status_code: HTTP status code, if a response was received

    """

    MESSAGES: ClassVar[dict[str, str]] = {
        'timeout': '요청 시간이 초과되었습니다. 다시 시도해보세요.',
        'blocked': '해당 사이트에서 접근을 차단했습니다.',
        'not_found': '페이지를 찾을 수 없습니다.',
        'generic': '뉴스를 가져오는 중 오류가 발생했습니다.',
    }

    def __init__(self, url: str, kind: FetchErrorKind = 'generic', status_code: int | None = None):
        """Initialize fetch error.

        Args:
            url: URL that was requested
            kind: Failure category
            status_code: HTTP status code, if any

        """
        self.url = url
        self.kind = kind
        self.status_code = status_code
        super().__init__(self.MESSAGES[kind])

    @property
    def is_retryable(self) -> bool:
        """Whether retrying the same request later could succeed."""
        return self.kind == 'timeout'


class ExtractionError(NewsBriefError):
    """Raised when a fetched page yields no usable title or content."""

    MESSAGES: ClassVar[dict[str, str]] = {
        'title_not_found': '뉴스 제목을 찾을 수 없습니다. 다른 URL을 시도해보세요.',
        'content_not_found': '뉴스 본문을 찾을 수 없습니다. 다른 URL을 시도해보세요.',
    }

    def __init__(self, reason: str):
        """Initialize extraction error.

        Args:
            reason: Failure reason key ('title_not_found' or 'content_not_found')

        """
        self.reason = reason
        super().__init__(self.MESSAGES.get(reason, '뉴스를 추출할 수 없습니다.'))


class SummaryGenerationError(NewsBriefError):
    """Raised internally when the LLM returns no usable summary."""

    def __init__(self, detail: str):
        """Initialize summary generation error.

        Args:
            detail: What went wrong with the LLM response

        """
        self.detail = detail
        super().__init__('AI 요약을 생성하지 못했습니다.')


class ContentTooShortError(NewsBriefError):
    """Raised when the text to summarize is below the minimum length."""

    def __init__(self, length: int, minimum: int):
        """Initialize content too short error.

        Args:
            length: Length of the supplied content
            minimum: Minimum accepted length

        """
        self.length = length
        self.minimum = minimum
        super().__init__(f'요약하기에 본문이 너무 짧습니다 ({length}자, 최소 {minimum}자).')
