"""Chooses between the AI and extractive summarizers and formats the result."""

import logging

import logfire

from newsbrief.core.summarization.ai import AISummarizer
from newsbrief.core.summarization.extractive import DEFAULT_MAX_SENTENCES, extractive_summary
from newsbrief.exceptions import ContentTooShortError
from newsbrief.models.results import SummaryResult

MIN_CONTENT_LENGTH = 100

AI_TEMPLATE = """🤖 **AI 뉴스 요약**

{summary}

---
💡 이 요약은 AI가 원문을 바탕으로 생성했습니다."""

EXTRACTIVE_TEMPLATE = """📋 **뉴스 요약**

{summary}

---
💡 이 요약은 원문에서 중요한 문장들을 추출하여 생성되었습니다."""


def format_summary(summary: str, method: str) -> str:
    """Wrap a summary in the header/footer template for its method."""
    template = AI_TEMPLATE if method == 'ai' else EXTRACTIVE_TEMPLATE
    return template.format(summary=summary.strip()).strip()


class SummaryService:
    """Summarizes article content, preferring the LLM when one is configured.

    Attributes:
        ai: AI summarizer, or None to always summarize extractively
        max_sentences: Sentences in an extractive summary
        min_content_length: Content shorter than this is rejected

    """

    def __init__(
        self,
        ai: AISummarizer | None = None,
        max_sentences: int = DEFAULT_MAX_SENTENCES,
        min_content_length: int = MIN_CONTENT_LENGTH,
    ):
        """Initialize the service.

        Args:
            ai: AI summarizer to try first
            max_sentences: Sentences in an extractive summary
            min_content_length: Minimum accepted content length

        """
        self.ai = ai
        self.max_sentences = max_sentences
        self.min_content_length = min_content_length
        self.logger = logging.getLogger(__name__)

    def summarize(self, title: str, content: str) -> SummaryResult:
        """Summarize an article.

        Args:
            title: Article headline (used for logging only)
            content: Article body text

        Returns:
            SummaryResult with the formatted summary and the method used.

        Raises:
            ContentTooShortError: If the stripped content is shorter than the minimum

        """
        content = (content or '').strip()
        if len(content) < self.min_content_length:
            raise ContentTooShortError(len(content), self.min_content_length)

        with logfire.span('summarize', title=title, content_length=len(content)):
            if self.ai is not None and self.ai.available:
                summary = self.ai.summarize(content)
                if summary:
                    return SummaryResult(summary=format_summary(summary, 'ai'), method='ai')

            summary = extractive_summary(content, self.max_sentences)
            if not summary:
                # No sentence survived filtering; fall back to the leading text
                self.logger.info('No qualifying sentences, using leading content as summary')
                summary = content[: self.min_content_length * 3]

            return SummaryResult(summary=format_summary(summary, 'extractive'), method='extractive')
