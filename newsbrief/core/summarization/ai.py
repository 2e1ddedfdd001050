"""Abstractive summaries through a pydantic-ai agent."""

import logging
import re
from typing import Any

import logfire
from pydantic_ai import Agent
from pydantic_ai.exceptions import ModelHTTPError, UserError

from newsbrief.exceptions import SummaryGenerationError
from newsbrief.llm_config import LLMConfig, create_agent
from newsbrief.retry import get_retryer
from newsbrief.utils.prompts import load_prompt

DEFAULT_INPUT_CHARS = 800

# Provider responses that another attempt cannot fix
CREDENTIAL_STATUS_CODES = frozenset({401, 403})


class AISummarizer:
    """Summarizes article text with an LLM.

    Failures never propagate: ``summarize`` returns None and the caller falls
    back to the extractive summarizer.

    Attributes:
        agent: The LLM agent, None when no provider is configured
        input_chars: Only this many leading characters are sent to the model
        max_attempts: Attempts per summary, including the first

    """

    agent: Agent[Any, str] | None

    def __init__(
        self,
        llm_config: LLMConfig | None = None,
        agent: Agent[Any, str] | None = None,
        input_chars: int = DEFAULT_INPUT_CHARS,
        max_attempts: int = 2,
    ):
        """Initialize the summarizer with an agent or an LLM configuration.

        Args:
            llm_config: Provider configuration used to build an agent
            agent: Pre-built agent; takes priority over ``llm_config``
            input_chars: Characters of content sent to the model
            max_attempts: Attempts per summary, including the first

        """
        self.logger = logging.getLogger(__name__)
        self.input_chars = input_chars
        self.max_attempts = max_attempts

        if agent is not None:
            self.agent = agent
        elif llm_config is not None:
            self.agent = create_agent(llm_config, load_prompt('summary_system'))
        else:
            self.agent = None

    @property
    def available(self) -> bool:
        """Whether an LLM is configured."""
        return self.agent is not None

    def _generate(self, text: str) -> str:
        assert self.agent is not None
        try:
            result = self.agent.run_sync(text)
        except ModelHTTPError as e:
            if e.status_code in CREDENTIAL_STATUS_CODES:
                raise SummaryGenerationError(f'provider rejected the API key ({e.status_code})') from e
            raise
        output = result.output if isinstance(result.output, str) else ''
        summary = re.sub(r'\s+', ' ', output).strip()
        if not summary:
            raise SummaryGenerationError('empty model output')
        return summary

    def summarize(self, content: str) -> str | None:
        """Summarize ``content`` with the LLM.

        Args:
            content: Article body text

        Returns:
            The summary, or None when no LLM is configured or every attempt failed.

        """
        if self.agent is None:
            return None

        text = content[: self.input_chars]

        with logfire.span('ai_summary', input_chars=len(text)):
            try:
                for attempt in get_retryer(
                    max_attempts=self.max_attempts, never_retry=(UserError, SummaryGenerationError)
                ):
                    with attempt:
                        summary = self._generate(text)
                logfire.info('AI summary generated', summary_length=len(summary))
                return summary
            except Exception as e:
                self.logger.warning(f'AI summarization failed, falling back to extractive summary: {e}')
                logfire.warn('AI summarization failed', error=str(e))
                return None
