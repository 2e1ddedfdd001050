"""Runtime configuration read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from newsbrief.llm_config import LLMConfig, llm_config_from_env


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or value.strip() == '':
        return default
    try:
        number = int(value)
    except ValueError as e:
        raise ValueError(f'{name} must be an integer, got {value!r}') from e
    if number < 1:
        raise ValueError(f'{name} must be at least 1, got {number}')
    return number


def _float_setting(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if value is None or value.strip() == '':
        return default
    try:
        number = float(value)
    except ValueError as e:
        raise ValueError(f'{name} must be a number, got {value!r}') from e
    if number <= 0:
        raise ValueError(f'{name} must be positive, got {number}')
    return number


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by the pipeline components.

    Attributes:
        fetch_timeout: Seconds before a page fetch times out
        max_sentences: Sentences in an extractive summary
        summary_input_chars: Characters of content sent to the LLM
        max_content_chars: Extracted content is truncated beyond this length
        min_summary_chars: Content shorter than this cannot be summarized
        use_ai: Whether to try the LLM before the extractive summarizer
        llm: LLM configuration, None when no API key is set

    """

    fetch_timeout: float = 10.0
    max_sentences: int = 5
    summary_input_chars: int = 800
    max_content_chars: int = 8000
    min_summary_chars: int = 100
    use_ai: bool = True
    llm: LLMConfig | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'AppConfig':
        """Build the configuration from environment variables.

        Call ``load_dotenv()`` first to pick up a ``.env`` file.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            AppConfig instance.

        Raises:
            ValueError: If a numeric setting cannot be parsed or is not positive

        """
        environ = os.environ if environ is None else environ
        return cls(
            fetch_timeout=_float_setting(environ, 'NEWSBRIEF_FETCH_TIMEOUT', 10.0),
            max_sentences=_int_setting(environ, 'NEWSBRIEF_MAX_SENTENCES', 5),
            summary_input_chars=_int_setting(environ, 'NEWSBRIEF_SUMMARY_INPUT_CHARS', 800),
            max_content_chars=_int_setting(environ, 'NEWSBRIEF_MAX_CONTENT_CHARS', 8000),
            use_ai=environ.get('NEWSBRIEF_USE_AI', '1').lower() not in {'0', 'false', 'no'},
            llm=llm_config_from_env(environ),
        )
