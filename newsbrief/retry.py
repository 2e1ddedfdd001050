"""Retry configuration for calls to external services, built on tenacity."""

import logging
from typing import Any

import logfire
from tenacity import Retrying, retry_if_not_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)


def get_retryer(
    max_attempts: int = 2,
    wait_min: float = 0.5,
    wait_max: float = 4.0,
    never_retry: tuple[type[BaseException], ...] = (),
) -> Retrying:
    """Create a tenacity Retrying object that re-raises the last error.

    Args:
        max_attempts: Total number of attempts, including the first one.
        wait_min: Minimum wait between attempts in seconds.
        wait_max: Maximum wait between attempts in seconds.
        never_retry: Exception types that fail immediately without another attempt.

    Returns:
        A configured tenacity.Retrying object.

    """
    return Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(min=wait_min, max=wait_max),
        retry=retry_if_not_exception_type(never_retry),
        before_sleep=log_retry,
        reraise=True,
    )


def log_retry(retry_state: Any) -> None:
    """Log a warning before the next attempt."""
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    attempt = retry_state.attempt_number
    logger.warning(f'Attempt {attempt} failed ({exception}), retrying')
    logfire.warn('Retrying operation', attempt=attempt, error=str(exception) if exception else 'Unknown error')
