"""
Quota-aware retry for Gemini calls.

Only rate-limit errors (HTTP 429) are retried, with exponential backoff
of base * 2**(attempt-1) seconds. Anything else propagates on the first
failure. Exhausted retries surface as QuotaExceededError.

Dependencies: tenacity
System role: Backoff policy shared by every Gemini operation
"""

import logging
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from agrideck.core.exceptions import QuotaExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUOTA_STATUS_CODE = 429


def is_quota_error(exc: BaseException) -> bool:
    """True for upstream errors carrying status code 429."""
    return getattr(exc, "code", None) == QUOTA_STATUS_CODE


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        f"{__name__}:call_with_retry - rate limited, retrying",
        extra={
            "attempt": retry_state.attempt_number,
            "wait_seconds": retry_state.next_action.sleep if retry_state.next_action else None,
        },
    )


async def call_with_retry(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1.0,
) -> T:
    """
    Await func, retrying on quota errors.

    Args:
        func: Zero-argument coroutine factory (called once per attempt)
        max_attempts: Total attempts including the first
        base_delay: Wait before the first retry in seconds

    Returns:
        Result of the first successful attempt

    Raises:
        QuotaExceededError: If every attempt hit a 429
        Exception: Any non-quota error, unchanged and without retry
    """
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=base_delay, exp_base=2, min=0),
            retry=retry_if_exception(is_quota_error),
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                return await func()
    except Exception as e:
        if is_quota_error(e):
            logger.error(
                f"{__name__}:call_with_retry - quota still exhausted after {max_attempts} attempts"
            )
            raise QuotaExceededError({"attempts": max_attempts}) from e
        raise
