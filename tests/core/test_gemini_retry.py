"""
Test suite for the 429 retry policy.
"""

import pytest

from agrideck.core.exceptions import QUOTA_EXCEEDED_MESSAGE, QuotaExceededError
from agrideck.core.gemini.retry import call_with_retry, is_quota_error


class UpstreamError(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(f"status {code}")
        self.code = code


def flaky(failures: list[Exception], result: str = "ok"):
    calls = {"count": 0}

    async def func() -> str:
        calls["count"] += 1
        if failures:
            raise failures.pop(0)
        return result

    return func, calls


class TestCallWithRetry:
    async def test_quota_errors_are_retried_until_success(self) -> None:
        func, calls = flaky([UpstreamError(429), UpstreamError(429)])

        result = await call_with_retry(func, max_attempts=3, base_delay=0)

        assert result == "ok"
        assert calls["count"] == 3

    async def test_exhausted_retries_raise_quota_exceeded(self) -> None:
        func, calls = flaky([UpstreamError(429)] * 3)

        with pytest.raises(QuotaExceededError) as exc_info:
            await call_with_retry(func, max_attempts=3, base_delay=0)

        assert calls["count"] == 3
        assert str(exc_info.value) == QUOTA_EXCEEDED_MESSAGE

    async def test_other_errors_fail_immediately(self) -> None:
        func, calls = flaky([UpstreamError(500)])

        with pytest.raises(UpstreamError):
            await call_with_retry(func, max_attempts=3, base_delay=0)

        assert calls["count"] == 1

    async def test_plain_exception_is_not_retried(self) -> None:
        func, calls = flaky([RuntimeError("boom")])

        with pytest.raises(RuntimeError):
            await call_with_retry(func, max_attempts=3, base_delay=0)

        assert calls["count"] == 1


def test_is_quota_error() -> None:
    assert is_quota_error(UpstreamError(429))
    assert not is_quota_error(UpstreamError(503))
    assert not is_quota_error(ValueError())
