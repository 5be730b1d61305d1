"""Tests for the retry policy."""

import pytest

from localrag.exceptions import MalformedResponseError, OperationCancelledError, ServiceError, TransportError
from localrag.providers import RetryPolicy


class Flaky:
    """Awaitable factory that fails a fixed number of times."""

    def __init__(self, failures: list[Exception], result="ok"):
        self.failures = list(failures)
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.failures:
            raise self.failures.pop(0)
        return self.result


@pytest.fixture
def delays():
    return []


@pytest.fixture
def recording_sleep(delays):
    async def sleep(delay):
        delays.append(delay)
    return sleep


class TestRetryPolicy:
    def test_delay_schedule(self):
        policy = RetryPolicy(max_attempts=5, base_delay=0.5, backoff_factor=2.0, max_delay=3.0)
        assert [policy.delay_for(n) for n in range(1, 5)] == [0.5, 1.0, 2.0, 3.0]

    def test_invalid_attempts(self):
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)

    def test_retryable_kinds(self):
        policy = RetryPolicy()
        assert policy.is_retryable(TransportError())
        assert policy.is_retryable(ServiceError(503))
        assert not policy.is_retryable(ServiceError(404))
        assert not policy.is_retryable(MalformedResponseError("bad"))
        assert not policy.is_retryable(OperationCancelledError())

    @pytest.mark.asyncio
    async def test_succeeds_after_retries(self, recording_sleep, delays):
        operation = Flaky([TransportError(), ServiceError(502)])
        policy = RetryPolicy(max_attempts=3, base_delay=0.1, sleep=recording_sleep)
        assert await policy.run(operation) == "ok"
        assert operation.calls == 3
        assert delays == [0.1, 0.2]

    @pytest.mark.asyncio
    async def test_exhausted(self, recording_sleep, delays):
        operation = Flaky([TransportError("one"), TransportError("two")])
        policy = RetryPolicy(max_attempts=2, sleep=recording_sleep)
        with pytest.raises(TransportError, match="two"):
            await policy.run(operation)
        assert operation.calls == 2
        assert len(delays) == 1

    @pytest.mark.asyncio
    async def test_non_retryable_raised_immediately(self, recording_sleep, delays):
        operation = Flaky([MalformedResponseError("bad")])
        policy = RetryPolicy(max_attempts=5, sleep=recording_sleep)
        with pytest.raises(MalformedResponseError):
            await policy.run(operation)
        assert operation.calls == 1
        assert delays == []

    @pytest.mark.asyncio
    async def test_none_policy(self):
        operation = Flaky([TransportError()])
        with pytest.raises(TransportError):
            await RetryPolicy.none().run(operation)
        assert operation.calls == 1
