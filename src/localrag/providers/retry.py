"""
Retry policy for model service requests.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

from localrag.exceptions import ServiceError, TransportError
from localrag.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """
    Bounded retry with exponential backoff.

    Attributes:
        max_attempts: Total attempts including the first one (1 disables retries)
        base_delay: Delay in seconds before the second attempt
        backoff_factor: Multiplier applied to the delay after each failure
        max_delay: Upper bound for a single delay
        retry_on: Exception types that are retried
        retry_statuses: HTTP statuses for which a ServiceError is retried
    """
    max_attempts: int = 1
    base_delay: float = 0.5
    backoff_factor: float = 2.0
    max_delay: float = 30.0
    retry_on: tuple[type[BaseException], ...] = (TransportError,)
    retry_statuses: frozenset[int] = frozenset({502, 503, 504})
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep, repr=False, compare=False)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @classmethod
    def none(cls) -> "RetryPolicy":
        """A policy that makes exactly one attempt."""
        return cls(max_attempts=1)

    def delay_for(self, attempt: int) -> float:
        """Delay to wait after the given failed attempt (1-based)."""
        return min(self.base_delay * (self.backoff_factor ** (attempt - 1)), self.max_delay)

    def is_retryable(self, error: BaseException) -> bool:
        if isinstance(error, ServiceError):
            return error.status_code in self.retry_statuses
        return isinstance(error, self.retry_on)

    async def run(self, operation: Callable[[], Awaitable[T]], description: str = "request") -> T:
        """
        Run an operation, retrying it while the policy allows.

        Args:
            operation: Zero-argument callable returning a fresh awaitable
            description: Label used in log messages

        Returns:
            The operation's result

        Raises:
            The last error once attempts are exhausted or a non-retryable error
        """
        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as e:
                if attempt >= self.max_attempts or not self.is_retryable(e):
                    raise
                delay = self.delay_for(attempt)
                logger.warning(
                    f"{description} failed (attempt {attempt}/{self.max_attempts}): {e}; "
                    f"retrying in {delay:.2f}s"
                )
                await self.sleep(delay)
                attempt += 1
