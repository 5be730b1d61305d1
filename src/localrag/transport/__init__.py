"""
Transport layer for the model service.
"""

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Abstract base class for request/response transports."""

    @abstractmethod
    async def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and return the decoded JSON object."""
        pass

    @abstractmethod
    async def get_json(self, path: str) -> dict[str, Any]:
        """GET a resource and return the decoded JSON object."""
        pass

    @abstractmethod
    async def check(self, path: str) -> int:
        """GET a resource and return its status, ignoring the body."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection pool."""
        pass

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


from localrag.transport.http import HTTPTransport  # noqa: E402

__all__ = ["Transport", "HTTPTransport"]
