"""
HTTP transport built on httpx.
"""

from typing import Any

import httpx

from localrag.exceptions import MalformedResponseError, ServiceError, TransportError
from localrag.transport import Transport
from localrag.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 300.0


class HTTPTransport(Transport):
    """
    JSON-over-HTTP transport for a single base URL.

    httpx failures are translated into the localrag error taxonomy:
    timeouts and connection errors become TransportError, non-2xx statuses
    become ServiceError and undecodable bodies become MalformedResponseError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True
            )
        return self._client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.debug(f"POST {path}: {payload}")
        response = await self._send("POST", path, json=payload)
        return self._decode(response)

    async def get_json(self, path: str) -> dict[str, Any]:
        logger.debug(f"GET {path}")
        response = await self._send("GET", path)
        return self._decode(response)

    async def check(self, path: str) -> int:
        response = await self._send("GET", path)
        return response.status_code

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            response = await self._get_client().request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {url} timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        # Unfollowed redirects count as failures too
        if not response.is_success:
            raise ServiceError(response.status_code, response.text[:200])
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        request = response.request
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{request.method} {request.url} did not return JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"{request.method} {request.url} returned {type(data).__name__}, expected an object"
            )
        return data

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
