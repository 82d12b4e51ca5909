"""Base async HTTP client with connection pooling.

Feed clients inherit from this base to get consistent behavior:
- Async/await for non-blocking I/O
- One pooled httpx.AsyncClient per context
- Every transport failure mapped to TransportError
- Request/response logging

No retry or rate limiting is applied: a failed request
surfaces to the caller immediately.

Usage:
    class MyFeedClient(BaseAsyncClient):
        def __init__(self, token: str):
            super().__init__(
                base_url="https://feeds.example.com",
                headers={"Authorization": f"Bearer {token}"},
            )

        async def get_feed(self, name: str) -> dict:
            return await self.get(f"/feeds/{name}")
"""

import logging
from typing import Any

import httpx

from sheetfeed.config import settings
from sheetfeed.errors import TransportError

logger = logging.getLogger(__name__)

_BODY_PREVIEW = 500


class BaseAsyncClient:
    """Base async HTTP client.

    Args:
        base_url: Base URL for relative endpoints
        headers: Default headers for all requests
        timeout: Request timeout in seconds (default: settings.timeout)
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout = timeout if timeout is not None else settings.timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseAsyncClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            limits=httpx.Limits(
                max_keepalive_connections=settings.max_keepalive_connections,
                max_connections=settings.max_connections,
            ),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make one HTTP request and decode its JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Absolute URL, or a path relative to base_url
            params: Query parameters, forwarded as given

        Returns:
            Parsed JSON response as dictionary

        Raises:
            TransportError: On network errors, timeouts, HTTP status >= 400,
                or a body that is not a JSON object
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with context manager.")

        # Absolute feed URLs pass through; relative ones are rooted at base_url
        if not endpoint.startswith(("http://", "https://", "/")):
            endpoint = f"/{endpoint}"

        logger.debug("%s %s params=%s", method, endpoint, params)

        try:
            response = await self._client.request(method=method, url=endpoint, params=params)
        except httpx.TimeoutException as e:
            logger.error("Request timeout for %s: %s", endpoint, e)
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            logger.error("Network error for %s: %s", endpoint, e)
            raise TransportError(f"Network error: {e}") from e

        logger.debug("Response: %d for %s", response.status_code, endpoint)

        if response.status_code >= 400:
            error_body = response.text[:_BODY_PREVIEW]
            logger.error(
                "API error: %d %s - %s",
                response.status_code, endpoint, error_body,
            )
            raise TransportError(
                message=f"API request failed: {response.status_code}",
                status_code=response.status_code,
                response_body=error_body,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Failed to parse JSON response: %s", e)
            raise TransportError(
                message=f"Invalid JSON response: {e}",
                status_code=response.status_code,
                response_body=response.text[:_BODY_PREVIEW],
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                message=f"Expected a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
                response_body=response.text[:_BODY_PREVIEW],
            )
        return data

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Convenience method for GET requests."""
        return await self._request("GET", endpoint, params=params)
