"""Google Sheets feed API client.

Fetches decoded JSON feeds from the legacy spreadsheet feed service.
Filter options on FeedParams are forwarded untouched as query parameters.

Usage:
    from sheetfeed.clients.sheets import Credentials, SheetsFeedClient

    async with SheetsFeedClient(Credentials(access_token="ya29...")) as client:
        decoded = await client.fetch(url, params)
"""

from dataclasses import dataclass
from typing import Any

from sheetfeed.clients.base import BaseAsyncClient
from sheetfeed.config import settings
from sheetfeed.feeds.params import FeedParams
from sheetfeed.feeds.urls import FEED_ROOT

DEFAULT_ALT = "json"


@dataclass(frozen=True)
class Credentials:
    """Auth material for the feed service.

    Public-visibility feeds need no token.
    """

    access_token: str | None = None

    def headers(self) -> dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    @classmethod
    def from_settings(cls) -> "Credentials":
        return cls(access_token=settings.access_token)


class SheetsFeedClient(BaseAsyncClient):
    """Async client for the spreadsheet feed service.

    Args:
        credentials: Auth for private feeds (default: from settings)
        timeout: Request timeout in seconds (default: settings.timeout)
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        timeout: float | None = None,
    ) -> None:
        self.credentials = credentials or Credentials.from_settings()
        super().__init__(
            base_url=FEED_ROOT,
            headers=self.credentials.headers(),
            timeout=timeout,
        )

    async def fetch(self, url: str, params: FeedParams | None = None) -> dict[str, Any]:
        """Fetch one feed.

        Args:
            url: Fully built feed URL
            params: Source of query filter options (min-row, sq, ...)

        Returns:
            Decoded JSON feed object

        Raises:
            TransportError: On any network, HTTP or decoding failure
        """
        query = params.query_params() if params is not None else {}
        query.setdefault("alt", DEFAULT_ALT)
        return await self.get(url, params=query)
