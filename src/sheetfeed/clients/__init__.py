"""API client layer for sheetfeed.

Async HTTP clients for the spreadsheet feed service.
"""

from sheetfeed.clients.base import BaseAsyncClient
from sheetfeed.clients.sheets import Credentials, SheetsFeedClient
from sheetfeed.errors import TransportError

__all__ = [
    "BaseAsyncClient",
    "Credentials",
    "SheetsFeedClient",
    "TransportError",
]
