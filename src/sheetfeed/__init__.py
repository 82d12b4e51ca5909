"""sheetfeed — async client adapter for spreadsheet cell feeds.

Fetches worksheet and cells feeds from the spreadsheet feed service and
flattens them into immutable Feed / Cell / Author records.
"""

from sheetfeed.clients import Credentials, SheetsFeedClient
from sheetfeed.errors import (
    InvalidParameterError,
    LinkNotFoundError,
    MalformedResponseError,
    MissingParameterError,
    SheetFeedError,
    TransportError,
)
from sheetfeed.feeds import Author, Cell, Feed, FeedParams, SchemaType
from sheetfeed.pipeline import get_cells, get_worksheets

__version__ = "0.1.0"

__all__ = [
    "Author",
    "Cell",
    "Credentials",
    "Feed",
    "FeedParams",
    "InvalidParameterError",
    "LinkNotFoundError",
    "MalformedResponseError",
    "MissingParameterError",
    "SchemaType",
    "SheetFeedError",
    "SheetsFeedClient",
    "TransportError",
    "get_cells",
    "get_worksheets",
]
