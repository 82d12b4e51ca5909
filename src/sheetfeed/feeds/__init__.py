"""Feed layer: URL building, link lookup, and flattening.

Pure functions and records with no I/O:
- urls: canonical feed URLs from FeedParams
- links: schema-typed link lookup on entries
- flattener: decoded JSON → Feed / Cell / Author
"""

from sheetfeed.feeds.flattener import feed_entries, flatten_cell, flatten_feed, text_of
from sheetfeed.feeds.links import SchemaType, entry_links, find_link, require_link
from sheetfeed.feeds.models import Author, Cell, Feed, FeedLink, WorksheetCollection
from sheetfeed.feeds.params import FeedParams
from sheetfeed.feeds.urls import (
    DEFAULT_PROJECTION,
    DEFAULT_VISIBILITY,
    FEED_ROOT,
    build_cells_url,
    build_worksheets_url,
    resolve_cells_url,
)

__all__ = [
    "Author",
    "Cell",
    "Feed",
    "FeedLink",
    "FeedParams",
    "WorksheetCollection",
    "SchemaType",
    "entry_links",
    "find_link",
    "require_link",
    "feed_entries",
    "flatten_cell",
    "flatten_feed",
    "text_of",
    "FEED_ROOT",
    "DEFAULT_VISIBILITY",
    "DEFAULT_PROJECTION",
    "build_cells_url",
    "build_worksheets_url",
    "resolve_cells_url",
]
