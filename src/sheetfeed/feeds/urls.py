"""Feed URL construction.

URL shape (must match the feed service exactly):

    https://spreadsheets.google.com/feeds/{cells|worksheets}/{id}[/{worksheet}]/{visibility}/{projection}
"""

from sheetfeed.errors import MissingParameterError
from sheetfeed.feeds.params import FeedParams

FEED_ROOT = "https://spreadsheets.google.com/feeds"

DEFAULT_VISIBILITY = "public"
DEFAULT_PROJECTION = "full"


def _required(params: FeedParams, name: str) -> str:
    value = getattr(params, name)
    if not value:
        raise MissingParameterError(name)
    return value


def build_cells_url(params: FeedParams) -> str:
    """Build the cells-feed URL for one worksheet.

    Args:
        params: Must carry ``id`` and ``worksheet``

    Returns:
        ``{root}/cells/{id}/{worksheet}/{visibility}/{projection}``

    Raises:
        MissingParameterError: If ``id`` or ``worksheet`` is absent or empty
    """
    segments = [
        FEED_ROOT,
        "cells",
        _required(params, "id"),
        _required(params, "worksheet"),
        params.visibility or DEFAULT_VISIBILITY,
        params.projection or DEFAULT_PROJECTION,
    ]
    return "/".join(segments)


def build_worksheets_url(params: FeedParams) -> str:
    """Build the worksheets-feed URL for a spreadsheet.

    Raises:
        MissingParameterError: If ``id`` is absent or empty
    """
    segments = [
        FEED_ROOT,
        "worksheets",
        _required(params, "id"),
        params.visibility or DEFAULT_VISIBILITY,
        params.projection or DEFAULT_PROJECTION,
    ]
    return "/".join(segments)


def resolve_cells_url(params: FeedParams) -> str:
    """Explicit ``params.url`` if given, otherwise the built cells URL."""
    if params.url:
        return params.url
    return build_cells_url(params)
