"""Schema-typed link lookup on feed entries.

Each entry in a worksheets feed carries a ``link`` list of ``{rel, href}``
pairs; the ``rel`` tag says which sub-resource the href points to.
"""

from enum import StrEnum
from typing import Any

from sheetfeed.errors import LinkNotFoundError
from sheetfeed.feeds.models import FeedLink


class SchemaType(StrEnum):
    """Relation tags for the sub-resources of a worksheet entry."""

    LIST_FEED = "http://schemas.google.com/spreadsheets/2006#listfeed"
    CELLS_FEED = "http://schemas.google.com/spreadsheets/2006#cellsfeed"
    VISUALIZATION = "http://schemas.google.com/visualization/2008#visualizationApi"
    EXPORT_CSV = "http://schemas.google.com/spreadsheets/2006#exportcsv"


def entry_links(entry: dict[str, Any]) -> list[FeedLink]:
    """All links of an entry, in response order.

    Links lacking ``rel`` or ``href`` are skipped.
    """
    return [
        FeedLink(rel=link["rel"], href=link["href"])
        for link in entry.get("link") or []
        if "rel" in link and "href" in link
    ]


def find_link(entry: dict[str, Any], schema: str) -> str | None:
    """Return the href of the first link whose rel equals ``schema``.

    Args:
        entry: One decoded feed entry
        schema: Relation tag, usually a SchemaType member

    Returns:
        The URL, or None when the entry has no such link
    """
    for link in entry_links(entry):
        if link.rel == schema:
            return link.href
    return None


def require_link(entry: dict[str, Any], schema: str) -> str:
    """Like find_link, but a missing link raises.

    Raises:
        LinkNotFoundError: If the entry has no link of that schema
    """
    href = find_link(entry, schema)
    if href is None:
        title = entry.get("title")
        if isinstance(title, dict):
            title = title.get("$t")
        raise LinkNotFoundError(str(schema), title=title)
    return href
