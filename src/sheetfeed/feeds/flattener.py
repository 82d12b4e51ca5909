"""Flattener — decoded feed JSON → Feed records.

The feed API wraps scalar text in ``{"$t": ...}`` objects and nests
cell attributes under ``gs$cell``:

    {"feed": {
        "updated": {"$t": "2024-01-15T10:00:00.000Z"},
        "title":   {"$t": "Sheet1"},
        "author":  [{"name": {"$t": "..."}, "email": {"$t": "..."}}],
        "entry":   [{"updated": {"$t": "..."},
                     "gs$cell": {"row": "1", "col": "1",
                                 "inputValue": "=A2", "$t": "42"}}]
    }}

A missing required field raises MalformedResponseError naming its path;
nothing is defaulted. An absent ``entry`` or ``author`` list is the API's
encoding of "none" and yields an empty tuple.
"""

from typing import Any

from sheetfeed.errors import MalformedResponseError
from sheetfeed.feeds.models import Author, Cell, Feed

TEXT_KEY = "$t"
CELL_KEY = "gs$cell"


def _child(node: Any, key: str, path: str) -> Any:
    if not isinstance(node, dict) or key not in node:
        raise MalformedResponseError(f"{path}.{key}" if path else key)
    return node[key]


def text_of(node: Any, key: str, path: str = "") -> str:
    """Unwrap the text content of ``node[key]``.

    Args:
        node: Decoded JSON object
        key: Field holding a ``{"$t": ...}`` wrapper
        path: Dotted location of ``node``, used in error messages

    Raises:
        MalformedResponseError: If the field or its text is missing
    """
    wrapper = _child(node, key, path)
    return _child(wrapper, TEXT_KEY, f"{path}.{key}" if path else key)


def _list_of(node: dict[str, Any], key: str, path: str) -> list[Any]:
    items = node.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedResponseError(f"{path}.{key}[]")
    return items


def flatten_cell(entry: dict[str, Any], path: str = "entry") -> Cell:
    """Build a Cell from one cells-feed entry."""
    cell = _child(entry, CELL_KEY, path)
    cell_path = f"{path}.{CELL_KEY}"
    return Cell(
        updated=text_of(entry, "updated", path),
        row=_child(cell, "row", cell_path),
        col=_child(cell, "col", cell_path),
        input_value=_child(cell, "inputValue", cell_path),
        value=_child(cell, TEXT_KEY, cell_path),
    )


def flatten_author(author: dict[str, Any], path: str = "author") -> Author:
    """Build an Author from one feed author object."""
    return Author(
        name=text_of(author, "name", path),
        email=text_of(author, "email", path),
    )


def flatten_feed(decoded: dict[str, Any]) -> Feed:
    """Flatten a decoded cells feed into a Feed record.

    Pure function: flattening the same object twice yields equal records.

    Args:
        decoded: Response body as returned by the feed client

    Returns:
        Feed with entries and authors in response order

    Raises:
        MalformedResponseError: If a required field is missing
    """
    feed = _child(decoded, "feed", "")
    return Feed(
        updated=text_of(feed, "updated", "feed"),
        title=text_of(feed, "title", "feed"),
        author=tuple(
            flatten_author(a, f"feed.author[{i}]")
            for i, a in enumerate(_list_of(feed, "author", "feed"))
        ),
        entry=tuple(
            flatten_cell(e, f"feed.entry[{i}]")
            for i, e in enumerate(_list_of(feed, "entry", "feed"))
        ),
    )


def feed_entries(decoded: dict[str, Any]) -> list[dict[str, Any]]:
    """Raw entry list of a decoded feed, without flattening."""
    feed = _child(decoded, "feed", "")
    return _list_of(feed, "entry", "feed")
