"""Flat records produced from decoded feed responses.

All records are frozen: each is built once from a response and handed
to the caller with no shared state or back-references.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FeedLink:
    """One {rel, href} pair from an entry's link list."""

    rel: str
    href: str


@dataclass(frozen=True)
class Cell:
    """A single cell from a cells feed."""

    updated: str
    row: str
    col: str
    input_value: str     # formula or literal as typed
    value: str           # displayed (computed) value

    def to_dict(self) -> dict[str, str]:
        return {
            "updated": self.updated,
            "row": self.row,
            "col": self.col,
            "inputValue": self.input_value,
            "value": self.value,
        }


@dataclass(frozen=True)
class Author:
    """Feed author."""

    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class Feed:
    """One worksheet's flattened cells feed.

    ``author`` and ``entry`` keep the order of the source response.
    """

    updated: str
    title: str
    author: tuple[Author, ...] = field(default_factory=tuple)
    entry: tuple[Cell, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Record with the feed API's camel-cased keys."""
        return {
            "updated": self.updated,
            "title": self.title,
            "author": [a.to_dict() for a in self.author],
            "entry": [c.to_dict() for c in self.entry],
        }


# Ordered, one Feed per worksheet as listed by the API
WorksheetCollection = list[Feed]
