"""Request parameters for feed operations.

FeedParams carries the identifiers used to build a feed URL plus the
query-style filter options the feed API understands. Filter options are
opaque here: they are never validated, only renamed to their wire names,
stringified and forwarded. Unknown keys are kept and forwarded the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Python field name -> query parameter name on the wire
QUERY_FIELDS: dict[str, str] = {
    "min_row": "min-row",
    "max_row": "max-row",
    "min_col": "min-col",
    "max_col": "max-col",
    "orderby": "orderby",
    "reverse": "reverse",
    "sq": "sq",
    "alt": "alt",
}


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FeedParams(BaseModel):
    """Parameters for get_cells / get_worksheets.

    Accepts both the Python names and the hyphenated wire names, so a dict
    such as ``{"id": "abc", "min-row": 2}`` validates directly. Filter
    options take any value; extra keys are kept as additional query
    parameters.

    Attributes:
        id: Spreadsheet key
        worksheet: Worksheet id (required for the cells feed)
        visibility: 'public' or 'private' (URL default: public)
        projection: 'full' or 'basic' (URL default: full)
        url: Explicit feed URL; when set, URL building is skipped
        min_row, max_row, min_col, max_col: Cell range bounds
        orderby: Column to sort by
        reverse: Reverse the sort order
        sq: Structured query
        alt: Response format
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    id: str | None = None
    worksheet: str | None = None
    visibility: str | None = None
    projection: str | None = None
    url: str | None = None

    min_row: Any = Field(default=None, alias="min-row")
    max_row: Any = Field(default=None, alias="max-row")
    min_col: Any = Field(default=None, alias="min-col")
    max_col: Any = Field(default=None, alias="max-col")
    orderby: Any = None
    reverse: Any = None
    sq: Any = None
    alt: Any = None

    def query_params(self) -> dict[str, str]:
        """Filter options and extra keys that are set, keyed by wire name.

        Returns:
            Dict suitable for httpx ``params=``. Booleans render as
            'true' / 'false'; everything else is stringified.
        """
        items = [(wire, getattr(self, name)) for name, wire in QUERY_FIELDS.items()]
        items.extend((self.model_extra or {}).items())

        query: dict[str, str] = {}
        for wire, value in items:
            if value is None:
                continue
            query[wire] = _render(value)
        return query

    def with_url(self, url: str) -> "FeedParams":
        """Shallow copy with the URL overridden."""
        return self.model_copy(update={"url": url})
