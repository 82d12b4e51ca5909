"""Exception hierarchy for sheetfeed.

Every failure surfaced by the public operations derives from SheetFeedError,
so callers can catch one type or discriminate by subclass:

    SheetFeedError
    ├── TransportError          HTTP / network / decoding failure
    ├── MalformedResponseError  decoded feed is missing an expected field
    ├── LinkNotFoundError       entry has no link of the requested schema
    ├── MissingParameterError   a required request parameter was not given
    └── InvalidParameterError   request parameters are not a usable mapping
"""


class SheetFeedError(Exception):
    """Base exception for sheetfeed errors."""


class TransportError(SheetFeedError):
    """The HTTP layer failed to deliver a decoded feed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class MalformedResponseError(SheetFeedError):
    """A decoded feed lacks a field the flattener requires."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Malformed feed response: missing '{path}'")
        self.path = path


class LinkNotFoundError(SheetFeedError):
    """An entry carries no link with the requested relation tag."""

    def __init__(self, schema: str, title: str | None = None) -> None:
        where = f" in entry '{title}'" if title else ""
        super().__init__(f"No link with rel '{schema}'{where}")
        self.schema = schema
        self.title = title


class MissingParameterError(SheetFeedError, ValueError):
    """A parameter needed to build a feed URL is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required parameter: '{field}'")
        self.field = field


class InvalidParameterError(SheetFeedError, ValueError):
    """Request parameters could not be read into FeedParams."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid feed parameters: {detail}")
        self.detail = detail
