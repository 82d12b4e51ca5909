"""Tests for feed URL construction."""

import pytest

from sheetfeed.errors import MissingParameterError
from sheetfeed.feeds.params import FeedParams
from sheetfeed.feeds.urls import (
    FEED_ROOT,
    build_cells_url,
    build_worksheets_url,
    resolve_cells_url,
)


class TestBuildWorksheetsUrl:
    """Tests for the worksheets-feed URL."""

    def test_defaults_to_public_full(self):
        url = build_worksheets_url(FeedParams(id="key123"))
        assert url == "https://spreadsheets.google.com/feeds/worksheets/key123/public/full"

    @pytest.mark.parametrize(
        "visibility,projection",
        [("public", "basic"), ("private", "full"), ("private", "basic")],
    )
    def test_explicit_visibility_and_projection(self, visibility, projection):
        params = FeedParams(id="key123", visibility=visibility, projection=projection)
        url = build_worksheets_url(params)
        assert url == f"{FEED_ROOT}/worksheets/key123/{visibility}/{projection}"

    def test_worksheet_is_ignored(self):
        url = build_worksheets_url(FeedParams(id="key123", worksheet="od6"))
        assert url == f"{FEED_ROOT}/worksheets/key123/public/full"

    def test_missing_id_raises(self):
        with pytest.raises(MissingParameterError) as exc_info:
            build_worksheets_url(FeedParams())
        assert exc_info.value.field == "id"


class TestBuildCellsUrl:
    """Tests for the cells-feed URL."""

    def test_defaults_to_public_full(self):
        url = build_cells_url(FeedParams(id="key123", worksheet="od6"))
        assert url == "https://spreadsheets.google.com/feeds/cells/key123/od6/public/full"

    def test_explicit_visibility_and_projection(self):
        params = FeedParams(id="key123", worksheet="2", visibility="private", projection="basic")
        assert build_cells_url(params) == f"{FEED_ROOT}/cells/key123/2/private/basic"

    @pytest.mark.parametrize("worksheet", [None, ""])
    def test_missing_worksheet_raises(self, worksheet):
        """No URL with an empty path segment should be produced."""
        with pytest.raises(MissingParameterError) as exc_info:
            build_cells_url(FeedParams(id="key123", worksheet=worksheet))
        assert exc_info.value.field == "worksheet"

    def test_missing_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            build_cells_url(FeedParams(worksheet="od6"))


class TestResolveCellsUrl:
    """Tests for the explicit-URL override."""

    def test_explicit_url_passes_through(self):
        params = FeedParams(url="https://example.com/custom/feed")
        assert resolve_cells_url(params) == "https://example.com/custom/feed"

    def test_explicit_url_wins_over_id(self):
        params = FeedParams(id="key123", worksheet="od6", url="https://example.com/x")
        assert resolve_cells_url(params) == "https://example.com/x"

    def test_builds_when_no_url(self):
        params = FeedParams(id="key123", worksheet="od6")
        assert resolve_cells_url(params) == build_cells_url(params)
