"""Aggregator — worksheet list → per-worksheet cells feeds.

get_worksheets fetches the worksheet list of a spreadsheet, then fetches
and flattens each worksheet's cells feed concurrently. Results are
collected by worksheet position, so completion order never affects the
output. The first failure fails the whole call; outstanding branches are
cancelled and awaited before the error propagates.

Usage:
    from sheetfeed import FeedParams, get_worksheets

    feeds = await get_worksheets(FeedParams(id="1AbC..."))
    for feed in feeds:
        print(feed.title, len(feed.entry))
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager
from functools import partial
from typing import Any, TypeVar

from pydantic import ValidationError

from sheetfeed.clients.sheets import Credentials, SheetsFeedClient
from sheetfeed.config import settings
from sheetfeed.errors import InvalidParameterError
from sheetfeed.feeds.flattener import feed_entries, flatten_feed
from sheetfeed.feeds.links import SchemaType, require_link
from sheetfeed.feeds.models import Feed, WorksheetCollection
from sheetfeed.feeds.params import FeedParams
from sheetfeed.feeds.urls import build_worksheets_url, resolve_cells_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

ParamsLike = FeedParams | dict[str, Any]


def _as_params(params: ParamsLike) -> FeedParams:
    if isinstance(params, FeedParams):
        return params
    try:
        return FeedParams.model_validate(params)
    except ValidationError as e:
        raise InvalidParameterError(str(e)) from e


@asynccontextmanager
async def _client_scope(
    credentials: Credentials | None,
    client: SheetsFeedClient | None,
) -> AsyncIterator[SheetsFeedClient]:
    """Yield the caller's client, or open one for the duration of the call."""
    if client is not None:
        yield client
        return
    async with SheetsFeedClient(credentials=credentials) as owned:
        yield owned


async def gather_ordered(
    factories: Sequence[Callable[[], Awaitable[T]]],
    max_concurrency: int | None = None,
) -> list[T]:
    """Run zero-arg async factories concurrently, results in input order.

    Each factory is called only once its slot is admitted by the
    concurrency cap, so branches cancelled while waiting never create
    an awaitable.

    Fails fast: as soon as one raises, the remaining tasks are cancelled
    and awaited, then that error is raised. When several have failed by
    the time the wait returns, the lowest-positioned one wins.

    Args:
        factories: Callables returning an awaitable, one per result slot
        max_concurrency: Max branches in flight (None = unbounded)

    Returns:
        Results indexed like ``factories``
    """
    if not factories:
        return []

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _run(factory: Callable[[], Awaitable[T]]) -> T:
        if semaphore is None:
            return await factory()
        async with semaphore:
            return await factory()

    tasks = [asyncio.ensure_future(_run(factory)) for factory in factories]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and task.exception() is not None:
                raise task.exception()
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    return [task.result() for task in tasks]


async def get_cells(
    params: ParamsLike,
    credentials: Credentials | None = None,
    client: SheetsFeedClient | None = None,
) -> Feed:
    """Fetch and flatten one worksheet's cells feed.

    Uses ``params.url`` as-is when set, otherwise builds the cells URL
    from ``id`` / ``worksheet`` / ``visibility`` / ``projection``.

    Args:
        params: FeedParams or a mapping accepted by FeedParams
        credentials: Auth for the client opened here (default: from settings).
            Ignored when ``client`` is given; that client keeps its own.
        client: Open client to reuse (default: one is opened and closed here)

    Raises:
        InvalidParameterError: ``params`` could not be read as FeedParams
        MissingParameterError: No url, and id or worksheet missing
        TransportError: The request failed
        MalformedResponseError: The response lacks a required field
    """
    params = _as_params(params)
    url = resolve_cells_url(params)

    async with _client_scope(credentials, client) as feed_client:
        decoded = await feed_client.fetch(url, params)

    feed = flatten_feed(decoded)
    logger.debug("%s: %d cells from %s", feed.title, len(feed.entry), url)
    return feed


async def get_worksheets(
    params: ParamsLike,
    credentials: Credentials | None = None,
    client: SheetsFeedClient | None = None,
    max_concurrency: int | None = None,
) -> WorksheetCollection:
    """Fetch every worksheet of a spreadsheet as a flattened Feed.

    Args:
        params: Must carry ``id``; filter options apply to every cells feed
        credentials: Auth for the client opened here, shared by all
            requests (default: from settings). Ignored when ``client`` is
            given; that client keeps its own.
        client: Open client to reuse (default: one is opened and closed here)
        max_concurrency: Cap on concurrent worksheet fetches
            (default: settings.max_concurrency, None = unbounded)

    Returns:
        One Feed per worksheet, in the order the API lists them

    Raises:
        InvalidParameterError: ``params`` could not be read as FeedParams
        MissingParameterError: ``id`` missing
        TransportError: Any request failed
        MalformedResponseError: Any response lacks a required field
        LinkNotFoundError: A worksheet entry has no cells-feed link
    """
    params = _as_params(params)
    url = build_worksheets_url(params)
    if max_concurrency is None:
        max_concurrency = settings.max_concurrency

    async with _client_scope(credentials, client) as feed_client:
        listing = await feed_client.fetch(url, params)
        entries = feed_entries(listing)
        links = [require_link(entry, SchemaType.CELLS_FEED) for entry in entries]
        logger.debug("%s: fetching %d worksheets", params.id, len(links))

        feeds = await gather_ordered(
            [partial(get_cells, params.with_url(link), client=feed_client) for link in links],
            max_concurrency=max_concurrency,
        )

    logger.info("%s: fetched %d worksheets", params.id, len(feeds))
    return feeds


# Short aliases
worksheets = get_worksheets
worksheet = get_cells
