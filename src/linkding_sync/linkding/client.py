"""Linkding bookmark fetcher using httpx."""

from typing import Any

import httpx
import structlog

from linkding_sync.exceptions import FetchError
from linkding_sync.linkding.models import Bookmark
from linkding_sync.settings.models import SyncSettings

logger = structlog.get_logger(__name__)


def bookmarks_endpoint(settings: SyncSettings) -> str:
    return f"{settings.instance_url.rstrip('/')}/api/bookmarks/"


def request_params(settings: SyncSettings) -> dict[str, str | int]:
    params: dict[str, str | int] = {
        "limit": settings.fetch_limit,
        "offset": settings.fetch_offset,
    }
    if settings.search_query:
        params["q"] = settings.search_query
    return params


def request_headers(settings: SyncSettings) -> dict[str, str]:
    return {
        "Authorization": f"Token {settings.api_key}",
        "Content-Type": "application/json",
    }


def parse_results(payload: Any) -> list[Bookmark]:
    """Extract bookmarks from a decoded response body.

    Anything other than an object with a ``results`` list yields no
    bookmarks. Non-object entries inside ``results`` are skipped.
    """
    if not isinstance(payload, dict):
        return []
    results = payload.get("results")
    if not isinstance(results, list):
        return []

    bookmarks = []
    for record in results:
        if not isinstance(record, dict):
            logger.warning("bookmark_record_skipped", record=record)
            continue
        bookmarks.append(Bookmark.from_api(record))
    return bookmarks


class HttpBookmarkFetcher:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def fetch_bookmarks(self, settings: SyncSettings) -> list[Bookmark]:
        """Request one page of bookmarks.

        Raises:
            FetchError: On connection failure, a non-2xx status or a body
                that is not valid JSON.
        """
        url = bookmarks_endpoint(settings)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    url,
                    params=request_params(settings),
                    headers=request_headers(settings),
                )
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"request to {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(f"response from {url} is not valid JSON") from e

        bookmarks = parse_results(payload)
        logger.info("bookmarks_fetched", url=url, count=len(bookmarks))
        return bookmarks
