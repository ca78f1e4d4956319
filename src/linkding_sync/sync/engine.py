"""Sync engine: fetch one page of bookmarks and append them to the destination note."""

import structlog

from linkding_sync.exceptions import DestinationError, FetchError
from linkding_sync.models import EntryKind, SyncReport
from linkding_sync.ports import BookmarkFetcher, FileStore, Notifier
from linkding_sync.settings.models import SyncSettings
from linkding_sync.sync.formatter import format_bookmark

logger = structlog.get_logger(__name__)


class SyncEngine:
    def __init__(
        self,
        fetcher: BookmarkFetcher,
        file_store: FileStore,
        notifier: Notifier,
    ):
        self._fetcher = fetcher
        self._file_store = file_store
        self._notifier = notifier

    async def sync_bookmarks(self, settings: SyncSettings) -> SyncReport:
        """Run one sync: fetch, resolve the destination, then append each bookmark.

        A fetch or destination failure aborts before anything is written. An
        append failure stops the loop but keeps the blocks already appended.
        No failure is raised to the caller; it is logged, posted as a notice
        and reported in the returned ``SyncReport``.
        """
        try:
            bookmarks = await self._fetcher.fetch_bookmarks(settings)
        except FetchError as e:
            return self._fail("sync_fetch_failed", e)

        self._notifier.notify(f"Fetched {len(bookmarks)} bookmarks from Linkding")

        path = settings.destination_path
        try:
            await self._resolve_destination(path)
        except DestinationError as e:
            return self._fail("sync_destination_invalid", e, fetched=len(bookmarks))

        appended = 0
        for bookmark in bookmarks:
            try:
                await self._file_store.append(path, format_bookmark(bookmark))
            except (OSError, ValueError) as e:
                return self._fail(
                    "sync_append_failed",
                    e,
                    fetched=len(bookmarks),
                    appended=appended,
                )
            appended += 1

        logger.info("sync_completed", path=path, appended=appended)
        return SyncReport(ok=True, fetched=len(bookmarks), appended=appended)

    async def _resolve_destination(self, path: str) -> None:
        try:
            kind = await self._file_store.entry_kind(path)
            if kind is None:
                await self._file_store.create(path, "")
                kind = await self._file_store.entry_kind(path)
                logger.info("destination_created", path=path)
        except (OSError, ValueError) as e:
            # ValueError covers paths the filesystem cannot represent, e.g. NUL bytes
            raise DestinationError(f"Could not resolve '{path}': {e}") from e

        if kind is not EntryKind.FILE:
            raise DestinationError(f"Path '{path}' is not a file")

    def _fail(
        self, event: str, error: Exception, fetched: int = 0, appended: int = 0
    ) -> SyncReport:
        logger.error(event, error=str(error), appended=appended)
        self._notifier.notify(f"Linkding sync failed: {error}")
        return SyncReport(ok=False, fetched=fetched, appended=appended, error=str(error))
