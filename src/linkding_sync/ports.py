from typing import Any, Protocol

from linkding_sync.linkding.models import Bookmark
from linkding_sync.models import EntryKind
from linkding_sync.settings.models import SyncSettings


class KeyValueStore(Protocol):
    def load_data(self) -> dict[str, Any]: ...

    def save_data(self, data: dict[str, Any]) -> None: ...


class FileStore(Protocol):
    async def entry_kind(self, path: str) -> EntryKind | None: ...

    async def create(self, path: str, content: str) -> None: ...

    async def append(self, path: str, content: str) -> None: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class BookmarkFetcher(Protocol):
    async def fetch_bookmarks(self, settings: SyncSettings) -> list[Bookmark]: ...


class Scheduler(Protocol):
    def start(self, interval_minutes: int) -> None: ...

    def reschedule(self, interval_minutes: int) -> None: ...

    def stop(self) -> None: ...

    async def wait_idle(self) -> None: ...
