"""Vault-relative text file access for the destination note."""

import asyncio
from pathlib import Path

from linkding_sync.exceptions import DestinationError
from linkding_sync.models import EntryKind


class VaultFileStore:
    def __init__(self, root: str | Path):
        self._root = Path(root)

    def resolve(self, path: str) -> Path:
        """Map a vault-relative path to a filesystem path inside the vault.

        Raises:
            DestinationError: If the path points outside the vault root.
        """
        root = self._root.resolve()
        target = (root / path).resolve()
        if not target.is_relative_to(root):
            raise DestinationError(f"Path '{path}' is outside the vault")
        return target

    async def entry_kind(self, path: str) -> EntryKind | None:
        target = self.resolve(path)
        if target.is_file():
            return EntryKind.FILE
        if target.exists():
            return EntryKind.DIRECTORY
        return None

    async def create(self, path: str, content: str) -> None:
        await asyncio.to_thread(self._write, self.resolve(path), content, "x")

    async def append(self, path: str, content: str) -> None:
        await asyncio.to_thread(self._write, self.resolve(path), content, "a")

    @staticmethod
    def _write(target: Path, content: str, mode: str) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open(mode, encoding="utf-8", newline="") as f:
            f.write(content)
