"""Content-addressed file cache: one file per key, named by the key's hash."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from shardcache.cache.keys import CacheKey, relative_entry_path
from shardcache.storage.paths import FilePath, FolderPath

logger = logging.getLogger(__name__)

Payload = bytes | bytearray | memoryview | str


@dataclass(frozen=True)
class SimpleFileCache:
    """A simple file cache.

    Keys are ``str`` or objects implementing ``CacheKey``. Each entry lives at
    ``<root>/<hex[0:4]>/<hex[4:64]>.cache`` where ``hex`` is the SHA256 of the
    key text. Hash collisions are not handled.

    Concurrent writers on the same root are not coordinated; callers needing
    more than "last completed put wins" must serialize access themselves.
    """

    root: FolderPath

    @classmethod
    def from_folder(cls, root: FolderPath | str | os.PathLike[str]) -> SimpleFileCache:
        """Wrap an existing folder. Performs no I/O."""
        if not isinstance(root, FolderPath):
            root = FolderPath.of(root)
        return cls(root)

    @classmethod
    def temporary(cls) -> SimpleFileCache:
        """Create a cache in a new temp folder."""
        return cls(FolderPath.temp())

    def file_path(self, key: str | CacheKey) -> FilePath:
        """Get the file path for the key."""
        return self.root.path.with_appended(relative_entry_path(key)).to_file()

    def put(self, key: str | CacheKey, data: Payload) -> None:
        """Put the data into the cache, replacing any previous entry."""
        payload = _payload_bytes(data)
        file = self.file_path(key)
        file.delete_if_exists()
        file.write_data(payload)
        logger.debug("Cached %d bytes at %s", len(payload), file)

    def get(self, key: str | CacheKey) -> bytes | None:
        """Get the data in the cache, or None if nothing was put for the key."""
        file = self.file_path(key)
        data = file.read_if_exists()
        logger.debug("Cache %s for %s", "miss" if data is None else "hit", file)
        return data


def _payload_bytes(data: Payload) -> bytes | bytearray | memoryview:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return data
    raise TypeError(f"Cache data must be bytes-like or str, got {type(data).__name__}")
