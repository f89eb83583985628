"""File backend — folder and file paths the cache reads and writes through."""

from shardcache.storage.paths import FilePath, FolderPath, StoragePath

__all__ = ["FilePath", "FolderPath", "StoragePath"]
