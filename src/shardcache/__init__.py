"""shardcache — a content-addressed file cache keyed by text."""

from shardcache.cache import CacheKey, SimpleFileCache
from shardcache.errors import (
    CacheIOError,
    PathDerivationError,
    ProvisioningError,
    ShardCacheError,
)
from shardcache.storage import FilePath, FolderPath

__all__ = [
    "SimpleFileCache",
    "CacheKey",
    "FolderPath",
    "FilePath",
    "ShardCacheError",
    "CacheIOError",
    "ProvisioningError",
    "PathDerivationError",
]
