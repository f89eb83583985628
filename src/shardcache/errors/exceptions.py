"""Custom exception hierarchy for shardcache."""

from __future__ import annotations

from typing import Any


class ShardCacheError(Exception):
    """Base exception for all shardcache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class CacheIOError(ShardCacheError):
    """A read, write or delete against the cache folder failed.

    Examples: permission denied, disk full, a regular file where a shard
    directory should be. The underlying ``OSError`` is kept on ``original``.
    """

    def __init__(
        self,
        message: str = "",
        path: str | None = None,
        original: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class ProvisioningError(CacheIOError):
    """A fresh temporary cache folder could not be allocated."""


class PathDerivationError(ShardCacheError):
    """The composed cache path cannot be used as a file path.

    Usually a misconfigured root: the root is a regular file, or a directory
    already sits where an entry file belongs.
    """

    def __init__(self, message: str = "", path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
