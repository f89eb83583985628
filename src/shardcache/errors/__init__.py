"""Error handling — the shardcache exception hierarchy."""

from shardcache.errors.exceptions import (
    CacheIOError,
    PathDerivationError,
    ProvisioningError,
    ShardCacheError,
)

__all__ = [
    "ShardCacheError",
    "CacheIOError",
    "ProvisioningError",
    "PathDerivationError",
]
