"""Cache subsystem — sharded, content-addressed files on disk."""

from shardcache.cache.file_cache import SimpleFileCache
from shardcache.cache.keys import CacheKey, hash_key, key_text, shard_path

__all__ = [
    "SimpleFileCache",
    "CacheKey",
    "hash_key",
    "key_text",
    "shard_path",
]
