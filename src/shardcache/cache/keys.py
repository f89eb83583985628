"""Cache key derivation — key text, SHA256 digest, sharded relative path."""

from __future__ import annotations

import hashlib
from typing import Protocol, runtime_checkable

SHARD_WIDTH = 4
FILE_EXTENSION = ".cache"
DIGEST_HEX_LENGTH = 64


@runtime_checkable
class CacheKey(Protocol):
    """Anything that can name a cache entry by a stable text form."""

    def to_cache_key_string(self) -> str: ...


def key_text(key: str | CacheKey) -> str:
    """Return the canonical text of a key.

    Plain strings are used verbatim. Other objects must implement
    ``to_cache_key_string``; there is no fallback to ``str()``. Text that
    cannot be encoded as UTF-8 (lone surrogates) is rejected.
    """
    if isinstance(key, str):
        text = key
    elif isinstance(key, CacheKey):
        text = key.to_cache_key_string()
        if not isinstance(text, str):
            raise TypeError(
                f"{type(key).__name__}.to_cache_key_string() returned "
                f"{type(text).__name__}, expected str"
            )
    else:
        raise TypeError(
            f"Cache keys must be str or implement to_cache_key_string(), got {type(key).__name__}"
        )
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"Cache key text is not valid UTF-8: {text!r}") from e
    return text


def hash_key(text: str) -> str:
    """Lowercase hex SHA256 of the UTF-8 bytes of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def shard_path(digest: str) -> str:
    """Relative entry path for a hex digest: ``<hex[0:4]>/<hex[4:]>.cache``."""
    if len(digest) != DIGEST_HEX_LENGTH:
        raise ValueError(f"Expected a {DIGEST_HEX_LENGTH}-char hex digest, got {len(digest)}")
    return f"{digest[:SHARD_WIDTH]}/{digest[SHARD_WIDTH:]}{FILE_EXTENSION}"


def relative_entry_path(key: str | CacheKey) -> str:
    """Relative path of the entry for ``key`` under any cache root."""
    return shard_path(hash_key(key_text(key)))
