"""Minimal file backend over the local filesystem.

Paths are kept as plain strings so that composed cache paths are exact and
predictable. A path ending in ``/`` is folder-shaped; anything else may be
coerced to a file path.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from shardcache.errors.exceptions import CacheIOError, PathDerivationError, ProvisioningError

logger = logging.getLogger(__name__)

_SEP = "/"
_TEMP_PREFIX = "shardcache-"


@dataclass(frozen=True)
class StoragePath:
    """A raw path string."""

    value: str

    @property
    def as_str(self) -> str:
        return self.value

    @property
    def is_folder(self) -> bool:
        return self.value.endswith(_SEP)

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    def with_appended(self, relative: str) -> StoragePath:
        """Return a new path with ``relative`` appended verbatim."""
        return StoragePath(self.value + relative)

    def to_file(self) -> FilePath:
        """Interpret this path as a file path.

        Fails when the path is folder-shaped, names an existing directory, or
        its nearest existing ancestor is not a directory.
        """
        if self.is_folder:
            raise PathDerivationError(f"Path is folder-shaped: {self.value}", path=self.value)
        if os.path.isdir(self.value):
            raise PathDerivationError(
                f"Path is an existing directory: {self.value}", path=self.value
            )
        for parent in Path(self.value).parents:
            if os.path.exists(parent):
                if not os.path.isdir(parent):
                    raise PathDerivationError(
                        f"Ancestor {parent} of {self.value} is not a directory",
                        path=self.value,
                    )
                break
        return FilePath(self)


@dataclass(frozen=True)
class FolderPath:
    """A folder-shaped path, always carrying a trailing separator."""

    path: StoragePath

    def __post_init__(self) -> None:
        if not self.path.is_folder:
            raise ValueError(f"Folder path must end with '{_SEP}': {self.path.value!r}")

    @classmethod
    def of(cls, location: str | os.PathLike[str]) -> FolderPath:
        """Build a folder path from any location, adding the trailing separator.

        An empty location is the current directory, as with ``Path("")``.
        """
        value = os.fspath(location) or "."
        if not value.endswith(_SEP):
            value += _SEP
        return cls(StoragePath(value))

    @classmethod
    def temp(cls) -> FolderPath:
        """Create a fresh, process-unique folder under the system temp dir."""
        try:
            location = tempfile.mkdtemp(prefix=_TEMP_PREFIX)
        except OSError as e:
            raise ProvisioningError(f"Failed to create temp folder: {e}", original=e) from e
        logger.debug("Allocated temp folder %s", location)
        return cls.of(location)

    @property
    def as_str(self) -> str:
        return self.path.value

    def __str__(self) -> str:
        return self.path.value


@dataclass(frozen=True)
class FilePath:
    """A file path with read-if-exists, write and delete-if-exists."""

    path: StoragePath

    @property
    def as_str(self) -> str:
        return self.path.value

    def __str__(self) -> str:
        return self.path.value

    def __fspath__(self) -> str:
        return self.path.value

    def delete_if_exists(self) -> None:
        try:
            Path(self.path.value).unlink(missing_ok=True)
        except OSError as e:
            raise CacheIOError(
                f"Failed to delete {self.path}: {e}", path=self.path.value, original=e
            ) from e

    def write_data(self, data: bytes | bytearray | memoryview) -> None:
        """Create or overwrite the file, creating parent folders as needed."""
        target = Path(self.path.value)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(data)
        except OSError as e:
            raise CacheIOError(
                f"Failed to write {self.path}: {e}", path=self.path.value, original=e
            ) from e

    def read_if_exists(self) -> bytes | None:
        """Return the full file contents, or None if the file does not exist."""
        try:
            with open(self.path.value, "rb") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheIOError(
                f"Failed to read {self.path}: {e}", path=self.path.value, original=e
            ) from e
