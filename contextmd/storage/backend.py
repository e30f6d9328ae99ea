"""Storage backends for the background document.

The engine only needs three operations from storage: an existence check,
a UTF-8 read and a metadata lookup. Anything providing them can stand in
for the filesystem.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path


@dataclass(frozen=True)
class FileMeta:
    """Size and modification time of a stored document."""

    size_bytes: int
    modified_at: datetime | None = None


class StorageBackend(ABC):
    """Interface for reading the background document.

    Implementations may raise ``OSError`` for I/O failures; callers are
    expected to handle it.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full UTF-8 text stored at ``path``.

        Raises:
            FileNotFoundError: If nothing is stored at ``path``.
        """
        ...

    @abstractmethod
    def stat_meta(self, path: str) -> FileMeta:
        ...

    def describe(self, path: str) -> str:
        """Human-readable location of ``path`` for status output."""
        return path


class FileSystemBackend(StorageBackend):
    """Reads documents from local disk, relative to a base directory."""

    def __init__(self, base_dir: str | Path = "."):
        self._base_dir = Path(base_dir)

    def resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self._base_dir / candidate

    def exists(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def read_text(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def stat_meta(self, path: str) -> FileMeta:
        stat = self.resolve(path).stat()
        return FileMeta(
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    def describe(self, path: str) -> str:
        return str(self.resolve(path))


class InMemoryBackend(StorageBackend):
    """Dict-backed storage for tests and hosts without a filesystem."""

    def __init__(self, files: dict[str, str] | None = None):
        self._files: dict[str, tuple[str, datetime]] = {}
        for path, text in (files or {}).items():
            self.put(path, text)

    def put(self, path: str, text: str, modified_at: datetime | None = None) -> None:
        self._files[path] = (text, modified_at or datetime.now(timezone.utc))

    def delete(self, path: str) -> None:
        self._files.pop(path, None)

    def exists(self, path: str) -> bool:
        return path in self._files

    def read_text(self, path: str) -> str:
        if path not in self._files:
            raise FileNotFoundError(path)
        return self._files[path][0]

    def stat_meta(self, path: str) -> FileMeta:
        if path not in self._files:
            raise FileNotFoundError(path)
        text, modified_at = self._files[path]
        return FileMeta(size_bytes=len(text.encode("utf-8")), modified_at=modified_at)

    def describe(self, path: str) -> str:
        return f"memory://{path}"
