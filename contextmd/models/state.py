"""Service state and statistics models."""

from dataclasses import dataclass
from datetime import datetime

from contextmd.models.chunk import Chunk
from contextmd.models.document import SourceDocument


@dataclass(frozen=True)
class ServiceState:
    """Everything the context service knows about the current document.

    Replaced as a whole on refresh and cleanup so readers never see a mix
    of two document versions.
    """

    current_document: SourceDocument | None = None
    chunks: tuple[Chunk, ...] = ()
    last_refresh_time: datetime | None = None
    initialized: bool = False

    @property
    def available(self) -> bool:
        return (
            self.current_document is not None
            and self.current_document.valid
            and len(self.chunks) > 0
        )


@dataclass(frozen=True)
class ContextStats:
    """Snapshot of the cached document for status displays."""

    available: bool
    chunk_count: int = 0
    file_size_bytes: int = 0
    last_modified: datetime | None = None
    last_refreshed: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "chunk_count": self.chunk_count,
            "file_size_bytes": self.file_size_bytes,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "last_refreshed": self.last_refreshed.isoformat() if self.last_refreshed else None,
        }
