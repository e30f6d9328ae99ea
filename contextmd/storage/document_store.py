"""Loads the background document from a storage backend."""

import logging

from contextmd.models.config import DEFAULT_CONTEXT_FILE
from contextmd.models.document import SourceDocument
from contextmd.storage.backend import StorageBackend

logger = logging.getLogger(__name__)


class DocumentStore:
    """Reads the raw background text and its metadata.

    No parsing and no caching happens here. Every failure is logged and
    reported as "no document" so a broken file never reaches the caller
    as an exception.
    """

    def __init__(self, backend: StorageBackend, path: str = DEFAULT_CONTEXT_FILE):
        self._backend = backend
        self._path = path

    @property
    def path(self) -> str:
        return self._backend.describe(self._path)

    def exists(self) -> bool:
        try:
            return self._backend.exists(self._path)
        except OSError as e:
            logger.warning("Failed to check context file %s: %s", self.path, e)
            return False

    def load(self) -> SourceDocument | None:
        """Read the document, or return None if it is missing or blank."""
        if not self.exists():
            logger.info("No context file at %s", self.path)
            return None

        try:
            text = self._backend.read_text(self._path)
            meta = self._backend.stat_meta(self._path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read context file %s: %s", self.path, e)
            return None

        document = SourceDocument(
            raw_text=text,
            size_bytes=meta.size_bytes,
            modified_at=meta.modified_at,
        )
        if not document.valid:
            logger.info("Context file %s is empty", self.path)
            return None

        logger.debug("Loaded context file %s (%d bytes)", self.path, document.size_bytes)
        return document
