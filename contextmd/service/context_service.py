"""Context service: owns the cached background document and answers queries.

Wires together: document store → chunker → keyword extraction → scorer →
prompt builder.

The service is the only stateful piece. It holds one ``ServiceState`` and
replaces it in a single assignment on every refresh or cleanup. It runs no
threads and does not watch the file; callers decide when to refresh and
must serialize calls if they share an instance across threads.
"""

import logging
from datetime import datetime, timezone

from contextmd.models.config import ContextConfig
from contextmd.models.state import ContextStats, ServiceState
from contextmd.processing.chunker import build_chunks
from contextmd.prompt.builder import build_context_prompt
from contextmd.retrieval.scorer import select_chunks
from contextmd.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)


class ContextService:
    """Retrieves background-document excerpts relevant to a chat message.

    Nothing on the public surface raises: a missing, empty or unreadable
    document shows up as ``is_available() == False`` and ``None`` from
    ``query_context``.
    """

    def __init__(self, store: DocumentStore, config: ContextConfig | None = None):
        self._store = store
        self._config = config or ContextConfig()
        self._state = ServiceState()

    @property
    def config(self) -> ContextConfig:
        return self._config

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def context_file_path(self) -> str:
        return self._store.path

    @property
    def initialized(self) -> bool:
        return self._state.initialized

    def initialize(self) -> None:
        """Load the document once. Later calls are no-ops until ``cleanup``."""
        if self._state.initialized:
            return
        logger.info("Initializing context service from %s", self.context_file_path)
        self.refresh()

    def refresh(self) -> bool:
        """Reload and re-chunk the document. Returns availability afterwards."""
        now = datetime.now(timezone.utc)
        try:
            document = self._store.load()
            if document is None:
                self._state = ServiceState(last_refresh_time=now, initialized=True)
                logger.info("No context file found or file is empty")
            else:
                chunks = build_chunks(document.raw_text, self._config)
                self._state = ServiceState(
                    current_document=document,
                    chunks=tuple(chunks),
                    last_refresh_time=now,
                    initialized=True,
                )
                logger.info("Context refreshed: %d chunks processed", len(chunks))
        except Exception:
            logger.warning("Error refreshing context", exc_info=True)
            self._state = ServiceState(last_refresh_time=now, initialized=True)
        return self.is_available()

    def force_refresh(self) -> bool:
        return self.refresh()

    def is_available(self) -> bool:
        return self._state.available

    def query_context(self, query: str) -> str | None:
        """Build the context prompt for ``query``.

        Returns None when context injection is disabled, no usable document
        is loaded, or no chunk was selected.
        """
        try:
            if not self._config.enable_context_injection:
                logger.debug("Context injection disabled")
                return None

            if not self._state.initialized:
                self.initialize()

            state = self._state
            if not state.available:
                logger.info("Context not available")
                return None

            logger.debug("Processing query %r against %d chunks", query, len(state.chunks))
            selected = select_chunks(
                query,
                state.chunks,
                threshold=self._config.relevance_threshold,
                top_k=self._config.max_chunks_per_query,
                fallback_count=self._config.fallback_chunk_count,
                min_keyword_length=self._config.min_keyword_length,
                max_keywords=self._config.max_keywords,
            )
            if not selected:
                logger.info("No relevant context found for query")
                return None

            prompt = build_context_prompt(query, selected)
            logger.info(
                "Found %d relevant context chunks (%d chars)", len(selected), len(prompt)
            )
            return prompt
        except Exception:
            logger.warning("Error getting context for query", exc_info=True)
            return None

    def stats(self) -> ContextStats:
        """Describe the cached document without touching storage."""
        state = self._state
        if not state.available:
            return ContextStats(available=False, last_refreshed=state.last_refresh_time)

        document = state.current_document
        return ContextStats(
            available=True,
            chunk_count=len(state.chunks),
            file_size_bytes=document.size_bytes,
            last_modified=document.modified_at,
            last_refreshed=state.last_refresh_time,
        )

    def cleanup(self) -> None:
        """Drop the cached document and return to the uninitialized state."""
        self._state = ServiceState()
        logger.info("Context service cleaned up")
