"""Retrieval configuration model."""

from dataclasses import dataclass

DEFAULT_CONTEXT_FILE = "context.md"


@dataclass(frozen=True)
class ContextConfig:
    """Tuning knobs for chunking, scoring and prompt assembly.

    Built once at startup (usually from ``config.settings.Settings``) and
    handed to the service. Threshold, top-k and fallback count change which
    excerpts the assistant sees, so they are kept configurable.
    """

    chunk_size: int = 500
    chunk_overlap: int = 50
    min_keyword_length: int = 3
    max_keywords: int = 20
    relevance_threshold: float = 0.05
    max_chunks_per_query: int = 5
    fallback_chunk_count: int = 2
    max_context_tokens: int = 4000
    enable_context_injection: bool = True

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {self.chunk_size}")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError(
                f"chunk_overlap must be in [0, chunk_size), got {self.chunk_overlap} "
                f"with chunk_size {self.chunk_size}"
            )
        if self.min_keyword_length < 1:
            raise ValueError("min_keyword_length must be >= 1")
        if self.max_keywords <= 0:
            raise ValueError("max_keywords must be > 0")
        if not 0.0 <= self.relevance_threshold <= 1.0:
            raise ValueError(
                f"relevance_threshold must be between 0.0 and 1.0, got {self.relevance_threshold}"
            )
        if self.max_chunks_per_query <= 0:
            raise ValueError("max_chunks_per_query must be > 0")
        if self.fallback_chunk_count < 0:
            raise ValueError("fallback_chunk_count must be >= 0")
        if self.max_context_tokens <= 0:
            raise ValueError("max_context_tokens must be > 0")
