"""Chunk data models."""

import hashlib
from dataclasses import dataclass, field


def make_chunk_id(chunk_index: int, text: str) -> str:
    """Derive a stable chunk id from its position and text."""
    digest = hashlib.sha1(f"{chunk_index}:{text}".encode("utf-8")).hexdigest()
    return f"chunk-{chunk_index}-{digest[:12]}"


@dataclass(frozen=True)
class Chunk:
    """A bounded window of the background document with its keywords."""

    text: str
    chunk_index: int
    keywords: tuple[str, ...] = ()
    section_title: str | None = None
    id: str = field(default="")

    def __post_init__(self):
        if not self.text.strip():
            raise ValueError("text must not be empty")
        if self.chunk_index < 0:
            raise ValueError("chunk_index must be >= 0")
        if not isinstance(self.keywords, tuple):
            object.__setattr__(self, "keywords", tuple(self.keywords))
        if not self.id:
            object.__setattr__(self, "id", make_chunk_id(self.chunk_index, self.text))

    @property
    def word_count(self) -> int:
        return len(self.text.split())


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk paired with its relevance to one query."""

    chunk: Chunk
    relevance_score: float
    position: int

    def __post_init__(self):
        if not 0.0 <= self.relevance_score <= 1.0:
            raise ValueError(f"relevance_score must be between 0.0 and 1.0, got {self.relevance_score}")

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def section_title(self) -> str | None:
        return self.chunk.section_title
