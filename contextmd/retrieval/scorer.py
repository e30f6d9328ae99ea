"""Keyword-overlap relevance scoring with a below-threshold fallback.

A chunk's score is the fraction of query keywords that match one of the
chunk's keywords, where "match" means either keyword contains the other.
When nothing clears the threshold the best few chunks are returned anyway,
so the assistant gets some grounding context instead of none.
"""

import logging
from typing import Sequence

from contextmd.models.chunk import Chunk, ScoredChunk
from contextmd.processing.keywords import MAX_KEYWORDS, MIN_KEYWORD_LENGTH, extract_keywords

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.05
DEFAULT_TOP_K = 5
DEFAULT_FALLBACK_COUNT = 2


def score_chunk(query_keywords: Sequence[str], chunk_keywords: Sequence[str]) -> float:
    """Fraction of ``query_keywords`` matched by substring against ``chunk_keywords``.

    Returns 0.0 if either side is empty.
    """
    if not query_keywords or not chunk_keywords:
        return 0.0

    lowered = [k.lower() for k in chunk_keywords]
    matched = 0
    for keyword in query_keywords:
        q = keyword.lower()
        if any(q in k or k in q for k in lowered):
            matched += 1

    return matched / len(query_keywords)


def score_chunks(query_keywords: Sequence[str], chunks: Sequence[Chunk]) -> list[ScoredChunk]:
    """Score every chunk, keeping document order."""
    return [
        ScoredChunk(
            chunk=chunk,
            relevance_score=score_chunk(query_keywords, chunk.keywords),
            position=position,
        )
        for position, chunk in enumerate(chunks)
    ]


def rank(scored: Sequence[ScoredChunk]) -> list[ScoredChunk]:
    """Sort by score descending; ties keep document order."""
    return sorted(scored, key=lambda s: (-s.relevance_score, s.position))


def select_chunks(
    query: str,
    chunks: Sequence[Chunk],
    threshold: float = DEFAULT_THRESHOLD,
    top_k: int = DEFAULT_TOP_K,
    fallback_count: int = DEFAULT_FALLBACK_COUNT,
    min_keyword_length: int = MIN_KEYWORD_LENGTH,
    max_keywords: int = MAX_KEYWORDS,
) -> list[ScoredChunk]:
    """Pick the chunks most relevant to ``query``.

    Chunks scoring strictly above ``threshold`` are ranked and the top
    ``top_k`` returned. If none qualify but chunks exist, the top
    ``fallback_count`` (never more than ``top_k``) of the whole ranked set
    are returned regardless of score.
    """
    if not chunks:
        return []

    query_keywords = extract_keywords(
        query, min_length=min_keyword_length, max_keywords=max_keywords
    )
    logger.debug("Query keywords: %s", query_keywords)

    scored = score_chunks(query_keywords, chunks)
    for s in scored:
        logger.debug(
            "Chunk %s (section=%s) score=%.3f keywords=%s",
            s.chunk.id, s.section_title, s.relevance_score, list(s.chunk.keywords[:5]),
        )

    relevant = rank([s for s in scored if s.relevance_score > threshold])[:top_k]

    if not relevant:
        relevant = rank(scored)[:min(fallback_count, top_k)]
        logger.info(
            "No chunks above threshold %.2f, falling back to top %d",
            threshold, len(relevant),
        )

    logger.debug("Selected %d chunks", len(relevant))
    return relevant
