"""Keyword extraction shared by chunk indexing and query scoring.

Chunk keywords are computed when the document is loaded and query keywords
when a question arrives, so both must go through this same pure function.
"""

import re

MIN_KEYWORD_LENGTH = 3
MAX_KEYWORDS = 20

STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "from", "up", "about", "into", "through", "during", "before", "after", "above", "below",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can",
    "this", "that", "these", "those",
])

_MARKDOWN_CHARS = re.compile(r"[#*`_\[\]()]")
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Strip markdown and punctuation, lowercase, and collapse whitespace."""
    text = _MARKDOWN_CHARS.sub(" ", text)
    text = text.lower()
    text = _NON_WORD.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def extract_keywords(
    text: str,
    min_length: int = MIN_KEYWORD_LENGTH,
    max_keywords: int = MAX_KEYWORDS,
) -> list[str]:
    """Return the unique keywords of ``text`` in first-seen order.

    Tokens shorter than ``min_length`` and stop words are dropped; the
    result is truncated to ``max_keywords`` entries.
    """
    seen = set()
    keywords = []
    for word in normalize_text(text).split():
        if len(word) < min_length or is_stop_word(word) or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
        if len(keywords) >= max_keywords:
            break
    return keywords
