"""Section-aware sliding-window chunker for the background document."""

import logging
import re
from dataclasses import dataclass

from contextmd.models.chunk import Chunk
from contextmd.models.config import ContextConfig
from contextmd.processing.keywords import extract_keywords

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^#{1,6}\s+")


@dataclass(frozen=True)
class Section:
    """A run of lines under one markdown header."""

    title: str | None
    text: str


def detect_section_header(line: str) -> str | None:
    """Return the header title if ``line`` is a markdown header, else None."""
    match = HEADER_PATTERN.match(line)
    if not match:
        return None
    return line[match.end():].strip()


def split_into_sections(text: str) -> list[Section]:
    """Split text on markdown headers.

    The header line stays part of its section's text. Lines before the
    first header form an untitled section, and a document without headers
    is a single untitled section. Blank sections are dropped.
    """
    sections = []
    current_title = None
    current_lines: list[str] = []

    for line in text.split("\n"):
        title = detect_section_header(line)
        if title is not None:
            body = "\n".join(current_lines)
            if body.strip():
                sections.append(Section(title=current_title or None, text=body))
            current_title = title
            current_lines = [line]
        else:
            current_lines.append(line)

    body = "\n".join(current_lines)
    if body.strip():
        sections.append(Section(title=current_title or None, text=body))

    return sections


def window_words(words: list[str], chunk_size: int, chunk_overlap: int) -> list[str]:
    """Slide a ``chunk_size`` word window over ``words``, stepping by
    ``chunk_size - chunk_overlap``.

    The last window may be shorter than ``chunk_size``.
    """
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise ValueError(
            f"chunk_overlap must be in [0, chunk_size), got {chunk_overlap} with chunk_size {chunk_size}"
        )

    step = chunk_size - chunk_overlap
    windows = []
    for start in range(0, len(words), step):
        window = " ".join(words[start:start + chunk_size]).strip()
        if window:
            windows.append(window)
    return windows


def split_into_windows(
    text: str,
    chunk_size: int = 500,
    chunk_overlap: int = 50,
) -> list[tuple[str, str | None]]:
    """Chunk ``text`` into ``(window_text, section_title)`` pairs in document order."""
    pairs = []
    for section in split_into_sections(text):
        for window in window_words(section.text.split(), chunk_size, chunk_overlap):
            pairs.append((window, section.title))
    return pairs


def build_chunks(raw_text: str, config: ContextConfig | None = None) -> list[Chunk]:
    """Chunk a document and compute keywords for every chunk."""
    config = config or ContextConfig()
    pairs = split_into_windows(raw_text, config.chunk_size, config.chunk_overlap)

    chunks = []
    for idx, (text, title) in enumerate(pairs):
        keywords = extract_keywords(
            text,
            min_length=config.min_keyword_length,
            max_keywords=config.max_keywords,
        )
        chunks.append(
            Chunk(
                text=text,
                chunk_index=idx,
                keywords=tuple(keywords),
                section_title=title,
            )
        )

    logger.debug("Built %d chunks", len(chunks))
    return chunks
