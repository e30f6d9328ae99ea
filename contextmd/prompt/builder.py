"""Format selected chunks into the context block injected ahead of a question."""

from typing import Sequence

from contextmd.models.chunk import Chunk, ScoredChunk

PROMPT_PREAMBLE = "[CONTEXT ACTIVE] You have access to the following information about the user:"

PROMPT_INSTRUCTION = (
    "Please use this information to provide personalized and relevant responses. "
    "When the user asks about themselves, their projects, preferences, or anything related "
    "to the above information, incorporate these details naturally into your response. "
    "Start your response by acknowledging you have this context information."
)


def estimate_tokens(text: str) -> int:
    """Rough token count estimate (~4 chars per token for English)."""
    return max(1, len(text) // 4)


def format_chunk(chunk: Chunk | ScoredChunk) -> str:
    header = f"**{chunk.section_title}:**\n" if chunk.section_title else ""
    return f"{header}{chunk.text}"


def build_context_prompt(query: str, chunks: Sequence[Chunk | ScoredChunk]) -> str:
    """Wrap ``chunks`` in the context preamble and usage instruction.

    ``query`` is accepted for future templating and currently unused.
    Returns an empty string when there are no chunks. No length limit is
    applied here; callers compare ``estimate_tokens`` against their budget.
    """
    if not chunks:
        return ""

    sections = "\n\n".join(format_chunk(c) for c in chunks)
    return f"{PROMPT_PREAMBLE}\n\n{sections}\n\n{PROMPT_INSTRUCTION}"
