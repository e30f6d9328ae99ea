"""Create or remove a sample background document on disk."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SAMPLE_CONTEXT = """# My Personal Knowledge Base

## About Me
I'm a Python developer working on an LLM chat application. I have 3 years of experience with web services and I'm learning about AI integration.

## Current Project
I'm building a local chat assistant that runs language models on my own machine. The app features:
- Model selection and downloading
- Local model execution
- Dark and light theme support
- Context integration from markdown files

## Technical Stack
- Python with type hints
- FastAPI for the HTTP layer
- SQLite for conversation history
- pytest for testing

## Preferences
- I prefer clean, minimal user interfaces
- I like descriptive variable names
- I always add proper error handling
- I prefer small functions over large classes

## Goals
- Learn about Model Context Protocol integration
- Improve the experience of local AI tools
- Understand local model optimization

## Notes
When building the context feature, remember to:
- Keep the interface simple
- Handle file errors gracefully
- Provide clear feedback to users
- Make the feature optional
"""


def write_sample_document(target: Path, overwrite: bool = False) -> Path | None:
    """Write the sample background document to ``target``.

    Returns the Path to the written file, or None if the file already
    exists (and ``overwrite`` is False) or the write failed.
    """
    if target.exists() and not overwrite:
        logger.debug("Context file already exists, skipping: %s", target)
        return None

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(SAMPLE_CONTEXT, encoding="utf-8")
        logger.info("Saved sample context file: %s", target)
        return target
    except OSError as e:
        logger.warning("Failed to write context file %s: %s", target, e)
        return None


def delete_document(target: Path) -> bool:
    """Delete the document at ``target``.

    Returns True if the file is gone afterwards (including when it never
    existed), False if the delete failed.
    """
    if not target.exists():
        logger.debug("No context file to delete at %s", target)
        return True

    try:
        target.unlink()
        logger.info("Deleted context file: %s", target)
        return True
    except OSError as e:
        logger.warning("Failed to delete context file %s: %s", target, e)
        return False
