"""Source document data model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SourceDocument:
    """One loaded version of the user's background document.

    Built wholesale on every refresh and replaced, never edited.
    """

    raw_text: str
    size_bytes: int
    modified_at: datetime | None = None

    def __post_init__(self):
        if self.size_bytes < 0:
            raise ValueError(f"size_bytes must be >= 0, got {self.size_bytes}")

    @property
    def valid(self) -> bool:
        return bool(self.raw_text.strip())
