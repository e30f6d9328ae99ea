"""Application configuration management."""

from pathlib import Path

from pydantic_settings import BaseSettings

from contextmd.models.config import DEFAULT_CONTEXT_FILE, ContextConfig


class Settings(BaseSettings):
    """contextmd application settings loaded from environment variables."""

    # Storage
    contextmd_context_dir: str = "."
    contextmd_context_file: str = DEFAULT_CONTEXT_FILE

    # Chunking
    contextmd_chunk_size: int = 500
    contextmd_chunk_overlap: int = 50

    # Retrieval
    contextmd_relevance_threshold: float = 0.05
    contextmd_max_chunks_per_query: int = 5
    contextmd_fallback_chunk_count: int = 2

    # Prompt
    contextmd_max_context_tokens: int = 4000
    contextmd_enable_context_injection: bool = True

    @property
    def context_dir(self) -> Path:
        return Path(self.contextmd_context_dir)

    @property
    def context_path(self) -> Path:
        return self.context_dir / self.contextmd_context_file

    def context_config(self) -> ContextConfig:
        """Build the immutable retrieval config handed to the service."""
        return ContextConfig(
            chunk_size=self.contextmd_chunk_size,
            chunk_overlap=self.contextmd_chunk_overlap,
            relevance_threshold=self.contextmd_relevance_threshold,
            max_chunks_per_query=self.contextmd_max_chunks_per_query,
            fallback_chunk_count=self.contextmd_fallback_chunk_count,
            max_context_tokens=self.contextmd_max_context_tokens,
            enable_context_injection=self.contextmd_enable_context_injection,
        )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
