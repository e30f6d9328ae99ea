"""Unit tests for settings and service construction."""

from pathlib import Path

import pytest

from config.settings import Settings, get_settings
from contextmd.service.factory import create_context_service


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CONTEXTMD_CHUNK_SIZE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.context_path == Path(".") / "context.md"
        config = settings.context_config()
        assert config.chunk_size == 500
        assert config.chunk_overlap == 50
        assert config.enable_context_injection is True

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CONTEXTMD_CONTEXT_DIR", str(tmp_path))
        monkeypatch.setenv("CONTEXTMD_CONTEXT_FILE", "me.md")
        monkeypatch.setenv("CONTEXTMD_CHUNK_SIZE", "100")
        monkeypatch.setenv("CONTEXTMD_CHUNK_OVERLAP", "10")
        monkeypatch.setenv("CONTEXTMD_RELEVANCE_THRESHOLD", "0.2")
        monkeypatch.setenv("CONTEXTMD_ENABLE_CONTEXT_INJECTION", "false")

        settings = get_settings()
        config = settings.context_config()

        assert settings.context_path == tmp_path / "me.md"
        assert config.chunk_size == 100
        assert config.chunk_overlap == 10
        assert config.relevance_threshold == 0.2
        assert config.enable_context_injection is False

    def test_invalid_overlap_rejected(self, monkeypatch):
        monkeypatch.setenv("CONTEXTMD_CHUNK_SIZE", "50")
        monkeypatch.setenv("CONTEXTMD_CHUNK_OVERLAP", "50")
        with pytest.raises(ValueError):
            get_settings().context_config()


class TestCreateContextService:
    def test_uses_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CONTEXTMD_CONTEXT_DIR", str(tmp_path))
        (tmp_path / "context.md").write_text("# About\nI like Rust.", encoding="utf-8")

        service = create_context_service()

        assert service.context_file_path == str(tmp_path / "context.md")
        assert service.refresh() is True
