"""Build the application's context service from settings."""

from config.settings import Settings, get_settings
from contextmd.service.context_service import ContextService
from contextmd.storage.backend import FileSystemBackend
from contextmd.storage.document_store import DocumentStore


def create_context_service(settings: Settings | None = None) -> ContextService:
    """Create the one ContextService the process hands to its consumers."""
    settings = settings or get_settings()
    backend = FileSystemBackend(settings.context_dir)
    store = DocumentStore(backend, settings.contextmd_context_file)
    return ContextService(store, settings.context_config())
