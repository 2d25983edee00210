"""Preview extraction, caching and card assembly services."""

from .card_service import CardService, ImageResolver
from .document_source import DocumentSource, InMemoryDocumentSource
from .preview_cache import PreviewCache

__all__ = [
    "CardService",
    "ImageResolver",
    "DocumentSource",
    "InMemoryDocumentSource",
    "PreviewCache",
]
