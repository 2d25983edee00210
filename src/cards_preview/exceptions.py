"""Custom exception hierarchy for cards-preview."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes for diagnostics."""

    # Document errors
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CardsPreviewError(Exception):
    """Base exception for errors raised by document sources and the package."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Structured form attached to the cache's "document unavailable" log."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class DocumentNotFoundError(CardsPreviewError):
    """Document content could not be found by the document source."""

    def __init__(self, document_key: str):
        super().__init__(
            f"Document not found: {document_key}",
            ErrorCode.DOCUMENT_NOT_FOUND,
            details={"document_key": document_key}
        )
