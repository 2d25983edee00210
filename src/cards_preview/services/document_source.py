"""Document content sources consumed by the preview cache and card service.

The core never performs file I/O itself; a host supplies a source that maps
a document key to raw text. ``read`` may be a plain method or a coroutine.
Any exception it raises is treated as "content unavailable".
"""

from typing import Awaitable, Mapping, Optional, Protocol, Union, runtime_checkable

from ..exceptions import DocumentNotFoundError


@runtime_checkable
class DocumentSource(Protocol):
    def read(self, document_key: str) -> Union[str, Awaitable[str]]:
        ...


class InMemoryDocumentSource:
    """Dict-backed source for tests and hosts that already hold content in memory."""

    def __init__(self, documents: Optional[Mapping[str, str]] = None):
        self._documents: dict[str, str] = dict(documents or {})

    def put(self, document_key: str, content: str) -> None:
        self._documents[document_key] = content

    def remove(self, document_key: str) -> None:
        self._documents.pop(document_key, None)

    def read(self, document_key: str) -> str:
        try:
            return self._documents[document_key]
        except KeyError:
            raise DocumentNotFoundError(document_key) from None
