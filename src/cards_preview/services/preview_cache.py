"""Memoized preview extraction keyed by (document key, line budget).

Entries live until the owner calls ``clear()``, typically when the host
reports that the underlying result set changed. There is no per-key
invalidation.

Thread-safe: the entry mapping is guarded by a Lock. Concurrent sync misses
for the same key may compute twice; the first stored value wins and every
caller gets that same string. Concurrent async misses for the same key share
one in-flight task.
"""

import asyncio
import inspect
import logging
import threading
from typing import Awaitable, Callable, Optional, Tuple, Union

from ..exceptions import CardsPreviewError
from .content_utils import generate_content_preview

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, int]
ContentLoader = Callable[[], str]
AsyncContentLoader = Callable[[], Union[str, Awaitable[str]]]


class PreviewCache:
    """Per-session preview cache. Owned by the caller, not a global."""

    def __init__(self, extract: Callable[[str, int], str] = generate_content_preview) -> None:
        self._extract = extract
        self._entries: dict[CacheKey, str] = {}
        self._inflight: dict[CacheKey, asyncio.Task] = {}
        # Bumped by clear(); results computed under an older generation are
        # returned to their caller but never stored.
        self._generation = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def clear(self) -> None:
        """Discard every entry at once."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._inflight.clear()
            self._generation += 1
        logger.debug("Preview cache cleared", extra={"dropped_entries": dropped})

    def _lookup(self, key: CacheKey) -> Tuple[Optional[str], int]:
        with self._lock:
            return self._entries.get(key), self._generation

    def _store(self, key: CacheKey, preview: str, generation: int) -> str:
        with self._lock:
            if generation != self._generation:
                return preview
            return self._entries.setdefault(key, preview)

    def _log_unavailable(self, document_key: str, exc: Exception) -> None:
        if isinstance(exc, CardsPreviewError):
            error = exc.to_dict()
        else:
            error = {"error": type(exc).__name__, "message": str(exc)}
        logger.error(
            "Failed to read document %s", document_key,
            exc_info=True,
            extra={"document_key": document_key, "error": error},
        )

    def get_preview(self, document_key: str, source: ContentLoader, max_lines: int) -> str:
        """
        Return the preview for a document, computing it on first request.

        Args:
            document_key: Stable identity of the document (e.g. its path)
            source: Zero-argument callable returning the raw content
            max_lines: Line budget, part of the cache key

        Returns:
            The preview, or "" if the source raised (nothing is cached then)
        """
        key = (document_key, max_lines)
        cached, generation = self._lookup(key)
        if cached is not None:
            return cached

        try:
            raw = source()
        except Exception as exc:
            self._log_unavailable(document_key, exc)
            return ""

        return self._store(key, self._extract(raw, max_lines), generation)

    async def get_preview_async(
        self,
        document_key: str,
        source: AsyncContentLoader,
        max_lines: int,
    ) -> str:
        """Async variant of get_preview(); ``source`` may return an awaitable.

        Concurrent requests for the same uncached key await a single read.
        """
        key = (document_key, max_lines)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                return cached
            task = self._inflight.get(key)
            if task is None:
                task = asyncio.ensure_future(
                    self._load(key, source, self._generation)
                )
                self._inflight[key] = task
        return await asyncio.shield(task)

    async def _load(self, key: CacheKey, source: AsyncContentLoader, generation: int) -> str:
        document_key, max_lines = key
        try:
            raw = source()
            if inspect.isawaitable(raw):
                raw = await raw
        except Exception as exc:
            self._log_unavailable(document_key, exc)
            return ""
        finally:
            with self._lock:
                if self._inflight.get(key) is asyncio.current_task():
                    del self._inflight[key]

        return self._store(key, self._extract(raw, max_lines), generation)
