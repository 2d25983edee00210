"""
Deep module for assembling card data from a host result set.

Hides preview caching, cover image resolution and property tokenization
behind two calls: build_cards() and on_data_updated().
"""

import asyncio
import logging
from pathlib import PurePosixPath
from typing import Any, Iterable, List, Optional, Protocol

from ..schemas.card import CardData, CardEntry, CoverImage
from ..schemas.view_options import ViewOptions
from .document_source import DocumentSource
from .preview_cache import PreviewCache
from .wikilinks import tokenize, unwrap_wikilink

logger = logging.getLogger(__name__)


def render_property_value(value: Any) -> str:
    """Render a property the way the host displays it; lists become comma-separated."""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value if item is not None)
    return str(value)


class ImageResolver(Protocol):
    def resolve(self, link_path: str, context_key: str) -> Optional[str]:
        """Map an image link (relative to ``context_key``) to a resource, or None."""
        ...


class CardService:
    """
    Builds CardData for every entry in a result set.

    The preview cache is owned by the service and cleared whenever the host
    signals that its data changed.
    """

    def __init__(
        self,
        source: DocumentSource,
        cache: Optional[PreviewCache] = None,
        image_resolver: Optional[ImageResolver] = None,
    ):
        self.source = source
        self.cache = cache if cache is not None else PreviewCache()
        self.image_resolver = image_resolver

    async def on_data_updated(
        self, entries: Iterable[CardEntry], options: ViewOptions
    ) -> List[CardData]:
        """Drop all cached previews, then rebuild every card."""
        self.cache.clear()
        return await self.build_cards(entries, options)

    async def build_cards(
        self, entries: Iterable[CardEntry], options: ViewOptions
    ) -> List[CardData]:
        """
        Build cards in entry order.

        Previews are fetched concurrently; a document whose content cannot be
        read simply gets an empty preview.
        """
        entries = list(entries)
        if not entries:
            return []
        cards = await asyncio.gather(
            *(self._build_card(entry, options) for entry in entries)
        )
        logger.debug("Built %d cards", len(cards), extra={"card_count": len(cards)})
        return list(cards)

    async def _build_card(self, entry: CardEntry, options: ViewOptions) -> CardData:
        cover = self._resolve_cover(entry, options)

        preview = ""
        if cover is None:
            preview = await self.cache.get_preview_async(
                entry.key,
                lambda: self.source.read(entry.key),
                options.preview_lines,
            )

        fields = {
            name: tokenize(render_property_value(value))
            for name, value in entry.properties.items()
            if value is not None
        }

        return CardData(
            key=entry.key,
            title=PurePosixPath(entry.key).stem,
            properties=entry.properties,
            fields=fields,
            cover=cover,
            preview=preview,
        )

    def _resolve_cover(self, entry: CardEntry, options: ViewOptions) -> Optional[CoverImage]:
        """Resolve the entry's image property to a cover, if any."""
        if not options.image_property or self.image_resolver is None:
            return None

        value = entry.properties.get(options.image_property)
        if value is None:
            return None

        image_path = unwrap_wikilink(str(value).strip())
        if not image_path:
            return None

        try:
            resource = self.image_resolver.resolve(image_path, entry.key)
        except Exception:
            logger.error(
                "Failed to resolve cover image %s for %s", image_path, entry.key,
                exc_info=True,
                extra={"document_key": entry.key, "image_path": image_path},
            )
            return None

        if not resource:
            logger.debug(
                "Unresolved cover image %s for %s", image_path, entry.key,
                extra={"document_key": entry.key, "image_path": image_path},
            )
            return None

        return CoverImage(resource=resource, fit=options.cover_fit, ratio=options.cover_ratio)
