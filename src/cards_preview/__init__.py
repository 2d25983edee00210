"""Plain-text card previews and wikilink tokenization for markdown notes."""

import logging

from .core.logging_config import PACKAGE_LOGGER, configure_logging
from .services.content_utils import (
    generate_content_preview,
    remove_frontmatter,
    strip_markup,
    truncate_preview,
)
from .services.preview_cache import PreviewCache
from .services.wikilinks import tokenize
from .schemas.segment import LinkRef, LiteralSegment, Segment

__all__ = [
    "configure_logging",
    "generate_content_preview",
    "remove_frontmatter",
    "strip_markup",
    "truncate_preview",
    "PreviewCache",
    "tokenize",
    "LinkRef",
    "LiteralSegment",
    "Segment",
]

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

