"""Pydantic schemas for segments, cards and view options."""

from .segment import LinkRef, LiteralSegment, Segment
from .view_options import ViewOptions
from .card import CardData, CardEntry, CoverImage

__all__ = [
    "LinkRef",
    "LiteralSegment",
    "Segment",
    "ViewOptions",
    "CardData",
    "CardEntry",
    "CoverImage",
]
