"""Card schemas."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .segment import Segment
from .view_options import CoverFit, CoverRatio


class CardEntry(BaseModel):
    """One row of the host's result set."""
    key: str  # Path-like document key, e.g. "notes/Projects/Plan.md"
    properties: Dict[str, Any] = {}


class CoverImage(BaseModel):
    """Resolved cover image for a card."""
    resource: str  # Host resource URL/path returned by the image resolver
    fit: CoverFit
    ratio: CoverRatio


class CardData(BaseModel):
    """Everything a presentation layer needs to draw one card."""
    key: str
    title: str
    properties: Dict[str, Any] = {}
    fields: Dict[str, List[Segment]] = {}  # Property values split into text/link segments
    cover: Optional[CoverImage] = None
    preview: str = ""  # Empty when the card has a cover or no readable body
