"""View option schemas for the card grid."""

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.config import settings
from ..services.content_utils import resolve_preview_lines

CoverFit = Literal["cover", "contain"]
CoverRatio = Literal["1/1", "4/3", "3/2", "16/9", "2/1"]

# Host option keys (kebab-case) -> ViewOptions field names.
_CONFIG_KEYS = {
    "image-property": "image_property",
    "card-size": "card_size",
    "preview-length": "preview_lines",
    "font-size": "font_size",
    "cover-fit": "cover_fit",
    "cover-ratio": "cover_ratio",
}


class ViewOptions(BaseModel):
    """User-configurable options of the card view."""
    image_property: Optional[str] = None  # Property holding the cover image link
    card_size: int = Field(default=200, ge=100, le=400)
    preview_lines: int = Field(default_factory=lambda: settings.default_preview_lines)
    font_size: int = Field(default=13, ge=10, le=18)
    cover_fit: CoverFit = "cover"
    cover_ratio: CoverRatio = "3/2"

    @field_validator('image_property')
    @classmethod
    def normalize_image_property(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator('preview_lines', mode="before")
    @classmethod
    def clamp_preview_lines(cls, v: Any) -> int:
        """Lenient like the host slider: bad values fall back, others are clamped."""
        return resolve_preview_lines(v)

    @field_validator('card_size')
    @classmethod
    def validate_card_size_step(cls, v: int) -> int:
        if v % 25:
            raise ValueError("Card size must be a multiple of 25")
        return v

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ViewOptions":
        """Build options from the host's kebab-case option mapping.

        Missing or empty keys take the field defaults.
        """
        values: dict[str, Any] = {}
        for key, field in _CONFIG_KEYS.items():
            value = config.get(key)
            if value is not None and value != "":
                values[field] = value
        return cls(**values)
