"""Content processing utilities - deep helper module.

Turns raw markdown (with an optional frontmatter block) into a single-line,
markup-free preview bounded by a line budget.
"""

import re
from typing import Any

from ..core.config import settings

CHARS_PER_LINE = 80
"""
Characters counted per preview line.

Rationale: ~80 characters approximate one visual line at typical card
width. The character budget for a preview is ``max_lines * CHARS_PER_LINE``.
"""

ELLIPSIS = "..."

# Opening line, any number of whole lines, then the first line that is
# exactly "---" (followed by a newline or the end of the text).
_FRONTMATTER = re.compile(r"\A---\n(?:.*?\n)??---(?:\n|\Z)", re.DOTALL)

# Ordered rules: later rules assume earlier ones already collapsed the
# enclosing syntax. Each rule runs once over the whole text.
_MARKUP_RULES: list[tuple[re.Pattern, Any]] = [
    (re.compile(r"```.*?```", re.DOTALL), ""),                      # fenced code
    (re.compile(r"`[^`]+`"), ""),                                   # inline code
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),                  # headings
    (re.compile(r"(\*\*|__)(.*?)\1"), r"\2"),                       # bold
    (re.compile(r"(\*|_)(.*?)\1"), r"\2"),                          # italic
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),                  # [label](url)
    (
        re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]"),            # [[target|label]]
        lambda m: m.group(2) or m.group(1),
    ),
    (re.compile(r"!\[[^\]]*\]\([^)]+\)"), ""),                      # images
    (re.compile(r"^>\s+", re.MULTILINE), ""),                       # block quotes
    (re.compile(r"^[*\-+]\s+", re.MULTILINE), ""),                  # bullet lists
    (re.compile(r"^\d+\.\s+", re.MULTILINE), ""),                   # numbered lists
    (re.compile(r"^[*\-_]{3,}$", re.MULTILINE), ""),                # horizontal rules
    (re.compile(r"<[^>]+>"), ""),                                   # html tags
]

_WHITESPACE = re.compile(r"\s+")


def remove_frontmatter(raw: str) -> str:
    """
    Remove a leading ``---`` delimited metadata block.

    Only a block that opens on the very first line is removed, so a ``---``
    horizontal rule further down the body is left alone. The first closing
    ``---`` line ends the block.

    Args:
        raw: Full document text

    Returns:
        Text after the closing delimiter line, or ``raw`` unchanged when the
        text does not open with a complete frontmatter block
    """
    match = _FRONTMATTER.match(raw)
    if not match:
        return raw
    return raw[match.end():]


def strip_markup(text: str) -> str:
    """
    Remove markdown structure and inline markup, keeping readable text.

    Single pass per rule: nested constructs of the same kind are only
    unwrapped one level, so ``strip_markup`` is not idempotent.
    """
    for pattern, replacement in _MARKUP_RULES:
        text = pattern.sub(replacement, text)
    return text


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def truncate_preview(text: str, max_lines: int) -> str:
    """
    Bound text to a line budget.

    Args:
        text: Plain text, possibly spanning several lines
        max_lines: Line budget; callers clamp it with resolve_preview_lines()

    Returns:
        Normalized text, cut to ``max_lines * CHARS_PER_LINE`` characters
        with ``...`` appended when it was longer
    """
    text = normalize_whitespace(text)
    if not text:
        return ""

    max_chars = max(max_lines, 0) * CHARS_PER_LINE
    if len(text) > max_chars:
        return text[:max_chars].rstrip() + ELLIPSIS
    return text


def generate_content_preview(raw: str, max_lines: int) -> str:
    """
    Generate a preview excerpt from raw document content.

    DEEP MODULE: frontmatter removal must run before markup stripping, since
    the horizontal-rule rule would otherwise eat the closing delimiter.
    """
    body = remove_frontmatter(raw)
    return truncate_preview(strip_markup(body), max_lines)


def resolve_preview_lines(value: Any) -> int:
    """
    Coerce a host-supplied preview length into a usable line budget.

    Unset, zero and non-numeric values fall back to the configured default;
    everything else is clamped to the configured bounds.

    Raises:
        ConfigurationError: If the configured bounds are inconsistent.
    """
    settings.validate_preview_bounds()
    try:
        lines = int(float(value))
    except (TypeError, ValueError, OverflowError):
        lines = 0
    if not lines:
        lines = settings.default_preview_lines
    return max(settings.min_preview_lines, min(lines, settings.max_preview_lines))
