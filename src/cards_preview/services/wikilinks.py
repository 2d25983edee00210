"""Wikilink tokenizer for property values.

Splits a rendered value into literal text and ``[[target]]`` /
``[[target|label]]`` references so a presentation layer can make the links
clickable. Targets are never resolved here.
"""

from typing import Iterable, List, Optional

from ..schemas.segment import LinkRef, LiteralSegment, Segment

_OPEN = "[["
_CLOSE = "]]"


def _parse_link(inner: str) -> Optional[LinkRef]:
    """Parse the text between ``[[`` and ``]]``; None if it is not a valid link."""
    if "[" in inner or "]" in inner:
        return None
    target, sep, label = inner.partition("|")
    if not target:
        return None
    if sep and not label:
        return None
    return LinkRef(target=target, label=label or target)


def tokenize(value: str) -> List[Segment]:
    """
    Split ``value`` into literal and link segments, left to right.

    Matches never overlap. A ``[[`` that does not start a well-formed link is
    kept as literal text and scanning resumes one character later.

    Args:
        value: Plain string, e.g. a frontmatter property rendered as text

    Returns:
        Ordered segments; ``[LiteralSegment(text=value)]`` when there are no links
    """
    segments: List[Segment] = []
    literal_start = 0
    pos = 0

    while True:
        start = value.find(_OPEN, pos)
        if start == -1:
            break
        end = value.find(_CLOSE, start + len(_OPEN))
        if end == -1:
            break

        link = _parse_link(value[start + len(_OPEN):end])
        if link is None:
            pos = start + 1
            continue

        if start > literal_start:
            segments.append(LiteralSegment(text=value[literal_start:start]))
        segments.append(link)
        literal_start = pos = end + len(_CLOSE)

    if literal_start < len(value) or not segments:
        segments.append(LiteralSegment(text=value[literal_start:]))
    return segments


def display_text(segments: Iterable[Segment]) -> str:
    """Concatenate literal text and link labels in order."""
    return "".join(
        seg.label if isinstance(seg, LinkRef) else seg.text
        for seg in segments
    )


def link_targets(value: str) -> List[str]:
    """Return the target of every link in ``value``, in order of appearance."""
    return [seg.target for seg in tokenize(value) if isinstance(seg, LinkRef)]


def unwrap_wikilink(value: str) -> str:
    """Strip the brackets from a value that is exactly ``[[...]]``.

    Image properties are commonly stored as ``[[cover.png]]``; anything that
    is not wrapped as a whole is returned unchanged.
    """
    if value.startswith(_OPEN) and value.endswith(_CLOSE) and len(value) >= 4:
        return value[len(_OPEN):-len(_CLOSE)]
    return value
