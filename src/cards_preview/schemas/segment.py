"""Segment schemas produced by the wikilink tokenizer."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class LiteralSegment(BaseModel):
    """Plain text shown verbatim."""
    kind: Literal["literal"] = "literal"
    text: str

    model_config = {"frozen": True}


class LinkRef(BaseModel):
    """A ``[[target|label]]`` reference. Resolution is up to the caller."""
    kind: Literal["link"] = "link"
    target: str
    label: str

    model_config = {"frozen": True}


Segment = Annotated[Union[LiteralSegment, LinkRef], Field(discriminator="kind")]
