"""PostRecord model and its pre-compiled body."""

import datetime
from pathlib import Path
from typing import Optional, Union

from markdown_it.token import Token
from pydantic import BaseModel, Field

from blogview.models.code_block import LiveCodeBlock, StaticCodeBlock


class ProseSegment(BaseModel):
    """A run of Markdown between two top-level fenced code blocks."""

    kind: str = "prose"
    markdown: str

    model_config = {"frozen": True}


Segment = Union[ProseSegment, StaticCodeBlock, LiveCodeBlock]


class CompiledBody(BaseModel):
    """A post body compiled once by the content provider.

    ``tokens`` is the markdown-it token stream used for HTML output; every
    ``fence`` token carries its CodeBlock in ``token.meta["code_block"]``.
    ``segments`` is the same body split for hosts that lay out prose and
    code blocks as separate widgets.
    """

    source: str
    tokens: list[Token] = Field(default_factory=list)
    segments: tuple[Segment, ...] = ()
    excerpt: str = ""
    word_count: int = 0

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def code_blocks(self) -> list[Union[StaticCodeBlock, LiveCodeBlock]]:
        """All fenced code blocks in document order, nested ones included."""
        return [
            token.meta["code_block"]
            for token in self.tokens
            if token.type == "fence" and "code_block" in token.meta
        ]


class PostRecord(BaseModel):
    """One published post, read-only once the content provider built it."""

    slug: str = Field(..., description="URL identifier; the canonical path is /<slug>")
    title: str
    date: datetime.date
    series: tuple[str, ...] = Field(default=(), description="Series tags in front matter order")
    link: Optional[str] = Field(default=None, description="External link this post replies to")
    description: Optional[str] = Field(default=None, description="Explicit meta description")
    body: CompiledBody
    time_to_read: int = Field(default=1, ge=1, description="Minutes")
    prev: Optional[str] = Field(default=None, description="Slug of the older neighbour")
    next: Optional[str] = Field(default=None, description="Slug of the newer neighbour")
    source_path: Optional[Path] = None

    model_config = {"frozen": True}

    @property
    def path(self) -> str:
        return f"/{self.slug}"

    @property
    def summary(self) -> str:
        """Meta description: explicit description, else the body excerpt."""
        return self.description or self.body.excerpt
