"""Pydantic data models for blogview."""

from blogview.models.theme import Theme, ThemeColors, TokenStyle
from blogview.models.code_block import CodeBlock, LiveCodeBlock, StaticCodeBlock
from blogview.models.post import CompiledBody, PostRecord, ProseSegment

__all__ = [
    "CodeBlock",
    "CompiledBody",
    "LiveCodeBlock",
    "PostRecord",
    "ProseSegment",
    "StaticCodeBlock",
    "Theme",
    "ThemeColors",
    "TokenStyle",
]
