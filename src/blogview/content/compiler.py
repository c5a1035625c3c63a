"""Compile Markdown post bodies into markdown-it token streams.

Compilation happens once per post, when the content provider loads it.
Page and terminal renderers consume the result without re-parsing.
"""

from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.token import Token

from blogview.models.code_block import make_code_block
from blogview.models.post import CompiledBody, ProseSegment
from blogview.utils.slugs import slugify


EXCERPT_LENGTH = 140


def create_markdown() -> MarkdownIt:
    """Create the Markdown parser shared by the compiler and the page renderer.

    CommonMark plus tables and strikethrough; raw HTML is allowed because
    posts were written as MDX and embed the odd tag.
    """
    return MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])


def compile_body(source: str, live_languages: Iterable[str] = ()) -> CompiledBody:
    """Compile a post body.

    Args:
        source: Markdown body (front matter already removed)
        live_languages: Fence languages that may become live blocks

    Returns:
        CompiledBody with tokens, segments, excerpt and word count
    """
    live_languages = tuple(live_languages)
    tokens = create_markdown().parse(source)
    lines = source.splitlines()

    segments = []
    used_anchors: dict[str, int] = {}
    excerpt = ""
    word_count = 0
    cursor = 0

    for idx, token in enumerate(tokens):
        if token.type == "heading_open":
            anchor = _unique_anchor(slugify(tokens[idx + 1].content), used_anchors)
            if anchor:
                token.attrSet("id", anchor)

        elif token.type == "inline":
            text = plain_text(token)
            word_count += len(text.split())
            if not excerpt and idx > 0 and tokens[idx - 1].type == "paragraph_open":
                excerpt = _truncate(text, EXCERPT_LENGTH)

        elif token.type == "fence":
            source_text = token.content[:-1] if token.content.endswith("\n") else token.content
            block = make_code_block(source_text, token.info, live_languages)
            token.meta["code_block"] = block
            word_count += len(source_text.split())

            # Nested fences (inside lists or quotes) stay part of the prose
            if token.level == 0 and token.map:
                start, end = token.map
                _append_prose(segments, lines[cursor:start])
                segments.append(block)
                cursor = end

    _append_prose(segments, lines[cursor:])

    return CompiledBody(
        source=source,
        tokens=tokens,
        segments=tuple(segments),
        excerpt=excerpt,
        word_count=word_count,
    )


def plain_text(inline: Token) -> str:
    """Flatten an inline token to its visible text."""
    parts = []
    for child in inline.children or []:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts).strip()


def _append_prose(segments: list, lines: list[str]) -> None:
    markdown = "\n".join(lines).strip("\n")
    if markdown.strip():
        segments.append(ProseSegment(markdown=markdown))


def _unique_anchor(anchor: str, used: dict[str, int]) -> str:
    if not anchor:
        return ""
    count = used.get(anchor, 0)
    used[anchor] = count + 1
    return anchor if count == 0 else f"{anchor}-{count}"


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(" ", 1)[0].rstrip(",;:.")
    return f"{cut}…"
