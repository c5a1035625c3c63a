"""Content provider: loads posts from disk and answers slug queries.

Posts are Markdown (``.md``/``.mdx``) files with YAML front matter anywhere
under the content directory. A file named ``index.md`` takes its slug from
its parent directory. Neighbours are assigned once, by date:

    oldest ... newest
      prev <- post -> next
"""

from pathlib import Path
from typing import Iterable, Optional

import structlog

from blogview.content.compiler import compile_body
from blogview.content.front_matter import parse_date, parse_series, split_front_matter
from blogview.models.post import PostRecord
from blogview.services.exceptions import DuplicateSlugError, FrontMatterError, PostNotFoundError
from blogview.utils.slugs import slugify

logger = structlog.get_logger()

POST_SUFFIXES = (".md", ".mdx")


class ContentProvider:
    """Read-only view over the posts of a content directory."""

    def __init__(self, posts: Iterable[PostRecord]):
        """Initialize with already-linked posts.

        Args:
            posts: PostRecords with prev/next slugs set
        """
        self._posts = sorted(posts, key=lambda p: (p.date, p.slug))
        self._by_slug = {post.slug: post for post in self._posts}

    @classmethod
    def load(
        cls,
        content_dir: Path,
        live_languages: Iterable[str] = (),
        words_per_minute: int = 265,
        include_drafts: bool = False,
    ) -> "ContentProvider":
        """Load and link every post under ``content_dir``.

        Args:
            content_dir: Root directory of post sources
            live_languages: Fence languages that may become live blocks
            words_per_minute: Reading speed for time-to-read
            include_drafts: Keep posts marked ``draft: true``

        Returns:
            ContentProvider over the loaded posts

        Raises:
            FrontMatterError: If a post has invalid front matter
            DuplicateSlugError: If two files resolve to the same slug
        """
        live_languages = tuple(live_languages)
        records: dict[str, PostRecord] = {}

        for path in sorted(p for p in content_dir.rglob("*") if p.suffix in POST_SUFFIXES and p.is_file()):
            record = load_post(path, content_dir, live_languages, words_per_minute, include_drafts)
            if record is None:
                continue
            if record.slug in records:
                raise DuplicateSlugError(record.slug, str(records[record.slug].source_path), str(path))
            records[record.slug] = record

        ordered = sorted(records.values(), key=lambda p: (p.date, p.slug))
        linked = link_neighbours(ordered)
        logger.info("content_loaded", content_dir=str(content_dir), posts=len(linked))
        return cls(linked)

    def get(self, slug: str) -> PostRecord:
        """Return the post for ``slug``.

        Raises:
            PostNotFoundError: If no post has this slug
        """
        try:
            return self._by_slug[slug]
        except KeyError:
            raise PostNotFoundError(slug) from None

    def find(self, slug: Optional[str]) -> Optional[PostRecord]:
        """Return the post for ``slug``, or None (also for a None slug)."""
        if slug is None:
            return None
        return self._by_slug.get(slug)

    def posts(self, newest_first: bool = True) -> list[PostRecord]:
        """All posts ordered by date."""
        return list(reversed(self._posts)) if newest_first else list(self._posts)

    def latest(self) -> Optional[PostRecord]:
        """Most recent post, or None for an empty blog."""
        return self._posts[-1] if self._posts else None

    def series_names(self) -> list[str]:
        """Distinct series names, first spelling wins, sorted case-insensitively."""
        names: dict[str, str] = {}
        for post in self._posts:
            for name in post.series:
                names.setdefault(slugify(name), name)
        return sorted(names.values(), key=str.lower)

    def series(self, name: str) -> list[PostRecord]:
        """Posts tagged with a series (matched by slug), newest first."""
        wanted = slugify(name)
        return [
            post for post in self.posts(newest_first=True)
            if any(slugify(tag) == wanted for tag in post.series)
        ]

    def __len__(self) -> int:
        return len(self._posts)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug


def load_post(
    path: Path,
    content_dir: Path,
    live_languages: tuple[str, ...] = (),
    words_per_minute: int = 265,
    include_drafts: bool = False,
) -> Optional[PostRecord]:
    """Parse and compile a single post source file.

    Returns:
        Unlinked PostRecord (prev/next unset), or None for skipped drafts
    """
    raw = path.read_text(encoding="utf-8")
    front, body_text = split_front_matter(raw, str(path))

    title = front.get("title")
    if not title or not str(title).strip():
        raise FrontMatterError(str(path), "Front matter must define 'title'")

    if front.get("draft") and not include_drafts:
        logger.warning("draft_skipped", path=str(path))
        return None

    body = compile_body(body_text, live_languages)
    link = front.get("link")

    record = PostRecord(
        slug=_slug_for(path, content_dir, front.get("slug")),
        title=str(title).strip(),
        date=parse_date(front.get("date"), str(path)),
        series=parse_series(front.get("series")),
        link=str(link).strip() if link else None,
        description=str(front["description"]).strip() if front.get("description") else None,
        body=body,
        time_to_read=max(1, round(body.word_count / words_per_minute)),
        source_path=path,
    )
    logger.debug("post_loaded", slug=record.slug, path=str(path), code_blocks=len(body.code_blocks()))
    return record


def link_neighbours(ordered: list[PostRecord]) -> list[PostRecord]:
    """Set prev/next slugs on date-ordered posts (oldest first)."""
    linked = []
    for i, post in enumerate(ordered):
        linked.append(post.model_copy(update={
            "prev": ordered[i - 1].slug if i > 0 else None,
            "next": ordered[i + 1].slug if i + 1 < len(ordered) else None,
        }))
    return linked


def _slug_for(path: Path, content_dir: Path, explicit: Optional[str]) -> str:
    if explicit:
        candidate = str(explicit)
    elif path.stem == "index" and path.parent != content_dir:
        candidate = path.parent.name
    else:
        candidate = path.stem
    slug = slugify(candidate)
    if not slug:
        raise FrontMatterError(str(path), "Slug cannot be empty")
    return slug

