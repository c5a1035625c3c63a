"""Page rendering: PostRecord -> Document, plus series and home indexes.

Templates live in ``rendering/templates`` and are rendered with Jinja2.
The theme is injected once through the constructor and reaches templates
as a variable; nothing reads it from module state.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel

from blogview.content.provider import ContentProvider
from blogview.models.config import SiteConfig
from blogview.models.post import PostRecord
from blogview.models.theme import Theme, transparentize
from blogview.rendering.body import BodyRenderer
from blogview.rendering.code_block import CodeBlockRenderer
from blogview.utils.slugs import post_path, series_path, slugify
from blogview.utils.logging import get_logger


logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Document(BaseModel):
    """A rendered page and the site path it is served from."""

    path: str
    title: str
    html: str

    model_config = {"frozen": True}

    @property
    def output_relpath(self) -> Path:
        """File path relative to the output root (``/a/b`` -> ``a/b/index.html``)."""
        if self.path.endswith(".css"):
            return Path(self.path.lstrip("/"))
        stripped = self.path.strip("/")
        return Path(stripped) / "index.html" if stripped else Path("index.html")


def create_environment() -> Environment:
    """Jinja2 environment for the bundled templates (HTML autoescaped, CSS not)."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=lambda name: name is not None and not name.endswith(".css.jinja"),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["slugify"] = slugify
    env.filters["series_path"] = series_path
    env.filters["post_path"] = post_path
    env.filters["transparentize"] = transparentize
    return env


class PageRenderer:
    """Render posts and index pages for one site."""

    def __init__(
        self,
        site: SiteConfig,
        theme: Theme,
        provider: ContentProvider,
        code_renderer: Optional[CodeBlockRenderer] = None,
    ):
        """Initialize PageRenderer.

        Args:
            site: Site identity and formatting settings
            theme: Theme shared with the code renderer and the stylesheet
            provider: Content provider used to resolve prev/next slugs
            code_renderer: Renderer for fenced blocks (default: no live evaluation)
        """
        self.site = site
        self.theme = theme
        self.provider = provider
        self.code_renderer = code_renderer or CodeBlockRenderer(theme)
        self.body_renderer = BodyRenderer(self.code_renderer)
        self.env = create_environment()

    def render_post(self, post: PostRecord) -> Document:
        """Render one post page."""
        html = self.env.get_template("post.html.jinja").render(
            site=self.site,
            theme=self.theme,
            post=post,
            page_title=f"{self.site.title} · {post.title}",
            canonical_url=self.absolute_url(post.path),
            date_display=post.date.strftime(self.site.date_format),
            body=self.body_renderer.render(post.body),
            prev_post=self.provider.find(post.prev),
            next_post=self.provider.find(post.next),
        )
        logger.debug("post_rendered", slug=post.slug)
        return Document(path=post.path, title=post.title, html=html)

    def render_series(self, name: str) -> Document:
        """Render the index page of one series."""
        path = series_path(name)
        html = self.env.get_template("series.html.jinja").render(
            site=self.site,
            theme=self.theme,
            series_name=name,
            posts=self.provider.series(name),
            page_title=f"{self.site.title} · #{name}",
            canonical_url=self.absolute_url(path),
            date_format=self.site.date_format,
        )
        return Document(path=path, title=name, html=html)

    def render_index(self) -> Document:
        """Render the home page listing every post, newest first."""
        html = self.env.get_template("index.html.jinja").render(
            site=self.site,
            theme=self.theme,
            posts=self.provider.posts(newest_first=True),
            series_names=self.provider.series_names(),
            page_title=self.site.title,
            canonical_url=self.absolute_url("/"),
            date_format=self.site.date_format,
        )
        return Document(path="/", title=self.site.title, html=html)

    def render_stylesheet(self) -> Document:
        """Render the site stylesheet from the theme palette."""
        css = self.env.get_template("style.css.jinja").render(theme=self.theme)
        return Document(path="/style.css", title="style", html=css)

    def absolute_url(self, path: str) -> str:
        return f"{self.site.url}{path}"
