"""Main blogview reader application.

Shows one post per screen. Navigating to a neighbour replaces the current
screen, which unmounts its live panels and discards their state.
"""

from typing import Optional

from textual.app import App
from textual.binding import Binding
import structlog

from blogview.content.provider import ContentProvider
from blogview.live.evaluator import Evaluator
from blogview.models.config import Config
from blogview.models.theme import Theme
from blogview.tui.screens import PostScreen

logger = structlog.get_logger()


class BlogViewApp(App):
    """Terminal reader for a blogview content directory."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(
        self,
        provider: ContentProvider,
        config: Config,
        theme: Theme,
        evaluator: Optional[Evaluator] = None,
        start_slug: Optional[str] = None,
    ):
        """Initialize the reader.

        Args:
            provider: Loaded content
            config: Application configuration
            theme: Theme built once at startup
            evaluator: Evaluator for live panels (None shows them static)
            start_slug: Post to open first (default: latest)
        """
        super().__init__()
        self.provider = provider
        self.config = config
        self.theme_model = theme
        self.evaluator = evaluator
        self.start_slug = start_slug
        self.current_slug: Optional[str] = None

        logger.info("app_initialized", posts=len(provider), start_slug=start_slug)

    def on_mount(self) -> None:
        """Open the starting post."""
        self.title = self.config.site.title
        post = self.provider.find(self.start_slug) if self.start_slug else self.provider.latest()
        if post is None:
            self.exit(message="No posts to show")
            return
        self.current_slug = post.slug
        self.push_screen(self._screen_for(post))

    def show_post(self, slug: str) -> None:
        """Replace the current post screen with the post for ``slug``."""
        post = self.provider.find(slug)
        if post is None:
            logger.warning("navigation_target_missing", slug=slug)
            self.notify(f"No post with slug '{slug}'", severity="warning")
            return
        logger.info("navigated", source=self.current_slug, target=slug)
        self.current_slug = slug
        self.switch_screen(self._screen_for(post))

    def _screen_for(self, post) -> PostScreen:
        return PostScreen(
            post=post,
            provider=self.provider,
            site=self.config.site,
            theme=self.theme_model,
            evaluator=self.evaluator,
            live=self.config.live,
            name=f"post-{post.slug}",
        )
