"""Post Screen: one post with its live panels and neighbour navigation."""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Markdown
import structlog

from blogview.content.provider import ContentProvider
from blogview.live.evaluator import Evaluator
from blogview.models.code_block import LiveCodeBlock, StaticCodeBlock
from blogview.models.config import LiveConfig, SiteConfig
from blogview.models.post import PostRecord, ProseSegment
from blogview.models.theme import Theme
from blogview.tui.widgets.code_view import CodeView
from blogview.tui.widgets.live_panel import LivePanel
from blogview.tui.widgets.post_header import PostHeader
from blogview.tui.widgets.prev_next import PrevNext

logger = structlog.get_logger()


class PostScreen(Screen):
    """Displays a post body segment by segment.

    Prose runs render through Textual's Markdown widget, static code blocks
    through CodeView and live blocks through LivePanel. Previous/next
    navigation is docked outside the scrolling content.
    """

    DEFAULT_CSS = """
    PostScreen {
        layout: vertical;
    }

    #post-scroll {
        height: 1fr;
        padding: 0 2;
    }
    """

    # Start on the scroll area so n/p are not typed into a live editor
    AUTO_FOCUS = "#post-scroll"

    BINDINGS = [
        ("n", "next_post", "Next post"),
        ("p", "previous_post", "Previous post"),
        ("q", "app.quit", "Quit"),
    ]

    def __init__(
        self,
        post: PostRecord,
        provider: ContentProvider,
        site: SiteConfig,
        theme: Theme,
        evaluator: Optional[Evaluator] = None,
        live: Optional[LiveConfig] = None,
        **kwargs
    ):
        """Initialize PostScreen.

        Args:
            post: Post to show
            provider: Content provider for resolving neighbours
            site: Site settings (title, date format, URL)
            theme: Theme for code highlighting
            evaluator: Evaluator for live panels (None renders them static)
            live: Live code settings
        """
        super().__init__(**kwargs)
        self.post = post
        self.provider = provider
        self.site = site
        self.theme_model = theme
        self.evaluator = evaluator
        self.live = live or LiveConfig()
        self.prev_post = provider.find(post.prev)
        self.next_post = provider.find(post.next)

    def compose(self) -> ComposeResult:
        """Compose header, body segments and navigation."""
        yield Header()
        with VerticalScroll(id="post-scroll"):
            yield PostHeader(self.post, self.site)
            for segment in self.post.body.segments:
                if isinstance(segment, ProseSegment):
                    yield Markdown(segment.markdown, classes="prose")
                elif isinstance(segment, LiveCodeBlock) and self.evaluator is not None and self.live.enabled:
                    yield LivePanel(
                        segment,
                        self.evaluator,
                        evaluate_on_mount=self.live.evaluate_on_mount,
                    )
                else:
                    yield CodeView(
                        StaticCodeBlock(source_text=segment.source_text, language=segment.language),
                        self.theme_model,
                    )
        yield PrevNext(self.prev_post, self.next_post)
        yield Footer()

    def on_mount(self) -> None:
        """Set the header subtitle to the post title."""
        self.sub_title = self.post.title
        logger.info("post_screen_mounted", slug=self.post.slug)

    def on_prev_next_navigate(self, message: PrevNext.Navigate) -> None:
        self._go_to(message.slug)

    def action_next_post(self) -> None:
        """Show the newer neighbour."""
        if self.next_post is not None:
            self._go_to(self.next_post.slug)

    def action_previous_post(self) -> None:
        """Show the older neighbour."""
        if self.prev_post is not None:
            self._go_to(self.prev_post.slug)

    def _go_to(self, slug: str) -> None:
        show_post = getattr(self.app, "show_post", None)
        if show_post is not None:
            show_post(slug)
