"""PostHeader widget: title, reply link, date and series tags."""

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from blogview.models.config import SiteConfig
from blogview.models.post import PostRecord
from blogview.utils.slugs import series_path


def render_post_header(post: PostRecord, site: SiteConfig) -> Text:
    """Render the post heading block as Rich Text.

    Example output:
        Hooks, Deeply
        Re: https://example.com/original
        03/04/2021 — 5 Min Read — #Deep Dives
    """
    text = Text()
    text.append(post.title, style=Style(bold=True, underline=True, link=f"{site.url}{post.path}"))

    if post.link:
        text.append("\nRe: ", style="dim")
        text.append(post.link, style=Style(color="blue", underline=True, link=post.link))

    text.append("\n")
    text.append(post.date.strftime(site.date_format), style="italic")
    text.append(f" — {post.time_to_read} Min Read", style="dim")

    if post.series:
        text.append(" —", style="dim")
        for name in post.series:
            text.append(" ")
            text.append(f"#{name}", style=Style(color="green", link=f"{site.url}{series_path(name)}"))

    return text


class PostHeader(Static):
    """Heading block shown above a post body."""

    DEFAULT_CSS = """
    PostHeader {
        height: auto;
        padding: 1 0;
        margin-bottom: 1;
        border-bottom: heavy $primary 50%;
        text-align: center;
    }
    """

    def __init__(self, post: PostRecord, site: SiteConfig, **kwargs):
        super().__init__(render_post_header(post, site), id="post-header", **kwargs)
        self.post = post
