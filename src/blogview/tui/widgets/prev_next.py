"""PrevNext widget: previous/next post navigation bar."""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button

from blogview.models.post import PostRecord


class PrevNext(Horizontal):
    """Two buttons; a missing neighbour leaves its button disabled."""

    DEFAULT_CSS = """
    PrevNext {
        height: auto;
        dock: bottom;
        padding: 0 1;
    }

    PrevNext Button {
        width: 1fr;
    }
    """

    class Navigate(Message):
        """Posted when a neighbour button is pressed."""

        def __init__(self, slug: str) -> None:
            super().__init__()
            self.slug = slug

    def __init__(self, prev_post: Optional[PostRecord], next_post: Optional[PostRecord], **kwargs):
        """Initialize PrevNext.

        Args:
            prev_post: Older neighbour, if any
            next_post: Newer neighbour, if any
        """
        super().__init__(id="prev-next", **kwargs)
        self.prev_post = prev_post
        self.next_post = next_post

    def compose(self) -> ComposeResult:
        yield Button(
            f"← {self.prev_post.title}" if self.prev_post else "←",
            id="prev-button",
            disabled=self.prev_post is None,
        )
        yield Button(
            f"{self.next_post.title} →" if self.next_post else "→",
            id="next-button",
            disabled=self.next_post is None,
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        target = self.prev_post if event.button.id == "prev-button" else self.next_post
        if target is not None:
            self.post_message(self.Navigate(target.slug))
