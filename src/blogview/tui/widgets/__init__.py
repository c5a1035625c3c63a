"""Custom widgets for the blogview reader."""

from blogview.tui.widgets.code_view import CodeView
from blogview.tui.widgets.live_panel import LiveEditor, LivePanel
from blogview.tui.widgets.post_header import PostHeader
from blogview.tui.widgets.prev_next import PrevNext

__all__ = [
    "CodeView",
    "LiveEditor",
    "LivePanel",
    "PostHeader",
    "PrevNext",
]
