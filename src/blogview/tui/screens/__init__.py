"""Screen modules for the blogview reader."""

from blogview.tui.screens.post import PostScreen

__all__ = ["PostScreen"]
