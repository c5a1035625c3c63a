"""CodeView widget for statically highlighted code blocks."""

from rich.text import Text
from textual.widgets import Static

from blogview.models.code_block import StaticCodeBlock
from blogview.models.theme import Theme
from blogview.rendering.tokenizer import tokenize


def render_code_text(source_text: str, language: str, theme: Theme) -> Text:
    """Render highlighted source as Rich Text, one output line per source line.

    Args:
        source_text: Code to highlight
        language: Language name for the tokenizer
        theme: Theme supplying category styles

    Returns:
        Rich Text with per-token styles
    """
    text = Text(style=theme.plain.to_rich(), no_wrap=True)
    for i, line in enumerate(tokenize(source_text, language)):
        if i:
            text.append("\n")
        for token in line:
            text.append(token.content, style=theme.style_for(token.category).to_rich())
    return text


class CodeView(Static):
    """Read-only highlighted code block."""

    DEFAULT_CSS = """
    CodeView {
        height: auto;
        margin: 1 0;
        padding: 0 1;
        border: round $primary 50%;
        border-title-align: right;
    }
    """

    def __init__(self, block: StaticCodeBlock, theme: Theme, **kwargs):
        """Initialize CodeView.

        Args:
            block: Static code block to show
            theme: Theme supplying category styles
        """
        super().__init__(render_code_text(block.source_text, block.language, theme), **kwargs)
        self.block = block
        self.border_title = block.language
