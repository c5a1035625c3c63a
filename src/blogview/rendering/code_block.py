"""HTML rendering of fenced code blocks.

Static blocks become a ``prism-code`` ``<pre>`` with one ``token-line`` div
per source line. Live blocks become an editor/error/preview panel; in a
static build the preview holds the result of evaluating the seed text once.
"""

from typing import Iterable, Optional, Union

from markupsafe import Markup

from blogview.live.evaluator import Evaluator
from blogview.models.code_block import (
    DEFAULT_LIVE_LANGUAGES,
    LiveCodeBlock,
    StaticCodeBlock,
    resolve_code_block,
)
from blogview.models.theme import Theme
from blogview.rendering.tokenizer import Line, tokenize
from blogview.utils.logging import get_logger


logger = get_logger(__name__)


class CodeBlockRenderer:
    """Render CodeBlocks to HTML fragments using one theme."""

    def __init__(
        self,
        theme: Theme,
        evaluator: Optional[Evaluator] = None,
        evaluate_live: bool = True,
        live_languages: Iterable[str] = DEFAULT_LIVE_LANGUAGES,
    ):
        """Initialize CodeBlockRenderer.

        Args:
            theme: Theme supplying the category style table
            evaluator: Evaluator for live blocks (None leaves previews empty)
            evaluate_live: Evaluate each live block's seed text once
            live_languages: Languages ``render`` may mount live
        """
        self.theme = theme
        self.evaluator = evaluator
        self.evaluate_live = evaluate_live
        self.live_languages = tuple(live_languages)

    def render(self, source_text: str, language: str, is_live: bool) -> Markup:
        """Render raw fence contents.

        A live request for a language outside ``live_languages`` renders static.
        """
        block = resolve_code_block(source_text, language, is_live, self.live_languages)
        return self.render_block(block)

    def render_block(self, block: Union[StaticCodeBlock, LiveCodeBlock]) -> Markup:
        """Render a CodeBlock, dispatching on its variant."""
        if isinstance(block, LiveCodeBlock):
            return self._render_live(block)
        if isinstance(block, StaticCodeBlock):
            return self._render_static(block)
        raise TypeError(f"Not a code block: {block!r}")

    def highlight(self, source_text: str, language: str) -> Markup:
        """Render the highlighted ``<pre>`` for some source."""
        lines = tokenize(source_text, language)
        plain_css = self.theme.plain.to_css()
        parts = [
            Markup('<pre class="prism-code language-{lang}" style="{style}">').format(
                lang=language, style=plain_css
            )
        ]
        parts.extend(self._render_line(line) for line in lines)
        parts.append(Markup("</pre>"))
        return Markup("").join(parts)

    def _render_line(self, line: Line) -> Markup:
        spans = []
        for token in line:
            css = self.theme.style_for(token.category).to_css()
            if css:
                span = Markup('<span class="token {cat}" style="{css}">{text}</span>')
                spans.append(span.format(cat=token.category, css=css, text=token.content))
            else:
                spans.append(Markup('<span class="token {cat}">{text}</span>').format(
                    cat=token.category, text=token.content
                ))
        return Markup('<div class="token-line">{spans}</div>').format(spans=Markup("").join(spans))

    def _render_static(self, block: StaticCodeBlock) -> Markup:
        return Markup(
            '<div class="code-block">'
            '<span class="code-language-tag">{lang}</span>'
            '<div class="code-scroll">{pre}</div>'
            "</div>"
        ).format(lang=block.language, pre=self.highlight(block.source_text, block.language))

    def _render_live(self, block: LiveCodeBlock) -> Markup:
        output, error = "", ""
        if self.evaluate_live and self.evaluator is not None:
            result = self.evaluator.evaluate(block.source_text)
            if result.ok:
                output = result.output or ""
            else:
                error = result.error or ""
                logger.warning("live_block_seed_failed", language=block.language, error=error)

        return Markup(
            '<div class="live-panel" data-language="{lang}">'
            '<div class="live-editor" data-source="{source}">{pre}</div>'
            '<pre class="live-error">{error}</pre>'
            '<div class="live-preview"><pre>{output}</pre></div>'
            "</div>"
        ).format(
            lang=block.language,
            source=block.source_text,
            pre=self.highlight(block.source_text, block.language),
            error=error,
            output=output,
        )
