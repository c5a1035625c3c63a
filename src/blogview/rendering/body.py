"""Render a CompiledBody to HTML, routing fenced blocks to the code renderer."""

from markupsafe import Markup, escape

from blogview.content.compiler import create_markdown
from blogview.models.code_block import make_code_block
from blogview.models.post import CompiledBody
from blogview.rendering.code_block import CodeBlockRenderer


class BodyRenderer:
    """Turn pre-compiled token streams into HTML."""

    def __init__(self, code_renderer: CodeBlockRenderer):
        self.code_renderer = code_renderer
        self.md = create_markdown()

        def render_fence(renderer, tokens, idx, options, env):
            token = tokens[idx]
            block = token.meta.get("code_block")
            if block is None:
                block = make_code_block(token.content.rstrip("\n"), token.info)
            return str(self.code_renderer.render_block(block)) + "\n"

        def render_heading_open(renderer, tokens, idx, options, env):
            html = renderer.renderToken(tokens, idx, options, env)
            anchor = tokens[idx].attrGet("id")
            if anchor:
                html += f'<a class="anchor" href="#{escape(anchor)}" aria-hidden="true">#</a>'
            return html

        self.md.add_render_rule("fence", render_fence)
        self.md.add_render_rule("heading_open", render_heading_open)

    def render(self, body: CompiledBody) -> Markup:
        """Render the body's tokens without re-parsing its Markdown."""
        return Markup(self.md.renderer.render(body.tokens, self.md.options, {}))
