"""Unit tests for PageRenderer."""

from pathlib import Path

from blogview.rendering.page import Document, PageRenderer


def render(provider, site, theme, slug):
    return PageRenderer(site, theme, provider).render_post(provider.get(slug))


class TestRenderPost:
    """Test post page rendering."""

    def test_document_path_and_title(self, provider, site, theme):
        document = render(provider, site, theme, "hooks-deeply")

        assert document.path == "/hooks-deeply"
        assert document.title == "Hooks, Deeply"
        assert "<title>sean.wtf · Hooks, Deeply</title>" in document.html

    def test_heading_links_to_canonical_path(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert '<h1 class="post-title"><a href="/hooks-deeply">Hooks, Deeply</a></h1>' in html
        assert '<link rel="canonical" href="https://sean.wtf/hooks-deeply">' in html

    def test_reply_line_when_link_present(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert 'class="post-reply">Re: <a href="https://example.com/original"' in html

    def test_no_reply_line_without_link(self, provider, site, theme):
        html = render(provider, site, theme, "first-post").html

        assert "post-reply" not in html

    def test_series_tags_link_to_series_pages(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert '<a class="series-tag" href="/series/deep-dives">Deep Dives</a>' in html
        assert '<a class="series-tag" href="/series/meta">Meta</a>' in html

    def test_date_and_time_to_read(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert '<time datetime="2021-03-04">03/04/2021</time>' in html
        assert "1 Min Read" in html

    def test_both_neighbours(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert '<a class="prev" rel="prev" href="/first-post">' in html
        assert '<a class="next" rel="next" href="/latest-thoughts">' in html
        assert "disabled" not in html

    def test_missing_prev_is_disabled(self, provider, site, theme):
        html = render(provider, site, theme, "first-post").html

        assert '<span class="prev disabled" aria-disabled="true">' in html
        assert '<a class="next" rel="next" href="/hooks-deeply">' in html

    def test_missing_next_is_disabled(self, provider, site, theme):
        html = render(provider, site, theme, "latest-thoughts").html

        assert '<span class="next disabled" aria-disabled="true">' in html

    def test_body_code_blocks(self, provider, site, theme):
        html = render(provider, site, theme, "hooks-deeply").html

        assert html.count('<div class="code-block">') == 2
        assert html.count('<div class="live-panel"') == 1
        assert '<h2 id="setup"><a class="anchor" href="#setup" aria-hidden="true">#</a>Setup</h2>' in html

    def test_seo_meta(self, provider, site, theme):
        html = render(provider, site, theme, "first-post").html

        assert '<meta property="og:title" content="First Post">' in html
        assert '<meta property="article:published_time" content="2020-01-05">' in html
        assert (
            '<meta name="description" content="Welcome to the blog. This is the very first paragraph.">'
            in html
        )

    def test_title_is_escaped(self, tmp_path, make_post, site, theme):
        from blogview.content.provider import ContentProvider

        make_post(tmp_path, "x.md", 'title: "<b>Bold</b>"\ndate: 2020-01-01')
        provider = ContentProvider.load(tmp_path)

        html = render(provider, site, theme, "x").html

        assert "<b>Bold</b>" not in html
        assert "&lt;b&gt;Bold&lt;/b&gt;" in html


class TestIndexPages:
    """Test series, home and stylesheet documents."""

    def test_series_page(self, provider, site, theme):
        document = PageRenderer(site, theme, provider).render_series("Meta")

        assert document.path == "/series/meta"
        assert "#Meta" in document.html
        assert document.html.index("/hooks-deeply") < document.html.index("/first-post")

    def test_index_page(self, provider, site, theme):
        document = PageRenderer(site, theme, provider).render_index()

        assert document.path == "/"
        assert document.html.index("/latest-thoughts") < document.html.index("/first-post")
        assert 'href="/series/deep-dives"' in document.html

    def test_stylesheet_uses_palette(self, provider, site, theme):
        css = PageRenderer(site, theme, provider).render_stylesheet().html

        assert theme.colors.primary in css
        assert "rgba(183,65,14,0.334)" in css


class TestDocument:
    """Test output paths."""

    def test_output_relpath(self):
        assert Document(path="/hooks", title="", html="").output_relpath == Path("hooks/index.html")
        assert Document(path="/series/meta", title="", html="").output_relpath == Path("series/meta/index.html")
        assert Document(path="/", title="", html="").output_relpath == Path("index.html")
        assert Document(path="/style.css", title="", html="").output_relpath == Path("style.css")
