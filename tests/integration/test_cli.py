"""Integration tests for CLI module."""

import pytest
from click.testing import CliRunner

from blogview.cli import cli


@pytest.fixture
def config_file(tmp_path, content_dir, monkeypatch):
    """Config file pointing at the sample content."""
    for name in ("BLOGVIEW_SITE_TITLE", "BLOGVIEW_SITE_URL", "BLOGVIEW_CONTENT_DIR", "BLOGVIEW_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(f"""
site:
  title: sean.wtf

content:
  content_dir: {content_dir}
  output_dir: {tmp_path / "public"}
""")
    return path


class TestBuildCommand:
    """Integration tests for the build command."""

    def test_build(self, config_file, tmp_path):
        result = CliRunner().invoke(cli, ["--config", str(config_file), "build"], obj={})

        assert result.exit_code == 0, result.output
        assert "Built 3 post(s) and 2 series page(s)" in result.output
        assert (tmp_path / "public" / "hooks-deeply" / "index.html").exists()

    def test_build_output_and_no_eval(self, config_file, tmp_path):
        target = tmp_path / "out"
        result = CliRunner().invoke(
            cli, ["--config", str(config_file), "build", "--output", str(target), "--no-eval"], obj={}
        )

        assert result.exit_code == 0, result.output
        html = (target / "hooks-deeply" / "index.html").read_text()
        assert '<div class="live-preview"><pre></pre></div>' in html

    def test_invalid_content_reports_error(self, config_file, content_dir, make_post):
        make_post(content_dir, "broken.md", "date: 2020-01-01")

        result = CliRunner().invoke(cli, ["--config", str(config_file), "build"], obj={})

        assert result.exit_code == 1
        assert "must define 'title'" in result.output


class TestListCommand:
    """Integration tests for the list command."""

    def test_list_all(self, config_file):
        result = CliRunner().invoke(cli, ["--config", str(config_file), "list"], obj={})

        assert result.exit_code == 0, result.output
        assert result.output.index("latest-thoughts") < result.output.index("first-post")

    def test_list_series(self, config_file):
        result = CliRunner().invoke(
            cli, ["--config", str(config_file), "list", "--series", "Deep Dives"], obj={}
        )

        assert result.exit_code == 0, result.output
        assert "hooks-deeply" in result.output
        assert "first-post" not in result.output

    def test_list_unknown_series(self, config_file):
        result = CliRunner().invoke(cli, ["--config", str(config_file), "list", "--series", "Nope"], obj={})

        assert result.exit_code == 0
        assert "No posts found." in result.output


class TestReadCommand:
    """Integration tests for the read command's argument checks."""

    def test_unknown_slug(self, config_file):
        result = CliRunner().invoke(cli, ["--config", str(config_file), "read", "missing"], obj={})

        assert result.exit_code == 1
        assert "No post with slug 'missing'" in result.output

    def test_empty_content(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BLOGVIEW_CONTENT_DIR", raising=False)
        empty = tmp_path / "empty"
        empty.mkdir()
        path = tmp_path / "config.yaml"
        path.write_text(f"content:\n  content_dir: {empty}\n")

        result = CliRunner().invoke(cli, ["--config", str(path), "read"], obj={})

        assert result.exit_code == 1
        assert "No posts found" in result.output


class TestConfigErrors:
    """Integration tests for configuration errors."""

    def test_invalid_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BLOGVIEW_CONTENT_DIR", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(f"content:\n  content_dir: {tmp_path / 'missing'}\n")

        result = CliRunner().invoke(cli, ["--config", str(path), "list"], obj={})

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output

    def test_config_without_content_section(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BLOGVIEW_CONTENT_DIR", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("site:\n  title: My Blog\n")

        result = CliRunner().invoke(cli, ["--config", str(path), "list"], obj={})

        assert result.exit_code == 1
        assert "content.content_dir" in result.output
        assert "not found" not in result.output
