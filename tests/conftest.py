"""Shared test fixtures for all test modules."""

from pathlib import Path
from textwrap import dedent

import pytest

from blogview.content.provider import ContentProvider
from blogview.models.config import SiteConfig
from blogview.models.theme import Theme
from blogview.utils.logging import close_log_file, configure_logging


def write_post(directory: Path, name: str, front_matter: str, body: str = "Hello.\n") -> Path:
    """Write a post source file with front matter and return its path."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{dedent(front_matter).strip()}\n---\n\n{dedent(body)}", encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with three posts in two series.

    Date order (oldest first): first-post, hooks-deeply, latest-thoughts.
    """
    directory = tmp_path / "content"
    directory.mkdir()

    write_post(
        directory,
        "first-post.md",
        """
        title: First Post
        date: 2020-01-05
        series: [Meta]
        """,
        "Welcome to the blog. This is the very first paragraph.\n",
    )

    write_post(
        directory,
        "hooks-deeply/index.md",
        """
        title: Hooks, Deeply
        date: 2021-03-04
        series:
          - Deep Dives
          - Meta
        link: https://example.com/original
        """,
        """
        Intro paragraph about hooks.

        ## Setup

        ```python
        def add(a, b):
            return a + b
        ```

        ```python live
        render(add_one(1) if False else 2)
        ```

        ```js react-live
        render(<App />)
        ```
        """,
    )

    write_post(
        directory,
        "latest-thoughts.md",
        """
        title: Latest Thoughts
        date: "2022-07-01"
        """,
        "Short and sweet.\n",
    )

    return directory


@pytest.fixture
def provider(content_dir):
    """ContentProvider over the sample content directory."""
    return ContentProvider.load(content_dir, live_languages=("python", "py", "python3"))


@pytest.fixture
def theme():
    """Stock theme."""
    return Theme.default()


@pytest.fixture
def site():
    """Site settings with a fixed URL."""
    return SiteConfig(title="sean.wtf", url="https://sean.wtf/")


@pytest.fixture
def make_post():
    """Factory writing a post source file: make_post(dir, name, front_matter, body)."""
    return write_post


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Send log output to the test's temp directory and close it afterwards."""
    monkeypatch.setenv("BLOGVIEW_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("BLOGVIEW_LOG_LEVEL", raising=False)
    configure_logging(tmp_path / "logs")
    yield
    close_log_file()
