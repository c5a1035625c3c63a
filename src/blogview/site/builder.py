"""Static site build: write every page of the blog to an output directory."""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import structlog

from blogview.content.provider import ContentProvider
from blogview.live.evaluator import PythonEvaluator
from blogview.models.config import Config
from blogview.models.theme import Theme
from blogview.rendering.code_block import CodeBlockRenderer
from blogview.rendering.page import Document, PageRenderer

logger = structlog.get_logger()


@dataclass
class BuildReport:
    """Summary of one build."""

    output_dir: Path
    posts: int = 0
    series: int = 0
    written: list[Path] = field(default_factory=list)
    assets_copied: bool = False


class SiteBuilder:
    """Render every page for a loaded blog and write it to disk."""

    def __init__(self, config: Config, provider: ContentProvider, theme: Theme, evaluate_live: Optional[bool] = None):
        """Initialize SiteBuilder.

        Args:
            config: Application configuration
            provider: Loaded content
            theme: Theme built once at startup
            evaluate_live: Override ``live.evaluate_on_build``
        """
        self.config = config
        self.provider = provider
        self.theme = theme

        if evaluate_live is None:
            evaluate_live = config.live.evaluate_on_build
        code_renderer = CodeBlockRenderer(
            theme,
            evaluator=PythonEvaluator() if config.live.enabled else None,
            evaluate_live=evaluate_live,
            live_languages=config.live.languages if config.live.enabled else (),
        )
        self.pages = PageRenderer(config.site, theme, provider, code_renderer)

    def documents(self) -> list[Document]:
        """Every document of the site: posts, series indexes, home, stylesheet."""
        documents = [self.pages.render_post(post) for post in self.provider.posts()]
        documents.extend(self.pages.render_series(name) for name in self.provider.series_names())
        documents.append(self.pages.render_index())
        documents.append(self.pages.render_stylesheet())
        return documents

    def build(
        self,
        output_dir: Optional[Path] = None,
        progress_callback: Optional[Callable[[Document], None]] = None,
    ) -> BuildReport:
        """Render and write the whole site.

        Args:
            output_dir: Destination (default: ``content.output_dir``)
            progress_callback: Called after each document is written

        Returns:
            BuildReport listing written files
        """
        output_dir = Path(output_dir or self.config.content.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        report = BuildReport(
            output_dir=output_dir,
            posts=len(self.provider),
            series=len(self.provider.series_names()),
        )
        logger.info("site_build_started", output_dir=str(output_dir), posts=report.posts)

        for document in self.documents():
            target = output_dir / document.output_relpath
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(document.html, encoding="utf-8")
            report.written.append(target)
            if progress_callback:
                progress_callback(document)

        static_dir = self.config.content.static_dir
        if static_dir and Path(static_dir).is_dir():
            shutil.copytree(static_dir, output_dir / "static", dirs_exist_ok=True)
            report.assets_copied = True
            logger.info("static_assets_copied", source=static_dir)

        logger.info("site_build_completed", output_dir=str(output_dir), files=len(report.written))
        return report
