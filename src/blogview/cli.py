"""CLI entry point for blogview."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from blogview.config.loader import load_config as load_config_file
from blogview.content.provider import ContentProvider
from blogview.models.config import Config
from blogview.models.theme import Theme
from blogview.services.exceptions import ContentError
from blogview.utils.logging import configure_logging, get_logger
from blogview.utils.slugs import series_path


logger = get_logger(__name__)
console = Console()


def load_config(config_path: Optional[Path]) -> Config:
    """
    Load configuration from --config or ~/.config/blogview/config.yaml.

    Returns:
        Validated Config instance

    Raises:
        click.ClickException: If config is missing or validation fails
    """
    try:
        return load_config_file(config_path)
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(config_path))
        raise click.ClickException(str(e))
    except Exception as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(f"Configuration validation failed:\n{e}")


def load_content(config: Config) -> ContentProvider:
    """Load every post named by the configuration.

    Raises:
        click.ClickException: If a post cannot be loaded
    """
    try:
        return ContentProvider.load(
            Path(config.content.content_dir),
            live_languages=config.live.languages if config.live.enabled else (),
            words_per_minute=config.site.words_per_minute,
        )
    except ContentError as e:
        logger.error("content_load_error", error=str(e))
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0", prog_name="blogview")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/blogview/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """blogview: render a Markdown blog to HTML or read it in the terminal."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.option(
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: content.output_dir from config)",
)
@click.option("--no-eval", is_flag=True, help="Do not evaluate live code blocks while building")
@click.pass_context
def build(ctx: click.Context, output: Optional[Path], no_eval: bool):
    """
    Build the static site.

    Examples:
        blogview build
        blogview build --output ./public --no-eval
    """
    from blogview.site.builder import SiteBuilder

    config = load_config(ctx.obj["config_path"])
    provider = load_content(config)
    theme = Theme.from_config(config.theme)

    builder = SiteBuilder(config, provider, theme, evaluate_live=False if no_eval else None)

    with console.status("[bold green]Rendering pages...") as status:
        def progress(document):
            status.update(f"[bold green]Rendered {document.path}")

        report = builder.build(output_dir=output, progress_callback=progress)

    click.echo(
        f"✓ Built {report.posts} post(s) and {report.series} series page(s) "
        f"into {report.output_dir} ({len(report.written)} files)"
    )


@cli.command(name="list")
@click.option("--series", "series_name", default=None, help="Only list posts in this series")
@click.pass_context
def list_posts(ctx: click.Context, series_name: Optional[str]):
    """
    List posts, newest first.

    Examples:
        blogview list
        blogview list --series "Deep Dives"
    """
    config = load_config(ctx.obj["config_path"])
    provider = load_content(config)

    posts = provider.series(series_name) if series_name else provider.posts()
    if not posts:
        click.echo("No posts found.")
        return

    title = f"#{series_name} ({series_path(series_name)})" if series_name else config.site.title
    table = Table(title=title)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Slug", style="green")
    table.add_column("Title")
    table.add_column("Series", style="magenta")
    for post in posts:
        table.add_row(
            post.date.strftime(config.site.date_format),
            post.slug,
            post.title,
            ", ".join(post.series),
        )
    console.print(table)


@cli.command()
@click.argument("slug", required=False)
@click.pass_context
def read(ctx: click.Context, slug: Optional[str]):
    """
    Read a post in the terminal (latest post when SLUG is omitted).

    Live code blocks are editable; press n/p for the next/previous post.
    """
    from blogview.live.evaluator import PythonEvaluator
    from blogview.tui.app import BlogViewApp

    config = load_config(ctx.obj["config_path"])
    provider = load_content(config)

    if len(provider) == 0:
        raise click.ClickException("No posts found in content directory")
    if slug and slug not in provider:
        raise click.ClickException(f"No post with slug '{slug}'")

    logger.info("launching_tui", slug=slug)
    app = BlogViewApp(
        provider=provider,
        config=config,
        theme=Theme.from_config(config.theme),
        evaluator=PythonEvaluator() if config.live.enabled else None,
        start_slug=slug,
    )
    app.run()


def main():
    """Main entry point for setuptools console script."""
    cli(obj={})


if __name__ == "__main__":
    main()
