"""Configuration models for blogview."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from blogview.models.code_block import DEFAULT_LIVE_LANGUAGES
from blogview.models.theme import ThemeColors, TokenStyle


class SiteConfig(BaseModel):
    """Site identity and presentation settings."""

    title: str = Field(default="sean.wtf", description="Site identifier shown in page titles")
    url: str = Field(default="https://sean.wtf", description="Absolute site URL used for canonical links")
    description: str = Field(default="", description="Default meta description")
    author: str = Field(default="", description="Author name for meta tags")
    date_format: str = Field(default="%m/%d/%Y", description="strftime format for publication dates")
    words_per_minute: int = Field(default=265, ge=50, description="Reading speed for time-to-read")

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the site URL without a trailing slash."""
        return v.rstrip("/")

    model_config = {"frozen": True}


class ContentConfig(BaseModel):
    """Locations of post sources and build output."""

    content_dir: str = Field(..., description="Directory holding Markdown posts")
    output_dir: str = Field(default="public", description="Directory the static site is written to")
    static_dir: Optional[str] = Field(default=None, description="Assets copied verbatim into the output")

    @field_validator("content_dir")
    @classmethod
    def validate_content_dir(cls, v: str) -> str:
        """Validate content directory exists and is a directory."""
        path = Path(v).expanduser()
        if not path.exists():
            raise ValueError(
                f"Content directory does not exist: {path}\n"
                f"Please create the directory or update config.yaml"
            )
        if not path.is_dir():
            raise ValueError(
                f"Content path is not a directory: {path}\n"
                f"Please provide a valid directory path"
            )
        return str(path)

    @field_validator("output_dir", "static_dir")
    @classmethod
    def expand_user(cls, v: Optional[str]) -> Optional[str]:
        """Expand ``~`` in output and asset paths."""
        if v is None:
            return v
        return str(Path(v).expanduser())

    model_config = {"frozen": True}


class ThemeConfig(BaseModel):
    """Palette and per-category style overrides."""

    colors: ThemeColors = Field(default_factory=ThemeColors)
    styles: dict[str, TokenStyle] = Field(default_factory=dict)

    model_config = {"frozen": True}


class LiveConfig(BaseModel):
    """Settings for live (evaluable) code blocks."""

    enabled: bool = Field(default=True, description="Honour live flags on fenced code blocks")
    languages: tuple[str, ...] = Field(
        default=DEFAULT_LIVE_LANGUAGES,
        description="Fence languages the evaluator accepts",
    )
    evaluate_on_build: bool = Field(default=True, description="Evaluate seed text once when building HTML")
    evaluate_on_mount: bool = Field(default=True, description="Evaluate seed text once when a panel mounts")

    @field_validator("languages")
    @classmethod
    def lowercase_languages(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Normalise language names to lowercase."""
        return tuple(lang.lower() for lang in v)

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for blogview."""

    site: SiteConfig = Field(default_factory=SiteConfig, description="Site settings")
    content: ContentConfig = Field(..., description="Content locations")
    theme: ThemeConfig = Field(default_factory=ThemeConfig, description="Theme overrides")
    live: LiveConfig = Field(default_factory=LiveConfig, description="Live code settings")

    model_config = {"frozen": True}
