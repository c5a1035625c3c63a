"""Configuration loader with YAML and environment variable support.

This module provides a configuration loader that reads from ~/.config/blogview/config.yaml
and allows environment variable overrides using BLOGVIEW_* prefix.

Environment variables:
- BLOGVIEW_SITE_TITLE: Override site title
- BLOGVIEW_SITE_URL: Override site URL
- BLOGVIEW_CONTENT_DIR: Override content directory
- BLOGVIEW_OUTPUT_DIR: Override build output directory
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from blogview.models.config import Config
from blogview.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "blogview" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/blogview/config.yaml

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist and no overrides are set
        ValueError: If config file is invalid or names no content directory
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")
    else:
        data = {}

    data = _apply_env_overrides(data)

    if not data.get("content"):
        if config_path.exists():
            raise ValueError(
                f"Configuration file {config_path} has no 'content.content_dir' setting.\n\n"
                f"Add it (or set BLOGVIEW_CONTENT_DIR):\n\n"
                f"content:\n"
                f"  content_dir: ~/blog/content\n"
            )
        raise FileNotFoundError(
            f"Configuration file not found at {config_path} and no BLOGVIEW_* environment variables set.\n\n"
            f"Please create the file with the following format:\n\n"
            f"site:\n"
            f"  title: sean.wtf\n"
            f"  url: https://sean.wtf\n\n"
            f"content:\n"
            f"  content_dir: ~/blog/content\n"
            f"  output_dir: ~/blog/public\n"
        )

    config = Config(**data)
    logger.info("config_loaded", path=str(config_path), content_dir=config.content.content_dir)
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Environment variables use the format: BLOGVIEW_SECTION_KEY
    For example: BLOGVIEW_SITE_TITLE sets data['site']['title']

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    site = dict(data.get("site") or {})
    content = dict(data.get("content") or {})

    if env_title := os.getenv("BLOGVIEW_SITE_TITLE"):
        site["title"] = env_title

    if env_url := os.getenv("BLOGVIEW_SITE_URL"):
        site["url"] = env_url

    if env_content_dir := os.getenv("BLOGVIEW_CONTENT_DIR"):
        content["content_dir"] = env_content_dir

    if env_output_dir := os.getenv("BLOGVIEW_OUTPUT_DIR"):
        content["output_dir"] = env_output_dir

    data = dict(data)
    if site:
        data["site"] = site
    if content:
        data["content"] = content
    return data
