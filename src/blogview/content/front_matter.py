"""YAML front matter parsing for post sources."""

import datetime
import re
from typing import Any

import yaml

from blogview.services.exceptions import FrontMatterError


FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def split_front_matter(raw: str, path: str) -> tuple[dict[str, Any], str]:
    """Split a source file into its front matter mapping and Markdown body.

    Args:
        raw: Full file contents
        path: Source path (for error messages)

    Returns:
        Tuple of (front matter dict, body text)

    Raises:
        FrontMatterError: If the file has no front matter block or it is not a mapping
    """
    match = FRONT_MATTER_RE.match(raw)
    if not match:
        raise FrontMatterError(path, "Post must start with a '---' front matter block")

    try:
        data = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise FrontMatterError(path, f"Front matter is not valid YAML ({e})") from e

    if not isinstance(data, dict):
        raise FrontMatterError(path, "Front matter must be a mapping")

    body = raw[match.end():].lstrip("\r\n")
    return data, body


def parse_date(value: Any, path: str) -> datetime.date:
    """Coerce a front matter ``date`` value to a date.

    Accepts YAML dates/datetimes and ISO-8601 strings.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value.strip()[:10])
        except ValueError as e:
            raise FrontMatterError(path, f"Invalid date '{value}'") from e
    raise FrontMatterError(path, "Front matter must define 'date'")


def parse_series(value: Any) -> tuple[str, ...]:
    """Normalise ``series`` to a tuple of non-empty names, order preserved."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    names = []
    for item in value:
        name = str(item).strip() if item is not None else ""
        if name and name not in names:
            names.append(name)
    return tuple(names)
