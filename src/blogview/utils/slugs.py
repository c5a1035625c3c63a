"""Slug helpers for post paths, series paths and heading anchors."""

import re
import unicodedata

# Runs of letters/digits in any script
_RUN_RE = re.compile(r"[^\W_]+")

# Latin runs are further split at camelCase and acronym boundaries
# the same way kebab-casing tools do ("HTTPServer" -> "http", "server").
_CAMEL_RE = re.compile(
    r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+"
)


def _deburr(value: str) -> str:
    """Strip combining accents ("Über" -> "Uber"); other letters are kept."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _words(value: str) -> list[str]:
    words = []
    for run in _RUN_RE.findall(_deburr(value)):
        if run.isascii():
            words.extend(_CAMEL_RE.findall(run))
        else:
            words.append(run)
    return words


def slugify(value: str) -> str:
    """Convert a title or series name into a URL-safe slug.

    Args:
        value: Arbitrary display text

    Returns:
        Lowercase words joined with hyphens (empty string if no words)

    Example:
        >>> slugify("Deep Dives")
        'deep-dives'
        >>> slugify("React Hooks: useState")
        'react-hooks-use-state'
        >>> slugify("Über Dinge")
        'uber-dinge'
        >>> slugify("日本語 メモ")
        '日本語-メモ'
    """
    if not value:
        return ""
    return "-".join(word.lower() for word in _words(value))


def series_path(name: str) -> str:
    """Path of the index page for a series."""
    return f"/series/{slugify(name)}"


def post_path(slug: str) -> str:
    """Canonical path of a post."""
    return f"/{slug}"
