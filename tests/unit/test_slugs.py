"""Unit tests for slug helpers."""

import pytest

from blogview.utils.slugs import post_path, series_path, slugify


class TestSlugify:
    """Test slugify."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Deep Dives", "deep-dives"),
            ("deep dives", "deep-dives"),
            ("Meta", "meta"),
            ("React Hooks: useState", "react-hooks-use-state"),
            ("HTTPServer internals", "http-server-internals"),
            ("  padded   words  ", "padded-words"),
            ("2020-01-02-hello", "2020-01-02-hello"),
            ("Über Dinge", "uber-dinge"),
            ("Café Notes", "cafe-notes"),
            ("日本語", "日本語"),
            ("日本語 メモ", "日本語-メモ"),
            ("Straße", "straße"),
        ],
    )
    def test_slugify(self, value, expected):
        """Test slugify lowercases and hyphenates words."""
        assert slugify(value) == expected

    def test_empty_values(self):
        """Test empty and symbol-only input produce an empty slug."""
        assert slugify("") == ""
        assert slugify("!!!") == ""

    def test_deterministic(self):
        """Test repeated calls give the same slug."""
        assert slugify("Deep Dives") == slugify("Deep Dives")


class TestPaths:
    """Test path helpers."""

    def test_series_path(self):
        assert series_path("Deep Dives") == "/series/deep-dives"

    def test_post_path(self):
        assert post_path("hooks-deeply") == "/hooks-deeply"


class TestNonAsciiSeries:
    """Test series names outside ASCII keep distinct, non-empty paths."""

    def test_accented_series_path(self):
        assert series_path("Über Dinge") == "/series/uber-dinge"

    def test_non_latin_series_path(self):
        assert series_path("日本語") == "/series/日本語"

    def test_distinct_non_latin_series_stay_distinct(self, tmp_path, make_post):
        from blogview.content.provider import ContentProvider

        make_post(tmp_path, "a.md", "title: A\ndate: 2020-01-01\nseries: [日本語]")
        make_post(tmp_path, "b.md", "title: B\ndate: 2020-01-02\nseries: [中文]")

        provider = ContentProvider.load(tmp_path)

        assert sorted(provider.series_names()) == sorted(["日本語", "中文"])
        assert [p.slug for p in provider.series("日本語")] == ["a"]
