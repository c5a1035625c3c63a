"""Unit tests for front matter parsing."""

import datetime

import pytest

from blogview.content.front_matter import parse_date, parse_series, split_front_matter
from blogview.services.exceptions import FrontMatterError


class TestSplitFrontMatter:
    """Test split_front_matter."""

    def test_split(self):
        data, body = split_front_matter("---\ntitle: Hi\n---\n\nBody text\n", "post.md")

        assert data == {"title": "Hi"}
        assert body == "Body text\n"

    def test_missing_block(self):
        with pytest.raises(FrontMatterError, match="must start with"):
            split_front_matter("No front matter\n", "post.md")

    def test_invalid_yaml(self):
        with pytest.raises(FrontMatterError, match="not valid YAML"):
            split_front_matter("---\ntitle: [unclosed\n---\n", "post.md")

    def test_non_mapping(self):
        with pytest.raises(FrontMatterError, match="must be a mapping") as exc_info:
            split_front_matter("---\n- a\n- b\n---\n", "post.md")

        assert exc_info.value.path == "post.md"


class TestParseDate:
    """Test parse_date."""

    def test_yaml_date(self):
        assert parse_date(datetime.date(2020, 1, 5), "p") == datetime.date(2020, 1, 5)

    def test_datetime(self):
        value = datetime.datetime(2020, 1, 5, 12, 30)

        assert parse_date(value, "p") == datetime.date(2020, 1, 5)

    def test_iso_string(self):
        assert parse_date("2022-07-01T10:00:00Z", "p") == datetime.date(2022, 7, 1)

    def test_invalid_string(self):
        with pytest.raises(FrontMatterError, match="Invalid date"):
            parse_date("yesterday", "p")

    def test_missing(self):
        with pytest.raises(FrontMatterError, match="must define 'date'"):
            parse_date(None, "p")


class TestParseSeries:
    """Test parse_series."""

    def test_none(self):
        assert parse_series(None) == ()

    def test_single_string(self):
        assert parse_series("Meta") == ("Meta",)

    def test_list_keeps_order_and_drops_duplicates(self):
        assert parse_series(["Deep Dives", "Meta", "Deep Dives", " "]) == ("Deep Dives", "Meta")
