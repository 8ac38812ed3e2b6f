#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_front_matter.py
"""Unit tests for front matter synthesis.

Tests cover:
- Fixed fields and their order
- Tag rewriting and category/tags/related routing
- Generic field names and values, including date detection
- Quote escaping

"""

import datetime

import pytest

from mdexport.options import MarkdownExportOptions
from mdexport.renderers.frontmatter import (
    build_front_matter,
    double_quoted,
    format_field_name,
    format_field_value,
    format_tag,
    front_matter_lines,
    partition_tags,
    split_tag_list,
)


@pytest.mark.unit
class TestFixedFields:
    """Tests for the well-known fields."""

    def test_intro_example(self):
        """Test caption, category, year tag and related routing together."""
        block = build_front_matter({"caption": "Intro", "tags": ["Project", "2024", "notes with spaces"]})
        assert block == (
            "---\n"
            'title: "Intro"\n'
            "category: ['Project']\n"
            "tags: ['Year/2024']\n"
            "related: ['[[notes with spaces]]']\n"
            "---\n"
        )

    def test_caption_preferred_over_title(self):
        """Test that caption wins over title."""
        assert front_matter_lines({"title": "Raw", "caption": "Shown"}) == ['title: "Shown"']

    def test_title_fallback(self):
        """Test that title is used without a caption."""
        assert front_matter_lines({"title": "Raw"}) == ['title: "Raw"']

    def test_field_order(self):
        """Test the fixed emission order."""
        lines = front_matter_lines(
            {
                "aliases": "AKA",
                "description": "Summary",
                "modified": datetime.datetime(2024, 1, 31, 12, 0),
                "path": "notes/a.md",
                "author": "Dana",
                "title": "T",
            }
        )
        assert lines == [
            'title: "T"',
            'author: "Dana"',
            'path: "notes/a.md"',
            "date: '2024-01-31T12:00:00.000Z'",
            'abstract: "Summary"',
            'aliases: ["AKA"]',
        ]

    def test_double_quotes_escaped(self):
        """Test that every double quote in a fixed field is escaped."""
        assert front_matter_lines({"title": 'Say "hi" "now"'}) == ['title: "Say \\"hi\\" \\"now\\""']

    def test_modified_wiki_timestamp(self):
        """Test that wiki timestamps are converted."""
        assert front_matter_lines({"modified": "20240131120000000"}) == ["date: '2024-01-31T12:00:00.000Z'"]

    def test_unparseable_modified_skipped(self, caplog):
        """Test that a bad modification date is dropped with a warning."""
        assert front_matter_lines({"modified": "yesterday"}) == []
        assert "unparseable" in caplog.text

    def test_no_fields(self):
        """Test that no exportable field gives an empty block."""
        assert build_front_matter({"text": "body"}) == ""


@pytest.mark.unit
class TestTags:
    """Tests for tag handling."""

    def test_year_tag(self):
        """Test four-digit tags."""
        assert format_tag("2024") == "'Year/2024'"

    def test_numeric_tag(self):
        """Test other numeric tags."""
        assert format_tag("42") == "'N42'"
        assert format_tag("12345") == "'N12345'"

    def test_only_first_quote_escaped(self):
        """Test that only the first embedded single quote is escaped."""
        assert format_tag("it's Bob's") == "'it\\'s Bob's'"

    def test_split_wiki_tag_string(self):
        """Test the bracketed multi-word tag syntax."""
        assert split_tag_list("alpha [[two words]] beta") == ["alpha", "two words", "beta"]

    def test_split_list_and_none(self):
        """Test list and missing tags."""
        assert split_tag_list(["a", 2024]) == ["a", "2024"]
        assert split_tag_list(None) == []

    def test_partition(self):
        """Test three-way routing."""
        categories, plain, related = partition_tags(["'Person'", "'misc'", "'two words'"], ["Person"])
        assert categories == ["'Person'"]
        assert plain == ["'misc'"]
        assert related == ["'[[two words]]'"]

    def test_category_with_space_is_category(self):
        """Test that category membership is checked before the space rule."""
        categories, _, related = partition_tags(["'Big Project'"], ["Big Project"])
        assert categories == ["'Big Project'"]
        assert related == []

    def test_custom_category_vocabulary(self):
        """Test that the vocabulary comes from the options."""
        options = MarkdownExportOptions(category_tags=("Recipe",))
        lines = front_matter_lines({"tags": ["Recipe", "Project"]}, options)
        assert lines == ["category: ['Recipe']", "tags: ['Project']"]

    def test_tag_string_from_wiki(self):
        """Test tags stored as a single wiki string."""
        lines = front_matter_lines({"tags": "Meeting [[team sync]] 7"})
        assert lines == ["category: ['Meeting']", "tags: ['N7']", "related: ['[[team sync]]']"]


@pytest.mark.unit
class TestGenericFields:
    """Tests for fields outside the fixed set."""

    def test_field_name_cleanup(self):
        """Test that whitespace becomes hyphens and the first colon is dropped."""
        assert format_field_name("due  date:") == "due-date"
        assert format_field_name("a:b:c") == "ab:c"

    def test_non_string_field_name(self):
        """Test that integer keys from YAML are written as text."""
        assert format_field_name(2024) == "2024"
        assert front_matter_lines({"caption": "Intro", 2024: "year"}) == ['title: "Intro"', "2024: 'year'"]

    def test_number_unquoted(self):
        """Test that numbers pass through bare."""
        assert format_field_value(3) == "3"
        assert format_field_value(2.5) == "2.5"

    def test_boolean(self):
        """Test that booleans are quoted lowercase words."""
        assert format_field_value(True) == "'true'"

    def test_string_quoted_newlines_removed(self):
        """Test that strings lose their line breaks."""
        assert format_field_value("line one\r\nline two") == "'line oneline two'"

    def test_first_single_quote_escaped(self):
        """Test that only the first single quote is escaped."""
        assert format_field_value("it's Bob's") == "'it\\'s Bob's'"

    def test_date_string_detected(self):
        """Test that date strings become ISO timestamps."""
        assert format_field_value("2024-02-29") == "'2024-02-29T00:00:00.000Z'"

    def test_invalid_date_stays_text(self):
        """Test that an impossible date is kept as text."""
        assert format_field_value("2023-02-29") == "'2023-02-29'"

    def test_list_joined(self):
        """Test that lists are comma-joined."""
        assert format_field_value(["a", "b"]) == "'a,b'"

    def test_generic_fields_after_fixed(self):
        """Test that generic fields follow the fixed ones in insertion order."""
        lines = front_matter_lines({"status": "draft", "title": "T", "due date": "2024-03-01", "creator": "x"})
        assert lines == ['title: "T"', "status: 'draft'", "due-date: '2024-03-01T00:00:00.000Z'"]

    def test_none_values_skipped(self):
        """Test that empty fields are left out."""
        assert front_matter_lines({"status": None}) == []

    def test_excluded_fields_option(self):
        """Test excluding additional fields."""
        options = MarkdownExportOptions(excluded_fields=("internal",))
        assert front_matter_lines({"internal": "x", "kept": "y"}, options) == ["kept: 'y'"]

    def test_double_quoted_helper(self):
        """Test the double quote helper with non-string input."""
        assert double_quoted(5) == '"5"'
