#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_to_markdown.py
"""Integration tests for the high-level conversion API."""

import json
import logging

import pytest
from utils import assert_markdown_valid, doc, el

from mdexport import to_markdown
from mdexport.api import load_metadata, load_tree, render_tree
from mdexport.exceptions import MdFileNotFoundError, ParsingError
from mdexport.options import MarkdownExportOptions

EXPECTED_BODY = (
    "# Weekly Review\n\nTalked to **Alice** about [[Project Atlas]].\n\n1. Ship the beta\n2. Plan the retro\n"
)


@pytest.mark.integration
class TestToMarkdown:
    """Tests for to_markdown with different sources."""

    def test_html_string(self, sample_html):
        """Test converting rendered HTML."""
        output = to_markdown(sample_html)
        assert output == EXPECTED_BODY
        assert_markdown_valid(output)

    def test_with_metadata(self, sample_html, sample_metadata):
        """Test that metadata becomes a leading front matter block."""
        output = to_markdown(sample_html, metadata=sample_metadata)
        assert output == (
            "---\n"
            'title: "Weekly Review"\n'
            "date: '2024-01-31T12:00:00.000Z'\n"
            "category: ['Meeting']\n"
            "tags: ['Year/2024']\n"
            "related: ['[[team sync]]']\n"
            "priority: 2\n"
            "---\n" + EXPECTED_BODY
        )

    def test_empty_metadata_adds_nothing(self, sample_html):
        """Test that metadata without exportable fields leaves the body alone."""
        assert to_markdown(sample_html, metadata={"text": "ignored"}) == EXPECTED_BODY

    def test_html_file(self, tmp_path, sample_html):
        """Test converting an HTML file given as a Path or string."""
        path = tmp_path / "note.html"
        path.write_text(f"<html><body>{sample_html}</body></html>", encoding="utf-8")
        assert to_markdown(path) == EXPECTED_BODY
        assert to_markdown(str(path)) == EXPECTED_BODY

    def test_json_tree_file(self, tmp_path):
        """Test converting a JSON element tree."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps([{"tag": "h2", "children": ["Hi"]}, {"tag": "p", "children": ["Body"]}]))
        assert to_markdown(path) == "## Hi\n\nBody\n"

    def test_element_tree_not_mutated(self):
        """Test that converting a tree with metadata leaves it unchanged."""
        tree = doc(el("p", "x"))
        assert to_markdown(tree, metadata={"title": "T"}) == '---\ntitle: "T"\n---\nx\n'
        assert len(tree.children) == 1

    def test_option_overrides(self):
        """Test keyword option overrides."""
        html = '<p><a href="/vault/a.png">pic</a></p>'
        assert to_markdown(html, vault_root="/vault/") == "![[a.png|pic]]\n"
        options = MarkdownExportOptions(vault_root="/vault/")
        assert to_markdown(html, options=options) == "![[a.png|pic]]\n"

    def test_metadata_with_integer_key(self):
        """Test that a non-string metadata key keeps the rest of the front matter."""
        tree = doc(el("p", "x"))
        output = to_markdown(tree, metadata={"caption": "Intro", 2024: "year"})
        assert output == "---\ntitle: \"Intro\"\n2024: 'year'\n---\nx\n"

    def test_metadata_replaces_meta_node(self, caplog):
        """Test that explicit metadata wins over a meta node in the tree."""
        tree = doc(el("meta", title="Old"), el("p", "x"))
        with caplog.at_level(logging.WARNING, logger="mdexport"):
            output = to_markdown(tree, metadata={"title": "New"})
        assert output == '---\ntitle: "New"\n---\nx\n'
        assert "already has a <meta> node" in caplog.text

    def test_meta_node_without_metadata(self):
        """Test that a meta node in the tree renders when no metadata is given."""
        tree = doc(el("meta", title="Old"), el("p", "x"))
        assert to_markdown(tree) == '---\ntitle: "Old"\n---\nx\n'

    def test_html_table_without_tbody(self):
        """Test that a table written without tbody keeps all of its rows."""
        html = "<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>"
        assert to_markdown(html) == "| A | B |\n|---|---|\n| 1 | 2 |\n"

    def test_html_table_thead_is_header(self):
        """Test that the thead row becomes the header row."""
        html = "<table><thead><tr><th>Name</th></tr></thead><tbody><tr><td>x</td></tr></tbody></table>"
        assert to_markdown(html) == "| Name |\n|------|\n| x    |\n"

    def test_html_table(self):
        """Test a complete HTML table."""
        html = "<table><tbody><tr><th>k</th><th>v</th></tr><tr><td>x</td><td>10</td></tr></tbody></table>"
        assert to_markdown(html) == "| k | v  |\n|---|----|\n| x | 10 |\n"

    def test_html_checklist(self):
        """Test checkboxes inside list items."""
        html = '<ul><li><input type="checkbox" checked> done</li><li><input type="checkbox"> todo</li></ul>'
        assert to_markdown(html) == "- [x] done\n- [ ] todo\n"


@pytest.mark.integration
class TestLoaders:
    """Tests for load_tree and load_metadata."""

    def test_missing_path(self, tmp_path):
        """Test that a missing Path raises MdFileNotFoundError."""
        with pytest.raises(MdFileNotFoundError):
            load_tree(tmp_path / "missing.html")

    def test_invalid_json_tree(self, tmp_path):
        """Test that a broken JSON tree raises ParsingError."""
        path = tmp_path / "tree.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ParsingError):
            load_tree(path)

    def test_markup_string_is_not_a_path(self):
        """Test that markup is parsed rather than treated as a file name."""
        assert render_tree(load_tree("<h3>T</h3>")) == "### T\n"

    def test_yaml_metadata_dates(self, tmp_path):
        """Test YAML metadata with a native date."""
        path = tmp_path / "meta.yaml"
        path.write_text("title: Note\nmodified: 2024-01-31\ntags: [a, b]\n", encoding="utf-8")
        metadata = load_metadata(path)
        assert to_markdown("<p>x</p>", metadata=metadata) == (
            "---\ntitle: \"Note\"\ndate: '2024-01-31T00:00:00.000Z'\ntags: ['a', 'b']\n---\nx\n"
        )

    def test_json_metadata_date_string(self, tmp_path):
        """Test that string dates are parsed on load."""
        path = tmp_path / "meta.json"
        path.write_text(json.dumps({"modified": "2024-01-31T08:00:00Z"}), encoding="utf-8")
        metadata = load_metadata(path)
        assert metadata["modified"].hour == 8

    def test_toml_metadata(self, tmp_path):
        """Test TOML metadata."""
        path = tmp_path / "meta.toml"
        path.write_text('title = "T"\nstatus = "draft"\n', encoding="utf-8")
        assert load_metadata(path) == {"title": "T", "status": "draft"}

    def test_metadata_not_mapping(self, tmp_path):
        """Test that non-mapping metadata is rejected."""
        path = tmp_path / "meta.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ParsingError):
            load_metadata(path)

    def test_metadata_missing(self, tmp_path):
        """Test that a missing metadata file is reported."""
        with pytest.raises(MdFileNotFoundError):
            load_metadata(tmp_path / "none.yaml")
