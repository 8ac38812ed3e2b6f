"""Test utilities for building element trees and rendering them.

This module provides small builders that keep the tree literals in tests
readable, plus a one-call render helper.
"""

from typing import Any, Union

from mdexport.ast import ElementNode, Node, TextNode
from mdexport.options import MarkdownExportOptions
from mdexport.renderers import MarkdownRenderer

Child = Union[Node, str]


def el(tag: str, *children: Child, raw_html: str | None = None, **attributes: Any) -> ElementNode:
    """Build an element; string children become text nodes.

    Attribute names that are Python keywords go through ``**{"class": ...}``.
    """
    nodes = [TextNode(child) if isinstance(child, str) else child for child in children]
    return ElementNode(tag, attributes=attributes, children=nodes, raw_html=raw_html)


def doc(*children: Child) -> ElementNode:
    """Build a ``document`` root."""
    return el("document", *children)


def render(root: ElementNode, **options: Any) -> str:
    """Render ``root`` with a fresh renderer and the given option overrides."""
    return MarkdownRenderer(MarkdownExportOptions(**options)).render_to_string(root)


def assert_markdown_valid(markdown: str) -> None:
    """Check the output properties every rendered document has."""
    assert isinstance(markdown, str)
    if markdown:
        assert markdown.endswith("\n")
        assert not markdown.endswith("\n\n")
        assert "\n\n\n" not in markdown
