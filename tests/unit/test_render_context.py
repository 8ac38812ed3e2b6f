#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_render_context.py
"""Unit tests for the traversal context and rule results."""

import pytest

from mdexport.ast import ElementNode
from mdexport.renderers.context import RenderContext
from mdexport.renderers.result import SUPPRESS, Emit, Suppress, text_of


@pytest.mark.unit
class TestRenderContext:
    """Tests for the frame stack."""

    def test_push_pop(self):
        """Test that frames stack and unstack."""
        context = RenderContext()
        first, second = ElementNode("ol"), ElementNode("li")
        context.push(first)
        context.push(second)
        assert context.depth == 2
        assert context.current().node is second
        assert context.pop().node is second
        assert context.current().node is first

    def test_next_ordinal_counts_per_parent(self):
        """Test that each list keeps its own counter."""
        context = RenderContext()
        outer, inner = ElementNode("ol"), ElementNode("ol")
        context.push(outer)
        assert context.next_ordinal(outer) == 1
        context.push(inner)
        assert context.next_ordinal(inner) == 1
        assert context.next_ordinal(inner) == 2
        context.pop()
        assert context.next_ordinal(outer) == 2

    def test_next_ordinal_searches_lower_frames(self):
        """Test that a parent below the top frame is still found."""
        context = RenderContext()
        parent = ElementNode("ol")
        context.push(parent)
        context.push(ElementNode("li"))
        assert context.next_ordinal(parent) == 1
        assert context.next_ordinal(parent) == 2

    def test_next_ordinal_without_frame(self):
        """Test that an unknown parent numbers its item 1."""
        context = RenderContext()
        parent = ElementNode("ol")
        assert context.next_ordinal(parent) == 1
        assert context.next_ordinal(parent) == 1

    def test_reset(self):
        """Test that reset clears all frames."""
        context = RenderContext()
        context.push(ElementNode("ol"))
        context.reset()
        assert context.depth == 0
        assert context.current() is None

    def test_ordinal_not_stored_on_node(self):
        """Test that numbering leaves the list's attributes untouched."""
        context = RenderContext()
        parent = ElementNode("ol", attributes={"start": "1"})
        context.push(parent)
        context.next_ordinal(parent)
        assert parent.attributes == {"start": "1"}


@pytest.mark.unit
class TestRuleResults:
    """Tests for Emit and SUPPRESS."""

    def test_suppress_is_singleton(self):
        """Test that Suppress always returns the same instance."""
        assert Suppress() is SUPPRESS
        assert repr(SUPPRESS) == "SUPPRESS"

    def test_empty_emit_differs_from_suppress(self):
        """Test that an empty emission is still an emission."""
        assert Emit("") != SUPPRESS
        assert not SUPPRESS
        assert text_of(Emit("")) == ""
        assert text_of(SUPPRESS) == ""

    def test_text_of_emit(self):
        """Test extracting emitted text."""
        assert text_of(Emit("abc")) == "abc"

    def test_emit_is_frozen(self):
        """Test that emissions are immutable."""
        with pytest.raises(AttributeError):
            Emit("a").text = "b"
