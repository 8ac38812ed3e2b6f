#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_layout.py
"""Unit and property-based tests for the layout helpers."""

import base64

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdexport.utils.layout import b64encode_text, indent_lines, justify_center, justify_left, justify_right


@pytest.mark.unit
class TestJustify:
    """Tests for the justify functions."""

    def test_center_puts_extra_space_left(self):
        """Test that odd padding favors the left side."""
        assert justify_center("abc", 6) == "  abc "

    def test_center_even_padding(self):
        """Test centering with even padding."""
        assert justify_center("ab", 6) == "  ab  "

    def test_left_and_right(self):
        """Test left and right alignment."""
        assert justify_left("ab", 4) == "ab  "
        assert justify_right("ab", 4) == "  ab"

    def test_none_is_empty(self):
        """Test that None pads like an empty string."""
        assert justify_left(None, 3) == "   "
        assert justify_right(None, 2) == "  "
        assert justify_center(None, 1) == " "

    def test_text_wider_than_field(self):
        """Test that overlong text is returned unpadded."""
        assert justify_left("abcdef", 3) == "abcdef"
        assert justify_right("abcdef", 3) == "abcdef"
        assert justify_center("abcdef", 3) == "abcdef"


@pytest.mark.unit
class TestJustifyProperties:
    """Property-based tests for the justify functions."""

    @given(text=st.text(max_size=30), extra=st.integers(min_value=0, max_value=30))
    def test_output_has_field_width(self, text, extra):
        """Test that every justification fills the field exactly."""
        width = len(text) + extra
        for justify in (justify_left, justify_right, justify_center):
            assert len(justify(text, width)) == width

    @given(text=st.text(max_size=30), extra=st.integers(min_value=0, max_value=30))
    def test_text_is_preserved(self, text, extra):
        """Test that padding never alters the text itself."""
        width = len(text) + extra
        assert justify_left(text, width).startswith(text)
        assert justify_right(text, width).endswith(text)
        assert text in justify_center(text, width)

    @given(text=st.text(alphabet="abc", min_size=1, max_size=10), extra=st.integers(min_value=0, max_value=20))
    def test_center_left_padding_is_ceiling(self, text, extra):
        """Test that the left padding is the ceiling of half the total."""
        centered = justify_center(text, len(text) + extra)
        left = len(centered) - len(centered.lstrip(" "))
        assert left == (extra + 1) // 2


@pytest.mark.unit
class TestTextHelpers:
    """Tests for indent_lines and b64encode_text."""

    def test_indent_lines(self):
        """Test that every line gets the prefix."""
        assert indent_lines("a\nb", "> ") == "> a\n> b"

    def test_indent_blank_line(self):
        """Test that blank lines keep the prefix."""
        assert indent_lines("a\n\nb", "> ") == "> a\n> \n> b"

    def test_b64encode_utf8(self):
        """Test that text is encoded as UTF-8 before base64."""
        encoded = b64encode_text("<svg>é</svg>")
        assert base64.b64decode(encoded).decode("utf-8") == "<svg>é</svg>"
