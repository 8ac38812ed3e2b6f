#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/utils/layout.py
"""Pure string layout helpers used by the rendering rules.

Functions
---------
justify_left : Pad text on the right to a column width
justify_right : Pad text on the left to a column width
justify_center : Center text, putting the extra space on the left
indent_lines : Prefix every line of a block
b64encode_text : Base64-encode text as UTF-8

Examples
--------
    >>> justify_center("abc", 6)
    '  abc '
    >>> justify_right("7", 3)
    '  7'

"""

from __future__ import annotations

import base64
import math
from typing import Optional


def justify_left(text: Optional[str], width: int) -> str:
    """Left-align ``text`` in a field of ``width`` characters."""
    text = text or ""
    return text + " " * (width - len(text))


def justify_right(text: Optional[str], width: int) -> str:
    """Right-align ``text`` in a field of ``width`` characters."""
    text = text or ""
    return " " * (width - len(text)) + text


def justify_center(text: Optional[str], width: int) -> str:
    """Center ``text`` in a field of ``width`` characters.

    When the padding is odd the left side gets the larger half, so centering
    a 3-character string in 6 columns gives two spaces left and one right.

    Parameters
    ----------
    text : str or None
        Text to center; None is treated as empty
    width : int
        Field width. Text longer than the width is returned unpadded.

    Returns
    -------
    str
        Padded text

    """
    text = text or ""
    padding = max(width - len(text), 0)
    left = math.ceil(padding / 2)
    right = padding - left
    return " " * left + text + " " * right


def indent_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` with ``prefix``."""
    return prefix + text.replace("\n", "\n" + prefix)


def b64encode_text(text: str) -> str:
    """Base64-encode ``text`` after encoding it as UTF-8."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


__all__ = [
    "justify_left",
    "justify_right",
    "justify_center",
    "indent_lines",
    "b64encode_text",
]
