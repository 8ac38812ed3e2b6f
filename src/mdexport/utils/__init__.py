#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/utils/__init__.py
"""Utility modules for mdexport: layout, dates and output writing."""

from mdexport.utils.dates import parse_date, to_iso_timestamp
from mdexport.utils.io_utils import write_content
from mdexport.utils.layout import b64encode_text, indent_lines, justify_center, justify_left, justify_right

__all__ = [
    "b64encode_text",
    "indent_lines",
    "justify_center",
    "justify_left",
    "justify_right",
    "parse_date",
    "to_iso_timestamp",
    "write_content",
]
