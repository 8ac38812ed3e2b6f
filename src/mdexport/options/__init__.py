"""Options classes for mdexport rendering."""

from mdexport.options.base import BaseRendererOptions, CloneFrozenMixin
from mdexport.options.markdown import MarkdownExportOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownExportOptions",
]
