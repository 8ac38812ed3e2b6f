#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for vault-flavored Markdown rendering."""
# src/mdexport/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdexport.constants import (
    DEFAULT_CATEGORY_TAGS,
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_EXCLUDED_FIELDS,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MEDIA_EXTENSIONS,
    DEFAULT_VAULT_ROOT,
)
from mdexport.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownExportOptions(BaseRendererOptions):
    """Markdown rendering options.

    Parameters
    ----------
    vault_root : str, default ""
        Absolute path prefix of the note vault. Links and images whose target
        starts with it become wikilinks or embeds relative to the vault. An
        empty string disables the rewrite.
    media_extensions : tuple of str
        File extensions (with leading dot) that are embedded (``![[...]]``)
        rather than linked when they point into the vault.
    category_tags : tuple of str
        Tags routed to the ``category`` front matter field.
    excluded_fields : tuple of str
        Metadata fields that are handled explicitly or never exported, so the
        generic field pass skips them.
    indent_width : int, default 4
        Spaces per list nesting level.
    collapse_blank_lines : bool, default True
        Collapse runs of three or more newlines in the final output.

    """

    vault_root: str = field(
        default=DEFAULT_VAULT_ROOT,
        metadata={
            "help": "Vault directory prefix; matching link and image paths become wikilinks/embeds",
            "importance": "core",
        },
    )
    media_extensions: tuple[str, ...] = field(
        default=DEFAULT_MEDIA_EXTENSIONS,
        metadata={
            "help": "File extensions embedded with ![[...]] instead of linked",
            "importance": "advanced",
        },
    )
    category_tags: tuple[str, ...] = field(
        default=DEFAULT_CATEGORY_TAGS,
        metadata={
            "help": "Tags emitted in the 'category' front matter field",
            "importance": "core",
        },
    )
    excluded_fields: tuple[str, ...] = field(
        default=DEFAULT_EXCLUDED_FIELDS,
        metadata={
            "help": "Metadata fields left out of the generic front matter pass",
            "importance": "advanced",
        },
    )
    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Spaces per list nesting level", "type": int, "importance": "advanced"},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={
            "help": "Collapse three or more consecutive newlines into a single blank line",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")
        for ext in self.media_extensions:
            if not ext.startswith("."):
                raise ValueError(f"media extensions must start with '.', got {ext!r}")
