#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdexport.

Constants are organized by category:
1. Type Definitions
2. Markdown Layout
3. Front Matter
4. Links and Media
5. Configuration Discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParserType = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Markdown Layout
# =============================================================================

DEFAULT_INDENT_WIDTH = 4
DEFAULT_COLLAPSE_BLANK_LINES = True
DEFAULT_STRICT = False
DEFAULT_HTML_PARSER: HtmlParserType = "html.parser"

# Tags that form list containers when computing nesting depth
LIST_CONTAINER_TAGS: frozenset[str] = frozenset({"ul", "ol"})
LIST_ITEM_TAG = "li"

MAX_HEADING_LEVEL = 6

# KaTeX keeps the TeX source of rendered math in an annotation element
KATEX_ANNOTATION_START = '<annotation encoding="application/x-tex">'
KATEX_ANNOTATION_END = "</annotation>"

# Rendered in place of icon font glyphs that have no text content
ICON_REPLACEMENT_CHAR = "�"
ICON_CLASS_PREFIX = "fa-"

# Highlight.js marks code blocks with "<language> hljs"
HLJS_CLASS_SUFFIX = " hljs"

# =============================================================================
# Front Matter
# =============================================================================

FRONT_MATTER_DELIMITER = "---"

DEFAULT_CATEGORY_TAGS: tuple[str, ...] = (
    "Person",
    "Course",
    "Journal",
    "Meeting",
    "Organisation",
    "Project",
    "Reference",
)

# Fields that are either handled explicitly or never exported
DEFAULT_EXCLUDED_FIELDS: tuple[str, ...] = (
    "text",
    "title",
    "aliases",
    "author",
    "path",
    "modified",
    "description",
    "tags",
    "modifier",
    "creator",
    "caption",
)

# Formats tried when deciding whether a generic field value is a date
DATE_SNIFF_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)

# =============================================================================
# Links and Media
# =============================================================================

DEFAULT_VAULT_ROOT = ""

DEFAULT_MEDIA_EXTENSIONS: tuple[str, ...] = (
    ".pdf",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".mp4",
    ".webm",
    ".ogg",
    ".mp3",
    ".wav",
)

SVG_DATA_URI_PREFIX = "data:image/svg+xml,"
SVG_BASE64_URI_PREFIX = "data:image/svg+xml;base64,"

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (
    ".mdexport.toml",
    ".mdexport.yaml",
    ".mdexport.yml",
    ".mdexport.json",
    "pyproject.toml",
)
