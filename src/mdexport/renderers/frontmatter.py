#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/frontmatter.py
"""Front matter synthesis from a document's metadata fields.

The ``meta`` element carries the document's own fields (title, tags,
modification date, custom fields) in its attribute bag. This module turns
them into the ``---`` delimited preamble read by the note application.

Well-known fields come first in a fixed order::

    title, author, path, date, abstract, aliases, category, tags, related

followed by every other field in insertion order. The output is YAML-like
rather than strict YAML: quoting and escaping follow what the note
application accepts, including single-quoted values where only the first
embedded quote is backslash-escaped.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping, Optional

from mdexport.constants import FRONT_MATTER_DELIMITER
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.utils.dates import parse_date, to_iso_timestamp

logger = logging.getLogger(__name__)

_YEAR_TAG_RE = re.compile(r"^(\d{4})$")
_NUMERIC_TAG_RE = re.compile(r"^(\d+)$")
_TAG_LIST_RE = re.compile(r"\[\[(.*?)\]\]|(\S+)")
_WHITESPACE_RE = re.compile(r"\s+")
_NEWLINES_RE = re.compile(r"[\r\n]+")


def double_quoted(value: Any) -> str:
    """Wrap a value in double quotes, escaping every embedded double quote."""
    return '"' + str(value).replace('"', '\\"') + '"'


def split_tag_list(value: Any) -> list[str]:
    """Return tags as a list of strings.

    Lists are used as-is. Strings use the wiki tag syntax, where
    multi-word tags are bracketed: ``"[[multi word]] single other"``.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [bracketed or bare for bracketed, bare in _TAG_LIST_RE.findall(value)]
    return [str(tag) for tag in value]


def format_tag(tag: str) -> str:
    """Quote a tag, rewriting purely numeric tags the note application rejects.

    Four digits become a year tag, other digit strings get an ``N`` prefix.

        >>> format_tag("2024")
        "'Year/2024'"
        >>> format_tag("42")
        "'N42'"
        >>> format_tag("it's")
        "'it\\\\'s'"

    """
    tag = _YEAR_TAG_RE.sub(r"Year/\1", tag)
    tag = _NUMERIC_TAG_RE.sub(r"N\1", tag)
    return "'" + tag.replace("'", "\\'", 1) + "'"


def partition_tags(tags: Iterable[str], category_tags: Iterable[str]) -> tuple[list[str], list[str], list[str]]:
    """Split quoted tags into category, plain and related buckets.

    Parameters
    ----------
    tags : iterable of str
        Tags already passed through ``format_tag``
    category_tags : iterable of str
        Unquoted category vocabulary

    Returns
    -------
    tuple of (list, list, list)
        ``(category, tags, related)``. Related tags are reformatted as
        quoted wikilinks, e.g. ``'[[two words]]'``.

    """
    vocabulary = {f"'{name}'" for name in category_tags}
    categories: list[str] = []
    plain: list[str] = []
    related: list[str] = []
    for tag in tags:
        if tag in vocabulary:
            categories.append(tag)
        elif " " not in tag:
            plain.append(tag)
        else:
            related.append("'[[" + tag[1:-1] + "]]'")
    return categories, plain, related


def format_field_name(name: Any) -> str:
    """Turn whitespace runs into hyphens and drop the first colon.

    Non-string keys, such as the integer keys YAML produces for ``2024: x``,
    are converted to text first.
    """
    return _WHITESPACE_RE.sub("-", str(name)).replace(":", "", 1)


def format_field_value(value: Any) -> str:
    """Format a custom field value.

    Dates become quoted ISO timestamps, numbers stay bare, everything else is
    single-quoted with line breaks removed. Only the first embedded single
    quote is escaped.
    """
    as_date = parse_date(value)
    if as_date is not None:
        return f"'{to_iso_timestamp(as_date)}'"
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (int, float)):
        return str(value)
    elif isinstance(value, (list, tuple)):
        text = ",".join(str(item) for item in value)
    else:
        text = str(value)
    return "'" + _NEWLINES_RE.sub("", text).replace("'", "\\'", 1) + "'"


def _inline_list(items: list[str]) -> str:
    return "[" + ", ".join(items) + "]"


def front_matter_lines(fields: Mapping[str, Any], options: Optional[MarkdownExportOptions] = None) -> list[str]:
    """Build the ``key: value`` lines of the front matter.

    Parameters
    ----------
    fields : Mapping[str, Any]
        Document fields
    options : MarkdownExportOptions, optional
        Supplies the category vocabulary and excluded fields

    Returns
    -------
    list of str
        Lines without the delimiters

    """
    options = options or MarkdownExportOptions()
    lines: list[str] = []

    title = fields.get("caption") or fields.get("title")
    if title:
        lines.append(f"title: {double_quoted(title)}")
    if fields.get("author"):
        lines.append(f"author: {double_quoted(fields['author'])}")
    if fields.get("path"):
        lines.append(f"path: {double_quoted(fields['path'])}")

    modified = parse_date(fields.get("modified"))
    if modified is not None:
        lines.append(f"date: '{to_iso_timestamp(modified)}'")
    elif fields.get("modified"):
        logger.warning("Ignoring unparseable modification date: %r", fields["modified"])

    if fields.get("description"):
        lines.append(f"abstract: {double_quoted(fields['description'])}")
    if fields.get("aliases"):
        lines.append(f"aliases: [{double_quoted(fields['aliases'])}]")

    tags = [format_tag(tag) for tag in split_tag_list(fields.get("tags"))]
    if tags:
        categories, plain, related = partition_tags(tags, options.category_tags)
        if categories:
            lines.append(f"category: {_inline_list(categories)}")
        if plain:
            lines.append(f"tags: {_inline_list(plain)}")
        if related:
            lines.append(f"related: {_inline_list(related)}")

    excluded = set(options.excluded_fields)
    for name, value in fields.items():
        if name in excluded:
            continue
        if value is None:
            logger.debug("Skipping empty front matter field %r", name)
            continue
        lines.append(f"{format_field_name(name)}: {format_field_value(value)}")

    return lines


def build_front_matter(fields: Mapping[str, Any], options: Optional[MarkdownExportOptions] = None) -> str:
    """Return the complete ``---`` delimited front matter block.

    An empty string is returned when no field produces a line.

    Examples
    --------
        >>> print(build_front_matter({"caption": "Intro", "tags": ["Project"]}), end="")
        ---
        title: "Intro"
        category: ['Project']
        ---

    """
    lines = front_matter_lines(fields, options)
    if not lines:
        return ""
    body = "\n".join(lines)
    return f"{FRONT_MATTER_DELIMITER}\n{body}\n{FRONT_MATTER_DELIMITER}\n"


__all__ = [
    "build_front_matter",
    "front_matter_lines",
    "format_tag",
    "partition_tags",
    "split_tag_list",
    "format_field_name",
    "format_field_value",
    "double_quoted",
]
