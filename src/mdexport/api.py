#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/api.py
"""High-level conversion functions.

``to_markdown`` accepts rendered HTML, a path to an HTML or JSON tree file,
or a ready-made element tree, optionally with the document's metadata
fields, and returns the Markdown for the note vault.

"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from mdexport.ast.builder import META_TAG, make_document, tree_from_html, tree_from_mapping
from mdexport.ast.nodes import ElementNode
from mdexport.exceptions import MdFileNotFoundError, ParsingError
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.renderers.markdown import MarkdownRenderer
from mdexport.renderers.result import SUPPRESS, RuleResult
from mdexport.renderers.rules import Rule
from mdexport.utils.dates import parse_date

logger = logging.getLogger(__name__)

Source = Union[str, Path, ElementNode]

_JSON_SUFFIXES = frozenset({".json"})
_TOML_SUFFIXES = frozenset({".toml"})

# Metadata fields that hold a date even when loaded as text
_DATE_FIELDS = ("modified", "created")


def _looks_like_path(source: str) -> bool:
    if "<" in source or "\n" in source:
        return False
    try:
        return Path(source).is_file()
    except OSError:
        return False


def load_tree(source: Source) -> ElementNode:
    """Turn a supported source into an element tree.

    Parameters
    ----------
    source : str, Path or ElementNode
        HTML markup, a path to an ``.html``/``.htm`` or ``.json`` tree file,
        or an element tree (returned unchanged)

    Returns
    -------
    ElementNode
        Tree root

    Raises
    ------
    MdFileNotFoundError
        If a Path does not exist
    ParsingError
        If the file content cannot be parsed

    """
    if isinstance(source, ElementNode):
        return source

    if isinstance(source, Path) or _looks_like_path(source):
        path = Path(source)
        if not path.is_file():
            raise MdFileNotFoundError(str(path))
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParsingError(f"{path} is not valid UTF-8: {e}", parsing_stage="input", original_error=e) from e
        if path.suffix.lower() in _JSON_SUFFIXES:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise ParsingError(f"Invalid JSON tree in {path}: {e}", parsing_stage="tree", original_error=e) from e
            node = tree_from_mapping(data)
            if isinstance(node, ElementNode):
                return node
            return make_document([node])
        return tree_from_html(text)

    return tree_from_html(source)


def load_metadata(path: Union[str, Path]) -> dict[str, Any]:
    """Load document fields from a YAML, JSON or TOML file.

    Parameters
    ----------
    path : str or Path
        Metadata file. The format is chosen by extension; unknown extensions
        are read as YAML.

    Returns
    -------
    dict
        Field mapping with date fields converted to datetimes

    Raises
    ------
    MdFileNotFoundError
        If the file does not exist
    ParsingError
        If the file cannot be parsed or is not a mapping

    """
    path = Path(path)
    if not path.is_file():
        raise MdFileNotFoundError(str(path))

    suffix = path.suffix.lower()
    try:
        if suffix in _JSON_SUFFIXES:
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix in _TOML_SUFFIXES:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ParsingError(f"Invalid metadata file {path}: {e}", parsing_stage="metadata", original_error=e) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ParsingError(
            f"Metadata file {path} must contain a mapping, got {type(data).__name__}", parsing_stage="metadata"
        )
    return normalize_metadata(data)


def normalize_metadata(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` with known date fields parsed to datetimes."""
    normalized = dict(fields)
    for name in _DATE_FIELDS:
        value = normalized.get(name)
        if isinstance(value, str):
            parsed = parse_date(value)
            if parsed is not None:
                normalized[name] = parsed
            else:
                logger.warning("Could not parse %s date %r", name, value)
    return normalized


def _contains_meta(root: ElementNode) -> bool:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.tag == META_TAG:
            return True
        stack.extend(node.element_children())
    return False


def _skip_node(node: ElementNode, inner_markup: str) -> RuleResult:
    return SUPPRESS


def render_tree(root: ElementNode, options: Optional[MarkdownExportOptions] = None) -> str:
    """Render an element tree with a fresh renderer."""
    return MarkdownRenderer(options).render_to_string(root)


def to_markdown(
    source: Source,
    *,
    metadata: Optional[Mapping[str, Any]] = None,
    options: Optional[MarkdownExportOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert HTML or an element tree to vault-flavored Markdown.

    Parameters
    ----------
    source : str, Path or ElementNode
        See ``load_tree``
    metadata : Mapping[str, Any], optional
        Document fields rendered as front matter. A ``meta`` node already in
        the tree is then ignored, with a warning.
    options : MarkdownExportOptions, optional
        Rendering options
    **kwargs : Any
        Option overrides, e.g. ``vault_root="/vault/"``

    Returns
    -------
    str
        Markdown text

    Examples
    --------
        >>> print(to_markdown("<p>See <a href='#Other'>Other</a></p>", metadata={"title": "Note"}), end="")
        ---
        title: "Note"
        ---
        See [[Other]]

    """
    options = options or MarkdownExportOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    root = load_tree(source)
    if not metadata:
        return MarkdownRenderer(options).render_to_string(root)

    extra_rules: dict[str, Rule] = {}
    if _contains_meta(root):
        logger.warning("Tree already has a <meta> node; using the metadata argument for the front matter instead")
        extra_rules[META_TAG] = _skip_node
    body = MarkdownRenderer(options, extra_rules=extra_rules).render_to_string(root)

    # the caller's tree is left untouched; front matter is rendered from its own node
    meta = ElementNode(META_TAG, attributes=normalize_metadata(metadata))
    return MarkdownRenderer(options).render_node(meta) + body
