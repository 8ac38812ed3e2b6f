#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/ast/builder.py
"""Adapters that build element trees for the renderer.

The renderer consumes ``ElementNode`` trees. These helpers construct them
from two common sources:

- rendered HTML, parsed with BeautifulSoup (``tree_from_html``)
- nested mappings such as a JSON export of a widget tree
  (``tree_from_mapping``)

Both place the content under a synthetic ``document`` root whose rule passes
its inner markup through unchanged.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from mdexport.ast.nodes import ElementNode, Node, TextNode
from mdexport.constants import DEFAULT_HTML_PARSER, HtmlParserType
from mdexport.exceptions import ParsingError

logger = logging.getLogger(__name__)

DOCUMENT_TAG = "document"
META_TAG = "meta"

# HTML attributes whose mere presence means True
BOOLEAN_ATTRIBUTES = frozenset({"checked", "disabled", "selected", "readonly", "open", "hidden", "multiple"})

# Elements whose literal markup is kept for math detection
RAW_HTML_TAGS = frozenset({"span"})

# Elements whose content never reaches the output
SKIPPED_HTML_TAGS = frozenset({"script", "style", "head", "title", "noscript", "template"})

# Containers whose rows are gathered into a single tbody
ROW_GROUP_TAGS = frozenset({"thead", "tbody", "tfoot"})


def _convert_attributes(attrs: Mapping[str, Any]) -> dict[str, Any]:
    converted: dict[str, Any] = {}
    for name, value in attrs.items():
        if isinstance(value, list):
            # bs4 returns multi-valued attributes such as class as lists
            value = " ".join(value)
        if name in BOOLEAN_ATTRIBUTES and value in ("", name):
            value = True
        converted[name] = value
    return converted


def _convert_soup_node(element: Any) -> Optional[Node]:
    from bs4 import NavigableString, Tag
    from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

    if isinstance(element, (Comment, Declaration, Doctype, ProcessingInstruction)):
        return None
    if isinstance(element, NavigableString):
        return TextNode(str(element))
    if not isinstance(element, Tag):
        return None
    if element.name in SKIPPED_HTML_TAGS:
        return None

    node = ElementNode(
        tag=element.name,
        attributes=_convert_attributes(element.attrs),
        raw_html=str(element) if element.name in RAW_HTML_TAGS else None,
    )
    for child in element.children:
        converted = _convert_soup_node(child)
        if converted is not None:
            node.append_child(converted)
    if node.tag == "table":
        _gather_table_rows(node)
    return node


def _gather_table_rows(table: ElementNode) -> None:
    """Collect every row of ``table`` into one ``tbody``.

    The renderer reads rows only from the table's ``tbody`` and treats the
    first row as the header. ``html.parser`` does not add that element, so
    bare ``tr`` children are wrapped here. ``thead`` rows go first and
    ``tfoot`` rows last; the emptied groups are removed.
    """
    row_children = [
        child for child in table.element_children() if child.tag == "tr" or child.tag in ROW_GROUP_TAGS
    ]
    if not row_children:
        return

    # children before the first row holder (caption, whitespace) stay in place
    position = next(index for index, child in enumerate(table.children) if child is row_children[0])
    head: list[Node] = []
    body: list[Node] = []
    foot: list[Node] = []
    for child in row_children:
        if child.tag == "tr":
            body.append(child)
            continue
        rows = [row for row in child.element_children() if row.tag == "tr"]
        if child.tag == "thead":
            head.extend(rows)
        elif child.tag == "tfoot":
            foot.extend(rows)
        else:
            body.extend(rows)
        table.remove_child(child)

    tbody = ElementNode("tbody")
    for row in head + body + foot:
        tbody.append_child(row)
    table.insert_child(position, tbody)


def tree_from_html(html: str, parser: HtmlParserType = DEFAULT_HTML_PARSER) -> ElementNode:
    """Build an element tree from an HTML string.

    If the markup has a ``<body>`` element only its content is used;
    otherwise every top-level node is kept. Comments, scripts and styles are
    dropped.

    Parameters
    ----------
    html : str
        HTML markup
    parser : str, default = "html.parser"
        BeautifulSoup parser name

    Returns
    -------
    ElementNode
        A ``document`` root holding the converted nodes

    Raises
    ------
    ParsingError
        If BeautifulSoup cannot parse the markup

    """
    from bs4 import BeautifulSoup

    try:
        soup = BeautifulSoup(html, parser)
    except Exception as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="html", original_error=e) from e

    container = soup.body if soup.body is not None else soup
    root = ElementNode(DOCUMENT_TAG)
    for child in container.children:
        converted = _convert_soup_node(child)
        if converted is not None:
            root.append_child(converted)

    logger.debug("Built element tree with %d top-level nodes", len(root.children))
    return root


def tree_from_mapping(data: Any) -> Node:
    """Build a node (and its subtree) from nested mappings.

    Accepted shapes:

    - a string, or ``{"text": "..."}``: a text node
    - ``{"tag": "p", "attributes": {...}, "children": [...], "raw_html": "..."}``:
      an element; only ``tag`` is required

    Parameters
    ----------
    data : Any
        Mapping, string, or list of those (a list becomes a ``document`` root)

    Returns
    -------
    Node
        The converted node

    Raises
    ------
    ParsingError
        If a mapping has neither ``tag`` nor ``text``, or a value has the
        wrong type

    """
    if isinstance(data, str):
        return TextNode(data)
    if isinstance(data, list):
        root = ElementNode(DOCUMENT_TAG)
        for item in data:
            root.append_child(tree_from_mapping(item))
        return root
    if not isinstance(data, Mapping):
        raise ParsingError(f"Cannot build a node from {type(data).__name__}", parsing_stage="tree")

    if "tag" not in data:
        if "text" in data:
            return TextNode(str(data["text"]))
        raise ParsingError("Node mapping needs a 'tag' or 'text' key", parsing_stage="tree")

    attributes = data.get("attributes") or {}
    if not isinstance(attributes, Mapping):
        raise ParsingError(f"Attributes of <{data['tag']}> must be a mapping", parsing_stage="tree")
    children = data.get("children") or []
    if not isinstance(children, list):
        raise ParsingError(f"Children of <{data['tag']}> must be a list", parsing_stage="tree")

    return ElementNode(
        tag=str(data["tag"]),
        attributes=dict(attributes),
        children=[tree_from_mapping(child) for child in children],
        raw_html=data.get("raw_html"),
    )


def make_document(children: list[Node], metadata: Optional[Mapping[str, Any]] = None) -> ElementNode:
    """Wrap nodes in a ``document`` root, optionally led by a ``meta`` node.

    Parameters
    ----------
    children : list of Node
        Content nodes. Nodes attached elsewhere are moved.
    metadata : mapping, optional
        Document fields (title, tags, modified, ...) for the front matter

    """
    root = ElementNode(DOCUMENT_TAG)
    if metadata:
        root.append_child(ElementNode(META_TAG, attributes=dict(metadata)))
    for child in list(children):
        root.append_child(child)
    return root


__all__ = [
    "DOCUMENT_TAG",
    "META_TAG",
    "tree_from_html",
    "tree_from_mapping",
    "make_document",
]
