#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/ast/nodes.py
"""Element tree classes consumed by the Markdown renderer.

The tree mirrors the widget/DOM tree of the source wiki: every element carries
a tag name, a mutable attribute bag and an ordered list of children. Text is
held in separate leaf nodes so that rules can distinguish "a text node holding
a newline" from "an element".

Parents are tracked with weak references. A child never keeps its parent
alive, and the parent link is maintained by ``append_child`` and the
constructor, not assigned directly.

Nodes compare by identity. Position lookups (next sibling, last child) rely on
that, so two structurally equal text nodes in the same parent are still
distinct siblings.

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


class Node:
    """Base class for element and text nodes."""

    _parent_ref: Optional[weakref.ReferenceType[ElementNode]] = None

    @property
    def parent(self) -> Optional[ElementNode]:
        """Return the parent element, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def _attach(self, parent: ElementNode) -> None:
        self._parent_ref = weakref.ref(parent)

    def _detach(self) -> None:
        self._parent_ref = None


@dataclass(eq=False)
class TextNode(Node):
    """Leaf node holding raw text content.

    Parameters
    ----------
    text : str
        The text exactly as it appears in the source, whitespace included

    """

    text: str = ""

    def __repr__(self) -> str:
        return f"TextNode({self.text!r})"


@dataclass(eq=False)
class ElementNode(Node):
    """Tagged element with attributes and ordered children.

    Parameters
    ----------
    tag : str
        Element kind, e.g. ``"p"``, ``"table"`` or ``"meta"``
    attributes : dict, default = empty dict
        Attribute bag. Values are usually strings, but booleans, numbers,
        lists of strings (tags) and datetimes (modification date) occur
    children : list of Node, default = empty list
        Child nodes in document order
    raw_html : str or None, default = None
        Literal markup of the element, used to recover embedded math

    Examples
    --------
        >>> para = ElementNode("p", children=[TextNode("Hello")])
        >>> para.children[0].parent is para
        True

    """

    tag: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    raw_html: Optional[str] = None

    def __post_init__(self) -> None:
        for child in self.children:
            child._attach(self)

    def __repr__(self) -> str:
        return f"ElementNode({self.tag!r}, attributes={self.attributes!r}, children={len(self.children)})"

    def append_child(self, child: Node) -> Node:
        """Append a child and point its parent reference at this element.

        Parameters
        ----------
        child : Node
            Node to attach. If it belongs to another element it is moved.

        Returns
        -------
        Node
            The appended child, for chaining

        """
        previous = child.parent
        if previous is not None:
            previous.remove_child(child)
        self.children.append(child)
        child._attach(self)
        return child

    def insert_child(self, index: int, child: Node) -> Node:
        """Insert a child at ``index``, moving it from any previous parent."""
        previous = child.parent
        if previous is not None:
            previous.remove_child(child)
        self.children.insert(index, child)
        child._attach(self)
        return child

    def remove_child(self, child: Node) -> None:
        """Detach a child from this element.

        Raises
        ------
        ValueError
            If ``child`` is not a child of this element

        """
        index = index_of(self.children, child)
        if index is None:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        del self.children[index]
        child._detach()

    def element_children(self) -> Iterator[ElementNode]:
        """Yield the children that are elements, skipping text nodes."""
        for child in self.children:
            if isinstance(child, ElementNode):
                yield child

    def find_child(self, tag: str) -> Optional[ElementNode]:
        """Return the first element child with the given tag."""
        for child in self.element_children():
            if child.tag == tag:
                return child
        return None


def index_of(children: list[Node], node: Node) -> Optional[int]:
    """Return the position of ``node`` in ``children`` by identity."""
    for index, child in enumerate(children):
        if child is node:
            return index
    return None


def is_text_node(obj: Any) -> bool:
    """Return True if ``obj`` is a text leaf."""
    return isinstance(obj, TextNode)


def is_element(obj: Any) -> bool:
    """Return True if ``obj`` is a tagged element."""
    return isinstance(obj, ElementNode)


__all__ = [
    "Node",
    "TextNode",
    "ElementNode",
    "index_of",
    "is_text_node",
    "is_element",
]
