#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/context.py
"""Traversal state and the host interface seen by rendering rules.

List numbering needs state that survives across sibling renders: the third
``<li>`` of an ``<ol>`` must know two items came before it. Rather than
writing a counter into the list element's attribute bag, the renderer keeps a
stack of frames, one for every element whose children are being rendered.
A list item is rendered after its own children (and after its own frame is
popped), so at that point the top frame belongs to its parent list.

Nested lists push their own frames while the outer item's children render,
which is why they never disturb the outer ordinal.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from mdexport.ast.nodes import ElementNode, Node


@dataclass
class Frame:
    """Per-element traversal record."""

    node: ElementNode
    ordinal: int = 0


@dataclass
class RenderContext:
    """Stack of frames for the elements currently being rendered."""

    frames: list[Frame] = field(default_factory=list)

    def push(self, node: ElementNode) -> Frame:
        frame = Frame(node)
        self.frames.append(frame)
        return frame

    def pop(self) -> Frame:
        return self.frames.pop()

    @property
    def depth(self) -> int:
        return len(self.frames)

    def current(self) -> Optional[Frame]:
        """Return the innermost open frame, if any."""
        return self.frames[-1] if self.frames else None

    def next_ordinal(self, parent: ElementNode) -> int:
        """Advance and return the item counter for ``parent``.

        The innermost frame is used when it belongs to ``parent``, which is
        the normal case during a traversal. When a rule is invoked outside a
        traversal (or for a parent with no open frame), a frame for
        ``parent`` is searched for further down the stack and, failing that,
        the item is numbered 1.

        Parameters
        ----------
        parent : ElementNode
            The list element owning the item being rendered

        Returns
        -------
        int
            1-based ordinal of the item

        """
        for frame in reversed(self.frames):
            if frame.node is parent:
                frame.ordinal += 1
                return frame.ordinal
        return 1

    def reset(self) -> None:
        self.frames.clear()


class RenderHost(Protocol):
    """Capabilities the rendering rules need from the traversal engine."""

    context: RenderContext

    def render_node(self, node: Node) -> str:
        """Render ``node`` (and its subtree) and return its text."""
        ...

    def next_sibling(self, node: Node) -> Optional[Node]:
        """Return the node following ``node`` in its parent, if any."""
        ...

    def is_last_child(self, node: Node) -> bool:
        """Return True if ``node`` is the last child of its parent."""
        ...

    def is_first_child(self, node: Node) -> bool:
        """Return True if ``node`` is the first child of its parent."""
        ...


__all__ = ["Frame", "RenderContext", "RenderHost"]
