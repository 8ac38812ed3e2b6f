#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/markdown.py
"""Markdown rendering from element trees.

This module provides the MarkdownRenderer class, the traversal engine that
turns an element tree into vault-flavored Markdown.

Rendering is a single post-order walk. For every element the renderer first
renders all children, joins their output into the inner markup, and then
hands ``(node, inner_markup)`` to the rule registered for the element's tag
(or to the ``*`` wildcard). A rule either emits text or suppresses the node,
in which case it contributes nothing to its parent.

The renderer also serves as the rules' host: it answers sibling queries,
renders single nodes on demand (tables render their cells this way) and owns
the traversal context that numbers list items.

"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from mdexport.ast.nodes import ElementNode, Node, TextNode, index_of
from mdexport.exceptions import RenderingError
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.renderers.base import BaseRenderer
from mdexport.renderers.context import RenderContext
from mdexport.renderers.result import SUPPRESS, Emit, RuleResult, Suppress, text_of
from mdexport.renderers.rules import WILDCARD, MarkdownRules, Rule

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^\s*(```|~~~)")


class MarkdownRenderer(BaseRenderer):
    """Render element trees to Markdown text.

    Parameters
    ----------
    options : MarkdownExportOptions or None, default = None
        Rendering options
    extra_rules : Mapping[str, Rule] or None, default = None
        Additional tag rules, taking precedence over the built-in ones. A rule
        is called with ``(node, inner_markup)`` and returns ``Emit(text)`` or
        ``SUPPRESS``. For convenience a plain string is treated as an
        emission and None as suppression.

    Examples
    --------
        >>> from mdexport.ast import ElementNode, TextNode
        >>> doc = ElementNode("document", children=[
        ...     ElementNode("h1", children=[TextNode("Title")]),
        ...     ElementNode("p", children=[TextNode("Body")]),
        ... ])
        >>> print(MarkdownRenderer().render_to_string(doc), end="")
        # Title
        <BLANKLINE>
        Body

    Notes
    -----
    A renderer holds traversal state while rendering and must not be shared
    between threads. Nodes are never modified, so separate renderer instances
    may render the same tree concurrently.

    """

    def __init__(
        self,
        options: MarkdownExportOptions | None = None,
        extra_rules: Optional[Mapping[str, Rule]] = None,
    ):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownExportOptions, "markdown")
        options = options or MarkdownExportOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownExportOptions = options
        self.context = RenderContext()
        self.rules: dict[str, Rule] = {**MarkdownRules(self, options).build_rule_table(), **(extra_rules or {})}

    # ------------------------------------------------------------------
    # Host queries
    # ------------------------------------------------------------------

    def resolve_rule(self, tag: str) -> Rule:
        """Return the rule for ``tag``, falling back to the wildcard rule."""
        rule = self.rules.get(tag)
        if rule is None:
            rule = self.rules[WILDCARD]
        return rule

    def next_sibling(self, node: Node) -> Optional[Node]:
        """Return the node after ``node`` in its parent's children, if any."""
        parent = node.parent
        if parent is None:
            return None
        index = index_of(parent.children, node)
        if index is None or index + 1 >= len(parent.children):
            return None
        return parent.children[index + 1]

    def is_last_child(self, node: Node) -> bool:
        """Return True if ``node`` is its parent's last child (or has no parent)."""
        parent = node.parent
        if parent is None:
            return True
        return bool(parent.children) and parent.children[-1] is node

    def is_first_child(self, node: Node) -> bool:
        """Return True if ``node`` is its parent's first child (or has no parent)."""
        parent = node.parent
        if parent is None:
            return True
        return bool(parent.children) and parent.children[0] is node

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def render_result(self, node: Node) -> RuleResult:
        """Render ``node`` and its subtree, returning the explicit rule result.

        Parameters
        ----------
        node : Node
            Element or text node

        Returns
        -------
        RuleResult
            ``Emit`` with the node's markup, or ``SUPPRESS``

        Raises
        ------
        RenderingError
            If a rule fails and ``options.strict`` is set

        """
        if isinstance(node, TextNode):
            return Emit(node.text)
        if not isinstance(node, ElementNode):
            logger.warning("Skipping unsupported node type: %s", type(node).__name__)
            return SUPPRESS

        self.context.push(node)
        try:
            inner = "".join(self.render_node(child) for child in node.children)
        finally:
            self.context.pop()

        rule = self.resolve_rule(node.tag)
        try:
            result = rule(node, inner)
        except RenderingError:
            raise
        except Exception as e:
            if self.options.strict:
                raise RenderingError(
                    f"Rule for <{node.tag}> failed: {e}", rendering_stage=node.tag, original_error=e
                ) from e
            logger.error("Rule for <%s> failed, dropping the element: %s", node.tag, e)
            return SUPPRESS

        return self._coerce_result(node, result)

    def render_node(self, node: Node) -> str:
        """Render ``node`` and return its text; suppressed nodes give ``""``."""
        return text_of(self.render_result(node))

    @staticmethod
    def _coerce_result(node: ElementNode, result: object) -> RuleResult:
        if isinstance(result, (Emit, Suppress)):
            return result
        if result is None:
            return SUPPRESS
        if isinstance(result, str):
            return Emit(result)
        logger.warning("Rule for <%s> returned %s, dropping the element", node.tag, type(result).__name__)
        return SUPPRESS

    def render_to_string(self, root: ElementNode) -> str:
        """Render a tree to Markdown.

        Parameters
        ----------
        root : ElementNode
            Root of the tree, usually a ``document`` element

        Returns
        -------
        str
            Markdown text ending in a single newline, or an empty string

        """
        self.context.reset()
        try:
            result = self.render_node(root)
        finally:
            self.context.reset()
        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        """Normalize line endings, collapse blank lines outside code fences and trim."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if self.options.collapse_blank_lines:
            text = collapse_blank_lines(text)
        text = text.rstrip()
        return f"{text}\n" if text else ""


def collapse_blank_lines(text: str) -> str:
    """Reduce runs of blank lines to one, leaving fenced code untouched."""
    lines: list[str] = []
    in_fence = False
    previous_blank = False
    for line in text.split("\n"):
        if _FENCE_RE.match(line):
            in_fence = not in_fence
        blank = line == ""
        if blank and previous_blank and not in_fence:
            continue
        lines.append(line)
        previous_blank = blank
    return "\n".join(lines)


__all__ = ["MarkdownRenderer", "collapse_blank_lines"]
