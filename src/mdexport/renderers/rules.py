#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/rules.py
"""Per-tag rendering rules.

A rule takes an element and its already-rendered inner markup and returns a
``RuleResult``. Rules are methods of ``MarkdownRules``. The tag table is
built once from ``RULE_GROUPS``, which lists the tags each canonical rule
serves. Several tags share one implementation, e.g. every generic HTML block
container maps to ``render_block``.

Tags without an entry fall back to the ``*`` wildcard, which keeps the
element as inline HTML when it has visible content.

"""

from __future__ import annotations

import html
import logging
from typing import Callable

from mdexport.ast.nodes import ElementNode, is_element, is_text_node
from mdexport.constants import (
    HLJS_CLASS_SUFFIX,
    ICON_CLASS_PREFIX,
    ICON_REPLACEMENT_CHAR,
    KATEX_ANNOTATION_END,
    KATEX_ANNOTATION_START,
    LIST_CONTAINER_TAGS,
    LIST_ITEM_TAG,
    MAX_HEADING_LEVEL,
)
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.renderers.context import RenderHost
from mdexport.renderers.frontmatter import build_front_matter
from mdexport.renderers.links import rewrite_image, rewrite_link
from mdexport.renderers.result import SUPPRESS, Emit, RuleResult
from mdexport.renderers.tables import render_table
from mdexport.utils.layout import indent_lines

logger = logging.getLogger(__name__)

Rule = Callable[[ElementNode, str], RuleResult]

WILDCARD = "*"
IGNORE = "_ignore"

# Opening and closing markers of simple inline wrappers
INLINE_WRAPPERS: dict[str, tuple[str, str]] = {
    "em": ("*", "*"),
    "strong": ("**", "**"),
    "u": ("<u>", "</u>"),
    "strike": ("~~", "~~"),
    "mark": ("==", "=="),
    "cite": ("<cite>", "</cite>"),
}

SCRIPT_MARKERS: dict[str, str] = {"sub": "~", "sup": "^"}

HEADING_TAGS: tuple[str, ...] = tuple(f"h{level}" for level in range(1, MAX_HEADING_LEVEL + 1))

BLOCK_TAGS: tuple[str, ...] = (
    "address",
    "article",
    "aside",
    "details",
    "dialog",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "header",
    "hgroup",
    "main",
    "nav",
    "section",
)

# Canonical rule name -> tags it renders. Rule "x" is the method render_x.
RULE_GROUPS: dict[str, tuple[str, ...]] = {
    "document": ("document",),
    "meta": ("meta",),
    "paragraph": ("p", "div"),
    "inline": tuple(INLINE_WRAPPERS),
    "line_break": ("br",),
    "thematic_break": ("hr",),
    "passthrough": ("label", "td", "th"),
    "span": ("span",),
    "script": tuple(SCRIPT_MARKERS),
    "heading": HEADING_TAGS,
    "definition_list": ("dl",),
    "definition_term": ("dt",),
    "definition_description": ("dd",),
    "pre": ("pre",),
    "code": ("code",),
    "blockquote": ("blockquote",),
    "list": ("ul", "ol"),
    "list_item": (LIST_ITEM_TAG,),
    "input": ("input",),
    "link": ("a",),
    "image": ("img",),
    "icon": ("i",),
    "table": ("table",),
    "ignore": (IGNORE, "tr", "tbody", "thead"),
    "block": BLOCK_TAGS,
    "iframe": ("iframe",),
    "wildcard": (WILDCARD,),
}


def list_depth(node: ElementNode) -> int:
    """Return how many list containers enclose the list holding ``node``.

    Walks up from the item's parent, counting ``ul``/``ol`` ancestors and
    stepping over ``li`` ancestors, until the first element that belongs to
    no list. A top-level list item has depth 0.
    """
    depth = -1
    current = node.parent
    while current is not None and (current.tag in LIST_CONTAINER_TAGS or current.tag == LIST_ITEM_TAG):
        if current.tag != LIST_ITEM_TAG:
            depth += 1
        current = current.parent
    return max(depth, 0)


def _parent_tag(node: ElementNode) -> str | None:
    parent = node.parent
    return parent.tag if parent is not None else None


def render_attributes(attributes: dict) -> str:
    """Format an attribute bag as ``key="value"`` pairs."""
    return " ".join(f'{key}="{value}"' for key, value in attributes.items())


class MarkdownRules:
    """Rendering rules bound to a traversal host.

    Parameters
    ----------
    host : RenderHost
        Supplies sibling queries, independent node rendering and list ordinals
    options : MarkdownExportOptions
        Rendering options

    """

    def __init__(self, host: RenderHost, options: MarkdownExportOptions):
        self.host = host
        self.options = options
        self.indent = " " * options.indent_width

    def build_rule_table(self) -> dict[str, Rule]:
        """Return the tag -> rule mapping described by ``RULE_GROUPS``."""
        return {tag: getattr(self, f"render_{rule}") for rule, tags in RULE_GROUPS.items() for tag in tags}

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def render_document(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(im)

    def render_meta(self, node: ElementNode, im: str) -> RuleResult:
        """Render the front matter block from the node's attributes.

        A node without any exportable field is suppressed rather than
        written as an empty ``---`` pair.
        """
        front_matter = build_front_matter(node.attributes, self.options)
        if not front_matter:
            logger.debug("Metadata node produced no front matter fields")
            return SUPPRESS
        return Emit(front_matter)

    def render_paragraph(self, node: ElementNode, im: str) -> RuleResult:
        """Render a paragraph, keeping list item paragraphs attached to the item.

        Inside a list item the first paragraph continues the marker line and
        later ones are indented. The last child ends with a single newline so
        the item does not open a blank line.
        """
        if _parent_tag(node) != LIST_ITEM_TAG:
            return Emit(f"{im.strip()}\n\n")

        newlines = "\n" if self.host.is_last_child(node) else "\n\n"
        if self.host.is_first_child(node):
            return Emit(f"{im.strip()}{newlines}")
        return Emit(f"{self.indent}{im.strip()}{newlines}")

    def render_heading(self, node: ElementNode, im: str) -> RuleResult:
        level = int(node.tag[1:])
        return Emit(f"{'#' * level} {im}\n\n")

    def render_thematic_break(self, node: ElementNode, im: str) -> RuleResult:
        return Emit("---\n\n")

    def render_block(self, node: ElementNode, im: str) -> RuleResult:
        if not im.strip():
            return SUPPRESS
        return Emit(f"<{node.tag}>{im.strip()}</{node.tag}>\n")

    def render_iframe(self, node: ElementNode, im: str) -> RuleResult:
        opening = " ".join(part for part in ("iframe", render_attributes(node.attributes)) if part)
        return Emit(f"<{opening}>{im.strip()}</iframe>\n\n")

    def render_ignore(self, node: ElementNode, im: str) -> RuleResult:
        return SUPPRESS

    def render_wildcard(self, node: ElementNode, im: str) -> RuleResult:
        if not im.strip():
            return SUPPRESS
        return Emit(f"<{node.tag}>{im.strip()}</{node.tag}>")

    # ------------------------------------------------------------------
    # Inline formatting
    # ------------------------------------------------------------------

    def render_inline(self, node: ElementNode, im: str) -> RuleResult:
        opening, closing = INLINE_WRAPPERS[node.tag]
        return Emit(f"{opening}{im}{closing}")

    def render_passthrough(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(im)

    def render_script(self, node: ElementNode, im: str) -> RuleResult:
        marker = SCRIPT_MARKERS[node.tag]
        escaped = im.replace(" ", "\\ ")
        return Emit(f"{marker}{escaped}{marker}")

    def render_line_break(self, node: ElementNode, im: str) -> RuleResult:
        """Render a forced line break.

        A trailing backslash marks a hard break, but only when another line
        follows; before the end of the block, or before a bare newline text
        node, a plain newline is enough.
        """
        following = self.host.next_sibling(node)
        if following is None or (is_text_node(following) and following.text == "\n"):
            return Emit("\n")
        return Emit("\\\n")

    def render_span(self, node: ElementNode, im: str) -> RuleResult:
        """Recover TeX from KaTeX output, otherwise pass the content through."""
        raw = node.raw_html or ""
        start = raw.find(KATEX_ANNOTATION_START)
        if start == -1:
            return Emit(im)

        tex = raw[start + len(KATEX_ANNOTATION_START) :]
        end = tex.find(KATEX_ANNOTATION_END)
        if end != -1:
            tex = tex[:end]
        tex = html.unescape(tex)

        if tex.startswith("\n") and tex.endswith("\n"):
            return Emit(f"$${tex}$$\n\n")
        return Emit(f"${tex}$")

    def render_icon(self, node: ElementNode, im: str) -> RuleResult:
        classes = str(node.attributes.get("class") or "").split()
        if not im.strip() and any(name.startswith(ICON_CLASS_PREFIX) for name in classes):
            return Emit(ICON_REPLACEMENT_CHAR)
        return SUPPRESS

    def render_input(self, node: ElementNode, im: str) -> RuleResult:
        if node.attributes.get("type") != "checkbox":
            logger.warning("Unsupported input node type: %r", node.attributes.get("type"))
            return SUPPRESS
        return Emit("[x]" if node.attributes.get("checked") else "[ ]")

    # ------------------------------------------------------------------
    # Definition lists
    # ------------------------------------------------------------------

    def render_definition_list(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(f"{im.strip()}\n\n")

    def render_definition_term(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(f"{im}\n")

    def render_definition_description(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(f": {im}\n\n")

    # ------------------------------------------------------------------
    # Code and quotes
    # ------------------------------------------------------------------

    def render_pre(self, node: ElementNode, im: str) -> RuleResult:
        if all(is_element(child) and child.tag == "code" for child in node.children):
            # the nested <code> renders the fence
            return Emit(im)
        return Emit(f"```\n{im.strip()}\n```\n\n")

    def render_code(self, node: ElementNode, im: str) -> RuleResult:
        if _parent_tag(node) != "pre":
            return Emit(f"`{im.strip()}`")

        css_class = str(node.attributes.get("class") or "")
        language = ""
        if css_class.endswith(HLJS_CLASS_SUFFIX) and len(css_class) > len(HLJS_CLASS_SUFFIX):
            language = css_class[: -len(HLJS_CLASS_SUFFIX)]
        return Emit(f"```{language}\n{im}\n```\n\n")

    def render_blockquote(self, node: ElementNode, im: str) -> RuleResult:
        leading, indentation = "", ""
        if _parent_tag(node) == LIST_ITEM_TAG:
            leading, indentation = "\n", self.indent
        return Emit(f"{leading}{indent_lines(im.strip(), indentation + '> ')}\n\n")

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def render_list(self, node: ElementNode, im: str) -> RuleResult:
        if _parent_tag(node) == LIST_ITEM_TAG:
            # nested lists stay attached to their item
            return Emit(f"\n{im}")
        return Emit(f"{im.strip()}\n\n")

    def render_list_item(self, node: ElementNode, im: str) -> RuleResult:
        parent = node.parent
        if parent is None:
            logger.error("Found <li> without parent")
            return SUPPRESS

        ordinal = self.host.context.next_ordinal(parent)
        marker = "-" if parent.tag == "ul" else f"{ordinal}."
        indent = self.indent * list_depth(node)
        return Emit(f"{indent}{marker} {im.strip()}\n")

    # ------------------------------------------------------------------
    # Links, media and tables
    # ------------------------------------------------------------------

    def render_link(self, node: ElementNode, im: str) -> RuleResult:
        href = node.attributes.get("href")
        return Emit(rewrite_link(str(href) if href is not None else None, im, self.options))

    def render_image(self, node: ElementNode, im: str) -> RuleResult:
        return Emit(rewrite_image(node.attributes.get("src"), node.attributes.get("title"), self.options))

    def render_table(self, node: ElementNode, im: str) -> RuleResult:
        return render_table(node, self.host)


__all__ = [
    "BLOCK_TAGS",
    "HEADING_TAGS",
    "IGNORE",
    "INLINE_WRAPPERS",
    "MarkdownRules",
    "RULE_GROUPS",
    "Rule",
    "WILDCARD",
    "list_depth",
    "render_attributes",
]
