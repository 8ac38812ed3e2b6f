"""mdexport - render wiki element trees as vault-flavored Markdown.

mdexport converts a tree of semantically tagged elements (headings,
paragraphs, lists, tables, links, code, media and the document's own
metadata) into the Markdown dialect of a vault-based note-taking
application: wikilinks and embeds for internal references, pipe tables with
aligned columns, and a YAML-like front matter block built from the
document's fields.

Key Features
------------
- Per-tag rule table with a wildcard fallback and explicit suppression
- Ordered and unordered lists with arbitrary nesting
- Column-aligned pipe tables
- Front matter with category/tags/related routing of tags
- Wikilink and embed rewriting for internal and in-vault targets
- KaTeX math recovery, checkboxes, definition lists, highlighted code

Examples
--------
Convert rendered HTML:

    >>> from mdexport import to_markdown
    >>> print(to_markdown("<ul><li>one</li><li>two</li></ul>"), end="")
    - one
    - two

Render an element tree directly:

    >>> from mdexport import ElementNode, TextNode, render_tree
    >>> tree = ElementNode("document", children=[ElementNode("h2", children=[TextNode("Hi")])])
    >>> print(render_tree(tree), end="")
    ## Hi

"""

from mdexport.api import load_metadata, load_tree, render_tree, to_markdown
from mdexport.ast import ElementNode, TextNode, is_element, is_text_node, make_document, tree_from_html
from mdexport.exceptions import MdExportError, ParsingError, RenderingError, ValidationError
from mdexport.options import MarkdownExportOptions
from mdexport.renderers import SUPPRESS, Emit, MarkdownRenderer

__version__ = "0.3.0"

__all__ = [
    "Emit",
    "ElementNode",
    "MarkdownExportOptions",
    "MarkdownRenderer",
    "MdExportError",
    "ParsingError",
    "RenderingError",
    "SUPPRESS",
    "TextNode",
    "ValidationError",
    "is_element",
    "is_text_node",
    "load_metadata",
    "load_tree",
    "make_document",
    "render_tree",
    "to_markdown",
    "tree_from_html",
]
