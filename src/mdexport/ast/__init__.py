#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/ast/__init__.py
"""Element tree model and tree builders."""

from mdexport.ast.builder import DOCUMENT_TAG, META_TAG, make_document, tree_from_html, tree_from_mapping
from mdexport.ast.nodes import ElementNode, Node, TextNode, index_of, is_element, is_text_node

__all__ = [
    "DOCUMENT_TAG",
    "ElementNode",
    "META_TAG",
    "Node",
    "TextNode",
    "index_of",
    "is_element",
    "is_text_node",
    "make_document",
    "tree_from_html",
    "tree_from_mapping",
]
