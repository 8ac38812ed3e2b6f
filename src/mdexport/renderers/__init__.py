#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/__init__.py
"""Markdown rendering engine, rules and layout components."""

from mdexport.renderers.base import BaseRenderer
from mdexport.renderers.context import RenderContext, RenderHost
from mdexport.renderers.frontmatter import build_front_matter
from mdexport.renderers.links import rewrite_image, rewrite_link
from mdexport.renderers.markdown import MarkdownRenderer
from mdexport.renderers.result import SUPPRESS, Emit, RuleResult, Suppress
from mdexport.renderers.rules import MarkdownRules, Rule
from mdexport.renderers.tables import TableCell, render_table

__all__ = [
    "BaseRenderer",
    "Emit",
    "MarkdownRenderer",
    "MarkdownRules",
    "RenderContext",
    "RenderHost",
    "Rule",
    "RuleResult",
    "SUPPRESS",
    "Suppress",
    "TableCell",
    "build_front_matter",
    "render_table",
    "rewrite_image",
    "rewrite_link",
]
