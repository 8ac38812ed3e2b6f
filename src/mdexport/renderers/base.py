#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/base.py
"""Base class for element tree renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdexport.ast.nodes import ElementNode
from mdexport.exceptions import InvalidOptionsError, OutputWriteError
from mdexport.options.base import BaseRendererOptions
from mdexport.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Subclasses implement ``render_to_string``; ``render`` writes its result to
    a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, root: ElementNode) -> str:
        """Render the tree rooted at ``root`` to a string.

        Parameters
        ----------
        root : ElementNode
            Root of the element tree

        Returns
        -------
        str
            Rendered document

        """

    def render(self, root: ElementNode, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to ``output``.

        Parameters
        ----------
        root : ElementNode
            Root of the element tree
        output : str, Path, IO[bytes] or IO[str]
            Destination path or stream

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        text = self.render_to_string(root)
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
