#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/result.py
"""Rule results: emitted text or suppression.

Every rendering rule returns exactly one of two outcomes:

- ``Emit(text)``: ``text`` is appended to the parent's inner markup. An
  empty string is still an emission.
- ``SUPPRESS``: the node is dropped and contributes nothing at all.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Emit:
    """Markup produced by a rule."""

    text: str


class Suppress:
    """Marker type for a suppressed node. Use the ``SUPPRESS`` instance."""

    _instance: "Suppress | None" = None

    def __new__(cls) -> "Suppress":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SUPPRESS"

    def __bool__(self) -> bool:
        return False


SUPPRESS = Suppress()

RuleResult = Union[Emit, Suppress]


def text_of(result: RuleResult) -> str:
    """Return the emitted text, or an empty string for a suppressed node."""
    if isinstance(result, Emit):
        return result.text
    return ""


__all__ = ["Emit", "Suppress", "SUPPRESS", "RuleResult", "text_of"]
