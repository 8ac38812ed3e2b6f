"""Base classes for renderer options.

This module defines the foundation shared by mdexport option classes: frozen
dataclasses that can be cloned with updated values and built from plain
configuration mappings.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdexport.constants import DEFAULT_STRICT


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a configuration mapping.

        Keys may use hyphens or underscores. Unknown keys are ignored and list
        values are converted to tuples so the result stays hashable.

        Parameters
        ----------
        values : Mapping[str, Any]
            Configuration values, e.g. a loaded TOML table

        Returns
        -------
        Self
            Options instance

        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = str(key).replace("-", "_")
            if name not in known:
                continue
            kwargs[name] = tuple(value) if isinstance(value, list) else value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    strict : bool, default=False
        Whether an exception raised by a rule aborts the render with a
        RenderingError. If False (default), the error is logged and the
        offending node is suppressed.

    """

    strict: bool = field(
        default=DEFAULT_STRICT,
        metadata={
            "help": "Raise RenderingError when a rule fails instead of logging and dropping the node",
            "importance": "advanced",
        },
    )
