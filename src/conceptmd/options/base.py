#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/options/base.py
"""Base classes for parser options.

Options are frozen dataclasses so a configured parser can be shared freely;
use :meth:`CloneFrozenMixin.create_updated` to derive variants.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


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

    def describe(self) -> dict[str, str]:
        """Return the ``help`` text of every field, keyed by field name."""
        return {f.name: f.metadata.get("help", "") for f in fields(self)}


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define dialect-specific parsing options as frozen dataclass
    fields carrying a ``help`` entry in their field metadata.

    """

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        pass
