#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for configuring the conceptmd parser."""

from conceptmd.options.base import BaseParserOptions, CloneFrozenMixin
from conceptmd.options.dialect import DialectParserOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "DialectParserOptions",
]
