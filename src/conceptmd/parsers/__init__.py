#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing conceptmd AST documents."""

from conceptmd.parsers.base import BaseParser
from conceptmd.parsers.dialect import ConceptMarkdownParser, parse_document

__all__ = ["BaseParser", "ConceptMarkdownParser", "parse_document"]
