#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn source
text into a conceptmd :class:`~conceptmd.ast.Document`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from conceptmd.ast import Document
from conceptmd.exceptions import InvalidOptionsError
from conceptmd.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser-specific options

    Examples
    --------
    Creating a custom parser:

        >>> from conceptmd.parsers.base import BaseParser
        >>> from conceptmd.ast import Document
        >>>
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                parser_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: str) -> Document:
        """Parse source text into an AST.

        Parameters
        ----------
        input_data : str
            Decoded source text

        Returns
        -------
        Document
            AST Document node representing the parsed text

        Raises
        ------
        ParsingError
            If the text cannot be parsed
        ValidationError
            If input data is not text

        """
        raise NotImplementedError
