#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/exceptions.py
"""Custom exceptions for the conceptmd library.

This module defines specialized exception classes for the error conditions
that can occur while configuring the parser, building AST nodes, and parsing
dialect text.

Exception Hierarchy
-------------------
- ConceptMdError (base exception)

  - ValidationError (parameter/option/node validation)
    - InvalidOptionsError (wrong options class for parser)
    - InvalidEmptyConstructError (empty span, label or list)

  - ParsingError (input text matched no element)

Backtracking inside the grammar uses
:class:`conceptmd.parsing.combinators.ParseFailure`, which never escapes the
parser facade; callers only ever see the exceptions defined here.

"""

from typing import Any


class ConceptMdError(Exception):
    """Base exception class for all conceptmd-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ConceptMdError):
    """Exception raised for invalid input parameters, options or node values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a parser.

    Parameters
    ----------
    parser_name : str
        Name of the parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        parser_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{parser_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the parser."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.parser_name = parser_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidEmptyConstructError(ValidationError):
    """Exception raised when a node that must be non-empty is built empty.

    Spans, anchor labels and lists all require at least one member.

    Parameters
    ----------
    construct : str
        Name of the construct (e.g. ``"Span"``, ``"Anchor label"``)
    message : str, optional
        Custom error message

    """

    def __init__(self, construct: str, message: str | None = None):
        """Initialize the empty construct error."""
        if message is None:
            message = f"Invalid empty construct: {construct} must contain at least one element"
        super().__init__(message, parameter_name=construct, parameter_value=[])
        self.construct = construct


class ParsingError(ConceptMdError):
    """Exception raised when dialect text cannot be parsed.

    Carries the furthest input position any alternative reached and what the
    grammar expected there.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    position : int, optional
        Zero-based character offset of the failure
    line : int, optional
        One-based line number of the failure
    column : int, optional
        One-based column number of the failure
    expected : tuple of str, optional
        Descriptions of the constructs that would have matched
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
        expected: tuple[str, ...] = (),
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected


__all__ = [
    "ConceptMdError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidEmptyConstructError",
    "ParsingError",
]
