"""
Exceptions and error handling for the shader transpiler.

This module defines custom exceptions that are raised during the transpilation process.
Every failure aborts the whole compilation; no partial output is produced.
"""

from typing import Any, Optional


class TranspilerError(Exception):
    """Exception raised for errors during shader code transpilation.

    This is the base exception class used throughout the transpiler to report errors
    in a user-friendly way. The offending syntax tree node is kept when known.

    Examples:
        >>> raise TranspilerError("Missing return type")
        TranspilerError: Missing return type
    """

    def __init__(self, message: str, node: Optional[Any] = None):
        """Initialize the exception with a message and optional syntax tree node.

        Args:
            message: The error message
            node: Optional node where the error occurred
        """
        self.message = message
        self.node = node
        super().__init__(message)


class MissingTypeError(TranspilerError):
    """A required type annotation is absent."""

    def __init__(self, what: str = "return type", node: Optional[Any] = None):
        self.what = what
        super().__init__(f"Missing {what}", node)


# Name used by the type resolver contract
MissingReturnTypeError = MissingTypeError


class UnsupportedAnnotationError(TranspilerError):
    """A type annotation node kind has no shader type mapping."""

    def __init__(self, kind: str, node: Optional[Any] = None):
        self.kind = str(kind)
        super().__init__(f"Unsupported type: {self.kind}", node)


class UnknownTypeError(TranspilerError):
    """A type reference names no catalog type (strict mode only)."""

    def __init__(self, type_name: str, node: Optional[Any] = None):
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}", node)


class QualifierArityError(TranspilerError):
    """A qualifier-wrapped declaration does not have exactly one type argument."""

    def __init__(self, count: int, node: Optional[Any] = None):
        self.count = count
        message = (
            "Missing a type parameter" if count == 0 else "Too many type parameters"
        )
        super().__init__(message, node)


class SourceParseError(TranspilerError):
    """The source text is outside the supported host-language subset."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        location = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"{message}{location}")
