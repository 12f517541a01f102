"""Core interfaces for the transpiler system.

This module defines the seams of the transpiling process so that components
can be swapped, most importantly the source parser that produces syntax trees.
"""

from typing import Protocol, runtime_checkable

from ts2glsl.ast.nodes import Program


@runtime_checkable
class SourceParser(Protocol):
    """Interface for turning host-language source text into a syntax tree."""

    def parse(self, text: str) -> Program:
        """Parse source text.

        Args:
            text: Complete compilation unit, prelude included

        Returns:
            Program node holding the top-level statements in source order

        Raises:
            TranspilerError: If the text cannot be parsed
        """
        ...
