"""
Data models and structures for the shader transpiler.

This module contains the dataclass definitions used throughout the transpiler
to configure the lowering pipeline.
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TranspilerConfig:
    """Options controlling how source is lowered to shader text.

    Attributes:
        indent: Prefix for each line of a function body
        strict_types: Reject type references that are not in the type catalog
            instead of lowering them to ``void``
        parenthesize: Re-insert parentheses for nested binary expressions
        include_prelude: Prepend the type alias prelude before parsing
    """

    indent: str = ""
    strict_types: bool = False
    parenthesize: bool = False
    include_prelude: bool = True

    @classmethod
    def from_env(cls) -> "TranspilerConfig":
        """Build a configuration from ``TS2GLSL_*`` environment variables.

        Returns:
            Configuration with defaults for every unset variable
        """
        indent = os.environ.get("TS2GLSL_INDENT", "")
        if indent.isdigit():
            indent = " " * int(indent)
        return cls(
            indent=indent,
            strict_types=_env_flag("TS2GLSL_STRICT_TYPES"),
            parenthesize=_env_flag("TS2GLSL_PARENTHESIZE"),
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES
