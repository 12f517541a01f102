"""
Code generation for shader programs.

This module provides the top-level interface for transpiling host-language source
to shader source text.
"""

from typing import Optional

from loguru import logger

from ts2glsl.transpiler.ast_parser import get_default_parser
from ts2glsl.transpiler.code_gen_stmt import generate_statement
from ts2glsl.transpiler.constants import PRELUDE, GLSLType
from ts2glsl.transpiler.core.interfaces import SourceParser
from ts2glsl.transpiler.errors import (
    MissingReturnTypeError,
    MissingTypeError,
    QualifierArityError,
    SourceParseError,
    TranspilerError,
    UnknownTypeError,
    UnsupportedAnnotationError,
)
from ts2glsl.transpiler.models import TranspilerConfig


def _build_compilation_unit(source: str, config: TranspilerConfig) -> str:
    """Prepend the type alias prelude to user source.

    Args:
        source: User source text
        config: Transpiler configuration

    Returns:
        Text handed to the parser
    """
    if not config.include_prelude:
        return source
    return PRELUDE + "\n" + source


def transpile(
    source: str,
    parser: Optional[SourceParser] = None,
    config: Optional[TranspilerConfig] = None,
) -> str:
    """Transpile host-language source to shader code.

    This is the main entry point for the transpiler. Top-level statements are
    lowered in source order and their fragments newline-joined. The first error
    aborts the whole call; no partial output is returned.

    Args:
        source: Host-language source text
        parser: Parser used to build the syntax tree (default: bundled Lark grammar)
        config: Transpiler configuration (default: ``TranspilerConfig()``)

    Returns:
        Generated shader code

    Raises:
        TranspilerError: If parsing or lowering fails

    Examples:
        # Uniform declaration and a helper function
        glsl_code = transpile(
            "declare let time: Uniform<float>;\\n"
            "function test(x: float, y: float): float { return x + y / time; }"
        )
    """
    config = config or TranspilerConfig()
    parser = parser or get_default_parser()

    logger.debug(f"Transpiling {len(source)} characters with config: {config}")

    program = parser.parse(_build_compilation_unit(source, config))

    fragments: list[str] = []
    for node in program.body:
        logger.debug(f"Lowering top-level {node.type}")
        fragments.extend(generate_statement(node, config))

    logger.debug(f"Generated {len(fragments)} fragments")
    return "\n".join(fragments)


__all__ = [
    "GLSLType",
    "MissingReturnTypeError",
    "MissingTypeError",
    "PRELUDE",
    "QualifierArityError",
    "SourceParseError",
    "SourceParser",
    "TranspilerConfig",
    "TranspilerError",
    "UnknownTypeError",
    "UnsupportedAnnotationError",
    "transpile",
]
