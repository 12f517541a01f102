"""Command line interface for ts2glsl.

This module provides a command-line interface for transpiling TypeScript-syntax
shader sources to GLSL and exporting the result.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import arrow
import typer
from loguru import logger

from ts2glsl.transpiler import PRELUDE, transpile
from ts2glsl.transpiler.errors import TranspilerError
from ts2glsl.transpiler.models import TranspilerConfig

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])


# TypedCommand decorator helper
def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="ts2glsl",
    help=(
        "Transform TypeScript-syntax shader sources into GLSL. "
        "Commands: export, prelude."
    ),
    add_completion=False,
)


def _build_config(indent: int, strict: bool, parenthesize: bool) -> TranspilerConfig:
    """Merge command line flags over environment defaults.

    Args:
        indent: Spaces before each function body line (negative keeps the default)
        strict: Reject unknown type names
        parenthesize: Re-insert parentheses in nested arithmetic

    Returns:
        Effective configuration
    """
    env_config = TranspilerConfig.from_env()
    return TranspilerConfig(
        indent=" " * indent if indent >= 0 else env_config.indent,
        strict_types=strict or env_config.strict_types,
        parenthesize=parenthesize or env_config.parenthesize,
    )


def _add_header_comments(code: str, source_file: str) -> str:
    """Add header comments to the code.

    Args:
        code: Generated shader code
        source_file: Source file path

    Returns:
        Code with header comments
    """
    timestamp = arrow.utcnow().format("YYYY-MM-DD HH:mm:ss UTC")
    header = f"// Generated by ts2glsl v{__import__('ts2glsl').__version__}\n"
    header += f"// Generation time: {timestamp}\n"
    header += f"// Source file: {os.path.basename(source_file)}\n"
    header += "\n"
    return header + code


def _get_transpiled_shader(source_file: str, config: TranspilerConfig) -> str:
    """Read a source file and transpile it.

    Args:
        source_file: Path to the source file
        config: Transpiler configuration

    Returns:
        Generated shader code

    Raises:
        typer.Exit: If the file cannot be read or transpilation fails
    """
    try:
        source = Path(source_file).read_text()
    except OSError as e:
        logger.error(f"Failed to read source file: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Transpiling {source_file}")
    try:
        return transpile(source, config=config)
    except TranspilerError as e:
        logger.error(f"Transpilation error: {e}")
        raise typer.Exit(1) from e


# Define reusable argument
SOURCE_FILE_ARG = typer.Argument(..., help="TypeScript-syntax shader source file")


@typed_command(app.command("export"))
def export_shader_code(
    source_file: str = SOURCE_FILE_ARG,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output code file path (stdout if omitted)"
    ),
    format: str = typer.Option(
        "plain", "--format", "-f", help="Code format (plain, commented)"
    ),
    indent: int = typer.Option(
        -1, "--indent", "-i", help="Spaces before each function body line"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on type names outside the type catalog"
    ),
    parenthesize: bool = typer.Option(
        False, "--parenthesize", "-p", help="Parenthesize nested binary expressions"
    ),
) -> None:
    """Export shader to GLSL code.

    Transpiles the source file and writes the result to a file or stdout.

    Example: ts2glsl export shader.ts -o shader.glsl --format commented
    """
    if format not in ("plain", "commented"):
        logger.error(f"Unknown format: {format}")
        raise typer.Exit(1)

    config = _build_config(indent, strict, parenthesize)
    code = _get_transpiled_shader(source_file, config)

    if format == "commented":
        code = _add_header_comments(code, source_file)

    if output is None:
        typer.echo(code)
        return

    logger.info(f"Exporting shader code to {output}...")
    with open(output, "w") as f:
        f.write(code + "\n")
    logger.info(f"Shader code exported to {output}")


@typed_command(app.command("prelude"))
def show_prelude() -> None:
    """Print the type alias prelude prepended to every source."""
    typer.echo(PRELUDE)


if __name__ == "__main__":
    app()
