"""
Shader code generation for statements.

This module contains functions for generating shader code from host-language
statements: function declarations, return statements and qualifier-wrapped
variable declarations. Each function returns the fragments it produces; a
statement kind without a rule produces none.
"""

from loguru import logger

from ts2glsl.ast.nodes import (
    FunctionDeclaration,
    Identifier,
    ReturnStatement,
    Statement,
    VariableDeclaration,
    VariableDeclarator,
)
from ts2glsl.transpiler.code_gen_expr import generate_expr
from ts2glsl.transpiler.constants import GLSLType
from ts2glsl.transpiler.errors import QualifierArityError
from ts2glsl.transpiler.models import TranspilerConfig
from ts2glsl.transpiler.type_mappings import get_type_arguments, resolve_type


def generate_parameters(params: list[Identifier], config: TranspilerConfig) -> str:
    """Generate the shader parameter list of a function.

    A parameter without a type annotation is declared as ``void``.

    Args:
        params: Parameter identifiers with their annotations
        config: Transpiler configuration

    Returns:
        Parameters rendered as ``<type> <name>`` joined by commas
    """
    rendered = []
    for param in params:
        if param.type_annotation is None:
            param_type = GLSLType.void
        else:
            param_type = resolve_type(param.type_annotation, config.strict_types)
        rendered.append(f"{param_type} {param.name}")
    return ", ".join(rendered)


def generate_function_declaration(
    node: FunctionDeclaration, config: TranspilerConfig
) -> str:
    """Generate shader code for a function declaration.

    The return type is resolved before any body statement is lowered.

    Args:
        node: Function declaration node
        config: Transpiler configuration

    Returns:
        The whole function as a single newline-joined block

    Raises:
        MissingTypeError: If the function has no return type annotation
    """
    return_type = resolve_type(node.return_type, config.strict_types)
    params = generate_parameters(node.params, config)

    lines = [f"{return_type} {node.id.name}({params}) {{"]
    for fragment in generate_body(node.body.body, config):
        lines.extend(f"{config.indent}{line}" for line in fragment.split("\n"))
    lines.append("}")

    return "\n".join(lines)


def generate_return_statement(
    node: ReturnStatement, config: TranspilerConfig
) -> str:
    """Generate shader code for a return statement.

    Args:
        node: Return statement node
        config: Transpiler configuration

    Returns:
        ``return <expr>;`` with an absent expression rendered as empty text
    """
    return f"return {generate_expr(node.argument, 0, config.parenthesize)};"


def generate_declarator(node: VariableDeclarator, config: TranspilerConfig) -> str:
    """Generate shader code for one qualifier-wrapped declarator.

    ``time: Uniform<float>`` becomes ``uniform float time;``. The inner type
    argument is emitted as written.

    Args:
        node: Variable declarator node
        config: Transpiler configuration

    Returns:
        Generated declaration line

    Raises:
        MissingTypeError: If the declarator has no type annotation
        QualifierArityError: If the annotation has zero or several type arguments
    """
    annotation = node.id.type_annotation
    qualifier = resolve_type(
        annotation, config.strict_types, what=f"type annotation for '{node.id.name}'"
    )
    type_arguments = get_type_arguments(annotation)

    if len(type_arguments) != 1:
        raise QualifierArityError(len(type_arguments), node)

    return f"{qualifier} {type_arguments[0]} {node.id.name};"


def generate_variable_declaration(
    node: VariableDeclaration, config: TranspilerConfig
) -> str:
    """Generate shader code for a variable declaration.

    Args:
        node: Variable declaration node
        config: Transpiler configuration

    Returns:
        One line per declarator, newline-joined
    """
    return "\n".join(generate_declarator(decl, config) for decl in node.declarations)


def generate_statement(node: Statement, config: TranspilerConfig) -> list[str]:
    """Generate shader code fragments for a statement.

    Args:
        node: Statement node
        config: Transpiler configuration

    Returns:
        Generated fragments; empty for statements without a shader counterpart

    Raises:
        TranspilerError: If the statement cannot be lowered
    """
    if isinstance(node, FunctionDeclaration):
        return [generate_function_declaration(node, config)]
    elif isinstance(node, ReturnStatement):
        return [generate_return_statement(node, config)]
    elif isinstance(node, VariableDeclaration):
        return [generate_variable_declaration(node, config)]

    logger.debug(f"Skipping statement: {node.type}")
    return []


def generate_body(body: list[Statement], config: TranspilerConfig) -> list[str]:
    """Generate shader code fragments for a sequence of statements.

    Args:
        body: Statements in source order
        config: Transpiler configuration

    Returns:
        All fragments in source order
    """
    fragments: list[str] = []
    for stmt in body:
        fragments.extend(generate_statement(stmt, config))
    return fragments
