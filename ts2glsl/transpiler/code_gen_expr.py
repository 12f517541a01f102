"""
Shader code generation for expressions.

This module contains functions for generating shader code from host-language
expression nodes: identifiers, literals, binary operations and calls. Lowering is
total; node kinds without a rule render as their kind tag.
"""

from typing import Optional

from ts2glsl.ast.nodes import (
    BinaryExpression,
    CallExpression,
    Expression,
    Identifier,
    Literal,
    Node,
)
from ts2glsl.ast.visitor import Visitor
from ts2glsl.transpiler.constants import OPERATOR_PRECEDENCE


def generate_name_expr(node: Identifier) -> str:
    """Generate shader code for a name expression (variable).

    Args:
        node: Identifier node

    Returns:
        The identifier name, verbatim
    """
    return node.name


def generate_literal_expr(node: Literal) -> str:
    """Generate shader code for a literal.

    The raw source spelling is kept so number formatting and quoting survive.

    Args:
        node: Literal node

    Returns:
        Raw source text of the literal
    """
    return node.raw


def generate_binary_op_expr(
    node: BinaryExpression,
    parent_precedence: int = 0,
    parenthesize: bool = False,
) -> str:
    """Generate shader code for a binary operation expression.

    Operands are joined by the operator with single spaces. Parentheses are only
    emitted when ``parenthesize`` is set and the operation binds looser than the
    surrounding one.

    Args:
        node: Binary expression node
        parent_precedence: Precedence level of the parent operation
        parenthesize: Whether to re-insert parentheses from the tree nesting

    Returns:
        Generated shader code for the binary operation expression
    """
    precedence = OPERATOR_PRECEDENCE.get(node.operator, 0)
    left = generate_expr(node.left, precedence, parenthesize)
    # Right operands of equal precedence need grouping: a - (b - c)
    right = generate_expr(node.right, precedence + 1, parenthesize)

    expr = f"{left} {node.operator} {right}"
    if parenthesize and precedence < parent_precedence:
        return f"({expr})"
    return expr


def generate_call_expr(node: CallExpression, parenthesize: bool = False) -> str:
    """Generate shader code for a function call expression.

    Only plain identifier callees are named; any other callee leaves the name empty.

    Args:
        node: Call expression node
        parenthesize: Passed through to argument lowering

    Returns:
        Generated shader code for the function call expression
    """
    func_name = node.callee.name if isinstance(node.callee, Identifier) else ""
    args = [generate_expr(arg, 0, parenthesize) for arg in node.arguments]
    return f"{func_name}({', '.join(args)})"


class ExpressionCodeGenerator(Visitor[str]):
    """Visitor class for generating shader code from expression nodes."""

    def __init__(self, parent_precedence: int = 0, parenthesize: bool = False):
        """Initialize the expression code generator.

        Args:
            parent_precedence: Precedence level of the parent operation
            parenthesize: Whether nested binary operations get parentheses
        """
        self.parent_precedence = parent_precedence
        self.parenthesize = parenthesize

    def generic_visit(self, node: Node) -> str:
        """Render unsupported nodes as their kind tag."""
        return node.type.value

    def visit_Identifier(self, node: Identifier) -> str:
        return generate_name_expr(node)

    def visit_Literal(self, node: Literal) -> str:
        return generate_literal_expr(node)

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        return generate_binary_op_expr(
            node, self.parent_precedence, self.parenthesize
        )

    def visit_CallExpression(self, node: CallExpression) -> str:
        return generate_call_expr(node, self.parenthesize)


def generate_expr(
    node: Optional[Expression],
    parent_precedence: int = 0,
    parenthesize: bool = False,
) -> str:
    """Generate shader code for an expression.

    Args:
        node: Expression node, or None for an absent expression
        parent_precedence: Precedence level of the parent operation
        parenthesize: Whether nested binary operations get parentheses

    Returns:
        Generated shader code; empty for an absent expression
    """
    if node is None:
        return ""
    generator = ExpressionCodeGenerator(parent_precedence, parenthesize)
    return generator.visit(node)

