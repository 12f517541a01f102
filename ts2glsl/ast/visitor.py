"""Syntax tree visitor pattern"""

from typing import Generic, TypeVar

from .nodes import Node

T = TypeVar("T")


class Visitor(Generic[T]):
    """Base visitor class for syntax tree traversal.

    Dispatch is keyed on the node's kind tag, so ``visit_BinaryExpression``
    handles every node whose ``type`` is ``NodeType.BINARY_EXPRESSION``.
    """

    def visit(self, node: Node) -> T:
        """Dispatch to appropriate visit method based on node kind"""
        method_name = "visit_" + node.type.value
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Node) -> T:
        """Default visitor implementation"""
        raise NotImplementedError(f"No visit_{node.type.value} method defined")
