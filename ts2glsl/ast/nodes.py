"""Host-language syntax tree node definitions.

The nodes follow the ESTree / typescript-estree layout: every node carries a
``type`` tag and a ``range`` of character offsets into the parsed text. Field
names are snake_case versions of the ESTree ones.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union


class NodeType(str, Enum):
    """Kind tags for syntax tree nodes."""

    PROGRAM = "Program"
    BLOCK_STATEMENT = "BlockStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    RETURN_STATEMENT = "ReturnStatement"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"

    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    CALL_EXPRESSION = "CallExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    LOGICAL_EXPRESSION = "LogicalExpression"
    UNARY_EXPRESSION = "UnaryExpression"

    TS_TYPE_ALIAS_DECLARATION = "TSTypeAliasDeclaration"
    TS_TYPE_PARAMETER = "TSTypeParameter"
    TS_TYPE_REFERENCE = "TSTypeReference"
    TS_QUALIFIED_NAME = "TSQualifiedName"
    TS_BOOLEAN_KEYWORD = "TSBooleanKeyword"
    TS_VOID_KEYWORD = "TSVoidKeyword"
    TS_NUMBER_KEYWORD = "TSNumberKeyword"
    TS_STRING_KEYWORD = "TSStringKeyword"
    TS_ANY_KEYWORD = "TSAnyKeyword"
    TS_UNION_TYPE = "TSUnionType"
    TS_INTERSECTION_TYPE = "TSIntersectionType"
    TS_ARRAY_TYPE = "TSArrayType"
    TS_TYPE_LITERAL = "TSTypeLiteral"
    TS_PROPERTY_SIGNATURE = "TSPropertySignature"

    def __str__(self) -> str:
        return self.value


@dataclass
class Node:
    """Base syntax tree node"""

    type: ClassVar[NodeType]
    range: tuple[int, int] = field(default=(0, 0), kw_only=True)


@dataclass
class TypeNode(Node):
    """Base type annotation node"""

    pass


@dataclass
class Expression(Node):
    """Base expression node"""

    pass


@dataclass
class Statement(Node):
    """Base statement node"""

    pass


# ====================
# Type Annotations
# ====================


@dataclass
class TSQualifiedName(Node):
    """Dotted type name such as ``ns.Type``"""

    type = NodeType.TS_QUALIFIED_NAME

    left: Union["Identifier", "TSQualifiedName"]
    right: "Identifier"


@dataclass
class TSTypeReference(TypeNode):
    """Named type with optional generic arguments"""

    type = NodeType.TS_TYPE_REFERENCE

    type_name: Union["Identifier", TSQualifiedName]
    type_arguments: Optional[list[TypeNode]] = None


@dataclass
class TSBooleanKeyword(TypeNode):
    type = NodeType.TS_BOOLEAN_KEYWORD


@dataclass
class TSVoidKeyword(TypeNode):
    type = NodeType.TS_VOID_KEYWORD


@dataclass
class TSNumberKeyword(TypeNode):
    type = NodeType.TS_NUMBER_KEYWORD


@dataclass
class TSStringKeyword(TypeNode):
    type = NodeType.TS_STRING_KEYWORD


@dataclass
class TSAnyKeyword(TypeNode):
    type = NodeType.TS_ANY_KEYWORD


@dataclass
class TSUnionType(TypeNode):
    type = NodeType.TS_UNION_TYPE

    types: list[TypeNode]


@dataclass
class TSIntersectionType(TypeNode):
    type = NodeType.TS_INTERSECTION_TYPE

    types: list[TypeNode]


@dataclass
class TSArrayType(TypeNode):
    type = NodeType.TS_ARRAY_TYPE

    element_type: TypeNode


@dataclass
class TSPropertySignature(Node):
    """Member of an object type literal"""

    type = NodeType.TS_PROPERTY_SIGNATURE

    key: "Identifier"
    type_annotation: Optional[TypeNode] = None
    optional: bool = False


@dataclass
class TSTypeLiteral(TypeNode):
    """Object type literal such as ``{ x: number, y: number }``"""

    type = NodeType.TS_TYPE_LITERAL

    members: list[TSPropertySignature]


# ====================
# Expressions
# ====================


@dataclass
class Identifier(Expression):
    """Name reference; parameters and declarators also carry an annotation"""

    type = NodeType.IDENTIFIER

    name: str
    type_annotation: Optional[TypeNode] = None


@dataclass
class Literal(Expression):
    """Literal value together with its source spelling"""

    type = NodeType.LITERAL

    value: Union[int, float, bool, str, None]
    raw: str


@dataclass
class CallExpression(Expression):
    type = NodeType.CALL_EXPRESSION

    callee: Expression
    arguments: list[Expression]


@dataclass
class MemberExpression(Expression):
    """Property access ``value.attr``"""

    type = NodeType.MEMBER_EXPRESSION

    value: Expression
    attr: Identifier


@dataclass
class BinaryExpression(Expression):
    type = NodeType.BINARY_EXPRESSION

    left: Expression
    operator: str
    right: Expression


@dataclass
class LogicalExpression(Expression):
    type = NodeType.LOGICAL_EXPRESSION

    left: Expression
    operator: str
    right: Expression


@dataclass
class UnaryExpression(Expression):
    type = NodeType.UNARY_EXPRESSION

    operator: str
    argument: Expression


# ====================
# Statements
# ====================


@dataclass
class Program(Node):
    """Root node holding the top-level statements"""

    type = NodeType.PROGRAM

    body: list[Statement]


@dataclass
class BlockStatement(Statement):
    type = NodeType.BLOCK_STATEMENT

    body: list[Statement]


@dataclass
class EmptyStatement(Statement):
    type = NodeType.EMPTY_STATEMENT


@dataclass
class ExpressionStatement(Statement):
    type = NodeType.EXPRESSION_STATEMENT

    expression: Expression


@dataclass
class FunctionDeclaration(Statement):
    type = NodeType.FUNCTION_DECLARATION

    id: Identifier
    params: list[Identifier]
    body: BlockStatement
    return_type: Optional[TypeNode] = None


@dataclass
class ReturnStatement(Statement):
    type = NodeType.RETURN_STATEMENT

    argument: Optional[Expression] = None


@dataclass
class VariableDeclarator(Node):
    type = NodeType.VARIABLE_DECLARATOR

    id: Identifier
    init: Optional[Expression] = None


@dataclass
class VariableDeclaration(Statement):
    """``let``/``const``/``var`` declaration, possibly ambient (``declare``)"""

    type = NodeType.VARIABLE_DECLARATION

    declarations: list[VariableDeclarator]
    kind: str = "let"
    declare: bool = False


@dataclass
class TSTypeParameter(Node):
    type = NodeType.TS_TYPE_PARAMETER

    name: str


@dataclass
class TSTypeAliasDeclaration(Statement):
    """``type Name<Params> = Annotation``"""

    type = NodeType.TS_TYPE_ALIAS_DECLARATION

    id: Identifier
    type_annotation: TypeNode
    type_parameters: list[TSTypeParameter] = field(default_factory=list)
