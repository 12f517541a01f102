"""Tests for the transpiler ast_parser module."""

import pytest

from ts2glsl.ast.nodes import (
    BinaryExpression,
    CallExpression,
    EmptyStatement,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    Literal,
    LogicalExpression,
    MemberExpression,
    NodeType,
    Program,
    ReturnStatement,
    TSArrayType,
    TSBooleanKeyword,
    TSNumberKeyword,
    TSQualifiedName,
    TSTypeAliasDeclaration,
    TSTypeLiteral,
    TSTypeReference,
    TSUnionType,
    TSVoidKeyword,
    UnaryExpression,
    VariableDeclaration,
)
from ts2glsl.transpiler.ast_parser import (
    LarkSourceParser,
    get_default_parser,
    parse_source,
)
from ts2glsl.transpiler.constants import PRELUDE
from ts2glsl.transpiler.core.interfaces import SourceParser
from ts2glsl.transpiler.errors import SourceParseError


@pytest.fixture(scope="module")
def parser():
    """Fixture providing a parser instance."""
    return LarkSourceParser()


def parse_return(parser, expression: str):
    """Parse ``return <expression>;`` and return the expression node."""
    program = parser.parse(f"return {expression};")
    return program.body[0].argument


class TestLarkSourceParser:
    """Tests for the LarkSourceParser class."""

    def test_implements_interface(self, parser):
        """Test that the parser satisfies the SourceParser protocol."""
        # Assert
        assert isinstance(parser, SourceParser)

    def test_default_parser_is_shared(self):
        """Test that the default parser is built once."""
        # Act & Assert
        assert get_default_parser() is get_default_parser()

    def test_empty_source(self, parser):
        """Test that empty text is an empty program."""
        # Act
        program = parser.parse("")

        # Assert
        assert isinstance(program, Program)
        assert program.body == []

    def test_comments_are_ignored(self, parser):
        """Test line and block comments."""
        # Act
        program = parser.parse("// header\n/* block\n comment */ return x; // tail")

        # Assert
        assert len(program.body) == 1
        assert isinstance(program.body[0], ReturnStatement)

    def test_prelude_parses(self, parser):
        """Test that the prelude is one alias per entry."""
        # Act
        program = parser.parse(PRELUDE)

        # Assert
        assert all(isinstance(s, TSTypeAliasDeclaration) for s in program.body)
        names = [s.id.name for s in program.body]
        assert names[:3] == ["vec2", "vec3", "vec4"]
        assert names[-2:] == ["Uniform", "Attribute"]
        assert len(names) == 13

    def test_generic_alias(self, parser):
        """Test a generic alias such as the qualifier wrappers."""
        # Act
        alias = parser.parse("type Uniform<X> = X").body[0]

        # Assert
        assert [p.name for p in alias.type_parameters] == ["X"]
        assert isinstance(alias.type_annotation, TSTypeReference)
        assert alias.type_annotation.type_name.name == "X"

    def test_object_type_alias(self, parser):
        """Test an object type literal alias."""
        # Act
        alias = parser.parse("type vec2 = { x: number, y?: number; }").body[0]

        # Assert
        literal = alias.type_annotation
        assert isinstance(literal, TSTypeLiteral)
        assert [m.key.name for m in literal.members] == ["x", "y"]
        assert [m.optional for m in literal.members] == [False, True]
        assert isinstance(literal.members[0].type_annotation, TSNumberKeyword)

    def test_ambient_declaration(self, parser):
        """Test a declare let with a qualifier annotation."""
        # Act
        decl = parser.parse("declare let time: Uniform<float>;").body[0]

        # Assert
        assert isinstance(decl, VariableDeclaration)
        assert decl.declare is True
        assert decl.kind == "let"
        declarator = decl.declarations[0]
        assert declarator.id.name == "time"
        assert declarator.id.range == (12, 16)
        annotation = declarator.id.type_annotation
        assert annotation.type_name.name == "Uniform"
        assert annotation.type_arguments[0].type_name.name == "float"

    def test_several_declarators(self, parser):
        """Test a const declaration with two declarators and an initializer."""
        # Act
        decl = parser.parse("const a: Uniform<float> = 1.0, b: Attribute<vec2>").body[0]

        # Assert
        assert decl.declare is False
        assert decl.kind == "const"
        assert [d.id.name for d in decl.declarations] == ["a", "b"]
        assert decl.declarations[0].init == Literal(1.0, "1.0", range=(26, 29))
        assert decl.declarations[1].init is None

    def test_function_declaration(self, parser):
        """Test parameters, return type and body."""
        # Act
        func = parser.parse(
            "function test(x: float, y): float { return x; }"
        ).body[0]

        # Assert
        assert isinstance(func, FunctionDeclaration)
        assert func.id.name == "test"
        assert [p.name for p in func.params] == ["x", "y"]
        assert func.params[0].type_annotation.type_name.name == "float"
        assert func.params[1].type_annotation is None
        assert func.return_type.type_name.name == "float"
        assert isinstance(func.body.body[0], ReturnStatement)

    def test_function_without_return_type(self, parser):
        """Test that an absent return type is kept as None."""
        # Act
        func = parser.parse("function main() {}").body[0]

        # Assert
        assert func.return_type is None
        assert func.params == []
        assert func.body.body == []

    def test_trailing_semicolon_is_empty_statement(self, parser):
        """Test that ``};`` after a function is a separate statement."""
        # Act
        program = parser.parse("function f(): void {};")

        # Assert
        assert isinstance(program.body[0], FunctionDeclaration)
        assert isinstance(program.body[0].return_type, TSVoidKeyword)
        assert isinstance(program.body[1], EmptyStatement)

    def test_bare_return(self, parser):
        """Test a return without expression."""
        # Act
        stmt = parser.parse("return;").body[0]

        # Assert
        assert stmt == ReturnStatement(None, range=stmt.range)

    def test_expression_statement(self, parser):
        """Test a call used as a statement."""
        # Act
        stmt = parser.parse("discard();").body[0]

        # Assert
        assert isinstance(stmt, ExpressionStatement)
        assert isinstance(stmt.expression, CallExpression)

    @pytest.mark.parametrize(
        "source, kind",
        [
            ("float | int", TSUnionType),
            ("boolean", TSBooleanKeyword),
            ("void", TSVoidKeyword),
            ("number", TSNumberKeyword),
            ("float[]", TSArrayType),
            ("{ x: number }", TSTypeLiteral),
            ("(float)", TSTypeReference),
        ],
    )
    def test_annotation_kinds(self, parser, source, kind):
        """Test the node kind produced for each annotation form."""
        # Act
        decl = parser.parse(f"let v: {source};").body[0]

        # Assert
        assert isinstance(decl.declarations[0].id.type_annotation, kind)

    def test_qualified_type_name(self, parser):
        """Test a dotted type reference."""
        # Act
        decl = parser.parse("let v: glsl.types.float;").body[0]

        # Assert
        type_name = decl.declarations[0].id.type_annotation.type_name
        assert isinstance(type_name, TSQualifiedName)
        assert type_name.right.name == "float"
        assert type_name.left.left.name == "glsl"

    def test_syntax_error(self, parser):
        """Test that unsupported syntax raises a transpiler error."""
        # Act & Assert
        with pytest.raises(SourceParseError) as excinfo:
            parser.parse("function {")
        assert excinfo.value.line == 1

    def test_parse_source_uses_default_parser(self):
        """Test the module-level convenience function."""
        # Act
        program = parse_source("return 1;")

        # Assert
        assert program.body[0].argument.raw == "1"


class TestExpressionParsing:
    """Tests for expression nodes built by the parser."""

    def test_precedence_is_encoded_in_nesting(self, parser):
        """Test that division binds tighter than addition."""
        # Act
        expr = parse_return(parser, "x + y / time")

        # Assert
        assert isinstance(expr, BinaryExpression)
        assert expr.operator == "+"
        assert expr.left.name == "x"
        assert isinstance(expr.right, BinaryExpression)
        assert expr.right.operator == "/"

    def test_parentheses_change_nesting(self, parser):
        """Test that grouping produces a nested left operand."""
        # Act
        expr = parse_return(parser, "(a + b) * c")

        # Assert
        assert expr.operator == "*"
        assert expr.left.operator == "+"

    def test_left_associativity(self, parser):
        """Test that a - b - c nests on the left."""
        # Act
        expr = parse_return(parser, "a - b - c")

        # Assert
        assert expr.left.operator == "-"
        assert expr.right.name == "c"

    @pytest.mark.parametrize("op", ["==", "===", "!=", "!==", "<", "<=", ">", ">="])
    def test_comparison_operators(self, parser, op):
        """Test that comparisons are binary expressions."""
        # Act
        expr = parse_return(parser, f"a {op} b")

        # Assert
        assert isinstance(expr, BinaryExpression)
        assert expr.operator == op

    def test_logical_operators(self, parser):
        """Test that && and || build logical expressions."""
        # Act
        expr = parse_return(parser, "a || b && c")

        # Assert
        assert isinstance(expr, LogicalExpression)
        assert expr.operator == "||"
        assert expr.right.operator == "&&"

    def test_unary_operators(self, parser):
        """Test negation and logical not."""
        # Act
        expr = parse_return(parser, "-a * !b")

        # Assert
        assert isinstance(expr.left, UnaryExpression)
        assert expr.left.operator == "-"
        assert expr.right.operator == "!"

    def test_call_and_member(self, parser):
        """Test calls with identifier and member callees."""
        # Act
        expr = parse_return(parser, "mix(a, Math.sin(t), 0.5)")

        # Assert
        assert isinstance(expr, CallExpression)
        assert expr.callee == Identifier("mix", range=expr.callee.range)
        assert len(expr.arguments) == 3
        inner = expr.arguments[1]
        assert isinstance(inner.callee, MemberExpression)
        assert inner.callee.value.name == "Math"
        assert inner.callee.attr.name == "sin"

    @pytest.mark.parametrize(
        "source, value",
        [
            ("1", 1),
            ("1.50", 1.5),
            ("1e3", 1000.0),
            (".5", 0.5),
            ("'a'", "a"),
            ('"b"', "b"),
            ("true", True),
            ("false", False),
            ("null", None),
        ],
    )
    def test_literals_keep_raw_text(self, parser, source, value):
        """Test literal values and their raw spelling."""
        # Act
        expr = parse_return(parser, source)

        # Assert
        assert isinstance(expr, Literal)
        assert expr.value == value
        assert expr.raw == source

    def test_node_ranges(self, parser):
        """Test that expression ranges cover their source text."""
        # Arrange
        text = "return a + b;"

        # Act
        expr = parser.parse(text).body[0].argument

        # Assert
        start, end = expr.range
        assert text[start:end] == "a + b"
        assert expr.type == NodeType.BINARY_EXPRESSION
