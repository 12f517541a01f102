"""
Source parsing for the shader transpiler.

This module binds the ``SourceParser`` interface to a Lark LALR grammar for the
supported host-language subset and builds the syntax tree model from the parse tree.
"""

from pathlib import Path
from typing import Any, Optional

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput
from loguru import logger

from ts2glsl.ast.nodes import (
    BinaryExpression,
    BlockStatement,
    CallExpression,
    EmptyStatement,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    Literal,
    LogicalExpression,
    MemberExpression,
    Program,
    ReturnStatement,
    TSAnyKeyword,
    TSArrayType,
    TSBooleanKeyword,
    TSIntersectionType,
    TSNumberKeyword,
    TSPropertySignature,
    TSQualifiedName,
    TSStringKeyword,
    TSTypeAliasDeclaration,
    TSTypeLiteral,
    TSTypeParameter,
    TSTypeReference,
    TSUnionType,
    TSVoidKeyword,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
)
from ts2glsl.transpiler.errors import SourceParseError

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()


def _range(meta: Any) -> tuple[int, int]:
    if getattr(meta, "empty", True):
        return (0, 0)
    return (meta.start_pos, meta.end_pos)


def _token_range(token: Token) -> tuple[int, int]:
    return (token.start_pos or 0, token.end_pos or 0)


def _identifier(token: Token, type_annotation: Any = None) -> Identifier:
    return Identifier(str(token), type_annotation, range=_token_range(token))


def _number_value(raw: str) -> int | float:
    if raw.isdigit():
        return int(raw)
    return float(raw)


@v_args(meta=True)
class SyntaxTreeBuilder(Transformer):
    """Transform a Lark parse tree into syntax tree nodes."""

    # ---- Statements ----

    def start(self, meta, children):
        return Program(list(children), range=_range(meta))

    def empty_statement(self, meta, children):
        return EmptyStatement(range=_range(meta))

    def block(self, meta, children):
        return BlockStatement(list(children), range=_range(meta))

    def expression_statement(self, meta, children):
        return ExpressionStatement(children[0], range=_range(meta))

    def return_statement(self, meta, children):
        return ReturnStatement(children[0], range=_range(meta))

    def function_declaration(self, meta, children):
        name, params, return_type, body = children
        return FunctionDeclaration(
            id=_identifier(name),
            params=params or [],
            body=body,
            return_type=return_type,
            range=_range(meta),
        )

    def parameters(self, meta, children):
        return list(children)

    def parameter(self, meta, children):
        name, annotation = children
        return Identifier(str(name), annotation, range=_range(meta))

    def variable_declaration(self, meta, children):
        declare = False
        kind = "let"
        declarations = []
        for child in children:
            if isinstance(child, Token):
                if child.type == "DECLARE":
                    declare = True
                else:
                    kind = str(child)
            else:
                declarations.append(child)
        return VariableDeclaration(
            declarations, kind=kind, declare=declare, range=_range(meta)
        )

    def declarator(self, meta, children):
        name, annotation, init = children
        return VariableDeclarator(
            _identifier(name, annotation), init, range=_range(meta)
        )

    def type_alias(self, meta, children):
        name, type_parameters, annotation = children
        return TSTypeAliasDeclaration(
            id=_identifier(name),
            type_annotation=annotation,
            type_parameters=type_parameters or [],
            range=_range(meta),
        )

    def type_parameters(self, meta, children):
        return list(children)

    def type_parameter(self, meta, children):
        return TSTypeParameter(str(children[0]), range=_range(meta))

    # ---- Types ----

    def type_reference(self, meta, children):
        type_name, type_arguments = children
        return TSTypeReference(type_name, type_arguments, range=_range(meta))

    def entity_name(self, meta, children):
        name: Identifier | TSQualifiedName = _identifier(children[0])
        for token in children[1:]:
            name = TSQualifiedName(
                name,
                _identifier(token),
                range=(name.range[0], _token_range(token)[1]),
            )
        return name

    def type_arguments(self, meta, children):
        return list(children)

    def union_type(self, meta, children):
        return TSUnionType(list(children), range=_range(meta))

    def intersection_type(self, meta, children):
        return TSIntersectionType(list(children), range=_range(meta))

    def array_type(self, meta, children):
        return TSArrayType(children[0], range=_range(meta))

    def boolean_keyword(self, meta, children):
        return TSBooleanKeyword(range=_range(meta))

    def void_keyword(self, meta, children):
        return TSVoidKeyword(range=_range(meta))

    def number_keyword(self, meta, children):
        return TSNumberKeyword(range=_range(meta))

    def string_keyword(self, meta, children):
        return TSStringKeyword(range=_range(meta))

    def any_keyword(self, meta, children):
        return TSAnyKeyword(range=_range(meta))

    def type_literal(self, meta, children):
        return TSTypeLiteral(children[0] or [], range=_range(meta))

    def type_members(self, meta, children):
        return list(children)

    def type_member(self, meta, children):
        name = children[0]
        optional = any(
            isinstance(child, Token) and child.type == "OPTIONAL" for child in children
        )
        return TSPropertySignature(
            _identifier(name), children[-1], optional, range=_range(meta)
        )

    # ---- Expressions ----

    def identifier(self, meta, children):
        return _identifier(children[0])

    def number_literal(self, meta, children):
        raw = str(children[0])
        return Literal(_number_value(raw), raw, range=_range(meta))

    def string_literal(self, meta, children):
        raw = str(children[0])
        return Literal(raw[1:-1], raw, range=_range(meta))

    def boolean_literal(self, meta, children):
        raw = str(children[0])
        return Literal(raw == "true", raw, range=_range(meta))

    def null_literal(self, meta, children):
        return Literal(None, "null", range=_range(meta))

    def binary(self, meta, children):
        left, op, right = children
        return BinaryExpression(left, str(op), right, range=_range(meta))

    def logical(self, meta, children):
        left, op, right = children
        return LogicalExpression(left, str(op), right, range=_range(meta))

    def unary(self, meta, children):
        op, argument = children
        return UnaryExpression(str(op), argument, range=_range(meta))

    def call(self, meta, children):
        callee, arguments = children
        return CallExpression(callee, arguments or [], range=_range(meta))

    def arguments(self, meta, children):
        return list(children)

    def member(self, meta, children):
        value, attr = children
        return MemberExpression(value, _identifier(attr), range=_range(meta))


class LarkSourceParser:
    """Source parser backed by the bundled Lark grammar.

    The compiled parser is read-only after construction, so one instance can be
    shared by every compilation.
    """

    def __init__(self, grammar: Optional[str] = None):
        """Build the LALR parser.

        Args:
            grammar: Alternative grammar text; the bundled grammar by default
        """
        self._lark = Lark(
            grammar or _GRAMMAR_SRC,
            parser="lalr",
            propagate_positions=True,
            maybe_placeholders=True,
        )

    def parse(self, text: str) -> Program:
        """Parse host-language source text into a syntax tree.

        Args:
            text: Source text

        Returns:
            Program node

        Raises:
            SourceParseError: If the text is outside the supported subset
        """
        logger.debug("Parsing source")
        try:
            tree = self._lark.parse(text)
        except UnexpectedInput as e:
            raise SourceParseError(
                f"Unexpected input: {e.__class__.__name__}",
                getattr(e, "line", None),
                getattr(e, "column", None),
            ) from e
        program = SyntaxTreeBuilder().transform(tree)
        logger.debug(f"Parsing complete: {len(program.body)} top-level statements")
        return program


_default_parser: Optional[LarkSourceParser] = None


def get_default_parser() -> LarkSourceParser:
    """Return the shared parser instance, building it on first use."""
    global _default_parser
    if _default_parser is None:
        _default_parser = LarkSourceParser()
    return _default_parser


def parse_source(text: str) -> Program:
    """Parse host-language source text with the default parser.

    Args:
        text: Source text

    Returns:
        Program node
    """
    return get_default_parser().parse(text)
